"""Value shape derivation tests."""

from __future__ import annotations

from typing import Any, Optional, get_args

import pytest
from gschema_builder.type_signatures import (
    OpaqueType,
    VariantShape,
    signature_value_shape,
    value_shape,
)
from gschema_builder.variant_literals import LiteralError, Variant, format_literal


def test_primitive_shapes_follow_python_types() -> None:
    assert signature_value_shape("b") is bool
    assert signature_value_shape("t") is int
    assert signature_value_shape("h") is int
    assert signature_value_shape("d") is float
    assert signature_value_shape("o") is str
    assert signature_value_shape("?") is Any


def test_container_shapes_nest_python_generics() -> None:
    assert signature_value_shape("ay") is bytes
    assert signature_value_shape("as") == list[str]
    assert signature_value_shape("mi") == Optional[int]
    assert signature_value_shape("()") == tuple[()]
    assert signature_value_shape("(is)") == tuple[int, str]
    assert signature_value_shape("{sv}") == tuple[str, VariantShape]


def test_variants_are_markers_unless_unpacked() -> None:
    assert signature_value_shape("a{sv}") == dict[str, VariantShape]
    assert signature_value_shape("a{sv}", unpack_variants=True) == dict[str, Any]


def test_nested_shape_matches_the_literal_structure() -> None:
    shape = signature_value_shape("a(sa{sv})")

    (element_shape,) = get_args(shape)
    assert get_args(element_shape) == (str, dict[str, VariantShape])

    default = [("name", {"size": Variant("i", 3)})]
    assert format_literal("a(sa{sv})", default) == "[('name', {'size': <3>})]"
    with pytest.raises(LiteralError):
        format_literal("a(sa{sv})", [("name",)])


def test_unresolved_payload_has_no_shape() -> None:
    with pytest.raises(ValueError, match="unresolved payload"):
        value_shape(OpaqueType("i"))
