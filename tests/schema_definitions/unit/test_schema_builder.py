"""Schema builder tests."""

from __future__ import annotations

from typing import Literal

import pytest
from gschema_builder.schema_definitions import (
    DefinitionError,
    DuplicateKeyError,
    EnumKey,
    Enumeration,
    FlagSet,
    FlagsKey,
    KeyRange,
    SchemaBuilder,
    TypedKey,
)
from gschema_builder.type_signatures import GrammarError, VariantShape
from gschema_builder.variant_literals import LiteralError


def _mode() -> Enumeration:
    return Enumeration("org.example.Mode", ["light", "dark"])


def test_typed_key_records_signature_and_default_literal() -> None:
    builder = SchemaBuilder.create("org.example.app").key("count", "i", default=5)

    assert builder.keys == (TypedKey(name="count", signature="i", default_literal="5"),)
    assert builder.keys[0].type_attribute == ("type", "i")


def test_create_keeps_path_and_domain() -> None:
    builder = SchemaBuilder.create("org.example.app", "/org/example/app/", "app")

    assert builder.id == "org.example.app"
    assert builder.path == "/org/example/app/"
    assert builder.gettext_domain == "app"
    assert builder.keys == ()


def test_adding_a_key_leaves_the_receiver_unchanged() -> None:
    base = SchemaBuilder.create("org.example.app")
    extended = base.key("count", "i", default=1)

    assert base.keys == ()
    assert extended.document.key_names == ("count",)


def test_branches_from_one_builder_do_not_interfere() -> None:
    base = SchemaBuilder.create("org.example.app").key("shared", "b", default=True)

    left = base.key("left", "s", default="l")
    right = base.key("right", "s", default="r")

    assert left.document.key_names == ("shared", "left")
    assert right.document.key_names == ("shared", "right")
    assert base.document.key_names == ("shared",)


def test_copy_is_equal_but_independent() -> None:
    base = SchemaBuilder.create("org.example.app").key("shared", "b", default=True)
    copied = base.copy()

    assert copied == base
    assert copied is not base
    assert copied.key("more", "i", default=0).document.key_names == ("shared", "more")
    assert base.document.key_names == ("shared",)


def test_keys_keep_insertion_order() -> None:
    builder = (
        SchemaBuilder.create("org.example.app")
        .key("zeta", "i", default=1)
        .key("alpha", "i", default=2)
        .key("mid", "i", default=3)
    )

    assert builder.document.key_names == ("zeta", "alpha", "mid")


def test_duplicate_key_names_are_rejected_across_key_kinds() -> None:
    builder = SchemaBuilder.create("org.example.app").key("mode", "s", default="x")

    with pytest.raises(DuplicateKeyError) as exc_info:
        builder.key("mode", _mode(), default="dark")

    assert exc_info.value.name == "mode"
    assert str(exc_info.value) == 'duplicate key: "mode"'


def test_duplicate_typed_key_is_rejected() -> None:
    builder = SchemaBuilder.create("org.example.app").key("count", "i", default=1)

    with pytest.raises(DuplicateKeyError):
        builder.key("count", "u", default=2)


def test_malformed_signature_becomes_definition_error() -> None:
    builder = SchemaBuilder.create("org.example.app")

    with pytest.raises(DefinitionError, match='invalid key "broken"') as exc_info:
        builder.key("broken", "a{vv}", default={})

    assert isinstance(exc_info.value.__cause__, GrammarError)


def test_unprintable_default_becomes_definition_error() -> None:
    builder = SchemaBuilder.create("org.example.app")

    with pytest.raises(DefinitionError) as exc_info:
        builder.key("flag", "b", default="yes")

    assert isinstance(exc_info.value.__cause__, LiteralError)


def test_double_default_too_large_for_a_double_becomes_definition_error() -> None:
    builder = SchemaBuilder.create("org.example.app")

    with pytest.raises(DefinitionError, match='invalid key "zoom"') as exc_info:
        builder.key("zoom", "d", default=10**400)

    assert isinstance(exc_info.value.__cause__, LiteralError)


def test_enum_key_records_the_referenced_enumeration_once() -> None:
    mode = _mode()
    builder = (
        SchemaBuilder.create("org.example.app")
        .key("mode", mode, default="dark")
        .key("fallback-mode", mode, default="light")
    )

    assert builder.enumerations == (mode,)
    assert builder.keys[0] == EnumKey(name="mode", enumeration=mode, default="dark")
    assert builder.keys[0].type_attribute == ("enum", "org.example.Mode")
    assert builder.keys[0].default_literal == "'dark'"


def test_flags_key_records_the_flag_set_and_nick_list() -> None:
    features = FlagSet("org.example.Features", ["search", "sync"])
    builder = SchemaBuilder.create("org.example.app").key(
        "features", features, default=["sync"], summary="Enabled features"
    )

    key = builder.keys[0]
    assert isinstance(key, FlagsKey)
    assert key.default == ("sync",)
    assert key.default_literal == "['sync']"
    assert key.summary == "Enabled features"
    assert builder.flag_sets == (features,)


@pytest.mark.parametrize("default", ["purple", None, 1])
def test_unknown_enum_nick_is_rejected(default: object) -> None:
    with pytest.raises(DefinitionError, match="unknown nick"):
        SchemaBuilder.create("org.example.app").key("mode", _mode(), default=default)


def test_flags_default_must_be_a_list_of_known_nicks() -> None:
    features = FlagSet("org.example.Features", ["search", "sync"])
    builder = SchemaBuilder.create("org.example.app")

    with pytest.raises(DefinitionError, match="list of nicks"):
        builder.key("features", features, default="search")
    with pytest.raises(DefinitionError, match="unknown nick"):
        builder.key("features", features, default=["search", "print"])


def test_range_is_only_accepted_on_typed_keys() -> None:
    builder = SchemaBuilder.create("org.example.app")

    ranged = builder.key("zoom", "d", default=1.0, range=KeyRange(min=0.5, max=4))
    assert ranged.keys[0].range == KeyRange(min=0.5, max=4)

    with pytest.raises(DefinitionError, match="range"):
        builder.key("mode", _mode(), default="dark", range=KeyRange(min=0))


@pytest.mark.parametrize("type_", [5, None, ["s"]])
def test_unsupported_key_type_is_rejected(type_: object) -> None:
    builder = SchemaBuilder.create("org.example.app")

    with pytest.raises(DefinitionError, match="unsupported type"):
        builder.key("odd", type_, default=1)  # type: ignore[arg-type]


def test_empty_names_are_rejected() -> None:
    with pytest.raises(DefinitionError):
        SchemaBuilder.create("")
    with pytest.raises(DefinitionError):
        SchemaBuilder.create("org.example.app").key("", "i", default=1)


def test_settings_signatures_and_value_shapes_cover_every_key_kind() -> None:
    builder = (
        SchemaBuilder.create("org.example.app")
        .key("geometry", "a{sv}", default={})
        .key("mode", _mode(), default="dark")
        .key("features", FlagSet("org.example.Features", ["search", "sync"]), default=[])
    )

    assert builder.settings_signatures() == {
        "geometry": "a{sv}",
        "mode": "s",
        "features": "as",
    }
    assert builder.value_shapes() == {
        "geometry": dict[str, VariantShape],
        "mode": Literal["light", "dark"],
        "features": list[Literal["search", "sync"]],
    }
