"""Python value shapes derived from deep-parsed type signatures."""

from __future__ import annotations

from typing import Any, Optional

from .signature_nodes import (
    ArrayType,
    BytesType,
    DictType,
    MaybeType,
    OpaqueType,
    PairType,
    Primitive,
    PrimitiveKind,
    TupleType,
    TypeNode,
)
from .signature_parser import parse


class VariantShape:
    """Marker for a boxed value whose inner type is only known at runtime."""

    def __repr__(self) -> str:
        return "VariantShape"


def value_shape(node: TypeNode, *, unpack_variants: bool = False) -> Any:
    """Return the Python type a value of ``node`` takes.

    With ``unpack_variants`` boxed values are reported as ``Any`` instead of the
    :class:`VariantShape` marker, matching recursively unpacked settings values.
    """
    if isinstance(node, Primitive):
        return _primitive_shape(node.kind, unpack_variants=unpack_variants)
    if isinstance(node, BytesType):
        return bytes
    if isinstance(node, ArrayType):
        return list[value_shape(node.element, unpack_variants=unpack_variants)]  # type: ignore[misc]
    if isinstance(node, MaybeType):
        return Optional[value_shape(node.inner, unpack_variants=unpack_variants)]
    if isinstance(node, TupleType):
        if not node.elements:
            return tuple[()]
        element_shapes = tuple(
            value_shape(element, unpack_variants=unpack_variants) for element in node.elements
        )
        return tuple[element_shapes]  # type: ignore[valid-type]
    if isinstance(node, DictType):
        key_shape = _primitive_shape(node.key.kind, unpack_variants=unpack_variants)
        return dict[key_shape, value_shape(node.value, unpack_variants=unpack_variants)]  # type: ignore[valid-type]
    if isinstance(node, PairType):
        key_shape = _primitive_shape(node.key.kind, unpack_variants=unpack_variants)
        return tuple[key_shape, value_shape(node.value, unpack_variants=unpack_variants)]  # type: ignore[valid-type]
    if isinstance(node, OpaqueType):
        raise ValueError(f"Cannot derive a value shape from unresolved payload '{node.signature}'.")
    raise TypeError(f"Unsupported type node: {node!r}")


def signature_value_shape(signature: str, *, unpack_variants: bool = False) -> Any:
    """Deep-parse ``signature`` and return its Python value shape."""
    return value_shape(parse(signature), unpack_variants=unpack_variants)


def _primitive_shape(kind: PrimitiveKind, *, unpack_variants: bool) -> Any:
    if kind is PrimitiveKind.BOOLEAN:
        return bool
    if kind is PrimitiveKind.DOUBLE:
        return float
    if kind.is_integer:
        return int
    if kind.is_string_like:
        return str
    if kind is PrimitiveKind.VARIANT:
        return Any if unpack_variants else VariantShape
    return Any
