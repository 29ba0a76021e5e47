"""Type signature exports."""

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
from .signature_parser import GrammarError, is_valid_signature, parse, parse_shallow
from .value_shapes import VariantShape, signature_value_shape, value_shape

__all__ = [
    "ArrayType",
    "BytesType",
    "DictType",
    "MaybeType",
    "OpaqueType",
    "PairType",
    "Primitive",
    "PrimitiveKind",
    "TupleType",
    "TypeNode",
    "GrammarError",
    "is_valid_signature",
    "parse",
    "parse_shallow",
    "VariantShape",
    "signature_value_shape",
    "value_shape",
]
