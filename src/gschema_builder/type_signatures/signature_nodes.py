"""Type signature entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PrimitiveKind(str, Enum):
    """Single-character basic and special type codes."""

    BOOLEAN = "b"
    BYTE = "y"
    INT16 = "n"
    UINT16 = "q"
    INT32 = "i"
    UINT32 = "u"
    INT64 = "x"
    UINT64 = "t"
    DOUBLE = "d"
    STRING = "s"
    OBJECT_PATH = "o"
    SIGNATURE = "g"
    VARIANT = "v"
    HANDLE = "h"
    UNKNOWN = "?"

    @property
    def is_dict_key(self) -> bool:
        """Return True when the kind may index a dictionary."""
        return self in _DICT_KEY_KINDS

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_KINDS

    @property
    def is_string_like(self) -> bool:
        return self in _STRING_KINDS


_STRING_KINDS = frozenset(
    {PrimitiveKind.STRING, PrimitiveKind.OBJECT_PATH, PrimitiveKind.SIGNATURE}
)
_INTEGER_KINDS = frozenset(
    {
        PrimitiveKind.BYTE,
        PrimitiveKind.INT16,
        PrimitiveKind.UINT16,
        PrimitiveKind.INT32,
        PrimitiveKind.UINT32,
        PrimitiveKind.INT64,
        PrimitiveKind.UINT64,
        PrimitiveKind.HANDLE,
    }
)
_DICT_KEY_KINDS = (
    _STRING_KINDS | (_INTEGER_KINDS - {PrimitiveKind.HANDLE}) | {PrimitiveKind.DOUBLE}
)


@dataclass(frozen=True, slots=True)
class Primitive:
    """Single-character primitive type."""

    kind: PrimitiveKind

    @property
    def signature(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class BytesType:
    """Byte string, spelled ``ay`` and kept apart from an array of bytes."""

    @property
    def signature(self) -> str:
        return "ay"


@dataclass(frozen=True, slots=True)
class ArrayType:
    """Homogeneous array of one element type."""

    element: TypeNode

    @property
    def signature(self) -> str:
        return f"a{self.element.signature}"


@dataclass(frozen=True, slots=True)
class MaybeType:
    """Nullable wrapper around one inner type."""

    inner: TypeNode

    @property
    def signature(self) -> str:
        return f"m{self.inner.signature}"


@dataclass(frozen=True, slots=True)
class TupleType:
    """Fixed-arity ordered tuple."""

    elements: tuple[TypeNode, ...]

    @property
    def signature(self) -> str:
        return "(" + "".join(element.signature for element in self.elements) + ")"


@dataclass(frozen=True, slots=True)
class DictType:
    """Array of dictionary entries keyed by a scalar."""

    key: Primitive
    value: TypeNode

    @property
    def signature(self) -> str:
        return f"a{{{self.key.signature}{self.value.signature}}}"


@dataclass(frozen=True, slots=True)
class PairType:
    """Bare dictionary entry, not wrapped in an array."""

    key: Primitive
    value: TypeNode

    @property
    def signature(self) -> str:
        return f"{{{self.key.signature}{self.value.signature}}}"


@dataclass(frozen=True, slots=True)
class OpaqueType:
    """Nested payload left unresolved by a shallow parse."""

    signature: str


TypeNode = (
    Primitive | BytesType | ArrayType | MaybeType | TupleType | DictType | PairType | OpaqueType
)
