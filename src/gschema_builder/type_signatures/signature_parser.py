"""Recursive-descent parser for compact type signatures."""

from __future__ import annotations

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

_PRIMITIVES: dict[str, PrimitiveKind] = {kind.value: kind for kind in PrimitiveKind}


class GrammarError(ValueError):
    """Raised when a type signature does not follow the grammar."""

    def __init__(self, signature: str, position: int, reason: str) -> None:
        self.signature = signature
        self.position = position
        self.remainder = signature[position:]
        super().__init__(
            f"Invalid type signature '{signature}': {reason} (remainder: '{self.remainder}')"
        )


def parse(signature: str) -> TypeNode:
    """Resolve a signature into a fully nested type tree."""
    return _SignatureCursor(signature, resolve_nested=True).parse_root()


def parse_shallow(signature: str) -> TypeNode:
    """Resolve only the top-level kind of a signature.

    Nested payloads are still scanned with the full grammar, so a shallow parse
    fails exactly where a deep parse fails, but they are returned as
    :class:`OpaqueType` nodes carrying their own signature text.
    """
    return _SignatureCursor(signature, resolve_nested=False).parse_root()


def is_valid_signature(signature: str) -> bool:
    """Return True when the whole signature parses."""
    try:
        parse_shallow(signature)
    except GrammarError:
        return False
    return True


class _SignatureCursor:
    def __init__(self, signature: str, *, resolve_nested: bool) -> None:
        if not isinstance(signature, str):
            raise TypeError(f"Type signature must be a string, got {type(signature).__name__}.")
        self._signature = signature
        self._position = 0
        self._resolve_nested = resolve_nested

    def parse_root(self) -> TypeNode:
        node = self._parse_type()
        if self._position != len(self._signature):
            raise self._error("unexpected trailing input")
        return node

    def _peek(self, offset: int = 0) -> str:
        index = self._position + offset
        return self._signature[index] if index < len(self._signature) else ""

    def _advance(self, count: int = 1) -> None:
        self._position += count

    def _expect(self, token: str) -> None:
        current = self._peek()
        if current != token:
            reason = "unexpected end of signature" if not current else "unexpected character"
            raise self._error(f"{reason}, expected '{token}'")
        self._advance()

    def _error(self, reason: str) -> GrammarError:
        return GrammarError(self._signature, self._position, reason)

    def _parse_nested(self) -> TypeNode:
        start = self._position
        node = self._parse_type()
        if self._resolve_nested:
            return node
        return OpaqueType(self._signature[start : self._position])

    def _parse_type(self) -> TypeNode:
        current = self._peek()
        if not current:
            raise self._error("unexpected end of signature")
        if current in _PRIMITIVES:
            self._advance()
            return Primitive(_PRIMITIVES[current])
        if current == "(":
            return self._parse_tuple()
        if current == "a" and self._peek(1) == "{":
            return self._parse_dict()
        if current == "{":
            return self._parse_pair()
        if current == "a" and self._peek(1) == "y":
            self._advance(2)
            return BytesType()
        if current == "m":
            self._advance()
            return MaybeType(self._parse_nested())
        if current == "a":
            self._advance()
            return ArrayType(self._parse_nested())
        raise self._error("unknown type code")

    def _parse_tuple(self) -> TupleType:
        self._advance()
        elements: list[TypeNode] = []
        while self._peek() != ")":
            if not self._peek():
                raise self._error("unterminated tuple, expected ')'")
            elements.append(self._parse_nested())
        self._advance()
        return TupleType(tuple(elements))

    def _parse_dict(self) -> DictType:
        self._advance(2)
        key, value = self._parse_entry()
        return DictType(key=key, value=value)

    def _parse_pair(self) -> PairType:
        self._advance()
        key, value = self._parse_entry()
        return PairType(key=key, value=value)

    def _parse_entry(self) -> tuple[Primitive, TypeNode]:
        key_code = self._peek()
        if not key_code:
            raise self._error("unexpected end of signature, expected a dictionary key")
        kind = _PRIMITIVES.get(key_code)
        if kind is None or not kind.is_dict_key:
            raise self._error("dictionary key must be a basic scalar type")
        self._advance()
        value = self._parse_nested()
        self._expect("}")
        return Primitive(kind), value
