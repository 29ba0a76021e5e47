"""GVariant text-format printer for default values."""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping, Sequence

from gschema_builder.type_signatures.signature_nodes import (
    ArrayType,
    BytesType,
    DictType,
    MaybeType,
    PairType,
    Primitive,
    PrimitiveKind,
    TupleType,
)
from gschema_builder.type_signatures.signature_parser import parse_shallow

from .variant_values import Variant

_ANNOTATED_KINDS: dict[PrimitiveKind, str] = {
    PrimitiveKind.BYTE: "byte",
    PrimitiveKind.INT16: "int16",
    PrimitiveKind.UINT16: "uint16",
    PrimitiveKind.UINT32: "uint32",
    PrimitiveKind.INT64: "int64",
    PrimitiveKind.UINT64: "uint64",
    PrimitiveKind.HANDLE: "handle",
    PrimitiveKind.OBJECT_PATH: "objectpath",
    PrimitiveKind.SIGNATURE: "signature",
}

_STRING_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}

# control, format, unassigned and surrogate code points are escaped
_UNPRINTABLE_CATEGORIES = frozenset({"Cc", "Cf", "Cn", "Cs"})

_BYTESTRING_ESCAPES = {
    0x08: "\\b",
    0x09: "\\t",
    0x0A: "\\n",
    0x0B: "\\v",
    0x0C: "\\f",
    0x0D: "\\r",
    0x22: '\\"',
    0x5C: "\\\\",
}


class LiteralError(ValueError):
    """Raised when a value cannot be printed for its declared signature."""


def format_literal(signature: str, value: object) -> str:
    """Return the text form of ``value`` typed as ``signature``.

    The output matches ``g_variant_print(variant, FALSE)``: no type annotations at
    the top level, annotated contents inside boxed variants.
    """
    return _print_value(signature, value, annotate=False)


def _print_value(signature: str, value: object, *, annotate: bool) -> str:
    node = parse_shallow(signature)
    if isinstance(node, Primitive):
        return _print_primitive(node.kind, value, annotate=annotate)
    if isinstance(node, BytesType):
        return _print_bytes(value, annotate=annotate)
    if isinstance(node, DictType):
        return _print_dict(node, value, annotate=annotate)
    if isinstance(node, ArrayType):
        return _print_array(node, value, annotate=annotate)
    if isinstance(node, MaybeType):
        return _print_maybe(node, value, annotate=annotate)
    if isinstance(node, TupleType):
        return _print_tuple(node, value, annotate=annotate)
    if isinstance(node, PairType):
        return _print_pair(node, value, annotate=annotate)
    raise LiteralError(f"Unsupported signature for a literal: '{signature}'.")


def _print_primitive(kind: PrimitiveKind, value: object, *, annotate: bool) -> str:
    if kind is PrimitiveKind.BOOLEAN:
        if not isinstance(value, bool):
            raise LiteralError(f"Expected a boolean, got {value!r}.")
        return "true" if value else "false"
    if kind is PrimitiveKind.VARIANT:
        if not isinstance(value, Variant):
            raise LiteralError(f"Expected a Variant for signature 'v', got {value!r}.")
        return f"<{_print_value(value.signature, value.value, annotate=True)}>"
    if kind is PrimitiveKind.UNKNOWN:
        raise LiteralError("Cannot print a value of the indefinite type '?'.")
    if kind is PrimitiveKind.DOUBLE:
        text = _format_double(value)
    elif kind.is_integer:
        number = _require_integer(value)
        text = f"0x{number:02x}" if kind is PrimitiveKind.BYTE else str(number)
    else:
        if not isinstance(value, str):
            raise LiteralError(f"Expected a string for signature '{kind.value}', got {value!r}.")
        text = _quote_string(value)

    if annotate and kind in _ANNOTATED_KINDS:
        return f"{_ANNOTATED_KINDS[kind]} {text}"
    return text


def _require_integer(value: object) -> int:
    if isinstance(value, bool):
        raise LiteralError(f"Expected an integer, got {value!r}.")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise LiteralError(f"Expected an integer, got {value!r}.")


def _format_double(value: object) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LiteralError(f"Expected a number, got {value!r}.")
    try:
        number = float(value)
    except OverflowError as exc:
        raise LiteralError(f"Number {value!r} does not fit in a double.") from exc
    text = format(number, ".17g")
    if not any(marker in text for marker in (".", "e", "n", "N")):
        text += ".0"
    return text


def _quote_string(text: str) -> str:
    quote = '"' if "'" in text else "'"
    parts = [quote]
    for char in text:
        if char in (quote, "\\"):
            parts.append("\\")
        if unicodedata.category(char) not in _UNPRINTABLE_CATEGORIES:
            parts.append(char)
        elif char in _STRING_ESCAPES:
            parts.append(_STRING_ESCAPES[char])
        elif ord(char) < 0x10000:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(f"\\U{ord(char):08x}")
    parts.append(quote)
    return "".join(parts)


def _print_bytes(value: object, *, annotate: bool) -> str:
    data = _coerce_bytes(value)
    # only a single trailing NUL makes a printable byte string
    if data and data.find(0) == len(data) - 1:
        body = data[:-1]
        escaped = _escape_bytestring(body)
        return f'b"{escaped}"' if b"'" in body else f"b'{escaped}'"
    if not data:
        return "@ay []" if annotate else "[]"
    items = [f"0x{byte:02x}" for byte in data]
    if annotate:
        items[0] = f"byte {items[0]}"
    return "[" + ", ".join(items) + "]"


def _coerce_bytes(value: object) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8") + b"\0"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    items = _require_sequence(value, "ay")
    try:
        return bytes(items)
    except (TypeError, ValueError) as exc:
        raise LiteralError(f"Invalid byte string value {value!r}: {exc}") from exc


def _escape_bytestring(data: bytes) -> str:
    parts = []
    for byte in data:
        if byte in _BYTESTRING_ESCAPES:
            parts.append(_BYTESTRING_ESCAPES[byte])
        elif byte < 0x20 or byte >= 0x7F:
            parts.append(f"\\{byte:03o}")
        else:
            parts.append(chr(byte))
    return "".join(parts)


def _print_array(node: ArrayType, value: object, *, annotate: bool) -> str:
    items = _require_sequence(value, node.signature)
    if not items:
        return f"@{node.signature} []" if annotate else "[]"
    element_signature = node.element.signature
    printed = [
        _print_value(element_signature, item, annotate=annotate and index == 0)
        for index, item in enumerate(items)
    ]
    return "[" + ", ".join(printed) + "]"


def _print_dict(node: DictType, value: object, *, annotate: bool) -> str:
    if not isinstance(value, Mapping):
        raise LiteralError(f"Expected a mapping for signature '{node.signature}', got {value!r}.")
    if not value:
        return f"@{node.signature} {{}}" if annotate else "{}"
    key_signature = node.key.signature
    value_signature = node.value.signature
    entries = []
    for index, (entry_key, entry_value) in enumerate(value.items()):
        entry_annotate = annotate and index == 0
        entries.append(
            f"{_print_value(key_signature, entry_key, annotate=entry_annotate)}: "
            f"{_print_value(value_signature, entry_value, annotate=entry_annotate)}"
        )
    return "{" + ", ".join(entries) + "}"


def _print_maybe(node: MaybeType, value: object, *, annotate: bool) -> str:
    prefix = f"@{node.signature} " if annotate else ""
    if value is None:
        return f"{prefix}nothing"
    # None is the only nothing, so a nested just is never needed
    inner = _print_value(node.inner.signature, value, annotate=False)
    return f"{prefix}{inner}"


def _print_tuple(node: TupleType, value: object, *, annotate: bool) -> str:
    items = _require_sequence(value, node.signature)
    if len(items) != len(node.elements):
        raise LiteralError(
            f"Tuple '{node.signature}' expects {len(node.elements)} items, got {len(items)}."
        )
    printed = [
        _print_value(element.signature, item, annotate=annotate)
        for element, item in zip(node.elements, items)
    ]
    if len(printed) == 1:
        return f"({printed[0]},)"
    return "(" + ", ".join(printed) + ")"


def _print_pair(node: PairType, value: object, *, annotate: bool) -> str:
    items = _require_sequence(value, node.signature)
    if len(items) != 2:
        raise LiteralError(f"Entry '{node.signature}' expects a key and a value, got {value!r}.")
    key_text = _print_value(node.key.signature, items[0], annotate=annotate)
    value_text = _print_value(node.value.signature, items[1], annotate=annotate)
    return f"{{{key_text}, {value_text}}}"


def _require_sequence(value: object, signature: str) -> Sequence[object]:
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        raise LiteralError(f"Expected a sequence for signature '{signature}', got {value!r}.")
    return value
