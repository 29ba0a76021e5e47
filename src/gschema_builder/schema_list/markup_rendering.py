"""Markup node entities and serializer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

AttributeValue = str | int | float


@dataclass(frozen=True)
class MarkupNode:
    """Element with ordered attributes and either child elements or raw text."""

    name: str
    attributes: tuple[tuple[str, AttributeValue], ...] = ()
    children: tuple[MarkupNode, ...] | str = ()


def cdata(text: str) -> str:
    """Wrap a default literal in the fixed CDATA block used by ``default`` elements."""
    return f"<![CDATA[ {text} ]]>"


def render_markup(node: MarkupNode) -> str:
    """Serialize ``node`` without escaping, reordering or added whitespace."""
    parts: list[str] = []
    _render_into(node, parts)
    return "".join(parts)


def _render_into(node: MarkupNode, parts: list[str]) -> None:
    parts.append(f"<{node.name}")
    for key, value in node.attributes:
        parts.append(f' {key}="{_attribute_text(value)}"')

    if not node.children:
        parts.append(" />")
        return

    parts.append(">")
    if isinstance(node.children, str):
        parts.append(node.children)
    else:
        for child in node.children:
            _render_into(child, parts)
    parts.append(f"</{node.name}>")


def _attribute_text(value: AttributeValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _script_number(value)
    return str(value)


def _script_number(value: float) -> str:
    """Print a float the way a script engine's Number#toString does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    # repr gives the shortest round-tripping digits
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    count = len(digits)
    point = int(exponent) + count
    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    mantissa = digits[0] + (f".{digits[1:]}" if count > 1 else "")
    power = point - 1
    return f"{sign}{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
