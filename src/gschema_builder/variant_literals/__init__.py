"""Variant literal exports."""

from .literal_printer import LiteralError, format_literal
from .variant_values import Variant

__all__ = ["LiteralError", "Variant", "format_literal"]
