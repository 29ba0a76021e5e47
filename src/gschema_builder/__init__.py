"""Typed builders for GSettings schema documents.

Schema sources import from here::

    from gschema_builder import Enumeration, SchemaBuilder, define_schema_list

    color = Enumeration("org.example.Color", ["red", "green"])
    schema = (
        SchemaBuilder.create("org.example.app", path="/org/example/app/")
        .key("zoom", "d", default=1.0, summary="Zoom level")
        .key("color", color, default="red")
    )
    schemalist = define_schema_list([schema])
"""

from .schema_definitions import (
    DefinitionError,
    DuplicateKeyError,
    Enumeration,
    FlagSet,
    KeyRange,
    SchemaBuilder,
)
from .schema_list import define_schema_list
from .type_signatures import GrammarError, parse, parse_shallow, signature_value_shape
from .variant_literals import LiteralError, Variant, format_literal

__all__ = [
    "DefinitionError",
    "DuplicateKeyError",
    "Enumeration",
    "FlagSet",
    "GrammarError",
    "KeyRange",
    "LiteralError",
    "SchemaBuilder",
    "Variant",
    "define_schema_list",
    "format_literal",
    "parse",
    "parse_shallow",
    "signature_value_shape",
]
