"""Schema list exports."""

from .aggregation import SchemaList, build_schema_list, define_schema_list, schema_list_node
from .markup_rendering import MarkupNode, cdata, render_markup

__all__ = [
    "MarkupNode",
    "SchemaList",
    "build_schema_list",
    "cdata",
    "define_schema_list",
    "render_markup",
    "schema_list_node",
]
