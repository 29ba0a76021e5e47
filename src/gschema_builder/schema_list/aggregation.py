"""Schema list aggregation service."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from gschema_builder.schema_definitions import (
    DefinitionError,
    Enumeration,
    FlagSet,
    KeyDefinition,
    SchemaBuilder,
    SchemaDocument,
    TypedKey,
    unique_by_handle,
)

from .markup_rendering import MarkupNode, cdata, render_markup


@dataclass(frozen=True)
class SchemaList:
    """Schemas emitted together with every declaration their keys reference."""

    schemas: tuple[SchemaDocument, ...]
    enumerations: tuple[Enumeration, ...]
    flag_sets: tuple[FlagSet, ...]
    gettext_domain: str | None = None


def build_schema_list(
    schemas: Iterable[SchemaBuilder], *, gettext_domain: str | None = None
) -> SchemaList:
    """Merge builders into one list, sharing enum and flag declarations by instance."""
    builders = tuple(schemas)
    if not builders:
        raise DefinitionError("a schema list requires at least one schema")
    for builder in builders:
        if not isinstance(builder, SchemaBuilder):
            raise DefinitionError(f"expected a SchemaBuilder, got {builder!r}")

    return SchemaList(
        schemas=tuple(builder.document for builder in builders),
        enumerations=unique_by_handle(
            enumeration for builder in builders for enumeration in builder.enumerations
        ),
        flag_sets=unique_by_handle(
            flag_set for builder in builders for flag_set in builder.flag_sets
        ),
        gettext_domain=gettext_domain,
    )


def schema_list_node(schema_list: SchemaList) -> MarkupNode:
    """Build the ``schemalist`` element tree."""
    attributes: tuple[tuple[str, str], ...] = ()
    if schema_list.gettext_domain is not None:
        attributes = (("gettextDomain", schema_list.gettext_domain),)

    children = (
        *(_declaration_node("enum", enumeration) for enumeration in schema_list.enumerations),
        *(_declaration_node("flags", flag_set) for flag_set in schema_list.flag_sets),
        *(_schema_node(schema) for schema in schema_list.schemas),
    )
    return MarkupNode(name="schemalist", attributes=attributes, children=children)


def define_schema_list(
    schemas: Iterable[SchemaBuilder], *, gettext_domain: str | None = None
) -> str:
    """Aggregate ``schemas`` and return the serialized ``schemalist`` document."""
    schema_list = build_schema_list(schemas, gettext_domain=gettext_domain)
    return render_markup(schema_list_node(schema_list))


def _declaration_node(name: str, table: Enumeration | FlagSet) -> MarkupNode:
    return MarkupNode(
        name=name,
        attributes=(("id", table.id),),
        children=tuple(
            MarkupNode(name="value", attributes=(("nick", nick), ("value", str(value))))
            for nick, value in table.values.items()
        ),
    )


def _schema_node(schema: SchemaDocument) -> MarkupNode:
    attributes: list[tuple[str, str]] = [("id", schema.id)]
    if schema.path:
        attributes.append(("path", schema.path))
    if schema.gettext_domain:
        attributes.append(("gettextDomain", schema.gettext_domain))
    return MarkupNode(
        name="schema",
        attributes=tuple(attributes),
        children=tuple(_key_node(key) for key in schema.keys),
    )


def _key_node(key: KeyDefinition) -> MarkupNode:
    children = [MarkupNode(name="default", children=cdata(key.default_literal))]
    if key.summary:
        children.append(MarkupNode(name="summary", children=key.summary))
    if key.description:
        children.append(MarkupNode(name="description", children=key.description))
    if isinstance(key, TypedKey) and key.range is not None:
        bounds = tuple(
            (label, bound)
            for label, bound in (("min", key.range.min), ("max", key.range.max))
            if bound is not None
        )
        children.append(MarkupNode(name="range", attributes=bounds))
    return MarkupNode(
        name="key",
        attributes=(("name", key.name), key.type_attribute),
        children=tuple(children),
    )
