"""Declarative YAML schema sources.

A YAML source describes one schema list::

    gettextDomain: my-app
    enums:
      - id: org.example.Mode
        values: [light, dark]
    flags:
      - id: org.example.Features
        values: {search: 1, sync: 4}
    schemas:
      - id: org.example.App
        path: /org/example/app/
        keys:
          - name: window-size
            type: (ii)
            default: [800, 600]
            range: {min: 0}
          - name: mode
            enum: org.example.Mode
            default: dark

Enums and flags are referenced by id, so every key naming the same id shares
one declaration. Defaults are converted along the key's signature: lists become
tuples where a tuple is expected and ``{signature, value}`` mappings become
boxed variants.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from gschema_builder.schema_definitions import (
    DefinitionError,
    Enumeration,
    FlagSet,
    KeyRange,
    SchemaBuilder,
)
from gschema_builder.schema_list import define_schema_list
from gschema_builder.type_signatures import (
    ArrayType,
    DictType,
    GrammarError,
    MaybeType,
    PairType,
    Primitive,
    PrimitiveKind,
    TupleType,
    TypeNode,
    parse,
)
from gschema_builder.variant_literals import Variant

from .source_files import SourceDefinitionError

_KEY_KINDS: tuple[str, ...] = ("type", "enum", "flags")


def read_yaml_schema_source(path: Path) -> str:
    """Load a YAML schema source and return its serialized document."""
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise SourceDefinitionError(f"Failed to parse {path.name}: {exc}") from exc

    try:
        return build_document_from_mapping(parsed)
    except DefinitionError as exc:
        raise SourceDefinitionError(f"{path.name}: {exc}") from exc


def build_document_from_mapping(parsed: Any) -> str:
    """Build the document described by an already-parsed YAML mapping."""
    root = _require_mapping(parsed, "schema source")
    enumerations = _parse_tables(root.get("enums"), Enumeration, "enums")
    flag_sets = _parse_tables(root.get("flags"), FlagSet, "flags")

    schema_entries = root.get("schemas")
    if (
        isinstance(schema_entries, (str, Mapping))
        or not isinstance(schema_entries, Sequence)
        or not schema_entries
    ):
        raise SourceDefinitionError("schemas must be a non-empty list.")

    builders = [
        _parse_schema(entry, enumerations=enumerations, flag_sets=flag_sets)
        for entry in schema_entries
    ]
    return define_schema_list(
        builders, gettext_domain=_optional_string(root.get("gettextDomain"), "gettextDomain")
    )


def _parse_tables(value: Any, table_cls: type, section_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, (str, Mapping)) or not isinstance(value, Sequence):
        raise SourceDefinitionError(f"{section_name} must be a list.")

    tables: dict[str, Any] = {}
    for entry in value:
        section = _require_mapping(entry, f"{section_name} entry")
        table_id = _require_non_empty_string(section.get("id"), f"{section_name}.id")
        if table_id in tables:
            raise SourceDefinitionError(f"{section_name} id '{table_id}' is declared twice.")
        values = section.get("values")
        if isinstance(values, Mapping):
            for nick, number in values.items():
                if not isinstance(nick, str) or not _is_integer(number):
                    raise SourceDefinitionError(
                        f"{section_name} '{table_id}' values must map nicks to integers."
                    )
        elif isinstance(values, Sequence) and not isinstance(values, str):
            if not all(isinstance(nick, str) for nick in values):
                raise SourceDefinitionError(f"{section_name} '{table_id}' nicks must be strings.")
        else:
            raise SourceDefinitionError(f"{section_name} '{table_id}' requires values.")
        tables[table_id] = table_cls(table_id, values)
    return tables


def _parse_schema(
    entry: Any, *, enumerations: Mapping[str, Enumeration], flag_sets: Mapping[str, FlagSet]
) -> SchemaBuilder:
    section = _require_mapping(entry, "schemas entry")
    builder = SchemaBuilder.create(
        _require_non_empty_string(section.get("id"), "schema id"),
        path=_optional_string(section.get("path"), "schema path"),
        gettext_domain=_optional_string(section.get("gettextDomain"), "schema gettextDomain"),
    )

    keys = section.get("keys") or []
    if isinstance(keys, (str, Mapping)) or not isinstance(keys, Sequence):
        raise SourceDefinitionError(f"keys of schema '{builder.id}' must be a list.")
    for key_entry in keys:
        builder = _add_key(builder, key_entry, enumerations=enumerations, flag_sets=flag_sets)
    return builder


def _add_key(
    builder: SchemaBuilder,
    entry: Any,
    *,
    enumerations: Mapping[str, Enumeration],
    flag_sets: Mapping[str, FlagSet],
) -> SchemaBuilder:
    section = _require_mapping(entry, f"key of schema '{builder.id}'")
    name = _require_non_empty_string(section.get("name"), f"{builder.id} key name")
    kinds = [kind for kind in _KEY_KINDS if kind in section]
    if len(kinds) != 1:
        raise SourceDefinitionError(f"key '{name}' must set exactly one of type, enum or flags.")
    if "default" not in section:
        raise SourceDefinitionError(f"key '{name}' requires a default.")

    kind = kinds[0]
    reference = _require_non_empty_string(section[kind], f"key '{name}' {kind}")
    default = section["default"]
    type_: str | Enumeration | FlagSet
    if kind == "type":
        type_ = reference
        default = coerce_default(_parse_signature(reference, f"key '{name}'"), default)
    elif kind == "enum":
        type_ = _lookup(enumerations, reference, "enum", name)
    else:
        type_ = _lookup(flag_sets, reference, "flags", name)

    return builder.key(
        name,
        type_,
        default=default,
        summary=_optional_string(section.get("summary"), f"key '{name}' summary"),
        description=_optional_string(section.get("description"), f"key '{name}' description"),
        range=_parse_range(section.get("range"), name),
    )


def coerce_default(node: TypeNode, raw: Any) -> Any:
    """Convert a YAML value into the native value expected for ``node``."""
    if _is_variant(node) and isinstance(raw, Mapping):
        signature = _require_non_empty_string(raw.get("signature"), "variant signature")
        if "value" not in raw:
            raise SourceDefinitionError("variant default requires a value.")
        inner = _parse_signature(signature, "variant default")
        return Variant(signature, coerce_default(inner, raw["value"]))
    if isinstance(node, ArrayType) and _is_list(raw):
        return [coerce_default(node.element, item) for item in raw]
    if isinstance(node, MaybeType) and raw is not None:
        return coerce_default(node.inner, raw)
    if isinstance(node, TupleType) and _is_list(raw) and len(raw) == len(node.elements):
        return tuple(coerce_default(element, item) for element, item in zip(node.elements, raw))
    if isinstance(node, PairType) and _is_list(raw) and len(raw) == 2:
        return (coerce_default(node.key, raw[0]), coerce_default(node.value, raw[1]))
    if isinstance(node, DictType) and isinstance(raw, Mapping):
        return {
            coerce_default(node.key, entry_key): coerce_default(node.value, entry_value)
            for entry_key, entry_value in raw.items()
        }
    return raw


def _parse_signature(signature: str, context: str) -> TypeNode:
    try:
        return parse(signature)
    except GrammarError as exc:
        raise SourceDefinitionError(f"{context}: {exc}") from exc


def _is_variant(node: TypeNode) -> bool:
    return isinstance(node, Primitive) and node.kind is PrimitiveKind.VARIANT


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _lookup(tables: Mapping[str, Any], table_id: str, kind: str, name: str) -> Any:
    if table_id not in tables:
        raise SourceDefinitionError(f"key '{name}' references undeclared {kind} '{table_id}'.")
    return tables[table_id]


def _parse_range(value: Any, name: str) -> KeyRange | None:
    if value is None:
        return None
    section = _require_mapping(value, f"key '{name}' range")
    bounds = {}
    for label in ("min", "max"):
        bound = section.get(label)
        if bound is not None and (isinstance(bound, bool) or not isinstance(bound, (int, float))):
            raise SourceDefinitionError(f"key '{name}' range.{label} must be a number.")
        bounds[label] = bound
    return KeyRange(min=bounds["min"], max=bounds["max"])


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SourceDefinitionError(f"Section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise SourceDefinitionError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise SourceDefinitionError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise SourceDefinitionError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
