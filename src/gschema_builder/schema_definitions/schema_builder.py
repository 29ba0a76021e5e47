"""Immutable schema builder service."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any, Literal

from gschema_builder.type_signatures import GrammarError, parse, value_shape
from gschema_builder.variant_literals import LiteralError, format_literal

from .enumerations import Enumeration, FlagSet, unique_by_handle
from .key_definitions import (
    DefinitionError,
    DuplicateKeyError,
    EnumKey,
    FlagsKey,
    KeyDefinition,
    KeyRange,
    TypedKey,
)


@dataclass(frozen=True)
class SchemaDocument:
    """One named group of keys, kept in insertion order."""

    id: str
    path: str | None = None
    gettext_domain: str | None = None
    keys: tuple[KeyDefinition, ...] = ()

    @property
    def key_names(self) -> tuple[str, ...]:
        return tuple(key.name for key in self.keys)


@dataclass(frozen=True)
class SchemaBuilder:
    """Incrementally built schema.

    Every ``add_*`` call returns a new builder holding its own copy of the keys
    and of the referenced enumerations and flag sets; the receiver is never
    modified, so one builder can be branched into several schemas.
    """

    document: SchemaDocument
    enumerations: tuple[Enumeration, ...] = ()
    flag_sets: tuple[FlagSet, ...] = ()

    @classmethod
    def create(
        cls, id: str, path: str | None = None, gettext_domain: str | None = None
    ) -> SchemaBuilder:
        """Return an empty builder for schema ``id``."""
        if not isinstance(id, str) or not id:
            raise DefinitionError("schema id must be a non-empty string")
        return cls(document=SchemaDocument(id=id, path=path, gettext_domain=gettext_domain))

    @property
    def id(self) -> str:
        return self.document.id

    @property
    def path(self) -> str | None:
        return self.document.path

    @property
    def gettext_domain(self) -> str | None:
        return self.document.gettext_domain

    @property
    def keys(self) -> tuple[KeyDefinition, ...]:
        return self.document.keys

    def copy(self) -> SchemaBuilder:
        """Return an independent builder with the same accumulated state."""
        return replace(self, document=replace(self.document))

    def key(
        self,
        name: str,
        type_: str | Enumeration | FlagSet,
        *,
        default: Any,
        summary: str | None = None,
        description: str | None = None,
        range: KeyRange | None = None,
    ) -> SchemaBuilder:
        """Add a key whose kind follows ``type_``: a signature, an enum or a flag set."""
        if isinstance(type_, str):
            return self.add_typed_key(
                name, type_, default, summary=summary, description=description, range=range
            )
        if range is not None:
            raise DefinitionError(f'range is only supported on typed keys: "{name}"')
        if isinstance(type_, Enumeration):
            return self.add_enum_key(
                name, type_, default, summary=summary, description=description
            )
        if isinstance(type_, FlagSet):
            return self.add_flags_key(
                name, type_, default, summary=summary, description=description
            )
        raise DefinitionError(f'unsupported type for key "{name}": {type_!r}')

    def add_typed_key(
        self,
        name: str,
        signature: str,
        default: Any,
        summary: str | None = None,
        description: str | None = None,
        range: KeyRange | None = None,
    ) -> SchemaBuilder:
        _require_key_name(name)
        try:
            parse(signature)
            default_literal = format_literal(signature, default)
        except (GrammarError, LiteralError) as exc:
            raise DefinitionError(f'invalid key "{name}": {exc}') from exc
        key = TypedKey(
            name=name,
            signature=signature,
            default_literal=default_literal,
            summary=summary,
            description=description,
            range=range,
        )
        return self._with_key(key)

    def add_enum_key(
        self,
        name: str,
        enumeration: Enumeration,
        default: str,
        summary: str | None = None,
        description: str | None = None,
    ) -> SchemaBuilder:
        _require_key_name(name)
        if not isinstance(enumeration, Enumeration):
            raise DefinitionError(f'key "{name}" requires an Enumeration, got {enumeration!r}')
        _require_known_nicks(name, enumeration, (default,))
        key = EnumKey(
            name=name,
            enumeration=enumeration,
            default=default,
            summary=summary,
            description=description,
        )
        return self._with_key(key, enumerations=(*self.enumerations, enumeration))

    def add_flags_key(
        self,
        name: str,
        flag_set: FlagSet,
        default: Sequence[str],
        summary: str | None = None,
        description: str | None = None,
    ) -> SchemaBuilder:
        _require_key_name(name)
        if not isinstance(flag_set, FlagSet):
            raise DefinitionError(f'key "{name}" requires a FlagSet, got {flag_set!r}')
        if isinstance(default, str) or not isinstance(default, Sequence):
            raise DefinitionError(f'default of flags key "{name}" must be a list of nicks')
        nicks = tuple(default)
        _require_known_nicks(name, flag_set, nicks)
        key = FlagsKey(
            name=name,
            flag_set=flag_set,
            default=nicks,
            summary=summary,
            description=description,
        )
        return self._with_key(key, flag_sets=(*self.flag_sets, flag_set))

    def settings_signatures(self) -> dict[str, str]:
        """Map each key name to the signature its value is stored with."""
        return {key.name: key.storage_signature for key in self.keys}

    def value_shapes(self) -> dict[str, Any]:
        """Map each key name to the Python type its value takes."""
        shapes: dict[str, Any] = {}
        for key in self.keys:
            if isinstance(key, TypedKey):
                shapes[key.name] = value_shape(parse(key.signature))
            elif isinstance(key, EnumKey):
                shapes[key.name] = _nick_shape(key.enumeration)
            else:
                shapes[key.name] = list[_nick_shape(key.flag_set)]  # type: ignore[misc]
        return shapes

    def _with_key(
        self,
        key: KeyDefinition,
        *,
        enumerations: tuple[Enumeration, ...] | None = None,
        flag_sets: tuple[FlagSet, ...] | None = None,
    ) -> SchemaBuilder:
        if key.name in self.document.key_names:
            raise DuplicateKeyError(key.name)
        return replace(
            self,
            document=replace(self.document, keys=(*self.document.keys, key)),
            enumerations=unique_by_handle(enumerations or self.enumerations),
            flag_sets=unique_by_handle(flag_sets or self.flag_sets),
        )


def _require_key_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise DefinitionError("key name must be a non-empty string")


def _require_known_nicks(name: str, table: Enumeration | FlagSet, nicks: Sequence[str]) -> None:
    for nick in nicks:
        if not isinstance(nick, str) or nick not in table.values:
            raise DefinitionError(
                f'unknown nick "{nick}" for key "{name}" of {table.kind} "{table.id}"'
            )


def _nick_shape(table: Enumeration | FlagSet) -> Any:
    if not table.nicks:
        return str
    return Literal[table.nicks]  # type: ignore[valid-type]
