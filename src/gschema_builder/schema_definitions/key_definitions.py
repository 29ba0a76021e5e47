"""Schema key entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gschema_builder.variant_literals import format_literal

if TYPE_CHECKING:
    from .enumerations import Enumeration, FlagSet


class DefinitionError(Exception):
    """Raised when a schema key cannot be defined."""


class DuplicateKeyError(DefinitionError):
    """Raised when a key name is already used within one schema."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'duplicate key: "{name}"')


@dataclass(frozen=True)
class KeyRange:
    """Inclusive numeric bounds for a typed key."""

    min: int | float | None = None
    max: int | float | None = None


@dataclass(frozen=True)
class TypedKey:
    """Key holding a value of an explicit type signature."""

    name: str
    signature: str
    default_literal: str
    summary: str | None = None
    description: str | None = None
    range: KeyRange | None = None

    @property
    def type_attribute(self) -> tuple[str, str]:
        return ("type", self.signature)

    @property
    def storage_signature(self) -> str:
        return self.signature


@dataclass(frozen=True)
class EnumKey:
    """Key holding one nick of an enumeration."""

    name: str
    enumeration: Enumeration
    default: str
    summary: str | None = None
    description: str | None = None

    @property
    def type_attribute(self) -> tuple[str, str]:
        return ("enum", self.enumeration.id)

    @property
    def storage_signature(self) -> str:
        return "s"

    @property
    def default_literal(self) -> str:
        return format_literal("s", self.default)


@dataclass(frozen=True)
class FlagsKey:
    """Key holding a set of flag nicks."""

    name: str
    flag_set: FlagSet
    default: tuple[str, ...]
    summary: str | None = None
    description: str | None = None

    @property
    def type_attribute(self) -> tuple[str, str]:
        return ("flags", self.flag_set.id)

    @property
    def storage_signature(self) -> str:
        return "as"

    @property
    def default_literal(self) -> str:
        return format_literal("as", self.default)


KeyDefinition = TypedKey | EnumKey | FlagsKey
