"""Schema definition exports."""

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
from .schema_builder import SchemaBuilder, SchemaDocument

__all__ = [
    "DefinitionError",
    "DuplicateKeyError",
    "EnumKey",
    "Enumeration",
    "FlagSet",
    "FlagsKey",
    "KeyDefinition",
    "KeyRange",
    "SchemaBuilder",
    "SchemaDocument",
    "TypedKey",
    "unique_by_handle",
]
