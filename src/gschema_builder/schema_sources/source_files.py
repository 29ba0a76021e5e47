"""Schema source file conventions and errors."""

from __future__ import annotations

from pathlib import Path

PYTHON_SUFFIX = ".gschema.py"
YAML_SUFFIXES: tuple[str, ...] = (".gschema.yaml", ".gschema.yml")
SCHEMA_SUFFIXES: tuple[str, ...] = (PYTHON_SUFFIX, *YAML_SUFFIXES)
OUTPUT_SUFFIX = ".gschema.xml"


class SchemaSourceError(Exception):
    """Raised when a schema source does not yield a document."""


class MissingExportError(SchemaSourceError):
    """Raised when a Python schema source defines no document export."""


class ExportTypeError(SchemaSourceError):
    """Raised when a Python schema source exports something other than a string."""


class SourceEvaluationError(SchemaSourceError):
    """Raised when evaluating a Python schema source fails."""


class SourceDefinitionError(SchemaSourceError):
    """Raised when a declarative schema source is malformed."""


def is_schema_source(path: Path) -> bool:
    """Return True for regular files named like a schema source."""
    return path.is_file() and path.name.endswith(SCHEMA_SUFFIXES)


def target_filename(source_name: str) -> str:
    """Return the output file name for a schema source file name."""
    for suffix in SCHEMA_SUFFIXES:
        if source_name.endswith(suffix):
            return source_name[: -len(suffix)] + OUTPUT_SUFFIX
    raise SchemaSourceError(f"not a schema source: {source_name}")
