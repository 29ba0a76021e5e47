"""Schema document extraction service."""

from __future__ import annotations

from pathlib import Path

from .python_source_reader import read_python_schema_source
from .source_files import PYTHON_SUFFIX, YAML_SUFFIXES, SchemaSourceError
from .yaml_source_reader import read_yaml_schema_source


def extract_schema_document(path: Path) -> str:
    """Return the serialized document produced by one schema source file."""
    if path.name.endswith(PYTHON_SUFFIX):
        return read_python_schema_source(path)
    if path.name.endswith(YAML_SUFFIXES):
        return read_yaml_schema_source(path)
    raise SchemaSourceError(f"not a schema source: {path.name}")
