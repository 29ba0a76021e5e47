"""Schema source exports."""

from .python_source_reader import EXPORT_NAME, read_python_schema_source
from .source_extraction import extract_schema_document
from .source_files import (
    SCHEMA_SUFFIXES,
    ExportTypeError,
    MissingExportError,
    SchemaSourceError,
    SourceDefinitionError,
    SourceEvaluationError,
    is_schema_source,
    target_filename,
)
from .yaml_source_reader import build_document_from_mapping, read_yaml_schema_source

__all__ = [
    "EXPORT_NAME",
    "SCHEMA_SUFFIXES",
    "ExportTypeError",
    "MissingExportError",
    "SchemaSourceError",
    "SourceDefinitionError",
    "SourceEvaluationError",
    "build_document_from_mapping",
    "extract_schema_document",
    "is_schema_source",
    "read_python_schema_source",
    "read_yaml_schema_source",
    "target_filename",
]
