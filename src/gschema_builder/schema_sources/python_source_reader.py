"""Extraction of documents from Python schema sources."""

from __future__ import annotations

import runpy
from pathlib import Path

from .source_files import ExportTypeError, MissingExportError, SourceEvaluationError

EXPORT_NAME = "schemalist"


def read_python_schema_source(path: Path) -> str:
    """Evaluate ``path`` and return the string it exports as ``schemalist``."""
    try:
        namespace = runpy.run_path(str(path), run_name="__gschema_source__")
    except Exception as exc:  # arbitrary user code
        raise SourceEvaluationError(f"evaluating {path.name} failed: {exc}") from exc

    if EXPORT_NAME not in namespace:
        raise MissingExportError(f"missing {EXPORT_NAME} export in {path.name}")

    document = namespace[EXPORT_NAME]
    if not isinstance(document, str):
        raise ExportTypeError(
            f"{EXPORT_NAME} export in {path.name} is {type(document).__name__}, not a string"
        )
    return document
