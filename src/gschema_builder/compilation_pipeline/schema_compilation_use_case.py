"""Schema directory compilation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from gschema_builder.configuration import (
    COMPILER_PROGRAM,
    ToolPaths,
    discover_tools,
    load_pipeline_settings,
)
from gschema_builder.external_tools import (
    CommandRunner,
    MissingDependencyError,
    compile_schemas,
    format_document,
)
from gschema_builder.schema_sources import (
    extract_schema_document,
    is_schema_source,
    target_filename,
)

from .pipeline_contracts import CompilationOutcome, CompilationRequest

_LOGGER = logging.getLogger(__name__)

DocumentExtractor = Callable[[Path], str]


class CompilationError(Exception):
    """Raised when a schema directory cannot be compiled."""


class EmptyInputError(CompilationError):
    """Raised when the source directory holds no schema sources."""


def compile_schema_directory(
    request: CompilationRequest,
    *,
    tools: ToolPaths | None = None,
    run_command: CommandRunner | None = None,
    extract_document: DocumentExtractor | None = None,
) -> CompilationOutcome:
    """Write one XML document per schema source and optionally compile the cache.

    Sources are processed one at a time in file name order; the first failure
    stops the run.
    """
    settings = load_pipeline_settings(request.source_dir, request.target_dir, request.compile)
    resolved_tools = tools or discover_tools()
    resolved_extract = extract_document or extract_schema_document

    if settings.compile and resolved_tools.compiler is None:
        raise MissingDependencyError(f"missing dependency: {COMPILER_PROGRAM}")

    sources = _discover_sources(settings.source_dir)
    if not sources:
        raise EmptyInputError(f"no schemas found in {settings.source_dir}")

    settings.target_dir.mkdir(parents=True, exist_ok=True)
    written_paths = tuple(
        _write_document(
            source,
            settings.target_dir,
            tools=resolved_tools,
            run_command=run_command,
            extract_document=resolved_extract,
        )
        for source in sources
    )

    if settings.compile:
        compile_schemas(settings.target_dir, resolved_tools.compiler, run_command=run_command)

    _LOGGER.info("wrote %d schema document(s) to %s", len(written_paths), settings.target_dir)
    return CompilationOutcome(
        target_dir=settings.target_dir,
        written_paths=written_paths,
        formatted=resolved_tools.formatter is not None,
        compiled=settings.compile,
    )


def _discover_sources(source_dir: Path) -> tuple[Path, ...]:
    return tuple(sorted(path for path in source_dir.iterdir() if is_schema_source(path)))


def _write_document(
    source: Path,
    target_dir: Path,
    *,
    tools: ToolPaths,
    run_command: CommandRunner | None,
    extract_document: DocumentExtractor,
) -> Path:
    _LOGGER.debug("extracting %s", source)
    document = extract_document(source)
    target = target_dir / target_filename(source.name)
    try:
        target.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise CompilationError(f"writing {target.name} failed: {exc}") from exc

    format_document(target, tools.formatter, run_command=run_command)
    _LOGGER.debug("wrote %s", target)
    return target
