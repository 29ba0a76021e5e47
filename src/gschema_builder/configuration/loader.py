"""Configuration loader service."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

from .runtime_settings import COMPILER_PROGRAM, FORMATTER_PROGRAM, PipelineSettings, ToolPaths

ProgramLocator = Callable[[str], str | None]


class ConfigurationError(Exception):
    """Raised when the run settings are invalid."""


def load_pipeline_settings(
    source_dir: Path | str | None,
    target_dir: Path | str | None = None,
    compile: bool = False,
) -> PipelineSettings:
    """Validate the requested directories and return normalized settings."""
    if source_dir is None or not str(source_dir).strip():
        raise ConfigurationError("source directory argument required")

    source_path = Path(source_dir)
    if not source_path.is_dir():
        raise ConfigurationError(f"not a directory: {source_path}")

    target_path = Path(target_dir) if target_dir is not None else Path.cwd()
    if target_path.exists() and not target_path.is_dir():
        raise ConfigurationError(f"target is not a directory: {target_path}")

    return PipelineSettings(
        source_dir=source_path.resolve(),
        target_dir=target_path.resolve(),
        compile=bool(compile),
    )


def discover_tools(which: ProgramLocator | None = None) -> ToolPaths:
    """Locate the schema compiler and the XML formatter on ``PATH``."""
    locate = which or shutil.which
    return ToolPaths(
        compiler=_optional_path(locate(COMPILER_PROGRAM)),
        formatter=_optional_path(locate(FORMATTER_PROGRAM)),
    )


def _optional_path(value: str | None) -> Path | None:
    if not value:
        return None
    return Path(value)
