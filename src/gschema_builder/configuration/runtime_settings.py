"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

COMPILER_PROGRAM = "glib-compile-schemas"
FORMATTER_PROGRAM = "xmllint"


@dataclass(frozen=True)
class PipelineSettings:
    """Normalized settings for one compilation run."""

    source_dir: Path
    target_dir: Path
    compile: bool = False


@dataclass(frozen=True)
class ToolPaths:
    """Locations of the external tools; ``None`` when a tool is not installed."""

    compiler: Path | None
    formatter: Path | None
