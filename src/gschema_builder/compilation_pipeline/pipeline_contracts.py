"""Compilation pipeline entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CompilationRequest:
    """Input contract for compiling one source directory."""

    source_dir: str
    target_dir: str | None = None
    compile: bool = False


@dataclass(frozen=True)
class CompilationOutcome:
    """Output contract for one completed compilation."""

    target_dir: Path
    written_paths: tuple[Path, ...]
    formatted: bool
    compiled: bool
