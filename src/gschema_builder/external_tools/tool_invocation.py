"""Invocation of the external XML formatter and schema compiler."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from gschema_builder.configuration.runtime_settings import COMPILER_PROGRAM

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of one external command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


CommandRunner = Callable[[tuple[str, ...]], CommandResult]


class MissingDependencyError(Exception):
    """Raised when a required external tool is not installed."""


class ExternalToolError(Exception):
    """Raised when an external tool exits unsuccessfully."""


class FormatValidationError(ExternalToolError):
    """Raised when the XML formatter rejects a written document."""


class CompileError(ExternalToolError):
    """Raised when the schema compiler fails."""


def run_captured_command(command: tuple[str, ...]) -> CommandResult:
    """Run one command and capture its text output without raising on exit status."""
    _LOGGER.debug("running %s", shlex.join(command))
    try:
        completed = subprocess.run(list(command), capture_output=True, text=True, check=False)
    except FileNotFoundError as exc:
        raise MissingDependencyError(f"missing dependency: {command[0]}") from exc
    return CommandResult(
        returncode=completed.returncode, stdout=completed.stdout, stderr=completed.stderr
    )


def format_document(
    path: Path, formatter: Path | None, *, run_command: CommandRunner | None = None
) -> bool:
    """Reformat ``path`` in place; return False when no formatter is installed."""
    if formatter is None:
        _LOGGER.debug("no formatter installed, leaving %s as written", path)
        return False

    command_runner = run_command or run_captured_command
    result = command_runner((str(formatter), "--format", str(path)))
    if result.returncode != 0:
        raise FormatValidationError(result.stderr.strip())

    path.write_text(result.stdout.strip(), encoding="utf-8")
    return True


def compile_schemas(
    target_dir: Path, compiler: Path | None, *, run_command: CommandRunner | None = None
) -> None:
    """Compile every schema in ``target_dir`` into the binary lookup cache."""
    if compiler is None:
        raise MissingDependencyError(f"missing dependency: {COMPILER_PROGRAM}")

    command_runner = run_command or run_captured_command
    result = command_runner((str(compiler), str(target_dir)))
    if result.returncode != 0:
        diagnostic = result.stderr.strip()
        raise CompileError(diagnostic or f"{COMPILER_PROGRAM} failed")
    _LOGGER.info("compiled schemas in %s", target_dir)
