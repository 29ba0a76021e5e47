"""External tool exports."""

from .tool_invocation import (
    CommandResult,
    CommandRunner,
    CompileError,
    ExternalToolError,
    FormatValidationError,
    MissingDependencyError,
    compile_schemas,
    format_document,
    run_captured_command,
)

__all__ = [
    "CommandResult",
    "CommandRunner",
    "CompileError",
    "ExternalToolError",
    "FormatValidationError",
    "MissingDependencyError",
    "compile_schemas",
    "format_document",
    "run_captured_command",
]
