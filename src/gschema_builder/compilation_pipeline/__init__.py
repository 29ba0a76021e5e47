"""Compilation pipeline exports."""

from .pipeline_contracts import CompilationOutcome, CompilationRequest
from .schema_compilation_use_case import (
    CompilationError,
    EmptyInputError,
    compile_schema_directory,
)

__all__ = [
    "CompilationError",
    "CompilationOutcome",
    "CompilationRequest",
    "EmptyInputError",
    "compile_schema_directory",
]
