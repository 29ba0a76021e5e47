"""Configuration domain exports."""

from .loader import ConfigurationError, discover_tools, load_pipeline_settings
from .runtime_settings import COMPILER_PROGRAM, FORMATTER_PROGRAM, PipelineSettings, ToolPaths

__all__ = [
    "COMPILER_PROGRAM",
    "FORMATTER_PROGRAM",
    "PipelineSettings",
    "ToolPaths",
    "ConfigurationError",
    "discover_tools",
    "load_pipeline_settings",
]
