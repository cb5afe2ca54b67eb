"""
Configuration management with typed Pydantic models.

Provides YAML loading with environment-aware interpolation.
"""

from exportclean.config.loader import load_config
from exportclean.config.settings import (
    CleaningConfig,
    ExportConfig,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
)

__all__ = [
    "CleaningConfig",
    "ExportConfig",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "load_config",
]
