"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
Processing code receives these models instead of reading raw dicts.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from exportclean.normalization.tags import is_element_name, sanitize_tag

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OutputFormat(str, Enum):
    """Target format for cleaned tables."""

    CSV = "csv"
    XML = "xml"


class CleaningConfig(BaseModel):
    """Which normalizations to apply to a table."""

    model_config = ConfigDict(frozen=True)

    report_duplicates: bool = Field(
        default=True, description="Log every header that occurred more than once"
    )
    sanitize_headers: bool = Field(
        default=True, description="Make headers usable as XML element names"
    )
    normalize_dates: bool = Field(
        default=True, description="Rewrite recognised dates as canonical timestamps"
    )
    date_columns: list[str] = Field(
        default_factory=list,
        description="Cleaned column names to normalize (empty = all columns)",
    )
    timestamp_separator: Literal[" ", "T"] = Field(
        default=" ", description="Separator between date and time in timestamps"
    )


class OutputConfig(BaseModel):
    """Output writing configuration."""

    model_config = ConfigDict(frozen=True)

    format: OutputFormat = Field(default=OutputFormat.CSV)
    root_name: str = Field(default="rows", description="XML root element name")
    row_name: str = Field(default="row", description="XML row element name")
    encoding: str = Field(default="utf-8")

    @field_validator("root_name", "row_name")
    @classmethod
    def validate_element_name(cls, v: str) -> str:
        """Ensure XML element names are still valid once sanitized."""
        if not v.strip():
            msg = "XML element names must not be empty"
            raise ValueError(msg)
        sanitized = sanitize_tag(v)
        if not is_element_name(sanitized):
            msg = f"{v!r} is not a valid XML element name once sanitized ({sanitized!r})"
            raise ValueError(msg)
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO")
    json_output: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure level is a known logging level."""
        level = v.upper()
        if level not in LOG_LEVELS:
            msg = f"Log level must be one of {', '.join(LOG_LEVELS)}, got: {v!r}"
            raise ValueError(msg)
        return level


class ExportConfig(BaseModel):
    """Complete export configuration."""

    model_config = ConfigDict(frozen=True)

    cleaning: CleaningConfig = Field(default_factory=CleaningConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
