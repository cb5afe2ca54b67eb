"""Export pipeline: read, clean, validate and write tables."""

from exportclean.export.pipeline import ExportResult, read_table, run_export, write_table
from exportclean.export.reporter import ConsoleReporter
from exportclean.export.schema import EXPORT_FRAME_SCHEMA, validate_export_frame

__all__ = [
    "EXPORT_FRAME_SCHEMA",
    "ConsoleReporter",
    "ExportResult",
    "read_table",
    "run_export",
    "validate_export_frame",
    "write_table",
]
