"""
Exportclean: Data Cleaning for Constrained Export Formats.

This package provides header deduplication, markup-safe tag sanitizing,
and date normalization for tables headed into XML or date-sensitive
export pipelines.
"""

from importlib.metadata import version

from exportclean.normalization import dedupe_headers, normalize_date, sanitize_tag

__version__ = version("exportclean")

__all__ = ["__version__", "dedupe_headers", "normalize_date", "sanitize_tag"]
