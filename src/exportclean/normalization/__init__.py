"""
Data normalization layer for export-safe values.

Handles header uniqueness, markup-safe tag names, and date rendering
to ensure tables survive constrained export formats.
"""

from exportclean.normalization.headers import dedupe_headers, header_counts
from exportclean.normalization.tags import (
    INVALID_TAG_CHARS,
    is_element_name,
    sanitize_tag,
)
from exportclean.normalization.temporal import (
    CANDIDATE_FORMATS,
    normalize_date,
    parse_date,
)

__all__ = [
    "CANDIDATE_FORMATS",
    "INVALID_TAG_CHARS",
    "dedupe_headers",
    "header_counts",
    "is_element_name",
    "normalize_date",
    "parse_date",
    "sanitize_tag",
]
