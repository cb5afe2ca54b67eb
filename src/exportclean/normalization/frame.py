"""
Table-level cleaning.

Applies header deduplication, tag sanitizing and date normalization to
a DataFrame in the order an export needs them.
"""

from dataclasses import dataclass, field

import pandas as pd

from exportclean.config.settings import CleaningConfig
from exportclean.normalization.headers import DuplicateReporter, dedupe_headers
from exportclean.normalization.tags import sanitize_tag
from exportclean.normalization.temporal import normalize_date
from exportclean.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class CleaningResult:
    """
    Result of cleaning a single table.

    Attributes:
        frame: Cleaned DataFrame (a copy; the input is left untouched).
        original_headers: Headers as they were read.
        headers: Headers after deduplication and sanitizing.
        renamed: Mapping of column position to (original, cleaned) for
            every header that changed.
        dates_converted: Number of converted date cells per cleaned column.
    """

    frame: pd.DataFrame
    original_headers: list[str]
    headers: list[str]
    renamed: dict[int, tuple[str, str]] = field(default_factory=dict)
    dates_converted: dict[str, int] = field(default_factory=dict)

    @property
    def n_dates_converted(self) -> int:
        """Total number of converted date cells."""
        return sum(self.dates_converted.values())


def clean_headers(
    headers: list[str],
    config: CleaningConfig,
    reporter: DuplicateReporter | None = None,
) -> list[str]:
    """
    Deduplicate and optionally sanitize a header row.

    Args:
        headers: Header names in table order.
        config: Cleaning configuration.
        reporter: Optional sink for duplicate diagnostics.

    Returns:
        Cleaned headers, same length and order.
    """
    cleaned = dedupe_headers(headers, report=config.report_duplicates, reporter=reporter)
    if config.sanitize_headers:
        cleaned = [sanitize_tag(header) for header in cleaned]
    return cleaned


def _normalize_cell(value: object, separator: str) -> object:
    if isinstance(value, str):
        return normalize_date(value, separator)
    return value


def normalize_date_columns(
    df: pd.DataFrame,
    columns: list[str] | None = None,
    separator: str = " ",
) -> tuple[pd.DataFrame, dict[str, int]]:
    """
    Normalize date strings in selected columns.

    Only string cells are touched; missing values and numbers pass through.

    Args:
        df: DataFrame with unique column names.
        columns: Columns to normalize (None or empty = all columns).
        separator: Timestamp separator (" " or "T").

    Returns:
        Tuple of (new DataFrame, converted cell count per column).

    Raises:
        ValueError: If the DataFrame has duplicate column names.
    """
    if df.columns.has_duplicates:
        msg = "Date normalization requires unique column names"
        raise ValueError(msg)

    targets = list(columns) if columns else list(df.columns)
    missing = [col for col in targets if col not in df.columns]
    if missing:
        log.warning("Date columns not found, skipping", missing=missing)
        targets = [col for col in targets if col in df.columns]

    result = df.copy()
    converted: dict[str, int] = {}

    for col in targets:
        values = result[col].tolist()
        normalized = [_normalize_cell(v, separator) for v in values]
        changed = sum(
            1 for b, a in zip(values, normalized) if isinstance(b, str) and a != b
        )
        # Untouched columns keep their dtype
        if changed:
            result[col] = pd.Series(normalized, index=result.index, dtype=object)
            converted[col] = changed

    if converted:
        log.debug("Normalized date columns", converted=converted)

    return result, converted


def clean_frame(
    df: pd.DataFrame,
    config: CleaningConfig | None = None,
    reporter: DuplicateReporter | None = None,
) -> CleaningResult:
    """
    Clean a DataFrame for export.

    Headers are deduplicated first, then sanitized; date normalization
    runs on the cleaned columns. ``config.date_columns`` therefore refers
    to cleaned names.

    Args:
        df: DataFrame to clean.
        config: Cleaning configuration (defaults to CleaningConfig()).
        reporter: Optional sink for duplicate diagnostics.

    Returns:
        CleaningResult with the cleaned frame and what changed.
    """
    config = config or CleaningConfig()

    original = [str(col) for col in df.columns]
    headers = clean_headers(original, config, reporter=reporter)

    renamed = {
        i: (before, after)
        for i, (before, after) in enumerate(zip(original, headers))
        if before != after
    }

    frame = df.copy()
    frame.columns = headers

    converted: dict[str, int] = {}
    if config.normalize_dates:
        if frame.columns.has_duplicates:
            log.warning(
                "Headers still collide after renaming, skipping date normalization",
                duplicates=sorted(set(frame.columns[frame.columns.duplicated()])),
            )
        else:
            frame, converted = normalize_date_columns(
                frame,
                config.date_columns,
                separator=config.timestamp_separator,
            )

    log.info(
        "Cleaned table",
        rows=len(frame),
        columns=len(headers),
        headers_renamed=len(renamed),
        dates_converted=sum(converted.values()),
    )

    return CleaningResult(
        frame=frame,
        original_headers=original,
        headers=headers,
        renamed=renamed,
        dates_converted=converted,
    )
