"""
Header deduplication.

Renames repeated column headers so every header in a table is unique.
"""

from collections.abc import Callable, Sequence

from exportclean.utils.logging import get_logger

log = get_logger(__name__)

DuplicateReporter = Callable[[str, int], None]


def _log_duplicate(header: str, count: int) -> None:
    """Default reporter: one warning per duplicated header."""
    log.warning(
        f"Header '{header}' was present {count} times",
        header=header,
        count=count,
    )


def header_counts(headers: Sequence[str]) -> dict[str, int]:
    """
    Count occurrences of each header.

    Args:
        headers: Header names in table order.

    Returns:
        Mapping of header text to number of occurrences.
    """
    counts: dict[str, int] = {}
    for header in headers:
        counts[header] = counts.get(header, 0) + 1
    return counts


def dedupe_headers(
    headers: Sequence[str],
    report: bool = False,
    reporter: DuplicateReporter | None = None,
) -> list[str]:
    """
    Rename duplicate headers by appending their occurrence count.

    The first occurrence of a header is kept as-is; the second becomes
    ``<header>_2``, the third ``<header>_3`` and so on. Counting is keyed
    on the original header text, so renamed headers are never recounted.
    A renamed header may still collide with a literal header already in
    the input (``Name`` twice plus ``Name_2``); that case is left alone.

    Example:
        >>> dedupe_headers(["Name", "Age", "Name", "City", "Age"])
        ['Name', 'Age', 'Name_2', 'City', 'Age_2']

    Args:
        headers: Header names in table order. Not modified.
        report: Whether to report every header that occurred more than once.
        reporter: Callable receiving ``(header, count)`` for each duplicate.
            Defaults to a structlog warning.

    Returns:
        New list of the same length and order with duplicates renamed.
    """
    counts: dict[str, int] = {}
    result: list[str] = []

    for header in headers:
        counts[header] = counts.get(header, 0) + 1
        if counts[header] > 1:
            result.append(f"{header}_{counts[header]}")
        else:
            result.append(header)

    if report:
        emit = reporter or _log_duplicate
        for header, count in counts.items():
            if count > 1:
                emit(header, count)

    return result
