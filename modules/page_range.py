"""
Page range parsing utilities.

Ranges are parsed into merged ``(start, end)`` intervals, so counting the
pages of ``"1-1000000000"`` costs no more than counting ``"1-3"``. Only
``parse_page_range`` expands intervals into page numbers, and never past
``MAX_PAGE_NUMBER``.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple

# "7" or "3-5", optional spaces around the hyphen
_TOKEN_PATTERN = re.compile(r"^([0-9]+)\s*(?:-\s*([0-9]+))?$")

# Highest page number parse_page_range will list
MAX_PAGE_NUMBER = 10_000

Interval = Tuple[int, int]


def parse_page_intervals(spec: Optional[str], max_pages: Optional[int] = None) -> List[Interval]:
    """
    Parse a page range string into sorted, merged, inclusive intervals.

    Best effort: malformed tokens are skipped, nothing raises.

    Examples:
        >>> parse_page_intervals("7,1-3,2,4")
        [(1, 4), (7, 7)]
        >>> parse_page_intervals("1-1000000000")
        [(1, 1000000000)]
    """
    if not isinstance(spec, str) or not spec.strip():
        return []
    if max_pages is not None and max_pages <= 0:
        return []

    intervals = []
    for part in spec.split(","):
        interval = _parse_token(part.strip(), max_pages)
        if interval is not None:
            intervals.append(interval)

    return _merge(intervals)


def interval_page_count(intervals: Iterable[Interval]) -> int:
    """Number of pages covered by merged intervals."""
    return sum(end - start + 1 for start, end in intervals)


def format_page_intervals(intervals: Iterable[Interval]) -> str:
    """Render merged intervals as ``"1,3-5,7"``."""
    return ",".join(_format_run(start, end) for start, end in intervals)


def parse_page_range(spec: Optional[str], max_pages: Optional[int] = None) -> list[int]:
    """
    Parse a human-friendly page range string into 1-based page numbers.

    Pages above ``max_pages`` are dropped, and so are pages above
    ``MAX_PAGE_NUMBER``. Use ``parse_page_intervals`` to count pages of
    arbitrarily large ranges.

    Args:
        spec: String like "1,3-5,7"
        max_pages: Optional page count; pages beyond it are dropped

    Returns:
        Sorted list of distinct page numbers

    Examples:
        >>> parse_page_range("1,3-5,7")
        [1, 3, 4, 5, 7]
        >>> parse_page_range("5-3")
        []
        >>> parse_page_range("1,1,2-2")
        [1, 2]
        >>> parse_page_range("1,3-5,10", max_pages=5)
        [1, 3, 4, 5]
    """
    limit = MAX_PAGE_NUMBER if max_pages is None else min(max_pages, MAX_PAGE_NUMBER)

    pages: list[int] = []
    for start, end in parse_page_intervals(spec, max_pages=limit):
        pages.extend(range(start, end + 1))
    return pages


def _parse_token(token: str, max_pages: Optional[int]) -> Optional[Interval]:
    """Parse '7' or '3-5' into an interval, None when malformed or empty."""
    match = _TOKEN_PATTERN.match(token)
    if not match:
        return None

    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) is not None else start
    if start > end:
        return None

    start = max(start, 1)
    if max_pages is not None:
        end = min(end, max_pages)

    if start > end:
        return None
    return start, end


def _merge(intervals: List[Interval]) -> List[Interval]:
    """Merge overlapping and adjacent intervals."""
    merged: List[Interval] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1] + 1:
            if end > merged[-1][1]:
                merged[-1] = (merged[-1][0], end)
        else:
            merged.append((start, end))
    return merged


def format_page_range(pages: Iterable[int]) -> str:
    """
    Render page numbers in the compact form ``parse_page_range`` reads.

    Examples:
        >>> format_page_range([7, 1, 3, 4, 5, 4])
        '1,3-5,7'
    """
    return format_page_intervals(_merge([(p, p) for p in set(pages) if p >= 1]))


def _format_run(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}-{end}"
