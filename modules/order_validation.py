"""
Order submission checks.

Run before an order is priced and stored. The calculator accepts anything;
these checks reject orders that would be priced misleadingly (a mixed file
with no usable color pages prices as all black and white).
"""

from __future__ import annotations

from typing import Optional, Sequence

from core.exceptions import (
    InvalidColorPagesError,
    InvalidCopiesError,
    NoFilesSelectedError,
    StoreNotSelectedError,
)
from models.file_spec import FileSpec
from models.print_options import PrintType
from modules.page_range import parse_page_intervals


def validate_submission(
    files: Sequence[FileSpec],
    store_id: Optional[str],
    max_copies: Optional[int] = None,
) -> None:
    """
    Raise on the first reason the order cannot be placed.

    Raises:
        StoreNotSelectedError: No store id
        NoFilesSelectedError: Empty file list
        InvalidColorPagesError: Mixed file without color pages inside its page count
        InvalidCopiesError: More copies than ``max_copies``
    """
    if not store_id or not str(store_id).strip():
        raise StoreNotSelectedError()

    if not files:
        raise NoFilesSelectedError()

    for spec in files:
        if spec.print_type is PrintType.MIXED and not has_color_pages(spec):
            raise InvalidColorPagesError(spec.name, spec.color_pages)

        if max_copies is not None and spec.copies > max_copies:
            raise InvalidCopiesError(spec.name, spec.copies, max_copies)


def has_color_pages(spec: FileSpec) -> bool:
    """True when the color page list names at least one printable page."""
    max_pages = spec.effective_page_count or None
    return bool(parse_page_intervals(spec.color_pages, max_pages=max_pages))
