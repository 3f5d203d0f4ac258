"""Page count estimation for uploaded documents."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Dict, Optional

from pypdf import PdfReader

from logging_config import get_logger
from models.file_spec import BindingChoice, FileSpec
from models.print_options import PaperType, PrintType


logger = get_logger(__name__)

PDF_MIME_TYPE = "application/pdf"

# Average size of one printed page, in KB, by MIME type
AVERAGE_PAGE_SIZE_KB: Dict[str, int] = {
    # Documents
    PDF_MIME_TYPE: 100,
    "application/msword": 30,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": 40,
    "application/vnd.ms-powerpoint": 250,
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": 300,
    "application/vnd.ms-excel": 50,
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": 70,
    "text/plain": 3,
    "application/rtf": 10,
    # Images print one per page
    "image/jpeg": 500,
    "image/png": 500,
    "image/gif": 500,
    "image/bmp": 500,
    "image/webp": 500,
    # OpenDocument
    "application/vnd.oasis.opendocument.text": 30,
    "application/vnd.oasis.opendocument.spreadsheet": 50,
    "application/vnd.oasis.opendocument.presentation": 200,
    # Other
    "application/epub+zip": 20,
    "application/x-iwork-pages-sffpages": 40,
}

DEFAULT_PAGE_SIZE_KB = 100

ALLOWED_MIME_TYPES = frozenset(AVERAGE_PAGE_SIZE_KB)


def is_supported(mime_type: str) -> bool:
    return mime_type in ALLOWED_MIME_TYPES


def estimate_page_count(mime_type: str, size_bytes: int) -> int:
    """
    Estimate pages from file size. Never returns less than 1.

    Args:
        mime_type: MIME type reported by the upload
        size_bytes: File size in bytes

    Returns:
        Estimated page count
    """
    avg_page_kb = AVERAGE_PAGE_SIZE_KB.get(mime_type, DEFAULT_PAGE_SIZE_KB)
    size_kb = max(size_bytes, 0) / 1024
    return max(1, math.ceil(size_kb / avg_page_kb))


class PageCountEstimator:
    """Count pages exactly for PDFs, estimate for everything else."""

    def count_pages(
        self,
        path: Optional[str | Path],
        mime_type: str,
        size_bytes: int,
    ) -> int:
        if path is not None and mime_type == PDF_MIME_TYPE:
            pages = self._count_pdf_pages(Path(path))
            if pages > 0:
                return pages

        return estimate_page_count(mime_type, size_bytes)

    def _count_pdf_pages(self, path: Path) -> int:
        try:
            reader = PdfReader(str(path))
            return len(reader.pages)
        except Exception as exc:
            logger.warning(f"PDF page count failed for {path.name}, estimating instead: {exc}")
            return 0

    def build_file_spec(
        self,
        name: str,
        mime_type: str,
        size_bytes: int,
        page_count: int,
    ) -> FileSpec:
        """Default print options for a freshly uploaded file."""
        return FileSpec(
            name=name,
            page_count=page_count,
            copies=1,
            print_type=PrintType.BLACK_AND_WHITE,
            color_pages="",
            double_sided=True,
            special_paper=PaperType.NONE,
            binding=BindingChoice(),
            specific_requirements="",
            mime_type=mime_type,
            size_bytes=size_bytes,
        )
