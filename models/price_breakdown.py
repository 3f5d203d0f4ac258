"""
Price breakdown models.

Produced by the price calculator. Amounts are kept unrounded; rounding to
two decimals happens only when a breakdown is converted for display.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


def round_price(amount: float) -> float:
    """Round an amount to two decimals for display."""
    return round(amount, 2)


def format_price(amount: float, symbol: str = "₹") -> str:
    """Render an amount the way the order summary shows it, e.g. ``₹12.50``."""
    return f"{symbol}{amount:.2f}"


@dataclass(frozen=True)
class FilePriceBreakdown:
    """How one file's total was reached."""

    name: str
    page_count: int
    copies: int
    color_page_count: int
    bw_page_count: int
    color_pages: str  # canonical color pages of a mixed file, e.g. "1,3-5"
    color_rate: float
    bw_rate: float
    paper_rate: float
    binding_rate: float
    base_price: float
    paper_cost: float
    binding_cost: float

    @property
    def total(self) -> float:
        return self.base_price + self.paper_cost + self.binding_cost

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a display dictionary (amounts rounded)."""
        return {
            "name": self.name,
            "pageCount": self.page_count,
            "copies": self.copies,
            "colorPageCount": self.color_page_count,
            "bwPageCount": self.bw_page_count,
            "colorPages": self.color_pages,
            "rates": {
                "color": self.color_rate,
                "blackAndWhite": self.bw_rate,
                "paper": self.paper_rate,
                "binding": self.binding_rate,
            },
            "basePrice": round_price(self.base_price),
            "paperCost": round_price(self.paper_cost),
            "bindingCost": round_price(self.binding_cost),
            "total": round_price(self.total),
        }


@dataclass(frozen=True)
class OrderPriceBreakdown:
    """Per-file breakdowns in upload order, and their sum."""

    files: List[FilePriceBreakdown] = field(default_factory=list)

    @property
    def total(self) -> float:
        return sum((f.total for f in self.files), 0.0)

    def to_dict(self, currency_symbol: str = "₹") -> Dict[str, Any]:
        return {
            "files": [f.to_dict() for f in self.files],
            "total": round_price(self.total),
            "display": format_price(self.total, currency_symbol),
        }
