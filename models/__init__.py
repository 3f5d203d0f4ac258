"""
Data models for the print shop.

This module contains dataclasses for:
- PricingTable: A store's unit prices, with the canonical default table
- FileSpec: One uploaded document and its print options
- Order: A placed order and its fulfilment status
- OrderPriceBreakdown: Per-file and total prices from the calculator

Pricing tables and file specs are frozen so they can be shared between
request threads without copying.
"""

from .print_options import PrintType, PaperType, BindingType
from .pricing import (
    PricingTable,
    SidedRates,
    BindingRates,
    PaperRates,
    DEFAULT_PRICING_TABLE,
)
from .file_spec import FileSpec, BindingChoice
from .order import Order, OrderStatus
from .price_breakdown import FilePriceBreakdown, OrderPriceBreakdown, format_price

__all__ = [
    # Print options
    "PrintType",
    "PaperType",
    "BindingType",
    # Pricing
    "PricingTable",
    "SidedRates",
    "BindingRates",
    "PaperRates",
    "DEFAULT_PRICING_TABLE",
    # Files and orders
    "FileSpec",
    "BindingChoice",
    "Order",
    "OrderStatus",
    # Breakdowns
    "FilePriceBreakdown",
    "OrderPriceBreakdown",
    "format_price",
]
