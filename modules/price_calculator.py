"""
Order price calculator.

The one place print orders are priced. The order form preview, order
submission and the admin pricing preview all call ``price_order``.

Per file:
    base    = unit price × pages × copies
              (mixed: color pages at the color rate, the rest at the B&W rate)
    paper   = paper surcharge × pages × copies     (when special paper is chosen)
    binding = binding price, once per file           (not multiplied by copies)
    total   = base + paper + binding

Pure functions: no I/O, no shared state. Malformed file specs degrade to
zero-priced components instead of raising, so a half-edited order can
always be previewed.
"""

from __future__ import annotations

from typing import Iterable, Optional

from logging_config import get_logger
from models.file_spec import FileSpec
from models.price_breakdown import FilePriceBreakdown, OrderPriceBreakdown
from models.pricing import DEFAULT_PRICING_TABLE, PricingTable
from models.print_options import PaperType, PrintType
from modules.page_range import (
    format_page_intervals,
    interval_page_count,
    parse_page_intervals,
)


# Module logger
logger = get_logger(__name__)


def price_file(spec: FileSpec, table: PricingTable) -> FilePriceBreakdown:
    """
    Price a single file against a resolved pricing table.

    Args:
        spec: File print specification
        table: Pricing table with defaults already filled in

    Returns:
        FilePriceBreakdown for the file
    """
    pages = spec.effective_page_count
    copies = spec.effective_copies

    color_rate = table.print_rate(PrintType.COLOR, spec.double_sided)
    bw_rate = table.print_rate(PrintType.BLACK_AND_WHITE, spec.double_sided)

    if spec.print_type is PrintType.MIXED:
        intervals = parse_page_intervals(spec.color_pages, max_pages=pages)
        color_pages = format_page_intervals(intervals)
        color_count = interval_page_count(intervals)
        bw_count = pages - color_count
    elif spec.print_type is PrintType.COLOR:
        color_pages = ""
        color_count = pages
        bw_count = 0
    else:
        color_pages = ""
        color_count = 0
        bw_count = pages

    base_price = (color_rate * color_count + bw_rate * bw_count) * copies

    paper_rate = 0.0
    if spec.special_paper is not PaperType.NONE:
        paper_rate = table.paper_rate(spec.special_paper)
    paper_cost = paper_rate * pages * copies

    binding_rate = 0.0
    if spec.binding.applies:
        binding_rate = table.binding_rate(spec.binding.type)
    binding_cost = binding_rate

    return FilePriceBreakdown(
        name=spec.name,
        page_count=pages,
        copies=copies,
        color_page_count=color_count,
        bw_page_count=bw_count,
        color_pages=color_pages,
        color_rate=color_rate,
        bw_rate=bw_rate,
        paper_rate=paper_rate,
        binding_rate=binding_rate,
        base_price=base_price,
        paper_cost=paper_cost,
        binding_cost=binding_cost,
    )


def price_order(
    files: Iterable[FileSpec],
    pricing_table: Optional[PricingTable] = None,
    defaults: PricingTable = DEFAULT_PRICING_TABLE,
) -> OrderPriceBreakdown:
    """
    Price every file of an order.

    Args:
        files: File specs in upload order
        pricing_table: Store pricing, possibly partial; None prices at defaults
        defaults: Table supplying every price the store table omits

    Returns:
        OrderPriceBreakdown with one entry per file
    """
    table = (pricing_table or PricingTable()).resolve(defaults)
    breakdowns = [price_file(spec, table) for spec in files]
    result = OrderPriceBreakdown(files=breakdowns)

    logger.debug(f"Priced {len(breakdowns)} file(s): total={result.total:.2f}")
    return result


def calculate_order_price(
    files: Iterable[FileSpec],
    pricing_table: Optional[PricingTable] = None,
    defaults: PricingTable = DEFAULT_PRICING_TABLE,
) -> float:
    """Total price of an order, unrounded."""
    return price_order(files, pricing_table, defaults).total
