"""Helper modules for the print shop: page ranges, pricing, page estimates, validation."""

__all__ = [
    "order_validation",
    "page_estimator",
    "page_range",
    "price_calculator",
]
