"""
Services layer for the print shop.

This module contains the business logic services:
- PricingService: Store pricing registry and price previews
- OrderService: Order placement, status tracking and store queues

Both are created once in create_app() and shared by request threads;
each guards its own state with a lock.
"""

from .pricing_service import PricingService
from .order_service import OrderService, OrderBook

__all__ = [
    "PricingService",
    "OrderService",
    "OrderBook",
]
