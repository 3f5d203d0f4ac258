"""
Store pricing service.

Keeps each store's pricing table and answers price previews.

Thread Safety:
    - The store registry is guarded by a threading.Lock
    - Tables are frozen, so a table read under the lock is priced
      after the lock is released

Usage:
    pricing_service = PricingService()
    pricing_service.set_pricing("store-1", {"color": {"singleSided": 6}})

    breakdown = pricing_service.preview(files, store_id="store-1")
    breakdown.total
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, List, Optional

from core.exceptions import StoreNotFoundError
from logging_config import get_logger
from models.file_spec import FileSpec
from models.price_breakdown import OrderPriceBreakdown
from models.pricing import DEFAULT_PRICING_TABLE, PricingTable
from modules.price_calculator import price_order


# Module logger
logger = get_logger(__name__)


class PricingService:
    """
    Registry of store pricing tables.

    Stores keep their tables as ingested (possibly partial). Lookups return
    the table resolved against ``defaults``, leaf by leaf.
    """

    def __init__(self, defaults: PricingTable = DEFAULT_PRICING_TABLE):
        self.defaults = defaults
        self._tables: Dict[str, PricingTable] = {}
        self._lock = threading.Lock()

    def set_pricing(self, store_id: str, raw_pricing: Any) -> PricingTable:
        """
        Ingest and store a store's pricing document.

        Negative or non-numeric prices are clamped to 0 as the table is built, so the
        calculator only ever sees valid tables.

        Args:
            store_id: Store identifier
            raw_pricing: camelCase pricing document (may be partial)

        Returns:
            The stored (unresolved) table
        """
        table = PricingTable.from_dict(raw_pricing)
        with self._lock:
            is_new = store_id not in self._tables
            self._tables[store_id] = table

        action = "registered" if is_new else "updated"
        logger.info(f"Pricing {action} for store {store_id}")
        return table

    def has_store(self, store_id: str) -> bool:
        with self._lock:
            return store_id in self._tables

    def list_stores(self) -> List[str]:
        with self._lock:
            return sorted(self._tables)

    def remove_store(self, store_id: str) -> None:
        with self._lock:
            if self._tables.pop(store_id, None) is None:
                raise StoreNotFoundError(store_id)
        logger.info(f"Pricing removed for store {store_id}")

    def get_store_table(self, store_id: str) -> PricingTable:
        """The store's table as ingested, without defaults."""
        with self._lock:
            table = self._tables.get(store_id)
        if table is None:
            raise StoreNotFoundError(store_id)
        return table

    def get_pricing(self, store_id: Optional[str] = None) -> PricingTable:
        """
        Effective pricing for a store.

        Args:
            store_id: Store identifier, or None for the default table

        Returns:
            Fully resolved PricingTable

        Raises:
            StoreNotFoundError: No pricing registered for store_id
        """
        if store_id is None:
            return self.defaults
        return self.get_store_table(store_id).resolve(self.defaults)

    def preview(
        self,
        files: Iterable[FileSpec],
        store_id: Optional[str] = None,
    ) -> OrderPriceBreakdown:
        """
        Price files against a store's current pricing.

        Without a store the files are priced at the default table, the way
        the order form shows a price before a store is picked.
        """
        store_table = None if store_id is None else self.get_store_table(store_id)
        return price_order(files, store_table, defaults=self.defaults)
