"""
Order placement service.

Validates, prices and records orders, and answers queue questions for a
store ("how long until my order is ready?").

Flow:
    1. Free text is sanitised (document name, description, requirements)
    2. validate_submission() rejects orders that cannot be placed
    3. The store's current pricing prices the files
    4. The order is recorded as Pending with that total

Thread Safety:
    - OrderBook uses threading.Lock for all operations
    - Orders hold frozen FileSpecs; only status fields change after placement
"""

from __future__ import annotations

import math
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

import bleach

from core.exceptions import (
    InvalidOrderStatusError,
    OrderNotFoundError,
    OrderValidationError,
    StoreNotFoundError,
)
from logging_config import get_logger
from models.file_spec import FileSpec
from models.order import Order, OrderStatus
from models.price_breakdown import OrderPriceBreakdown
from modules.order_validation import validate_submission
from services.pricing_service import PricingService


# Module logger
logger = get_logger(__name__)


def sanitize_text(text: Optional[str], max_length: Optional[int] = None) -> str:
    """Strip markup and surrounding whitespace from user input."""
    if not text:
        return ""
    text = bleach.clean(text.strip(), tags=[], strip=True)
    if max_length and len(text) > max_length:
        text = text[:max_length]
    return text


class OrderBook:
    """
    Thread-safe in-memory storage for placed orders.

    Orders are stored by order_id. Updates replace the stored order under
    the lock, so readers never see a half-applied change.
    """

    def __init__(self):
        self._orders: Dict[str, Order] = {}
        self._lock = threading.Lock()

    def add(self, order: Order) -> None:
        with self._lock:
            self._orders[order.order_id] = order

    def get(self, order_id: str) -> Order:
        with self._lock:
            order = self._orders.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def set_status(self, order_id: str, status: OrderStatus) -> Order:
        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)
            updated = replace(order, status=status, updated_at=datetime.now(timezone.utc))
            self._orders[order_id] = updated
            return updated

    def find(
        self,
        store_id: Optional[str] = None,
        status: Optional[OrderStatus] = None,
    ) -> List[Order]:
        """Orders matching the filters, newest first."""
        with self._lock:
            orders = list(self._orders.values())

        if store_id is not None:
            orders = [o for o in orders if o.store_id == store_id]
        if status is not None:
            orders = [o for o in orders if o.status is status]

        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def count(self) -> int:
        with self._lock:
            return len(self._orders)


class OrderService:
    """
    Places orders and tracks their status.

    Args:
        pricing_service: Source of store pricing
        max_copies: Upper limit of copies per file
        max_requirements_length: Limit for per-file instructions and description
        max_document_name_length: Limit for the order's document name
        delivery_base_hours: Turnaround with an empty queue
        delivery_hours_per_batch: Extra hours per full batch of pending orders
        delivery_batch_size: Pending orders per batch
    """

    def __init__(
        self,
        pricing_service: PricingService,
        max_copies: Optional[int] = 1000,
        max_requirements_length: int = 1000,
        max_document_name_length: int = 200,
        delivery_base_hours: int = 24,
        delivery_hours_per_batch: int = 2,
        delivery_batch_size: int = 5,
    ):
        self.pricing_service = pricing_service
        self.max_copies = max_copies
        self.max_requirements_length = max_requirements_length
        self.max_document_name_length = max_document_name_length
        self.delivery_base_hours = delivery_base_hours
        self.delivery_hours_per_batch = delivery_hours_per_batch
        self.delivery_batch_size = max(delivery_batch_size, 1)
        self.order_book = OrderBook()

    # =========================================================================
    # PLACEMENT
    # =========================================================================

    def submit_order(
        self,
        document_name: str,
        store_id: Optional[str],
        files: Sequence[FileSpec],
        description: str = "",
        customer_name: str = "",
    ) -> Order:
        """
        Validate, price and record an order.

        Returns:
            The placed Order (status Pending)

        Raises:
            OrderValidationError: The order cannot be placed
            StoreNotFoundError: The store has no pricing registered
        """
        clean_files = tuple(
            replace(
                spec,
                specific_requirements=sanitize_text(
                    spec.specific_requirements, self.max_requirements_length
                ),
            )
            for spec in files
        )

        try:
            validate_submission(clean_files, store_id, max_copies=self.max_copies)
        except OrderValidationError as e:
            logger.warning(f"Order rejected: {e}")
            raise

        if not self.pricing_service.has_store(store_id):
            raise StoreNotFoundError(store_id)

        breakdown = self.pricing_service.preview(clean_files, store_id=store_id)

        order = Order(
            order_id=uuid.uuid4().hex,
            store_id=store_id,
            document_name=sanitize_text(document_name, self.max_document_name_length),
            customer_name=sanitize_text(customer_name, self.max_document_name_length),
            description=sanitize_text(description, self.max_requirements_length),
            files=clean_files,
            status=OrderStatus.PENDING,
            total_price=breakdown.total,
        )
        self.order_book.add(order)

        logger.info(
            f"Order {order.order_id[:8]} placed with store {store_id}: "
            f"{len(clean_files)} file(s), total {breakdown.total:.2f}"
        )
        return order

    def reprice(self, order_id: str) -> OrderPriceBreakdown:
        """Price an order's files again against the store's current pricing."""
        order = self.order_book.get(order_id)
        return self.pricing_service.preview(order.files, store_id=order.store_id)

    # =========================================================================
    # LOOKUP AND STATUS
    # =========================================================================

    def get_order(self, order_id: str) -> Order:
        return self.order_book.get(order_id)

    def list_orders(
        self,
        store_id: Optional[str] = None,
        status: Optional[str | OrderStatus] = None,
    ) -> List[Order]:
        status_filter = self._parse_status(status) if status is not None else None
        return self.order_book.find(store_id=store_id, status=status_filter)

    def update_status(self, order_id: str, status: str | OrderStatus) -> Order:
        """
        Move an order to a new status.

        Raises:
            InvalidOrderStatusError: Unknown status string
            OrderNotFoundError: Unknown order
        """
        new_status = self._parse_status(status)
        order = self.order_book.set_status(order_id, new_status)
        logger.info(f"Order {order_id[:8]} status → {new_status.value}")
        return order

    @staticmethod
    def _parse_status(status: str | OrderStatus) -> OrderStatus:
        if isinstance(status, OrderStatus):
            return status
        try:
            return OrderStatus(status)
        except ValueError:
            raise InvalidOrderStatusError(str(status), OrderStatus.values())

    # =========================================================================
    # QUEUE
    # =========================================================================

    def pending_count(self, store_id: str) -> int:
        return sum(1 for order in self.order_book.find(store_id=store_id) if order.is_pending)

    def estimated_delivery_hours(self, store_id: str) -> int:
        batches = self.pending_count(store_id) // self.delivery_batch_size
        return self.delivery_base_hours + batches * self.delivery_hours_per_batch

    def estimated_delivery_time(self, store_id: str) -> str:
        """Human-readable turnaround, e.g. "24 hours" or "2 days"."""
        hours = self.estimated_delivery_hours(store_id)
        if hours <= 24:
            return f"{hours} hours"
        if hours <= 48:
            return "2 days"
        return f"{math.ceil(hours / 24)} days"

    def queue_status(self, store_id: str) -> str:
        pending = self.pending_count(store_id)
        if pending == 0:
            return "No queue"
        if pending <= 5:
            return "Short queue"
        if pending <= 15:
            return "Medium queue"
        return "Long queue"
