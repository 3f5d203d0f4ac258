"""
Order data models.

An order is one customer submission to one store: a document name, the
files in upload order, and the price computed when it was placed.

Lifecycle:
    Pending -> Processing -> Shipped -> Delivered / Completed
    (any status may move to Cancelled)

The files are a tuple of frozen FileSpecs. Status changes replace the
order's status field but never touch the files or the recorded price.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .file_spec import FileSpec


class OrderStatus(Enum):
    """Fulfilment status of an order, as shown to the customer."""

    PENDING = "Pending"
    """Placed, waiting in the store's queue."""

    PROCESSING = "Processing"
    """The store is printing it."""

    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """
    A placed print order.

    ``total_price`` is the unrounded total computed at submission against
    the store's pricing at that moment.
    """

    order_id: str
    """Unique order identifier."""

    store_id: str
    """Store the order was placed with."""

    document_name: str = ""
    """Customer-provided name for the whole order."""

    customer_name: str = ""
    """Who placed the order (display only)."""

    description: str = ""
    """Optional notes for the store."""

    files: Tuple[FileSpec, ...] = ()
    """Files in upload order."""

    status: OrderStatus = OrderStatus.PENDING
    """Current fulfilment status."""

    total_price: float = 0.0
    """Price recorded at submission."""

    created_at: datetime = field(default_factory=_now)
    updated_at: Optional[datetime] = None

    @property
    def is_pending(self) -> bool:
        return self.status is OrderStatus.PENDING

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape returned by the API."""
        return {
            "orderId": self.order_id,
            "storeId": self.store_id,
            "documentName": self.document_name,
            "customerName": self.customer_name,
            "description": self.description,
            "files": [f.to_dict() for f in self.files],
            "status": self.status.value,
            "totalPrice": round(self.total_price, 2),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

