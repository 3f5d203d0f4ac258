"""
Custom exceptions for the print shop.

Exception Hierarchy:
    PrintShopError (base)
    ├── OrderValidationError       - Order rejected before pricing (HTTP 400)
    │   ├── StoreNotSelectedError   - No store chosen for the order
    │   ├── NoFilesSelectedError    - Order has no files
    │   ├── InvalidColorPagesError  - Mixed file without usable color pages
    │   ├── InvalidCopiesError      - Copies outside the accepted range
    │   └── InvalidOrderStatusError - Unknown order status
    ├── UnsupportedFileTypeError   - Upload with a MIME type we cannot print (HTTP 415)
    └── NotFoundError              - Lookup failures (HTTP 404)
        ├── StoreNotFoundError
        └── OrderNotFoundError

Usage:
    The pricing core never raises. These exceptions belong to the layers
    around it (validation, services, routes), which surface them to the user.
"""

from typing import Optional, Dict, Any


class PrintShopError(Exception):
    """
    Base exception for all print shop errors.

    All custom exceptions inherit from this class, allowing callers to catch
    all application-specific errors with a single except clause if needed.
    """

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly error payload."""
        return {"error": self.message, "details": dict(self.details)}


# =============================================================================
# VALIDATION ERRORS - The order is rejected, nothing is priced or stored
# =============================================================================

class OrderValidationError(PrintShopError):
    """
    An order failed submission checks.

    Raised by the validation layer before the calculator is called.
    The message is user-facing.
    """

    status_code = 400

    def __init__(
        self,
        message: str,
        title: str = "Invalid Order",
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        error_details.setdefault("title", title)
        super().__init__(message, error_details)
        self.title = title


class StoreNotSelectedError(OrderValidationError):
    """The order does not name a store to print at."""

    def __init__(self):
        super().__init__(
            "Please select a store before placing the order.",
            title="No Store Selected",
        )


class NoFilesSelectedError(OrderValidationError):
    """The order contains no files."""

    def __init__(self):
        super().__init__(
            "Please upload at least one file to proceed.",
            title="No Files Selected",
        )


class InvalidColorPagesError(OrderValidationError):
    """
    A mixed-mode file does not say which pages print in color.

    Without color pages the whole file would silently be priced as
    black and white, so the order is rejected instead.
    """

    def __init__(self, file_name: str, color_pages: str = ""):
        super().__init__(
            f"Please specify which pages to print in color for file: {file_name}",
            title="Invalid Color Pages",
            details={"file_name": file_name, "color_pages": color_pages},
        )
        self.file_name = file_name
        self.color_pages = color_pages


class InvalidCopiesError(OrderValidationError):
    """A file requests more copies than the shop accepts."""

    def __init__(self, file_name: str, copies: int, max_copies: int):
        super().__init__(
            f"Too many copies for file {file_name}. Maximum is {max_copies} copies.",
            title="Invalid Copies",
            details={"file_name": file_name, "copies": copies, "max_copies": max_copies},
        )
        self.file_name = file_name
        self.copies = copies
        self.max_copies = max_copies


class InvalidOrderStatusError(OrderValidationError):
    """An order status update used a status we do not know."""

    def __init__(self, status: str, allowed: list[str]):
        super().__init__(
            f"Unknown order status: {status}",
            title="Invalid Status",
            details={"status": status, "allowed": allowed},
        )
        self.status = status


# =============================================================================
# INTAKE ERRORS
# =============================================================================

class UnsupportedFileTypeError(PrintShopError):
    """
    An uploaded file has a MIME type the shop cannot print.

    The user should convert the document to a supported format.
    """

    status_code = 415

    def __init__(self, file_name: str, mime_type: str):
        message = (
            f"{file_name} is not a supported file type. Please upload a document "
            "file in one of the supported formats."
        )
        details = {"file_name": file_name, "mime_type": mime_type}
        super().__init__(message, details)
        self.file_name = file_name
        self.mime_type = mime_type


# =============================================================================
# LOOKUP ERRORS
# =============================================================================

class NotFoundError(PrintShopError):
    """Base class for missing stores and orders."""

    status_code = 404


class StoreNotFoundError(NotFoundError):
    """No pricing has been registered for this store."""

    def __init__(self, store_id: str):
        super().__init__(f"Store not found: {store_id}", {"store_id": store_id})
        self.store_id = store_id


class OrderNotFoundError(NotFoundError):
    """No order with this id exists in the order book."""

    def __init__(self, order_id: str):
        super().__init__(f"Order not found: {order_id}", {"order_id": order_id})
        self.order_id = order_id
