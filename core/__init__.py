"""
Core module for the print shop.

Contains fundamental infrastructure components:
- exceptions: Custom exception hierarchy shared by validation, services and routes
"""

from .exceptions import (
    PrintShopError,
    OrderValidationError,
    StoreNotSelectedError,
    NoFilesSelectedError,
    InvalidColorPagesError,
    InvalidCopiesError,
    InvalidOrderStatusError,
    UnsupportedFileTypeError,
    NotFoundError,
    StoreNotFoundError,
    OrderNotFoundError,
)

__all__ = [
    "PrintShopError",
    "OrderValidationError",
    "StoreNotSelectedError",
    "NoFilesSelectedError",
    "InvalidColorPagesError",
    "InvalidCopiesError",
    "InvalidOrderStatusError",
    "UnsupportedFileTypeError",
    "NotFoundError",
    "StoreNotFoundError",
    "OrderNotFoundError",
]
