"""
Print option enumerations.

Values are the wire strings used by the order forms and the store
pricing documents, so ``PrintType("mixed")`` parses a request field directly.
Unknown strings never raise: each enum has a ``parse`` that falls back to a
neutral member.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class PrintType(Enum):
    """How the pages of a file are printed."""

    BLACK_AND_WHITE = "blackAndWhite"
    """Every page in black and white."""

    COLOR = "color"
    """Every page in color."""

    MIXED = "mixed"
    """Pages listed in ``colorPages`` in color, the rest black and white."""

    @classmethod
    def parse(cls, value: Any) -> "PrintType":
        """Parse a wire value, treating anything unknown as black and white."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.BLACK_AND_WHITE


class PaperType(Enum):
    """Paper stock. Everything except NONE carries a per-page surcharge."""

    NONE = "none"
    NORMAL = "normal"
    GLOSSY = "glossy"
    MATTE = "matte"
    TRANSPARENT = "transparent"

    @classmethod
    def parse(cls, value: Any) -> "PaperType":
        """Parse a wire value; unknown paper means no surcharge."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


class BindingType(Enum):
    """Finishing service, charged once per file."""

    NONE = "none"
    SPIRAL = "spiralBinding"
    STAPLING = "staplingBinding"
    HARDCOVER = "hardcoverBinding"

    @classmethod
    def parse(cls, value: Any) -> "BindingType":
        """Parse a wire value; unknown binding means no binding charge."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.NONE
