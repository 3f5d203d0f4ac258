"""
Store pricing tables.

A pricing table holds the unit prices a store charges:

    blackAndWhite: {singleSided, doubleSided}              per page
    color:         {singleSided, doubleSided}              per page
    binding:       {spiralBinding, staplingBinding, hardcoverBinding}  per file
    paperTypes:    {normal, glossy, matte, transparent}    per page surcharge

Store tables may be partial. A leaf set to ``None`` is absent and is taken
from the default table when the table is resolved, leaf by leaf. An
explicit 0 is a real price and is kept. Negative and non-numeric prices
are clamped to 0 whenever a table is built.

Tables are frozen so one resolved table can be shared by concurrent
price computations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, ClassVar, Dict, Mapping, Optional

from .print_options import BindingType, PaperType, PrintType


def clamp_rate(value: Any) -> Optional[float]:
    """
    Normalise one price from an untrusted pricing document.

    ``None`` stays ``None`` (absent). Negative numbers and anything that is
    not a finite number become 0. Numeric strings such as ``"4.5"`` are
    accepted, the way the pricing form submits them.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0.0
    if not isinstance(value, (int, float)):
        return 0.0
    value = float(value)
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


class _RateGroup:
    """Shared ingest/export/merge behaviour for the leaf groups."""

    WIRE_KEYS: ClassVar[Dict[str, str]] = {}

    def __post_init__(self):
        # Every leaf is clamped however the group was built
        for name in self.WIRE_KEYS:
            object.__setattr__(self, name, clamp_rate(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: Any):
        if not isinstance(data, Mapping):
            return cls()
        return cls(**{
            name: data.get(wire)
            for name, wire in cls.WIRE_KEYS.items()
        })

    def to_dict(self) -> Dict[str, float]:
        return {
            wire: getattr(self, name)
            for name, wire in self.WIRE_KEYS.items()
            if getattr(self, name) is not None
        }

    def merged_with(self, defaults):
        """Fill absent leaves from ``defaults``."""
        missing = {
            f.name: getattr(defaults, f.name)
            for f in fields(self)
            if getattr(self, f.name) is None
        }
        return replace(self, **missing) if missing else self


@dataclass(frozen=True)
class SidedRates(_RateGroup):
    """Per-page prices for one print category."""

    single_sided: Optional[float] = None
    double_sided: Optional[float] = None

    WIRE_KEYS: ClassVar[Dict[str, str]] = {
        "single_sided": "singleSided",
        "double_sided": "doubleSided",
    }

    def rate(self, double_sided: bool) -> Optional[float]:
        return self.double_sided if double_sided else self.single_sided


@dataclass(frozen=True)
class BindingRates(_RateGroup):
    """Flat per-file binding prices."""

    spiral_binding: Optional[float] = None
    stapling_binding: Optional[float] = None
    hardcover_binding: Optional[float] = None

    WIRE_KEYS: ClassVar[Dict[str, str]] = {
        "spiral_binding": "spiralBinding",
        "stapling_binding": "staplingBinding",
        "hardcover_binding": "hardcoverBinding",
    }

    def rate(self, binding_type: BindingType) -> Optional[float]:
        if binding_type is BindingType.SPIRAL:
            return self.spiral_binding
        if binding_type is BindingType.STAPLING:
            return self.stapling_binding
        if binding_type is BindingType.HARDCOVER:
            return self.hardcover_binding
        return None


@dataclass(frozen=True)
class PaperRates(_RateGroup):
    """Per-page paper surcharges."""

    normal: Optional[float] = None
    glossy: Optional[float] = None
    matte: Optional[float] = None
    transparent: Optional[float] = None

    WIRE_KEYS: ClassVar[Dict[str, str]] = {
        "normal": "normal",
        "glossy": "glossy",
        "matte": "matte",
        "transparent": "transparent",
    }

    def rate(self, paper_type: PaperType) -> Optional[float]:
        if paper_type is PaperType.NORMAL:
            return self.normal
        if paper_type is PaperType.GLOSSY:
            return self.glossy
        if paper_type is PaperType.MATTE:
            return self.matte
        if paper_type is PaperType.TRANSPARENT:
            return self.transparent
        return None


@dataclass(frozen=True)
class PricingTable:
    """
    A store's unit prices, possibly partial.

    Leaves are clamped on construction (negative or non-numeric prices
    become 0). Use ``from_dict`` to ingest a pricing document and
    ``resolve`` to fill the gaps from a default table before pricing.
    """

    black_and_white: SidedRates = field(default_factory=SidedRates)
    color: SidedRates = field(default_factory=SidedRates)
    binding: BindingRates = field(default_factory=BindingRates)
    paper_types: PaperRates = field(default_factory=PaperRates)

    @classmethod
    def from_dict(cls, data: Any) -> "PricingTable":
        """
        Create from a camelCase pricing document (e.g., a store's ``pricing``).

        Missing groups and keys stay absent. Extra keys such as
        ``lastUpdated`` are ignored.
        """
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            black_and_white=SidedRates.from_dict(data.get("blackAndWhite")),
            color=SidedRates.from_dict(data.get("color")),
            binding=BindingRates.from_dict(data.get("binding")),
            paper_types=PaperRates.from_dict(data.get("paperTypes")),
        )

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Convert to the camelCase pricing document, omitting absent leaves."""
        return {
            "blackAndWhite": self.black_and_white.to_dict(),
            "color": self.color.to_dict(),
            "binding": self.binding.to_dict(),
            "paperTypes": self.paper_types.to_dict(),
        }

    def resolve(self, defaults: "PricingTable") -> "PricingTable":
        """Return a copy with every absent leaf taken from ``defaults``."""
        return PricingTable(
            black_and_white=self.black_and_white.merged_with(defaults.black_and_white),
            color=self.color.merged_with(defaults.color),
            binding=self.binding.merged_with(defaults.binding),
            paper_types=self.paper_types.merged_with(defaults.paper_types),
        )

    def print_rate(self, print_type: PrintType, double_sided: bool) -> float:
        """Per-page price for a black-and-white or color page."""
        if print_type is PrintType.COLOR:
            rate = self.color.rate(double_sided)
        else:
            rate = self.black_and_white.rate(double_sided)
        return rate or 0.0

    def binding_rate(self, binding_type: BindingType) -> float:
        return self.binding.rate(binding_type) or 0.0

    def paper_rate(self, paper_type: PaperType) -> float:
        return self.paper_types.rate(paper_type) or 0.0


# Canonical defaults used when a store omits a price. The order summary
# screen once carried a second set (spiral 30, stapling 15, hardcover 100);
# this table is the only one in use.
DEFAULT_PRICING_TABLE = PricingTable(
    black_and_white=SidedRates(single_sided=2.0, double_sided=3.0),
    color=SidedRates(single_sided=5.0, double_sided=8.0),
    binding=BindingRates(spiral_binding=25.0, stapling_binding=10.0, hardcover_binding=50.0),
    paper_types=PaperRates(normal=0.0, glossy=5.0, matte=7.0, transparent=10.0),
)
