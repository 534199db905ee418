"""
Carrier Rate Strategy

Each carrier turns a shipment into rate keys its own way; the resolver and
the quote assembler stay carrier-agnostic. A carrier provides:

    get_zone(shipment)                  -> zone id (via injected zone resolver)
    weight_tier_key(shipment, zone)     -> weight-priced key or None
    volume_tier_key(shipment, zone)     -> cubic-priced key or None
    surcharges                          -> ordered Surcharge classes

candidate_keys() and surcharge_keys() are built from these and are what the
assembler consumes. New carriers subclass CarrierStrategy; nothing else
changes.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Protocol

from .shipment import Shipment
from .surcharges import Surcharge


class PricingMethod(Enum):
    """Competing ways to price the base charge, with their quote labels."""
    WEIGHT = "Rate Weight"
    CUBIC = "Rate Cubic"

    @property
    def label(self) -> str:
        return self.value


# =============================================================================
# COLLABORATORS
# =============================================================================

class ZoneResolver(Protocol):
    def get_zone(self, shipment: Shipment) -> str: ...


class VolumeClassifier(Protocol):
    def classify(self, shipment: Shipment) -> str | None: ...


# =============================================================================
# BASE CLASS
# =============================================================================

class CarrierStrategy(ABC):
    """
    Base class for carrier rate strategies.

    Attributes:
        carrier_code    - Carrier this strategy prices (matches RateCard.carrier_code)
        version         - Stamped on every quote this strategy produces
        surcharges      - Surcharge classes in quote order
    """

    carrier_code: str
    version: str = "0.0.0"
    surcharges: tuple[type[Surcharge], ...] = ()

    def __init__(self, zones: ZoneResolver):
        self.zones = zones

    def get_zone(self, shipment: Shipment) -> str:
        return self.zones.get_zone(shipment)

    @abstractmethod
    def weight_tier_key(self, shipment: Shipment, zone: str) -> str | None:
        """Rate key for weight-based pricing, or None if unavailable."""

    def volume_tier_key(self, shipment: Shipment, zone: str) -> str | None:
        """Rate key for cubic pricing, or None if unavailable. Default: none."""
        return None

    def candidate_keys(self, shipment: Shipment, zone: str) -> dict[PricingMethod, str]:
        """Available pricing methods and their rate keys."""
        candidates = {
            PricingMethod.WEIGHT: self.weight_tier_key(shipment, zone),
            PricingMethod.CUBIC: self.volume_tier_key(shipment, zone),
        }
        return {method: key for method, key in candidates.items() if key is not None}

    def surcharge_keys(self, shipment: Shipment, zone: str) -> list[tuple[str, str]]:
        """(charge name, rate key) for every surcharge that applies, in order."""
        return [
            (s.name, s.rate_key(shipment, zone))
            for s in self.surcharges
            if s.conditions(shipment)
        ]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(carrier_code={self.carrier_code!r})"


__all__ = [
    "PricingMethod",
    "ZoneResolver",
    "VolumeClassifier",
    "CarrierStrategy",
]
