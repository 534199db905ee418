"""
La Poste Rate Strategy

La Poste prices by service and zone only; there is no cubic pricing.

    laground            -> "laground-zone{zone}"
    any other service   -> none

SURCHARGES
----------
    PUDO charge         -> "pudo-charge" (pickup/drop-off delivery)
"""

from rating.shipment import Shipment
from rating.strategy import CarrierStrategy, ZoneResolver
from rating.zones import FixedZoneResolver

from .data import DEFAULT_ZONE, SERVICES
from .surcharges import ALL
from .version import VERSION


class LaPost(CarrierStrategy):
    """La Poste rate strategy."""

    carrier_code = "LAPOST"
    version = VERSION
    surcharges = ALL

    def __init__(self, zones: ZoneResolver | None = None):
        super().__init__(zones if zones is not None else FixedZoneResolver(DEFAULT_ZONE))

    def weight_tier_key(self, shipment: Shipment, zone: str) -> str | None:
        prefix = SERVICES.get(shipment.service)
        if prefix is None:
            return None
        return f"{prefix}-zone{zone}"


__all__ = [
    "LaPost",
]
