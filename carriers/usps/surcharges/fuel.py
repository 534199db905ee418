"""
Fuel Surcharge

Applies to every shipment. Amount depends on the zone.
"""

from rating.shipment import Shipment
from rating.surcharges import Surcharge


class Fuel(Surcharge):
    """Fuel surcharge by zone."""

    # Identity
    name = "Fuel surcharge"

    @classmethod
    def rate_key(cls, shipment: Shipment, zone: str) -> str:
        return f"fuel-charge-zone{zone}"
