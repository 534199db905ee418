"""
PUDO Charge

Applies when the shipment is delivered to a pickup/drop-off point.
"""

from rating.shipment import Shipment
from rating.surcharges import Surcharge


class PUDO(Surcharge):
    """Pickup/drop-off point delivery."""

    # Identity
    name = "PUDO charge"

    # Pricing
    key = "pudo-charge"

    @classmethod
    def conditions(cls, shipment: Shipment) -> bool:
        return shipment.options.pudo or shipment.to_address.is_pudo
