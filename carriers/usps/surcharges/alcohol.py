"""
Alcohol Surcharge

Applies to shipments flagged as containing alcohol. Customer rate cards
may waive it with a zero amount; the charge is still listed.
"""

from rating.shipment import Shipment
from rating.surcharges import Surcharge


class Alcohol(Surcharge):
    """Contains alcohol."""

    # Identity
    name = "Alcohol surcharge"

    # Pricing
    key = "contains-alcohol"

    @classmethod
    def conditions(cls, shipment: Shipment) -> bool:
        return shipment.options.alcohol
