"""
USPS Rate Strategy

Rate keys for USPS rate cards.

WEIGHT TIER KEYS
----------------
    flatrate                    -> "flatrate"
    priority, weight < 30       -> "priority-zone{zone}-{package}-30lb"
    priority, 30 <= weight < 40 -> "priority-zone{zone}-{package}-40lb"
    priority, weight >= 40      -> none
    any other service           -> none

CUBIC TIER KEYS
---------------
    priority                    -> "priority-zone{zone}-cubic{tier}"
                                   (tier from the volume classifier, none if
                                   the shipment isn't cubic eligible)
    any other service           -> none

SURCHARGES
----------
    Alcohol surcharge           -> "contains-alcohol" (options.alcohol)
    Fuel surcharge              -> "fuel-charge-zone{zone}" (always)
"""

import logging

from rating.shipment import Shipment
from rating.strategy import CarrierStrategy, VolumeClassifier, ZoneResolver

from .cubic import UspsCubicClassifier
from .data import (
    CUBIC_PRICED_SERVICES,
    FLAT_RATE_KEY,
    PRIORITY_WEIGHT_TIERS,
    WEIGHT_PRICED_SERVICES,
)
from .surcharges import ALL
from .version import VERSION


logger = logging.getLogger(__name__)


class USPS(CarrierStrategy):
    """
    USPS rate strategy.

    Args:
        zones: Zone resolver (zone chart lookup or fixed zone)
        volumes: Cubic classifier (defaults to USPS Priority cubic tiers)
    """

    carrier_code = "USPS"
    version = VERSION
    surcharges = ALL

    def __init__(self, zones: ZoneResolver, volumes: VolumeClassifier | None = None):
        super().__init__(zones)
        self.volumes = volumes if volumes is not None else UspsCubicClassifier()

    def weight_tier_key(self, shipment: Shipment, zone: str) -> str | None:
        if shipment.service not in WEIGHT_PRICED_SERVICES:
            return None

        if shipment.service == "flatrate":
            return FLAT_RATE_KEY

        for max_weight, suffix in PRIORITY_WEIGHT_TIERS:
            if shipment.weight < max_weight:
                return f"priority-zone{zone}-{shipment.package}-{suffix}"

        logger.debug("No priority weight tier for %s lbs", shipment.weight)
        return None

    def volume_tier_key(self, shipment: Shipment, zone: str) -> str | None:
        if shipment.service not in CUBIC_PRICED_SERVICES:
            return None

        tier = self.volumes.classify(shipment)
        if tier is None:
            return None

        return f"{shipment.service}-zone{zone}-cubic{tier}"


__all__ = [
    "USPS",
]
