"""
USPS Cubic Classifier

Maps a shipment to a Priority Mail cubic tier (see data/reference/cubic.py).

    1. Each side rounded down to the nearest 1/4"
    2. cubic_ft = length * width * height / 1728, rounded to 4 decimals
    3. First tier whose upper bound is >= cubic_ft

Shipments without dimensions, over MAX_CUBIC_WEIGHT_LBS, or larger than the
largest tier are not cubic eligible (classify returns None).
"""

import math

from rating.shipment import Shipment

from .data import (
    CUBIC_IN_PER_FOOT,
    CUBIC_TIERS,
    DIMENSION_ROUNDING_IN,
    MAX_CUBIC_WEIGHT_LBS,
)


def _round_down(value: float, step: float = DIMENSION_ROUNDING_IN) -> float:
    return math.floor(value / step) * step


def cubic_feet(length_in: float, width_in: float, height_in: float) -> float:
    """Cubic feet after rounding each side down to the nearest quarter inch."""
    cubic_in = _round_down(length_in) * _round_down(width_in) * _round_down(height_in)
    return round(cubic_in / CUBIC_IN_PER_FOOT, 4)


class UspsCubicClassifier:
    """Volume classifier for USPS Priority Mail cubic pricing."""

    def __init__(self, tiers: list[tuple[float, str]] = CUBIC_TIERS, max_weight_lbs: float = MAX_CUBIC_WEIGHT_LBS):
        self.tiers = sorted(tiers)
        self.max_weight_lbs = max_weight_lbs

    def classify(self, shipment: Shipment) -> str | None:
        dims = shipment.dimensions
        if dims is None or shipment.weight > self.max_weight_lbs:
            return None

        volume = cubic_feet(dims.length_in, dims.width_in, dims.height_in)
        for max_cubic_ft, tier in self.tiers:
            if volume <= max_cubic_ft:
                return tier

        return None


class FixedVolumeClassifier:
    """Classify every shipment into one tier."""

    def __init__(self, tier: str | None):
        self.tier = tier

    def classify(self, shipment: Shipment) -> str | None:
        return self.tier


__all__ = [
    "cubic_feet",
    "UspsCubicClassifier",
    "FixedVolumeClassifier",
]
