"""
USPS Data

Reference data and loaders for sample rate cards, zones, and configuration.

Structure:
    - reference/: Static reference data (rate cards, zones, tier config)
"""

from pathlib import Path

import polars as pl

from rating import RateCard, load_rate_cards
from rating.zones import load_zones as _load_zone_chart

from .reference.cubic import (
    CUBIC_IN_PER_FOOT,
    CUBIC_TIERS,
    DIMENSION_ROUNDING_IN,
    MAX_CUBIC_WEIGHT_LBS,
)
from .reference.services import (
    CUBIC_PRICED_SERVICES,
    FLAT_RATE_KEY,
    PRIORITY_WEIGHT_TIERS,
    WEIGHT_PRICED_SERVICES,
)


REFERENCE_DIR = Path(__file__).parent / "reference"


def load_rates() -> list[RateCard]:
    """
    Load the sample USPS rate cards.

    Returns:
        SAS-Base (absolute amounts for every key) and
        Customer-Carrier-23423423 (discounts and overrides on SAS-Base)
    """
    return load_rate_cards(REFERENCE_DIR / "rate_cards.csv")


def load_zones() -> pl.DataFrame:
    """
    Load the sample zone chart.

    Zones may have asterisk variants (1*, 2*, 3*) for local delivery.

    Returns:
        DataFrame with columns: zip_prefix, zone
    """
    return _load_zone_chart(REFERENCE_DIR / "zones.csv")


__all__ = [
    # Reference data loaders
    "load_rates",
    "load_zones",
    "REFERENCE_DIR",
    # Service config
    "WEIGHT_PRICED_SERVICES",
    "CUBIC_PRICED_SERVICES",
    "PRIORITY_WEIGHT_TIERS",
    "FLAT_RATE_KEY",
    # Cubic config
    "CUBIC_IN_PER_FOOT",
    "CUBIC_TIERS",
    "DIMENSION_ROUNDING_IN",
    "MAX_CUBIC_WEIGHT_LBS",
]
