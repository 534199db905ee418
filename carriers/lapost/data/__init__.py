"""
La Poste Data

Reference data and loaders for sample rate cards and configuration.
"""

from pathlib import Path

from rating import RateCard, load_rate_cards

from .reference.services import DEFAULT_ZONE, SERVICES


REFERENCE_DIR = Path(__file__).parent / "reference"


def load_rates() -> list[RateCard]:
    """Load the sample La Poste rate card (LaPost-ShipStationRates)."""
    return load_rate_cards(REFERENCE_DIR / "rate_cards.csv")


__all__ = [
    "load_rates",
    "REFERENCE_DIR",
    "SERVICES",
    "DEFAULT_ZONE",
]
