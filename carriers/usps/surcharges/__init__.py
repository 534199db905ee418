"""
USPS Surcharges Package

Exports all surcharge classes in quote order.

Every surcharge is priced from the rate card; the classes decide when a
surcharge applies and which key it reads.

Usage:
    from carriers.usps.surcharges import ALL
"""

from rating.surcharges import Surcharge, validate_surcharges
from .alcohol import Alcohol
from .fuel import Fuel


# All surcharges - order is the order of charges on the quote
ALL: list[type[Surcharge]] = [Alcohol, Fuel]


# Run validation at import time
validate_surcharges(ALL)

__all__ = [
    # Surcharge classes
    "Alcohol",
    "Fuel",
    # Lists
    "ALL",
]
