"""
La Poste Surcharges Package

Usage:
    from carriers.lapost.surcharges import ALL
"""

from rating.surcharges import Surcharge, validate_surcharges
from .pudo import PUDO


ALL: list[type[Surcharge]] = [PUDO]


validate_surcharges(ALL)

__all__ = [
    "PUDO",
    "ALL",
]
