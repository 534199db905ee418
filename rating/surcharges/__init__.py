"""
Shared Surcharges

Base class and validation for carrier surcharges.
"""

from .base import Surcharge, validate_surcharges

__all__ = [
    "Surcharge",
    "validate_surcharges",
]
