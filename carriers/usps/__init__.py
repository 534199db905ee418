"""
USPS Carrier Module

Rate strategy for USPS rate cards (Priority weight and cubic tiers, flat rate).
"""

from .strategy import USPS
from .version import VERSION

__all__ = ["USPS", "VERSION"]
