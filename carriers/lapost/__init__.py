"""
La Poste Carrier Module

Rate strategy for La Poste rate cards (ground service by zone, PUDO charge).
"""

from .strategy import LaPost
from .version import VERSION

__all__ = ["LaPost", "VERSION"]
