"""
Rating

Carrier-agnostic rate card resolution: rate card hierarchy, resolver and
quote assembler. Carrier strategies live in the `carriers` package.
"""

from .cards import Absolute, Discount, RateCard, RateCardSet, RateCardStore, RateEntry
from .errors import (
    CardNotFound,
    CarrierMismatch,
    CurrencyMismatch,
    InvalidDiscount,
    InvalidRateCard,
    NoApplicableRate,
    NoBaseRate,
    RateKeyNotFound,
    RatingError,
    UnsupportedCarrier,
    ZoneNotFound,
)
from .loaders import load_rate_cards, rate_cards_from_frame, rate_cards_from_records
from .quote import QuoteAssembler, RateCharge, RateQuote
from .resolver import Rate, RateResolver
from .shipment import Address, Dimensions, Shipment, ShipmentOptions
from .strategy import CarrierStrategy, PricingMethod, VolumeClassifier, ZoneResolver
from .zones import FixedZoneResolver, ZipPrefixZoneResolver, load_zones

__all__ = [
    # Cards
    "Absolute",
    "Discount",
    "RateEntry",
    "RateCard",
    "RateCardSet",
    "RateCardStore",
    # Resolution
    "Rate",
    "RateResolver",
    # Quotes
    "QuoteAssembler",
    "RateCharge",
    "RateQuote",
    # Shipments
    "Address",
    "Dimensions",
    "Shipment",
    "ShipmentOptions",
    # Strategies
    "CarrierStrategy",
    "PricingMethod",
    "VolumeClassifier",
    "ZoneResolver",
    "FixedZoneResolver",
    "ZipPrefixZoneResolver",
    # Loaders
    "load_rate_cards",
    "load_zones",
    "rate_cards_from_frame",
    "rate_cards_from_records",
    # Errors
    "RatingError",
    "CardNotFound",
    "CarrierMismatch",
    "CurrencyMismatch",
    "InvalidDiscount",
    "InvalidRateCard",
    "NoApplicableRate",
    "NoBaseRate",
    "RateKeyNotFound",
    "UnsupportedCarrier",
    "ZoneNotFound",
]
