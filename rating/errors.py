"""
Rating Errors

Every failure of a rate lookup or a quote is a RatingError subclass with a
stable `kind` string. Callers branch on the class (or on `kind` once the
error has been serialized with to_dict()).

    RatingError
    ├── CardNotFound          - rate card id not in the store
    ├── RateKeyNotFound       - key missing from card and its base chain
    ├── NoBaseRate            - discount entry without a resolvable base
    ├── InvalidDiscount       - discount outside [0, 1)
    ├── NoApplicableRate      - shipment has no weight or cubic key
    ├── CurrencyMismatch      - charges of one quote in several currencies
    ├── InvalidRateCard       - rate card collection rejected at load time
    ├── UnsupportedCarrier    - no strategy for the shipment's carrier
    ├── CarrierMismatch       - rate card belongs to another carrier
    └── ZoneNotFound          - zone table has no entry for the destination
"""

from typing import Any


class RatingError(Exception):
    """Base class for all rating failures."""

    kind: str = "RatingError"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Structured form for callers that report errors instead of raising."""
        return {"kind": self.kind, "message": self.message, **self.details}


class CardNotFound(RatingError, LookupError):
    kind = "CardNotFound"

    def __init__(self, card_id: str):
        super().__init__(f"No rate card with id '{card_id}'", card_id=card_id)
        self.card_id = card_id


class RateKeyNotFound(RatingError, LookupError):
    kind = "RateKeyNotFound"

    def __init__(self, card_id: str, key: str):
        super().__init__(
            f"Rate key '{key}' not found in rate card '{card_id}' or its base cards",
            card_id=card_id,
            key=key,
        )
        self.card_id = card_id
        self.key = key


class NoBaseRate(RatingError):
    kind = "NoBaseRate"

    def __init__(self, card_id: str, key: str, reason: str):
        super().__init__(
            f"Discount for '{key}' in rate card '{card_id}' has no base rate: {reason}",
            card_id=card_id,
            key=key,
        )
        self.card_id = card_id
        self.key = key


class InvalidDiscount(RatingError, ValueError):
    kind = "InvalidDiscount"

    def __init__(self, discount: float):
        super().__init__(
            f"Discount must be a fraction in [0, 1), got {discount!r}",
            discount=discount,
        )
        self.discount = discount


class NoApplicableRate(RatingError):
    kind = "NoApplicableRate"

    def __init__(self, carrier_code: str, service: str, weight: float):
        super().__init__(
            f"No pricing method for {carrier_code} service '{service}' at {weight} lbs",
            carrier_code=carrier_code,
            service=service,
            weight=weight,
        )


class CurrencyMismatch(RatingError):
    kind = "CurrencyMismatch"

    def __init__(self, currencies: list[str]):
        super().__init__(
            f"Charges use more than one currency: {', '.join(currencies)}",
            currencies=currencies,
        )
        self.currencies = currencies


class InvalidRateCard(RatingError, ValueError):
    kind = "InvalidRateCard"

    def __init__(self, errors: list[str]):
        super().__init__(
            "Rate card configuration errors:\n  " + "\n  ".join(errors),
            errors=errors,
        )
        self.errors = errors


class UnsupportedCarrier(RatingError, LookupError):
    kind = "UnsupportedCarrier"

    def __init__(self, carrier_code: str):
        super().__init__(f"No rate strategy for carrier '{carrier_code}'", carrier_code=carrier_code)
        self.carrier_code = carrier_code


class CarrierMismatch(RatingError):
    kind = "CarrierMismatch"

    def __init__(self, card_id: str, card_carrier: str, shipment_carrier: str):
        super().__init__(
            f"Rate card '{card_id}' belongs to {card_carrier}, shipment is {shipment_carrier}",
            card_id=card_id,
            card_carrier=card_carrier,
            shipment_carrier=shipment_carrier,
        )


class ZoneNotFound(RatingError, LookupError):
    kind = "ZoneNotFound"

    def __init__(self, postal_code: str):
        super().__init__(f"No zone for destination postal code '{postal_code}'", postal_code=postal_code)
        self.postal_code = postal_code


__all__ = [
    "RatingError",
    "CardNotFound",
    "RateKeyNotFound",
    "NoBaseRate",
    "InvalidDiscount",
    "NoApplicableRate",
    "CurrencyMismatch",
    "InvalidRateCard",
    "UnsupportedCarrier",
    "CarrierMismatch",
    "ZoneNotFound",
]
