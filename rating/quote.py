"""
Rate Quote Assembler

Shipment and rate card id in, itemized RateQuote out.

PROCESSING ORDER
----------------
    1. Pick the carrier strategy for shipment.carrier_code
    2. Take one snapshot of the rate card store; check the card's carrier
    3. Zone from the strategy
    4. Candidate keys (weight tier, cubic tier) -> resolve each
         both      -> lower amount wins, tie goes to weight
         one       -> use it
         neither   -> NoApplicableRate
    5. Surcharges in strategy order, zero amounts included
    6. Total; every charge must share one currency

USAGE
-----
    from carriers import default_carriers
    from rating import QuoteAssembler, RateCardStore

    assembler = QuoteAssembler(RateCardStore(cards), default_carriers())
    quote = assembler.quote(shipment, "SAS-Base")
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .cards import RateCardStore
from .errors import CarrierMismatch, CurrencyMismatch, NoApplicableRate, UnsupportedCarrier
from .resolver import RateResolver
from .shipment import Shipment
from .strategy import CarrierStrategy, PricingMethod


logger = logging.getLogger(__name__)


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class RateCharge:
    """One line item of a quote."""
    name: str
    amount: float
    currency: str


@dataclass(frozen=True)
class RateQuote:
    """
    Itemized price for one shipment.

    total and currency are derived from the charges. Construction fails with
    CurrencyMismatch if the charges do not share one currency.
    """
    charges: tuple[RateCharge, ...]
    rate_card_id: str = ""
    carrier_code: str = ""
    service: str = ""
    zone: str = ""
    calculator_version: str = ""
    total: float = field(init=False)
    currency: str = field(init=False)

    def __post_init__(self):
        charges = tuple(self.charges)
        if not charges:
            raise ValueError("A rate quote needs at least one charge")

        currencies = sorted({c.currency for c in charges})
        if len(currencies) > 1:
            raise CurrencyMismatch(currencies)

        object.__setattr__(self, "charges", charges)
        object.__setattr__(self, "total", sum(c.amount for c in charges))
        object.__setattr__(self, "currency", currencies[0])

    def charge(self, name: str) -> RateCharge | None:
        """First charge with the given name, or None."""
        return next((c for c in self.charges if c.name == name), None)

    def to_dict(self) -> dict:
        return {
            "rate_card_id": self.rate_card_id,
            "carrier_code": self.carrier_code,
            "service": self.service,
            "zone": self.zone,
            "charges": [
                {"name": c.name, "amount": c.amount, "currency": c.currency}
                for c in self.charges
            ],
            "total": self.total,
            "currency": self.currency,
            "calculator_version": self.calculator_version,
        }


# =============================================================================
# ASSEMBLER
# =============================================================================

class QuoteAssembler:
    """
    Price shipments against a rate card store.

    Args:
        store: Rate card store; one snapshot is taken per quote
        carriers: Carrier code -> strategy
    """

    def __init__(self, store: RateCardStore, carriers: Mapping[str, CarrierStrategy]):
        self.store = store
        self.carriers = dict(carriers)

    def strategy_for(self, carrier_code: str) -> CarrierStrategy:
        strategy = self.carriers.get(carrier_code)
        if strategy is None:
            raise UnsupportedCarrier(carrier_code)
        return strategy

    def quote(self, shipment: Shipment, rate_card_id: str) -> RateQuote:
        """
        Calculate an itemized quote for a shipment.

        Args:
            shipment: Shipment to price
            rate_card_id: Rate card to price against (its base chain included)

        Returns:
            RateQuote with the primary charge followed by surcharges

        Raises:
            RatingError subclass describing why the shipment can't be priced
        """
        strategy = self.strategy_for(shipment.carrier_code)
        snapshot = self.store.snapshot()
        resolver = RateResolver(snapshot)

        card = snapshot.find_card(rate_card_id)
        if card.carrier_code != shipment.carrier_code:
            raise CarrierMismatch(card.id, card.carrier_code, shipment.carrier_code)

        zone = strategy.get_zone(shipment)
        candidates = strategy.candidate_keys(shipment, zone)
        logger.debug(
            "%s %s zone %s candidates: %s",
            shipment.carrier_code, shipment.service, zone,
            {m.name: k for m, k in candidates.items()},
        )

        charges = [self._primary_charge(resolver, rate_card_id, shipment, candidates)]
        charges += self._surcharges(resolver, rate_card_id, strategy.surcharge_keys(shipment, zone))

        return RateQuote(
            charges=tuple(charges),
            rate_card_id=rate_card_id,
            carrier_code=shipment.carrier_code,
            service=shipment.service,
            zone=zone,
            calculator_version=strategy.version,
        )

    def _primary_charge(
        self,
        resolver: RateResolver,
        rate_card_id: str,
        shipment: Shipment,
        candidates: dict[PricingMethod, str],
    ) -> RateCharge:
        """
        Resolve every candidate key and keep the cheapest.

        Weight is evaluated first and only replaced by a strictly cheaper
        method, so ties resolve to weight pricing.
        """
        if not candidates:
            raise NoApplicableRate(shipment.carrier_code, shipment.service, shipment.weight)

        best: RateCharge | None = None
        for method in PricingMethod:
            key = candidates.get(method)
            if key is None:
                continue
            rate = resolver.resolve(rate_card_id, key)
            if best is None or rate.amount < best.amount:
                best = RateCharge(method.label, rate.amount, rate.currency)

        return best

    def _surcharges(
        self,
        resolver: RateResolver,
        rate_card_id: str,
        surcharge_keys: Sequence[tuple[str, str]],
    ) -> list[RateCharge]:
        charges = []
        for name, key in surcharge_keys:
            rate = resolver.resolve(rate_card_id, key)
            charges.append(RateCharge(name, rate.amount, rate.currency))
        return charges


__all__ = [
    "RateCharge",
    "RateQuote",
    "QuoteAssembler",
]
