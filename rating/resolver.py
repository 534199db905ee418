"""
Rate Resolver

Resolves (rate card id, rate key) to an amount and currency, walking the
base card chain.

RESOLUTION RULES
----------------
    1. Card defines the key with an Absolute entry -> that amount
    2. Card defines the key with a Discount entry  -> base amount * (1 - discount),
                                                      currency of the base
    3. Card does not define the key                -> resolve against the base card
    4. No base card left                           -> RateKeyNotFound

Rules 2 and 3 recurse through the same algorithm, so multi-level chains
(base -> regional -> customer) resolve transitively. A discount whose base
chain does not define the key raises NoBaseRate rather than RateKeyNotFound.

The resolver is bound to one RateCardSet snapshot and never mutates it;
resolving the same pair twice gives the same result.
"""

import logging
from typing import NamedTuple

from .cards import Absolute, Discount, RateCardSet
from .errors import NoBaseRate, RateKeyNotFound


logger = logging.getLogger(__name__)


class Rate(NamedTuple):
    """A resolved rate."""
    amount: float
    currency: str


class RateResolver:
    """Resolve rate keys against a RateCardSet snapshot."""

    def __init__(self, cards: RateCardSet):
        self.cards = cards

    def resolve(self, card_id: str, key: str) -> Rate:
        """
        Resolve a rate key for a rate card.

        Args:
            card_id: Rate card to start from
            key: Rate key (e.g., "priority-zone1-package1-30lb")

        Returns:
            Rate with amount and currency

        Raises:
            CardNotFound: card_id is not in the snapshot
            RateKeyNotFound: neither the card nor its base chain defines key
            NoBaseRate: a Discount entry has no base rate to apply to
        """
        card = self.cards.find_card(card_id)
        entry = card.get(key)

        if entry is None:
            if card.base_card_id is None:
                raise RateKeyNotFound(card_id, key)
            logger.debug("%s: '%s' not defined, falling back to %s", card_id, key, card.base_card_id)
            return self.resolve(card.base_card_id, key)

        if isinstance(entry, Absolute):
            return Rate(entry.amount, entry.currency)

        if isinstance(entry, Discount):
            base = self._resolve_base(card_id, card.base_card_id, key)
            rate = Rate(entry.apply(base.amount), base.currency)
            logger.debug(
                "%s: '%s' = %.4f * (1 - %.4f) = %.4f %s",
                card_id, key, base.amount, entry.discount, rate.amount, rate.currency,
            )
            return rate

        raise TypeError(f"{card_id}: unsupported rate entry for '{key}': {entry!r}")

    def _resolve_base(self, card_id: str, base_card_id: str | None, key: str) -> Rate:
        if base_card_id is None:
            raise NoBaseRate(card_id, key, "rate card has no base card")
        try:
            return self.resolve(base_card_id, key)
        except RateKeyNotFound as e:
            raise NoBaseRate(card_id, key, f"base card '{base_card_id}' does not define it") from e


__all__ = [
    "Rate",
    "RateResolver",
]
