"""
Rate Cards

A rate card maps rate keys to entries for one carrier account. A card may
name a base card; keys it does not define fall back to the base, and
Discount entries price a key relative to the base.

    SAS-Base                      (every key, absolute amounts)
      └── Customer-Carrier-...    (only the keys that differ)

ENTRIES
-------
    Absolute(amount, currency)  - fixed price
    Discount(discount)          - fraction off the base amount (0.2 = 20% off)

SNAPSHOTS
---------
RateCardSet is an immutable, validated collection. Validation happens once,
when the set is built: duplicate ids, dangling base references, cycles in
the base chain and cross-carrier bases are all rejected there, so resolution
always terminates.

RateCardStore holds the current RateCardSet. publish() validates a new set
and swaps the reference in one assignment; readers holding the previous
snapshot keep a consistent view.
"""

import logging
import math
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import CardNotFound, InvalidDiscount, InvalidRateCard


logger = logging.getLogger(__name__)


# =============================================================================
# ENTRIES
# =============================================================================

@dataclass(frozen=True)
class Absolute:
    """Fixed price for a rate key."""
    amount: float
    currency: str

    def __post_init__(self):
        if not (math.isfinite(self.amount) and self.amount >= 0):
            raise InvalidRateCard([f"amount must be a finite non-negative number, got {self.amount!r}"])


@dataclass(frozen=True)
class Discount:
    """Fraction off the base card's amount for the same key."""
    discount: float

    def __post_init__(self):
        if not 0 <= self.discount < 1:
            raise InvalidDiscount(self.discount)

    def apply(self, amount: float) -> float:
        return amount * (1 - self.discount)


RateEntry = Absolute | Discount


# =============================================================================
# RATE CARD
# =============================================================================

@dataclass(frozen=True)
class RateCard:
    """
    Rate lookups for one carrier account.

    Attributes:
        id              - Unique card id (e.g., "SAS-Base")
        carrier_code    - Owning carrier (e.g., "USPS")
        entries         - Rate key -> Absolute | Discount
        base_card_id    - Card to fall back to for missing keys and discounts
    """
    id: str
    carrier_code: str
    entries: Mapping[str, RateEntry] = field(default_factory=dict)
    base_card_id: str | None = None

    def __post_init__(self):
        # Freeze a private copy so the caller's dict can't leak mutations in
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def get(self, key: str) -> RateEntry | None:
        return self.entries.get(key)


# =============================================================================
# SNAPSHOT
# =============================================================================

class RateCardSet(Mapping[str, RateCard]):
    """Immutable, validated collection of rate cards keyed by id."""

    def __init__(self, cards: Iterable[RateCard] = ()):
        cards = list(cards)
        errors = _validate(cards)
        if errors:
            raise InvalidRateCard(errors)
        self._cards = MappingProxyType({card.id: card for card in cards})

    def __getitem__(self, card_id: str) -> RateCard:
        return self._cards[card_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"RateCardSet({sorted(self._cards)})"

    def find_card(self, card_id: str) -> RateCard:
        """Look up a card by exact id. Raises CardNotFound if absent."""
        card = self._cards.get(card_id)
        if card is None:
            raise CardNotFound(card_id)
        return card

    def base_chain(self, card_id: str) -> list[str]:
        """Ids from the card up to its root base, starting with card_id."""
        chain = []
        current = self.find_card(card_id)
        while True:
            chain.append(current.id)
            if current.base_card_id is None:
                return chain
            current = self._cards[current.base_card_id]


def _validate(cards: list[RateCard]) -> list[str]:
    """Collect configuration errors for a card collection."""
    errors = []
    by_id: dict[str, RateCard] = {}

    for card in cards:
        if card.id in by_id:
            errors.append(f"{card.id}: duplicate rate card id")
        by_id[card.id] = card

        for key, entry in card.entries.items():
            if not isinstance(entry, (Absolute, Discount)):
                errors.append(
                    f"{card.id}: '{key}' must be Absolute or Discount, got {type(entry).__name__}"
                )

    for card in by_id.values():
        if card.base_card_id is None:
            continue

        base = by_id.get(card.base_card_id)
        if base is None:
            errors.append(f"{card.id}: base card '{card.base_card_id}' not found")
            continue

        if base.carrier_code != card.carrier_code:
            errors.append(
                f"{card.id}: base card '{base.id}' belongs to {base.carrier_code}, "
                f"not {card.carrier_code}"
            )

    # Cycle detection only makes sense once every base reference resolves
    if errors:
        return errors

    for card in by_id.values():
        seen = [card.id]
        current = card
        while current.base_card_id is not None:
            if current.base_card_id in seen:
                errors.append(
                    f"{card.id}: cyclic base chain {' -> '.join(seen + [current.base_card_id])}"
                )
                break
            seen.append(current.base_card_id)
            current = by_id[current.base_card_id]

    return errors


# =============================================================================
# STORE
# =============================================================================

class RateCardStore:
    """
    Holds the current RateCardSet snapshot.

    Quotes take one snapshot() at the start and resolve every key against it.
    publish() replaces the snapshot atomically; a rejected collection leaves
    the current snapshot untouched.
    """

    def __init__(self, cards: Iterable[RateCard] = ()):
        self._snapshot = RateCardSet(cards)

    def snapshot(self) -> RateCardSet:
        return self._snapshot

    def find_card(self, card_id: str) -> RateCard:
        return self._snapshot.find_card(card_id)

    def publish(self, cards: Iterable[RateCard]) -> RateCardSet:
        """Validate cards and make them the current snapshot."""
        snapshot = RateCardSet(cards)
        self._snapshot = snapshot
        logger.info("Published %d rate card(s): %s", len(snapshot), ", ".join(snapshot))
        return snapshot

    def refresh(self, source: Callable[[], Iterable[RateCard]]) -> RateCardSet:
        """Reload cards from a data source and publish them."""
        return self.publish(source())


__all__ = [
    "Absolute",
    "Discount",
    "RateEntry",
    "RateCard",
    "RateCardSet",
    "RateCardStore",
]
