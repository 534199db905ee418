"""
Unit Tests for Rate Cards

Tests entry validation, snapshot validation, and store publication.

Run with: pytest rating/tests/test_cards.py -v
"""

import pytest

from rating.cards import Absolute, Discount, RateCard, RateCardSet, RateCardStore
from rating.errors import CardNotFound, InvalidDiscount, InvalidRateCard


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def base_card():
    return RateCard(
        id="Base",
        carrier_code="USPS",
        entries={"flatrate": Absolute(34.0, "USD")},
    )


@pytest.fixture
def customer_card():
    return RateCard(
        id="Customer",
        carrier_code="USPS",
        base_card_id="Base",
        entries={"flatrate": Discount(0.2)},
    )


# =============================================================================
# ENTRY TESTS
# =============================================================================

class TestEntries:
    """Tests for Absolute and Discount entries."""

    def test_discount_applies_fraction(self):
        """0.2 discount is 20% off."""
        assert Discount(0.2).apply(50.0) == pytest.approx(40.0)

    def test_zero_discount_is_identity(self):
        assert Discount(0.0).apply(34.09) == pytest.approx(34.09)

    @pytest.mark.parametrize("value", [1.0, 1.5, -0.1])
    def test_discount_outside_range_rejected(self, value):
        """Discount must be in [0, 1)."""
        with pytest.raises(InvalidDiscount) as exc:
            Discount(value)
        assert exc.value.kind == "InvalidDiscount"
        assert exc.value.discount == value

    def test_invalid_discount_is_value_error(self):
        with pytest.raises(ValueError):
            Discount(1.0)

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidRateCard):
            Absolute(-1.0, "USD")

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_amount_rejected(self, value):
        """NaN would poison totals and method comparison."""
        with pytest.raises(InvalidRateCard, match="finite non-negative"):
            Absolute(value, "USD")

    def test_nan_discount_rejected(self):
        with pytest.raises(InvalidDiscount):
            Discount(float("nan"))

    def test_zero_amount_allowed(self):
        assert Absolute(0, "USD").amount == 0


# =============================================================================
# RATE CARD TESTS
# =============================================================================

class TestRateCard:
    """Tests for RateCard."""

    def test_entries_are_read_only(self, base_card):
        with pytest.raises(TypeError):
            base_card.entries["flatrate"] = Absolute(1.0, "USD")

    def test_entries_copied_from_input(self):
        """Mutating the source dict after construction doesn't change the card."""
        entries = {"flatrate": Absolute(34.0, "USD")}
        card = RateCard(id="Base", carrier_code="USPS", entries=entries)
        entries["extra"] = Absolute(1.0, "USD")
        assert "extra" not in card

    def test_get_missing_key(self, base_card):
        assert base_card.get("missing") is None


# =============================================================================
# SNAPSHOT TESTS
# =============================================================================

class TestRateCardSet:
    """Tests for RateCardSet lookup and validation."""

    def test_find_card(self, base_card, customer_card):
        cards = RateCardSet([base_card, customer_card])
        assert cards.find_card("Customer") is customer_card

    def test_find_missing_card(self, base_card):
        cards = RateCardSet([base_card])
        with pytest.raises(CardNotFound) as exc:
            cards.find_card("Nope")
        assert exc.value.card_id == "Nope"
        assert exc.value.to_dict() == {
            "kind": "CardNotFound",
            "message": "No rate card with id 'Nope'",
            "card_id": "Nope",
        }

    def test_lookup_is_exact(self, base_card):
        """Ids are matched exactly, not by prefix or case."""
        cards = RateCardSet([base_card])
        with pytest.raises(CardNotFound):
            cards.find_card("base")

    def test_mapping_interface(self, base_card, customer_card):
        cards = RateCardSet([base_card, customer_card])
        assert len(cards) == 2
        assert set(cards) == {"Base", "Customer"}
        assert "Base" in cards

    def test_base_chain(self, base_card, customer_card):
        regional = RateCard(id="Regional", carrier_code="USPS", base_card_id="Customer")
        cards = RateCardSet([base_card, customer_card, regional])
        assert cards.base_chain("Regional") == ["Regional", "Customer", "Base"]
        assert cards.base_chain("Base") == ["Base"]

    def test_duplicate_id_rejected(self, base_card):
        with pytest.raises(InvalidRateCard, match="duplicate rate card id"):
            RateCardSet([base_card, base_card])

    def test_dangling_base_rejected(self, customer_card):
        with pytest.raises(InvalidRateCard, match="base card 'Base' not found"):
            RateCardSet([customer_card])

    def test_self_reference_rejected(self):
        card = RateCard(id="Loop", carrier_code="USPS", base_card_id="Loop")
        with pytest.raises(InvalidRateCard, match="cyclic"):
            RateCardSet([card])

    def test_cycle_rejected(self):
        a = RateCard(id="A", carrier_code="USPS", base_card_id="B")
        b = RateCard(id="B", carrier_code="USPS", base_card_id="C")
        c = RateCard(id="C", carrier_code="USPS", base_card_id="A")
        with pytest.raises(InvalidRateCard) as exc:
            RateCardSet([a, b, c])
        assert exc.value.kind == "InvalidRateCard"
        assert len(exc.value.errors) == 3

    def test_non_entry_value_rejected(self):
        """Raw numbers are not entries; they are rejected when the set is built."""
        bad = RateCard(id="Base", carrier_code="USPS", entries={"flatrate": 15})
        with pytest.raises(InvalidRateCard, match="'flatrate' must be Absolute or Discount, got int"):
            RateCardSet([bad])

    def test_non_entry_value_keeps_snapshot(self, base_card):
        store = RateCardStore([base_card])
        bad = RateCard(id="Base", carrier_code="USPS", entries={"flatrate": {"amount": 15}})
        with pytest.raises(InvalidRateCard):
            store.publish([bad])
        assert store.find_card("Base") is base_card

    def test_cross_carrier_base_rejected(self, base_card):
        card = RateCard(id="LaPost", carrier_code="LAPOST", base_card_id="Base")
        with pytest.raises(InvalidRateCard, match="belongs to USPS"):
            RateCardSet([base_card, card])


# =============================================================================
# STORE TESTS
# =============================================================================

class TestRateCardStore:
    """Tests for snapshot publication."""

    def test_publish_replaces_snapshot(self, base_card, customer_card):
        store = RateCardStore([base_card])
        old = store.snapshot()

        new = store.publish([base_card, customer_card])

        assert store.snapshot() is new
        assert "Customer" in new
        # Readers of the old snapshot keep their view
        assert "Customer" not in old

    def test_invalid_publish_keeps_snapshot(self, base_card, customer_card):
        store = RateCardStore([base_card])
        old = store.snapshot()

        with pytest.raises(InvalidRateCard):
            store.publish([customer_card])

        assert store.snapshot() is old
        assert store.find_card("Base") is base_card

    def test_refresh_from_source(self, base_card, customer_card):
        store = RateCardStore()
        store.refresh(lambda: [base_card, customer_card])
        assert store.find_card("Customer") is customer_card

    def test_empty_store(self):
        with pytest.raises(CardNotFound):
            RateCardStore().find_card("Base")
