"""
Unit Tests for La Poste Rate Strategy

Run with: pytest carriers/lapost/tests/test_lapost_strategy.py -v
"""

import pytest

from rating import (
    Address,
    FixedZoneResolver,
    NoApplicableRate,
    QuoteAssembler,
    RateCardStore,
    RateCharge,
    Shipment,
    ShipmentOptions,
)
from carriers.lapost import LaPost
from carriers.lapost.data import DEFAULT_ZONE, load_rates


# =============================================================================
# FIXTURES
# =============================================================================

def ground(service="laground", pudo=False, pudo_address=False):
    return Shipment(
        carrier_code="LAPOST",
        service=service,
        package="",
        weight=1.0,
        to_address=Address(postal_code="75001", country="FR", is_pudo=pudo_address),
        options=ShipmentOptions(pudo=pudo),
    )


@pytest.fixture
def store():
    return RateCardStore(load_rates())


def assembler_for(store, zone=None):
    zones = FixedZoneResolver(zone) if zone else None
    return QuoteAssembler(store, {"LAPOST": LaPost(zones)})


# =============================================================================
# KEY TESTS
# =============================================================================

class TestKeys:
    """Tests for La Poste rate keys."""

    def test_ground_key(self):
        assert LaPost().weight_tier_key(ground(), "2") == "laground-zone2"

    def test_no_cubic_pricing(self):
        assert LaPost().volume_tier_key(ground(), "2") is None

    def test_unknown_service(self):
        assert LaPost().candidate_keys(ground(service="express"), "1") == {}

    def test_default_zone(self):
        assert LaPost().get_zone(ground()) == DEFAULT_ZONE

    def test_pudo_from_options(self):
        assert LaPost().surcharge_keys(ground(pudo=True), "1") == [("PUDO charge", "pudo-charge")]

    def test_pudo_from_address(self):
        assert LaPost().surcharge_keys(ground(pudo_address=True), "1") == [("PUDO charge", "pudo-charge")]

    def test_no_surcharges(self):
        assert LaPost().surcharge_keys(ground(), "1") == []


# =============================================================================
# QUOTE TESTS (SAMPLE RATE CARD)
# =============================================================================

class TestQuotes:
    """Quotes against LaPost-ShipStationRates."""

    def test_ground_zone3(self, store):
        quote = assembler_for(store, "3").quote(ground(), "LaPost-ShipStationRates")
        assert quote.charges == (RateCharge("Rate Weight", 0.23, "EUR"),)
        assert quote.currency == "EUR"

    def test_ground_with_pudo(self, store):
        quote = assembler_for(store, "1").quote(ground(pudo=True), "LaPost-ShipStationRates")
        assert [c.name for c in quote.charges] == ["Rate Weight", "PUDO charge"]
        assert quote.total == pytest.approx(0.2 + 0.23)

    def test_unknown_service_not_priced(self, store):
        with pytest.raises(NoApplicableRate):
            assembler_for(store).quote(ground(service="express"), "LaPost-ShipStationRates")
