"""
Unit Tests for Zone Resolvers

Run with: pytest rating/tests/test_zones.py -v
"""

import polars as pl
import pytest

from rating.errors import ZoneNotFound
from rating.shipment import Address, Shipment
from rating.zones import FixedZoneResolver, ZipPrefixZoneResolver, load_zones


@pytest.fixture
def zones():
    return pl.DataFrame({
        "zip_prefix": ["850", "902", "10"],
        "zone": ["1*", "4", "8"],
    })


def to_zip(postal_code: str) -> Shipment:
    return Shipment(
        carrier_code="USPS",
        service="priority",
        package="package1",
        weight=1.0,
        to_address=Address(postal_code=postal_code),
    )


class TestFixedZone:
    def test_always_same_zone(self):
        resolver = FixedZoneResolver(3)
        assert resolver.get_zone(to_zip("90210")) == "3"
        assert resolver.get_zone(to_zip("")) == "3"


class TestZipPrefixZone:
    """Tests for 3-digit ZIP prefix lookup."""

    def test_prefix_lookup(self, zones):
        assert ZipPrefixZoneResolver(zones).get_zone(to_zip("90210")) == "4"

    def test_asterisk_stripped(self, zones):
        """Zone 1* (local delivery) is rated as zone 1."""
        assert ZipPrefixZoneResolver(zones).get_zone(to_zip("85006")) == "1"

    def test_short_prefix_zero_filled(self, zones):
        """Prefix '10' in the chart is ZIP prefix '010'."""
        assert ZipPrefixZoneResolver(zones).get_zone(to_zip("01001")) == "8"

    def test_missing_prefix_raises(self, zones):
        with pytest.raises(ZoneNotFound) as exc:
            ZipPrefixZoneResolver(zones).get_zone(to_zip("60601"))
        assert exc.value.postal_code == "60601"

    def test_missing_prefix_fallback(self, zones):
        resolver = ZipPrefixZoneResolver(zones, fallback_zone="5")
        assert resolver.get_zone(to_zip("60601")) == "5"

    def test_load_zones_keeps_leading_zeros(self, tmp_path):
        path = tmp_path / "zones.csv"
        path.write_text("zip_prefix,zone\n010,8\n850,1*\n", encoding="utf-8")
        df = load_zones(path)
        assert df["zip_prefix"].to_list() == ["010", "850"]
        assert df["zone"].to_list() == ["8", "1*"]
