"""
Zone Resolvers

Zone lookup is carrier business, but most carriers publish it the same way:
a table keyed by destination ZIP prefix. Two resolvers cover the common
cases:

    FixedZoneResolver       - always the same zone (tests, single-zone carriers)
    ZipPrefixZoneResolver   - 3-digit destination ZIP prefix table

ASTERISK ZONES
--------------
Some zone charts mark local delivery with an asterisk (1*, 2*, 3*). The
asterisk is stripped for rate key lookup.
"""

import logging
from pathlib import Path

import polars as pl

from .errors import ZoneNotFound
from .shipment import Shipment


logger = logging.getLogger(__name__)


class FixedZoneResolver:
    """Resolve every shipment to one zone."""

    def __init__(self, zone: str):
        self.zone = str(zone)

    def get_zone(self, shipment: Shipment) -> str:
        return self.zone

    def __repr__(self) -> str:
        return f"FixedZoneResolver({self.zone!r})"


class ZipPrefixZoneResolver:
    """
    Look up the zone from the destination ZIP's 3-digit prefix.

    Args:
        zones: DataFrame with columns zip_prefix, zone (both strings)
        fallback_zone: Zone for prefixes missing from the table. When None,
            a missing prefix raises ZoneNotFound.
    """

    PREFIX_LENGTH = 3

    def __init__(self, zones: pl.DataFrame, fallback_zone: str | None = None):
        zones = zones.select(
            pl.col("zip_prefix").cast(pl.Utf8).str.zfill(self.PREFIX_LENGTH),
            pl.col("zone").cast(pl.Utf8).str.replace(r"\*", ""),
        )
        self._zones = dict(zones.iter_rows())
        self.fallback_zone = fallback_zone

    def get_zone(self, shipment: Shipment) -> str:
        postal_code = shipment.to_address.postal_code
        prefix = str(postal_code).strip()[:self.PREFIX_LENGTH].zfill(self.PREFIX_LENGTH)

        zone = self._zones.get(prefix)
        if zone is not None:
            return zone

        if self.fallback_zone is None:
            raise ZoneNotFound(postal_code)

        logger.debug("No zone for ZIP prefix %s, using fallback zone %s", prefix, self.fallback_zone)
        return self.fallback_zone


def load_zones(path: Path | str) -> pl.DataFrame:
    """
    Load a zone chart from CSV.

    Returns:
        DataFrame with columns: zip_prefix, zone
    """
    return pl.read_csv(
        path,
        schema_overrides={
            "zip_prefix": pl.Utf8,  # Keep prefixes as strings (leading zeros)
            "zone": pl.Utf8,        # Zone can have asterisks (1*, 2*, 3*)
        },
    )


__all__ = [
    "FixedZoneResolver",
    "ZipPrefixZoneResolver",
    "load_zones",
]
