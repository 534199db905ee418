"""
Carriers

Rate strategies per carrier. A new carrier is a new subpackage with a
CarrierStrategy subclass, added to ALL.

Usage:
    from carriers import default_carriers
    assembler = QuoteAssembler(store, default_carriers())
"""

from collections.abc import Mapping

from rating.strategy import CarrierStrategy, ZoneResolver
from rating.zones import ZipPrefixZoneResolver

from .lapost import LaPost
from .usps import USPS
from .usps.data import load_zones as load_usps_zones


# All carrier strategy classes
ALL: list[type[CarrierStrategy]] = [USPS, LaPost]


def default_carriers(zones: Mapping[str, ZoneResolver] | None = None) -> dict[str, CarrierStrategy]:
    """
    Instantiate every carrier strategy, keyed by carrier code.

    Args:
        zones: Carrier code -> zone resolver. Carriers not listed use their
            default: the sample zone chart for USPS, the domestic zone for
            La Poste.

    Returns:
        Carrier code -> strategy, ready for QuoteAssembler
    """
    zones = dict(zones or {})

    if "USPS" not in zones:
        zones["USPS"] = ZipPrefixZoneResolver(load_usps_zones())

    return {
        "USPS": USPS(zones["USPS"]),
        "LAPOST": LaPost(zones.get("LAPOST")),
    }


# =============================================================================
# VALIDATION
# =============================================================================

def validate_carriers() -> None:
    """
    Validate carrier registry integrity.

    Raises ValueError if two strategies claim the same carrier code or a
    strategy has no carrier code. Called at import time.
    """
    errors = []
    seen = set()

    for c in ALL:
        code = getattr(c, "carrier_code", None)
        if not code:
            errors.append(f"{c.__name__}: missing carrier_code")
            continue
        if code in seen:
            errors.append(f"{c.__name__}: duplicate carrier_code '{code}'")
        seen.add(code)

    if errors:
        raise ValueError("Carrier configuration errors:\n  " + "\n  ".join(errors))


validate_carriers()

__all__ = [
    "ALL",
    "USPS",
    "LaPost",
    "default_carriers",
    "validate_carriers",
]
