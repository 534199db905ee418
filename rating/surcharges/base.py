"""
Surcharge Base Class

Shared base class for all carrier surcharges. A surcharge is priced from the
rate card like any other rate key; the class only decides whether it applies
and which key it reads.
"""

from abc import ABC
from collections.abc import Sequence

from ..shipment import Shipment


# =============================================================================
# BASE CLASS
# =============================================================================

class Surcharge(ABC):
    """
    Base class for all surcharges.

    Attributes:
        IDENTITY
            name        - Charge name on the quote (e.g., "Fuel surcharge")

        PRICING
            key         - Rate key on the rate card (e.g., "contains-alcohol").
                          Override rate_key() for zone or shipment dependent keys.
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    key: str | None = None

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def conditions(cls, shipment: Shipment) -> bool:
        """
        Whether this surcharge applies to the shipment.

        Default returns True (always-on surcharges such as fuel).
        """
        return True

    @classmethod
    def rate_key(cls, shipment: Shipment, zone: str) -> str:
        """Rate key to resolve for this surcharge."""
        if cls.key is None:
            raise NotImplementedError(f"{cls.__name__} defines neither key nor rate_key()")
        return cls.key


# =============================================================================
# VALIDATION
# =============================================================================

def validate_surcharges(surcharges: Sequence[type[Surcharge]]) -> None:
    """
    Validate surcharge configuration integrity.

    Raises ValueError if any configuration issues are found.
    Carriers call this at import time to fail fast on configuration errors.
    """
    errors = []
    seen = set()

    for s in surcharges:
        name = getattr(s, "name", None)
        if not name:
            errors.append(f"{s.__name__}: missing name")
            continue

        if name in seen:
            errors.append(f"{s.__name__}: duplicate surcharge name '{name}'")
        seen.add(name)

        if s.key is None and s.rate_key.__func__ is Surcharge.rate_key.__func__:
            errors.append(f"{s.__name__}: must define key or override rate_key()")

    if errors:
        raise ValueError("Surcharge configuration errors:\n  " + "\n  ".join(errors))
