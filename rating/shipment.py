"""
Shipment Data

Plain data carried into a quote. Nothing here is validated against a
carrier; address correctness is the caller's concern.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Address:
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = "US"
    is_pudo: bool = False  # pickup/drop-off point


@dataclass(frozen=True)
class ShipmentOptions:
    alcohol: bool = False
    pudo: bool = False


@dataclass(frozen=True)
class Dimensions:
    """Package dimensions in inches."""
    length_in: float
    width_in: float
    height_in: float

    @property
    def cubic_in(self) -> float:
        return self.length_in * self.width_in * self.height_in


@dataclass(frozen=True)
class Shipment:
    """
    A single package to be rated.

    Attributes:
        carrier_code    - Carrier to rate with (e.g., "USPS")
        service         - Carrier service (e.g., "priority", "flatrate")
        package         - Carrier package type (e.g., "package1")
        weight          - Actual weight in pounds
        from_address    - Origin
        to_address      - Destination
        options         - Alcohol, pickup/drop-off
        dimensions      - Needed only by carriers with cubic pricing
    """
    carrier_code: str
    service: str
    package: str
    weight: float
    from_address: Address = field(default_factory=Address)
    to_address: Address = field(default_factory=Address)
    options: ShipmentOptions = field(default_factory=ShipmentOptions)
    dimensions: Dimensions | None = None


__all__ = [
    "Address",
    "ShipmentOptions",
    "Dimensions",
    "Shipment",
]
