"""
Cubic Pricing Configuration

USPS Priority Mail cubic pricing tiers. Each dimension is rounded down to the
nearest quarter inch before the volume is calculated.
"""

CUBIC_IN_PER_FOOT = 1728          # 12^3
DIMENSION_ROUNDING_IN = 0.25      # Round each side down to nearest 1/4"
MAX_CUBIC_WEIGHT_LBS = 20         # Heavier packages are not cubic eligible

# (max cubic feet, inclusive) -> tier id used in the rate key
CUBIC_TIERS = [
    (0.1, "1"),
    (0.2, "2"),
    (0.3, "3"),
    (0.4, "4"),
    (0.5, "5"),
]
