"""
Service Configuration

USPS services priced from the rate card and their weight tiers.
"""

# Services with a weight-priced rate key
WEIGHT_PRICED_SERVICES = {"priority", "flatrate"}

# Services with cubic pricing (volume tier instead of weight)
CUBIC_PRICED_SERVICES = {"priority"}

# Priority weight tiers: (upper bound in lbs, exclusive) -> tier suffix
# weight < 30        -> 30lb
# 30 <= weight < 40  -> 40lb
# weight >= 40       -> not priced
PRIORITY_WEIGHT_TIERS = [
    (30, "30lb"),
    (40, "40lb"),
]

# Flat rate is one price regardless of zone, package and weight
FLAT_RATE_KEY = "flatrate"
