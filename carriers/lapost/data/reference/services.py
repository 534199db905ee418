"""
Service Configuration

La Poste services priced from the rate card. Prices depend on service and
zone only.
"""

# Service -> rate key prefix
SERVICES = {
    "laground": "laground",
}

# Zone used when no zone resolver is supplied (metropolitan France)
DEFAULT_ZONE = "1"
