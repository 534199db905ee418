"""
Rate Quote Calculator
=====================

CLI tool to quote a single shipment against a rate card.

Usage:
    python -m carriers.scripts.calculator --carrier USPS --service priority \\
        --package package1 --weight 25 --zone 1 --rate-card SAS-Base
"""

import argparse
import json
import logging
import sys

from rating import (
    Address,
    Dimensions,
    FixedZoneResolver,
    QuoteAssembler,
    RateCardStore,
    RateQuote,
    RatingError,
    Shipment,
    ShipmentOptions,
    load_rate_cards,
)

from carriers import ALL, default_carriers
from carriers.lapost.data import load_rates as load_lapost_rates
from carriers.usps.data import load_rates as load_usps_rates


def load_cards(path: str | None) -> list:
    """Rate cards from a file, or every sample rate card."""
    if path:
        return load_rate_cards(path)
    return load_usps_rates() + load_lapost_rates()


def create_shipment(args: argparse.Namespace) -> Shipment:
    """Create a shipment from command-line arguments."""
    return Shipment(
        carrier_code=args.carrier,
        service=args.service,
        package=args.package,
        weight=args.weight,
        to_address=Address(postal_code=args.zip),
        options=ShipmentOptions(alcohol=args.alcohol, pudo=args.pudo),
        dimensions=Dimensions(*args.dimensions) if args.dimensions else None,
    )


def print_results(quote: RateQuote, shipment: Shipment) -> None:
    """Print calculation results."""
    print("\n" + "=" * 50)
    print("RATE QUOTE")
    print("=" * 50)

    print(f"\nCarrier: {quote.carrier_code} {quote.service} (v{quote.calculator_version})")
    print(f"Package: {shipment.package or '-'}, {shipment.weight} lbs")
    print(f"Zone: {quote.zone}")
    print(f"Rate card: {quote.rate_card_id}")

    print("\n--- Cost Breakdown ---")
    for charge in quote.charges:
        print(f"{charge.name + ':':<20}{charge.amount:>9.2f} {charge.currency}")

    print(f"{'':<20}{'=' * 9}")
    print(f"{'TOTAL:':<20}{quote.total:>9.2f} {quote.currency}")
    print()


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(
        description="Quote a shipment against a rate card",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m carriers.scripts.calculator --carrier USPS --service priority --package package1 --weight 25 --zone 1 --rate-card SAS-Base
  python -m carriers.scripts.calculator --carrier USPS --service flatrate --weight 3 --zone 2 --rate-card Customer-Carrier-23423423 --alcohol
  python -m carriers.scripts.calculator --carrier LAPOST --service laground --weight 1 --zone 3 --rate-card LaPost-ShipStationRates --pudo --json
        """
    )

    # Shipment
    parser.add_argument(
        "--carrier",
        required=True,
        choices=sorted(c.carrier_code for c in ALL),
        help="Carrier code"
    )
    parser.add_argument("--service", required=True, help="Carrier service (e.g., priority)")
    parser.add_argument("--package", default="", help="Carrier package type (e.g., package1)")
    parser.add_argument("--weight", type=float, required=True, help="Weight in lbs")
    parser.add_argument(
        "--dimensions",
        type=float,
        nargs=3,
        metavar=("L", "W", "H"),
        help="Package dimensions in inches (enables cubic pricing)"
    )
    parser.add_argument("--alcohol", action="store_true", help="Shipment contains alcohol")
    parser.add_argument("--pudo", action="store_true", help="Deliver to a pickup/drop-off point")

    # Zone
    zone_group = parser.add_mutually_exclusive_group(required=True)
    zone_group.add_argument("--zone", help="Use this zone")
    zone_group.add_argument("--zip", default="", help="Destination ZIP code (zone chart lookup)")

    # Rate cards
    parser.add_argument("--rate-card", required=True, help="Rate card id to quote against")
    parser.add_argument(
        "--rate-cards",
        metavar="PATH",
        help="Rate card file (.csv or .json). Default: sample rate cards"
    )

    # Output
    parser.add_argument("--json", action="store_true", help="Print the quote as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log resolution details")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    zones = {args.carrier: FixedZoneResolver(args.zone)} if args.zone else None

    try:
        store = RateCardStore(load_cards(args.rate_cards))
        assembler = QuoteAssembler(store, default_carriers(zones))
        shipment = create_shipment(args)
        quote = assembler.quote(shipment, args.rate_card)
    except RatingError as e:
        if args.json:
            print(json.dumps({"error": e.to_dict()}, indent=2))
        else:
            print(f"\nError [{e.kind}]: {e.message}")
        return 1

    if args.json:
        print(json.dumps(quote.to_dict(), indent=2))
    else:
        print_results(quote, shipment)

    return 0


if __name__ == "__main__":
    sys.exit(main())
