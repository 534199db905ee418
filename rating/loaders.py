"""
Rate Card Loaders

Adapters from external rate card sources to RateCard objects. The engine
never reads files itself; callers load cards here and hand them to a
RateCardStore.

LONG FORMAT (CSV / DataFrame)
-----------------------------
One row per rate entry:

    rate_card_id        - Card id (repeated on every row of the card)
    carrier_code        - Owning carrier
    base_rate_card_id   - Base card id, empty for base cards
    rate_key            - Rate key, empty for a card with no entries
    currency            - Currency of an absolute amount
    amount              - Absolute amount (empty for discount rows)
    discount            - Discount fraction (empty for absolute rows)

RECORDS (JSON)
--------------
    {
        "id": "Customer-Carrier-23423423",
        "carrierCode": "USPS",
        "baseCardId": "SAS-Base",
        "entries": {
            "flatrate": {"currency": "USD", "amount": 15},
            "priority-zone2-package1-30lb": {"discount": 0.2}
        }
    }
"""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import polars as pl

from .cards import Absolute, Discount, RateCard, RateEntry
from .errors import InvalidRateCard


logger = logging.getLogger(__name__)


REQUIRED_COLUMNS = [
    "rate_card_id",
    "carrier_code",
    "base_rate_card_id",
    "rate_key",
    "currency",
    "amount",
    "discount",
]

SCHEMA_OVERRIDES = {
    "rate_card_id": pl.Utf8,
    "carrier_code": pl.Utf8,
    "base_rate_card_id": pl.Utf8,
    "rate_key": pl.Utf8,
    "currency": pl.Utf8,
    "amount": pl.Float64,
    "discount": pl.Float64,
}


# =============================================================================
# FILES
# =============================================================================

def load_rate_cards(path: Path | str) -> list[RateCard]:
    """
    Load rate cards from a long-format CSV or a JSON list of records.

    Args:
        path: .csv or .json file

    Returns:
        List of RateCard, in file order
    """
    path = Path(path)

    if path.suffix.lower() == ".json":
        with open(path, "r", encoding="utf-8") as f:
            try:
                records = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidRateCard([f"{path}: not valid JSON ({e})"]) from e
        cards = rate_cards_from_records(records)
    else:
        try:
            df = pl.read_csv(path, schema_overrides=SCHEMA_OVERRIDES)
        except pl.exceptions.PolarsError as e:
            raise InvalidRateCard([f"{path}: could not read rate card table ({e})"]) from e
        cards = rate_cards_from_frame(df)

    logger.debug("Loaded %d rate card(s) from %s", len(cards), path)
    return cards


# =============================================================================
# DATAFRAME
# =============================================================================

def rate_cards_from_frame(df: pl.DataFrame) -> list[RateCard]:
    """Build rate cards from a long-format DataFrame (see module docstring)."""
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidRateCard([f"missing column(s): {', '.join(missing)}"])

    try:
        df = df.select(REQUIRED_COLUMNS).with_columns(
            pl.col("amount").cast(pl.Float64),
            pl.col("discount").cast(pl.Float64),
        )
    except pl.exceptions.PolarsError as e:
        raise InvalidRateCard([f"amount and discount must be numeric ({e})"]) from e

    if df["rate_card_id"].null_count():
        raise InvalidRateCard(["rows without rate_card_id"])

    errors = []
    cards = []

    for part in df.partition_by("rate_card_id", maintain_order=True):
        card_id = part["rate_card_id"][0]

        carriers = part["carrier_code"].drop_nulls().unique().to_list()
        bases = part["base_rate_card_id"].drop_nulls().unique().to_list()
        if len(carriers) != 1:
            errors.append(f"{card_id}: expected one carrier_code, got {carriers}")
            continue
        if len(bases) > 1:
            errors.append(f"{card_id}: expected at most one base_rate_card_id, got {bases}")
            continue

        entries: dict[str, RateEntry] = {}
        for row in part.iter_rows(named=True):
            key = row["rate_key"]
            if key is None:
                continue
            if key in entries:
                errors.append(f"{card_id}: duplicate rate key '{key}'")
                continue
            entry = _entry_from_row(card_id, row, errors)
            if entry is not None:
                entries[key] = entry

        cards.append(RateCard(
            id=card_id,
            carrier_code=carriers[0],
            entries=entries,
            base_card_id=bases[0] if bases else None,
        ))

    if errors:
        raise InvalidRateCard(errors)

    return cards


def _entry_from_row(card_id: str, row: dict[str, Any], errors: list[str]) -> RateEntry | None:
    key = row["rate_key"]
    amount = row["amount"]
    discount = row["discount"]

    if amount is not None and discount is not None:
        errors.append(f"{card_id}: '{key}' has both amount and discount")
        return None

    if discount is not None:
        return Discount(discount)

    if amount is None:
        errors.append(f"{card_id}: '{key}' has neither amount nor discount")
        return None

    if not row["currency"]:
        errors.append(f"{card_id}: '{key}' has an amount without currency")
        return None

    return Absolute(amount, row["currency"])


# =============================================================================
# RECORDS
# =============================================================================

def rate_cards_from_records(records: Iterable[Mapping[str, Any]]) -> list[RateCard]:
    """Build rate cards from JSON-shaped records (see module docstring)."""
    errors = []
    cards = []

    if isinstance(records, Mapping):
        raise InvalidRateCard(["expected a list of rate card records, got an object"])

    for i, record in enumerate(records):
        if not isinstance(record, Mapping):
            errors.append(f"record {i}: expected an object, got {type(record).__name__}")
            continue

        card_id = record.get("id")
        carrier_code = record.get("carrierCode")
        if not card_id or not carrier_code:
            errors.append(f"record {i}: 'id' and 'carrierCode' are required")
            continue

        raw_entries = record.get("entries") or {}
        if not isinstance(raw_entries, Mapping):
            errors.append(f"{card_id}: 'entries' must be an object")
            continue

        entries: dict[str, RateEntry] = {}
        for key, value in raw_entries.items():
            entry = _entry_from_record(card_id, key, value, errors)
            if entry is not None:
                entries[key] = entry

        cards.append(RateCard(
            id=card_id,
            carrier_code=carrier_code,
            entries=entries,
            base_card_id=record.get("baseCardId"),
        ))

    if errors:
        raise InvalidRateCard(errors)

    return cards


def _entry_from_record(card_id: str, key: str, value: Any, errors: list[str]) -> RateEntry | None:
    if not isinstance(value, Mapping):
        errors.append(f"{card_id}: '{key}' must be an object, got {type(value).__name__}")
        return None

    has_amount = "amount" in value
    has_discount = "discount" in value

    if has_amount == has_discount:
        errors.append(f"{card_id}: '{key}' must have exactly one of amount or discount")
        return None

    if has_discount:
        discount = _number(card_id, key, "discount", value["discount"], errors)
        return None if discount is None else Discount(discount)

    if not value.get("currency"):
        errors.append(f"{card_id}: '{key}' has an amount without currency")
        return None

    amount = _number(card_id, key, "amount", value["amount"], errors)
    return None if amount is None else Absolute(amount, value["currency"])


def _number(card_id: str, key: str, name: str, value: Any, errors: list[str]) -> float | None:
    if not isinstance(value, bool):
        try:
            return float(value)
        except (TypeError, ValueError):
            pass
    errors.append(f"{card_id}: '{key}' {name} must be a number, got {value!r}")
    return None


__all__ = [
    "load_rate_cards",
    "rate_cards_from_frame",
    "rate_cards_from_records",
    "REQUIRED_COLUMNS",
]
