from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

# Characters a spreadsheet export leaves around money / percent cells.
_AMOUNT_NOISE = re.compile(r"[$,%\s]")

# "Unit 4", "APT 2B", ... (whole words only, so "Community Dr" stays intact)
_UNIT_MARKER = re.compile(r"\b(?:unit|apt)\b", re.IGNORECASE)


@dataclass(frozen=True)
class DerivedMetrics:
    """
    Per-listing numbers and strings the letter templates are filled from.

    Recomputed for every record; never stored on its own.
    """
    ltv: float
    rounded_balance: int
    short_address: str
    agent_first_name: str


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def parse_amount(value: Any) -> float | None:
    """
    Coerce values like:
      - 250000
      - "250000"
      - "$250,000"
      - "45.5%"
    into float.

    Returns None when missing/blank/garbage so callers can pick their own default.
    """
    if _is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        f = float(value)
    elif isinstance(value, str):
        s = _AMOUNT_NOISE.sub("", value)
        try:
            f = float(s)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(f):
        return None
    return f


def first_name(full_name: Any) -> str:
    if _is_missing(full_name):
        return ""
    parts = str(full_name).split()
    return parts[0] if parts else ""


def short_address(full_address: Any) -> str:
    """
    "123 Main St, Unit 4, Springfield" -> "Main St"

    Street line only (before the first comma), unit/apt suffix dropped,
    leading house number dropped.
    """
    if _is_missing(full_address):
        return ""
    street = str(full_address).split(",")[0]

    m = _UNIT_MARKER.search(street)
    if m:
        street = street[: m.start()]

    words = street.split()
    if words and words[0][0].isdigit():
        words = words[1:]
    return " ".join(words)


def rounded_balance(amount: Any) -> int:
    f = parse_amount(amount)
    if not f:
        return 0
    return int(math.floor(f / 1000.0) * 1000)


def currency(amount: Any) -> str:
    """Whole-dollar US currency, e.g. 250000 -> "$250,000"."""
    f = parse_amount(amount)
    if not f:
        return "$0"
    # halves round away from zero: 1234.5 -> $1,235
    whole = int(Decimal(str(f)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    if whole < 0:
        return f"-${-whole:,}"
    return f"${whole:,}"


def ltv(mortgage_balance: Any, list_price: Any) -> float:
    """
    LTV % = balance / list price * 100.

    Missing, zero or negative inputs give 0.0 (never inf / NaN).
    """
    balance = parse_amount(mortgage_balance)
    price = parse_amount(list_price)
    if not balance or not price or balance < 0 or price <= 0:
        return 0.0
    return (balance / price) * 100.0


def derive_metrics(record) -> DerivedMetrics:
    # record: ListingRecord-like (duck-typed so tests can pass SimpleNamespace)
    return DerivedMetrics(
        ltv=ltv(record.mortgage_balance, record.list_price),
        rounded_balance=rounded_balance(record.mortgage_balance),
        short_address=short_address(record.address),
        agent_first_name=first_name(record.agent_name),
    )
