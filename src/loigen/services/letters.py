from __future__ import annotations

import re
from typing import Any

from loigen.adapters.config import config
from loigen.domain.listing import VARIANTS, ListingRecord
from loigen.domain.metrics import DerivedMetrics, currency, derive_metrics, rounded_balance
from loigen.domain.ports import RandomSource
from loigen.domain.rules import TemplateCategory, select_category
from loigen.domain.templates import TEMPLATES

_FILENAME_UNSAFE = re.compile(r"[^A-Za-z0-9]")

DEFAULT_VARIANT = VARIANTS[0]


def _as_record(record: ListingRecord | dict[str, Any]) -> ListingRecord:
    if isinstance(record, ListingRecord):
        return record
    return ListingRecord.from_row(record)


def assign_variant(record: ListingRecord | dict[str, Any], rng: RandomSource) -> str:
    """
    Explicit LOI_Variant on the row wins; otherwise draw one uniformly.

    Call once per record and keep the result; re-drawing is what makes
    repeated downloads differ.
    """
    rec = _as_record(record)
    if rec.variant:
        return rec.variant
    return rng.choice(VARIANTS)


def _balance_for(record: ListingRecord, category: TemplateCategory, metrics: DerivedMetrics) -> int:
    # strategy letters quote total loans when the sheet provides them
    if category in (
        TemplateCategory.SELLER_FINANCING,
        TemplateCategory.HYBRID,
        TemplateCategory.SUBJECT_TO,
        TemplateCategory.UNKNOWN,
    ) and record.total_loans is not None:
        return rounded_balance(record.total_loans)
    return metrics.rounded_balance


def fill_template(
    record: ListingRecord,
    metrics: DerivedMetrics,
    category: TemplateCategory,
    variant: str | None = None,
    *,
    sender_name: str | None = None,
) -> str:
    by_variant = TEMPLATES[category]
    template = by_variant.get(variant or DEFAULT_VARIANT, by_variant[DEFAULT_VARIANT])
    return template.format(
        agent_first_name=metrics.agent_first_name,
        short_address=metrics.short_address,
        list_price=currency(record.list_price),
        mortgage_balance=currency(_balance_for(record, category, metrics)),
        city=record.city or "",
        sender_name=config.SENDER_NAME if sender_name is None else sender_name,
    )


def render_letter(
    record: ListingRecord | dict[str, Any],
    *,
    variant: str | None = None,
    scheme: str | None = None,
    sender_name: str | None = None,
) -> str:
    """
    Letter text for one listing row.

    Variant precedence: explicit argument, then the row's LOI_Variant, then v1.
    Sparse rows still render; missing values come out as "" or "$0".
    """
    rec = _as_record(record)
    metrics = derive_metrics(rec)
    category = select_category(rec, metrics, config, scheme)
    return fill_template(rec, metrics, category, variant or rec.variant, sender_name=sender_name)


def letter_filename(record: ListingRecord | dict[str, Any], index: int | None = None) -> str:
    """LOI_<street name>.txt with anything non-alphanumeric replaced by '_'."""
    rec = _as_record(record)
    street = derive_metrics(rec).short_address
    if not street and index is not None:
        return f"LOI_row_{index + 1}.txt"
    return f"LOI_{_FILENAME_UNSAFE.sub('_', street)}.txt"
