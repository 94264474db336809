from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Sequence

import pandas as pd

from loigen.adapters.config import config
from loigen.adapters.logging_utils import get_logger
from loigen.domain.listing import ListingRecord, ProcessedListing
from loigen.domain.metrics import currency, derive_metrics
from loigen.domain.ports import RandomSource
from loigen.domain.rules import select_category
from loigen.services.letters import assign_variant, fill_template

logger = get_logger(__name__)


def process_listing(index: int, record: ListingRecord, variant: str, scheme: str | None = None) -> ProcessedListing:
    metrics = derive_metrics(record)
    return ProcessedListing(
        index=index,
        record=record,
        metrics=metrics,
        category=select_category(record, metrics, config, scheme),
        variant=variant,
    )


def process_listings(
    rows: Sequence[dict[str, Any]],
    *,
    rng: RandomSource,
    scheme: str | None = None,
    workers: int = 1,
) -> list[ProcessedListing]:
    """
    Map every row to a ProcessedListing, keeping input order.

    Variants are drawn up front in row order so a seeded rng gives the same
    assignment regardless of `workers`; the per-row derivation is independent
    and may run on a thread pool.
    """
    records = [ListingRecord.from_row(r) for r in rows]
    variants = [assign_variant(rec, rng) for rec in records]

    if workers <= 1 or len(records) < 2:
        out = [process_listing(i, rec, v, scheme) for i, (rec, v) in enumerate(zip(records, variants))]
    else:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            out = list(
                ex.map(
                    lambda args: process_listing(*args, scheme),
                    [(i, rec, v) for i, (rec, v) in enumerate(zip(records, variants))],
                )
            )

    counts: dict[str, int] = {}
    for p in out:
        counts[p.category.value] = counts.get(p.category.value, 0) + 1
    logger.info("listings_processed", extra={"context": {"rows": len(out), "categories": counts}})
    return out


def letter_text(listing: ProcessedListing, sender_name: str | None = None) -> str:
    return fill_template(
        listing.record,
        listing.metrics,
        listing.category,
        listing.variant,
        sender_name=sender_name,
    )


def table_row(listing: ProcessedListing) -> dict[str, Any]:
    """One line of the review table."""
    return {
        "row": listing.index + 1,
        "address": listing.metrics.short_address,
        "list_price": currency(listing.record.list_price),
        "mortgage_balance": currency(listing.metrics.rounded_balance),
        "ltv": f"{listing.metrics.ltv:.1f}%",
        "agent": listing.metrics.agent_first_name,
        "template": listing.template_label,
    }


def enrich_frame(
    df: pd.DataFrame,
    listings: Sequence[ProcessedListing],
    column: str | None = None,
) -> pd.DataFrame:
    """
    Copy of the uploaded sheet with one extra column naming the letter
    template used per row. An existing column of that name is overwritten in
    place so re-exporting an export doesn't grow the sheet.
    """
    column = column or config.TEMPLATE_COLUMN
    if len(listings) != len(df):
        raise ValueError(f"row count mismatch: sheet has {len(df)}, processed {len(listings)}")

    out = df.copy()
    out[column] = [p.template_label for p in sorted(listings, key=lambda p: p.index)]
    return out
