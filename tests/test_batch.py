import random

import pandas as pd
import pytest

from loigen.adapters.storage import read_listings
from loigen.domain.rules import TemplateCategory
from loigen.services.batch import enrich_frame, letter_text, process_listings, table_row


def test_process_listings_picks_categories_in_order(listings_csv, rng):
    _, rows = read_listings(listings_csv)

    out = process_listings(rows, rng=rng)

    assert [p.index for p in out] == [0, 1, 2]
    assert [p.category for p in out] == [
        TemplateCategory.STANDARD,
        TemplateCategory.NO_MORTGAGE,
        TemplateCategory.LOW_EQUITY,
    ]
    assert out[2].metrics.rounded_balance == 191000


def test_thread_pool_gives_same_result_as_serial(listings_csv):
    _, rows = read_listings(listings_csv)
    rows = rows * 10

    serial = process_listings(rows, rng=random.Random(5))
    pooled = process_listings(rows, rng=random.Random(5), workers=4)

    assert [(p.index, p.category, p.variant) for p in serial] == [
        (p.index, p.category, p.variant) for p in pooled
    ]


def test_letter_text_is_stable_per_processed_listing(listings_csv, rng):
    _, rows = read_listings(listings_csv)
    listing = process_listings(rows, rng=rng)[0]

    assert letter_text(listing) == letter_text(listing)
    assert "Main St" in letter_text(listing)


def test_strategy_scheme_labels_unknown_without_variant(rng):
    out = process_listings([{"PropertyAddress": "1 A St"}], rng=rng, scheme="strategy")

    assert out[0].category is TemplateCategory.UNKNOWN
    assert out[0].template_label == "Unknown"


def test_table_row_formats_display_values(listings_csv, rng):
    _, rows = read_listings(listings_csv)
    listing = process_listings(rows, rng=rng)[2]

    row = table_row(listing)

    assert row["row"] == 3
    assert row["address"] == "Pine Rd"
    assert row["list_price"] == "$200,000"
    assert row["mortgage_balance"] == "$191,000"
    assert row["ltv"] == "95.7%"
    assert row["agent"] == "Carla"
    assert row["template"] == f"LowEquity/{listing.variant}"


def test_enrich_frame_adds_exactly_one_column(listings_csv, rng):
    df, rows = read_listings(listings_csv)
    listings = process_listings(rows, rng=rng)

    out = enrich_frame(df, listings)

    assert list(out.columns) == list(df.columns) + ["LOI_Template"]
    assert len(out) == len(df)
    pd.testing.assert_frame_equal(out[df.columns], df)
    assert out["LOI_Template"].tolist() == [p.template_label for p in listings]
    # caller's frame untouched
    assert "LOI_Template" not in df.columns


def test_enrich_frame_overwrites_existing_template_column(listings_csv, rng):
    df, rows = read_listings(listings_csv)
    df["LOI_Template"] = "old"
    listings = process_listings(rows, rng=rng)

    out = enrich_frame(df, listings)

    assert list(out.columns) == list(df.columns)
    assert "old" not in out["LOI_Template"].tolist()


def test_enrich_frame_row_mismatch_raises(listings_csv, rng):
    df, rows = read_listings(listings_csv)
    listings = process_listings(rows[:2], rng=rng)

    with pytest.raises(ValueError, match="row count mismatch"):
        enrich_frame(df, listings)
