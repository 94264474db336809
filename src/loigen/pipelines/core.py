# src/loigen/pipelines/core.py

from __future__ import annotations

import random
from pathlib import Path
from typing import Any

from loguru import logger

from loigen.adapters.config import config
from loigen.adapters.session_store import InMemoryListingSession, Page
from loigen.adapters.storage import Source, df_to_csv_bytes, read_listings, write_df
from loigen.domain.ports import RandomSource
from loigen.services.batch import enrich_frame, letter_text, process_listings, table_row
from loigen.services.letters import letter_filename


def default_rng(seed: int | None = None) -> RandomSource:
    return random.Random(config.VARIANT_SEED if seed is None else seed)


# ---------------------------
# 1. UPLOAD
# ---------------------------

def upload_listings(
    source: Source,
    *,
    session: InMemoryListingSession | None = None,
    rng: RandomSource | None = None,
    scheme: str | None = None,
    workers: int = 1,
) -> InMemoryListingSession:
    """
    Read a listings CSV and (re)fill the session with processed rows.

    Whatever the session held before is dropped, variants included.
    Raises ListingFileError if the file can't be parsed.
    """
    session = session if session is not None else InMemoryListingSession()
    source_name = str(source) if isinstance(source, (str, Path)) else None

    df, rows = read_listings(source)
    listings = process_listings(
        rows,
        rng=rng or default_rng(),
        scheme=scheme,
        workers=workers,
    )
    n = session.load(listings, frame=df, source_name=source_name)

    logger.info(
        "Listings uploaded",
        source=source_name,
        rows=n,
        scheme=scheme or config.CATEGORY_SCHEME,
    )
    return session


# ---------------------------
# 2. REVIEW TABLE
# ---------------------------

def review_page(session: InMemoryListingSession, page: int = 1, per_page: int | None = None) -> Page:
    """Page of table rows (dicts) for display; page number is clamped."""
    p = session.page(page, per_page or config.PAGE_SIZE)
    p.items = [table_row(item) for item in p.items]
    return p


# ---------------------------
# 3. SINGLE LETTER
# ---------------------------

def download_letter(session: InMemoryListingSession, index: int) -> tuple[str, bytes]:
    """(filename, utf-8 letter bytes) for the row at 0-based `index`."""
    listing = session.get(index)
    return letter_filename(listing.record, index), letter_text(listing).encode("utf-8")


def save_letter(session: InMemoryListingSession, index: int, out_dir: str | Path) -> Path:
    name, body = download_letter(session, index)
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / name
    path.write_bytes(body)
    logger.info("Letter written", row=index + 1, path=str(path))
    return path


def save_all_letters(session: InMemoryListingSession, out_dir: str | Path) -> list[Path]:
    """
    Write one letter per row. Clashing names get _<row> suffixes (repeated
    until unique) so nothing is overwritten.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    seen: set[str] = set()
    for listing in session.all():
        name, body = download_letter(session, listing.index)
        stem = Path(name).stem
        while name in seen:
            stem = f"{stem}_{listing.index + 1}"
            name = f"{stem}.txt"
        seen.add(name)
        path = out / name
        path.write_bytes(body)
        written.append(path)

    logger.info("Letters written", count=len(written), out_dir=str(out))
    return written


# ---------------------------
# 4. ENRICHED EXPORT
# ---------------------------

def export_enriched(session: InMemoryListingSession, path: str | Path | None = None) -> Any:
    """
    Uploaded sheet plus the template column.

    Returns the written Path when `path` is given, CSV bytes otherwise.
    """
    if session.frame is None:
        raise ValueError("nothing to export: no listings uploaded in this session")

    enriched = enrich_frame(session.frame, session.all())
    if path is None:
        return df_to_csv_bytes(enriched)

    written = write_df(enriched, path)
    logger.info("Enriched sheet written", rows=int(enriched.shape[0]), path=str(written))
    return written
