from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from loigen.adapters.storage import ListingFileError
from loigen.pipelines.core import (
    default_rng,
    download_letter,
    export_enriched,
    review_page,
    save_all_letters,
    save_letter,
    upload_listings,
)

app = typer.Typer(help="LOI generator: review listings and write Letters of Intent.")

SchemeOption = typer.Option(
    None,
    "--scheme",
    help="mortgage|strategy (default: LOIGEN_CATEGORY_SCHEME)",
)
SeedOption = typer.Option(
    None,
    "--seed",
    help=(
        "Seed for variant assignment; same seed + same file => same letters. "
        "Each command is its own session, so without a seed (or LOIGEN_VARIANT_SEED) "
        "export and letter may pick different variants for a row."
    ),
)


def _load(csv_path: Path, scheme: Optional[str], seed: Optional[int], workers: int = 1):
    if scheme is not None and scheme not in ("mortgage", "strategy"):
        typer.echo(f"Unknown scheme: {scheme} (expected mortgage or strategy)", err=True)
        raise typer.Exit(code=2)
    try:
        return upload_listings(csv_path, rng=default_rng(seed), scheme=scheme, workers=workers)
    except ListingFileError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def table(
    csv_path: Path = typer.Argument(..., help="Listings CSV"),
    page: int = typer.Option(1, help="Page to show (clamped to the available range)"),
    per_page: Optional[int] = typer.Option(None, help="Rows per page (default: LOIGEN_PAGE_SIZE)"),
    scheme: Optional[str] = SchemeOption,
    seed: Optional[int] = SeedOption,
) -> None:
    """
    Show one page of the review table.
    """
    session = _load(csv_path, scheme, seed)
    p = review_page(session, page=page, per_page=per_page)
    if not p.items:
        typer.echo("No listings.")
        return
    typer.echo(pd.DataFrame(p.items).to_string(index=False))
    typer.echo(f"Page {p.page} of {p.page_count} ({p.total} listings)")


@app.command()
def letter(
    csv_path: Path = typer.Argument(..., help="Listings CSV"),
    row: int = typer.Option(..., "--row", help="1-based row number as shown in the table"),
    out: Optional[Path] = typer.Option(None, "--out", help="Directory to write the .txt into; prints if omitted"),
    scheme: Optional[str] = SchemeOption,
    seed: Optional[int] = SeedOption,
) -> None:
    """
    Render the letter for a single row.

    The template label (e.g. Standard/v2) goes to stderr; pass the same --seed
    used for `export` to get the letter its LOI_Template column names.
    """
    session = _load(csv_path, scheme, seed)
    try:
        typer.echo(f"Template: {session.get(row - 1).template_label}", err=True)
        if out is None:
            _, body = download_letter(session, row - 1)
            typer.echo(body.decode("utf-8"))
        else:
            typer.echo(str(save_letter(session, row - 1, out)))
    except IndexError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def letters(
    csv_path: Path = typer.Argument(..., help="Listings CSV"),
    out: Path = typer.Option(Path("letters"), "--out", help="Directory for the .txt files"),
    scheme: Optional[str] = SchemeOption,
    seed: Optional[int] = SeedOption,
    workers: int = typer.Option(1, help="Threads for per-row processing"),
) -> None:
    """
    Write a letter for every row and list each file with its template label.
    """
    session = _load(csv_path, scheme, seed, workers=workers)
    paths = save_all_letters(session, out)
    for listing, path in zip(session.all(), paths):
        typer.echo(f"{path.name}\t{listing.template_label}")
    typer.echo(f"Wrote {len(paths)} letters to {out}")


@app.command()
def export(
    csv_path: Path = typer.Argument(..., help="Listings CSV"),
    out: Path = typer.Option(..., "--out", help="Path of the enriched CSV"),
    scheme: Optional[str] = SchemeOption,
    seed: Optional[int] = SeedOption,
) -> None:
    """
    Write the uploaded sheet with an added LOI template column.
    """
    session = _load(csv_path, scheme, seed)
    path = export_enriched(session, out)
    typer.echo(str(path))


if __name__ == "__main__":
    app()
