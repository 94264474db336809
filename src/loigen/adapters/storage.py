from __future__ import annotations

import io
from pathlib import Path
from typing import Any, BinaryIO

import pandas as pd

from loigen.adapters.logging_utils import get_logger

logger = get_logger(__name__)


class ListingFileError(ValueError):
    """The uploaded spreadsheet could not be read as a CSV with a header row."""


Source = str | Path | bytes | BinaryIO


def _coerce_column(col: pd.Series) -> pd.Series:
    """
    Numeric-looking cells become numbers, blanks become None, the rest stay text.

    Works on the all-string frame so the original text is still available
    for export.
    """
    nums = pd.to_numeric(col, errors="coerce")
    out = col.astype(object).where(nums.isna(), nums.astype(object))
    out[col.str.strip() == ""] = None
    return out


def read_df(source: Source) -> pd.DataFrame:
    """
    Read the listings CSV exactly as written: every cell as str, blanks as "".

    Raises ListingFileError for anything pandas can't turn into a table.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except FileNotFoundError as err:
        logger.error("listing_file_missing", extra={"context": {"source": str(source)}})
        raise ListingFileError(f"listing file not found: {source}") from err
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as err:
        logger.error("listing_file_unparseable", extra={"context": {"error": str(err)}})
        raise ListingFileError(f"could not parse listing file: {err}") from err

    logger.info(
        "listing_file_read",
        extra={"context": {"rows": int(df.shape[0]), "columns": list(df.columns)}},
    )
    return df


def frame_to_rows(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Ordered field-keyed rows with numeric coercion applied."""
    if df.empty:
        return []
    typed = df.apply(_coerce_column)
    return typed.to_dict(orient="records")


def read_listings(source: Source) -> tuple[pd.DataFrame, list[dict[str, Any]]]:
    df = read_df(source)
    return df, frame_to_rows(df)


def write_df(df: pd.DataFrame, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path


def df_to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")
