import math
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from loigen.domain.listing import ProcessedListing
from loigen.domain.ports import ListingSessionRepository


@dataclass
class Page:
    items: list[Any]
    page: int
    per_page: int
    page_count: int
    total: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count


@dataclass
class InMemoryListingSession(ListingSessionRepository):
    """
    Everything derived from the current upload. Loading again replaces it.
    """
    listings: list[ProcessedListing] = field(default_factory=list)
    frame: pd.DataFrame | None = None
    source_name: str | None = None

    def load(
        self,
        listings: list[ProcessedListing],
        frame: pd.DataFrame | None = None,
        source_name: str | None = None,
    ) -> int:
        self.listings = list(listings)
        self.frame = frame
        self.source_name = source_name
        return len(self.listings)

    def clear(self) -> None:
        self.load([])

    def get(self, index: int) -> ProcessedListing:
        if not 0 <= index < len(self.listings):
            raise IndexError(f"no listing at row {index + 1} (session has {len(self.listings)})")
        return self.listings[index]

    def all(self) -> list[ProcessedListing]:
        return list(self.listings)

    def page(self, page: int, per_page: int) -> Page:
        total = len(self.listings)
        page_count = max(1, math.ceil(total / per_page))
        page = min(max(page, 1), page_count)
        start = (page - 1) * per_page
        return Page(
            items=self.listings[start:start + per_page],
            page=page,
            per_page=per_page,
            page_count=page_count,
            total=total,
        )
