# src/loigen/domain/ports.py
from __future__ import annotations

from typing import Any, Protocol, Sequence, TypeVar

T = TypeVar("T")


# ----------------------------
# Variant randomness
# ----------------------------

class RandomSource(Protocol):
    """Anything with ``random.Random().choice`` semantics."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


# ----------------------------
# Upload session
# ----------------------------

class ListingSessionRepository(Protocol):
    def load(self, listings: list[Any]) -> int:
        ...

    def get(self, index: int) -> Any:
        ...

    def all(self) -> list[Any]:
        ...

    def page(self, page: int, per_page: int) -> Any:
        ...
