from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from loigen.domain.metrics import DerivedMetrics, parse_amount
from loigen.domain.rules import TemplateCategory

Variant = Literal["v1", "v2", "v3"]

VARIANTS: tuple[str, ...] = ("v1", "v2", "v3")


class ListingRecord(BaseModel):
    """
    One spreadsheet row.

    Fields are addressed by their CSV column names (aliases). Anything else in
    the row is kept as an extra so the enriched export can write it back.
    Validators never raise: bad cells degrade to None.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    list_price: float | None = Field(default=None, alias="MLS_Curr_ListPrice")
    mortgage_balance: float | None = Field(default=None, alias="EstimatedMortgageBalance")
    agent_name: str | None = Field(default=None, alias="MLS_Curr_ListAgentName")
    address: str | None = Field(default=None, alias="PropertyAddress")
    city: str | None = Field(default=None, alias="PropertyCity")

    # strategy scheme inputs
    ltv_field: float | None = Field(default=None, alias="LTV")
    total_loans: float | None = Field(default=None, alias="TotalLoans")

    variant: Variant | None = Field(default=None, alias="LOI_Variant")

    @field_validator("list_price", "mortgage_balance", "ltv_field", "total_loans", mode="before")
    @classmethod
    def _to_amount(cls, v: Any) -> float | None:
        return parse_amount(v)

    @field_validator("agent_name", "address", "city", mode="before")
    @classmethod
    def _to_text(cls, v: Any) -> str | None:
        if v is None or isinstance(v, float) and v != v:
            return None
        s = str(v).strip()
        return s or None

    @field_validator("variant", mode="before")
    @classmethod
    def _to_variant(cls, v: Any) -> str | None:
        if v is None:
            return None
        s = str(v).strip().lower()
        return s if s in VARIANTS else None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "ListingRecord":
        return cls.model_validate({str(k): v for k, v in row.items()})


@dataclass(frozen=True)
class ProcessedListing:
    """A row after derivation: what the table, letter and export steps read."""
    index: int
    record: ListingRecord
    metrics: DerivedMetrics
    category: TemplateCategory
    variant: str

    @property
    def template_label(self) -> str:
        if self.category is TemplateCategory.UNKNOWN:
            return self.category.value
        return f"{self.category.value}/{self.variant}"
