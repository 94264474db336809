# src/loigen/adapters/config.py
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # Signature on every letter
    SENDER_NAME: str = Field(default="StudentName")

    # -----------------------------
    # Template selection
    # -----------------------------
    # mortgage: NoMortgage / LowEquity / Standard from the derived balance
    # strategy: SellerFinancing / Hybrid / SubjectTo from a precomputed LTV column
    CATEGORY_SCHEME: Literal["mortgage", "strategy"] = Field(default="mortgage")

    LOW_EQUITY_LTV: float = Field(default=90.0)
    SELLER_FINANCING_MAX_LTV: float = Field(default=25.0)
    HYBRID_MAX_LTV: float = Field(default=75.0)

    # None => variants are re-randomized on every upload
    VARIANT_SEED: int | None = Field(default=None)

    # -----------------------------
    # Review table / export
    # -----------------------------
    PAGE_SIZE: int = Field(default=10)
    TEMPLATE_COLUMN: str = Field(default="LOI_Template")

    model_config = SettingsConfigDict(
        env_prefix="LOIGEN_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "LOW_EQUITY_LTV",
        "SELLER_FINANCING_MAX_LTV",
        "HYBRID_MAX_LTV",
        mode="before",
    )
    @classmethod
    def _to_non_negative_percent(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, str):
            v = v.strip().replace("%", "")
        try:
            f = float(v)
        except Exception as err:
            raise ValueError("LTV threshold must be numeric or percent-like") from err
        if f < 0:
            raise ValueError("LTV threshold must be non-negative")
        return f

    @field_validator("PAGE_SIZE", mode="before")
    @classmethod
    def _page_size_positive(cls, v: Any) -> Any:
        n = int(v)
        if n <= 0:
            raise ValueError("PAGE_SIZE must be > 0")
        return n


config = AppConfig()
