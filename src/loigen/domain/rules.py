from __future__ import annotations

from enum import Enum

from loigen.domain.metrics import DerivedMetrics, parse_amount


class TemplateCategory(str, Enum):
    # mortgage scheme
    NO_MORTGAGE = "NoMortgage"
    LOW_EQUITY = "LowEquity"
    STANDARD = "Standard"

    # strategy scheme
    SELLER_FINANCING = "SellerFinancing"
    HYBRID = "Hybrid"
    SUBJECT_TO = "SubjectTo"
    UNKNOWN = "Unknown"


MORTGAGE_CATEGORIES = (
    TemplateCategory.NO_MORTGAGE,
    TemplateCategory.LOW_EQUITY,
    TemplateCategory.STANDARD,
)

STRATEGY_CATEGORIES = (
    TemplateCategory.SELLER_FINANCING,
    TemplateCategory.HYBRID,
    TemplateCategory.SUBJECT_TO,
    TemplateCategory.UNKNOWN,
)


def select_mortgage_category(metrics: DerivedMetrics, config) -> TemplateCategory:
    """
    Evaluated top to bottom, first hit wins:
      1. no (or zero) mortgage balance -> NoMortgage
      2. LTV above the low-equity line  -> LowEquity
      3. everything else                -> Standard
    """
    if metrics.rounded_balance == 0:
        return TemplateCategory.NO_MORTGAGE
    if metrics.ltv > config.LOW_EQUITY_LTV:
        return TemplateCategory.LOW_EQUITY
    return TemplateCategory.STANDARD


def select_strategy_category(precomputed_ltv, config) -> TemplateCategory:
    ltv = parse_amount(precomputed_ltv)
    if ltv is None:
        return TemplateCategory.UNKNOWN
    if ltv <= config.SELLER_FINANCING_MAX_LTV:
        return TemplateCategory.SELLER_FINANCING
    if ltv <= config.HYBRID_MAX_LTV:
        return TemplateCategory.HYBRID
    return TemplateCategory.SUBJECT_TO


def select_category(record, metrics: DerivedMetrics, config, scheme: str | None = None) -> TemplateCategory:
    scheme = scheme or config.CATEGORY_SCHEME
    if scheme == "strategy":
        return select_strategy_category(record.ltv_field, config)
    if scheme == "mortgage":
        return select_mortgage_category(metrics, config)
    raise ValueError(f"unknown category scheme: {scheme}")
