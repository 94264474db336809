# tests/conftest.py
import random

import pytest

LISTINGS_CSV = """\
MLS_Curr_ListPrice,EstimatedMortgageBalance,MLS_Curr_ListAgentName,PropertyAddress,PropertyCity,Notes
250000,200000,Jane Doe,"123 Main St, Unit 4, Springfield",Springfield,corner lot
300000,,Bob Smith,"456 Oak Ave, Shelbyville",Shelbyville,
200000,"$191,400",Carla Ruiz,789 Pine Rd Apt 2,Capital City,needs roof
"""


@pytest.fixture
def listings_csv(tmp_path):
    path = tmp_path / "listings.csv"
    path.write_text(LISTINGS_CSV)
    return path


@pytest.fixture
def rng():
    return random.Random(1234)


class DummyRulesConfig:
    """Default thresholds: low equity above 90%, strategy buckets at 25% / 75%."""
    LOW_EQUITY_LTV = 90.0
    SELLER_FINANCING_MAX_LTV = 25.0
    HYBRID_MAX_LTV = 75.0
    CATEGORY_SCHEME = "mortgage"


@pytest.fixture
def rules_cfg():
    return DummyRulesConfig()
