"""Shared test fixtures."""

from decimal import Decimal

import pytest

from egtax.calculators.tax_data import (
    SALARY_TAX_BRACKETS,
    SOCIAL_INSURANCE_PARAMS,
    InsuranceParams,
    SalaryTaxTable,
)
from egtax.history import InMemoryHistoryRepository


@pytest.fixture
def salary_table_2024() -> SalaryTaxTable:
    return SALARY_TAX_BRACKETS[2024]


@pytest.fixture
def insurance_2024() -> InsuranceParams:
    return SOCIAL_INSURANCE_PARAMS[2024]


@pytest.fixture
def history() -> InMemoryHistoryRepository:
    """Small repository so eviction is easy to exercise."""
    return InMemoryHistoryRepository(max_records=3)


@pytest.fixture
def incomes() -> list[Decimal]:
    """Taxable incomes landing in every bracket, edges included."""
    return [
        Decimal(v)
        for v in (
            "0", "1", "29999.99", "30000", "45000", "60000", "200000", "400000", "400001", "2500000"
        )
    ]
