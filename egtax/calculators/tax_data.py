"""Egyptian rate tables: salary tax brackets, social insurance, electricity tiers.

Hardcoded Python constants keyed by calendar year. Unknown years fall back to
DEFAULT_TAX_YEAR instead of failing.
"""

import logging
from decimal import Decimal
from typing import NamedTuple, TypeVar

logger = logging.getLogger(__name__)

UNBOUNDED = Decimal("Infinity")


class TaxBracket(NamedTuple):
    """A single income tax bracket."""

    width: Decimal  # size of this slice, not a cumulative ceiling
    rate: Decimal


class SalaryTaxTable(NamedTuple):
    personal_exemption: Decimal
    brackets: tuple[TaxBracket, ...]


class InsuranceParams(NamedTuple):
    """Social insurance contribution bounds and rates for a year."""

    min: Decimal  # monthly contribution wage floor
    max: Decimal  # monthly contribution wage ceiling
    employee_rate: Decimal
    employer_rate: Decimal


class ConsumptionTier(NamedTuple):
    limit: Decimal  # cumulative kWh upper bound
    rate: Decimal  # EGP per kWh


# Law 26 of 2020
_SALARY_2022 = SalaryTaxTable(
    personal_exemption=Decimal("9000"),
    brackets=(
        TaxBracket(Decimal("15000"), Decimal("0")),
        TaxBracket(Decimal("15000"), Decimal("0.025")),
        TaxBracket(Decimal("15000"), Decimal("0.10")),
        TaxBracket(Decimal("15000"), Decimal("0.15")),
        TaxBracket(Decimal("140000"), Decimal("0.20")),
        TaxBracket(Decimal("200000"), Decimal("0.225")),
        TaxBracket(UNBOUNDED, Decimal("0.25")),
    ),
)

# Law 30 of 2023. Higher incomes lose the 0% bracket under the law; this
# simplified table applies it at every income level.
_SALARY_2023 = SalaryTaxTable(
    personal_exemption=Decimal("15000"),
    brackets=(
        TaxBracket(Decimal("30000"), Decimal("0")),
        TaxBracket(Decimal("15000"), Decimal("0.10")),
        TaxBracket(Decimal("15000"), Decimal("0.15")),
        TaxBracket(Decimal("140000"), Decimal("0.20")),
        TaxBracket(Decimal("200000"), Decimal("0.225")),
        TaxBracket(UNBOUNDED, Decimal("0.25")),
    ),
)

SALARY_TAX_BRACKETS: dict[int, SalaryTaxTable] = {
    2022: _SALARY_2022,
    2023: _SALARY_2023,
    2024: _SALARY_2023,
    2025: _SALARY_2023,
}

_EMPLOYEE_RATE = Decimal("0.11")
_EMPLOYER_RATE = Decimal("0.1875")

# Source: NOSI annual wage bounds circulars under Law 148 of 2019
SOCIAL_INSURANCE_PARAMS: dict[int, InsuranceParams] = {
    2022: InsuranceParams(Decimal("1400"), Decimal("9400"), _EMPLOYEE_RATE, _EMPLOYER_RATE),
    2023: InsuranceParams(Decimal("1700"), Decimal("10900"), _EMPLOYEE_RATE, _EMPLOYER_RATE),
    2024: InsuranceParams(Decimal("2000"), Decimal("12600"), _EMPLOYEE_RATE, _EMPLOYER_RATE),
    2025: InsuranceParams(Decimal("2300"), Decimal("14500"), _EMPLOYEE_RATE, _EMPLOYER_RATE),
}

ELECTRICITY_BRACKETS: dict[str, tuple[ConsumptionTier, ...]] = {
    "residential": (
        ConsumptionTier(Decimal("50"), Decimal("0.58")),
        ConsumptionTier(Decimal("100"), Decimal("0.68")),
        ConsumptionTier(Decimal("200"), Decimal("0.83")),
        ConsumptionTier(Decimal("350"), Decimal("1.25")),
        ConsumptionTier(Decimal("650"), Decimal("1.40")),
        ConsumptionTier(Decimal("1000"), Decimal("1.50")),
        ConsumptionTier(UNBOUNDED, Decimal("1.65")),
    ),
    "commercial": (
        ConsumptionTier(Decimal("100"), Decimal("0.75")),
        ConsumptionTier(Decimal("250"), Decimal("1.35")),
        ConsumptionTier(Decimal("600"), Decimal("1.50")),
        ConsumptionTier(Decimal("1000"), Decimal("1.65")),
        ConsumptionTier(UNBOUNDED, Decimal("1.80")),
    ),
}

# Fixed monthly customer service charge added to every bill
ELECTRICITY_SERVICE_FEES: dict[str, Decimal] = {
    "residential": Decimal("10"),
    "commercial": Decimal("30"),
}

DEFAULT_TAX_YEAR = 2024

T = TypeVar("T")


def resolve_year(table: dict[int, T], year: int) -> int:
    """Return ``year`` if the table has it, else DEFAULT_TAX_YEAR."""
    if year in table:
        return year
    logger.info("No rate table for year=%s, using %s", year, DEFAULT_TAX_YEAR)
    return DEFAULT_TAX_YEAR


def lookup(table: dict[int, T], year: int) -> T:
    """Return the table entry for ``year``, falling back to DEFAULT_TAX_YEAR."""
    return table[resolve_year(table, year)]
