"""Report assembly shared by every calculator."""

from decimal import Decimal
from functools import lru_cache

from config import load_yaml_config
from config.settings import settings
from egtax.models import CalculationStep, Report


def format_currency(amount: Decimal | float) -> str:
    """Format an amount as e.g. ``EGP 12,345.68``."""
    return f"{settings.currency} {float(amount):,.2f}"


def format_rate(rate: Decimal) -> str:
    """Format a 0..1 rate as a percentage string, e.g. ``22.5%``."""
    return f"{(rate * 100).normalize():f}%"


@lru_cache(maxsize=1)
def _law_citations() -> dict[str, list[str]]:
    return load_yaml_config(settings.laws_file)


def applicable_laws(calculator: str) -> list[str]:
    """Law citations attached to a calculator's report."""
    return list(_law_citations().get(calculator, []))


def step(description: str, amount: Decimal | float | str) -> CalculationStep:
    if isinstance(amount, str):
        return CalculationStep(description=description, amount=amount)
    return CalculationStep(description=description, amount=float(amount))


def build_report(
    calculator: str,
    summary: str,
    calculations: list[CalculationStep],
    gross_income: Decimal,
    total_tax: Decimal = Decimal("0"),
    total_insurance: Decimal = Decimal("0"),
    net_income: Decimal = Decimal("0"),
) -> Report:
    return Report(
        summary=summary,
        calculations=calculations,
        gross_income=float(gross_income),
        total_tax=float(total_tax),
        total_insurance=float(total_insurance),
        net_income=float(net_income),
        applicable_laws=applicable_laws(calculator),
    )
