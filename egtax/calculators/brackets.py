"""Bracket walks shared by the income tax, payroll, freelancer and electricity calculators."""

from collections.abc import Iterable
from decimal import Decimal
from typing import NamedTuple

from egtax.calculators.tax_data import ConsumptionTier, InsuranceParams, TaxBracket

ZERO = Decimal("0")


class BracketSlice(NamedTuple):
    """The part of an amount that fell into one bracket."""

    width: Decimal
    rate: Decimal
    taxable: Decimal
    tax: Decimal


class TierSlice(NamedTuple):
    lower: Decimal  # cumulative start of the tier
    limit: Decimal
    rate: Decimal
    quantity: Decimal
    cost: Decimal


def apply_brackets(
    taxable_income: Decimal,
    brackets: Iterable[TaxBracket],
) -> tuple[Decimal, list[BracketSlice]]:
    """Tax ``taxable_income`` bracket by bracket.

    Each bracket consumes at most its width; the walk stops once nothing is
    left, so only touched brackets appear in the breakdown.

    Returns:
        Total tax and one BracketSlice per bracket touched.
    """
    remaining = max(ZERO, taxable_income)
    total_tax = ZERO
    slices: list[BracketSlice] = []

    for bracket in brackets:
        if remaining <= 0:
            break
        taxable = min(remaining, bracket.width)
        tax = taxable * bracket.rate
        total_tax += tax
        remaining -= taxable
        slices.append(BracketSlice(bracket.width, bracket.rate, taxable, tax))

    return total_tax, slices


def clamp_contribution_wage(wage: Decimal, insurance: InsuranceParams) -> Decimal:
    """Clamp a monthly wage to the year's insurable floor and ceiling."""
    return max(insurance.min, min(wage, insurance.max))


def apply_tiers(
    quantity: Decimal,
    tiers: Iterable[ConsumptionTier],
) -> tuple[Decimal, list[TierSlice]]:
    """Price ``quantity`` against cumulative-limit tiers."""
    remaining = quantity
    total = ZERO
    lower = ZERO
    slices: list[TierSlice] = []

    for tier in tiers:
        if remaining <= 0:
            break
        in_tier = min(remaining, tier.limit - lower)
        cost = in_tier * tier.rate
        total += cost
        remaining -= in_tier
        slices.append(TierSlice(lower, tier.limit, tier.rate, in_tier, cost))
        lower = tier.limit

    return total, slices
