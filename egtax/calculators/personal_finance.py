"""Household calculators: zakat, growth, inflation, discounts, retirement, gratuity, electricity."""

from decimal import Decimal

from egtax.calculators.brackets import apply_tiers
from egtax.calculators.report import build_report, format_currency, step
from egtax.calculators.tax_data import ELECTRICITY_BRACKETS, ELECTRICITY_SERVICE_FEES, UNBOUNDED
from egtax.errors import CalculationError
from egtax.models import (
    DiscountParams,
    ElectricityParams,
    EndOfServiceParams,
    InflationParams,
    InvestmentParams,
    Report,
    RetirementParams,
    SavingsGoalParams,
    ZakatParams,
)

ZERO = Decimal("0")
MONTHS = Decimal("12")

NISAB_GOLD_GRAMS = Decimal("85")
ZAKAT_RATE = Decimal("0.025")

GRATUITY_TIER_YEARS = Decimal("5")

SAFE_WITHDRAWAL_MULTIPLE = Decimal("25")  # 4% rule
MAX_SAVINGS_MONTHS = 1200


def future_value(
    principal: Decimal,
    monthly_contribution: Decimal,
    monthly_rate: Decimal,
    months: Decimal,
) -> tuple[Decimal, Decimal]:
    """Future value of a lump sum and of an ordinary monthly annuity.

    Returns:
        (lump-sum future value, annuity future value). A zero rate
        degenerates to plain accumulation.
    """
    if monthly_rate == 0:
        return principal, monthly_contribution * months
    growth = (1 + monthly_rate) ** months
    return principal * growth, monthly_contribution * (growth - 1) / monthly_rate


def calculate_zakat(params: ZakatParams) -> Report:
    """Zakat at 2.5% of net zakatable wealth once it exceeds the gold nisab."""
    nisab = params.gold_price * NISAB_GOLD_GRAMS
    pool = params.cash + params.stocks + params.trade_goods
    net_pool = pool - params.debts

    zakat = net_pool * ZAKAT_RATE if net_pool > nisab else ZERO

    if net_pool > nisab:
        summary = f"Your net wealth exceeds the nisab. Zakat due is {format_currency(zakat)}."
    else:
        summary = (
            f"Your net wealth does not exceed the nisab ({format_currency(nisab)}). "
            "No zakat is due."
        )

    return build_report(
        "zakat",
        summary=summary,
        calculations=[
            step(f"Nisab (value of {NISAB_GOLD_GRAMS} g of gold)", nisab),
            step("Total zakatable assets", pool),
            step("Debts deducted", params.debts),
            step("Net zakatable wealth", net_pool),
            step("Zakat due (2.5%)", zakat),
        ],
        gross_income=pool,
        total_tax=zakat,
        net_income=net_pool,
    )


def calculate_investment(params: InvestmentParams) -> Report:
    """Compound growth of an initial sum plus monthly contributions."""
    monthly_rate = params.interest_rate / 100 / MONTHS
    months = params.years * MONTHS

    fv_initial, fv_monthly = future_value(
        params.initial_amount, params.monthly_contribution, monthly_rate, months
    )
    total_value = fv_initial + fv_monthly
    total_contribution = params.initial_amount + params.monthly_contribution * months
    total_gains = total_value - total_contribution

    return build_report(
        "investment",
        summary=(
            f"After {params.years} years your investment is expected to reach "
            f"{format_currency(total_value)}, with gains of {format_currency(total_gains)}."
        ),
        calculations=[
            step("Total contributions", total_contribution),
            step("Expected gains", total_gains),
            step("Total future value", total_value),
        ],
        gross_income=total_contribution,
        net_income=total_value,
    )


def calculate_inflation(params: InflationParams) -> Report:
    """What an amount grows to, and is worth in today's money, after inflation.

    ``total_tax`` carries the nominal increase and ``net_income`` the
    purchasing power of the original amount.
    """
    growth = (1 + params.rate / 100) ** params.years
    future = params.amount * growth
    purchasing_power = params.amount / growth

    return build_report(
        "inflation",
        summary=(
            f"{format_currency(params.amount)} today will need to be {format_currency(future)} "
            f"in {params.years} years, and today's amount will then buy what "
            f"{format_currency(purchasing_power)} buys now."
        ),
        calculations=[
            step("Future value", future),
            step("Purchasing power", purchasing_power),
        ],
        gross_income=params.amount,
        total_tax=future - params.amount,
        net_income=purchasing_power,
    )


def calculate_discount(params: DiscountParams) -> Report:
    """Final price after a percentage discount; ``total_tax`` carries the saving."""
    saved = params.original_price * params.discount / 100
    final_price = params.original_price - saved

    return build_report(
        "discount",
        summary=(
            f"A {params.discount}% discount on an item priced at "
            f"{format_currency(params.original_price)}."
        ),
        calculations=[
            step("You save", saved),
            step("Final price", final_price),
        ],
        gross_income=params.original_price,
        total_tax=saved,
        net_income=final_price,
    )


def calculate_end_of_service(params: EndOfServiceParams) -> Report:
    """Half a month's salary per year for the first five years, a full month after."""
    first_years = min(params.years_of_service, GRATUITY_TIER_YEARS)
    later_years = max(ZERO, params.years_of_service - GRATUITY_TIER_YEARS)

    first_tier = first_years * (params.last_salary / 2)
    later_tier = later_years * params.last_salary
    total = first_tier + later_tier

    return build_report(
        "endOfService",
        summary=(
            f"The end-of-service gratuity for {params.years_of_service} years of service "
            f"is {format_currency(total)}."
        ),
        calculations=[
            step(f"First 5 years ({first_years} years x half a month)", first_tier),
            step(f"Beyond 5 years ({later_years} years x a full month)", later_tier),
        ],
        gross_income=params.last_salary,
        net_income=total,
    )


def calculate_electricity(params: ElectricityParams) -> Report:
    """Tiered electricity bill plus the fixed service fee.

    ``total_tax`` and ``net_income`` both carry the bill total.
    """
    tiers = ELECTRICITY_BRACKETS[params.meter_type]
    energy_cost, slices = apply_tiers(params.consumption_kwh, tiers)
    service_fee = ELECTRICITY_SERVICE_FEES[params.meter_type]
    total = energy_cost + service_fee

    calculations = []
    for s in slices:
        if s.limit == UNBOUNDED:
            label = f"Above {s.lower:f} kWh"
        else:
            label = f"From {s.lower + 1:f} to {s.limit:f} kWh"
        calculations.append(step(label, s.cost))
    calculations.append(step("Service fee", service_fee))

    return build_report(
        "electricity",
        summary=(
            f"The estimated bill for {params.consumption_kwh} kWh is {format_currency(total)}."
        ),
        calculations=calculations,
        gross_income=params.consumption_kwh,
        total_tax=total,
        net_income=total,
    )


def calculate_retirement(params: RetirementParams) -> Report:
    """Projected retirement fund against the capital the 4% rule requires.

    ``net_income`` is the surplus (positive) or shortfall (negative).
    """
    years = max(0, params.retirement_age - params.current_age)
    months = Decimal(years) * MONTHS
    monthly_rate = params.annual_return / 100 / MONTHS

    fv_savings, fv_contributions = future_value(
        params.current_savings, params.monthly_contribution, monthly_rate, months
    )
    projected = fv_savings + fv_contributions
    required = params.desired_monthly_income * MONTHS * SAFE_WITHDRAWAL_MULTIPLE
    surplus = projected - required

    if surplus >= 0:
        summary = f"You are on track, with a projected surplus of {format_currency(surplus)}."
    else:
        summary = f"Your plan falls short of the required fund by {format_currency(-surplus)}."

    return build_report(
        "retirement",
        summary=summary,
        calculations=[
            step("Years to retirement", years),
            step("Future value of current savings", fv_savings),
            step("Future value of monthly contributions", fv_contributions),
            step("Projected retirement fund", projected),
            step("Required fund (4% rule)", required),
            step("Surplus / deficit", surplus),
        ],
        gross_income=projected,
        net_income=surplus,
    )


def calculate_savings_goal(params: SavingsGoalParams) -> Report:
    """Months needed to reach a savings target.

    Each month the contribution is deposited first, then interest accrues on
    the new balance. Goals not reachable within 100 years fail.
    """
    balance = params.initial_deposit
    monthly_rate = params.annual_rate / 100 / MONTHS

    if balance < params.target_amount and params.monthly_contribution <= 0 and monthly_rate <= 0:
        raise CalculationError("savingsGoal.error.unreachable")

    months = 0
    while balance < params.target_amount and months < MAX_SAVINGS_MONTHS:
        balance += params.monthly_contribution
        balance += balance * monthly_rate
        months += 1

    if balance < params.target_amount:
        raise CalculationError("savingsGoal.error.unreachable")

    total_contributions = params.initial_deposit + params.monthly_contribution * months
    total_interest = balance - total_contributions
    name = params.goal_name or "your goal"

    return build_report(
        "savingsGoal",
        summary=(
            f"You will reach {name} of {format_currency(params.target_amount)} in "
            f"{months // 12} years and {months % 12} months."
        ),
        calculations=[
            step("Months to goal", months),
            step("Total contributions", total_contributions),
            step("Interest earned", total_interest),
            step("Final balance", balance),
        ],
        gross_income=total_contributions,
        net_income=balance,
    )
