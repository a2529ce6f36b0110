"""Salary income tax, payroll and freelancer tax: all routed through the bracket walk."""

import logging
from decimal import Decimal

from egtax.calculators.brackets import BracketSlice, apply_brackets, clamp_contribution_wage
from egtax.calculators.report import build_report, format_currency, format_rate, step
from egtax.calculators.tax_data import (
    SALARY_TAX_BRACKETS,
    SOCIAL_INSURANCE_PARAMS,
    UNBOUNDED,
    lookup,
)
from egtax.models import (
    CalculationStep,
    FreelancerTaxParams,
    PayrollParams,
    Report,
    TaxParams,
)

logger = logging.getLogger(__name__)

MONTHS = Decimal("12")
DEEMED_EXPENSE_RATE = Decimal("0.10")


def bracket_steps(slices: list[BracketSlice]) -> list[CalculationStep]:
    """One step per touched bracket, zero-rate brackets included."""
    steps = []
    for s in slices:
        if s.width == UNBOUNDED:
            label = f"Income above previous brackets at {format_rate(s.rate)}"
        else:
            label = f"Bracket of {format_currency(s.width)} at {format_rate(s.rate)}"
        steps.append(step(label, s.tax))
    return steps


def calculate_salary_tax(params: TaxParams) -> Report:
    """Calculate annual Egyptian salary tax with a per-bracket breakdown.

    The employee's social insurance share is deducted before the personal
    exemption; the remainder is taxed progressively.

    Args:
        params: Annual gross income and tax year. ``tax_type`` and
            ``insurance_type`` are recorded but do not change the arithmetic.

    Returns:
        Report with annual tax, annual employee insurance and net income.
    """
    insurance = lookup(SOCIAL_INSURANCE_PARAMS, params.year)
    monthly_gross = params.income / MONTHS
    contribution_wage = clamp_contribution_wage(monthly_gross, insurance)
    total_insurance = contribution_wage * insurance.employee_rate * MONTHS

    calculations = [
        step(
            f"Insurable wage (monthly {format_currency(contribution_wage)})",
            contribution_wage * MONTHS,
        ),
        step("Annual social insurance contribution (employee share)", total_insurance),
    ]

    income_after_insurance = params.income - total_insurance
    calculations.append(step("Income after social insurance", income_after_insurance))

    table = lookup(SALARY_TAX_BRACKETS, params.year)
    taxable_income = max(Decimal("0"), income_after_insurance - table.personal_exemption)
    calculations.append(step("Personal exemption", table.personal_exemption))
    calculations.append(step("Taxable income", taxable_income))

    total_tax, slices = apply_brackets(taxable_income, table.brackets)
    calculations.extend(bracket_steps(slices))

    net_income = params.income - total_insurance - total_tax
    logger.debug("Salary tax income=%s year=%s tax=%s", params.income, params.year, total_tax)

    return build_report(
        "salary",
        summary=(
            f"Based on an annual income of {format_currency(params.income)} for {params.year}, "
            "after social insurance and income tax the net income is "
            f"{format_currency(net_income)}."
        ),
        calculations=calculations,
        gross_income=params.income,
        total_tax=total_tax,
        total_insurance=total_insurance,
        net_income=net_income,
    )


def calculate_payroll(params: PayrollParams) -> Report:
    """Monthly payslip: gross plus allowances, less insurance, tax and deductions.

    Tax is computed on the annualised taxable wage and spread evenly over
    twelve months. All report totals are monthly figures.
    """
    insurance = lookup(SOCIAL_INSURANCE_PARAMS, params.year)
    table = lookup(SALARY_TAX_BRACKETS, params.year)

    monthly_gross = params.gross_monthly_salary + params.allowances
    contribution_wage = clamp_contribution_wage(monthly_gross, insurance)
    monthly_insurance = contribution_wage * insurance.employee_rate

    calculations = [
        step("Gross monthly salary", params.gross_monthly_salary),
        step("Allowances", params.allowances),
        step("Total monthly gross", monthly_gross),
        step("Insurable wage", contribution_wage),
        step(
            f"Employee insurance share ({format_rate(insurance.employee_rate)})",
            monthly_insurance,
        ),
    ]

    annual_taxable = max(
        Decimal("0"),
        (monthly_gross - monthly_insurance) * MONTHS - table.personal_exemption,
    )
    calculations.append(step("Annual taxable income", annual_taxable))

    annual_tax, slices = apply_brackets(annual_taxable, table.brackets)
    calculations.extend(bracket_steps(slices))

    monthly_tax = annual_tax / MONTHS
    net_salary = monthly_gross - monthly_insurance - monthly_tax - params.deductions
    calculations.append(step("Monthly income tax", monthly_tax))
    calculations.append(step("Other deductions", params.deductions))
    calculations.append(step("Net monthly salary", net_salary))

    return build_report(
        "payroll",
        summary=(
            f"For a monthly gross of {format_currency(monthly_gross)}, "
            f"the net monthly salary is {format_currency(net_salary)}."
        ),
        calculations=calculations,
        gross_income=monthly_gross,
        total_tax=monthly_tax,
        total_insurance=monthly_insurance,
        net_income=net_salary,
    )


def calculate_freelancer_tax(params: FreelancerTaxParams) -> Report:
    """Tax on non-commercial professional income.

    Either a deemed 10% of revenue or the declared actual expenses are
    deducted, then the net profit goes through the salary brackets.
    """
    table = lookup(SALARY_TAX_BRACKETS, params.year)

    if params.expense_type == "deemed":
        expenses = params.revenue * DEEMED_EXPENSE_RATE
        expense_label = f"Deemed expenses ({format_rate(DEEMED_EXPENSE_RATE)})"
    else:
        expenses = params.actual_expenses
        expense_label = "Actual expenses"

    net_profit = params.revenue - expenses
    taxable_income = max(Decimal("0"), net_profit - table.personal_exemption)

    calculations = [
        step("Total revenue", params.revenue),
        step(expense_label, expenses),
        step("Net profit", net_profit),
        step("Personal exemption", table.personal_exemption),
        step("Taxable income", taxable_income),
    ]

    total_tax, slices = apply_brackets(taxable_income, table.brackets)
    calculations.extend(bracket_steps(slices))
    net_income = net_profit - total_tax

    return build_report(
        "freelancer",
        summary=(
            f"On revenue of {format_currency(params.revenue)} the income tax due is "
            f"{format_currency(total_tax)}, leaving {format_currency(net_income)} after tax."
        ),
        calculations=calculations,
        gross_income=params.revenue,
        total_tax=total_tax,
        net_income=net_income,
    )
