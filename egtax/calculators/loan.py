"""Loan repayments: fixed-installment (annuity) and decreasing-balance loans."""

import math
from decimal import Decimal

from egtax.calculators.report import build_report, format_currency, step
from egtax.errors import CalculationError
from egtax.models import AmortizationEntry, LoanParams, Report

ZERO = Decimal("0")


def monthly_installment(principal: Decimal, monthly_rate: Decimal, months: int) -> Decimal:
    """Standard annuity payment; a zero rate splits the principal evenly."""
    if monthly_rate == 0:
        return principal / months
    growth = (1 + monthly_rate) ** months
    return principal * (monthly_rate * growth) / (growth - 1)


def _term_months(params: LoanParams) -> int:
    """Term in whole months; a partial final month counts as a full one."""
    months = math.ceil(params.term * 12)
    if months <= 0:
        raise CalculationError("loan.error.term")
    return months


def amortization_schedule(params: LoanParams) -> list[AmortizationEntry]:
    """Month-by-month repayment schedule.

    Amortizing loans pay a constant installment; decreasing loans repay a
    constant principal plus interest on the outstanding balance.
    """
    months = _term_months(params)
    rate = params.interest_rate / 100 / 12
    balance = params.amount
    entries: list[AmortizationEntry] = []

    if params.loan_type == "amortizing":
        payment = monthly_installment(params.amount, rate, months)
        for month in range(1, months + 1):
            interest = balance * rate
            principal = payment - interest
            balance -= principal
            entries.append(_entry(month, payment, principal, interest, balance))
    else:
        principal = params.amount / months
        for month in range(1, months + 1):
            interest = balance * rate
            balance -= principal
            entries.append(_entry(month, principal + interest, principal, interest, balance))

    return entries


def _entry(
    month: int,
    payment: Decimal,
    principal: Decimal,
    interest: Decimal,
    balance: Decimal,
) -> AmortizationEntry:
    return AmortizationEntry(
        month=month,
        payment=float(payment),
        principal=float(principal),
        interest=float(interest),
        remaining_balance=float(max(ZERO, balance)),
    )


def calculate_loan(params: LoanParams) -> Report:
    """Repayment totals for a loan.

    ``total_tax`` carries the total interest and ``net_income`` the total
    amount repaid.
    """
    months = _term_months(params)
    rate = params.interest_rate / 100 / 12

    if params.loan_type == "amortizing":
        payment = monthly_installment(params.amount, rate, months)
        total_payment = payment * months
        total_interest = total_payment - params.amount
        calculations = [step("Monthly payment", payment)]
    else:
        principal = params.amount / months
        # interest on balances amount, amount - p, ..., p
        total_interest = sum(
            ((params.amount - principal * m) * rate for m in range(months)), ZERO
        )
        total_payment = params.amount + total_interest
        calculations = [
            step("First monthly payment", principal + params.amount * rate),
            step("Last monthly payment", principal + principal * rate),
        ]

    calculations.append(step("Total payment", total_payment))
    calculations.append(step("Total interest", total_interest))

    return build_report(
        "loan",
        summary=f"Loan of {format_currency(params.amount)} over {params.term} years.",
        calculations=calculations,
        gross_income=params.amount,
        total_tax=total_interest,
        net_income=total_payment,
    )
