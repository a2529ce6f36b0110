"""Tests for loan installments and amortization schedules."""

from decimal import Decimal

import pytest

from egtax.calculators.loan import amortization_schedule, calculate_loan, monthly_installment
from egtax.errors import CalculationError
from egtax.models import LoanParams
from tests.helpers import step_descriptions


def _annuity(principal: float, monthly_rate: float, months: int) -> float:
    growth = (1 + monthly_rate) ** months
    return principal * monthly_rate * growth / (growth - 1)


class TestMonthlyInstallment:
    def test_annuity(self) -> None:
        payment = monthly_installment(Decimal("100000"), Decimal("0.01"), 60)
        assert float(payment) == pytest.approx(_annuity(100000, 0.01, 60))

    def test_zero_rate(self) -> None:
        assert monthly_installment(Decimal("12000"), Decimal("0"), 12) == Decimal("1000")


class TestAmortizingLoan:
    def test_totals(self) -> None:
        report = calculate_loan(
            LoanParams(amount=Decimal("100000"), interest_rate=Decimal("12"), term=Decimal("5"))
        )
        payment = _annuity(100000, 0.01, 60)
        assert step_descriptions(report) == ["Monthly payment", "Total payment", "Total interest"]
        assert report.calculations[0].amount == pytest.approx(payment)
        assert report.net_income == pytest.approx(payment * 60)
        assert report.total_tax == pytest.approx(payment * 60 - 100000)
        assert report.gross_income == 100000

    def test_schedule_pays_off_balance(self) -> None:
        params = LoanParams(
            amount=Decimal("100000"), interest_rate=Decimal("12"), term=Decimal("5")
        )
        schedule = amortization_schedule(params)
        assert len(schedule) == 60
        assert schedule[0].interest == pytest.approx(1000)
        assert schedule[-1].remaining_balance == pytest.approx(0, abs=1e-6)
        assert sum(e.principal for e in schedule) == pytest.approx(100000)

    def test_zero_rate(self) -> None:
        report = calculate_loan(
            LoanParams(amount=Decimal("12000"), interest_rate=Decimal("0"), term=Decimal("1"))
        )
        assert report.calculations[0].amount == 1000
        assert report.total_tax == 0


class TestDecreasingLoan:
    def test_totals(self) -> None:
        report = calculate_loan(
            LoanParams(
                amount=Decimal("120000"),
                interest_rate=Decimal("12"),
                term=Decimal("1"),
                loan_type="decreasing",
            )
        )
        assert step_descriptions(report)[:2] == ["First monthly payment", "Last monthly payment"]
        assert report.calculations[0].amount == pytest.approx(11200)
        assert report.calculations[1].amount == pytest.approx(10100)
        assert report.total_tax == pytest.approx(7800)
        assert report.net_income == pytest.approx(127800)

    def test_schedule_matches_totals(self) -> None:
        params = LoanParams(
            amount=Decimal("120000"),
            interest_rate=Decimal("12"),
            term=Decimal("1"),
            loan_type="decreasing",
        )
        schedule = amortization_schedule(params)
        assert [e.principal for e in schedule] == pytest.approx([10000] * 12)
        assert sum(e.interest for e in schedule) == pytest.approx(7800)
        payments = [e.payment for e in schedule]
        assert payments == sorted(payments, reverse=True)


class TestLoanValidation:
    def test_fractional_term_rounds_up(self) -> None:
        params = LoanParams(
            amount=Decimal("1200"), interest_rate=Decimal("0"), term=Decimal("0.05")
        )
        assert len(amortization_schedule(params)) == 1
        assert calculate_loan(params).calculations[0].amount == 1200

        params = LoanParams(
            amount=Decimal("1300"), interest_rate=Decimal("0"), term=Decimal("1.05")
        )
        assert len(amortization_schedule(params)) == 13

    def test_zero_term(self) -> None:
        with pytest.raises(CalculationError) as exc_info:
            calculate_loan(
                LoanParams(amount=Decimal("1000"), interest_rate=Decimal("5"), term=Decimal("0"))
            )
        assert exc_info.value.message_key == "loan.error.term"

    def test_amount_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            LoanParams(amount=Decimal("0"), interest_rate=Decimal("5"), term=Decimal("1"))
