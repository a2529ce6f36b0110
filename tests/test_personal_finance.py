"""Tests for zakat, investment, gratuity, electricity, retirement and savings goals."""

from decimal import Decimal

import pytest

from egtax.calculators.personal_finance import (
    calculate_discount,
    calculate_electricity,
    calculate_end_of_service,
    calculate_inflation,
    calculate_investment,
    calculate_retirement,
    calculate_savings_goal,
    calculate_zakat,
    future_value,
)
from egtax.errors import CalculationError
from egtax.models import (
    DiscountParams,
    ElectricityParams,
    EndOfServiceParams,
    InflationParams,
    InvestmentParams,
    RetirementParams,
    SavingsGoalParams,
    ZakatParams,
)
from tests.helpers import step_amounts, step_descriptions


class TestZakat:
    def test_exactly_at_nisab_is_exempt(self) -> None:
        report = calculate_zakat(ZakatParams(gold_price=Decimal("3000"), cash=Decimal("255000")))
        assert report.calculations[0].amount == 255000
        assert report.total_tax == 0
        assert "does not exceed" in report.summary

    def test_just_above_nisab(self) -> None:
        report = calculate_zakat(ZakatParams(gold_price=Decimal("3000"), cash=Decimal("255001")))
        assert report.total_tax == pytest.approx(6375.025)
        assert report.net_income == 255001

    def test_debts_reduce_the_pool(self) -> None:
        report = calculate_zakat(
            ZakatParams(
                gold_price=Decimal("3000"),
                cash=Decimal("200000"),
                stocks=Decimal("50000"),
                trade_goods=Decimal("50000"),
                debts=Decimal("50000"),
            )
        )
        assert step_amounts(report)[1:4] == pytest.approx([300000, 50000, 250000])
        assert report.total_tax == 0


class TestFutureValue:
    def test_zero_rate(self) -> None:
        assert future_value(Decimal("100"), Decimal("10"), Decimal("0"), Decimal("12")) == (
            Decimal("100"),
            Decimal("120"),
        )

    def test_positive_rate(self) -> None:
        lump, annuity = future_value(
            Decimal("1000"), Decimal("100"), Decimal("0.01"), Decimal("12")
        )
        assert float(lump) == pytest.approx(1000 * 1.01**12)
        assert float(annuity) == pytest.approx(100 * (1.01**12 - 1) / 0.01)


class TestInvestment:
    def test_compound_growth(self) -> None:
        report = calculate_investment(
            InvestmentParams(
                initial_amount=Decimal("10000"), interest_rate=Decimal("12"), years=Decimal("1")
            )
        )
        assert report.net_income == pytest.approx(10000 * 1.01**12)
        assert report.gross_income == 10000

    def test_zero_rate_has_no_gains(self) -> None:
        report = calculate_investment(
            InvestmentParams(
                initial_amount=Decimal("10000"),
                monthly_contribution=Decimal("100"),
                interest_rate=Decimal("0"),
                years=Decimal("2"),
            )
        )
        assert step_amounts(report) == pytest.approx([12400, 0, 12400])


class TestInflation:
    def test_growth_and_purchasing_power(self) -> None:
        report = calculate_inflation(
            InflationParams(amount=Decimal("1000"), rate=Decimal("10"), years=2)
        )
        assert step_amounts(report) == pytest.approx([1210, 1000 / 1.21])
        assert report.total_tax == pytest.approx(210)
        assert report.net_income == pytest.approx(1000 / 1.21)
        assert report.gross_income == 1000

    def test_zero_rate(self) -> None:
        report = calculate_inflation(
            InflationParams(amount=Decimal("500"), rate=Decimal("0"), years=5)
        )
        assert report.total_tax == 0
        assert report.net_income == 500

    def test_years_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            InflationParams(amount=Decimal("500"), rate=Decimal("5"), years=0)


class TestDiscount:
    def test_discount(self) -> None:
        report = calculate_discount(
            DiscountParams(original_price=Decimal("200"), discount=Decimal("25"))
        )
        assert step_amounts(report) == pytest.approx([50, 150])
        assert report.total_tax == pytest.approx(50)
        assert report.net_income == pytest.approx(150)

    def test_discount_above_100_rejected(self) -> None:
        with pytest.raises(ValueError):
            DiscountParams.model_validate({"originalPrice": 100, "discount": 120})

class TestEndOfService:
    def test_long_service(self) -> None:
        report = calculate_end_of_service(
            EndOfServiceParams(last_salary=Decimal("10000"), years_of_service=Decimal("8"))
        )
        assert step_amounts(report) == pytest.approx([25000, 30000])
        assert report.net_income == pytest.approx(55000)

    def test_short_service(self) -> None:
        report = calculate_end_of_service(
            EndOfServiceParams(last_salary=Decimal("10000"), years_of_service=Decimal("3"))
        )
        assert step_amounts(report) == pytest.approx([15000, 0])


class TestElectricity:
    def test_residential(self) -> None:
        report = calculate_electricity(ElectricityParams(consumption_kwh=Decimal("120")))
        assert step_descriptions(report) == [
            "From 1 to 50 kWh",
            "From 51 to 100 kWh",
            "From 101 to 200 kWh",
            "Service fee",
        ]
        assert step_amounts(report) == pytest.approx([29, 34, 16.6, 10])
        assert report.total_tax == pytest.approx(89.6)
        assert report.net_income == report.total_tax

    def test_commercial_top_tier(self) -> None:
        report = calculate_electricity(
            ElectricityParams(consumption_kwh=Decimal("1200"), meter_type="commercial")
        )
        assert step_descriptions(report)[-2] == "Above 1000 kWh"
        assert report.total_tax == pytest.approx(1852.5)

    def test_zero_consumption_pays_service_fee(self) -> None:
        report = calculate_electricity(ElectricityParams(consumption_kwh=Decimal("0")))
        assert step_descriptions(report) == ["Service fee"]
        assert report.total_tax == 10


class TestRetirement:
    def test_shortfall(self) -> None:
        report = calculate_retirement(
            RetirementParams(
                current_age=30,
                retirement_age=60,
                annual_return=Decimal("7"),
                desired_monthly_income=Decimal("10000"),
            )
        )
        assert step_amounts(report)[4] == pytest.approx(3000000)
        assert report.net_income == pytest.approx(-3000000)
        assert "falls short" in report.summary

    def test_projection(self) -> None:
        report = calculate_retirement(
            RetirementParams(
                current_age=35,
                retirement_age=65,
                current_savings=Decimal("100000"),
                monthly_contribution=Decimal("2000"),
                annual_return=Decimal("6"),
                desired_monthly_income=Decimal("5000"),
            )
        )
        growth = 1.005**360
        expected = 100000 * growth + 2000 * (growth - 1) / 0.005
        assert report.gross_income == pytest.approx(expected)
        assert report.net_income == pytest.approx(expected - 1500000)

    def test_already_retired(self) -> None:
        report = calculate_retirement(
            RetirementParams(
                current_age=70,
                retirement_age=60,
                current_savings=Decimal("500000"),
                annual_return=Decimal("5"),
                desired_monthly_income=Decimal("1000"),
            )
        )
        assert report.calculations[0].amount == 0
        assert report.gross_income == 500000


class TestSavingsGoal:
    def test_without_interest(self) -> None:
        report = calculate_savings_goal(
            SavingsGoalParams(target_amount=Decimal("1000"), monthly_contribution=Decimal("100"))
        )
        assert report.calculations[0].amount == 10
        assert report.net_income == 1000

    def test_interest_shortens_the_wait(self) -> None:
        params = {"targetAmount": 10000, "monthlyContribution": 500}
        plain = calculate_savings_goal(SavingsGoalParams.model_validate(params))
        with_interest = calculate_savings_goal(
            SavingsGoalParams.model_validate({**params, "annualRate": 24})
        )
        assert with_interest.calculations[0].amount < plain.calculations[0].amount

    def test_already_reached(self) -> None:
        report = calculate_savings_goal(
            SavingsGoalParams(target_amount=Decimal("500"), initial_deposit=Decimal("800"))
        )
        assert report.calculations[0].amount == 0

    def test_unreachable_without_growth(self) -> None:
        with pytest.raises(CalculationError) as exc_info:
            calculate_savings_goal(SavingsGoalParams(target_amount=Decimal("1000")))
        assert exc_info.value.message_key == "savingsGoal.error.unreachable"

    def test_unreachable_within_horizon(self) -> None:
        with pytest.raises(CalculationError):
            calculate_savings_goal(
                SavingsGoalParams(
                    target_amount=Decimal("1000000000"), monthly_contribution=Decimal("1")
                )
            )
