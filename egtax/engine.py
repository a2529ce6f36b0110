"""Calculator registry: dispatch a calculator key and raw parameters to a report."""

import logging
from collections.abc import Callable, Mapping
from typing import Any, NamedTuple

from egtax.calculators.business_finance import (
    calculate_feasibility,
    calculate_fixed_asset,
    calculate_profit_margin,
    calculate_roi,
    calculate_share_capital,
)
from egtax.calculators.business_tax import (
    calculate_capital_gains_tax,
    calculate_corporate_tax,
    calculate_customs,
    calculate_stamp_duty,
    calculate_vat,
    calculate_withholding_tax,
)
from egtax.calculators.income_tax import (
    calculate_freelancer_tax,
    calculate_payroll,
    calculate_salary_tax,
)
from egtax.calculators.inheritance import calculate_inheritance
from egtax.calculators.loan import calculate_loan
from egtax.calculators.personal_finance import (
    calculate_discount,
    calculate_electricity,
    calculate_end_of_service,
    calculate_inflation,
    calculate_investment,
    calculate_retirement,
    calculate_savings_goal,
    calculate_zakat,
)
from egtax.calculators.real_estate import (
    calculate_real_estate_tax,
    calculate_real_estate_transaction_tax,
)
from egtax.calculators.social_insurance import calculate_social_insurance
from egtax.errors import UnknownCalculatorError
from egtax.models import (
    CalculationRecord,
    CapitalGainsTaxParams,
    CorporateTaxParams,
    CustomsParams,
    DiscountParams,
    ElectricityParams,
    EndOfServiceParams,
    FeasibilityStudyParams,
    FixedAssetParams,
    FreelancerTaxParams,
    InheritanceParams,
    InflationParams,
    InvestmentParams,
    LoanParams,
    PayrollParams,
    ProfitMarginParams,
    RealEstateTaxParams,
    RealEstateTransactionTaxParams,
    Record,
    Report,
    RetirementParams,
    ROIParams,
    SavingsGoalParams,
    ShareCapitalParams,
    SocialInsuranceParams,
    StampDutyParams,
    TaxParams,
    VATTaxParams,
    WithholdingTaxParams,
    ZakatParams,
)

logger = logging.getLogger(__name__)


class Calculator(NamedTuple):
    params_model: type[Record]
    function: Callable[[Any], Report]
    label: str


CALCULATORS: dict[str, Calculator] = {
    "salary": Calculator(TaxParams, calculate_salary_tax, "Salary tax calculator"),
    "payroll": Calculator(PayrollParams, calculate_payroll, "Payroll calculator"),
    "freelancer": Calculator(
        FreelancerTaxParams, calculate_freelancer_tax, "Freelancer tax calculator"
    ),
    "corporate": Calculator(
        CorporateTaxParams, calculate_corporate_tax, "Corporate tax calculator"
    ),
    "vat": Calculator(VATTaxParams, calculate_vat, "VAT calculator"),
    "realEstate": Calculator(
        RealEstateTaxParams, calculate_real_estate_tax, "Real estate tax calculator"
    ),
    "withholding": Calculator(
        WithholdingTaxParams, calculate_withholding_tax, "Withholding tax calculator"
    ),
    "socialInsurance": Calculator(
        SocialInsuranceParams, calculate_social_insurance, "Social insurance calculator"
    ),
    "stampDuty": Calculator(StampDutyParams, calculate_stamp_duty, "Stamp duty calculator"),
    "zakat": Calculator(ZakatParams, calculate_zakat, "Zakat calculator"),
    "investment": Calculator(InvestmentParams, calculate_investment, "Investment calculator"),
    "endOfService": Calculator(
        EndOfServiceParams, calculate_end_of_service, "End of service calculator"
    ),
    "feasibilityStudy": Calculator(
        FeasibilityStudyParams, calculate_feasibility, "Feasibility study calculator"
    ),
    "electricity": Calculator(
        ElectricityParams, calculate_electricity, "Electricity bill calculator"
    ),
    "inheritance": Calculator(InheritanceParams, calculate_inheritance, "Inheritance calculator"),
    "customs": Calculator(CustomsParams, calculate_customs, "Customs calculator"),
    "shareCapital": Calculator(
        ShareCapitalParams, calculate_share_capital, "Share capital calculator"
    ),
    "roi": Calculator(ROIParams, calculate_roi, "ROI calculator"),
    "retirement": Calculator(RetirementParams, calculate_retirement, "Retirement calculator"),
    "capitalGains": Calculator(
        CapitalGainsTaxParams, calculate_capital_gains_tax, "Capital gains tax calculator"
    ),
    "realEstateTransaction": Calculator(
        RealEstateTransactionTaxParams,
        calculate_real_estate_transaction_tax,
        "Real estate transaction tax calculator",
    ),
    "loan": Calculator(LoanParams, calculate_loan, "Loan calculator"),
    "profitMargin": Calculator(
        ProfitMarginParams, calculate_profit_margin, "Profit margin calculator"
    ),
    "savingsGoal": Calculator(SavingsGoalParams, calculate_savings_goal, "Savings goal calculator"),
    "inflation": Calculator(InflationParams, calculate_inflation, "Inflation calculator"),
    "discount": Calculator(DiscountParams, calculate_discount, "Discount calculator"),
    "fixedAssets": Calculator(FixedAssetParams, calculate_fixed_asset, "Fixed asset depreciation"),
}


def get_calculator(key: str) -> Calculator:
    try:
        return CALCULATORS[key]
    except KeyError:
        raise UnknownCalculatorError(key) from None


def compute(key: str, params: Mapping[str, Any] | Record) -> Report:
    """Run the calculator registered under ``key``.

    Args:
        key: Calculator key, e.g. "salary" or "zakat".
        params: A parameter record, or a mapping in either camelCase or
            snake_case that validates into one.

    Returns:
        The calculator's Report.

    Raises:
        UnknownCalculatorError: no calculator is registered under ``key``.
        pydantic.ValidationError: ``params`` do not validate.
        CalculationError: the inputs make the computation meaningless.
    """
    calculator = get_calculator(key)
    record = _validate(calculator, params)
    logger.info("Running calculator=%s", key)
    return calculator.function(record)


async def compute_async(key: str, params: Mapping[str, Any] | Record) -> Report:
    """Awaitable wrapper around compute() for async callers; does no I/O."""
    return compute(key, params)


def compute_record(key: str, params: Mapping[str, Any] | Record) -> CalculationRecord:
    """Compute a report and wrap it with its parameters for saving to history."""
    params = _validate(get_calculator(key), params)
    report = compute(key, params)
    return CalculationRecord(
        type=key,
        params=params.model_dump(mode="json", by_alias=True),
        report=report,
    )


def _validate(calculator: Calculator, params: Mapping[str, Any] | Record) -> Record:
    if isinstance(params, calculator.params_model):
        return params
    return calculator.params_model.model_validate(params)
