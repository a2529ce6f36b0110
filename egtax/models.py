"""Pydantic models for calculator parameters, reports and history records."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Money = Decimal


class Record(BaseModel):
    """Immutable record, snake_case in Python and camelCase on the wire."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# --- Report models ---


class CalculationStep(Record):
    """One line of the audit trail. Order within a report is significant."""

    description: str
    amount: float | str


class Report(Record):
    """Output of every calculator.

    ``total_tax``, ``total_insurance`` and ``net_income`` keep the meaning
    each calculator gives them (a liability, a benefit, a raw total); see the
    calculator docstrings.
    """

    summary: str
    calculations: list[CalculationStep]
    gross_income: float
    total_tax: float
    total_insurance: float
    net_income: float
    applicable_laws: list[str]


class AmortizationEntry(Record):
    """A single month of a loan repayment schedule."""

    month: int
    payment: float
    principal: float
    interest: float
    remaining_balance: float


class DepreciationEntry(Record):
    """One year of a fixed asset depreciation schedule."""

    year: int
    depreciation: float
    accumulated_depreciation: float
    book_value: float


# --- Tax parameter records ---


class TaxParams(Record):
    """Annual salary income tax."""

    income: Money = Field(ge=0)
    year: int
    tax_type: str = "salary"
    insurance_type: str = "private_sector_employee"


class PayrollParams(Record):
    gross_monthly_salary: Money = Field(ge=0)
    allowances: Money = Field(default=Decimal("0"), ge=0)
    deductions: Money = Field(default=Decimal("0"), ge=0)
    year: int


class FreelancerTaxParams(Record):
    revenue: Money = Field(ge=0)
    expense_type: Literal["deemed", "actual"] = "deemed"
    actual_expenses: Money = Field(default=Decimal("0"), ge=0)
    year: int


CorporateTaxLaw = Literal["standard_22.5", "law_175_2023", "law_30_2023", "law_6_2025"]


class CorporateTaxParams(Record):
    revenue: Money = Field(ge=0)
    expenses: Money = Field(default=Decimal("0"), ge=0)
    entity_type: str = "corporation"
    year: int
    law: CorporateTaxLaw = "standard_22.5"


class VatBreakdown(Record):
    """Sales or purchases split by VAT rate bucket."""

    rate14: Money = Field(default=Decimal("0"), ge=0)
    rate10: Money = Field(default=Decimal("0"), ge=0)
    rate5: Money = Field(default=Decimal("0"), ge=0)
    exempt: Money = Field(default=Decimal("0"), ge=0)
    credit_note: Money = Field(default=Decimal("0"), ge=0)
    debit_note: Money = Field(default=Decimal("0"), ge=0)


class VATTaxParams(Record):
    month: int = Field(default=1, ge=1, le=12)
    year: int
    sales: VatBreakdown = VatBreakdown()
    purchases: VatBreakdown = VatBreakdown()
    previous_credit: Money = Field(default=Decimal("0"), ge=0)


class RealEstateTaxParams(Record):
    market_value: Money = Field(ge=0)
    property_type: Literal["residential", "non_residential"] = "residential"
    is_primary_residence: bool = False
    year: int


class WithholdingTaxParams(Record):
    amount: Money = Field(ge=0)
    transaction_type: str
    year: int


class SocialInsuranceParams(Record):
    """Inputs for the three social insurance modes.

    ``contribution`` reads the wage fields, ``pension`` and ``lumpSum`` read
    ``average_wage`` and ``contribution_years``.
    """

    calculation_type: Literal["contribution", "pension", "lumpSum"] = "contribution"
    basic_wage: Money = Field(default=Decimal("0"), ge=0)
    variable_wage: Money = Field(default=Decimal("0"), ge=0)
    average_wage: Money = Field(default=Decimal("0"), ge=0)
    contribution_years: Decimal = Field(default=Decimal("0"), ge=0)
    year: int


class StampDutyParams(Record):
    amount: Money = Field(ge=0)
    transaction_type: str
    year: int


class CustomsParams(Record):
    shipment_value: Money = Field(ge=0)
    description: str = ""
    country_of_origin: str = ""
    category: str = "other"


class CapitalGainsTaxParams(Record):
    purchase_price: Money = Field(ge=0)
    selling_price: Money = Field(ge=0)
    costs: Money = Field(default=Decimal("0"), ge=0)
    year: int


class RealEstateTransactionTaxParams(Record):
    sale_value: Money = Field(ge=0)
    year: int


# --- Personal and business finance records ---


class ZakatParams(Record):
    gold_price: Money = Field(ge=0)
    cash: Money = Field(default=Decimal("0"), ge=0)
    stocks: Money = Field(default=Decimal("0"), ge=0)
    trade_goods: Money = Field(default=Decimal("0"), ge=0)
    debts: Money = Field(default=Decimal("0"), ge=0)


class InvestmentParams(Record):
    initial_amount: Money = Field(ge=0)
    monthly_contribution: Money = Field(default=Decimal("0"), ge=0)
    interest_rate: Decimal = Field(ge=0)  # annual, percent
    years: Decimal = Field(ge=0)


class EndOfServiceParams(Record):
    last_salary: Money = Field(ge=0)
    years_of_service: Decimal = Field(ge=0)


class FeasibilityStudyParams(Record):
    fixed_costs: Money = Field(ge=0)
    variable_cost_per_unit: Money = Field(ge=0)
    selling_price_per_unit: Money = Field(ge=0)


class ElectricityParams(Record):
    consumption_kwh: Decimal = Field(ge=0)
    meter_type: Literal["residential", "commercial"] = "residential"


class InheritanceParams(Record):
    """Heirs of the deceased.

    Grandparent and sibling fields are accepted for compatibility with
    stored records but take no share in the simplified model.
    """

    estate_value: Money = Field(ge=0)
    has_spouse: Literal["no", "husband", "wife"] = "no"
    sons: int = Field(default=0, ge=0)
    daughters: int = Field(default=0, ge=0)
    father: bool = False
    mother: bool = False
    paternal_grandfather: bool = False
    maternal_grandmother: bool = False
    paternal_grandmother: bool = False
    full_brothers: int = Field(default=0, ge=0)
    full_sisters: int = Field(default=0, ge=0)
    paternal_brothers: int = Field(default=0, ge=0)
    paternal_sisters: int = Field(default=0, ge=0)
    maternal_siblings: int = Field(default=0, ge=0)


class ShareCapitalParams(Record):
    authorized_capital: Money = Field(ge=0)
    issued_capital: Money = Field(ge=0)
    paid_in_capital: Money = Field(ge=0)
    number_of_shares: int = Field(ge=0)


class ROIParams(Record):
    initial_investment: Money = Field(ge=0)
    final_value: Money = Field(ge=0)


class RetirementParams(Record):
    current_age: int = Field(ge=0)
    retirement_age: int = Field(ge=0)
    current_savings: Money = Field(default=Decimal("0"), ge=0)
    monthly_contribution: Money = Field(default=Decimal("0"), ge=0)
    annual_return: Decimal = Field(ge=0)  # percent
    desired_monthly_income: Money = Field(ge=0)


class LoanParams(Record):
    amount: Money = Field(gt=0)
    interest_rate: Decimal = Field(ge=0)  # annual, percent
    term: Decimal = Field(ge=0)  # years
    loan_type: Literal["amortizing", "decreasing"] = "amortizing"


class ProfitMarginParams(Record):
    revenue: Money = Field(ge=0)
    cogs: Money = Field(default=Decimal("0"), ge=0)
    operating_expenses: Money = Field(default=Decimal("0"), ge=0)


class SavingsGoalParams(Record):
    goal_name: str = ""
    target_amount: Money = Field(ge=0)
    initial_deposit: Money = Field(default=Decimal("0"), ge=0)
    monthly_contribution: Money = Field(default=Decimal("0"), ge=0)
    annual_rate: Decimal = Field(default=Decimal("0"), ge=0)  # percent


class InflationParams(Record):
    amount: Money = Field(ge=0)
    rate: Decimal = Field(gt=-100)  # annual, percent
    years: int = Field(ge=1)


class DiscountParams(Record):
    original_price: Money = Field(ge=0)
    discount: Decimal = Field(ge=0, le=100)  # percent


class FixedAssetParams(Record):
    """A depreciable asset.

    The year of ``purchase_date`` labels the schedule and its month prorates
    the first year.
    """

    name: str = ""
    purchase_date: date
    cost: Money = Field(ge=0)
    salvage_value: Money = Field(default=Decimal("0"), ge=0)
    useful_life: int = Field(ge=1)  # years
    depreciation_method: Literal["straight-line", "double-declining"] = "straight-line"


# --- History ---


class CalculationRecord(Record):
    """A saved calculation: the parameters a caller submitted and the report."""

    id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=datetime.now)
    type: str
    params: dict[str, Any]
    report: Report
