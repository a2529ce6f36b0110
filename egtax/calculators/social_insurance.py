"""Social insurance: monthly contributions, old-age pension and lump-sum benefit."""

from decimal import Decimal

from egtax.calculators.brackets import clamp_contribution_wage
from egtax.calculators.report import build_report, format_currency, format_rate, step
from egtax.calculators.tax_data import SOCIAL_INSURANCE_PARAMS, lookup
from egtax.models import Report, SocialInsuranceParams

MAX_PENSION_YEARS = Decimal("36")
PENSION_DIVISOR = Decimal("45")
LUMP_SUM_RATE = Decimal("0.15")


def calculate_social_insurance(params: SocialInsuranceParams) -> Report:
    """Dispatch on ``calculation_type``."""
    if params.calculation_type == "pension":
        return _pension(params)
    if params.calculation_type == "lumpSum":
        return _lump_sum(params)
    return _contribution(params)


def _contribution(params: SocialInsuranceParams) -> Report:
    """Employee and employer monthly shares on the clamped wage.

    ``total_insurance`` is both shares; ``net_income`` is the employee's
    monthly deduction.
    """
    insurance = lookup(SOCIAL_INSURANCE_PARAMS, params.year)
    total_wage = params.basic_wage + params.variable_wage
    contribution_wage = clamp_contribution_wage(total_wage, insurance)

    employee_share = contribution_wage * insurance.employee_rate
    employer_share = contribution_wage * insurance.employer_rate
    total_insurance = employee_share + employer_share

    return build_report(
        "socialInsurance",
        summary=(
            f"The total monthly contribution is {format_currency(total_insurance)}: "
            f"{format_currency(employee_share)} employee share and "
            f"{format_currency(employer_share)} employer share."
        ),
        calculations=[
            step("Total monthly wage", total_wage),
            step("Approved contribution wage", contribution_wage),
            step(f"Employee share ({format_rate(insurance.employee_rate)})", employee_share),
            step(f"Employer share ({format_rate(insurance.employer_rate)})", employer_share),
        ],
        gross_income=total_wage,
        total_insurance=total_insurance,
        net_income=employee_share,
    )


def _pension(params: SocialInsuranceParams) -> Report:
    counted_years = min(params.contribution_years, MAX_PENSION_YEARS)
    monthly_pension = params.average_wage * counted_years / PENSION_DIVISOR

    return build_report(
        "socialInsurance",
        summary=f"The estimated monthly pension is {format_currency(monthly_pension)}.",
        calculations=[
            step("Average monthly insurable wage", params.average_wage),
            step(f"Counted contribution years (max {MAX_PENSION_YEARS})", counted_years),
            step(f"Monthly pension (wage x years / {PENSION_DIVISOR})", monthly_pension),
        ],
        gross_income=params.average_wage,
        net_income=monthly_pension,
    )


def _lump_sum(params: SocialInsuranceParams) -> Report:
    annual_wage = params.average_wage * 12
    lump_sum = annual_wage * LUMP_SUM_RATE * params.contribution_years

    return build_report(
        "socialInsurance",
        summary=f"The estimated lump-sum benefit is {format_currency(lump_sum)}.",
        calculations=[
            step("Average monthly insurable wage", params.average_wage),
            step("Annual wage", annual_wage),
            step("Contribution years", params.contribution_years),
            step(f"Lump sum ({format_rate(LUMP_SUM_RATE)} of annual wage per year)", lump_sum),
        ],
        gross_income=params.average_wage,
        net_income=lump_sum,
    )
