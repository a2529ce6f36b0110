"""Annual built-property tax and the tax on real estate disposals."""

from decimal import Decimal

from egtax.calculators.report import build_report, format_currency, format_rate, step
from egtax.models import RealEstateTaxParams, RealEstateTransactionTaxParams, Report

RENTAL_VALUE_RATE = Decimal("0.03")
MAINTENANCE_RATES: dict[str, Decimal] = {
    "residential": Decimal("0.30"),
    "non_residential": Decimal("0.32"),
}
PRIMARY_RESIDENCE_EXEMPTION = Decimal("24000")
PROPERTY_TAX_RATE = Decimal("0.10")

TRANSACTION_TAX_RATE = Decimal("0.025")


def calculate_real_estate_tax(params: RealEstateTaxParams) -> Report:
    """Annual tax on built property from an estimated rental value.

    ``net_income`` is reported as the negated tax: it is a liability, not
    income.
    """
    rental_value = params.market_value * RENTAL_VALUE_RATE
    maintenance_rate = MAINTENANCE_RATES[params.property_type]
    maintenance = rental_value * maintenance_rate
    net_rental_value = rental_value - maintenance

    if params.is_primary_residence and params.property_type == "residential":
        exemption = PRIMARY_RESIDENCE_EXEMPTION
    else:
        exemption = Decimal("0")

    taxable_amount = max(Decimal("0"), net_rental_value - exemption)
    total_tax = taxable_amount * PROPERTY_TAX_RATE

    return build_report(
        "realEstate",
        summary=(
            "The annual property tax on a property valued at "
            f"{format_currency(params.market_value)} "
            f"is {format_currency(total_tax)}."
        ),
        calculations=[
            step("Estimated annual rental value", rental_value),
            step(f"Maintenance deduction ({format_rate(maintenance_rate)})", maintenance),
            step("Net rental value", net_rental_value),
            step("Primary residence exemption", exemption),
            step("Taxable amount", taxable_amount),
            step(f"Tax due ({format_rate(PROPERTY_TAX_RATE)})", total_tax),
        ],
        gross_income=params.market_value,
        total_tax=total_tax,
        net_income=-total_tax,
    )


def calculate_real_estate_transaction_tax(params: RealEstateTransactionTaxParams) -> Report:
    """Flat 2.5% tax on the gross sale value of a property."""
    total_tax = params.sale_value * TRANSACTION_TAX_RATE

    return build_report(
        "realEstateTransaction",
        summary=(
            f"The tax on a sale of {format_currency(params.sale_value)} "
            f"is {format_currency(total_tax)}."
        ),
        calculations=[
            step("Sale value", params.sale_value),
            step(f"Disposal tax ({format_rate(TRANSACTION_TAX_RATE)})", total_tax),
        ],
        gross_income=params.sale_value,
        total_tax=total_tax,
        net_income=params.sale_value - total_tax,
    )
