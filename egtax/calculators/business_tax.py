"""Flat-rate business taxes: corporate, VAT, withholding, stamp duty, customs, capital gains."""

import logging
from decimal import Decimal
from typing import NamedTuple

from egtax.calculators.report import build_report, format_currency, format_rate, step
from egtax.models import (
    CapitalGainsTaxParams,
    CorporateTaxParams,
    CustomsParams,
    Report,
    StampDutyParams,
    VATTaxParams,
    VatBreakdown,
    WithholdingTaxParams,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

CORPORATE_RATE = Decimal("0.225")

VAT_RATES: dict[str, Decimal] = {
    "rate14": Decimal("0.14"),
    "rate10": Decimal("0.10"),
    "rate5": Decimal("0.05"),
}

WITHHOLDING_RATES: dict[str, Decimal] = {
    "contracting_supplies": Decimal("0.01"),
    "services": Decimal("0.03"),
    "commissions_brokerage": Decimal("0.05"),
}
DEFAULT_WITHHOLDING_RATE = Decimal("0.01")


class StampDutyRule(NamedTuple):
    """Either a proportional rate or a fixed fee."""

    rate: Decimal | None = None
    fixed_fee: Decimal | None = None


STAMP_DUTY_RULES: dict[str, StampDutyRule] = {
    "supply_contracts": StampDutyRule(rate=Decimal("0.004")),
    "commercial_ads": StampDutyRule(rate=Decimal("0.20")),
    "promissory_notes": StampDutyRule(rate=Decimal("0.001")),
    "bank_transactions": StampDutyRule(rate=Decimal("0.004")),
    "insurance_premiums": StampDutyRule(rate=Decimal("0.03")),
    "company_incorporation": StampDutyRule(fixed_fee=Decimal("300")),
}
DEFAULT_STAMP_DUTY = StampDutyRule(fixed_fee=Decimal("5"))

CUSTOMS_RATES: dict[str, Decimal] = {
    "electronics": Decimal("0.05"),
    "clothing": Decimal("0.30"),
    "cars": Decimal("0.40"),
    "food": Decimal("0.10"),
    "other": Decimal("0.20"),
}
CUSTOMS_VAT_RATE = Decimal("0.14")
CUSTOMS_ANCILLARY_FEE = Decimal("500")

CAPITAL_GAINS_RATE = Decimal("0.10")


def calculate_corporate_tax(params: CorporateTaxParams) -> Report:
    """Corporate income tax at the standard 22.5% of net profit.

    Every supported law key is computed with the standard rate. A loss
    yields a negative tax figure; it is not clamped.
    """
    net_profit = params.revenue - params.expenses
    total_tax = net_profit * CORPORATE_RATE
    net_income = params.revenue - total_tax

    return build_report(
        "corporate",
        summary=f"The standard {format_rate(CORPORATE_RATE)} rate was applied to net profit.",
        calculations=[
            step("Net profit (revenue - expenses)", net_profit),
            step(f"Tax due ({format_rate(CORPORATE_RATE)})", total_tax),
        ],
        gross_income=params.revenue,
        total_tax=total_tax,
        net_income=net_income,
    )


def _vat_on(bucket: VatBreakdown) -> Decimal:
    return sum((getattr(bucket, key) * rate for key, rate in VAT_RATES.items()), ZERO)


def calculate_vat(params: VATTaxParams) -> Report:
    """Monthly VAT return: output tax less input tax less brought-forward credit.

    ``total_tax`` is the amount payable (never negative); ``net_income`` is
    the signed period result, negative when a credit carries forward.
    """
    output_tax = _vat_on(params.sales)
    input_tax = _vat_on(params.purchases)
    net_vat = output_tax - input_tax
    final_result = net_vat - params.previous_credit

    total_tax = max(ZERO, final_result)
    credit_carried = abs(min(ZERO, final_result))

    if final_result >= 0:
        summary = f"VAT payable is {format_currency(total_tax)}."
    else:
        summary = f"A credit of {format_currency(credit_carried)} carries over to next month."

    sales = params.sales
    return build_report(
        "vat",
        summary=summary,
        calculations=[
            step("Output tax (sales)", output_tax),
            step("Deductible input tax (purchases)", input_tax),
            step("Net VAT for the period", net_vat),
            step("Previous credit deducted", params.previous_credit),
            step("Credit carried forward", credit_carried),
        ],
        gross_income=sales.rate14 + sales.rate10 + sales.rate5 + sales.exempt,
        total_tax=total_tax,
        net_income=final_result,
    )


def withholding_rate(transaction_type: str) -> Decimal:
    """Rate for a transaction type; unknown types use the 1% default."""
    rate = WITHHOLDING_RATES.get(transaction_type)
    if rate is None:
        logger.info("Unknown withholding type=%s, using default rate", transaction_type)
        return DEFAULT_WITHHOLDING_RATE
    return rate


def calculate_withholding_tax(params: WithholdingTaxParams) -> Report:
    """Tax withheld at source on a payment to a supplier."""
    rate = withholding_rate(params.transaction_type)
    total_tax = params.amount * rate
    net_amount = params.amount - total_tax

    return build_report(
        "withholding",
        summary=(
            f"{format_currency(total_tax)} is withheld on account of tax "
            f"from a total of {format_currency(params.amount)}."
        ),
        calculations=[
            step("Transaction amount", params.amount),
            step(f"Withholding rate ({format_rate(rate)})", format_rate(rate)),
            step("Tax withheld", total_tax),
        ],
        gross_income=params.amount,
        total_tax=total_tax,
        net_income=net_amount,
    )


def stamp_duty_rule(transaction_type: str) -> StampDutyRule:
    """Rule for a transaction type; unknown types pay the minimal fixed fee."""
    rule = STAMP_DUTY_RULES.get(transaction_type)
    if rule is None:
        logger.info("Unknown stamp duty type=%s, charging fixed fee", transaction_type)
        return DEFAULT_STAMP_DUTY
    return rule


def calculate_stamp_duty(params: StampDutyParams) -> Report:
    """Stamp duty on a transaction; ``net_income`` is the negated duty."""
    rule = stamp_duty_rule(params.transaction_type)
    if rule.rate is not None:
        total_tax = params.amount * rule.rate
        label = f"Proportional stamp duty ({format_rate(rule.rate)})"
    else:
        total_tax = rule.fixed_fee or ZERO
        label = "Fixed stamp duty"

    return build_report(
        "stampDuty",
        summary=f"Stamp duty due on the transaction is {format_currency(total_tax)}.",
        calculations=[
            step("Transaction amount", params.amount),
            step(label, total_tax),
        ],
        gross_income=params.amount,
        total_tax=total_tax,
        net_income=-total_tax,
    )


def customs_rate(category: str) -> Decimal:
    """Duty rate for a goods category; unknown categories use the ``other`` rate."""
    rate = CUSTOMS_RATES.get(category)
    if rate is None:
        logger.info("Unknown customs category=%s, using the other rate", category)
        return CUSTOMS_RATES["other"]
    return rate


def calculate_customs(params: CustomsParams) -> Report:
    """Landed cost of an import shipment.

    ``total_tax`` carries all fees (duty, VAT, ancillary fee) and
    ``net_income`` the importer's total cost, shipment value included.
    """
    rate = customs_rate(params.category)
    customs_duty = params.shipment_value * rate
    vat_base = params.shipment_value + customs_duty
    vat = vat_base * CUSTOMS_VAT_RATE
    total_fees = customs_duty + vat + CUSTOMS_ANCILLARY_FEE
    total_cost = params.shipment_value + total_fees

    return build_report(
        "customs",
        summary=(
            f"The estimated total cost of the shipment after duties and taxes "
            f"is {format_currency(total_cost)}."
        ),
        calculations=[
            step(f"Customs duty ({format_rate(rate)})", customs_duty),
            step("VAT base (value + duty)", vat_base),
            step(f"VAT ({format_rate(CUSTOMS_VAT_RATE)})", vat),
            step("Ancillary fees", CUSTOMS_ANCILLARY_FEE),
            step("Total duties and fees", total_fees),
        ],
        gross_income=params.shipment_value,
        total_tax=total_fees,
        net_income=total_cost,
    )


def calculate_capital_gains_tax(params: CapitalGainsTaxParams) -> Report:
    """10% tax on a realised gain; losses are not taxed."""
    net_profit = params.selling_price - params.purchase_price - params.costs
    total_tax = net_profit * CAPITAL_GAINS_RATE if net_profit > 0 else ZERO

    return build_report(
        "capitalGains",
        summary=(
            f"The net capital gain is {format_currency(net_profit)} and the tax due "
            f"is {format_currency(total_tax)}."
        ),
        calculations=[
            step("Net profit (selling price - purchase price - costs)", net_profit),
            step(f"Capital gains tax ({format_rate(CAPITAL_GAINS_RATE)})", total_tax),
        ],
        gross_income=params.selling_price,
        total_tax=total_tax,
        net_income=net_profit - total_tax,
    )
