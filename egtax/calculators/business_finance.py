"""Business analysis calculators: break-even, share capital, ROI, profit margins, depreciation."""

from collections.abc import Iterator
from decimal import Decimal
from typing import NamedTuple

from egtax.calculators.report import build_report, format_currency, step
from egtax.errors import CalculationError
from egtax.models import (
    DepreciationEntry,
    FeasibilityStudyParams,
    FixedAssetParams,
    ProfitMarginParams,
    Report,
    ROIParams,
    ShareCapitalParams,
)

ZERO = Decimal("0")
MONTHS = Decimal("12")


def calculate_feasibility(params: FeasibilityStudyParams) -> Report:
    """Break-even volume and revenue.

    ``gross_income`` is the break-even revenue and ``net_income`` the
    break-even unit count.

    Raises:
        CalculationError: if the selling price does not exceed the variable
            cost, so no volume ever breaks even.
    """
    margin = params.selling_price_per_unit - params.variable_cost_per_unit
    if margin <= 0:
        raise CalculationError("feasibility.error.nonPositiveMargin")

    bep_units = params.fixed_costs / margin
    bep_value = bep_units * params.selling_price_per_unit

    return build_report(
        "feasibilityStudy",
        summary=(
            f"To break even, {bep_units:.2f} units must be sold, "
            f"equal to sales of {format_currency(bep_value)}."
        ),
        calculations=[
            step("Contribution margin per unit", margin),
            step("Break-even point (units)", bep_units),
            step("Break-even point (value)", bep_value),
        ],
        gross_income=bep_value,
        net_income=bep_units,
    )


def calculate_share_capital(params: ShareCapitalParams) -> Report:
    """Par value and the unpaid and unissued parts of a company's capital.

    ``gross_income`` is the authorized capital, ``net_income`` the paid-in
    capital.
    """
    if params.number_of_shares > 0:
        par_value = params.issued_capital / params.number_of_shares
    else:
        par_value = ZERO
    unpaid = params.issued_capital - params.paid_in_capital
    unissued = params.authorized_capital - params.issued_capital

    return build_report(
        "shareCapital",
        summary=(
            f"Each share has a par value of {format_currency(par_value)}; "
            f"{format_currency(unpaid)} of issued capital is still unpaid."
        ),
        calculations=[
            step("Par value per share", par_value),
            step("Unpaid capital (issued - paid-in)", unpaid),
            step("Unissued capital (authorized - issued)", unissued),
        ],
        gross_income=params.authorized_capital,
        net_income=params.paid_in_capital,
    )


def calculate_roi(params: ROIParams) -> Report:
    net_profit = params.final_value - params.initial_investment
    if params.initial_investment > 0:
        roi = net_profit / params.initial_investment * 100
    else:
        roi = ZERO

    return build_report(
        "roi",
        summary=f"The return on investment is {roi:.2f}% ({format_currency(net_profit)}).",
        calculations=[
            step("Net profit (final value - initial investment)", net_profit),
            step("Return on investment (%)", roi),
        ],
        gross_income=params.initial_investment,
        net_income=net_profit,
    )


def calculate_profit_margin(params: ProfitMarginParams) -> Report:
    """Gross and net profit margins as a percentage of revenue."""
    if params.revenue <= 0:
        raise CalculationError("profitMargin.error.revenue")

    gross_profit = params.revenue - params.cogs
    gross_margin = gross_profit / params.revenue * 100
    net_profit = gross_profit - params.operating_expenses
    net_margin = net_profit / params.revenue * 100

    return build_report(
        "profitMargin",
        summary=(
            f"For a revenue of {format_currency(params.revenue)}, the net profit is "
            f"{format_currency(net_profit)}, a net profit margin of {net_margin:.2f}%."
        ),
        calculations=[
            step("Gross profit", gross_profit),
            step("Gross margin (%)", gross_margin),
            step("Net profit", net_profit),
            step("Net margin (%)", net_margin),
        ],
        gross_income=params.revenue,
        net_income=net_profit,
    )


class _DepreciationYear(NamedTuple):
    year: int
    depreciation: Decimal
    accumulated: Decimal
    book_value: Decimal


def _depreciation_years(params: FixedAssetParams) -> Iterator[_DepreciationYear]:
    if params.salvage_value > params.cost:
        raise CalculationError("fixedAssets.error.salvage")

    life = Decimal(params.useful_life)
    # January purchases depreciate a full first year, December ones 1/12
    first_year_fraction = (MONTHS - (params.purchase_date.month - 1)) / MONTHS
    book_value = params.cost
    accumulated = ZERO

    for i in range(params.useful_life):
        if params.depreciation_method == "straight-line":
            depreciation = (params.cost - params.salvage_value) / life
        else:
            depreciation = book_value * 2 / life

        if i == 0:
            depreciation *= first_year_fraction

        if book_value - depreciation < params.salvage_value:
            depreciation = book_value - params.salvage_value

        book_value -= depreciation
        accumulated += depreciation
        yield _DepreciationYear(
            params.purchase_date.year + i, depreciation, accumulated, book_value
        )

        if book_value <= params.salvage_value:
            break


def depreciation_schedule(params: FixedAssetParams) -> list[DepreciationEntry]:
    """Year-by-year depreciation of a fixed asset.

    Straight-line spreads ``cost - salvage_value`` evenly over the useful
    life; double-declining charges twice the straight-line rate on the
    opening book value. The first year is prorated by purchase month, and no
    year takes the book value below the salvage value. The schedule ends at
    the salvage value or after ``useful_life`` years, whichever comes first.

    Raises:
        CalculationError: if the salvage value exceeds the cost.
    """
    return [
        DepreciationEntry(
            year=y.year,
            depreciation=float(y.depreciation),
            accumulated_depreciation=float(y.accumulated),
            book_value=float(y.book_value),
        )
        for y in _depreciation_years(params)
    ]


def calculate_fixed_asset(params: FixedAssetParams) -> Report:
    """Depreciation report for one asset.

    ``total_tax`` carries the accumulated depreciation and ``net_income`` the
    closing book value.
    """
    years = list(_depreciation_years(params))
    accumulated = years[-1].accumulated
    book_value = years[-1].book_value

    calculations = [
        step("Depreciable base (cost - salvage value)", params.cost - params.salvage_value)
    ]
    calculations.extend(step(f"Depreciation {y.year}", y.depreciation) for y in years)
    calculations.append(step("Accumulated depreciation", accumulated))
    calculations.append(step("Closing book value", book_value))

    method = params.depreciation_method.replace("-", " ")
    name = params.name or "The asset"
    return build_report(
        "fixedAssets",
        summary=(
            f"{name} is depreciated by the {method} method over {len(years)} years, "
            f"leaving a book value of {format_currency(book_value)}."
        ),
        calculations=calculations,
        gross_income=params.cost,
        total_tax=accumulated,
        net_income=book_value,
    )
