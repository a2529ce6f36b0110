"""Simplified Islamic inheritance apportionment.

Fixed shares are granted in order (spouse, father, mother) and deducted from
the estate as they are granted. Whatever remains goes to the children, a son
taking twice a daughter's share. Grandparents and siblings are accepted as
input but receive nothing in this model, and no blocking (hajb) rules are
applied.
"""

import logging
from decimal import Decimal

from egtax.calculators.report import build_report, format_currency, step
from egtax.models import CalculationStep, InheritanceParams, Report

logger = logging.getLogger(__name__)

ONE = Decimal("1")
SPOUSE_SHARES: dict[tuple[str, bool], Decimal] = {
    # (spouse, has children) -> fraction of the estate
    ("husband", False): ONE / 2,
    ("husband", True): ONE / 4,
    ("wife", False): ONE / 4,
    ("wife", True): ONE / 8,
}
PARENT_SHARE = ONE / 6


def _unapportioned_heirs(params: InheritanceParams) -> list[str]:
    names = [
        "paternal_grandfather",
        "maternal_grandmother",
        "paternal_grandmother",
        "full_brothers",
        "full_sisters",
        "paternal_brothers",
        "paternal_sisters",
        "maternal_siblings",
    ]
    return [name for name in names if getattr(params, name)]


def calculate_inheritance(params: InheritanceParams) -> Report:
    """Apportion an estate among spouse, parents and children.

    ``gross_income`` and ``net_income`` both carry the estate value.
    """
    estate = params.estate_value
    remaining = estate
    has_children = params.sons > 0 or params.daughters > 0
    calculations: list[CalculationStep] = []

    if params.has_spouse != "no":
        spouse_share = estate * SPOUSE_SHARES[(params.has_spouse, has_children)]
        if spouse_share > 0:
            calculations.append(step(f"Share of the {params.has_spouse}", spouse_share))
            remaining -= spouse_share

    if params.father:
        father_share = estate * PARENT_SHARE
        if father_share > 0:
            calculations.append(step("Share of the father", father_share))
            remaining -= father_share

    if params.mother:
        mother_share = estate * PARENT_SHARE
        if mother_share > 0:
            calculations.append(step("Share of the mother", mother_share))
            remaining -= mother_share

    total_parts = 2 * params.sons + params.daughters
    if has_children and remaining > 0:
        daughter_share = remaining / total_parts
        son_share = 2 * daughter_share
        if params.sons > 0:
            calculations.append(step("Share of each son", son_share))
        if params.daughters > 0:
            calculations.append(step("Share of each daughter", daughter_share))

    summary = (
        f"The estate of {format_currency(estate)} was distributed among the listed heirs. "
        "This is a simplified calculation and may differ in complex cases."
    )
    ignored = _unapportioned_heirs(params)
    if ignored:
        logger.warning("Heirs not apportioned by the simplified model: %s", ", ".join(ignored))
        summary += " Grandparents and siblings are not apportioned in this model."

    return build_report(
        "inheritance",
        summary=summary,
        calculations=calculations,
        gross_income=estate,
        net_income=estate,
    )
