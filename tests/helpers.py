"""Assertion helpers for calculator reports."""

from egtax.models import Report


def step_amounts(report: Report) -> list[float | str]:
    return [s.amount for s in report.calculations]


def step_descriptions(report: Report) -> list[str]:
    return [s.description for s in report.calculations]
