"""Tests for annual property tax and the disposal tax."""

from decimal import Decimal

import pytest

from egtax.calculators.real_estate import (
    calculate_real_estate_tax,
    calculate_real_estate_transaction_tax,
)
from egtax.models import RealEstateTaxParams, RealEstateTransactionTaxParams
from tests.helpers import step_amounts


class TestRealEstateTax:
    def test_primary_residence(self) -> None:
        report = calculate_real_estate_tax(
            RealEstateTaxParams(
                market_value=Decimal("2000000"), is_primary_residence=True, year=2024
            )
        )
        assert step_amounts(report) == pytest.approx([60000, 18000, 42000, 24000, 18000, 1800])
        assert report.total_tax == pytest.approx(1800)
        assert report.net_income == pytest.approx(-1800)

    def test_non_residential_gets_no_exemption(self) -> None:
        report = calculate_real_estate_tax(
            RealEstateTaxParams(
                market_value=Decimal("2000000"),
                property_type="non_residential",
                is_primary_residence=True,
                year=2024,
            )
        )
        assert step_amounts(report)[1] == pytest.approx(19200)
        assert step_amounts(report)[3] == 0
        assert report.total_tax == pytest.approx(4080)

    def test_exemption_covers_small_property(self) -> None:
        report = calculate_real_estate_tax(
            RealEstateTaxParams(
                market_value=Decimal("500000"), is_primary_residence=True, year=2024
            )
        )
        assert report.total_tax == 0
        assert report.net_income == 0

    def test_unknown_property_type_rejected(self) -> None:
        with pytest.raises(ValueError):
            RealEstateTaxParams.model_validate(
                {"marketValue": 100, "propertyType": "industrial", "year": 2024}
            )

    def test_liability_sign(self) -> None:
        for value in ("100000", "900000", "5000000"):
            for property_type in ("residential", "non_residential"):
                report = calculate_real_estate_tax(
                    RealEstateTaxParams(
                        market_value=Decimal(value),
                        property_type=property_type,
                        is_primary_residence=True,
                        year=2024,
                    )
                )
                assert report.net_income <= 0
                assert report.net_income == -report.total_tax


class TestRealEstateTransaction:
    def test_flat_rate(self) -> None:
        report = calculate_real_estate_transaction_tax(
            RealEstateTransactionTaxParams(sale_value=Decimal("1000000"), year=2024)
        )
        assert report.total_tax == pytest.approx(25000)
        assert report.net_income == pytest.approx(975000)
