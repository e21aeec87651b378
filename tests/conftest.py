"""Shared test fixtures."""

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest

from src.calculators.models import TaxCalculationInput
from src.calculators.tax_data import TaxYearData, get_tax_year


@pytest.fixture
def year_2024() -> TaxYearData:
    return get_tax_year("2024-25")


@pytest.fixture
def year_2025() -> TaxYearData:
    return get_tax_year("2025-26")


@pytest.fixture
def make_input() -> Callable[..., TaxCalculationInput]:
    """Factory for calculator input with resident single defaults."""

    def _make(annual_income: str | int = "0", **overrides: Any) -> TaxCalculationInput:
        fields: dict[str, Any] = {"annual_income": Decimal(str(annual_income))}
        fields.update(overrides)
        return TaxCalculationInput(**fields)

    return _make
