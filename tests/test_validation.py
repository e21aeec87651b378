"""Tests for calculator input validation."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.calculators.tax_data import DEFAULT_TAX_YEAR
from src.calculators.validation import (
    InputValidationError,
    is_valid_income,
    is_valid_super_contribution,
    validate_tax_input,
)


class TestValidateTaxInput:
    def test_defaults(self) -> None:
        tax_input = validate_tax_input({"annual_income": 50000})
        assert tax_input.annual_income == Decimal("50000")
        assert tax_input.is_resident is True
        assert tax_input.has_private_health_insurance is False
        assert tax_input.family_status == "single"
        assert tax_input.number_of_dependents == 0
        assert tax_input.is_senior is False
        assert tax_input.age is None
        assert tax_input.super_contribution == 0
        assert tax_input.salary_sacrifice == 0
        assert tax_input.help_debt == 0
        assert tax_input.work_deductions == 0
        assert tax_input.tax_year == DEFAULT_TAX_YEAR

    def test_full_input(self) -> None:
        tax_input = validate_tax_input({
            "annual_income": "120000.50",
            "is_resident": False,
            "family_status": "family",
            "number_of_dependents": 2,
            "help_debt": 15000,
            "tax_year": "2025-26",
        })
        assert tax_input.annual_income == Decimal("120000.50")
        assert tax_input.family_status == "family"
        assert tax_input.tax_year == "2025-26"

    def test_negative_income(self) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_tax_input({"annual_income": -1000})
        assert exc_info.value.fields == ["annual_income"]
        assert str(exc_info.value).startswith("annual_income:")

    def test_nan_income(self) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_tax_input({"annual_income": float("nan")})
        assert "annual_income" in exc_info.value.fields

    def test_income_above_ceiling(self) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_tax_input({"annual_income": 20_000_000})
        assert exc_info.value.fields == ["annual_income"]

    def test_missing_income(self) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_tax_input({})
        assert exc_info.value.fields == ["annual_income"]

    def test_unknown_family_status(self) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_tax_input({"annual_income": 50000, "family_status": "married"})
        assert exc_info.value.fields == ["family_status"]

    @pytest.mark.parametrize("dependents", [-1, 21, 2.5])
    def test_invalid_dependents(self, dependents: float) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_tax_input({"annual_income": 50000, "number_of_dependents": dependents})
        assert exc_info.value.fields == ["number_of_dependents"]

    @pytest.mark.parametrize(
        "field", ["super_contribution", "salary_sacrifice", "help_debt", "work_deductions"]
    )
    def test_negative_money_fields(self, field: str) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_tax_input({"annual_income": 50000, field: -1})
        assert exc_info.value.fields == [field]

    def test_unknown_tax_year(self) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_tax_input({"annual_income": 50000, "tax_year": "2099-00"})
        assert exc_info.value.fields == ["tax_year"]
        assert "2024-25" in exc_info.value.errors[0]["message"]

    def test_unknown_field(self) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_tax_input({"annual_income": 50000, "salary": 1})
        assert exc_info.value.fields == ["salary"]

    def test_multiple_errors(self) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_tax_input({"annual_income": -1, "help_debt": -1})
        assert set(exc_info.value.fields) == {"annual_income", "help_debt"}
        assert "(+1 more)" in str(exc_info.value)

    def test_input_is_frozen(self) -> None:
        tax_input = validate_tax_input({"annual_income": 50000})
        with pytest.raises(ValidationError):
            tax_input.annual_income = Decimal("1")  # type: ignore[misc]

    def test_input_is_hashable(self) -> None:
        a = validate_tax_input({"annual_income": 50000})
        b = validate_tax_input({"annual_income": 50000})
        assert hash(a) == hash(b)


class TestIsValidIncome:
    @pytest.mark.parametrize("income", [0, 50000, "75000.25", Decimal("10000000")])
    def test_valid(self, income: object) -> None:
        assert is_valid_income(income)

    @pytest.mark.parametrize(
        "income", [-1, 10_000_001, float("nan"), float("inf"), "abc", None, True]
    )
    def test_invalid(self, income: object) -> None:
        assert not is_valid_income(income)


class TestIsValidSuperContribution:
    def test_within_standard_cap(self) -> None:
        assert is_valid_super_contribution(27500)

    def test_above_standard_cap(self) -> None:
        assert not is_valid_super_contribution(28000)

    def test_catch_up_cap_from_fifty(self) -> None:
        assert is_valid_super_contribution(28000, age=50)
        assert is_valid_super_contribution(30000, age=55)
        assert not is_valid_super_contribution(30001, age=55)

    def test_negative(self) -> None:
        assert not is_valid_super_contribution(-1)
