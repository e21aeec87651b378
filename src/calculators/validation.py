"""Input validation for the federal tax calculator.

The calculator does not re-check its inputs; everything reaching it should
pass through `validate_tax_input` first.
"""

import math
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import ValidationError

from config.settings import settings
from src.calculators.models import TaxCalculationInput
from src.calculators.tax_data import TaxYearData, get_tax_year

CATCH_UP_CAP_AGE = 50


class InputValidationError(ValueError):
    """Raised when calculator input fails validation.

    `errors` lists one dict per problem with `field` and `message` keys.
    """

    def __init__(self, errors: list[dict[str, str]]) -> None:
        self.errors = errors
        first = errors[0] if errors else {"field": "input", "message": "invalid"}
        extra = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
        super().__init__(f"{first['field']}: {first['message']}{extra}")

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]


def validate_tax_input(raw: Mapping[str, Any]) -> TaxCalculationInput:
    """Parse raw calculator input, raising InputValidationError on failure."""
    try:
        return TaxCalculationInput.model_validate(dict(raw))
    except ValidationError as exc:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "input",
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        raise InputValidationError(errors) from exc


def _to_decimal(value: Any) -> Decimal | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return result if result.is_finite() else None


def is_valid_income(income: Any) -> bool:
    """Check income is a finite number between zero and the configured ceiling."""
    value = _to_decimal(income)
    return value is not None and 0 <= value <= settings.max_annual_income


def is_valid_super_contribution(
    contribution: Any,
    age: int = 49,
    data: TaxYearData | None = None,
) -> bool:
    """Check a concessional contribution is within the cap for the given age."""
    value = _to_decimal(contribution)
    if value is None:
        return False

    if data is None:
        data = get_tax_year()

    super_ = data.superannuation
    cap = super_.concessional_cap_catch_up if age >= CATCH_UP_CAP_AGE else super_.concessional_cap
    return 0 <= value <= cap
