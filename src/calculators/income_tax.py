"""Income tax calculator: progressive base tax and bracket introspection."""

from decimal import Decimal
from typing import Any, NamedTuple

from src.calculators.tax_data import TaxYearData, find_band, get_tax_year

ZERO = Decimal("0")


class BracketInfo(NamedTuple):
    """Where an income sits in the rate schedule."""

    bracket_index: int
    current_bracket_max: Decimal | None  # None in the top bracket
    next_threshold: Decimal
    distance_to_next: Decimal


def calculate_base_tax(
    taxable_income: Decimal,
    is_resident: bool = True,
    data: TaxYearData | None = None,
) -> Decimal:
    """Calculate income tax before levies and offsets.

    Args:
        taxable_income: Taxable income for the year.
        is_resident: Selects the resident or non-resident schedule.
        data: Constants table; defaults to the current financial year.

    Returns:
        Base tax as a non-negative Decimal.
    """
    if taxable_income <= 0:
        return ZERO

    if data is None:
        data = get_tax_year()

    _, bracket = find_band(data.brackets(is_resident), taxable_income)
    if taxable_income <= bracket.lower:
        return bracket.base
    return bracket.base + (taxable_income - bracket.lower) * bracket.rate


def bracket_breakdown(
    taxable_income: Decimal,
    is_resident: bool = True,
    data: TaxYearData | None = None,
) -> list[dict[str, Any]]:
    """Split base tax into the slice of income taxed in each bracket."""
    if data is None:
        data = get_tax_year()

    breakdown: list[dict[str, Any]] = []
    for bracket in data.brackets(is_resident):
        if taxable_income <= bracket.lower:
            break

        upper = bracket.upper if bracket.upper is not None else taxable_income
        taxable = min(taxable_income, upper) - bracket.lower
        breakdown.append({
            "lower": bracket.lower,
            "upper": bracket.upper,
            "rate": bracket.rate,
            "taxable_amount": taxable,
            "tax": taxable * bracket.rate,
        })

    return breakdown


def get_marginal_rate(
    income: Decimal,
    is_resident: bool = True,
    data: TaxYearData | None = None,
) -> Decimal:
    """Rate applied to the next dollar of income."""
    if income <= 0:
        return ZERO

    if data is None:
        data = get_tax_year()

    _, bracket = find_band(data.brackets(is_resident), income)
    return bracket.rate


def get_tax_bracket_info(
    income: Decimal,
    is_resident: bool = True,
    data: TaxYearData | None = None,
) -> BracketInfo:
    """Locate the bracket containing `income` and the distance to the next one.

    `next_threshold` is the first whole dollar taxed at the next rate. In the
    top bracket there is no next threshold and both `next_threshold` and
    `distance_to_next` are zero.
    """
    if data is None:
        data = get_tax_year()

    index, bracket = find_band(data.brackets(is_resident), income)
    if bracket.upper is None:
        return BracketInfo(index, None, ZERO, ZERO)

    next_threshold = bracket.upper + 1
    return BracketInfo(index, bracket.upper, next_threshold, next_threshold - income)
