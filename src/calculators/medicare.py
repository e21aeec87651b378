"""Medicare levy and Medicare levy surcharge calculators.

Both use the individual's taxable income, including for family status.
Partner income aggregation is not modelled.
"""

from decimal import Decimal
from typing import Literal

from src.calculators.tax_data import TaxYearData, find_band, get_tax_year

FamilyStatus = Literal["single", "family"]

# Levy phases in between the threshold and 125% of the threshold
PHASE_IN_CEILING_FACTOR = Decimal("1.25")


def medicare_levy_threshold(
    family_status: FamilyStatus = "single",
    number_of_dependents: int = 0,
    is_senior: bool = False,
    data: TaxYearData | None = None,
) -> Decimal:
    """Income at or below which no Medicare levy is payable."""
    if data is None:
        data = get_tax_year()

    levy = data.medicare_levy
    if family_status == "single":
        return levy.senior_threshold if is_senior else levy.single_threshold

    base = levy.senior_family_threshold if is_senior else levy.family_threshold
    return base + number_of_dependents * levy.dependent_increment


def calculate_medicare_levy(
    income: Decimal,
    family_status: FamilyStatus = "single",
    number_of_dependents: int = 0,
    is_senior: bool = False,
    data: TaxYearData | None = None,
) -> Decimal:
    """Calculate the Medicare levy with the low-income phase-in.

    Residency is not checked here; callers zero the levy for non-residents.

    Args:
        income: Taxable income.
        family_status: "single" or "family".
        number_of_dependents: Raises the family threshold per dependent.
        is_senior: Use the senior thresholds.
        data: Constants table; defaults to the current financial year.

    Returns:
        Levy payable as a Decimal.
    """
    if data is None:
        data = get_tax_year()

    levy = data.medicare_levy
    threshold = medicare_levy_threshold(family_status, number_of_dependents, is_senior, data)
    ceiling = threshold * PHASE_IN_CEILING_FACTOR

    if income <= threshold:
        return Decimal("0")
    if income <= ceiling:
        # Capped so the phase-in never exceeds the flat levy
        return min((income - threshold) * levy.phase_in_rate, income * levy.rate)
    return income * levy.rate


def calculate_medicare_levy_surcharge(
    income: Decimal,
    has_private_health_insurance: bool = False,
    family_status: FamilyStatus = "single",
    data: TaxYearData | None = None,
) -> Decimal:
    """Calculate the surcharge for earners without private hospital cover.

    `family_status` is accepted for interface parity; tiers are applied to
    the individual's income.
    """
    if has_private_health_insurance or income <= 0:
        return Decimal("0")

    if data is None:
        data = get_tax_year()

    _, tier = find_band(data.surcharge_tiers, income)
    return income * tier.rate
