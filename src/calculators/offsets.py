"""Non-refundable tax offsets: LITO and SAPTO."""

from decimal import Decimal
from typing import Literal

from src.calculators.tax_data import TaxYearData, get_tax_year


def calculate_low_income_tax_offset(
    income: Decimal,
    data: TaxYearData | None = None,
) -> Decimal:
    """Calculate LITO for a resident's taxable income.

    The full offset applies up to the full-offset threshold, then reduces at
    the phase-out rate and stops entirely at the phase-out end. Residency is
    enforced by the caller.
    """
    if income <= 0:
        return Decimal("0")

    if data is None:
        data = get_tax_year()

    lito = data.low_income_offset
    if income <= lito.full_offset_threshold:
        return lito.max_offset
    if income < lito.phase_out_end:
        reduction = (income - lito.phase_out_start + 1) * lito.phase_out_rate
        return max(Decimal("0"), lito.max_offset - reduction)
    return Decimal("0")


def is_eligible_for_seniors_offset(age: int | None, data: TaxYearData | None = None) -> bool:
    if age is None:
        return False
    if data is None:
        data = get_tax_year()
    return age >= data.seniors_offset.eligibility_age


def calculate_seniors_offset(
    income: Decimal,
    family_status: Literal["single", "family"] = "single",
    data: TaxYearData | None = None,
) -> Decimal:
    """Calculate the seniors and pensioners tax offset (SAPTO).

    Family status selects the per-partner couple rates, which are applied to
    the individual's income. Age and residency are checked by the caller.

    Args:
        income: Taxable income.
        family_status: "single" or "family".
        data: Constants table; defaults to the current financial year.

    Returns:
        Offset amount, never negative.
    """
    if income <= 0:
        return Decimal("0")

    if data is None:
        data = get_tax_year()

    sapto = data.seniors_offset
    if family_status == "single":
        max_offset, start = sapto.single_max_offset, sapto.single_phase_out_start
    else:
        max_offset, start = sapto.couple_max_offset, sapto.couple_phase_out_start

    if income <= start:
        return max_offset
    return max(Decimal("0"), max_offset - (income - start) * sapto.phase_out_rate)
