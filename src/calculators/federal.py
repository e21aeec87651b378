"""Federal tax calculator: combines base tax, levies, offsets, HELP and super."""

import logging
from decimal import Decimal

from src.calculators.help_repayment import calculate_help_repayment
from src.calculators.income_tax import (
    calculate_base_tax,
    get_marginal_rate,
    get_tax_bracket_info,
)
from src.calculators.medicare import (
    calculate_medicare_levy,
    calculate_medicare_levy_surcharge,
)
from src.calculators.models import TaxCalculationInput, TaxCalculationResult
from src.calculators.offsets import (
    calculate_low_income_tax_offset,
    calculate_seniors_offset,
    is_eligible_for_seniors_offset,
)
from src.calculators.superannuation import (
    calculate_super_contribution_tax,
    calculate_super_tax_benefit,
)
from src.calculators.tax_data import TaxYearData, get_tax_year

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

PAY_PERIODS: dict[str, int] = {
    "weekly": 52,
    "fortnightly": 26,
    "monthly": 12,
    "daily": 365,
    "annually": 1,
}


def take_home_pay(net_income: Decimal, pay_period: str = "monthly") -> Decimal:
    """Split annual net income into one pay period's take-home amount."""
    if pay_period not in PAY_PERIODS:
        valid = ", ".join(sorted(PAY_PERIODS))
        raise ValueError(f"Invalid pay period: {pay_period}. Must be one of: {valid}")
    return net_income / PAY_PERIODS[pay_period]


def calculate_federal_tax(
    tax_input: TaxCalculationInput,
    data: TaxYearData | None = None,
) -> TaxCalculationResult:
    """Calculate the full federal tax position for one taxpayer.

    Medicare levy, surcharge, LITO and SAPTO apply to residents only, SAPTO
    from the eligibility age. HELP repayments apply regardless of
    residency. Offsets are subtracted before total tax is clamped at zero.

    Args:
        tax_input: Validated taxpayer details.
        data: Constants table override; defaults to `tax_input.tax_year`.

    Returns:
        An immutable TaxCalculationResult.
    """
    if data is None:
        data = get_tax_year(tax_input.tax_year)

    is_resident = tax_input.is_resident
    taxable_income = max(
        ZERO,
        tax_input.annual_income - tax_input.salary_sacrifice - tax_input.work_deductions,
    )

    base_tax = calculate_base_tax(taxable_income, is_resident, data)

    if is_resident:
        medicare_levy = calculate_medicare_levy(
            taxable_income,
            tax_input.family_status,
            tax_input.number_of_dependents,
            tax_input.is_senior,
            data,
        )
        medicare_levy_surcharge = calculate_medicare_levy_surcharge(
            taxable_income,
            tax_input.has_private_health_insurance,
            tax_input.family_status,
            data,
        )
        low_income_tax_offset = calculate_low_income_tax_offset(taxable_income, data)
        if is_eligible_for_seniors_offset(tax_input.age, data):
            seniors_offset = calculate_seniors_offset(
                taxable_income, tax_input.family_status, data
            )
        else:
            seniors_offset = ZERO
    else:
        medicare_levy = medicare_levy_surcharge = ZERO
        low_income_tax_offset = seniors_offset = ZERO

    help_repayment = calculate_help_repayment(taxable_income, tax_input.help_debt, data)

    total_tax = max(
        ZERO,
        base_tax
        + medicare_levy
        + medicare_levy_surcharge
        - low_income_tax_offset
        - seniors_offset
        + help_repayment,
    )

    total_super_contribution = tax_input.super_contribution + tax_input.salary_sacrifice
    super_tax = calculate_super_contribution_tax(total_super_contribution, data)

    net_income = tax_input.annual_income - total_tax - total_super_contribution
    effective_rate = total_tax / taxable_income if taxable_income > 0 else ZERO
    marginal_rate = get_marginal_rate(taxable_income, is_resident, data)
    bracket = get_tax_bracket_info(taxable_income, is_resident, data)

    logger.debug(
        "Calculated %s tax: taxable=%s total=%s marginal=%s",
        tax_input.tax_year,
        taxable_income,
        total_tax,
        marginal_rate,
    )

    return TaxCalculationResult(
        tax_year=tax_input.tax_year,
        gross_income=tax_input.annual_income,
        taxable_income=taxable_income,
        base_tax=base_tax,
        medicare_levy=medicare_levy,
        medicare_levy_surcharge=medicare_levy_surcharge,
        low_income_tax_offset=low_income_tax_offset,
        seniors_offset=seniors_offset,
        help_repayment=help_repayment,
        total_tax=total_tax,
        super_tax=super_tax,
        total_tax_with_super=total_tax + super_tax,
        net_income=net_income,
        effective_rate=effective_rate,
        marginal_rate=marginal_rate,
        monthly_take_home=take_home_pay(net_income, "monthly"),
        fortnightly_take_home=take_home_pay(net_income, "fortnightly"),
        weekly_take_home=take_home_pay(net_income, "weekly"),
        daily_take_home=take_home_pay(net_income, "daily"),
        tax_bracket=bracket.bracket_index,
        next_bracket_threshold=bracket.next_threshold,
        distance_to_next_bracket=bracket.distance_to_next,
        superannuation_contribution=total_super_contribution,
        after_super_income=tax_input.annual_income - total_super_contribution,
        super_tax_saving=calculate_super_tax_benefit(total_super_contribution, marginal_rate, data),
    )
