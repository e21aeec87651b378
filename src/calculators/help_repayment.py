"""HELP/HECS compulsory repayment calculator."""

from decimal import Decimal

from src.calculators.tax_data import TaxYearData, find_band, get_tax_year


def calculate_help_repayment(
    income: Decimal,
    help_debt: Decimal,
    data: TaxYearData | None = None,
) -> Decimal:
    """Calculate the compulsory HELP repayment for the year.

    The band rate applies to the whole repayment income, not just the excess
    over the band floor. Repayment never exceeds the outstanding debt.

    Args:
        income: Repayment income (taxable income).
        help_debt: Outstanding HELP balance.
        data: Constants table; defaults to the current financial year.

    Returns:
        Repayment as a Decimal, between 0 and `help_debt`.
    """
    if help_debt <= 0 or income <= 0:
        return Decimal("0")

    if data is None:
        data = get_tax_year()

    _, band = find_band(data.help_repayment, income)
    return min(income * band.rate, help_debt)
