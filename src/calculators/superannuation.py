"""Superannuation contribution tax and salary-sacrifice benefit."""

from decimal import Decimal

from src.calculators.tax_data import TaxYearData, get_tax_year


def calculate_super_contribution_tax(
    contribution: Decimal,
    data: TaxYearData | None = None,
) -> Decimal:
    """Flat contributions tax paid inside the fund on concessional contributions."""
    if data is None:
        data = get_tax_year()
    return contribution * data.superannuation.contribution_tax_rate


def calculate_super_tax_benefit(
    contribution: Decimal,
    marginal_rate: Decimal,
    data: TaxYearData | None = None,
) -> Decimal:
    """Tax saved by contributing to super instead of taking it as salary.

    Zero when the marginal rate is at or below the contributions tax rate.
    Contribution caps are not applied.
    """
    if contribution <= 0:
        return Decimal("0")

    if data is None:
        data = get_tax_year()

    spread = marginal_rate - data.superannuation.contribution_tax_rate
    return contribution * max(Decimal("0"), spread)
