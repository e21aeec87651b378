"""Component breakdown of a federal tax result for display."""

from decimal import Decimal

from src.calculators.models import TaxBreakdownItem, TaxCalculationResult


def _share(amount: Decimal, gross: Decimal) -> Decimal:
    return amount / gross if gross > 0 else Decimal("0")


def build_tax_breakdown(result: TaxCalculationResult) -> list[TaxBreakdownItem]:
    """List each income, deduction, tax, levy and offset line of a result.

    Gross income is always listed; other components are omitted when zero.
    Percentages are shares of gross income.
    """
    gross = result.gross_income
    deductions = result.gross_income - result.taxable_income

    lines: list[tuple[str, Decimal, str, str]] = [
        ("Deductions and salary sacrifice", deductions, "Reduces taxable income", "deduction"),
        ("Income tax", result.base_tax, "Progressive tax on taxable income", "tax"),
        ("Medicare levy", result.medicare_levy, "Levy funding public healthcare", "levy"),
        (
            "Medicare levy surcharge",
            result.medicare_levy_surcharge,
            "Surcharge for no private hospital cover",
            "levy",
        ),
        (
            "Low income tax offset",
            result.low_income_tax_offset,
            "Offset reducing tax payable",
            "offset",
        ),
        (
            "Seniors and pensioners tax offset",
            result.seniors_offset,
            "Offset for residents of pension age",
            "offset",
        ),
        ("HELP repayment", result.help_repayment, "Compulsory student loan repayment", "tax"),
        (
            "Super contributions tax",
            result.super_tax,
            "Contributions tax paid by the fund",
            "tax",
        ),
    ]

    items = [
        TaxBreakdownItem(
            component="Gross income",
            amount=gross,
            percentage=Decimal("1") if gross > 0 else Decimal("0"),
            description="Total annual income before tax",
            category="income",
        )
    ]
    for component, amount, description, category in lines:
        if amount == 0:
            continue
        items.append(
            TaxBreakdownItem(
                component=component,
                amount=amount,
                percentage=_share(amount, gross),
                description=description,
                category=category,
            )
        )
    return items
