"""Display formatting for calculator results (AUD, en-AU grouping)."""

from decimal import ROUND_HALF_UP, Decimal

PERIOD_LABELS: dict[str, str] = {
    "daily": "per day",
    "weekly": "per week",
    "fortnightly": "per fortnight",
    "monthly": "per month",
    "annually": "per year",
}


def _round(value: Decimal, decimals: int) -> Decimal:
    """Quantize to `decimals` places, rounding halves up."""
    return value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_currency(
    amount: Decimal | float,
    decimals: int = 0,
    prefix: str = "$",
    suffix: str = "",
    show_sign: bool = False,
) -> str:
    """Format an amount as currency, e.g. ``$80,000`` or ``+$1,234.50``."""
    value = Decimal(str(amount))
    if value < 0:
        sign = "-"
    elif show_sign and value > 0:
        sign = "+"
    else:
        sign = ""
    return f"{sign}{prefix}{_round(abs(value), decimals):,.{decimals}f}{suffix}"


def format_percentage(rate: Decimal | float, decimals: int = 1) -> str:
    """Format a 0-1 rate as a percentage, e.g. ``32.5%``."""
    return f"{_round(Decimal(str(rate)) * 100, decimals):.{decimals}f}%"


def format_number(value: Decimal | float, decimals: int = 0) -> str:
    return f"{_round(Decimal(str(value)), decimals):,.{decimals}f}"


def format_tax_year(tax_year: str) -> str:
    return f"FY {tax_year}"


def format_pay_period(amount: Decimal | float, period: str) -> str:
    """Format a take-home amount with its period, e.g. ``$1,234 per week``."""
    if period not in PERIOD_LABELS:
        valid = ", ".join(sorted(PERIOD_LABELS))
        raise ValueError(f"Invalid pay period: {period}. Must be one of: {valid}")
    return f"{format_currency(amount)} {PERIOD_LABELS[period]}"
