"""Bracket creep projection: frozen vs indexed rate schedules.

Bracket creep is the extra tax paid when income grows but bracket
thresholds stay put. Each projected year is taxed twice: once on the
current schedule and once on a schedule whose thresholds have been
indexed; the difference is the creep.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from src.calculators.income_tax import calculate_base_tax, get_marginal_rate
from src.calculators.models import BracketCreepResult, BracketCreepYear
from src.calculators.tax_data import DEFAULT_TAX_YEAR, TaxBracket, TaxYearData, get_tax_year

logger = logging.getLogger(__name__)

MAX_PROJECTION_YEARS = 50
CENT = Decimal("0.01")
RATE_PLACES = Decimal("0.0001")

DEFAULT_SALARY_GROWTH_RATE = Decimal("0.03")
DEFAULT_INFLATION_RATE = Decimal("0.025")  # RBA target midpoint
DEFAULT_INDEXATION_RATE = Decimal("0.025")


def index_brackets(brackets: tuple[TaxBracket, ...], factor: Decimal) -> tuple[TaxBracket, ...]:
    """Scale thresholds and cumulative base tax by `factor`.

    Rates are unchanged, so the indexed schedule stays continuous.
    """
    return tuple(
        bracket._replace(
            lower=bracket.lower * factor,
            upper=bracket.upper * factor if bracket.upper is not None else None,
            base=bracket.base * factor,
        )
        for bracket in brackets
    )


def _index_year(data: TaxYearData, factor: Decimal) -> TaxYearData:
    return data._replace(
        resident_brackets=index_brackets(data.resident_brackets, factor),
        non_resident_brackets=index_brackets(data.non_resident_brackets, factor),
    )


def project_bracket_creep(
    income: Decimal,
    years: int,
    salary_growth_rate: Decimal = DEFAULT_SALARY_GROWTH_RATE,
    inflation_rate: Decimal = DEFAULT_INFLATION_RATE,
    indexation_rate: Decimal = DEFAULT_INDEXATION_RATE,
    is_resident: bool = True,
    tax_year: str = DEFAULT_TAX_YEAR,
    data: TaxYearData | None = None,
) -> BracketCreepResult:
    """Project base tax over `years` with and without bracket indexation.

    Args:
        income: Current taxable income.
        years: Number of future years to project (1-50).
        salary_growth_rate: Annual nominal income growth.
        inflation_rate: Annual inflation used for real income.
        indexation_rate: Annual growth applied to bracket thresholds.
        is_resident: Selects the resident or non-resident schedule.
        tax_year: Base year for the current schedule.
        data: Constants table override.

    Returns:
        BracketCreepResult with one entry per projected year.

    Raises:
        ValueError: If `years` is out of range or a rate is -100% or below.
    """
    if not 1 <= years <= MAX_PROJECTION_YEARS:
        raise ValueError(f"years must be between 1 and {MAX_PROJECTION_YEARS}")
    for name, rate in (
        ("salary_growth_rate", salary_growth_rate),
        ("inflation_rate", inflation_rate),
        ("indexation_rate", indexation_rate),
    ):
        if rate <= -1:
            raise ValueError(f"{name} must be greater than -1")

    if data is None:
        data = get_tax_year(tax_year)

    projections: list[BracketCreepYear] = []
    cumulative = Decimal("0")

    for offset in range(1, years + 1):
        nominal = income * (1 + salary_growth_rate) ** offset
        real = nominal / (1 + inflation_rate) ** offset

        indexed = _index_year(data, (1 + indexation_rate) ** offset)
        tax_frozen = calculate_base_tax(nominal, is_resident, data)
        tax_indexed = calculate_base_tax(nominal, is_resident, indexed)

        creep = tax_frozen - tax_indexed
        cumulative += creep
        average_rate = tax_frozen / nominal if nominal > 0 else Decimal("0")

        projections.append(
            BracketCreepYear(
                year_offset=offset,
                nominal_income=nominal.quantize(CENT, ROUND_HALF_UP),
                real_income=real.quantize(CENT, ROUND_HALF_UP),
                tax_frozen=tax_frozen.quantize(CENT, ROUND_HALF_UP),
                tax_indexed=tax_indexed.quantize(CENT, ROUND_HALF_UP),
                bracket_creep=creep.quantize(CENT, ROUND_HALF_UP),
                cumulative_bracket_creep=cumulative.quantize(CENT, ROUND_HALF_UP),
                average_rate_frozen=average_rate.quantize(RATE_PLACES, ROUND_HALF_UP),
                marginal_rate_frozen=get_marginal_rate(nominal, is_resident, data),
            )
        )

    current_tax = calculate_base_tax(income, is_resident, data)
    current_rate = current_tax / income if income > 0 else Decimal("0")
    rate_increase = projections[-1].average_rate_frozen - current_rate

    logger.debug(
        "Projected bracket creep over %d years: total=%s",
        years,
        cumulative,
    )

    return BracketCreepResult(
        tax_year=tax_year,
        current_income=income,
        salary_growth_rate=salary_growth_rate,
        inflation_rate=inflation_rate,
        indexation_rate=indexation_rate,
        projections=projections,
        total_bracket_creep=cumulative.quantize(CENT, ROUND_HALF_UP),
        average_annual_bracket_creep=(cumulative / years).quantize(CENT, ROUND_HALF_UP),
        effective_rate_increase=rate_increase.quantize(RATE_PLACES, ROUND_HALF_UP),
    )
