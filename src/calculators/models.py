"""Pydantic models for calculator inputs and results."""

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

from config.settings import settings
from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS

# Decimal internally, plain JSON numbers on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
Rate = Money

NonNegativeMoney = Annotated[Money, Field(ge=0)]


# --- Calculator input ---


class TaxCalculationInput(BaseModel):
    """Taxpayer details for a single federal tax calculation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    annual_income: Annotated[Money, Field(ge=0, le=settings.max_annual_income)]
    is_resident: bool = True
    has_private_health_insurance: bool = False
    family_status: Literal["single", "family"] = "single"
    number_of_dependents: int = Field(default=0, ge=0, le=settings.max_dependents)
    is_senior: bool = False
    age: int | None = Field(default=None, ge=0, le=120)
    super_contribution: NonNegativeMoney = Decimal("0")
    salary_sacrifice: NonNegativeMoney = Decimal("0")
    help_debt: NonNegativeMoney = Decimal("0")
    work_deductions: NonNegativeMoney = Decimal("0")
    tax_year: str = DEFAULT_TAX_YEAR

    @field_validator("tax_year")
    @classmethod
    def _known_tax_year(cls, value: str) -> str:
        if value not in TAX_YEARS:
            raise ValueError(f"Unknown tax year. Available: {', '.join(sorted(TAX_YEARS))}")
        return value


# --- Calculator output ---


class TaxCalculationResult(BaseModel):
    """Full federal tax result for one input."""

    model_config = ConfigDict(frozen=True)

    tax_year: str

    # Income
    gross_income: Money
    taxable_income: Money

    # Components
    base_tax: Money
    medicare_levy: Money
    medicare_levy_surcharge: Money
    low_income_tax_offset: Money
    seniors_offset: Money
    help_repayment: Money

    # Totals
    total_tax: Money
    super_tax: Money
    total_tax_with_super: Money
    net_income: Money

    # Rates
    effective_rate: Rate
    marginal_rate: Rate

    # Take-home pay
    monthly_take_home: Money
    fortnightly_take_home: Money
    weekly_take_home: Money
    daily_take_home: Money

    # Bracket position
    tax_bracket: int
    next_bracket_threshold: Money
    distance_to_next_bracket: Money

    # Super
    superannuation_contribution: Money
    after_super_income: Money
    super_tax_saving: Money


class BracketSlice(BaseModel):
    """Income and tax falling within one rate bracket."""

    lower: Money
    upper: Money | None
    rate: Rate
    taxable_amount: Money
    tax: Money


class TaxBreakdownItem(BaseModel):
    """One line of a presentation breakdown of a result."""

    component: str
    amount: Money
    percentage: Rate  # share of gross income, 0-1
    description: str
    category: Literal["income", "deduction", "tax", "offset", "levy"]


# --- Bracket creep ---


class BracketCreepYear(BaseModel):
    """Projected tax for one future year under frozen and indexed brackets."""

    year_offset: int
    nominal_income: Money
    real_income: Money
    tax_frozen: Money
    tax_indexed: Money
    bracket_creep: Money
    cumulative_bracket_creep: Money
    average_rate_frozen: Rate
    marginal_rate_frozen: Rate


class BracketCreepResult(BaseModel):
    """Multi-year bracket creep projection with summary totals."""

    tax_year: str
    current_income: Money
    salary_growth_rate: Rate
    inflation_rate: Rate
    indexation_rate: Rate
    projections: list[BracketCreepYear]
    total_bracket_creep: Money
    average_annual_bracket_creep: Money
    effective_rate_increase: Rate
