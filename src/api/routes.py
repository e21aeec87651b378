"""API routes for the Australian tax calculator."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from src.calculators.bracket_creep import (
    DEFAULT_INDEXATION_RATE,
    DEFAULT_INFLATION_RATE,
    DEFAULT_SALARY_GROWTH_RATE,
    MAX_PROJECTION_YEARS,
    project_bracket_creep,
)
from src.calculators.breakdown import build_tax_breakdown
from src.calculators.federal import calculate_federal_tax
from src.calculators.income_tax import (
    bracket_breakdown,
    calculate_base_tax,
    get_marginal_rate,
)
from src.calculators.models import (
    BracketCreepResult,
    BracketSlice,
    Money,
    TaxBreakdownItem,
    TaxCalculationInput,
    TaxCalculationResult,
)
from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS, UnknownTaxYearError, get_tax_year

logger = logging.getLogger(__name__)

router = APIRouter()


class CalculateResponse(BaseModel):
    """Response body for the /calculate endpoint."""

    result: TaxCalculationResult | None = None
    breakdown: list[TaxBreakdownItem] = []
    bracket_breakdown: list[BracketSlice] = []
    estimate: bool = False
    simplified: dict[str, Any] | None = None


class BracketCreepRequest(BaseModel):
    """Request body for the /bracket-creep endpoint."""

    income: Money = Field(ge=0)
    years: int = Field(default=5, ge=1, le=MAX_PROJECTION_YEARS)
    salary_growth_rate: Money = Field(default=DEFAULT_SALARY_GROWTH_RATE, gt=-1)
    inflation_rate: Money = Field(default=DEFAULT_INFLATION_RATE, gt=-1)
    indexation_rate: Money = Field(default=DEFAULT_INDEXATION_RATE, gt=-1)
    is_resident: bool = True
    tax_year: str = DEFAULT_TAX_YEAR


def _simplified_estimate(tax_input: TaxCalculationInput) -> dict[str, Any]:
    """Base tax only, on gross income; used when the full calculation fails."""
    data = get_tax_year(tax_input.tax_year)
    base_tax = calculate_base_tax(tax_input.annual_income, tax_input.is_resident, data)
    return {
        "gross_income": float(tax_input.annual_income),
        "base_tax": float(base_tax),
        "net_income": float(tax_input.annual_income - base_tax),
        "marginal_rate": float(
            get_marginal_rate(tax_input.annual_income, tax_input.is_resident, data)
        ),
        "notes": "Simplified estimate: income tax only, no levies, offsets or deductions.",
    }


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "default_tax_year": DEFAULT_TAX_YEAR}


@router.get("/tax-years")
async def tax_years() -> dict[str, Any]:
    """List supported financial years."""
    return {"tax_years": sorted(TAX_YEARS), "default": DEFAULT_TAX_YEAR}


@router.get("/tax-years/{tax_year}/brackets")
async def brackets(tax_year: str, resident: bool = True) -> dict[str, Any]:
    """Return the income tax rate schedule for a year."""
    try:
        data = get_tax_year(tax_year)
    except UnknownTaxYearError:
        raise HTTPException(status_code=404, detail=f"Unknown tax year: {tax_year}") from None

    return {
        "tax_year": tax_year,
        "resident": resident,
        "brackets": [
            {
                "lower": float(b.lower),
                "upper": float(b.upper) if b.upper is not None else None,
                "rate": float(b.rate),
                "base": float(b.base),
            }
            for b in data.brackets(resident)
        ],
    }


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(body: TaxCalculationInput) -> CalculateResponse:
    """Calculate federal tax; falls back to a simplified estimate on internal error."""
    try:
        result = calculate_federal_tax(body)
        breakdown = build_tax_breakdown(result)
        slices = bracket_breakdown(
            result.taxable_income, body.is_resident, get_tax_year(body.tax_year)
        )
    except Exception:
        logger.exception("Federal tax calculation failed; returning simplified estimate")
        return CalculateResponse(estimate=True, simplified=_simplified_estimate(body))
    return CalculateResponse(
        result=result,
        breakdown=breakdown,
        bracket_breakdown=[BracketSlice(**s) for s in slices],
    )


@router.post("/bracket-creep", response_model=BracketCreepResult)
async def bracket_creep(body: BracketCreepRequest) -> BracketCreepResult:
    """Project bracket creep over several years."""
    if body.tax_year not in TAX_YEARS:
        raise HTTPException(status_code=404, detail=f"Unknown tax year: {body.tax_year}")

    return project_bracket_creep(
        income=body.income,
        years=body.years,
        salary_growth_rate=body.salary_growth_rate,
        inflation_rate=body.inflation_rate,
        indexation_rate=body.indexation_rate,
        is_resident=body.is_resident,
        tax_year=body.tax_year,
    )
