"""CLI script for running a federal tax calculation.

Usage:
    # Resident on $80,000
    python scripts/calculate.py --income 80000

    # Non-resident with a HELP debt
    python scripts/calculate.py --income 70000 --non-resident --help-debt 20000

    # Load a named profile from config/profiles.yaml
    python scripts/calculate.py --profile professional

    # Profile with an override
    python scripts/calculate.py --profile graduate --income 72000

    # Retiree eligible for the seniors offset
    python scripts/calculate.py --income 40000 --senior --age 67
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import load_yaml_config
from src.calculators.breakdown import build_tax_breakdown
from src.calculators.federal import calculate_federal_tax
from src.calculators.formatters import (
    format_currency,
    format_pay_period,
    format_percentage,
    format_tax_year,
)
from src.calculators.income_tax import bracket_breakdown
from src.calculators.tax_data import get_tax_year
from src.calculators.validation import (
    InputValidationError,
    is_valid_super_contribution,
    validate_tax_input,
)

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate Australian federal income tax")
    parser.add_argument("--profile", help="Named profile from config/profiles.yaml")
    parser.add_argument("--income", type=float, help="Gross annual income")
    parser.add_argument("--non-resident", action="store_true", help="Use non-resident rates")
    parser.add_argument("--phi", action="store_true", help="Has private hospital cover")
    parser.add_argument("--family", action="store_true", help="Family Medicare thresholds")
    parser.add_argument("--dependents", type=int, help="Number of dependents")
    parser.add_argument("--senior", action="store_true", help="Senior Medicare thresholds")
    parser.add_argument("--age", type=int, help="Age at the end of the income year")
    parser.add_argument("--super", type=float, help="Personal super contributions")
    parser.add_argument("--salary-sacrifice", type=float, help="Salary sacrificed to super")
    parser.add_argument("--help-debt", type=float, help="Outstanding HELP balance")
    parser.add_argument("--deductions", type=float, help="Work-related deductions")
    parser.add_argument("--tax-year", help="Financial year, e.g. 2024-25")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def build_input(args: argparse.Namespace) -> dict[str, Any]:
    """Merge a named profile with command-line overrides."""
    raw: dict[str, Any] = {}
    if args.profile:
        profiles = load_yaml_config("profiles.yaml").get("profiles", {})
        if args.profile not in profiles:
            valid = ", ".join(sorted(profiles))
            raise SystemExit(f"Unknown profile: {args.profile}. Available: {valid}")
        raw.update(profiles[args.profile])

    overrides = {
        "annual_income": args.income,
        "number_of_dependents": args.dependents,
        "age": args.age,
        "super_contribution": args.super,
        "salary_sacrifice": args.salary_sacrifice,
        "help_debt": args.help_debt,
        "work_deductions": args.deductions,
        "tax_year": args.tax_year,
    }
    raw.update({k: v for k, v in overrides.items() if v is not None})

    if args.non_resident:
        raw["is_resident"] = False
    if args.phi:
        raw["has_private_health_insurance"] = True
    if args.family:
        raw["family_status"] = "family"
    if args.senior:
        raw["is_senior"] = True
    return raw


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    raw = build_input(args)
    if "annual_income" not in raw:
        logger.error("Provide --income or a --profile")
        return 2

    try:
        tax_input = validate_tax_input(raw)
    except InputValidationError as exc:
        for error in exc.errors:
            logger.error("Invalid %s: %s", error["field"], error["message"])
        return 2

    concessional = tax_input.super_contribution + tax_input.salary_sacrifice
    year = get_tax_year(tax_input.tax_year)
    age = tax_input.age if tax_input.age is not None else 49
    if not is_valid_super_contribution(concessional, age, year):
        logger.warning(
            "Super contributions of %s exceed the concessional cap; "
            "excess contributions tax is not modelled",
            concessional,
        )

    result = calculate_federal_tax(tax_input, year)

    residency = "resident" if tax_input.is_resident else "non-resident"
    print(f"{format_tax_year(result.tax_year)} ({residency})")
    print("=" * 60)
    for item in build_tax_breakdown(result):
        print(
            f"{item.component:<34}{format_currency(item.amount):>14}"
            f"{format_percentage(item.percentage):>10}"
        )
    print("-" * 60)
    print(f"{'Total tax':<34}{format_currency(result.total_tax):>14}")
    print(f"{'Net income':<34}{format_currency(result.net_income):>14}")
    print(f"{'Effective rate':<34}{format_percentage(result.effective_rate):>14}")
    print(f"{'Marginal rate':<34}{format_percentage(result.marginal_rate):>14}")
    print()
    print("Income tax by bracket")
    for band in bracket_breakdown(result.taxable_income, tax_input.is_resident, year):
        upper = format_currency(band["upper"]) if band["upper"] is not None else "and over"
        label = f"  {format_currency(band['lower'])} - {upper} @ {format_percentage(band['rate'])}"
        print(f"{label:<34}{format_currency(band['tax']):>14}")
    print()
    print(f"Take-home: {format_pay_period(result.weekly_take_home, 'weekly')}, "
          f"{format_pay_period(result.fortnightly_take_home, 'fortnightly')}, "
          f"{format_pay_period(result.monthly_take_home, 'monthly')}")
    if result.next_bracket_threshold > 0:
        print(
            f"Next bracket starts at {format_currency(result.next_bracket_threshold)} "
            f"({format_currency(result.distance_to_next_bracket)} away)"
        )
    if result.superannuation_contribution > 0:
        print(f"Estimated tax saved via super: {format_currency(result.super_tax_saving)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
