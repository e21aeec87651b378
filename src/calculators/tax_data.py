"""Australian tax constants: brackets, Medicare, offsets, HELP and super.

Hardcoded Python constants (not DB-driven), one immutable table per
financial year. Source: ATO published rates for individuals.
"""

from collections.abc import Sequence
from decimal import Decimal
from typing import NamedTuple, TypeVar


class TaxBracket(NamedTuple):
    """A single progressive income tax bracket."""

    lower: Decimal
    upper: Decimal | None  # None = no cap
    rate: Decimal
    base: Decimal  # tax owed at `lower` under the full schedule


class MedicareLevy(NamedTuple):
    """Medicare levy parameters for a financial year."""

    rate: Decimal
    single_threshold: Decimal
    family_threshold: Decimal
    dependent_increment: Decimal
    senior_threshold: Decimal
    senior_family_threshold: Decimal
    phase_in_rate: Decimal


class SurchargeTier(NamedTuple):
    """A Medicare levy surcharge income tier."""

    lower: Decimal
    upper: Decimal | None
    rate: Decimal
    tier: str


class LowIncomeOffset(NamedTuple):
    """Low income tax offset (LITO) parameters."""

    max_offset: Decimal
    full_offset_threshold: Decimal
    phase_out_start: Decimal
    phase_out_end: Decimal
    phase_out_rate: Decimal
    min_offset: Decimal


class SeniorsOffset(NamedTuple):
    """Seniors and pensioners tax offset (SAPTO) parameters."""

    single_max_offset: Decimal
    single_phase_out_start: Decimal
    couple_max_offset: Decimal  # per partner
    couple_phase_out_start: Decimal
    phase_out_rate: Decimal
    eligibility_age: int


class RepaymentBand(NamedTuple):
    """A HELP repayment income band."""

    lower: Decimal
    upper: Decimal | None
    rate: Decimal


class Superannuation(NamedTuple):
    """Superannuation rates and contribution caps."""

    contribution_tax_rate: Decimal
    concessional_cap: Decimal
    concessional_cap_catch_up: Decimal
    non_concessional_cap: Decimal
    guarantee_rate: Decimal


class TaxYearData(NamedTuple):
    """All tax parameters for a single Australian financial year."""

    resident_brackets: tuple[TaxBracket, ...]
    non_resident_brackets: tuple[TaxBracket, ...]
    medicare_levy: MedicareLevy
    surcharge_tiers: tuple[SurchargeTier, ...]
    low_income_offset: LowIncomeOffset
    seniors_offset: SeniorsOffset
    help_repayment: tuple[RepaymentBand, ...]
    superannuation: Superannuation

    def brackets(self, is_resident: bool) -> tuple[TaxBracket, ...]:
        """Return the resident or non-resident schedule."""
        return self.resident_brackets if is_resident else self.non_resident_brackets


class UnknownTaxYearError(KeyError):
    """Raised when a tax year label has no constants table."""


BandT = TypeVar("BandT", TaxBracket, SurchargeTier, RepaymentBand)


def find_band(bands: Sequence[BandT], amount: Decimal) -> tuple[int, BandT]:
    """Return the index and band whose range contains `amount`.

    Bands are ordered and contiguous; the first band with `amount <= upper`
    wins, so a boundary amount belongs to the lower band. Falls back to the
    last band if nothing matches.
    """
    for index, band in enumerate(bands):
        if band.upper is None or amount <= band.upper:
            return index, band
    return len(bands) - 1, bands[-1]


# Resident rates (19% / 32.5% / 37% / 45%)
_RESIDENT_BRACKETS_2024 = (
    TaxBracket(Decimal("0"), Decimal("18200"), Decimal("0"), Decimal("0")),
    TaxBracket(Decimal("18200"), Decimal("45000"), Decimal("0.19"), Decimal("0")),
    TaxBracket(Decimal("45000"), Decimal("120000"), Decimal("0.325"), Decimal("5092")),
    TaxBracket(Decimal("120000"), Decimal("180000"), Decimal("0.37"), Decimal("29467")),
    TaxBracket(Decimal("180000"), None, Decimal("0.45"), Decimal("51667")),
)

_NON_RESIDENT_BRACKETS_2024 = (
    TaxBracket(Decimal("0"), Decimal("120000"), Decimal("0.325"), Decimal("0")),
    TaxBracket(Decimal("120000"), Decimal("180000"), Decimal("0.37"), Decimal("39000")),
    TaxBracket(Decimal("180000"), None, Decimal("0.45"), Decimal("61200")),
)

# Revised rates (16% / 30% / 37% / 45%)
_RESIDENT_BRACKETS_2025 = (
    TaxBracket(Decimal("0"), Decimal("18200"), Decimal("0"), Decimal("0")),
    TaxBracket(Decimal("18200"), Decimal("45000"), Decimal("0.16"), Decimal("0")),
    TaxBracket(Decimal("45000"), Decimal("135000"), Decimal("0.30"), Decimal("4288")),
    TaxBracket(Decimal("135000"), Decimal("190000"), Decimal("0.37"), Decimal("31288")),
    TaxBracket(Decimal("190000"), None, Decimal("0.45"), Decimal("51638")),
)

_NON_RESIDENT_BRACKETS_2025 = (
    TaxBracket(Decimal("0"), Decimal("135000"), Decimal("0.30"), Decimal("0")),
    TaxBracket(Decimal("135000"), Decimal("190000"), Decimal("0.37"), Decimal("40500")),
    TaxBracket(Decimal("190000"), None, Decimal("0.45"), Decimal("60850")),
)

_MEDICARE_LEVY_2024 = MedicareLevy(
    rate=Decimal("0.02"),
    single_threshold=Decimal("29207"),
    family_threshold=Decimal("49304"),
    dependent_increment=Decimal("4544"),
    senior_threshold=Decimal("46361"),
    senior_family_threshold=Decimal("65010"),
    phase_in_rate=Decimal("0.1"),  # 10c per dollar above threshold
)

_SURCHARGE_TIERS_2024 = (
    SurchargeTier(Decimal("0"), Decimal("97000"), Decimal("0"), "Base"),
    SurchargeTier(Decimal("97000"), Decimal("129333"), Decimal("0.01"), "Tier 1"),
    SurchargeTier(Decimal("129333"), Decimal("161666"), Decimal("0.0125"), "Tier 2"),
    SurchargeTier(Decimal("161666"), None, Decimal("0.015"), "Tier 3"),
)

_LOW_INCOME_OFFSET_2024 = LowIncomeOffset(
    max_offset=Decimal("700"),
    full_offset_threshold=Decimal("37500"),
    phase_out_start=Decimal("37501"),
    phase_out_end=Decimal("45000"),
    phase_out_rate=Decimal("0.05"),  # 5c per dollar
    min_offset=Decimal("325"),
)

_SENIORS_OFFSET_2024 = SeniorsOffset(
    single_max_offset=Decimal("2230"),
    single_phase_out_start=Decimal("32279"),
    couple_max_offset=Decimal("1602"),
    couple_phase_out_start=Decimal("28974"),
    phase_out_rate=Decimal("0.125"),  # 12.5c per dollar
    eligibility_age=65,
)

_HELP_REPAYMENT_2024 = (
    RepaymentBand(Decimal("0"), Decimal("54434"), Decimal("0")),
    RepaymentBand(Decimal("54434"), Decimal("62850"), Decimal("0.01")),
    RepaymentBand(Decimal("62850"), Decimal("66620"), Decimal("0.02")),
    RepaymentBand(Decimal("66620"), Decimal("70618"), Decimal("0.025")),
    RepaymentBand(Decimal("70618"), Decimal("74855"), Decimal("0.03")),
    RepaymentBand(Decimal("74855"), Decimal("79346"), Decimal("0.035")),
    RepaymentBand(Decimal("79346"), Decimal("84107"), Decimal("0.04")),
    RepaymentBand(Decimal("84107"), Decimal("89154"), Decimal("0.045")),
    RepaymentBand(Decimal("89154"), Decimal("94503"), Decimal("0.05")),
    RepaymentBand(Decimal("94503"), Decimal("100174"), Decimal("0.055")),
    RepaymentBand(Decimal("100174"), Decimal("106185"), Decimal("0.06")),
    RepaymentBand(Decimal("106185"), Decimal("112556"), Decimal("0.065")),
    RepaymentBand(Decimal("112556"), Decimal("119309"), Decimal("0.07")),
    RepaymentBand(Decimal("119309"), Decimal("126467"), Decimal("0.075")),
    RepaymentBand(Decimal("126467"), Decimal("134056"), Decimal("0.08")),
    RepaymentBand(Decimal("134056"), Decimal("142100"), Decimal("0.085")),
    RepaymentBand(Decimal("142100"), Decimal("150626"), Decimal("0.09")),
    RepaymentBand(Decimal("150626"), Decimal("159663"), Decimal("0.095")),
    RepaymentBand(Decimal("159663"), None, Decimal("0.10")),
)

_SUPERANNUATION_2024 = Superannuation(
    contribution_tax_rate=Decimal("0.15"),
    concessional_cap=Decimal("27500"),
    concessional_cap_catch_up=Decimal("30000"),  # age 50 and over
    non_concessional_cap=Decimal("110000"),
    guarantee_rate=Decimal("0.115"),
)

TAX_YEARS: dict[str, TaxYearData] = {
    "2024-25": TaxYearData(
        resident_brackets=_RESIDENT_BRACKETS_2024,
        non_resident_brackets=_NON_RESIDENT_BRACKETS_2024,
        medicare_levy=_MEDICARE_LEVY_2024,
        surcharge_tiers=_SURCHARGE_TIERS_2024,
        low_income_offset=_LOW_INCOME_OFFSET_2024,
        seniors_offset=_SENIORS_OFFSET_2024,
        help_repayment=_HELP_REPAYMENT_2024,
        superannuation=_SUPERANNUATION_2024,
    ),
    # Rate schedule revised; levy, offset, HELP and super tables carried over
    "2025-26": TaxYearData(
        resident_brackets=_RESIDENT_BRACKETS_2025,
        non_resident_brackets=_NON_RESIDENT_BRACKETS_2025,
        medicare_levy=_MEDICARE_LEVY_2024,
        surcharge_tiers=_SURCHARGE_TIERS_2024,
        low_income_offset=_LOW_INCOME_OFFSET_2024,
        seniors_offset=_SENIORS_OFFSET_2024,
        help_repayment=_HELP_REPAYMENT_2024,
        superannuation=_SUPERANNUATION_2024,
    ),
}

DEFAULT_TAX_YEAR = "2024-25"


def get_tax_year(tax_year: str = DEFAULT_TAX_YEAR) -> TaxYearData:
    """Look up the constants table for a financial year label."""
    try:
        return TAX_YEARS[tax_year]
    except KeyError:
        available = ", ".join(sorted(TAX_YEARS))
        raise UnknownTaxYearError(f"Unknown tax year: {tax_year}. Available: {available}") from None
