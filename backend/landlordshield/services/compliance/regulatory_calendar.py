"""Regulatory reference data: tax filing, tenancy rights and energy dates.

Read-only tables, edited when the law or guidance changes. Nothing here is
computed at runtime; bump CALENDAR_VERSION with every edit.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from landlordshield.models.enums import Domain, EpcRating, Impact, ThresholdPhase

CALENDAR_VERSION = "2026.03"


# ---------------------------------------------------------------------------
# Tax filing (Making Tax Digital for Income Tax)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ThresholdPhaseEntry:
    phase: ThresholdPhase
    effective_date: date
    threshold: Decimal
    label: str
    message: str
    description: str


@dataclass(frozen=True)
class QuarterlyWindow:
    quarter: int
    period_start: date
    period_end: date
    submission_deadline: date
    label: str
    submit_by: str


@dataclass(frozen=True)
class LatePenaltyRules:
    max_points: int
    warning_at: int
    fine_at_threshold: Decimal
    day15_rate: Decimal
    day30_rate: Decimal
    annual_rate_after_day30: Decimal


TAX_THRESHOLD_PHASES: tuple[ThresholdPhaseEntry, ...] = (
    ThresholdPhaseEntry(
        phase=ThresholdPhase.APRIL_2026,
        effective_date=date(2026, 4, 6),
        threshold=Decimal("50000"),
        label="Phase 1: April 2026",
        message=(
            "You must comply NOW. MTD for Income Tax starts on 6 April 2026 "
            "for those with qualifying income over £50,000."
        ),
        description=(
            "Landlords with gross rental income over £50,000 must keep digital "
            "records and submit quarterly updates."
        ),
    ),
    ThresholdPhaseEntry(
        phase=ThresholdPhase.APRIL_2027,
        effective_date=date(2027, 4, 6),
        threshold=Decimal("30000"),
        label="Phase 2: April 2027",
        message="You have 1 year to prepare. The threshold drops to £30,000 in April 2027.",
        description="The threshold drops to £30,000. More landlords will be brought into scope.",
    ),
    ThresholdPhaseEntry(
        phase=ThresholdPhase.APRIL_2028,
        effective_date=date(2028, 4, 6),
        threshold=Decimal("20000"),
        label="Phase 3: April 2028",
        message="You have 2 years to prepare. The threshold drops to £20,000 in April 2028.",
        description="The threshold drops further to £20,000.",
    ),
)

NOT_REQUIRED_MESSAGE = (
    "Not currently required, but voluntary signup is available. If your income "
    "grows above £20,000 you will need to comply from April 2028."
)

TAX_QUARTERLY_WINDOWS_2026_27: tuple[QuarterlyWindow, ...] = (
    QuarterlyWindow(
        quarter=1,
        period_start=date(2026, 4, 6),
        period_end=date(2026, 7, 5),
        submission_deadline=date(2026, 8, 7),
        label="Q1: 6 Apr - 5 Jul 2026",
        submit_by="Submit by 7 Aug 2026",
    ),
    QuarterlyWindow(
        quarter=2,
        period_start=date(2026, 7, 6),
        period_end=date(2026, 10, 5),
        submission_deadline=date(2026, 11, 7),
        label="Q2: 6 Jul - 5 Oct 2026",
        submit_by="Submit by 7 Nov 2026",
    ),
    QuarterlyWindow(
        quarter=3,
        period_start=date(2026, 10, 6),
        period_end=date(2027, 1, 5),
        submission_deadline=date(2027, 2, 7),
        label="Q3: 6 Oct - 5 Jan 2027",
        submit_by="Submit by 7 Feb 2027",
    ),
    QuarterlyWindow(
        quarter=4,
        period_start=date(2027, 1, 6),
        period_end=date(2027, 4, 5),
        submission_deadline=date(2027, 5, 7),
        label="Q4: 6 Jan - 5 Apr 2027",
        submit_by="Submit by 7 May 2027",
    ),
)

TAX_FINAL_DECLARATION_DEADLINE = date(2028, 1, 31)

TAX_LATE_PENALTY_RULES = LatePenaltyRules(
    max_points=4,
    warning_at=3,
    fine_at_threshold=Decimal("200"),
    day15_rate=Decimal("0.03"),
    day30_rate=Decimal("0.03"),
    annual_rate_after_day30=Decimal("0.10"),
)


# ---------------------------------------------------------------------------
# Tenancy rights (Renters' Rights Act 2025)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RolloutChange:
    title: str
    description: str
    impact: Impact


@dataclass(frozen=True)
class RolloutPhase:
    phase: int
    title: str
    date: date
    changes: tuple[RolloutChange, ...]


TENANCY_RIGHTS_PHASES: tuple[RolloutPhase, ...] = (
    RolloutPhase(
        phase=1,
        title="Phase 1: 1 May 2026",
        date=date(2026, 5, 1),
        changes=(
            RolloutChange(
                "Section 21 abolished",
                'No more "no-fault" evictions. All existing Section 21 notices become invalid.',
                Impact.CRITICAL,
            ),
            RolloutChange(
                "ASTs convert to periodic assured tenancies",
                "All Assured Shorthold Tenancies automatically convert to periodic assured "
                "tenancies. Fixed terms no longer exist for new tenancies.",
                Impact.CRITICAL,
            ),
            RolloutChange(
                "Rent increases limited",
                "Rent can only be increased once per year via a Section 13 notice.",
                Impact.HIGH,
            ),
            RolloutChange(
                "2 months' notice for rent increases",
                "Landlords must give 2 months' notice of a rent increase (up from 1 month).",
                Impact.HIGH,
            ),
            RolloutChange(
                "Tenants can challenge increases",
                "Tenants can challenge rent increases at the First-tier Tribunal.",
                Impact.MEDIUM,
            ),
            RolloutChange(
                "No bidding wars",
                "Landlords and agents must stick to the advertised rent.",
                Impact.MEDIUM,
            ),
            RolloutChange(
                "Pets allowed by default",
                "Tenants have the right to request a pet. Landlords cannot unreasonably refuse.",
                Impact.MEDIUM,
            ),
            RolloutChange(
                "Written statement of terms",
                "A written statement of terms is required for all new tenancies from 1 May 2026.",
                Impact.HIGH,
            ),
            RolloutChange(
                "Information Sheet for existing tenants",
                'Landlords must provide the government "Information Sheet" to all existing '
                "tenants by 31 May 2026.",
                Impact.CRITICAL,
            ),
        ),
    ),
    RolloutPhase(
        phase=2,
        title="Phase 2: Late 2026",
        date=date(2026, 10, 1),
        changes=(
            RolloutChange(
                "Mandatory Landlord Database",
                "Regional rollout of the mandatory Landlord Database.",
                Impact.HIGH,
            ),
            RolloutChange(
                "Fines for non-registration",
                "Financial penalties for landlords who fail to register on the database.",
                Impact.HIGH,
            ),
        ),
    ),
    RolloutPhase(
        phase=3,
        title="Phase 3: 2027-2028",
        date=date(2027, 6, 1),
        changes=(
            RolloutChange(
                "Landlord Ombudsman established",
                "All private landlords must join the Landlord Ombudsman.",
                Impact.MEDIUM,
            ),
            RolloutChange(
                "Decent Homes Standard",
                "Consultation on applying the Decent Homes Standard to the private rented sector.",
                Impact.MEDIUM,
            ),
            RolloutChange(
                "Awaab's Law",
                "Mandatory response times for hazards in rented properties.",
                Impact.MEDIUM,
            ),
        ),
    ),
)


# ---------------------------------------------------------------------------
# Energy performance (minimum EPC C for rentals)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EnergyKeyDates:
    spending_cap_start: date
    spending_cap: Decimal
    current_methodology_deadline: date
    new_methodology_date: date
    final_deadline: date
    max_fine: Decimal


ENERGY_KEY_DATES = EnergyKeyDates(
    spending_cap_start=date(2025, 10, 1),
    spending_cap=Decimal("10000"),
    current_methodology_deadline=date(2029, 10, 1),
    new_methodology_date=date(2029, 10, 1),
    final_deadline=date(2030, 10, 1),
    max_fine=Decimal("30000"),
)


@dataclass(frozen=True)
class EpcBand:
    rating: EpcRating
    min_score: int
    max_score: int
    label: str


# Best rating first
EPC_RATING_BANDS: tuple[EpcBand, ...] = (
    EpcBand(EpcRating.A, 92, 100, "A (92-100)"),
    EpcBand(EpcRating.B, 81, 91, "B (81-91)"),
    EpcBand(EpcRating.C, 69, 80, "C (69-80)"),
    EpcBand(EpcRating.D, 55, 68, "D (55-68)"),
    EpcBand(EpcRating.E, 39, 54, "E (39-54)"),
    EpcBand(EpcRating.F, 21, 38, "F (21-38)"),
    EpcBand(EpcRating.G, 1, 20, "G (1-20)"),
)

# Lowest SAP score that rates C
EPC_MINIMUM_COMPLIANT_SCORE = 69

# Rough average cost of one SAP point, for whole-upgrade estimates
EPC_AVERAGE_COST_PER_POINT = Decimal("200")


@dataclass(frozen=True)
class EpcImprovement:
    type: str
    label: str
    description: str
    cost_min: Decimal
    cost_max: Decimal
    points_min: Decimal
    points_max: Decimal
    cost_effectiveness: str  # "high" | "medium" | "low"
    typical_timeline: str


EPC_IMPROVEMENTS: tuple[EpcImprovement, ...] = (
    EpcImprovement(
        "loft_insulation", "Loft insulation",
        "Install or top up loft insulation to at least 270mm depth.",
        Decimal("300"), Decimal("500"), Decimal("3"), Decimal("5"), "high", "1 day",
    ),
    EpcImprovement(
        "cavity_wall", "Cavity wall insulation",
        "Fill cavity walls with insulation material.",
        Decimal("350"), Decimal("500"), Decimal("5"), Decimal("10"), "high", "1 day",
    ),
    EpcImprovement(
        "double_glazing", "Double glazing",
        "Replace single-glazed windows with double or triple glazing.",
        Decimal("3000"), Decimal("7000"), Decimal("5"), Decimal("10"), "medium", "1-2 weeks",
    ),
    EpcImprovement(
        "led_lighting", "LED lighting",
        "Replace all light fittings with LED bulbs.",
        Decimal("50"), Decimal("200"), Decimal("1"), Decimal("2"), "high", "1 day",
    ),
    EpcImprovement(
        "hot_water_insulation", "Hot water cylinder insulation",
        "Add or upgrade hot water cylinder jacket.",
        Decimal("20"), Decimal("50"), Decimal("1"), Decimal("2"), "high", "1 hour",
    ),
    EpcImprovement(
        "boiler_upgrade", "Boiler upgrade",
        "Replace old boiler with a modern condensing boiler.",
        Decimal("1500"), Decimal("3000"), Decimal("5"), Decimal("15"), "medium", "1-2 days",
    ),
    EpcImprovement(
        "solar_panels", "Solar panels",
        "Install photovoltaic solar panels on the roof.",
        Decimal("4000"), Decimal("8000"), Decimal("8"), Decimal("12"), "medium", "1-2 days",
    ),
    EpcImprovement(
        "heat_pump", "Heat pump",
        "Install an air source or ground source heat pump.",
        Decimal("8000"), Decimal("15000"), Decimal("10"), Decimal("20"), "low", "1-2 weeks",
    ),
)


# ---------------------------------------------------------------------------
# Account-wide statutory deadlines shown in every feed
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CalendarEntry:
    id: str
    title: str
    date: date
    domain: Domain
    description: str
    impact: Impact


STATUTORY_DEADLINES: tuple[CalendarEntry, ...] = (
    *(
        CalendarEntry(
            id=f"mtd-q{w.quarter}",
            title=f"MTD {w.label}",
            date=w.submission_deadline,
            domain=Domain.TAX,
            description=w.submit_by,
            impact=Impact.HIGH,
        )
        for w in TAX_QUARTERLY_WINDOWS_2026_27
    ),
    CalendarEntry(
        id="rra-phase1",
        title="Renters' Rights Act takes effect",
        date=TENANCY_RIGHTS_PHASES[0].date,
        domain=Domain.TENANCY_RIGHTS,
        description="Section 21 abolished. ASTs convert to periodic. New rules take effect.",
        impact=Impact.CRITICAL,
    ),
    CalendarEntry(
        id="rra-info-sheet",
        title="Information Sheet deadline for existing tenants",
        date=date(2026, 5, 31),
        domain=Domain.TENANCY_RIGHTS,
        description="Government Information Sheet must be provided to all existing tenants.",
        impact=Impact.CRITICAL,
    ),
    CalendarEntry(
        id="rra-database",
        title="Landlord Database registration (estimated)",
        date=date(2026, 12, 31),
        domain=Domain.TENANCY_RIGHTS,
        description="Mandatory registration on the Landlord Database (regional rollout).",
        impact=Impact.HIGH,
    ),
    CalendarEntry(
        id="epc-current-method",
        title="EPC C under current methodology deadline",
        date=ENERGY_KEY_DATES.current_methodology_deadline,
        domain=Domain.ENERGY,
        description=(
            "Last date to get EPC C under current EER methodology "
            "(valid for up to 10 years)."
        ),
        impact=Impact.HIGH,
    ),
    CalendarEntry(
        id="epc-final",
        title="EPC C final deadline for all rental properties",
        date=ENERGY_KEY_DATES.final_deadline,
        domain=Domain.ENERGY,
        description="All rental properties must meet EPC C. Fines up to £30,000 per property.",
        impact=Impact.CRITICAL,
    ),
)


def get_statutory_deadlines() -> tuple[CalendarEntry, ...]:
    return STATUTORY_DEADLINES


def get_threshold_phases() -> tuple[ThresholdPhaseEntry, ...]:
    """Threshold phases, earliest effective date first."""
    return tuple(sorted(TAX_THRESHOLD_PHASES, key=lambda p: p.effective_date))


def get_epc_improvements() -> tuple[EpcImprovement, ...]:
    return EPC_IMPROVEMENTS
