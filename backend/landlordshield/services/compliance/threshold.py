"""Tax-filing threshold and late-submission penalty calculations."""

from decimal import ROUND_HALF_UP, Decimal

from landlordshield.models.enums import ThresholdPhase
from landlordshield.schemas.compliance import (
    PenaltyResult,
    ThresholdInput,
    ThresholdStatus,
)

from .regulatory_calendar import (
    NOT_REQUIRED_MESSAGE,
    TAX_LATE_PENALTY_RULES,
    get_threshold_phases,
)

JOINT_OWNERSHIP_SHARE = Decimal("0.5")
DAYS_PER_YEAR = Decimal("365")
PENCE = Decimal("0.01")


def qualifying_income(data: ThresholdInput) -> Decimal:
    """Rental income (halved when jointly owned, zero when shielded) plus other income."""
    rental = data.gross_income_a
    if data.is_joint_ownership:
        rental = rental * JOINT_OWNERSHIP_SHARE
    if data.is_income_shielded:
        rental = Decimal("0")
    return rental + data.gross_income_b


def compute_threshold_status(data: ThresholdInput) -> ThresholdStatus:
    """Find the soonest phase whose threshold the qualifying income exceeds.

    Thresholds fall over successive phases, so the earliest exceeded phase
    is the first obligation that applies.
    """
    income = qualifying_income(data)

    for entry in get_threshold_phases():
        if income > entry.threshold:
            return ThresholdStatus(
                qualifying_income=income,
                phase=entry.phase,
                is_affected=True,
                message=entry.message,
                deadline=entry.effective_date,
            )

    return ThresholdStatus(
        qualifying_income=income,
        phase=ThresholdPhase.NOT_REQUIRED,
        is_affected=False,
        message=NOT_REQUIRED_MESSAGE,
        deadline=None,
    )


def calculate_late_penalty(amount_owed: Decimal, days_late: int) -> PenaltyResult:
    """Late-payment penalty for an unpaid tax amount.

    3% at day 15, a further 3% at day 30, then 10% a year pro rata for
    each day beyond 30.
    """
    rules = TAX_LATE_PENALTY_RULES
    amount = Decimal(amount_owed)
    penalty = Decimal("0")
    breakdown: list[str] = []

    if days_late >= 15:
        part = amount * rules.day15_rate
        penalty += part
        breakdown.append(f"3% at day 15: £{part.quantize(PENCE, ROUND_HALF_UP)}")

    if days_late >= 30:
        part = amount * rules.day30_rate
        penalty += part
        breakdown.append(f"Additional 3% at day 30: £{part.quantize(PENCE, ROUND_HALF_UP)}")

    if days_late > 30:
        extra_days = days_late - 30
        part = amount * rules.annual_rate_after_day30 * Decimal(extra_days) / DAYS_PER_YEAR
        penalty += part
        breakdown.append(
            f"10% pa for {extra_days} days after day 30: £{part.quantize(PENCE, ROUND_HALF_UP)}"
        )

    return PenaltyResult(
        penalty=penalty.quantize(PENCE, ROUND_HALF_UP),
        breakdown=breakdown,
    )
