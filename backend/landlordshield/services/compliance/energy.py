"""EPC rating bands and upgrade cost estimates.

Scores are SAP points (1-100). Rentals must rate C or better; the helpers
here measure the gap to C and suggest the cheapest improvements per point.
"""

from decimal import ROUND_HALF_UP, Decimal

from landlordshield.models.enums import COMPLIANT_EPC_RATINGS, EpcRating
from landlordshield.schemas.compliance import (
    EpcEstimate,
    ImprovementRecommendation,
    UpgradeCostEstimate,
)

from .regulatory_calendar import (
    EPC_AVERAGE_COST_PER_POINT,
    EPC_MINIMUM_COMPLIANT_SCORE,
    EPC_RATING_BANDS,
    get_epc_improvements,
)

PENCE = Decimal("0.01")

# Spread around the per-point midpoint for whole-upgrade estimates
ESTIMATE_LOW_FACTOR = Decimal("0.5")
ESTIMATE_HIGH_FACTOR = Decimal("1.8")


def _round_whole(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), ROUND_HALF_UP))


def get_score_for_rating(rating: EpcRating) -> int:
    """Midpoint score of a rating band."""
    band = next(b for b in EPC_RATING_BANDS if b.rating == rating)
    return _round_whole(Decimal(band.min_score + band.max_score) / 2)


def get_rating_for_score(score: int) -> EpcRating:
    for band in EPC_RATING_BANDS:
        if score >= band.min_score:
            return band.rating
    return EpcRating.G


def get_gap_to_c(current_score: int) -> int:
    """SAP points still needed to reach C; 0 once compliant."""
    return max(0, EPC_MINIMUM_COMPLIANT_SCORE - current_score)


def is_compliant(rating: EpcRating) -> bool:
    return rating in COMPLIANT_EPC_RATINGS


def get_recommended_improvements(
    current_score: int,
    budget: Decimal | None = None,
) -> list[ImprovementRecommendation]:
    """Improvements ordered by cost per point, cheapest first.

    With a budget, improvements are taken greedily in that order while their
    midpoint cost still fits what is left. A zero or missing budget means no
    limit.
    """
    if get_gap_to_c(current_score) <= 0:
        return []

    ranked = []
    for imp in get_epc_improvements():
        cost_mid = (imp.cost_min + imp.cost_max) / 2
        points_mid = (imp.points_min + imp.points_max) / 2
        ranked.append((cost_mid / points_mid, cost_mid, points_mid, imp))
    ranked.sort(key=lambda r: r[0])

    recommendations = [
        ImprovementRecommendation(
            type=imp.type,
            label=imp.label,
            description=imp.description,
            estimated_cost_mid=cost_mid,
            estimated_points_mid=points_mid,
            cost_per_point=per_point.quantize(PENCE, ROUND_HALF_UP),
            cost_effectiveness=imp.cost_effectiveness,
        )
        for per_point, cost_mid, points_mid, imp in ranked
    ]

    if not budget:
        return recommendations

    remaining = Decimal(budget)
    affordable = []
    for rec in recommendations:
        if remaining >= rec.estimated_cost_mid:
            remaining -= rec.estimated_cost_mid
            affordable.append(rec)
    return affordable


def estimate_total_upgrade_cost(current_score: int) -> UpgradeCostEstimate:
    """Rough cost of closing the gap to C at an average price per point."""
    gap = get_gap_to_c(current_score)
    if gap <= 0:
        return UpgradeCostEstimate(minimum=0, maximum=0, midpoint=0)

    midpoint = gap * EPC_AVERAGE_COST_PER_POINT
    return UpgradeCostEstimate(
        minimum=_round_whole(midpoint * ESTIMATE_LOW_FACTOR),
        maximum=_round_whole(midpoint * ESTIMATE_HIGH_FACTOR),
        midpoint=_round_whole(midpoint),
    )


def estimate_epc_upgrade(current_score: int, budget: Decimal | None = None) -> EpcEstimate:
    """Rating, compliance and upgrade suggestions for one property's score."""
    rating = get_rating_for_score(current_score)
    return EpcEstimate(
        current_score=current_score,
        rating=rating,
        is_compliant=is_compliant(rating),
        gap_to_c=get_gap_to_c(current_score),
        recommendations=get_recommended_improvements(current_score, budget),
        estimated_cost=estimate_total_upgrade_cost(current_score),
    )
