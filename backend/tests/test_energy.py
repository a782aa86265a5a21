"""
LandlordShield - EPC Estimator Tests

Rating bands, the gap to C, improvement ranking and upgrade cost estimates.
"""

from decimal import Decimal

import pytest

from landlordshield.models.enums import EpcRating
from landlordshield.services.compliance.energy import (
    estimate_epc_upgrade,
    estimate_total_upgrade_cost,
    get_gap_to_c,
    get_rating_for_score,
    get_recommended_improvements,
    get_score_for_rating,
    is_compliant,
)


class TestRatingBands:

    @pytest.mark.parametrize(
        "score, expected",
        [
            (100, EpcRating.A),
            (92, EpcRating.A),
            (91, EpcRating.B),
            (69, EpcRating.C),
            (68, EpcRating.D),
            (55, EpcRating.D),
            (39, EpcRating.E),
            (21, EpcRating.F),
            (20, EpcRating.G),
            (0, EpcRating.G),
        ],
    )
    def test_rating_for_score(self, score, expected):
        assert get_rating_for_score(score) == expected

    @pytest.mark.parametrize(
        "rating, expected",
        [(EpcRating.A, 96), (EpcRating.C, 75), (EpcRating.G, 11)],
    )
    def test_score_for_rating_is_band_midpoint(self, rating, expected):
        assert get_score_for_rating(rating) == expected

    def test_round_trip_stays_in_band(self):
        for rating in EpcRating:
            assert get_rating_for_score(get_score_for_rating(rating)) == rating

    def test_compliant_ratings(self):
        assert [r for r in EpcRating if is_compliant(r)] == [
            EpcRating.A,
            EpcRating.B,
            EpcRating.C,
        ]

    @pytest.mark.parametrize("score, gap", [(50, 19), (68, 1), (69, 0), (90, 0)])
    def test_gap_to_c(self, score, gap):
        assert get_gap_to_c(score) == gap


class TestRecommendedImprovements:

    def test_cheapest_per_point_first(self):
        recs = get_recommended_improvements(50)

        assert [r.type for r in recs] == [
            "hot_water_insulation",
            "cavity_wall",
            "led_lighting",
            "loft_insulation",
            "boiler_upgrade",
            "solar_panels",
            "double_glazing",
            "heat_pump",
        ]
        assert recs[0].estimated_cost_mid == Decimal("35")
        assert recs[0].estimated_points_mid == Decimal("1.5")
        assert recs[0].cost_per_point == Decimal("23.33")

    def test_compliant_property_needs_nothing(self):
        assert get_recommended_improvements(75) == []
        assert get_recommended_improvements(69, Decimal("5000")) == []

    def test_budget_is_spent_greedily(self):
        recs = get_recommended_improvements(50, Decimal("1000"))

        assert [r.type for r in recs] == [
            "hot_water_insulation",
            "cavity_wall",
            "led_lighting",
            "loft_insulation",
        ]
        assert sum(r.estimated_cost_mid for r in recs) <= 1000

    def test_skips_unaffordable_and_continues(self):
        # 35 + 425 leaves 40: LED (125) and loft (400) no longer fit
        recs = get_recommended_improvements(50, Decimal("500"))
        assert [r.type for r in recs] == ["hot_water_insulation", "cavity_wall"]

    def test_zero_budget_means_no_limit(self):
        assert len(get_recommended_improvements(50, Decimal("0"))) == 8

    def test_serialized_as_numbers(self):
        (first, *_) = get_recommended_improvements(50)
        dumped = first.model_dump(mode="json", by_alias=True)

        assert dumped["estimatedCostMid"] == 35.0
        assert dumped["costPerPoint"] == 23.33
        assert dumped["costEffectiveness"] == "high"


class TestUpgradeCost:

    def test_estimate_from_gap(self):
        estimate = estimate_total_upgrade_cost(50)

        # 19 points at 200 each
        assert estimate.midpoint == 3800
        assert estimate.minimum == 1900
        assert estimate.maximum == 6840

    def test_compliant_costs_nothing(self):
        estimate = estimate_total_upgrade_cost(80)
        assert (estimate.minimum, estimate.maximum, estimate.midpoint) == (0, 0, 0)

    def test_full_estimate(self):
        estimate = estimate_epc_upgrade(40, Decimal("1000"))

        assert estimate.rating == EpcRating.E
        assert estimate.is_compliant is False
        assert estimate.gap_to_c == 29
        assert len(estimate.recommendations) == 4
        assert estimate.estimated_cost.midpoint == 5800

    def test_compliant_estimate(self):
        estimate = estimate_epc_upgrade(85)

        assert estimate.rating == EpcRating.B
        assert estimate.is_compliant is True
        assert estimate.recommendations == []
