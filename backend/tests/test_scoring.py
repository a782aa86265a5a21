"""
LandlordShield - Compliance Score Tests

Per-domain completion scores, status buckets and the weighted overall score.
"""

from datetime import date

import pytest

from landlordshield.models.enums import ComplianceStatus, Domain
from landlordshield.services.compliance.errors import ComplianceInputError
from landlordshield.services.compliance.scoring import (
    DOMAIN_WEIGHTS,
    compute_compliance,
    get_status,
    weighted_overall_score,
)


class TestStatusBuckets:
    """Score thresholds: >= 80 ready, >= 40 partial, else not ready."""

    @pytest.mark.parametrize(
        "score, expected",
        [
            (100, ComplianceStatus.READY),
            (80, ComplianceStatus.READY),
            (79, ComplianceStatus.PARTIAL),
            (40, ComplianceStatus.PARTIAL),
            (39, ComplianceStatus.NOT_READY),
            (0, ComplianceStatus.NOT_READY),
        ],
    )
    def test_bucket(self, score, expected):
        assert get_status(score) == expected

    def test_weights_sum_to_one(self):
        assert sum(DOMAIN_WEIGHTS.values()) == pytest.approx(1.0)


class TestDomainScores:

    def test_domain_without_tasks_scores_zero(self, now):
        overview = compute_compliance([], now=now)

        for domain in (Domain.TAX, Domain.TENANCY_RIGHTS, Domain.ENERGY):
            pillar = overview.per_domain[domain]
            assert pillar.score == 0
            assert pillar.status == ComplianceStatus.NOT_READY
            assert pillar.total_count == 0
            assert pillar.next_deadline is None
            assert pillar.days_until_deadline is None
        assert overview.overall_score == 0

    def test_fully_complete_domain_is_ready(self, now, make_tasks):
        overview = compute_compliance(make_tasks("energy", 3, 3), now=now)

        assert overview.energy.score == 100
        assert overview.energy.status == ComplianceStatus.READY
        assert overview.energy.outstanding_count == 0

    def test_half_rounds_up(self, now, make_tasks):
        # 1/8 = 12.5%
        overview = compute_compliance(make_tasks("tax", 1, 8), now=now)
        assert overview.tax.score == 13

    def test_counts(self, now, make_tasks):
        overview = compute_compliance(make_tasks("tenancy-rights", 3, 10), now=now)
        pillar = overview.tenancy_rights

        assert pillar.completed_count == 3
        assert pillar.total_count == 10
        assert pillar.outstanding_count == 7
        assert pillar.completed_count <= pillar.total_count

    def test_legacy_domain_tags_are_scored(self, now, tasks):
        overview = compute_compliance(tasks, now=now)

        # t1 (mtd -> tax), t2 + t3 (tenancy rights), t4 (energy); t5 is custom
        assert overview.tax.total_count == 1
        assert overview.tenancy_rights.total_count == 2
        assert overview.tenancy_rights.completed_count == 1
        assert overview.energy.total_count == 1


class TestNextDeadline:

    def test_earliest_incomplete_due_date(self, now):
        items = [
            {"id": "a", "domain": "tax", "title": "A", "due_date": "2026-08-01"},
            {"id": "b", "domain": "tax", "title": "B", "due_date": "2026-06-22"},
            {"id": "c", "domain": "tax", "title": "C", "due_date": "2026-06-16",
             "is_completed": True},
        ]
        overview = compute_compliance(items, now=now)

        assert overview.tax.next_deadline == date(2026, 6, 22)
        # 6 days 14.5 hours rounds up
        assert overview.tax.days_until_deadline == 7

    def test_overdue_next_deadline_is_negative(self, now):
        items = [{"id": "a", "domain": "energy", "title": "A", "due_date": "2026-06-10"}]
        overview = compute_compliance(items, now=now)

        assert overview.energy.next_deadline == date(2026, 6, 10)
        assert overview.energy.days_until_deadline < 0


class TestOverallScore:

    def test_weighted_scenario(self, now, make_tasks):
        items = (
            make_tasks("tax", 4, 5)
            + make_tasks("tenancy-rights", 3, 10)
            + make_tasks("energy", 4, 4)
        )
        overview = compute_compliance(items, now=now)

        assert overview.tax.score == 80
        assert overview.tax.status == ComplianceStatus.READY
        assert overview.tenancy_rights.score == 30
        assert overview.tenancy_rights.status == ComplianceStatus.NOT_READY
        assert overview.energy.score == 100
        assert overview.energy.status == ComplianceStatus.READY
        # round(0.35*80 + 0.40*30 + 0.25*100) = round(28 + 12 + 25)
        assert overview.overall_score == 65

    @pytest.mark.parametrize(
        "scores",
        [
            {},
            {Domain.TAX: 100, Domain.TENANCY_RIGHTS: 100, Domain.ENERGY: 100},
            {Domain.TAX: 0, Domain.TENANCY_RIGHTS: 100, Domain.ENERGY: 0},
            {Domain.TAX: 99, Domain.TENANCY_RIGHTS: 1, Domain.ENERGY: 50},
        ],
    )
    def test_overall_within_bounds(self, scores):
        assert 0 <= weighted_overall_score(scores) <= 100

    def test_all_complete_is_100(self, now, make_tasks):
        items = (
            make_tasks("tax", 2, 2)
            + make_tasks("tenancy-rights", 5, 5)
            + make_tasks("energy", 1, 1)
        )
        assert compute_compliance(items, now=now).overall_score == 100


class TestPropertyScope:

    def test_scope_includes_account_wide_tasks(self, now):
        items = [
            {"id": "1", "domain": "tax", "title": "Account", "property_id": None,
             "is_completed": True},
            {"id": "2", "domain": "tax", "title": "Mine", "property_id": "prop-1"},
            {"id": "3", "domain": "tax", "title": "Other", "property_id": "prop-2",
             "is_completed": True},
        ]
        overview = compute_compliance(items, "prop-1", now=now)

        assert overview.tax.total_count == 2
        assert overview.tax.completed_count == 1
        assert overview.tax.score == 50

    def test_no_scope_counts_everything(self, now):
        items = [
            {"id": "1", "domain": "tax", "title": "A", "property_id": "prop-1"},
            {"id": "2", "domain": "tax", "title": "B", "property_id": "prop-2"},
        ]
        assert compute_compliance(items, now=now).tax.total_count == 2


class TestDegradation:

    def test_malformed_tasks_are_skipped(self, now):
        items = [
            42,
            {"id": "no-title", "domain": "tax"},
            {"id": "ok", "domain": "tax", "title": "Valid", "is_completed": True},
        ]
        overview = compute_compliance(items, now=now)

        assert overview.tax.total_count == 1
        assert overview.tax.score == 100

    def test_non_list_input_is_a_fault(self, now):
        with pytest.raises(ComplianceInputError):
            compute_compliance({"id": "t1"}, now=now)

    def test_serializes_with_camel_case(self, now, make_tasks):
        dumped = compute_compliance(make_tasks("tax", 1, 2), now=now).model_dump(
            mode="json", by_alias=True
        )

        # 0.35 * 50 = 17.5 rounds up
        assert dumped["overallScore"] == 18
        assert dumped["perDomain"]["tax"]["completedCount"] == 1
        assert dumped["perDomain"]["tenancy-rights"]["status"] == "not_ready"
