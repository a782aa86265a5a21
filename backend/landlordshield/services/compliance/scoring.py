"""Compliance readiness scores.

Per domain: score = round(completed / total * 100), 0 when a domain has no
tasks. Overall: weighted average with fixed weights reflecting relative fine
and enforcement severity (tax 35%, tenancy rights 40%, energy 25%).

Account-level and single-property views both go through compute_compliance
so the weighting lives in one place.
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from landlordshield.models.enums import SCORED_DOMAINS, ComplianceStatus, Domain
from landlordshield.models.helpers import days_until
from landlordshield.models.records import Task
from landlordshield.schemas.compliance import ComplianceOverview, DomainScore

from .errors import ensure_sequence
from .normalizer import coerce_record

logger = logging.getLogger(__name__)

DOMAIN_WEIGHTS: dict[Domain, float] = {
    Domain.TAX: 0.35,
    Domain.TENANCY_RIGHTS: 0.40,
    Domain.ENERGY: 0.25,
}

# Status thresholds (score percent)
READY_THRESHOLD = 80
PARTIAL_THRESHOLD = 40


def get_status(score: int) -> ComplianceStatus:
    if score >= READY_THRESHOLD:
        return ComplianceStatus.READY
    if score >= PARTIAL_THRESHOLD:
        return ComplianceStatus.PARTIAL
    return ComplianceStatus.NOT_READY


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upwards
    return int(value + 0.5)


def in_scope(task: Task, property_scope: str | None) -> bool:
    """Property-scoped views also include account-wide tasks."""
    if property_scope is None:
        return True
    return task.property_id is None or task.property_id == property_scope


def calculate_domain_score(
    domain: Domain,
    tasks: Sequence[Task],
    *,
    now: datetime,
) -> DomainScore:
    items = [t for t in tasks if t.domain == domain]
    total = len(items)
    completed = sum(1 for t in items if t.is_completed)
    score = _round_half_up(completed / total * 100) if total > 0 else 0

    due_dates = [t.due_date for t in items if not t.is_completed and t.due_date is not None]
    next_deadline = min(due_dates) if due_dates else None

    return DomainScore(
        domain=domain,
        score=score,
        status=get_status(score),
        completed_count=completed,
        total_count=total,
        outstanding_count=total - completed,
        next_deadline=next_deadline,
        days_until_deadline=days_until(next_deadline, now) if next_deadline else None,
    )


def weighted_overall_score(scores: dict[Domain, int]) -> int:
    """Weighted average of domain scores; missing domains count as 0."""
    total = sum(DOMAIN_WEIGHTS[d] * scores.get(d, 0) for d in DOMAIN_WEIGHTS)
    return min(100, max(0, _round_half_up(total)))


def compute_compliance(
    tasks: Sequence | None,
    property_scope: str | None = None,
    *,
    now: datetime,
) -> ComplianceOverview:
    """Readiness overview for the account, or one property plus account-wide tasks.

    A domain with no tasks scores a hard 0 and drags the overall score down.
    """
    resolved = [
        t for t in (coerce_record(raw, Task) for raw in ensure_sequence(tasks, "tasks"))
        if t is not None and in_scope(t, property_scope)
    ]

    per_domain = {d: calculate_domain_score(d, resolved, now=now) for d in SCORED_DOMAINS}
    overall = weighted_overall_score({d: s.score for d, s in per_domain.items()})

    logger.debug(
        "Compliance for scope %s: %d%% (%s)",
        property_scope or "account", overall,
        ", ".join(f"{d.value}={s.score}" for d, s in per_domain.items()),
    )
    return ComplianceOverview(overall_score=overall, per_domain=per_domain)
