"""Deadline aggregation.

Merges statutory calendar dates with a user's certificate expiries and
outstanding checklist tasks into one sorted feed. Used by the dashboard
timeline, the month calendar, calendar-file export and reports.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

from landlordshield.models.deadline import Deadline
from landlordshield.models.records import Certificate, Property, Task

from .errors import ensure_sequence
from .normalizer import (
    coerce_record,
    normalize_calendar_entry,
    normalize_certificate,
    normalize_task,
)
from .regulatory_calendar import get_statutory_deadlines

logger = logging.getLogger(__name__)


def get_calendar_deadlines(*, now: datetime) -> list[Deadline]:
    """Account-wide statutory deadlines, in calendar order."""
    return [normalize_calendar_entry(e, now=now) for e in get_statutory_deadlines()]


def get_certificate_deadlines(
    properties: Sequence[Property],
    certificates: Iterable,
    *,
    now: datetime,
) -> list[Deadline]:
    properties_by_id = {p.id: p for p in properties}
    deadlines: list[Deadline] = []
    for raw in certificates:
        cert = coerce_record(raw, Certificate)
        if cert is None:
            continue
        deadline = normalize_certificate(cert, now=now, properties_by_id=properties_by_id)
        if deadline is not None:
            deadlines.append(deadline)
    return deadlines


def get_task_deadlines(tasks: Iterable, *, now: datetime) -> list[Deadline]:
    deadlines: list[Deadline] = []
    for raw in tasks:
        task = coerce_record(raw, Task)
        if task is None:
            continue
        deadline = normalize_task(task, now=now)
        if deadline is not None:
            deadlines.append(deadline)
    return deadlines


def _dedupe(deadlines: Iterable[Deadline]) -> list[Deadline]:
    seen: set[str] = set()
    unique: list[Deadline] = []
    for d in deadlines:
        if d.id in seen:
            logger.debug("Dropping duplicate deadline %s", d.id)
            continue
        seen.add(d.id)
        unique.append(d)
    return unique


def list_all_deadlines(
    properties: Sequence | None = None,
    certificates: Sequence | None = None,
    tasks: Sequence | None = None,
    *,
    now: datetime,
) -> list[Deadline]:
    """All deadlines, ascending by date.

    With no records this is the statutory calendar alone, which needs no
    signed-in user. Overdue entries are not separated out; they sort first
    because their dates are earliest.
    """
    raw_properties = ensure_sequence(properties, "properties")
    raw_certificates = ensure_sequence(certificates, "certificates")
    raw_tasks = ensure_sequence(tasks, "tasks")

    resolved_properties = [
        p for p in (coerce_record(raw, Property) for raw in raw_properties)
        if p is not None
    ]

    merged = _dedupe([
        *get_calendar_deadlines(now=now),
        *get_certificate_deadlines(resolved_properties, raw_certificates, now=now),
        *get_task_deadlines(raw_tasks, now=now),
    ])
    # sorted() is stable, so same-day entries keep source order
    merged = sorted(merged, key=lambda d: d.date)

    logger.debug(
        "Aggregated %d deadlines (%d overdue) from %d certificates and %d tasks",
        len(merged), sum(1 for d in merged if d.is_overdue),
        len(raw_certificates), len(raw_tasks),
    )
    return merged


def list_upcoming_deadlines(
    properties: Sequence | None,
    certificates: Sequence | None,
    limit: int = 10,
    tasks: Sequence | None = None,
    *,
    now: datetime,
) -> list[Deadline]:
    """The first ``limit`` deadlines of the sorted feed, overdue ones included."""
    if limit <= 0:
        return []
    return list_all_deadlines(properties, certificates, tasks, now=now)[:limit]
