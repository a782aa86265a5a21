"""Reminder selection for certificate and task deadlines.

A deadline is due a reminder when exactly 30 or 7 days remain, or when it
is due today or overdue. Statutory calendar dates are never reminded; they
reach users through the calendar feed instead.
"""

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from datetime import datetime

from landlordshield.models.deadline import Deadline
from landlordshield.models.helpers import days_until
from landlordshield.schemas.compliance import ReminderPreferences

logger = logging.getLogger(__name__)

THIRTY_DAY_THRESHOLD = 30
SEVEN_DAY_THRESHOLD = 7


@dataclass(frozen=True)
class DueReminder:
    deadline_id: str
    title: str
    date: str
    domain: str
    days_left: int
    threshold: str  # "30d" | "7d" | "overdue"
    key: str  # dedupe key for the delivery layer
    property_id: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


def match_threshold(days_left: int, prefs: ReminderPreferences) -> str | None:
    if days_left <= 0:
        if prefs.on_day_reminder or prefs.overdue_alert:
            return "overdue"
        return None
    if days_left == SEVEN_DAY_THRESHOLD and prefs.seven_day_reminder:
        return f"{SEVEN_DAY_THRESHOLD}d"
    if days_left == THIRTY_DAY_THRESHOLD and prefs.thirty_day_reminder:
        return f"{THIRTY_DAY_THRESHOLD}d"
    return None


def select_due_reminders(
    deadlines: Iterable[Deadline],
    *,
    now: datetime,
    preferences: ReminderPreferences | None = None,
) -> list[DueReminder]:
    prefs = preferences or ReminderPreferences()
    if not prefs.email_reminders:
        return []

    due: list[DueReminder] = []
    for deadline in deadlines:
        if deadline.source_ref is None:
            continue

        days_left = days_until(deadline.date, now)
        threshold = match_threshold(days_left, prefs)
        if threshold is None:
            continue

        due.append(DueReminder(
            deadline_id=deadline.id,
            title=deadline.title,
            date=deadline.date.isoformat(),
            domain=deadline.domain.value,
            days_left=days_left,
            threshold=threshold,
            key=f"{deadline.id}_{threshold}",
            property_id=deadline.property_id,
        ))

    logger.debug("Selected %d due reminders", len(due))
    return due
