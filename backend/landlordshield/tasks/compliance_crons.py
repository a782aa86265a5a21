"""Compliance Celery tasks.

The data layer's daily reminder job enqueues one digest per user with that
user's records; the worker returns the reminders due so the caller can
deliver and record them.
"""

import logging
from datetime import datetime

from celery import shared_task

from landlordshield.models.helpers import parse_datetime
from landlordshield.schemas.compliance import ReminderPreferences
from landlordshield.services.compliance.deadlines import list_all_deadlines
from landlordshield.services.compliance.reminders import select_due_reminders

logger = logging.getLogger(__name__)


@shared_task(name="compliance.reminder_digest", bind=True, max_retries=2)
def compliance_reminder_digest(self, payload: dict) -> list[dict]:
    """Reminders due for one user's certificates and tasks."""
    try:
        return build_reminder_digest(payload)
    except (TypeError, ValueError):
        logger.exception("Rejected reminder digest payload")
        raise
    except Exception as exc:
        logger.exception("Reminder digest failed")
        raise self.retry(exc=exc, countdown=60)


def build_reminder_digest(payload: dict) -> list[dict]:
    """Execute reminder selection for one payload.

    ``now`` may be passed as an ISO timestamp so a retried task evaluates
    against the clock of its first attempt.
    """
    now = parse_datetime(payload.get("now")) or datetime.utcnow()
    preferences = ReminderPreferences.model_validate(payload.get("preferences") or {})

    deadlines = list_all_deadlines(
        payload.get("properties"),
        payload.get("certificates"),
        payload.get("tasks"),
        now=now,
    )
    reminders = select_due_reminders(deadlines, now=now, preferences=preferences)

    logger.info(
        "Reminder digest for user %s: %d due of %d deadlines",
        payload.get("userId", "unknown"), len(reminders), len(deadlines),
    )
    return [r.to_dict() for r in reminders]
