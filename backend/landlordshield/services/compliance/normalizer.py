"""Deadline normalization.

Turns one source record (task, certificate or statutory calendar entry) into
zero or one Deadline. Records without a usable date are dropped, never
raised on: the feed prefers partial output over failing the whole pass.
"""

import logging
from collections.abc import Mapping
from datetime import datetime

from pydantic import BaseModel, ValidationError

from landlordshield.models.deadline import Deadline
from landlordshield.models.enums import CertificateStatus, Domain, Impact, Priority
from landlordshield.models.helpers import start_of_day
from landlordshield.models.records import Certificate, Property, Task

from .regulatory_calendar import CalendarEntry

logger = logging.getLogger(__name__)


def coerce_record(raw: object, model: type[BaseModel]) -> BaseModel | None:
    """Validate one raw row into ``model``; None (logged) if it does not fit."""
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, Mapping):
        logger.warning("Skipping %s record of type %s", model.__name__, type(raw).__name__)
        return None
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        logger.warning(
            "Skipping malformed %s record %r: %d validation error(s)",
            model.__name__, raw.get("id"), exc.error_count(),
        )
        return None


def _is_overdue(deadline_date, now: datetime) -> bool:
    return deadline_date < start_of_day(now).date()


def normalize_task(task: Task, *, now: datetime) -> Deadline | None:
    """Outstanding dated tasks only; completed tasks are history, not deadlines."""
    if task.is_completed:
        return None
    if task.due_date is None:
        logger.debug("Task %s has no due date", task.id)
        return None

    return Deadline(
        id=f"task-{task.id}",
        title=task.title,
        date=task.due_date,
        domain=task.domain,
        description=task.description,
        is_overdue=_is_overdue(task.due_date, now),
        is_critical=task.priority == Priority.CRITICAL,
        property_id=task.property_id,
        source_ref=task.id,
    )


def normalize_certificate(
    certificate: Certificate,
    *,
    now: datetime,
    properties_by_id: Mapping[str, Property] | None = None,
) -> Deadline | None:
    if certificate.expiry_date is None:
        logger.debug("Certificate %s has no expiry date", certificate.id)
        return None

    title = f"{certificate.label} renewal"
    prop = (properties_by_id or {}).get(certificate.property_id)
    if prop is not None:
        title = f"{title}: {prop.address_line1}"

    return Deadline(
        id=f"cert-{certificate.id}",
        title=title,
        date=certificate.expiry_date,
        domain=Domain.CERTIFICATE,
        description=f"Certificate expires on {certificate.expiry_date.isoformat()}",
        is_overdue=_is_overdue(certificate.expiry_date, now),
        is_critical=certificate.status == CertificateStatus.EXPIRED,
        property_id=certificate.property_id,
        source_ref=certificate.id,
    )


def normalize_calendar_entry(entry: CalendarEntry, *, now: datetime) -> Deadline:
    """Statutory dates apply account-wide, whatever the user's task progress."""
    return Deadline(
        id=entry.id,
        title=entry.title,
        date=entry.date,
        domain=entry.domain,
        description=entry.description,
        is_overdue=_is_overdue(entry.date, now),
        is_critical=entry.impact == Impact.CRITICAL,
    )
