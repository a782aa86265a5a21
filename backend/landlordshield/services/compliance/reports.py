"""Compliance report data.

Assembles the plain-record payload the report renderers (PDF, CSV) read:
scores, portfolio counts, per-property breakdowns, outstanding actions and
upcoming deadlines.
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from landlordshield.models.enums import PRIORITY_ORDER, CertificateStatus
from landlordshield.models.helpers import strip_tz
from landlordshield.models.records import Certificate, Property, Task

from .deadlines import list_upcoming_deadlines
from .errors import ensure_sequence
from .normalizer import coerce_record
from .scoring import compute_compliance, in_scope

logger = logging.getLogger(__name__)

DEFAULT_DEADLINE_LIMIT = 20


def _resolve(raw: Sequence | None, model: type, name: str) -> list:
    return [
        r for r in (coerce_record(x, model) for x in ensure_sequence(raw, name))
        if r is not None
    ]


def _certificate_counts(certificates: Sequence[Certificate]) -> dict:
    counts = {"total": len(certificates)}
    for status in CertificateStatus:
        counts[status.value] = sum(1 for c in certificates if c.status == status)
    return counts


def _property_breakdown(
    prop: Property,
    certificates: Sequence[Certificate],
    tasks: Sequence[Task],
    *,
    now: datetime,
) -> dict:
    certs = [c for c in certificates if c.property_id == prop.id]
    scoped_tasks = [t for t in tasks if in_scope(t, prop.id)]

    return {
        "property": {"id": prop.id, "address": prop.full_address},
        "certificates": _certificate_counts(certs),
        "expiringCertificates": [
            {
                "kind": c.kind,
                "status": c.status.value,
                "expiryDate": c.expiry_date.isoformat() if c.expiry_date else None,
            }
            for c in certs
            if c.status in (CertificateStatus.EXPIRING_SOON, CertificateStatus.EXPIRED)
        ],
        "checklistCompletion": {
            "total": len(scoped_tasks),
            "completed": sum(1 for t in scoped_tasks if t.is_completed),
        },
        "compliance": compute_compliance(
            scoped_tasks, prop.id, now=now
        ).model_dump(mode="json", by_alias=True),
    }


def _outstanding_actions(tasks: Sequence[Task], properties: Sequence[Property]) -> list[dict]:
    by_id = {p.id: p for p in properties}
    outstanding = sorted(
        (t for t in tasks if not t.is_completed),
        key=lambda t: PRIORITY_ORDER[t.priority],
    )
    actions = []
    for task in outstanding:
        prop = by_id.get(task.property_id) if task.property_id else None
        actions.append({
            "id": task.id,
            "title": task.title,
            "domain": task.domain.value,
            "priority": task.priority.value,
            "dueDate": task.due_date.isoformat() if task.due_date else None,
            "propertyAddress": prop.short_address if prop else "General",
        })
    return actions


def build_compliance_report(
    properties: Sequence | None,
    certificates: Sequence | None,
    tasks: Sequence | None,
    *,
    now: datetime,
    property_scope: str | None = None,
    deadline_limit: int = DEFAULT_DEADLINE_LIMIT,
) -> dict:
    """Build the report payload for the account or a single property."""
    props = _resolve(properties, Property, "properties")
    certs = _resolve(certificates, Certificate, "certificates")
    items = _resolve(tasks, Task, "tasks")

    if property_scope is not None:
        props = [p for p in props if p.id == property_scope]
        certs = [c for c in certs if c.property_id == property_scope]
        items = [t for t in items if in_scope(t, property_scope)]

    overview = compute_compliance(items, property_scope, now=now)
    upcoming = list_upcoming_deadlines(props, certs, deadline_limit, items, now=now)

    report = {
        "generatedAt": strip_tz(now).isoformat(),
        "propertyScope": property_scope,
        "compliance": overview.model_dump(mode="json", by_alias=True),
        "portfolioSummary": {
            "totalProperties": len(props),
            "totalCertificates": len(certs),
            "certificatesValid": sum(1 for c in certs if c.status == CertificateStatus.VALID),
            "certificatesExpiring": sum(
                1 for c in certs if c.status == CertificateStatus.EXPIRING_SOON
            ),
            "certificatesExpired": sum(1 for c in certs if c.status == CertificateStatus.EXPIRED),
        },
        "propertyBreakdowns": [
            _property_breakdown(p, certs, items, now=now) for p in props
        ],
        "outstandingActions": _outstanding_actions(items, props),
        "upcomingDeadlines": [d.to_dict() for d in upcoming],
    }

    logger.info(
        "Built compliance report for %s: %d properties, score %d%%",
        property_scope or "account", len(props), overview.overall_score,
    )
    return report
