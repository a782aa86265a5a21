"""Compliance intelligence API routes.

Stateless: every request carries the records it is evaluated against.
All routes: /api/compliance/...

Endpoints:
  POST   /overview              - Readiness scores (account or one property)
  POST   /deadlines             - Full deadline feed
  POST   /deadlines/upcoming    - Soonest N deadlines
  GET    /calendar.ics          - Statutory calendar file (no records needed)
  POST   /calendar.ics          - Calendar file for the supplied records
  POST   /threshold             - Tax-filing phase for an income profile
  POST   /penalty               - Late-payment penalty
  POST   /epc/estimate          - EPC rating, gap to C and upgrade costs
  POST   /reminders             - Deadlines due a reminder today
  POST   /report                - Report payload for PDF/CSV renderers
"""

import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException, Response

from landlordshield.config import get_settings
from landlordshield.schemas.common import handle_compliance_error
from landlordshield.schemas.compliance import (
    ComplianceOverviewRequest,
    DeadlineFeedRequest,
    EpcEstimateRequest,
    PenaltyRequest,
    ReminderRequest,
    ReportRequest,
    ThresholdInput,
    UpcomingDeadlinesRequest,
)
from landlordshield.services.compliance.calendar_export import export_calendar
from landlordshield.services.compliance.deadlines import (
    list_all_deadlines,
    list_upcoming_deadlines,
)
from landlordshield.services.compliance.energy import estimate_epc_upgrade
from landlordshield.services.compliance.errors import ComplianceInputError
from landlordshield.services.compliance.reminders import select_due_reminders
from landlordshield.services.compliance.reports import build_compliance_report
from landlordshield.services.compliance.scoring import compute_compliance
from landlordshield.services.compliance.threshold import (
    calculate_late_penalty,
    compute_threshold_status,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/compliance", tags=["compliance"])

ICS_MEDIA_TYPE = "text/calendar; charset=utf-8"
ICS_FILENAME = "landlordshield-deadlines.ics"


def _now() -> datetime:
    """Read the clock once per request; everything below receives it."""
    return datetime.utcnow()


def _ics_response(body: str) -> Response:
    return Response(
        content=body,
        media_type=ICS_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{ICS_FILENAME}"'},
    )


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

@router.post("/overview")
async def compliance_overview(body: ComplianceOverviewRequest):
    """Per-domain and weighted overall readiness scores."""
    try:
        overview = compute_compliance(body.tasks, body.property_id, now=_now())
    except ComplianceInputError as e:
        raise handle_compliance_error(e)
    return {"data": overview.model_dump(mode="json", by_alias=True)}


# ---------------------------------------------------------------------------
# Deadlines
# ---------------------------------------------------------------------------

@router.post("/deadlines")
async def all_deadlines(body: DeadlineFeedRequest):
    """Statutory, certificate and task deadlines, ascending by date."""
    try:
        deadlines = list_all_deadlines(
            body.properties, body.certificates, body.tasks, now=_now()
        )
    except ComplianceInputError as e:
        raise handle_compliance_error(e)
    return {"data": [d.to_dict() for d in deadlines]}


@router.post("/deadlines/upcoming")
async def upcoming_deadlines(body: UpcomingDeadlinesRequest):
    """The soonest deadlines, overdue ones first."""
    limit = body.limit if body.limit is not None else get_settings().upcoming_deadlines_limit
    try:
        deadlines = list_upcoming_deadlines(
            body.properties, body.certificates, limit, body.tasks, now=_now()
        )
    except ComplianceInputError as e:
        raise handle_compliance_error(e)
    return {"data": [d.to_dict() for d in deadlines]}


# ---------------------------------------------------------------------------
# Calendar export
# ---------------------------------------------------------------------------

@router.get("/calendar.ics")
async def statutory_calendar():
    """Account-wide statutory dates as an iCalendar file."""
    return _ics_response(export_calendar(list_all_deadlines(now=_now())))


@router.post("/calendar.ics")
async def records_calendar(body: DeadlineFeedRequest):
    """Calendar file including the caller's certificates and tasks."""
    try:
        deadlines = list_all_deadlines(
            body.properties, body.certificates, body.tasks, now=_now()
        )
    except ComplianceInputError as e:
        raise handle_compliance_error(e)
    return _ics_response(export_calendar(deadlines))


# ---------------------------------------------------------------------------
# Calculators
# ---------------------------------------------------------------------------

@router.post("/threshold")
async def threshold_status(body: ThresholdInput):
    """Which tax-filing phase applies to an income profile."""
    status = compute_threshold_status(body)
    return {"data": status.model_dump(mode="json", by_alias=True)}


@router.post("/penalty")
async def late_penalty(body: PenaltyRequest):
    """Penalty on a late tax payment."""
    result = calculate_late_penalty(body.amount_owed, body.days_late)
    return {"data": result.model_dump(mode="json")}


@router.post("/epc/estimate")
async def epc_estimate(body: EpcEstimateRequest):
    """EPC rating for a SAP score and what reaching C would take."""
    estimate = estimate_epc_upgrade(body.current_score, body.budget)
    return {"data": estimate.model_dump(mode="json", by_alias=True)}


# ---------------------------------------------------------------------------
# Reminders & reports
# ---------------------------------------------------------------------------

@router.post("/reminders")
async def due_reminders(body: ReminderRequest):
    """Certificate and task deadlines hitting a reminder threshold today."""
    now = _now()
    try:
        deadlines = list_all_deadlines(
            body.properties, body.certificates, body.tasks, now=now
        )
    except ComplianceInputError as e:
        raise handle_compliance_error(e)
    reminders = select_due_reminders(deadlines, now=now, preferences=body.preferences)
    return {"data": [r.to_dict() for r in reminders]}


@router.post("/report")
async def compliance_report(body: ReportRequest):
    """Report payload for the account, or one property when propertyId is set."""
    try:
        report = build_compliance_report(
            body.properties,
            body.certificates,
            body.tasks,
            now=_now(),
            property_scope=body.property_id,
            deadline_limit=get_settings().report_deadlines_limit,
        )
    except ComplianceInputError as e:
        raise handle_compliance_error(e)
    except Exception:
        logger.exception("Compliance report failed")
        raise HTTPException(status_code=500, detail="Failed to build report")
    return {"data": report}
