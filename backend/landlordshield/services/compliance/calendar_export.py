"""iCalendar (RFC 5545) export of the deadline feed.

One all-day VEVENT per deadline, ending the following day, with display
alarms 7 days and 1 day before.
"""

from collections.abc import Iterable
from datetime import timedelta

from landlordshield.config import get_settings
from landlordshield.models.deadline import Deadline
from landlordshield.models.enums import Domain

CRLF = "\r\n"

DOMAIN_LABELS: dict[Domain, str] = {
    Domain.TAX: "Making Tax Digital",
    Domain.TENANCY_RIGHTS: "Renters' Rights",
    Domain.ENERGY: "EPC",
    Domain.CERTIFICATE: "Certificate",
    Domain.CUSTOM: "Custom",
}

REMINDER_TRIGGERS = ("-P7D", "-P1D")


def escape_text(text: str) -> str:
    """Escape a TEXT value: backslash, semicolon, comma and newline."""
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def _event_lines(deadline: Deadline, uid_domain: str) -> list[str]:
    start = deadline.date
    end = start + timedelta(days=1)

    label = DOMAIN_LABELS.get(deadline.domain, deadline.domain.value)
    description = f"{deadline.description}\n" if deadline.description else ""
    description += f"Domain: {label}"

    lines = [
        "BEGIN:VEVENT",
        f"DTSTART;VALUE=DATE:{start:%Y%m%d}",
        f"DTEND;VALUE=DATE:{end:%Y%m%d}",
        f"SUMMARY:{escape_text(deadline.title)}",
        f"DESCRIPTION:{escape_text(description)}",
        f"UID:{deadline.id}@{uid_domain}",
    ]
    for trigger in REMINDER_TRIGGERS:
        lines.extend([
            "BEGIN:VALARM",
            f"TRIGGER:{trigger}",
            "ACTION:DISPLAY",
            "DESCRIPTION:Reminder",
            "END:VALARM",
        ])
    lines.append("END:VEVENT")
    return lines


def export_calendar(
    deadlines: Iterable[Deadline],
    uid_domain: str | None = None,
) -> str:
    """Render deadlines as a VCALENDAR document with CRLF line endings."""
    settings = get_settings()
    uid_domain = uid_domain or settings.calendar_uid_domain

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{settings.calendar_prodid}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
    ]
    for deadline in deadlines:
        lines.extend(_event_lines(deadline, uid_domain))
    lines.append("END:VCALENDAR")
    return CRLF.join(lines) + CRLF
