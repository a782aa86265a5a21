"""
LandlordShield - Reminder Selection Tests
"""

from datetime import date

import pytest

from landlordshield.models.deadline import Deadline
from landlordshield.models.enums import Domain
from landlordshield.schemas.compliance import ReminderPreferences
from landlordshield.services.compliance.deadlines import list_all_deadlines
from landlordshield.services.compliance.reminders import (
    match_threshold,
    select_due_reminders,
)


class TestMatchThreshold:

    @pytest.mark.parametrize(
        "days_left, expected",
        [
            (30, "30d"),
            (29, None),
            (8, None),
            (7, "7d"),
            (1, None),
            (0, "overdue"),
            (-12, "overdue"),
        ],
    )
    def test_defaults(self, days_left, expected):
        assert match_threshold(days_left, ReminderPreferences()) == expected

    def test_disabled_thresholds(self):
        prefs = ReminderPreferences(
            thirty_day_reminder=False,
            seven_day_reminder=False,
            on_day_reminder=False,
            overdue_alert=False,
        )
        for days_left in (30, 7, 0, -1):
            assert match_threshold(days_left, prefs) is None

    def test_overdue_alert_alone_still_fires(self):
        prefs = ReminderPreferences(on_day_reminder=False)
        assert match_threshold(-3, prefs) == "overdue"


class TestSelectDueReminders:

    def test_portfolio(self, now, properties, certificates, tasks):
        feed = list_all_deadlines(properties, certificates, tasks, now=now)
        reminders = {r.deadline_id: r for r in select_due_reminders(feed, now=now)}

        assert set(reminders) == {"cert-c1", "cert-c2", "task-t1", "task-t3"}
        assert reminders["cert-c2"].threshold == "30d"
        assert reminders["cert-c2"].days_left == 30
        assert reminders["task-t1"].threshold == "7d"
        assert reminders["cert-c1"].threshold == "overdue"
        assert reminders["task-t3"].key == "task-t3_overdue"
        assert reminders["cert-c1"].property_id == "prop-1"

    def test_statutory_entries_are_not_reminded(self, now):
        assert select_due_reminders(list_all_deadlines(now=now), now=now) == []

    def test_email_reminders_off(self, now, certificates):
        feed = list_all_deadlines(certificates=certificates, now=now)
        prefs = ReminderPreferences.model_validate({"emailReminders": False})
        assert select_due_reminders(feed, now=now, preferences=prefs) == []

    def test_due_today(self, now):
        deadline = Deadline(id="task-x", title="Today", date=now.date(),
                            domain=Domain.CUSTOM, source_ref="x")
        (reminder,) = select_due_reminders([deadline], now=now)

        assert reminder.days_left == 0
        assert reminder.threshold == "overdue"

    def test_to_dict(self, now):
        deadline = Deadline(id="cert-y", title="EICR renewal", date=date(2026, 6, 22),
                            domain=Domain.CERTIFICATE, source_ref="y")
        (reminder,) = select_due_reminders([deadline], now=now)

        assert reminder.to_dict() == {
            "deadline_id": "cert-y",
            "title": "EICR renewal",
            "date": "2026-06-22",
            "domain": "certificate",
            "days_left": 7,
            "threshold": "7d",
            "key": "cert-y_7d",
            "property_id": None,
        }
