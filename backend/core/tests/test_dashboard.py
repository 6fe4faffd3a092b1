"""
Tests for the dashboard aggregations (``core.services``) and the
``/api/dashboard/*`` endpoints.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from datetime import timezone as dt_timezone

import pytest
from django.utils import timezone
from rest_framework import status

from cases.models import Case
from core.models import ActivityLog
from core.services import (
    activity_type,
    compute_trend,
    format_case_type,
    month_bounds,
    round_half_up,
    time_ago,
)
from officers.models import Officer

DASHBOARD_URL = "/api/dashboard"


# ════════════════════════════════════════════════════════════════════
#  Formatting helpers
# ════════════════════════════════════════════════════════════════════

class TestHelpers:

    @pytest.mark.parametrize(
        "action,expected",
        [
            ("create_case", "case"),
            ("update_officer", "update"),
            ("delete_report", "alert"),
            ("resolve_case", "resolve"),
            ("close_case", "resolve"),
            ("login", "case"),
            ("logout", "update"),
            ("", "case"),
            (None, "case"),
        ],
    )
    def test_activity_type(self, action, expected):
        assert activity_type(action) == expected

    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(seconds=30), "Just now"),
            (timedelta(minutes=1), "1 min ago"),
            (timedelta(minutes=5), "5 mins ago"),
            (timedelta(hours=1), "1 hour ago"),
            (timedelta(hours=3), "3 hours ago"),
            (timedelta(days=1), "1 day ago"),
            (timedelta(days=6), "6 days ago"),
        ],
    )
    def test_time_ago(self, delta, expected):
        now = timezone.now()
        assert time_ago(now - delta, now) == expected

    def test_time_ago_falls_back_to_date(self):
        now = datetime(2025, 6, 15, 12, 0, tzinfo=dt_timezone.utc)
        then = datetime(2025, 6, 1, 12, 0, tzinfo=dt_timezone.utc)

        assert time_ago(then, now) == timezone.localtime(then).strftime("%Y-%m-%d")

    def test_format_case_type(self):
        assert format_case_type("theft") == "Theft/Burglary"
        assert format_case_type("traffic") == "Traffic Incidents"
        assert format_case_type("fraud") == "Fraud"

    @pytest.mark.parametrize(
        "this_month,last_month,expected",
        [
            (3, 2, (50, "up")),
            (1, 2, (50, "down")),
            (2, 2, (0, "stable")),
            (4, 0, (100, "up")),
            (0, 0, (0, "stable")),
            (0, 3, (100, "down")),
        ],
    )
    def test_compute_trend(self, this_month, last_month, expected):
        assert compute_trend(this_month, last_month) == expected

    def test_round_half_up_matches_js(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2
        assert round_half_up(66.66) == 67

    def test_month_bounds_across_new_year(self):
        now = timezone.make_aware(datetime(2025, 1, 15, 10, 0))

        last_month, this_month = month_bounds(now)

        assert (last_month.year, last_month.month, last_month.day) == (2024, 12, 1)
        assert (this_month.year, this_month.month, this_month.day) == (2025, 1, 1)


# ════════════════════════════════════════════════════════════════════
#  Endpoints
# ════════════════════════════════════════════════════════════════════

@pytest.mark.django_db
class TestDashboardEndpoints:

    def test_requires_token(self, api_client):
        resp = api_client.get(f"{DASHBOARD_URL}/statistics")

        assert resp.status_code == status.HTTP_401_UNAUTHORIZED
        assert resp.data["code"] == "NO_TOKEN"

    def test_statistics_match_case_statistics(self, officer_client):
        user = officer_client.user
        Case.objects.create(case_id="CA-0001", type="theft", location="a", created_by=user, priority="high")
        Case.objects.create(case_id="CA-0002", type="theft", location="b", created_by=user, status="resolved")

        dashboard = officer_client.get(f"{DASHBOARD_URL}/statistics").data["data"]
        cases = officer_client.get("/api/cases/statistics").data["data"]

        assert dashboard == cases
        assert dashboard["total"] == 2
        assert dashboard["priority"] == 1

    def test_recent_activity(self, officer_client):
        ActivityLog.objects.create(user=None, action="seed", message="Seeded",
                                   timestamp=timezone.now() - timedelta(hours=2))
        ActivityLog.objects.create(user=officer_client.user, action="create_case", message="New case")

        resp = officer_client.get(f"{DASHBOARD_URL}/recent-activity", {"limit": 1})

        assert resp.status_code == status.HTTP_200_OK
        entries = resp.data["data"]
        assert len(entries) == 1
        assert entries[0]["message"] == "New case"
        assert entries[0]["user"] == "John Doe"
        assert entries[0]["type"] == "case"
        assert entries[0]["time_ago"] == "Just now"

        system = officer_client.get(f"{DASHBOARD_URL}/recent-activity").data["data"][-1]
        assert system["user"] == "System"
        assert system["time_ago"] == "2 hours ago"

    def test_case_distribution(self, officer_client):
        user = officer_client.user
        for n, (case_type, case_status) in enumerate(
            [("theft", "resolved"), ("theft", "open"), ("theft", "open"), ("assault", "open")],
            start=1,
        ):
            Case.objects.create(case_id=f"CA-{n:04d}", type=case_type, location="x",
                                status=case_status, created_by=user)

        resp = officer_client.get(f"{DASHBOARD_URL}/case-distribution")

        rows = resp.data["data"]
        assert [r["type"] for r in rows] == ["Theft/Burglary", "Assault"]
        theft = rows[0]
        assert theft["count"] == 3
        assert theft["resolution_rate"] == 33
        assert (theft["trend"], theft["trend_direction"]) == (100, "up")

    def test_recent_cases_limited_to_five(self, officer_client):
        for n in range(1, 8):
            Case.objects.create(case_id=f"CA-{n:04d}", type="theft", location="x", created_by=officer_client.user)

        rows = officer_client.get(f"{DASHBOARD_URL}/recent-cases").data["data"]

        assert len(rows) == 5
        assert rows[0]["case_id"] == "CA-0007"
        assert rows[0]["officer"] == "Unassigned"

    def test_personnel_status(self, officer_client):
        for badge, active in [(100, 1), (101, 5), (102, 0), (103, 3), (104, 2)]:
            Officer.objects.create(badge=badge, first_name=f"F{badge}", last_name="L", rank="Cpl",
                                   unit="Patrol", email=f"o{badge}@npf.com", active_cases=active)

        rows = officer_client.get(f"{DASHBOARD_URL}/personnel-status").data["data"]

        assert [r["badge"] for r in rows] == [101, 103, 104, 100]
        assert rows[0]["name"] == "F101 L"
