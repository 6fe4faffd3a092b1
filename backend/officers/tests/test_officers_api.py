"""
Integration tests — officer profiles (``/api/officers``).

Profiles are addressed by badge number.  Reads are open to any
authenticated account; writes are admin-only.
"""

from __future__ import annotations

import pytest
from rest_framework import status

from core.models import ActivityLog
from officers.models import Officer

OFFICERS_URL = "/api/officers"

_PAYLOAD = {
    "badge": 100,
    "first_name": "John",
    "last_name": "Doe",
    "rank": "Sergeant",
    "unit": "CID",
    "email": "jdoe@npf.com",
}


def make_officer(badge: int, **fields) -> Officer:
    defaults = {
        "first_name": f"First{badge}",
        "last_name": f"Last{badge}",
        "rank": "Corporal",
        "unit": "Patrol",
        "email": f"officer{badge}@npf.com",
    }
    defaults.update(fields)
    return Officer.objects.create(badge=badge, **defaults)


@pytest.mark.django_db
class TestOfficerCreate:

    def test_admin_creates_officer(self, admin_client):
        resp = admin_client.post(OFFICERS_URL, _PAYLOAD, format="json")

        assert resp.status_code == status.HTTP_201_CREATED, resp.data
        data = resp.data["data"]
        assert data["badge"] == 100
        assert data["status"] == "available"
        assert data["department"] == "General"
        assert ActivityLog.objects.filter(action="create_officer").exists()

    def test_officer_cannot_create(self, officer_client):
        resp = officer_client.post(OFFICERS_URL, _PAYLOAD, format="json")

        assert resp.status_code == status.HTTP_403_FORBIDDEN
        assert not Officer.objects.exists()

    def test_missing_fields(self, admin_client):
        resp = admin_client.post(OFFICERS_URL, {"badge": 100, "first_name": "John"}, format="json")

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.data["code"] == "MISSING_FIELDS"

    def test_invalid_email(self, admin_client):
        resp = admin_client.post(OFFICERS_URL, {**_PAYLOAD, "email": "jdoe-at-npf"}, format="json")

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.data["code"] == "INVALID_EMAIL"

    @pytest.mark.parametrize("field,value", [("badge", 100), ("email", "jdoe@npf.com")])
    def test_duplicate_badge_or_email(self, admin_client, field, value):
        make_officer(100 if field == "badge" else 200, email="jdoe@npf.com" if field == "email" else "x@npf.com")

        resp = admin_client.post(OFFICERS_URL, {**_PAYLOAD, "badge": 300, field: value}, format="json")

        assert resp.status_code == status.HTTP_409_CONFLICT
        assert resp.data["code"] == "DUPLICATE_ENTRY"


@pytest.mark.django_db
class TestOfficerRead:

    def test_list_ordered_by_badge_with_total(self, officer_client):
        make_officer(103)
        make_officer(101)
        make_officer(102)

        resp = officer_client.get(OFFICERS_URL)

        assert resp.status_code == status.HTTP_200_OK
        assert [o["badge"] for o in resp.data["data"]] == [101, 102, 103]
        assert resp.data["total"] == 3

    def test_filters(self, officer_client):
        make_officer(101, unit="Forensics", status="on_call")
        make_officer(102, first_name="Sarah", last_name="Cole")
        make_officer(103)

        def badges(**params):
            return [o["badge"] for o in officer_client.get(OFFICERS_URL, params).data["data"]]

        assert badges(unit="foren") == [101]
        assert badges(status="on_call") == [101]
        assert badges(search="cole") == [102]
        assert badges(search="103") == [103]
        assert badges(search="²") == []
        assert badges(status="suspended") == []

    def test_retrieve_by_badge(self, officer_client):
        make_officer(101)

        resp = officer_client.get(f"{OFFICERS_URL}/101")

        assert resp.status_code == status.HTTP_200_OK
        assert resp.data["data"]["email"] == "officer101@npf.com"

    @pytest.mark.parametrize("badge", ["999", "abc", "²"])
    def test_unknown_badge(self, officer_client, badge):
        resp = officer_client.get(f"{OFFICERS_URL}/{badge}")

        assert resp.status_code == status.HTTP_404_NOT_FOUND
        assert resp.data["code"] == "OFFICER_NOT_FOUND"

    def test_statistics(self, officer_client):
        make_officer(101)
        make_officer(102, status="on_call")
        make_officer(103, status="off_duty")
        make_officer(104, status="off_duty")

        resp = officer_client.get(f"{OFFICERS_URL}/statistics")

        assert resp.data["data"] == {"total": 4, "available": 1, "on_call": 1, "off_duty": 2}


@pytest.mark.django_db
class TestOfficerUpdateDelete:

    def test_admin_updates_officer(self, admin_client):
        make_officer(101)

        resp = admin_client.patch(
            f"{OFFICERS_URL}/101",
            {"rank": "Inspector", "active_cases": "3", "first_name": ""},
            format="json",
        )

        assert resp.status_code == status.HTTP_200_OK, resp.data
        officer = Officer.objects.get(badge=101)
        assert officer.rank == "Inspector"
        assert officer.active_cases == 3
        assert officer.first_name == "First101"

    def test_update_invalid_email(self, admin_client):
        make_officer(101)

        resp = admin_client.patch(f"{OFFICERS_URL}/101", {"email": "bad"}, format="json")

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.data["code"] == "INVALID_EMAIL"

    def test_officer_cannot_update(self, officer_client):
        make_officer(101)

        resp = officer_client.patch(f"{OFFICERS_URL}/101", {"rank": "Inspector"}, format="json")

        assert resp.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_deletes_officer(self, admin_client):
        make_officer(101)

        resp = admin_client.delete(f"{OFFICERS_URL}/101")

        assert resp.status_code == status.HTTP_200_OK
        assert not Officer.objects.exists()

    def test_delete_unknown_officer(self, admin_client):
        resp = admin_client.delete(f"{OFFICERS_URL}/555")

        assert resp.status_code == status.HTTP_404_NOT_FOUND
        assert resp.data["code"] == "OFFICER_NOT_FOUND"
