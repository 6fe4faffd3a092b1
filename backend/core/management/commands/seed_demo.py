"""
Management command: seed_demo
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Seeds a development database with a ready-to-use data set:

    • one admin account (``admin`` / ``Admin123!``);
    • five officer accounts (password ``Officer123!``) with matching
      officer profiles, badges 100-104;
    • four sample cases, two incidents and two reports;
    • a couple of activity log entries so the dashboard feed is not empty.

The command is **idempotent** — records are looked up by their natural
key (username, badge, case/report code) and only created when missing.

Usage::

    python manage.py migrate
    python manage.py seed_demo
"""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from accounts.models import UserRole, UserStatus
from cases.models import Case, CasePriority, CaseStatus
from core.models import ActivityLog
from incidents.models import Incident, IncidentPriority, IncidentStatus
from officers.models import Officer, OfficerStatus
from reports.models import Report

User = get_user_model()

ADMIN_PASSWORD = "Admin123!"
OFFICER_PASSWORD = "Officer123!"

# (username, display name, email, rank, unit)
OFFICERS: list[tuple[str, str, str, str, str]] = [
    ("jdoe", "John Doe", "jdoe@npf.com", "Sergeant", "CID"),
    ("scole", "Sarah Cole", "scole@npf.com", "Inspector", "Patrol"),
    ("bgaruba", "Bayo Garuba", "bgaruba@npf.com", "Corporal", "Forensics"),
    ("ikalu", "Ifeanyi Kalu", "ikalu@npf.com", "Lieutenant", "K9"),
    ("emusa", "Emeka Musa", "emusa@npf.com", "Commander", "Traffic"),
]
FIRST_BADGE = 100

# (case_id, type, description, status, priority, location, reporter, officer index)
CASES = [
    ("CA-1001", "theft", "Motorcycle stolen at Wuse II", CaseStatus.OPEN, CasePriority.MEDIUM, "Wuse II", "Ahmed Bello", 0),
    ("CA-1002", "fraud", "Online banking scam", CaseStatus.INVESTIGATION, CasePriority.HIGH, "Garki", "Mrs Titi", 1),
    ("CA-1003", "assault", "Neighbour fight reported", CaseStatus.OPEN, CasePriority.MEDIUM, "Mabushi", "Unknown", 2),
    ("CA-1004", "drug", "Suspected drug cartel", CaseStatus.INVESTIGATION, CasePriority.HIGH, "Nyanya", "Anonymous", 3),
]

INCIDENTS = [
    {
        "type": "road accident",
        "priority": IncidentPriority.MEDIUM,
        "description": "Two-car collision",
        "address": "Airport Road",
        "reporter": "FRSC",
        "status": IncidentStatus.RESOLVED,
    },
    {
        "type": "fire outbreak",
        "priority": IncidentPriority.HIGH,
        "description": "Fire at market area",
        "address": "Gwarinpa",
        "reporter": "Bystander",
        "status": IncidentStatus.ACTIVE,
    },
]


class Command(BaseCommand):
    help = (
        "Seeds an admin, five officers with profiles, and sample cases, "
        "incidents and reports.  Safe to run multiple times (idempotent)."
    )

    def handle(self, *args, **options):
        self.stdout.write(self.style.MIGRATE_HEADING(
            "\n══════════════════════════════════════════"
            "\n  Demo Data — Seeding Records System"
            "\n══════════════════════════════════════════\n"
        ))

        with transaction.atomic():
            admin = self._seed_admin()
            officers = self._seed_officers()
            self._seed_cases(admin, officers)
            self._seed_incidents()
            self._seed_reports(admin, officers)
            self._seed_activity(admin, officers)

        self.stdout.write(self.style.MIGRATE_HEADING(
            "\n──────────────────────────────────────────"
        ))
        self.stdout.write(self.style.SUCCESS("  Done!  Demo data is in place.\n"))

    # ── Accounts ────────────────────────────────────────────────────

    def _seed_admin(self):
        admin, created = User.objects.get_or_create(
            username="admin",
            defaults={
                "email": "admin@npfcrm.com",
                "name": "System Admin",
                "role": UserRole.ADMIN,
                "department": "HQ",
                "status": UserStatus.ACTIVE,
            },
        )
        if created:
            admin.set_password(ADMIN_PASSWORD)
            admin.save(update_fields=["password"])
        self._report("admin account", admin.username, created)
        return admin

    def _seed_officers(self) -> list:
        accounts = []
        for index, (username, name, email, rank, unit) in enumerate(OFFICERS):
            user, created = User.objects.get_or_create(
                username=username,
                defaults={
                    "email": email,
                    "name": name,
                    "role": UserRole.OFFICER,
                    "department": "General",
                    "status": UserStatus.ACTIVE,
                },
            )
            if created:
                user.set_password(OFFICER_PASSWORD)
                user.save(update_fields=["password"])
            accounts.append(user)

            first_name, _, last_name = name.partition(" ")
            _, profile_created = Officer.objects.get_or_create(
                badge=FIRST_BADGE + index,
                defaults={
                    "first_name": first_name,
                    "last_name": last_name,
                    "rank": rank,
                    "unit": unit,
                    "department": "General",
                    "email": email,
                    "phone": f"0803000000{index}",
                    "status": OfficerStatus.AVAILABLE,
                },
            )
            self._report("officer", f"{username} (badge {FIRST_BADGE + index})", created or profile_created)
        return accounts

    # ── Records ─────────────────────────────────────────────────────

    def _seed_cases(self, admin, officers):
        for case_id, case_type, description, status, priority, location, reporter, officer in CASES:
            _, created = Case.objects.get_or_create(
                case_id=case_id,
                defaults={
                    "type": case_type,
                    "description": description,
                    "status": status,
                    "priority": priority,
                    "location": location,
                    "reporter": reporter,
                    "officer": officers[officer],
                    "created_by": admin,
                },
            )
            self._report("case", case_id, created)

    def _seed_incidents(self):
        for data in INCIDENTS:
            _, created = Incident.objects.get_or_create(
                type=data["type"],
                address=data["address"],
                defaults=data,
            )
            self._report("incident", data["type"], created)

    def _seed_reports(self, admin, officers):
        reports = [
            ("RP-9001", "weekly", "Weekly summary", admin),
            ("RP-9002", "case-summary", "Case updates", officers[0]),
        ]
        for report_id, report_type, notes, author in reports:
            _, created = Report.objects.get_or_create(
                report_id=report_id,
                defaults={"type": report_type, "notes": notes, "generated_by": author},
            )
            self._report("report", report_id, created)

    def _seed_activity(self, admin, officers):
        if ActivityLog.objects.exists():
            return
        ActivityLog.objects.create(user=admin, action="create_case", message="Case created")
        ActivityLog.objects.create(user=officers[0], action="assignment", message="Officer assigned")
        self.stdout.write(self.style.SUCCESS("  ✔  Created activity log entries"))

    def _report(self, kind: str, label: str, created: bool) -> None:
        action = "Created" if created else "Exists "
        self.stdout.write(self.style.SUCCESS(f"  ✔  {action} {kind:<14s} {label}"))
