"""
Unit tests for ``core.sequences`` — the case / report identifier
allocator.
"""

from __future__ import annotations

import pytest

from cases.models import Case
from core.models import SequenceCounter
from core.sequences import (
    CASE_SEQUENCE,
    REPORT_SEQUENCE,
    allocate_case_id,
    allocate_report_id,
    next_number,
    parse_suffix,
)


class TestParseSuffix:

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("CA-0042", 42),
            ("RPT-1030", 1030),
            ("RP-9001", 9001),
            ("CA-", None),
            ("CA-12a", None),
            ("CA-²", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parse(self, code, expected):
        assert parse_suffix(code) == expected


class TestNextNumber:

    def test_seed_when_nothing_exists(self):
        assert next_number(CASE_SEQUENCE, counter_value=0, last_code=None) == 1
        assert next_number(REPORT_SEQUENCE, counter_value=0, last_code=None) == 1026

    def test_follows_last_code(self):
        assert next_number(CASE_SEQUENCE, counter_value=0, last_code="CA-0042") == 43

    def test_counter_wins_when_ahead(self):
        # The newest row was deleted; the counter still remembers 50.
        assert next_number(CASE_SEQUENCE, counter_value=50, last_code="CA-0042") == 51

    def test_format_pads_to_four_digits(self):
        assert CASE_SEQUENCE.format(7) == "CA-0007"
        assert CASE_SEQUENCE.format(12345) == "CA-12345"


@pytest.mark.django_db
class TestAllocate:

    def test_first_identifiers(self):
        assert allocate_case_id() == "CA-0001"
        assert allocate_report_id() == "RPT-1026"

    def test_allocations_never_repeat_without_inserts(self):
        first = allocate_case_id()
        second = allocate_case_id()

        assert (first, second) == ("CA-0001", "CA-0002")
        assert SequenceCounter.objects.get(pk="case").value == 2

    def test_continues_after_existing_case(self, create_user):
        Case.objects.create(case_id="CA-0042", type="theft", location="Garki", created_by=create_user())

        assert allocate_case_id() == "CA-0043"

    def test_deleted_newest_case_is_not_reissued(self, create_user):
        user = create_user()
        code = allocate_case_id()
        case = Case.objects.create(case_id=code, type="theft", location="Garki", created_by=user)
        case.delete()

        assert allocate_case_id() == "CA-0002"
