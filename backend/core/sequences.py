"""
Sequential, human-readable identifiers for cases and reports.

``CA-0001``, ``CA-0002``, ... and ``RPT-1026``, ``RPT-1027``, ...

The next number is the larger of

* the value stored in the locked ``SequenceCounter`` row, and
* the numeric suffix of the most recently created record of the kind,

plus one.  The counter row is held with ``select_for_update`` for the
duration of the allocation, so two concurrent requests can never read
the same "last" value.  With neither a counter nor a record the seed
number is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.apps import apps
from django.db import transaction

from core.constants import (
    CASE_ID_PREFIX,
    CASE_ID_SEED,
    REPORT_ID_PREFIX,
    REPORT_ID_SEED,
    SEQUENCE_PAD_WIDTH,
)
from core.domain.transactions import lock_or_create

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceSpec:
    name: str
    prefix: str
    seed: int
    model: str
    field: str
    width: int = SEQUENCE_PAD_WIDTH

    def format(self, number: int) -> str:
        return f"{self.prefix}{number:0{self.width}d}"


CASE_SEQUENCE = SequenceSpec(
    name="case",
    prefix=CASE_ID_PREFIX,
    seed=CASE_ID_SEED,
    model="cases.Case",
    field="case_id",
)
REPORT_SEQUENCE = SequenceSpec(
    name="report",
    prefix=REPORT_ID_PREFIX,
    seed=REPORT_ID_SEED,
    model="reports.Report",
    field="report_id",
)


def parse_suffix(code: str | None) -> int | None:
    """
    Return the number after the last ``-`` in ``code``.

    Accepts any prefix (``CA-0042``, ``RPT-1030``, ``RP-7``); returns
    ``None`` when there is no numeric suffix.
    """
    if not code:
        return None
    _, _, tail = code.rpartition("-")
    return int(tail) if tail.isdecimal() else None


def next_number(spec: SequenceSpec, *, counter_value: int, last_code: str | None) -> int:
    current = max(counter_value, parse_suffix(last_code) or 0)
    if current == 0:
        return spec.seed
    return current + 1


def allocate(spec: SequenceSpec) -> str:
    """Reserve and return the next identifier for ``spec``."""
    from core.models import SequenceCounter  # lazy import

    model = apps.get_model(spec.model)
    with transaction.atomic():
        counter = lock_or_create(SequenceCounter, spec.name, value=0)
        last_code = (
            model.objects
            .order_by("-pk")
            .values_list(spec.field, flat=True)
            .first()
        )
        number = next_number(spec, counter_value=counter.value, last_code=last_code)
        counter.value = number
        counter.save(update_fields=["value"])

    code = spec.format(number)
    logger.debug("Allocated %s identifier %s", spec.name, code)
    return code


def allocate_case_id() -> str:
    return allocate(CASE_SEQUENCE)


def allocate_report_id() -> str:
    return allocate(REPORT_SEQUENCE)
