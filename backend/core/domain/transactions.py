"""
core.domain.transactions — Row-locking helpers.

Wraps ``select_for_update`` into reusable patterns so that every
read-modify-write in a service layer takes the row lock the same way.

Usage::

    from django.db import transaction
    from core.domain.transactions import lock_or_create

    with transaction.atomic():
        counter = lock_or_create(SequenceCounter, "case", value=0)
        counter.value += 1
        counter.save(update_fields=["value"])
"""

from __future__ import annotations

from typing import Any, TypeVar

from django.db import models, transaction

M = TypeVar("M", bound=models.Model)


def lock_or_create(model_class: type[M], pk: Any, **defaults: Any) -> M:
    """
    Lock the row with primary key ``pk``, inserting it with ``defaults``
    first if it does not exist yet.

    Must be called inside an ``atomic()`` block; a concurrent first
    insert is resolved by ``get_or_create`` re-reading the winner's row.
    """
    if not transaction.get_connection().in_atomic_block:
        raise RuntimeError("lock_or_create() must run inside transaction.atomic().")
    instance, _ = (
        model_class.objects
        .select_for_update()
        .get_or_create(pk=pk, defaults=defaults)
    )
    return instance
