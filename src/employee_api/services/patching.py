"""
employee_api.services.patching

Shallow, field-by-field merge of partial updates onto persisted records.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def merge_fields(record: Any, changes: Mapping[str, Any], *, fields: Iterable[str]) -> list[str]:
    """
    Copy each allowed field present in `changes` onto `record`.

    Fields absent from `changes` are left untouched, and keys outside `fields`
    are ignored. Returns the names of the fields that were applied.
    """
    applied: list[str] = []
    for name in fields:
        if name in changes:
            setattr(record, name, changes[name])
            applied.append(name)
    return applied
