"""Record visibility rules shared by the ledger computations.

Deactivated payables and receivables never show up in forward-looking
views (alerts, projections, upcoming lists). Settled history keeps them
unless the caller asks history to honor the active flag too.
"""

from collections.abc import Iterable
from typing import TypeVar


RecordT = TypeVar("RecordT")


def visible_in_forward_view(record) -> bool:
    """Return True when an open record belongs in forward-looking views."""
    return bool(getattr(record, "active", True))


def visible_in_history(record, honor_active: bool = False) -> bool:
    """Return True when a record belongs in historical aggregation.

    Args:
        record: Payable, receivable or any record with an ``active`` flag.
        honor_active: Whether deactivated records are dropped from history.
    """
    if not honor_active:
        return True
    return bool(getattr(record, "active", True))


def filter_by_company(
    records: Iterable[RecordT],
    company_id: str | None,
) -> list[RecordT]:
    """Keep records belonging to the company, or all when no filter."""
    if company_id is None:
        return list(records)
    return [
        record
        for record in records
        if getattr(record, "company_id", None) == company_id
    ]


def dedupe_by_id(records: Iterable[RecordT]) -> list[RecordT]:
    """Drop repeated records sharing an id, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[RecordT] = []
    for record in records:
        record_id = getattr(record, "id")
        if record_id in seen:
            continue
        seen.add(record_id)
        unique.append(record)
    return unique


__all__ = [
    "visible_in_forward_view",
    "visible_in_history",
    "filter_by_company",
    "dedupe_by_id",
]
