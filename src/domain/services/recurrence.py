"""Recurrence expansion for recurring payables."""

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, timedelta
from logging import Logger
from uuid import uuid4

from src.domain.constants import (
    MAX_RECURRENCE_INSTANCES,
    PAYABLE_PENDING,
    RECURRENCE_MONTHLY,
    RECURRENCE_NONE,
    RECURRENCE_WEEKLY,
    RECURRENCE_YEARLY,
)
from src.domain.models import Payable
from src.utils.date_utils import add_months, parse_iso_date


@dataclass(frozen=True)
class RecurrenceExpansion:
    """Instances generated from a recurring payable.

    Attributes:
        group_id: Recurrence group shared by the origin and its instances.
        instances: New payables to persist, in due date order.
        expanded_through: Latest due date covered after this expansion.
    """

    group_id: str
    instances: list[Payable]
    expanded_through: str | None


def advance(origin: date, recurrence: str, steps: int) -> date:
    """Return the due date ``steps`` periods after the origin.

    Month and year steps are taken from the origin so that a day clamped
    in a short month does not drift for later instances.
    """
    if recurrence == RECURRENCE_WEEKLY:
        return origin + timedelta(days=7 * steps)
    if recurrence == RECURRENCE_MONTHLY:
        return add_months(origin, steps)
    if recurrence == RECURRENCE_YEARLY:
        return add_months(origin, 12 * steps)
    raise ValueError(f"Unsupported recurrence: {recurrence}")


def expand_payable_recurrence(
    payable: Payable,
    *,
    logger: Logger,
    max_instances: int = MAX_RECURRENCE_INSTANCES,
    id_factory: Callable[[], str] | None = None,
) -> RecurrenceExpansion:
    """Generate the future instances of a recurring payable.

    Instances copy the origin but are pending, non-recurring and due one
    period after the previous one. Generation stops once the next due date
    passes ``recurrence_end`` (the end date itself is included) or after
    ``max_instances``. Due dates on or before the origin's
    ``recurrence_expanded_through`` watermark are skipped, so expanding
    the same origin twice yields nothing new.

    Args:
        payable: Origin payable carrying the recurrence rule.
        logger: Logger used for skipped expansions.
        max_instances: Hard cap on generated instances.
        id_factory: Optional callable returning new payable ids.

    Returns:
        RecurrenceExpansion: Generated instances and the new watermark.
    """
    group_id = payable.recurrence_group_id or payable.id
    watermark = payable.recurrence_expanded_through
    empty = RecurrenceExpansion(
        group_id=group_id,
        instances=[],
        expanded_through=watermark,
    )
    recurrence = (payable.recurrence or RECURRENCE_NONE).strip().lower()
    recurrence_end = (payable.recurrence_end or "").strip()
    if recurrence == RECURRENCE_NONE or not recurrence_end:
        return empty
    if recurrence not in (
        RECURRENCE_WEEKLY,
        RECURRENCE_MONTHLY,
        RECURRENCE_YEARLY,
    ):
        logger.warning(
            f"Unknown recurrence '{payable.recurrence}' on payable "
            f"{payable.id}; skipping expansion"
        )
        return empty

    try:
        origin = parse_iso_date(payable.due_date)
        end = parse_iso_date(recurrence_end)
    except (AttributeError, ValueError) as exc:
        logger.warning(
            f"Skipping recurrence for payable {payable.id}: "
            f"invalid date ({exc})"
        )
        return empty

    new_id = id_factory or (lambda: str(uuid4()))
    instances: list[Payable] = []
    generated = 0
    step = 1
    while generated < max_instances:
        due = advance(origin, recurrence, step)
        if due > end:
            break
        step += 1
        generated += 1
        due_iso = due.isoformat()
        if watermark and due_iso <= watermark:
            continue
        instances.append(
            replace(
                payable,
                id=new_id(),
                due_date=due_iso,
                status=PAYABLE_PENDING,
                payment_date=None,
                recurrence=RECURRENCE_NONE,
                recurrence_end=None,
                recurrence_group_id=group_id,
                recurrence_expanded_through=None,
            )
        )

    capped = (
        generated >= max_instances
        and advance(origin, recurrence, step) <= end
    )
    if capped:
        logger.warning(
            f"Recurrence for payable {payable.id} hit the cap of "
            f"{max_instances} instances"
        )
    expanded_through = watermark
    if instances:
        expanded_through = instances[-1].due_date
    return RecurrenceExpansion(
        group_id=group_id,
        instances=instances,
        expanded_through=expanded_through,
    )


__all__ = ["RecurrenceExpansion", "advance", "expand_payable_recurrence"]
