"""Threshold alerts over the current ledger state."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    ALERT_LATE_RECEIPT,
    ALERT_NEGATIVE_BALANCE,
    ALERT_OVERDUE_ACCOUNT,
    SEVERITY_HIGH,
    SEVERITY_MEDIUM,
)
from src.domain.models import CashFlowAlert, Payable, Receivable
from src.domain.policies import dedupe_by_id, visible_in_forward_view


def _format_amount(value: Decimal) -> str:
    return f"R$ {value:,.2f}"


def _payable_alerts(
    payables: Iterable[Payable],
    today: str,
) -> list[CashFlowAlert]:
    alerts: list[CashFlowAlert] = []
    for payable in dedupe_by_id(payables):
        if payable.is_settled or not visible_in_forward_view(payable):
            continue
        amount = _format_amount(payable.effective_amount)
        if payable.due_date < today:
            alerts.append(
                CashFlowAlert(
                    id=f"payable-overdue-{payable.id}",
                    type=ALERT_OVERDUE_ACCOUNT,
                    message=(
                        f"Payment OVERDUE: {payable.description} "
                        f"({amount}, due {payable.due_date})"
                    ),
                    severity=SEVERITY_HIGH,
                    date=payable.due_date,
                    related_id=payable.id,
                )
            )
        elif payable.due_date == today:
            alerts.append(
                CashFlowAlert(
                    id=f"payable-due-today-{payable.id}",
                    type=ALERT_OVERDUE_ACCOUNT,
                    message=f"Pay TODAY: {payable.description} ({amount})",
                    severity=SEVERITY_MEDIUM,
                    date=payable.due_date,
                    related_id=payable.id,
                )
            )
    return alerts


def _receivable_alerts(
    receivables: Iterable[Receivable],
    today: str,
) -> list[CashFlowAlert]:
    alerts: list[CashFlowAlert] = []
    for receivable in dedupe_by_id(receivables):
        if receivable.is_settled or not visible_in_forward_view(receivable):
            continue
        amount = _format_amount(receivable.effective_amount)
        if receivable.due_date < today:
            alerts.append(
                CashFlowAlert(
                    id=f"receivable-late-{receivable.id}",
                    type=ALERT_LATE_RECEIPT,
                    message=(
                        f"Receipt LATE: {receivable.description} "
                        f"({amount}, due {receivable.due_date})"
                    ),
                    severity=SEVERITY_HIGH,
                    date=receivable.due_date,
                    related_id=receivable.id,
                )
            )
        elif receivable.due_date == today:
            alerts.append(
                CashFlowAlert(
                    id=f"receivable-due-today-{receivable.id}",
                    type=ALERT_LATE_RECEIPT,
                    message=(
                        f"Receive TODAY: {receivable.description} ({amount})"
                    ),
                    severity=SEVERITY_MEDIUM,
                    date=receivable.due_date,
                    related_id=receivable.id,
                )
            )
    return alerts


def generate_alerts(
    *,
    current_balance: Decimal,
    payables: Iterable[Payable],
    receivables: Iterable[Receivable],
    today: str,
) -> list[CashFlowAlert]:
    """Enumerate every alert raised by the current ledger state.

    Rules are independent: a negative balance, each overdue or due-today
    payable, and each late or due-today receivable yield one alert each.

    Args:
        current_balance: Running balance at the end of today.
        payables: Payables to scan; inactive and paid ones are ignored.
        receivables: Receivables to scan; inactive and received ones are
            ignored.
        today: Today's ISO date.

    Returns:
        list[CashFlowAlert]: Balance alert first, then payables, then
        receivables.
    """
    alerts: list[CashFlowAlert] = []
    if current_balance < 0:
        alerts.append(
            CashFlowAlert(
                id="negative-balance",
                type=ALERT_NEGATIVE_BALANCE,
                message=f"Negative balance: {_format_amount(current_balance)}",
                severity=SEVERITY_HIGH,
                date=today,
            )
        )
    alerts.extend(_payable_alerts(payables, today))
    alerts.extend(_receivable_alerts(receivables, today))
    return alerts


__all__ = ["generate_alerts"]
