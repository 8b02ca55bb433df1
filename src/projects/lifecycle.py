"""Project lifecycle rules: urgency ranking, display labels and status gates.

Everything here is a pure function of its arguments. The current time is
always passed in so that results are reproducible.
"""
import math
import sys
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Iterable, List, Optional

from src.core.errors import BusinessRuleError


class ProjectStatus(str, Enum):
    IN_PROGRESS = "In Progress"
    DELIVERED = "Delivered"
    PAID = "Paid"


class LabelMode(str, Enum):
    EXCLUSIVE = "exclusive"        # list / dashboard: first matching rule only
    ACCUMULATING = "accumulating"  # project detail: every rule that applies


class Label(str, Enum):
    PAID = "Paid"
    PENDING_PAYMENT = "Pending payment"
    OVERDUE = "Overdue"
    IN_PROGRESS = "In Progress"
    INVOICE_SENT = "Invoice sent"
    TO_BE_DELIVERED = "To be delivered"
    MAKE_INVOICE = "Make invoice"


DAY = timedelta(days=1)

# Sentinels standing in for +inf, +inf - 1 and +inf - 2. Real day counts
# never get near them, so ordering stays total.
PAID_SCORE = sys.maxsize
DELIVERED_SCORE = PAID_SCORE - 1
NO_DEADLINE_SCORE = PAID_SCORE - 2


def as_naive_utc(value: datetime) -> datetime:
    """Normalize to the naive-UTC form used for storage and comparisons."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _is_paid(status, is_paid: bool) -> bool:
    return bool(is_paid) or status == ProjectStatus.PAID


def urgency_score(status, is_paid: bool, deadline: Optional[datetime], now: datetime) -> int:
    """Lower is more urgent. Overdue projects score negative."""
    if _is_paid(status, is_paid):
        return PAID_SCORE
    if status == ProjectStatus.DELIVERED:
        return DELIVERED_SCORE
    if deadline is None:
        return NO_DEADLINE_SCORE
    return math.ceil((as_naive_utc(deadline) - as_naive_utc(now)) / DAY)


def project_urgency(project, now: datetime) -> int:
    return urgency_score(project.status, project.is_paid, project.deadline, now)


def sort_by_urgency(projects: Iterable, now: datetime) -> list:
    # sorted() is stable: equal scores keep their incoming order
    return sorted(projects, key=lambda p: project_urgency(p, now))


def derive_labels(project, now: datetime, mode: LabelMode = LabelMode.EXCLUSIVE) -> List[str]:
    """Display labels for a project.

    EXCLUSIVE evaluates the cascade Paid, Pending payment, Overdue,
    In Progress and stops at the first hit; it returns at most one label.
    ACCUMULATING returns every non-exclusive label that applies, in a fixed
    order.
    """
    status = project.status
    paid = _is_paid(status, project.is_paid)
    invoice_sent = bool(project.invoice_sent)
    today = as_naive_utc(now).date()
    due = as_naive_utc(project.deadline).date() if project.deadline is not None else None

    if mode == LabelMode.EXCLUSIVE:
        if paid:
            return [Label.PAID.value]
        if invoice_sent and status == ProjectStatus.DELIVERED:
            return [Label.PENDING_PAYMENT.value]
        if due is not None and due < today and status == ProjectStatus.IN_PROGRESS:
            return [Label.OVERDUE.value]
        if status == ProjectStatus.IN_PROGRESS:
            return [Label.IN_PROGRESS.value]
        return []

    delivered = status == ProjectStatus.DELIVERED
    labels: List[str] = []
    if invoice_sent:
        labels.append(Label.INVOICE_SENT.value)
    if paid:
        labels.append(Label.PAID.value)
    if due is not None and due < today and not delivered and not paid:
        labels.append(Label.OVERDUE.value)
    if due is not None and due == today and not delivered and not paid:
        labels.append(Label.TO_BE_DELIVERED.value)
    if status == ProjectStatus.IN_PROGRESS and not paid and (due is None or due > today):
        labels.append(Label.IN_PROGRESS.value)
    if delivered and not invoice_sent and not paid:
        labels.append(Label.MAKE_INVOICE.value)
    return labels


def check_invoice_gate(status, invoice_sent: bool, message: str = "Invalid project data") -> None:
    """Reject the one forbidden combination: In Progress with invoice sent."""
    if status == ProjectStatus.IN_PROGRESS and invoice_sent:
        raise BusinessRuleError(
            message,
            "invoiceSent",
            "Cannot mark invoice as sent for projects that are in progress",
        )


def check_invoice_generation(project) -> None:
    """Invoices are only issued for delivered, not yet invoiced, unpaid work."""
    if _is_paid(project.status, project.is_paid):
        raise BusinessRuleError(
            "Cannot create invoice", "isPaid", "Cannot create invoice for projects that are already paid"
        )
    if project.status != ProjectStatus.DELIVERED:
        raise BusinessRuleError(
            "Cannot create invoice", "status", "Cannot create invoice for projects that are still in progress"
        )
    if project.invoice_sent:
        raise BusinessRuleError(
            "Cannot create invoice", "invoiceSent", "An invoice has already been sent for this project"
        )
