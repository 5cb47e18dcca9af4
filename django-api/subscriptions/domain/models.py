"""Domain entities for the subscription aggregate.

A Student owns its subscriptions and a Subscription owns its payments.
Both are plain objects; Django ORM models live in subscriptions/models.py.
"""

import calendar
from dataclasses import dataclass, field
from datetime import datetime

from subscriptions.domain.notifications import Notifications
from subscriptions.domain.payments import Payment
from subscriptions.domain.value_objects import Document, Email, Name


def add_months(moment: datetime, months: int) -> datetime:
    """Shift ``moment`` by whole months, clamping to the last day of the month."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _now_like(moment: datetime) -> datetime:
    return datetime.now(moment.tzinfo)


@dataclass
class Subscription:
    """A period of access paid for by one or more payments."""

    expires_at: datetime
    created_at: datetime | None = None
    payments: list[Payment] = field(default_factory=list)
    notifications: Notifications = field(
        default_factory=Notifications, init=False, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if self.created_at is None:
            self.created_at = _now_like(self.expires_at)
        self.notifications.require(
            self.expires_at > self.created_at,
            "Subscription.ExpiresAt",
            "A data de expiração deve ser posterior à data de criação",
        )

    @property
    def active(self) -> bool:
        return self.expires_at > _now_like(self.expires_at)

    def add_payment(self, payment: Payment) -> None:
        self.payments.append(payment)


@dataclass
class Student:
    """The subscriber. Subscriptions can only be attached through add_subscription."""

    name: Name
    document: Document
    email: Email
    subscriptions: list[Subscription] = field(default_factory=list)
    notifications: Notifications = field(
        default_factory=Notifications, init=False, compare=False, repr=False
    )

    def add_subscription(self, subscription: Subscription) -> None:
        """Attach ``subscription`` unless it breaks a student rule.

        A rejected subscription is not attached; the reason is recorded on
        the student.
        """
        has_active = any(existing.active for existing in self.subscriptions)
        check = self.notifications.require
        check(
            not has_active,
            "Student.Subscriptions",
            "Você já tem uma assinatura ativa",
        )
        check(
            bool(subscription.payments),
            "Student.Subscription.Payments",
            "Esta assinatura não possui pagamentos",
        )
        if not has_active and subscription.payments:
            self.subscriptions.append(subscription)

    @property
    def active_subscription(self) -> Subscription | None:
        return next((s for s in self.subscriptions if s.active), None)
