from subscriptions.domain.commands import (
    CommandResult,
    CreateBoletoSubscriptionCommand,
    CreateCreditCardSubscriptionCommand,
    CreatePayPalSubscriptionCommand,
    SubscriptionCommand,
)
from subscriptions.domain.models import Student, Subscription
from subscriptions.domain.notifications import Notifiable, Notification, Notifications
from subscriptions.domain.payments import (
    BoletoMethod,
    CreditCardMethod,
    Payment,
    PaymentKind,
    PaymentMethod,
    PayPalMethod,
)
from subscriptions.domain.value_objects import Address, Document, DocumentType, Email, Name

__all__ = [
    "Notification",
    "Notifications",
    "Notifiable",
    "Name",
    "Document",
    "DocumentType",
    "Email",
    "Address",
    "Payment",
    "PaymentKind",
    "PaymentMethod",
    "BoletoMethod",
    "PayPalMethod",
    "CreditCardMethod",
    "Student",
    "Subscription",
    "SubscriptionCommand",
    "CreateBoletoSubscriptionCommand",
    "CreatePayPalSubscriptionCommand",
    "CreateCreditCardSubscriptionCommand",
    "CommandResult",
]
