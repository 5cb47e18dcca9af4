"""Payment and the payment-method details it can carry.

There is a single ``Payment`` shape. What differs between boleto, PayPal
and credit card is held in ``Payment.method``, a tagged value whose
``kind`` names the variant and whose ``check`` adds the variant rules.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import uuid4

from subscriptions.domain import rules
from subscriptions.domain.notifications import Notifications
from subscriptions.domain.value_objects import Address, Document, Email


class PaymentKind(Enum):
    BOLETO = "boleto"
    PAYPAL = "paypal"
    CREDIT_CARD = "credit_card"


@dataclass(frozen=True)
class BoletoMethod:
    bar_code: str
    boleto_number: str
    kind: PaymentKind = field(default=PaymentKind.BOLETO, init=False)

    def check(self, notifications: Notifications) -> None:
        notifications.require(
            not rules.is_blank(self.bar_code),
            "Payment.BarCode",
            "O código de barras é obrigatório",
        )
        notifications.require(
            not rules.is_blank(self.boleto_number),
            "Payment.BoletoNumber",
            "O número do boleto é obrigatório",
        )


@dataclass(frozen=True)
class PayPalMethod:
    transaction_code: str
    kind: PaymentKind = field(default=PaymentKind.PAYPAL, init=False)

    def check(self, notifications: Notifications) -> None:
        notifications.require(
            not rules.is_blank(self.transaction_code),
            "Payment.TransactionCode",
            "O código da transação é obrigatório",
        )


@dataclass(frozen=True)
class CreditCardMethod:
    card_holder_name: str
    card_number: str
    last_transaction_number: str = ""
    kind: PaymentKind = field(default=PaymentKind.CREDIT_CARD, init=False)

    def check(self, notifications: Notifications) -> None:
        notifications.require(
            not rules.is_blank(self.card_holder_name),
            "Payment.CardHolderName",
            "O nome do titular do cartão é obrigatório",
        )
        notifications.require(
            rules.is_digits(self.card_number) and 12 <= len(self.card_number) <= 19,
            "Payment.CardNumber",
            "Número do cartão inválido",
        )

    @property
    def masked_card_number(self) -> str:
        return f"{'*' * max(len(self.card_number) - 4, 0)}{self.card_number[-4:]}"


PaymentMethod = BoletoMethod | PayPalMethod | CreditCardMethod


def _payment_number() -> str:
    return uuid4().hex[:10].upper()


@dataclass(frozen=True)
class Payment:
    """A payment made towards a subscription.

    Embedded document, address and email are validated on their own; their
    notifications are copied into ``notifications`` ahead of the payment's
    own rules. ``own_notifications`` holds only the latter, for callers that
    merge the embedded objects themselves.
    """

    paid_date: datetime
    expire_date: datetime
    total: Decimal
    total_paid: Decimal
    payer: str
    document: Document
    address: Address
    email: Email
    method: PaymentMethod
    number: str = field(default_factory=_payment_number)
    notifications: Notifications = field(
        default_factory=Notifications, init=False, compare=False, repr=False
    )
    own_notifications: Notifications = field(
        default_factory=Notifications, init=False, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        check = self.own_notifications.require
        check(self.total > 0, "Payment.Total", "O total não pode ser zero")
        check(
            self.total_paid >= self.total,
            "Payment.TotalPaid",
            "O valor pago é menor que o valor do pagamento",
        )
        check(not rules.is_blank(self.payer), "Payment.Payer", "O pagador é obrigatório")
        self.method.check(self.own_notifications)
        self.notifications.add_all(
            self.document, self.address, self.email, self.own_notifications
        )

    @property
    def kind(self) -> PaymentKind:
        return self.method.kind
