"""Commands: typed input for creating a subscription, and their results.

A command holds raw fields only. ``validate()`` checks that everything
needed to build the domain objects is present and structurally sound;
it does not repeat the domain rules (checksums, e-mail shape, ...).
Notification keys match the keys used by the domain object each field
feeds, so a caller sees the same key whichever layer rejected it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from subscriptions.domain import rules
from subscriptions.domain.notifications import Notifications
from subscriptions.domain.payments import (
    BoletoMethod,
    CreditCardMethod,
    PaymentMethod,
    PayPalMethod,
)
from subscriptions.domain.value_objects import DocumentType


def _is_aware(moment: datetime) -> bool:
    return moment.tzinfo is not None and moment.utcoffset() is not None


@dataclass(frozen=True)
class CommandResult:
    """Outcome returned to the caller of a handler."""

    success: bool
    message: str


@dataclass(kw_only=True)
class SubscriptionCommand(ABC):
    """Fields shared by every subscription command."""

    first_name: str = ""
    last_name: str = ""
    document: str = ""
    email: str = ""

    payer: str = ""
    payer_document: str = ""
    payer_document_type: DocumentType | None = None
    payer_email: str = ""

    street: str = ""
    number: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    zip_code: str = ""

    paid_date: datetime | None = None
    expire_date: datetime | None = None
    total: Decimal | None = None
    total_paid: Decimal | None = None

    notifications: Notifications = field(
        default_factory=Notifications, init=False, compare=False, repr=False
    )

    def validate(self) -> None:
        """Re-run every check, replacing earlier results."""
        self.notifications.clear()
        self._validate_shared()
        self._validate_method()

    @property
    def is_valid(self) -> bool:
        return self.notifications.is_valid

    @property
    def is_invalid(self) -> bool:
        return self.notifications.is_invalid

    @abstractmethod
    def payment_method(self) -> PaymentMethod:
        """Payment details this command builds its payment from."""
        ...

    def _require_text(self, value: str, key: str, message: str) -> None:
        self.notifications.require(not rules.is_blank(value), key, message)

    def _validate_shared(self) -> None:
        text = self._require_text
        text(self.first_name, "Name.FirstName", "Nome é obrigatório")
        text(self.last_name, "Name.LastName", "Sobrenome é obrigatório")
        text(self.document, "Document.Number", "Documento é obrigatório")
        text(self.email, "Email.Address", "E-mail é obrigatório")

        text(self.payer, "Payment.Payer", "O pagador é obrigatório")
        text(self.payer_document, "Payment.PayerDocument", "Documento do pagador é obrigatório")
        self.notifications.require(
            isinstance(self.payer_document_type, DocumentType),
            "Payment.PayerDocumentType",
            "Tipo de documento do pagador inválido",
        )
        text(self.payer_email, "Payment.PayerEmail", "E-mail do pagador é obrigatório")

        text(self.street, "Address.Street", "A rua é obrigatória")
        text(self.number, "Address.Number", "O número é obrigatório")
        text(self.neighborhood, "Address.Neighborhood", "O bairro é obrigatório")
        text(self.city, "Address.City", "A cidade é obrigatória")
        text(self.state, "Address.State", "O estado é obrigatório")
        text(self.country, "Address.Country", "O país é obrigatório")
        text(self.zip_code, "Address.ZipCode", "O CEP é obrigatório")

        check = self.notifications.require
        check(self.paid_date is not None, "Payment.PaidDate", "A data de pagamento é obrigatória")
        check(
            self.expire_date is not None,
            "Payment.ExpireDate",
            "A data de expiração é obrigatória",
        )
        if self.paid_date is not None and self.expire_date is not None:
            same_kind = _is_aware(self.paid_date) == _is_aware(self.expire_date)
            check(
                same_kind,
                "Payment.ExpireDate",
                "As datas de pagamento e expiração devem usar o mesmo fuso horário",
            )
            if same_kind:
                check(
                    self.expire_date > self.paid_date,
                    "Payment.ExpireDate",
                    "A data de expiração deve ser posterior à data de pagamento",
                )
        check(
            self.total is not None and self.total > 0,
            "Payment.Total",
            "O total não pode ser zero",
        )
        check(self.total_paid is not None, "Payment.TotalPaid", "O valor pago é obrigatório")

    @abstractmethod
    def _validate_method(self) -> None:
        """Check the fields required by this payment method."""
        ...


@dataclass(kw_only=True)
class CreateBoletoSubscriptionCommand(SubscriptionCommand):
    bar_code: str = ""
    boleto_number: str = ""

    def _validate_method(self) -> None:
        self._require_text(self.bar_code, "Payment.BarCode", "O código de barras é obrigatório")
        self._require_text(
            self.boleto_number, "Payment.BoletoNumber", "O número do boleto é obrigatório"
        )

    def payment_method(self) -> BoletoMethod:
        return BoletoMethod(bar_code=self.bar_code, boleto_number=self.boleto_number)


@dataclass(kw_only=True)
class CreatePayPalSubscriptionCommand(SubscriptionCommand):
    transaction_code: str = ""

    def _validate_method(self) -> None:
        self._require_text(
            self.transaction_code,
            "Payment.TransactionCode",
            "O código da transação é obrigatório",
        )

    def payment_method(self) -> PayPalMethod:
        return PayPalMethod(transaction_code=self.transaction_code)


@dataclass(kw_only=True)
class CreateCreditCardSubscriptionCommand(SubscriptionCommand):
    card_holder_name: str = ""
    card_number: str = ""
    last_transaction_number: str = ""

    def _validate_method(self) -> None:
        self._require_text(
            self.card_holder_name,
            "Payment.CardHolderName",
            "O nome do titular do cartão é obrigatório",
        )
        self._require_text(
            self.card_number, "Payment.CardNumber", "O número do cartão é obrigatório"
        )

    def payment_method(self) -> CreditCardMethod:
        return CreditCardMethod(
            card_holder_name=self.card_holder_name,
            card_number=self.card_number,
            last_transaction_number=self.last_transaction_number,
        )
