"""Django ORM implementation of the StudentRepository."""

import logging

from django.db import DatabaseError, transaction

from subscriptions import models
from subscriptions.domain import (
    BoletoMethod,
    CreditCardMethod,
    Payment,
    PayPalMethod,
    Student,
)
from subscriptions.domain.errors import PersistenceError
from subscriptions.stores.interfaces import StudentRepository

logger = logging.getLogger(__name__)


def _method_columns(payment: Payment) -> dict[str, str]:
    method = payment.method
    if isinstance(method, BoletoMethod):
        return {"bar_code": method.bar_code, "boleto_number": method.boleto_number}
    if isinstance(method, PayPalMethod):
        return {"transaction_code": method.transaction_code}
    if isinstance(method, CreditCardMethod):
        return {
            "card_holder_name": method.card_holder_name,
            "card_number": method.masked_card_number,
            "last_transaction_number": method.last_transaction_number,
        }
    raise TypeError(f"Unsupported payment method: {method!r}")


class DjangoStudentRepository(StudentRepository):
    """Relational student store using Django ORM."""

    def document_exists(self, document: str) -> bool:
        return models.Student.objects.filter(document=document).exists()

    def email_exists(self, email: str) -> bool:
        return models.Student.objects.filter(email__iexact=email).exists()

    def create_subscription(self, student: Student) -> None:
        try:
            with transaction.atomic():
                self._save(student)
        except DatabaseError as exc:
            logger.exception("Could not store student %s", student.document.number)
            raise PersistenceError() from exc

    def _save(self, student: Student) -> None:
        row = models.Student.objects.create(
            first_name=student.name.first_name.strip(),
            last_name=student.name.last_name.strip(),
            document=student.document.number,
            email=student.email.address,
        )
        for subscription in student.subscriptions:
            subscription_row = models.Subscription.objects.create(
                student=row,
                created_at=subscription.created_at,
                expires_at=subscription.expires_at,
            )
            for payment in subscription.payments:
                models.Payment.objects.create(
                    subscription=subscription_row,
                    number=payment.number,
                    kind=payment.kind.value,
                    paid_date=payment.paid_date,
                    expire_date=payment.expire_date,
                    total=payment.total,
                    total_paid=payment.total_paid,
                    payer=payment.payer,
                    payer_document=payment.document.number,
                    payer_document_type=payment.document.type.value,
                    payer_email=payment.email.address,
                    street=payment.address.street,
                    street_number=payment.address.number,
                    neighborhood=payment.address.neighborhood,
                    city=payment.address.city,
                    state=payment.address.state,
                    country=payment.address.country,
                    zip_code=payment.address.zip_code,
                    **_method_columns(payment),
                )
