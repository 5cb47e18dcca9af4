"""Subscription service - all business logic lives here.

Services:
- Depend only on interfaces (stores, notice services)
- Collect every validation failure before deciding
- Persist all or nothing
- Return command results; collaborator failures surface as domain errors
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.conf import settings
from django.utils import timezone

from subscriptions.domain import (
    Address,
    CommandResult,
    Document,
    DocumentType,
    Email,
    Name,
    Notifications,
    Payment,
    Student,
    Subscription,
    SubscriptionCommand,
)
from subscriptions.domain import rules
from subscriptions.domain.errors import NoticeDeliveryError
from subscriptions.domain.models import add_months
from subscriptions.services.notices import DjangoMailNoticeService, NoticeService
from subscriptions.stores.django_store import DjangoStudentRepository
from subscriptions.stores.interfaces import StudentRepository

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Assinatura realizada com sucesso"
FAILURE_MESSAGE = "Não foi possível realizar sua assinatura"
DOCUMENT_IN_USE = "Este CPF já está em uso"
EMAIL_IN_USE = "Este E-mail já está em uso"

DEFAULT_WELCOME_SUBJECT = "Bem-vindo!"
DEFAULT_WELCOME_BODY = "Sua assinatura foi criada"


class SubscriptionHandler:
    """Creates a student subscription from any subscription command.

    Field-level failures from the last ``handle`` call are available on
    ``notifications``.
    """

    def __init__(
        self,
        repository: StudentRepository,
        notices: NoticeService,
        *,
        welcome_subject: str = DEFAULT_WELCOME_SUBJECT,
        welcome_body: str = DEFAULT_WELCOME_BODY,
        duration_months: int = 1,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._repository = repository
        self._notices = notices
        self._welcome_subject = welcome_subject
        self._welcome_body = welcome_body
        self._duration_months = duration_months
        self._clock = clock
        self.notifications = Notifications()

    @property
    def is_valid(self) -> bool:
        return self.notifications.is_valid

    def handle(self, command: SubscriptionCommand) -> CommandResult:
        """Validate, build and store a subscription.

        Raises:
            PersistenceError: If the repository cannot store the student.
        """
        self.notifications = Notifications()

        command.validate()
        if command.is_invalid:
            self.notifications.add_all(command)
            return self._reject(command)

        if self._repository.document_exists(rules.normalize_document(command.document)):
            self.notifications.add("Document", DOCUMENT_IN_USE)
        if self._repository.email_exists(command.email):
            self.notifications.add("Email", EMAIL_IN_USE)

        name = Name(command.first_name, command.last_name)
        document = Document(command.document, DocumentType.CPF)
        email = Email(command.email)
        payer_document = Document(command.payer_document, command.payer_document_type)
        payer_email = Email(command.payer_email)
        address = Address(
            street=command.street,
            number=command.number,
            neighborhood=command.neighborhood,
            city=command.city,
            state=command.state,
            country=command.country,
            zip_code=command.zip_code,
        )

        now = self._clock()
        student = Student(name, document, email)
        subscription = Subscription(
            expires_at=add_months(now, self._duration_months), created_at=now
        )
        payment = Payment(
            paid_date=command.paid_date,
            expire_date=command.expire_date,
            total=command.total,
            total_paid=command.total_paid,
            payer=command.payer,
            document=payer_document,
            address=address,
            email=payer_email,
            method=command.payment_method(),
        )

        subscription.add_payment(payment)
        student.add_subscription(subscription)

        # payer document, payer email and address are merged directly, so only
        # the payment's own rules are taken from it
        self.notifications.add_all(
            name,
            document,
            email,
            payer_document,
            payer_email,
            address,
            student,
            subscription,
            payment.own_notifications,
        )

        if self.notifications.is_invalid:
            return self._reject(command)

        self._repository.create_subscription(student)
        logger.info(
            "Created %s subscription %s for student %s",
            payment.kind.value,
            payment.number,
            document.number,
        )

        try:
            self._notices.send(
                name.full_name,
                email.address,
                self._welcome_subject,
                self._welcome_body,
            )
        except NoticeDeliveryError:
            logger.exception("Welcome notice for %s was not delivered", email.address)

        return CommandResult(True, SUCCESS_MESSAGE)

    def _reject(self, command: SubscriptionCommand) -> CommandResult:
        logger.info(
            "Rejected %s with %d notification(s): %s",
            type(command).__name__,
            len(self.notifications),
            ", ".join(self.notifications.keys()),
        )
        return CommandResult(False, FAILURE_MESSAGE)


def build_subscription_handler() -> SubscriptionHandler:
    """Handler wired to the Django store and mail backend, configured from settings."""
    options = getattr(settings, "SUBSCRIPTIONS", {})
    return SubscriptionHandler(
        DjangoStudentRepository(),
        DjangoMailNoticeService(),
        welcome_subject=options.get("WELCOME_SUBJECT", DEFAULT_WELCOME_SUBJECT),
        welcome_body=options.get("WELCOME_BODY", DEFAULT_WELCOME_BODY),
        duration_months=options.get("DURATION_MONTHS", 1),
    )
