"""Outbound notices sent to students."""

import logging
import smtplib
from abc import ABC, abstractmethod
from email.utils import formataddr

from django.conf import settings
from django.core.mail import send_mail

from subscriptions.domain.errors import NoticeDeliveryError

logger = logging.getLogger(__name__)


class NoticeService(ABC):
    """Interface for delivering a message to a person."""

    @abstractmethod
    def send(
        self, recipient_name: str, recipient_address: str, subject: str, body: str
    ) -> None:
        """Deliver a notice.

        Raises:
            NoticeDeliveryError: If the notice cannot be delivered.
        """
        ...


class DjangoMailNoticeService(NoticeService):
    """Sends notices as e-mail through Django's configured mail backend."""

    def __init__(self, from_email: str | None = None) -> None:
        self._from_email = from_email or settings.DEFAULT_FROM_EMAIL

    def send(
        self, recipient_name: str, recipient_address: str, subject: str, body: str
    ) -> None:
        recipient = formataddr((recipient_name, recipient_address))
        try:
            send_mail(subject, body, self._from_email, [recipient], fail_silently=False)
        except (smtplib.SMTPException, OSError) as exc:
            logger.warning("Mail delivery to %s failed: %s", recipient_address, exc)
            raise NoticeDeliveryError() from exc
