"""Domain error codes for the subscriptions module.

Validation problems are never raised; they are collected as
notifications. These errors cover collaborator failures only.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    NOTICE_DELIVERY_FAILED = "NOTICE_DELIVERY_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PersistenceError(DomainError):
    """Raised when the student store cannot be written to."""

    def __init__(self, message: str = "Subscription could not be stored") -> None:
        super().__init__(code=ErrorCode.PERSISTENCE_FAILED, message=message)


class NoticeDeliveryError(DomainError):
    """Raised when an outbound notice cannot be delivered."""

    def __init__(self, message: str = "Notice could not be delivered") -> None:
        super().__init__(code=ErrorCode.NOTICE_DELIVERY_FAILED, message=message)
