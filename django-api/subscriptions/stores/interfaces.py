"""Store interfaces (repository pattern).

Stores must be swappable and accept domain models.
"""

from abc import ABC, abstractmethod

from subscriptions.domain import Student


class StudentRepository(ABC):
    """Interface for student and subscription persistence."""

    @abstractmethod
    def document_exists(self, document: str) -> bool:
        """Check if a student with this document number is registered."""
        ...

    @abstractmethod
    def email_exists(self, email: str) -> bool:
        """Check if a student with this e-mail address is registered."""
        ...

    @abstractmethod
    def create_subscription(self, student: Student) -> None:
        """Store the student with its subscriptions and their payments.

        Raises:
            PersistenceError: If the store cannot be written to.
        """
        ...
