"""Domain primitives that validate themselves at creation time.

Construction never raises. Every rule runs and each failure is recorded
on the object's own ``notifications``.
"""

from dataclasses import dataclass, field
from enum import Enum

from subscriptions.domain import rules
from subscriptions.domain.notifications import Notifications

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 40


class DocumentType(Enum):
    """Supported identity documents."""

    CPF = "CPF"
    CNPJ = "CNPJ"


def _collector():
    return field(default_factory=Notifications, init=False, compare=False, repr=False)


@dataclass(frozen=True)
class Name:
    """A person's first and last name."""

    first_name: str
    last_name: str
    notifications: Notifications = _collector()

    def __post_init__(self) -> None:
        check = self.notifications.require
        check(
            rules.has_min_len(self.first_name, NAME_MIN_LENGTH),
            "Name.FirstName",
            f"Nome deve conter pelo menos {NAME_MIN_LENGTH} caracteres",
        )
        check(
            rules.has_max_len(self.first_name, NAME_MAX_LENGTH),
            "Name.FirstName",
            f"Nome deve conter até {NAME_MAX_LENGTH} caracteres",
        )
        check(
            rules.has_min_len(self.last_name, NAME_MIN_LENGTH),
            "Name.LastName",
            f"Sobrenome deve conter pelo menos {NAME_MIN_LENGTH} caracteres",
        )
        check(
            rules.has_max_len(self.last_name, NAME_MAX_LENGTH),
            "Name.LastName",
            f"Sobrenome deve conter até {NAME_MAX_LENGTH} caracteres",
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name.strip()} {self.last_name.strip()}"

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Document:
    """CPF or CNPJ number, stored as digits only."""

    number: str
    type: DocumentType
    notifications: Notifications = _collector()

    def __post_init__(self) -> None:
        object.__setattr__(self, "number", rules.normalize_document(self.number))
        if self.type is DocumentType.CNPJ:
            problems = rules.cnpj_problems(self.number)
        else:
            problems = rules.cpf_problems(self.number)
        for problem in problems:
            self.notifications.add("Document.Number", problem)

    def __str__(self) -> str:
        return self.number


@dataclass(frozen=True)
class Email:
    """E-mail address."""

    address: str
    notifications: Notifications = _collector()

    def __post_init__(self) -> None:
        self.notifications.require(
            rules.is_email(self.address), "Email.Address", "E-mail inválido"
        )

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class Address:
    """Postal address of the payer."""

    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    country: str
    zip_code: str
    notifications: Notifications = _collector()

    def __post_init__(self) -> None:
        check = self.notifications.require
        check(not rules.is_blank(self.street), "Address.Street", "A rua é obrigatória")
        check(not rules.is_blank(self.number), "Address.Number", "O número é obrigatório")
        check(
            not rules.is_blank(self.neighborhood),
            "Address.Neighborhood",
            "O bairro é obrigatório",
        )

    def __str__(self) -> str:
        return (
            f"{self.street}, {self.number} - {self.neighborhood}, "
            f"{self.city}/{self.state} {self.zip_code}, {self.country}"
        )
