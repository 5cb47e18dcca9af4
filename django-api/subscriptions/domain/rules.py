"""Stateless validation rules.

Each function inspects a value and reports; none of them record
anything. Domain objects combine them through ``Notifications.require``.
"""

import re

EMAIL_PATTERN = re.compile(r"^\w+([-+.']\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*$")

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_CNPJ_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_DOCUMENT_SEPARATORS = re.compile(r"[.\-/\s]")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def has_min_len(value: str | None, minimum: int) -> bool:
    return value is not None and len(value.strip()) >= minimum


def has_max_len(value: str | None, maximum: int) -> bool:
    return value is None or len(value.strip()) <= maximum


def is_email(value: str | None) -> bool:
    return value is not None and EMAIL_PATTERN.match(value) is not None


def is_digits(value: str | None) -> bool:
    return value is not None and value.isascii() and value.isdigit()


def normalize_document(number: str | None) -> str:
    """Strip the usual punctuation from a CPF/CNPJ number."""
    if number is None:
        return ""
    return _DOCUMENT_SEPARATORS.sub("", number)


def _mod11_digit(total: int) -> int:
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def cpf_check_digits(base: str) -> str:
    """Compute the two check digits for the first nine CPF digits."""
    digits = [int(c) for c in base]
    first = sum(d * w for d, w in zip(digits, range(10, 1, -1))) * 10 % 11 % 10
    digits.append(first)
    second = sum(d * w for d, w in zip(digits, range(11, 1, -1))) * 10 % 11 % 10
    return f"{first}{second}"


def cnpj_check_digits(base: str) -> str:
    """Compute the two check digits for the first twelve CNPJ digits."""
    digits = [int(c) for c in base]
    first = _mod11_digit(sum(d * w for d, w in zip(digits, _CNPJ_WEIGHTS)))
    digits.append(first)
    second = _mod11_digit(sum(d * w for d, w in zip(digits, (6, *_CNPJ_WEIGHTS))))
    return f"{first}{second}"


def cpf_problems(number: str) -> list[str]:
    """Return the reasons ``number`` is not a valid CPF (empty when valid)."""
    if not is_digits(number) or len(number) != CPF_LENGTH:
        return ["CPF deve conter 11 dígitos"]
    if len(set(number)) == 1:
        return ["CPF inválido"]
    if cpf_check_digits(number[:9]) != number[9:]:
        return ["Dígito verificador do CPF inválido"]
    return []


def cnpj_problems(number: str) -> list[str]:
    """Return the reasons ``number`` is not a valid CNPJ (empty when valid)."""
    if not is_digits(number) or len(number) != CNPJ_LENGTH:
        return ["CNPJ deve conter 14 dígitos"]
    if len(set(number)) == 1:
        return ["CNPJ inválido"]
    if cnpj_check_digits(number[:12]) != number[12:]:
        return ["Dígito verificador do CNPJ inválido"]
    return []
