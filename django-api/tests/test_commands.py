"""Unit tests for subscription commands.

Run with: pytest tests/test_commands.py -v
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from subscriptions.domain import (
    BoletoMethod,
    CommandResult,
    CreateBoletoSubscriptionCommand,
    CreditCardMethod,
    PayPalMethod,
    SubscriptionCommand,
)
from tests.factories import NOW, boleto_command, credit_card_command, paypal_command


class TestSharedValidation:
    """Checks every command variant shares."""

    @pytest.mark.parametrize("build", [boleto_command, paypal_command, credit_card_command])
    def test_complete_command_is_valid(self, build):
        command = build()
        command.validate()
        assert command.is_valid
        assert not command.is_invalid

    def test_empty_command_reports_every_missing_field(self):
        """Validation does not stop at the first failure."""
        command = CreateBoletoSubscriptionCommand()
        command.validate()
        assert command.notifications.keys() == [
            "Name.FirstName",
            "Name.LastName",
            "Document.Number",
            "Email.Address",
            "Payment.Payer",
            "Payment.PayerDocument",
            "Payment.PayerDocumentType",
            "Payment.PayerEmail",
            "Address.Street",
            "Address.Number",
            "Address.Neighborhood",
            "Address.City",
            "Address.State",
            "Address.Country",
            "Address.ZipCode",
            "Payment.PaidDate",
            "Payment.ExpireDate",
            "Payment.Total",
            "Payment.TotalPaid",
            "Payment.BarCode",
            "Payment.BoletoNumber",
        ]

    def test_whitespace_only_is_missing(self):
        command = boleto_command(first_name="   ")
        command.validate()
        assert command.notifications.keys() == ["Name.FirstName"]

    @pytest.mark.parametrize("total", [Decimal("0"), Decimal("-1"), None])
    def test_total_must_be_positive(self, total):
        command = boleto_command(total=total)
        command.validate()
        assert command.notifications.keys() == ["Payment.Total"]

    def test_expire_date_must_follow_paid_date(self):
        command = boleto_command(expire_date=NOW - timedelta(days=1))
        command.validate()
        assert command.notifications.keys() == ["Payment.ExpireDate"]

    def test_mixed_naive_and_aware_dates(self):
        """Dates that cannot be compared are reported instead of raising."""
        command = boleto_command(expire_date=datetime(2026, 2, 15, 12, 0))
        command.validate()
        assert command.notifications.keys() == ["Payment.ExpireDate"]

    def test_naive_dates_are_compared(self):
        command = boleto_command(
            paid_date=datetime(2026, 1, 15), expire_date=datetime(2026, 1, 14)
        )
        command.validate()
        assert command.notifications.keys() == ["Payment.ExpireDate"]

    def test_base_command_cannot_be_built(self):
        """Only commands with a payment method can be created."""
        with pytest.raises(TypeError):
            SubscriptionCommand()

    def test_revalidation_does_not_duplicate(self):
        """validate() replaces earlier results instead of appending to them."""
        command = boleto_command(last_name="")
        command.validate()
        command.validate()
        assert command.notifications.keys() == ["Name.LastName"]

    def test_revalidation_reflects_fixes(self):
        command = boleto_command(last_name="")
        command.validate()
        command.last_name = "Wayne"
        command.validate()
        assert command.is_valid


class TestVariantValidation:
    """Payment-method specific required fields."""

    def test_boleto_requires_bar_code_and_number(self):
        command = boleto_command(bar_code="", boleto_number="")
        command.validate()
        assert command.notifications.keys() == ["Payment.BarCode", "Payment.BoletoNumber"]

    def test_paypal_requires_transaction_code(self):
        command = paypal_command(transaction_code="")
        command.validate()
        assert command.notifications.keys() == ["Payment.TransactionCode"]

    def test_credit_card_requires_holder_and_number(self):
        command = credit_card_command(card_holder_name="", card_number="")
        command.validate()
        assert command.notifications.keys() == [
            "Payment.CardHolderName",
            "Payment.CardNumber",
        ]

    def test_credit_card_last_transaction_is_optional(self):
        command = credit_card_command(last_transaction_number="")
        command.validate()
        assert command.is_valid


class TestPaymentMethod:
    """Each command selects its own payment method."""

    def test_boleto(self):
        method = boleto_command().payment_method()
        assert isinstance(method, BoletoMethod)
        assert method.boleto_number == "1234567890"

    def test_paypal(self):
        method = paypal_command().payment_method()
        assert isinstance(method, PayPalMethod)
        assert method.transaction_code == "PAYID-ABC123"

    def test_credit_card(self):
        method = credit_card_command().payment_method()
        assert isinstance(method, CreditCardMethod)
        assert method.last_transaction_number == "TX-0001"


class TestCommandResult:
    def test_result_is_immutable(self):
        result = CommandResult(True, "ok")
        with pytest.raises(AttributeError):
            result.success = False
