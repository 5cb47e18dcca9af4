"""Serializers for transforming API requests into subscription commands.

Serializers only parse types. Missing or blank values are passed through
so that the command reports them together with every other problem.
"""

from rest_framework import serializers

from subscriptions.domain import (
    CreateBoletoSubscriptionCommand,
    CreateCreditCardSubscriptionCommand,
    CreatePayPalSubscriptionCommand,
    DocumentType,
    SubscriptionCommand,
)


def _text(**kwargs) -> serializers.CharField:
    return serializers.CharField(required=False, allow_blank=True, default="", **kwargs)


class SubscriptionRequestSerializer(serializers.Serializer):
    """Fields shared by every subscription request."""

    command_class: type[SubscriptionCommand]

    first_name = _text()
    last_name = _text()
    document = _text()
    email = _text()

    payer = _text()
    payer_document = _text()
    payer_document_type = serializers.ChoiceField(
        choices=[t.value for t in DocumentType], required=False, default=None, allow_null=True
    )
    payer_email = _text()

    street = _text()
    number = _text()
    neighborhood = _text()
    city = _text()
    state = _text()
    country = _text()
    zip_code = _text()

    paid_date = serializers.DateTimeField(required=False, default=None, allow_null=True)
    expire_date = serializers.DateTimeField(required=False, default=None, allow_null=True)
    total = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, default=None, allow_null=True
    )
    total_paid = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, default=None, allow_null=True
    )

    def to_command(self) -> SubscriptionCommand:
        data = dict(self.validated_data)
        if data.get("payer_document_type") is not None:
            data["payer_document_type"] = DocumentType(data["payer_document_type"])
        return self.command_class(**data)


class BoletoSubscriptionSerializer(SubscriptionRequestSerializer):
    command_class = CreateBoletoSubscriptionCommand

    bar_code = _text()
    boleto_number = _text()


class PayPalSubscriptionSerializer(SubscriptionRequestSerializer):
    command_class = CreatePayPalSubscriptionCommand

    transaction_code = _text()


class CreditCardSubscriptionSerializer(SubscriptionRequestSerializer):
    command_class = CreateCreditCardSubscriptionCommand

    card_holder_name = _text()
    card_number = _text()
    last_transaction_number = _text()
