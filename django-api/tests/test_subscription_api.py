"""Integration tests for the subscription endpoints.

Run with: pytest tests/test_subscription_api.py -v
"""

import pytest
from django.core import mail
from rest_framework.test import APIClient

from subscriptions import models
from subscriptions.domain.errors import PersistenceError
from subscriptions.stores.django_store import DjangoStudentRepository
from tests.factories import VALID_CNPJ, VALID_CPF


def payload(**overrides) -> dict:
    data = {
        "first_name": "Bruce",
        "last_name": "Wayne",
        "document": VALID_CPF,
        "email": "bruce@wayne.com",
        "payer": "Wayne Enterprises",
        "payer_document": VALID_CNPJ,
        "payer_document_type": "CNPJ",
        "payer_email": "financeiro@wayne.com",
        "street": "Rua das Flores",
        "number": "100",
        "neighborhood": "Centro",
        "city": "Gotham",
        "state": "SP",
        "country": "BR",
        "zip_code": "01000-000",
        "paid_date": "2026-01-15T12:00:00Z",
        "expire_date": "2026-02-15T12:00:00Z",
        "total": "100.00",
        "total_paid": "100.00",
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestBoletoSubscription:
    """Tests for POST /api/subscriptions/boleto"""

    url = "/api/subscriptions/boleto"

    def test_creates_subscription(self, api_client: APIClient):
        """Given a valid request, stores the student and sends the welcome e-mail."""
        response = api_client.post(
            self.url,
            payload(bar_code="23790504004188103800", boleto_number="1234567890"),
            format="json",
        )

        assert response.status_code == 201
        assert response.json() == {
            "success": True,
            "message": "Assinatura realizada com sucesso",
            "notifications": [],
        }
        assert models.Student.objects.count() == 1
        assert models.Payment.objects.get().kind == "boleto"
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == ["Bruce Wayne <bruce@wayne.com>"]

    def test_missing_fields_are_listed(self, api_client: APIClient):
        """Given missing boleto fields, returns 400 with every failure."""
        response = api_client.post(self.url, payload(), format="json")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Não foi possível realizar sua assinatura"
        assert [n["key"] for n in body["notifications"]] == [
            "Payment.BarCode",
            "Payment.BoletoNumber",
        ]
        assert models.Student.objects.count() == 0
        assert mail.outbox == []

    def test_malformed_types_are_rejected(self, api_client: APIClient):
        """Given a non-numeric total, returns serializer errors."""
        response = api_client.post(
            self.url,
            payload(total="abc", bar_code="1", boleto_number="2"),
            format="json",
        )

        assert response.status_code == 400
        assert "total" in response.json()["errors"]

    def test_registered_document(self, api_client: APIClient):
        """Given a document already in use, returns 400 with a Document notification."""
        data = payload(bar_code="1", boleto_number="2")
        api_client.post(self.url, data, format="json")

        response = api_client.post(
            self.url, {**data, "email": "other@wayne.com"}, format="json"
        )

        assert response.status_code == 400
        assert [n["key"] for n in response.json()["notifications"]] == ["Document"]
        assert models.Student.objects.count() == 1

    def test_store_unavailable(self, api_client: APIClient, monkeypatch):
        """Given a persistence failure, returns 503 without internal details."""

        def broken(self, student):
            raise PersistenceError()

        monkeypatch.setattr(DjangoStudentRepository, "create_subscription", broken)

        response = api_client.post(
            self.url, payload(bar_code="1", boleto_number="2"), format="json"
        )

        assert response.status_code == 503
        assert response.json() == {
            "success": False,
            "message": "Subscription could not be stored",
        }


@pytest.mark.django_db
class TestOtherPaymentMethods:
    """Tests for POST /api/subscriptions/paypal and /credit-card"""

    def test_paypal(self, api_client: APIClient):
        response = api_client.post(
            "/api/subscriptions/paypal",
            payload(transaction_code="PAYID-ABC123"),
            format="json",
        )

        assert response.status_code == 201
        assert models.Payment.objects.get().transaction_code == "PAYID-ABC123"

    def test_credit_card(self, api_client: APIClient):
        response = api_client.post(
            "/api/subscriptions/credit-card",
            payload(card_holder_name="BRUCE WAYNE", card_number="4111111111111111"),
            format="json",
        )

        assert response.status_code == 201
        assert models.Payment.objects.get().card_number.endswith("1111")

    def test_credit_card_without_card(self, api_client: APIClient):
        response = api_client.post(
            "/api/subscriptions/credit-card", payload(), format="json"
        )

        assert response.status_code == 400
        assert [n["key"] for n in response.json()["notifications"]] == [
            "Payment.CardHolderName",
            "Payment.CardNumber",
        ]
