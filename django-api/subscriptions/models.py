"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.db import models


class Student(models.Model):
    """Persistence model for students."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    first_name = models.CharField(max_length=40)
    last_name = models.CharField(max_length=40)
    document = models.CharField(max_length=14, unique=True)
    email = models.EmailField(max_length=254, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Subscription(models.Model):
    """Persistence model for a student's subscription."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    student = models.ForeignKey(
        Student, on_delete=models.CASCADE, related_name="subscriptions"
    )
    created_at = models.DateTimeField()
    expires_at = models.DateTimeField()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["student", "expires_at"]),
        ]

    def __str__(self) -> str:
        return f"{self.student} - {self.expires_at:%Y-%m-%d}"


class Payment(models.Model):
    """Persistence model for payments; method-specific columns are blank when unused."""

    class Kind(models.TextChoices):
        BOLETO = "boleto", "Boleto"
        PAYPAL = "paypal", "PayPal"
        CREDIT_CARD = "credit_card", "Credit card"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    subscription = models.ForeignKey(
        Subscription, on_delete=models.CASCADE, related_name="payments"
    )
    number = models.CharField(max_length=10, unique=True)
    kind = models.CharField(max_length=20, choices=Kind.choices)
    paid_date = models.DateTimeField()
    expire_date = models.DateTimeField()
    total = models.DecimalField(max_digits=10, decimal_places=2)
    total_paid = models.DecimalField(max_digits=10, decimal_places=2)

    payer = models.CharField(max_length=255)
    payer_document = models.CharField(max_length=14)
    payer_document_type = models.CharField(max_length=4)
    payer_email = models.EmailField(max_length=254)

    street = models.CharField(max_length=255)
    street_number = models.CharField(max_length=20)
    neighborhood = models.CharField(max_length=255)
    city = models.CharField(max_length=255, blank=True)
    state = models.CharField(max_length=255, blank=True)
    country = models.CharField(max_length=255, blank=True)
    zip_code = models.CharField(max_length=20, blank=True)

    bar_code = models.CharField(max_length=100, blank=True)
    boleto_number = models.CharField(max_length=100, blank=True)
    transaction_code = models.CharField(max_length=100, blank=True)
    card_holder_name = models.CharField(max_length=255, blank=True)
    card_number = models.CharField(max_length=19, blank=True)
    last_transaction_number = models.CharField(max_length=100, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["subscription"]),
        ]

    def __str__(self) -> str:
        return f"{self.number} - {self.total}"
