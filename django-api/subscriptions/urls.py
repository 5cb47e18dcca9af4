from django.urls import path

from subscriptions.handlers import (
    BoletoSubscriptionView,
    CreditCardSubscriptionView,
    PayPalSubscriptionView,
)

urlpatterns = [
    path("subscriptions/boleto", BoletoSubscriptionView.as_view(), name="subscription-boleto"),
    path("subscriptions/paypal", PayPalSubscriptionView.as_view(), name="subscription-paypal"),
    path(
        "subscriptions/credit-card",
        CreditCardSubscriptionView.as_view(),
        name="subscription-credit-card",
    ),
]
