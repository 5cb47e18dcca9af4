from subscriptions.handlers.views import (
    BoletoSubscriptionView,
    CreditCardSubscriptionView,
    PayPalSubscriptionView,
)

__all__ = [
    "BoletoSubscriptionView",
    "PayPalSubscriptionView",
    "CreditCardSubscriptionView",
]
