"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests into commands
- Call the subscription handler for business logic
- Map results and domain errors to HTTP responses
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from subscriptions.domain.errors import PersistenceError
from subscriptions.handlers.serializers import (
    BoletoSubscriptionSerializer,
    CreditCardSubscriptionSerializer,
    PayPalSubscriptionSerializer,
    SubscriptionRequestSerializer,
)
from subscriptions.services.subscription_service import build_subscription_handler

logger = logging.getLogger(__name__)


class SubscriptionCreateView(APIView):
    """Base handler for POST /api/subscriptions/<method>"""

    serializer_class: type[SubscriptionRequestSerializer]

    def post(self, request: Request) -> Response:
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"success": False, "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        handler = build_subscription_handler()
        try:
            result = handler.handle(serializer.to_command())
        except PersistenceError as exc:
            return Response(
                {"success": False, "message": exc.message},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response(
            {
                "success": result.success,
                "message": result.message,
                "notifications": handler.notifications.as_dicts(),
            },
            status=status.HTTP_201_CREATED if result.success else status.HTTP_400_BAD_REQUEST,
        )


class BoletoSubscriptionView(SubscriptionCreateView):
    """Handler for POST /api/subscriptions/boleto"""

    serializer_class = BoletoSubscriptionSerializer


class PayPalSubscriptionView(SubscriptionCreateView):
    """Handler for POST /api/subscriptions/paypal"""

    serializer_class = PayPalSubscriptionSerializer


class CreditCardSubscriptionView(SubscriptionCreateView):
    """Handler for POST /api/subscriptions/credit-card"""

    serializer_class = CreditCardSubscriptionSerializer
