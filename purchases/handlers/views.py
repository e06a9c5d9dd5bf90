"""HTTP handlers (views) - handle HTTP concerns only.

The purchase handler checks the shape of the request body, hands the
ticket requests to TicketService and turns a rejected purchase into a 400
with its error code. Gateway failures are not domain errors and are left
to propagate.
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from purchases.domain import InvalidPurchaseError
from purchases.handlers.serializers import PurchaseQuoteSerializer, PurchaseRequestSerializer
from purchases.services import get_ticket_service

logger = logging.getLogger(__name__)


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        account_id = serializer.validated_data["account_id"]
        ticket_requests = serializer.ticket_type_requests()
        service = get_ticket_service()
        try:
            if ticket_requests is None:
                # A null list is the same as a single absent request.
                quote = service.purchase_tickets(account_id, None)
            else:
                quote = service.purchase_tickets(account_id, *ticket_requests)
        except InvalidPurchaseError as exc:
            logger.warning("Purchase request for account %s rejected: %s", account_id, exc.code.value)
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=status.HTTP_400_BAD_REQUEST,
            )

        body = PurchaseQuoteSerializer(
            {
                "account_id": account_id,
                "total_price": quote.total_price,
                "seats_to_reserve": quote.seats_to_reserve,
            }
        ).data
        return Response(body, status=status.HTTP_201_CREATED)
