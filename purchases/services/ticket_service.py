"""Ticket service - the purchase entry point.

The service:
- Depends only on the payment and seat reservation gateway interfaces
- Runs aggregation, rules and pricing in order and stops at the first error
- Calls the gateways only once a purchase has passed every rule
- Returns the charged quote or raises InvalidPurchaseError

Nothing is kept between calls.
"""

import logging

from django.conf import settings
from django.utils.module_loading import import_string

from purchases.domain import AccountId, PurchaseQuote, TicketTypeRequest
from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService
from purchases.services.aggregation import aggregate_requests
from purchases.services.dispatch import dispatch_purchase
from purchases.services.pricing import price_purchase
from purchases.services.rules import validate_purchase

logger = logging.getLogger(__name__)


class TicketService:
    """Service for validating, pricing and placing ticket purchases."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
    ) -> None:
        self._payment_service = payment_service
        self._reservation_service = reservation_service

    def purchase_tickets(
        self, account_id: int, *ticket_type_requests: TicketTypeRequest | None
    ) -> PurchaseQuote:
        """Charge the account and reserve seats for the requested tickets.

        Returns the quote that was charged and reserved.

        Raises:
            InvalidPurchaseError: If no usable request was given or a
                purchase rule is broken. Neither gateway is called.
        """
        totals = aggregate_requests(ticket_type_requests)
        account = AccountId(account_id)
        validate_purchase(totals, account)

        quote = price_purchase(totals)
        dispatch_purchase(
            self._payment_service, self._reservation_service, account.value, quote
        )
        logger.info(
            "Purchase completed for account %s: price=%s seats=%s",
            account.value,
            quote.total_price,
            quote.seats_to_reserve,
        )
        return quote


def get_ticket_service() -> TicketService:
    """Build a TicketService from the gateway classes named in settings."""
    payment_cls = import_string(settings.TICKET_PAYMENT_SERVICE)
    reservation_cls = import_string(settings.SEAT_RESERVATION_SERVICE)
    return TicketService(payment_cls(), reservation_cls())
