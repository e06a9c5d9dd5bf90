"""Hands a validated purchase over to the payment and reservation services.

Payment is taken first, then seats are reserved. Errors raised by either
service propagate unchanged; a reservation failure leaves the payment in
place.
"""

import logging

from purchases.domain import PurchaseQuote
from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


def dispatch_purchase(
    payment_service: TicketPaymentService,
    reservation_service: SeatReservationService,
    account_id: int,
    quote: PurchaseQuote,
) -> None:
    logger.info("Charging account %s amount %s", account_id, quote.total_price)
    payment_service.make_payment(account_id, quote.total_price)

    logger.info("Reserving %s seat(s) for account %s", quote.seats_to_reserve, account_id)
    reservation_service.reserve_seat(account_id, quote.seats_to_reserve)
