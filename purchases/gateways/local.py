"""In-process gateway implementations.

They only log what they were asked to do and stand in for the real payment
and seat booking providers, which are outside this service.
"""

import logging

from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class LoggingTicketPaymentService(TicketPaymentService):
    """Payment gateway that records the charge and always succeeds."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info("Payment of %s taken from account %s", total_amount_to_pay, account_id)


class LoggingSeatReservationService(SeatReservationService):
    """Seat booking gateway that records the reservation and always succeeds."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info("%s seat(s) reserved for account %s", total_seats_to_allocate, account_id)
