from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService
from purchases.gateways.local import LoggingSeatReservationService, LoggingTicketPaymentService

__all__ = [
    "TicketPaymentService",
    "SeatReservationService",
    "LoggingTicketPaymentService",
    "LoggingSeatReservationService",
]
