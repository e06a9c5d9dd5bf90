from purchases.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from purchases.domain.models import PurchaseQuote, TicketTotals, TicketType, TicketTypeRequest
from purchases.domain.value_objects import (
    ADULT_TICKET_PRICE,
    CHILD_TICKET_PRICE,
    INFANT_TICKET_PRICE,
    MAX_TICKETS_PER_PURCHASE,
    AccountId,
)

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "TicketTotals",
    "PurchaseQuote",
    "AccountId",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
    "ADULT_TICKET_PRICE",
    "CHILD_TICKET_PRICE",
    "INFANT_TICKET_PRICE",
    "MAX_TICKETS_PER_PURCHASE",
]
