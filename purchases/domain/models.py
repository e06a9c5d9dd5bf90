"""Domain models for a single purchase attempt.

Everything here is built, used and discarded within one call to
TicketService.purchase_tickets. Nothing is persisted.
"""

from dataclasses import dataclass
from enum import Enum


class TicketType(str, Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketTypeRequest:
    """A request for some number of tickets of one category.

    no_of_tickets is taken as given; zero and negative values are tolerated
    here and dealt with by the purchase rules.
    """

    ticket_type: TicketType
    no_of_tickets: int


@dataclass(frozen=True)
class TicketTotals:
    """Per-category ticket counts aggregated across a request list."""

    adults: int = 0
    children: int = 0
    infants: int = 0
    total_tickets: int = 0

    @property
    def seats(self) -> int:
        """Infants sit on an adult's lap and take no seat."""
        return self.adults + self.children


@dataclass(frozen=True)
class PurchaseQuote:
    """Amount charged and seats reserved for a validated purchase."""

    total_price: int
    seats_to_reserve: int
