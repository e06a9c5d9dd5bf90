"""Domain primitives and the fixed business constants of the venue."""

from dataclasses import dataclass

ADULT_TICKET_PRICE = 20
CHILD_TICKET_PRICE = 10
INFANT_TICKET_PRICE = 0

MAX_TICKETS_PER_PURCHASE = 20


@dataclass(frozen=True)
class AccountId:
    """Opaque numeric account identifier.

    Construction never fails; authenticity is checked by the purchase rules.
    """

    value: int

    @property
    def is_authentic(self) -> bool:
        return self.value > 0
