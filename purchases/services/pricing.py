from purchases.domain import (
    ADULT_TICKET_PRICE,
    CHILD_TICKET_PRICE,
    INFANT_TICKET_PRICE,
    PurchaseQuote,
    TicketTotals,
)


def price_purchase(totals: TicketTotals) -> PurchaseQuote:
    """Return the amount to charge and the number of seats to reserve."""
    total_price = (
        totals.adults * ADULT_TICKET_PRICE
        + totals.children * CHILD_TICKET_PRICE
        + totals.infants * INFANT_TICKET_PRICE
    )
    return PurchaseQuote(total_price=total_price, seats_to_reserve=totals.seats)
