"""Aggregation of raw ticket type requests into per-category totals."""

import logging
from collections.abc import Sequence

from purchases.domain import ErrorCode, InvalidPurchaseError, TicketTotals, TicketType
from purchases.domain.models import TicketTypeRequest

logger = logging.getLogger(__name__)


def aggregate_requests(
    requests: Sequence[TicketTypeRequest | None] | None,
) -> TicketTotals:
    """Sum ticket counts per category, skipping absent entries.

    Counts are added as given, so zero and negative requests pass through
    unchanged; the purchase rules decide whether the result is acceptable.

    Raises:
        InvalidPurchaseError: If there is no request list at all, or the
            list holds a single absent entry.
    """
    if requests is None or (len(requests) == 1 and requests[0] is None):
        raise InvalidPurchaseError(ErrorCode.NO_VALID_REQUEST)

    counts = {ticket_type: 0 for ticket_type in TicketType}
    total = 0
    for request in requests:
        if request is None:
            continue
        counts[request.ticket_type] += request.no_of_tickets
        total += request.no_of_tickets

    totals = TicketTotals(
        adults=counts[TicketType.ADULT],
        children=counts[TicketType.CHILD],
        infants=counts[TicketType.INFANT],
        total_tickets=total,
    )
    logger.debug("Aggregated %d request(s) into %s", len(requests), totals)
    return totals
