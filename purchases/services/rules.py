"""Business rules a purchase must satisfy before anything is charged.

Rules are checked in a fixed order and the first one broken is reported:

1. the account must be authentic (id > 0)
2. at least one adult ticket must be bought
3. infants may not outnumber adults
4. no more than MAX_TICKETS_PER_PURCHASE tickets in total
"""

import logging

from purchases.domain import (
    MAX_TICKETS_PER_PURCHASE,
    AccountId,
    ErrorCode,
    InvalidPurchaseError,
    TicketTotals,
)

logger = logging.getLogger(__name__)


def _first_violation(totals: TicketTotals, account: AccountId) -> ErrorCode | None:
    if not account.is_authentic:
        return ErrorCode.ACCOUNT_NOT_AUTHENTIC
    if totals.adults == 0:
        return ErrorCode.NO_ADULT_PRESENT
    if totals.infants > totals.adults:
        return ErrorCode.TOO_MANY_INFANTS
    if totals.total_tickets > MAX_TICKETS_PER_PURCHASE:
        return ErrorCode.GROUP_TOO_LARGE
    return None


def validate_purchase(totals: TicketTotals, account: AccountId) -> None:
    """Raise InvalidPurchaseError for the first rule the purchase breaks."""
    code = _first_violation(totals, account)
    if code is not None:
        logger.info("Purchase rejected for account %s: %s", account.value, code.value)
        raise InvalidPurchaseError(code)
