"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    NO_VALID_REQUEST = "NO_VALID_REQUEST"
    ACCOUNT_NOT_AUTHENTIC = "ACCOUNT_NOT_AUTHENTIC"
    NO_ADULT_PRESENT = "NO_ADULT_PRESENT"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"
    GROUP_TOO_LARGE = "GROUP_TOO_LARGE"


MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NO_VALID_REQUEST: "No valid ticket type request was provided",
    ErrorCode.ACCOUNT_NOT_AUTHENTIC: "The account provided is not authentic",
    ErrorCode.NO_ADULT_PRESENT: (
        "Child and infant tickets cannot be purchased without an adult ticket"
    ),
    ErrorCode.TOO_MANY_INFANTS: "There cannot be more infants than adults",
    ErrorCode.GROUP_TOO_LARGE: "A maximum of 20 tickets can be purchased at a time",
}


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks a business rule.

    There is a single error kind for every rejected purchase; the code tells
    which rule failed.
    """

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(code=code, message=MESSAGES[code])
