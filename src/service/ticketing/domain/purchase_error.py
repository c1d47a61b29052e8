"""
Purchase errors

Every rejected purchase raises InvalidPurchaseError. The code tells the
caller which rule failed, the message is safe to show to a user.
"""

from enum import StrEnum

from src.platform.exception.exceptions import DomainError


class PurchaseErrorCode(StrEnum):
    NULL_REQUEST = 'NULL_REQUEST'
    INVALID_ACCOUNT = 'INVALID_ACCOUNT'
    MAX_TICKET_LIMIT_EXCEEDED = 'MAX_TICKET_LIMIT_EXCEEDED'
    NO_ADULT_TICKET = 'NO_ADULT_TICKET'
    TOO_MANY_INFANTS = 'TOO_MANY_INFANTS'
    INVALID_TICKET_TYPE = 'INVALID_TICKET_TYPE'


NULL_REQUEST_MSG = 'Ticket type requests is null'
INVALID_ACCOUNT_ID_MSG = 'Invalid account Id'
MAX_NO_OF_TICKET_PURCHASE_LIMIT_EXCEEDED_MSG = 'Max no of ticket purchase limit {limit} exceeded'
NO_ADULT_TICKET_MSG = 'No adult ticket present in the request'
INFANT_TICKETS_MORE_THAN_ADULT_TICKETS_MSG = 'Infant tickets more than adult tickets'
INVALID_TICKET_TYPE_MSG = 'Invalid ticket type'

_DEFAULT_MESSAGES: dict[PurchaseErrorCode, str] = {
    PurchaseErrorCode.NULL_REQUEST: NULL_REQUEST_MSG,
    PurchaseErrorCode.INVALID_ACCOUNT: INVALID_ACCOUNT_ID_MSG,
    PurchaseErrorCode.NO_ADULT_TICKET: NO_ADULT_TICKET_MSG,
    PurchaseErrorCode.TOO_MANY_INFANTS: INFANT_TICKETS_MORE_THAN_ADULT_TICKETS_MSG,
    PurchaseErrorCode.INVALID_TICKET_TYPE: INVALID_TICKET_TYPE_MSG,
}


class InvalidPurchaseError(DomainError):
    def __init__(self, code: PurchaseErrorCode, message: str | None = None) -> None:
        super().__init__(message or _DEFAULT_MESSAGES[code], 400)
        self.code = code

    @classmethod
    def max_ticket_limit_exceeded(cls, limit: int) -> 'InvalidPurchaseError':
        return cls(
            PurchaseErrorCode.MAX_TICKET_LIMIT_EXCEEDED,
            MAX_NO_OF_TICKET_PURCHASE_LIMIT_EXCEEDED_MSG.format(limit=limit),
        )
