"""
Ticket Purchase Domain

Pure purchase rules - validation of ticket type requests and the
amount / seat calculation. No infrastructure, no collaborator calls.

Error precedence is part of the contract:
account -> null request -> max ticket limit (first request crossing it)
-> no adult ticket -> infants exceeding adults.
"""

from typing import Optional, Sequence

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.enum.ticket_type import TicketType
from src.service.ticketing.domain.purchase_error import InvalidPurchaseError, PurchaseErrorCode
from src.service.ticketing.domain.value_object.price_table import PriceTable
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest


def validate_account_id(account_id: int) -> None:
    if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id < 1:
        raise InvalidPurchaseError(PurchaseErrorCode.INVALID_ACCOUNT)


def filter_ticket_type_requests(
    ticket_type_requests: Optional[Sequence[Optional[TicketTypeRequest]]],
) -> list[TicketTypeRequest]:
    """Drop absent entries. An absent or empty result is a NULL_REQUEST."""
    if ticket_type_requests is None:
        raise InvalidPurchaseError(PurchaseErrorCode.NULL_REQUEST)

    filtered = [request for request in ticket_type_requests if request is not None]
    if not filtered:
        raise InvalidPurchaseError(PurchaseErrorCode.NULL_REQUEST)
    return filtered


def count_tickets_of_type(ticket_type_request: TicketTypeRequest, ticket_type: TicketType) -> int:
    if ticket_type_request.ticket_type == ticket_type:
        return ticket_type_request.no_of_tickets
    return 0


def validate_ticket_type_requests(
    ticket_type_requests: Sequence[TicketTypeRequest], *, max_ticket_limit: int
) -> None:
    """
    Single pass over the requests.

    The max ticket limit is checked after each request is added, so it
    fires on the first request that crosses it, before the adult and
    infant rules are looked at.

    Raises:
        InvalidPurchaseError: MAX_TICKET_LIMIT_EXCEEDED, NO_ADULT_TICKET or TOO_MANY_INFANTS
    """
    total_no_of_tickets = 0
    total_no_of_adult_tickets = 0
    total_no_of_infant_tickets = 0
    has_adult_ticket = False

    for ticket_type_request in ticket_type_requests:
        total_no_of_tickets += ticket_type_request.no_of_tickets
        total_no_of_adult_tickets += count_tickets_of_type(ticket_type_request, TicketType.ADULT)
        total_no_of_infant_tickets += count_tickets_of_type(ticket_type_request, TicketType.INFANT)

        if total_no_of_tickets > max_ticket_limit:
            raise InvalidPurchaseError.max_ticket_limit_exceeded(max_ticket_limit)

        if (
            ticket_type_request.ticket_type == TicketType.ADULT
            and ticket_type_request.no_of_tickets > 0
        ):
            Logger.base.debug('👤 [PURCHASE] Adult ticket present in the request')
            has_adult_ticket = True

    if not has_adult_ticket:
        raise InvalidPurchaseError(PurchaseErrorCode.NO_ADULT_TICKET)
    if total_no_of_infant_tickets > total_no_of_adult_tickets:
        raise InvalidPurchaseError(PurchaseErrorCode.TOO_MANY_INFANTS)


def calculate_amount(ticket_type_request: TicketTypeRequest, price_table: PriceTable) -> int:
    return ticket_type_request.no_of_tickets * price_table.price_of(ticket_type_request.ticket_type)


def calculate_seats(ticket_type_request: TicketTypeRequest) -> int:
    match ticket_type_request.ticket_type:
        case TicketType.ADULT | TicketType.CHILD:
            seats = ticket_type_request.no_of_tickets
        case TicketType.INFANT:
            seats = 0
        case _:
            raise InvalidPurchaseError(PurchaseErrorCode.INVALID_TICKET_TYPE)
    Logger.base.debug(f'💺 [PURCHASE] Seats to allocate for {ticket_type_request}: {seats}')
    return seats


def calculate_totals(
    ticket_type_requests: Sequence[TicketTypeRequest], price_table: PriceTable
) -> tuple[int, int]:
    """Returns (total_amount, total_seats) for already validated requests."""
    total_amount = 0
    total_seats = 0
    for ticket_type_request in ticket_type_requests:
        total_amount += calculate_amount(ticket_type_request, price_table)
        total_seats += calculate_seats(ticket_type_request)
    return total_amount, total_seats
