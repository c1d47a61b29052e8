import threading
from typing import Optional, Sequence

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.purchase_summary import PurchaseSummary
from src.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticketing.app.interface.i_ticket_payment_service import ITicketPaymentService
from src.service.ticketing.domain.ticket_purchase_domain import (
    calculate_totals,
    filter_ticket_type_requests,
    validate_account_id,
    validate_ticket_type_requests,
)
from src.service.ticketing.domain.value_object.price_table import PriceTable
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest


# Shared by every instance: one purchase at a time in the whole process
_purchase_lock = threading.Lock()


class PurchaseTicketsUseCase:
    """
    Purchase tickets use case

    Flow:
    1. Validate account id and ticket type requests (Fail Fast)
    2. Calculate total amount and total seats
    3. Charge the account through the payment gateway
    4. Reserve seats through the seat reservation service

    Collaborators are only called after every rule passed, so a rejected
    purchase has no side effects. There is no rollback: a failing
    reservation after a successful payment is surfaced to the caller as is.

    Dependencies:
    - ticket_payment_service: External payment gateway
    - seat_reservation_service: External seat booking system
    - price_table: Unit price per ticket type
    - max_ticket_limit: Max tickets (all types) in one purchase
    """

    def __init__(
        self,
        *,
        ticket_payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
        price_table: PriceTable,
        max_ticket_limit: int,
    ) -> None:
        self.ticket_payment_service = ticket_payment_service
        self.seat_reservation_service = seat_reservation_service
        self.price_table = price_table
        self.max_ticket_limit = max_ticket_limit
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    def purchase_tickets(
        self,
        *,
        account_id: int,
        ticket_type_requests: Optional[Sequence[Optional[TicketTypeRequest]]],
    ) -> PurchaseSummary:
        """
        Purchase tickets for a valid request

        Args:
            account_id: Account making the purchase, must be >= 1
            ticket_type_requests: Requested tickets, None entries are ignored

        Returns:
            PurchaseSummary with the charged amount and reserved seats

        Raises:
            InvalidPurchaseError: If the account or the requests break a purchase rule
        """
        with _purchase_lock, self.tracer.start_as_current_span(
            'use_case.purchase_tickets',
            attributes={'purchase.account_id': str(account_id)},
        ) as span:
            Logger.base.info(
                f'🎫 [PURCHASE] Request for account {account_id}: {ticket_type_requests}'
            )

            # Step 1: Fail Fast - nothing is charged or reserved on invalid input
            validate_account_id(account_id)
            filtered_requests = filter_ticket_type_requests(ticket_type_requests)
            validate_ticket_type_requests(
                filtered_requests, max_ticket_limit=self.max_ticket_limit
            )

            # Step 2: Totals
            total_amount, total_seats = calculate_totals(filtered_requests, self.price_table)
            span.set_attribute('purchase.total_amount', total_amount)
            span.set_attribute('purchase.total_seats', total_seats)

            # Step 3: Payment before reservation
            Logger.base.info(f'💰 [PURCHASE] Total amount to pay {total_amount}')
            self.ticket_payment_service.make_payment(
                account_id=account_id, total_amount_to_pay=total_amount
            )

            # Step 4: Reserve seats
            Logger.base.info(f'💺 [PURCHASE] Total seats to allocate {total_seats}')
            self.seat_reservation_service.reserve_seat(
                account_id=account_id, total_seats_to_allocate=total_seats
            )

            return PurchaseSummary(
                account_id=account_id,
                total_amount=total_amount,
                total_seats=total_seats,
                total_tickets=sum(request.no_of_tickets for request in filtered_requests),
            )
