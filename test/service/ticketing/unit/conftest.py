"""
Unit test fixtures for the ticketing service.

Collaborators are replaced by autospec mocks so tests can assert on the
exact payment / reservation calls without any external system.
"""

from unittest.mock import Mock, create_autospec

import pytest

from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticketing.app.interface.i_ticket_payment_service import ITicketPaymentService
from src.service.ticketing.domain.value_object.price_table import PriceTable


MAX_TICKET_LIMIT = 20


@pytest.fixture
def price_table() -> PriceTable:
    return PriceTable(adult=20, child=10, infant=0)


@pytest.fixture
def mock_ticket_payment_service() -> Mock:
    return create_autospec(ITicketPaymentService, instance=True)


@pytest.fixture
def mock_seat_reservation_service() -> Mock:
    return create_autospec(ISeatReservationService, instance=True)


@pytest.fixture
def purchase_tickets_use_case(
    mock_ticket_payment_service: Mock,
    mock_seat_reservation_service: Mock,
    price_table: PriceTable,
) -> PurchaseTicketsUseCase:
    """Create PurchaseTicketsUseCase with mocked collaborators"""
    return PurchaseTicketsUseCase(
        ticket_payment_service=mock_ticket_payment_service,
        seat_reservation_service=mock_seat_reservation_service,
        price_table=price_table,
        max_ticket_limit=MAX_TICKET_LIMIT,
    )
