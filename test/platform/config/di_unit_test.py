"""Unit tests for settings and the dependency injection container."""

from unittest.mock import Mock, create_autospec

from pydantic import ValidationError
import pytest

from src.platform.config.core_setting import Settings
from src.platform.config.di import container
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticketing.app.interface.i_ticket_payment_service import ITicketPaymentService
from src.service.ticketing.domain.enum.ticket_type import TicketType
from src.service.ticketing.domain.value_object.price_table import PriceTable
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest
from src.service.ticketing.driven_adapter.payment_gateway.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)
from src.service.ticketing.driven_adapter.seat_booking.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)


@pytest.mark.unit
class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.MAX_TICKET_LIMIT == 20
        assert settings.ADULT_TICKET_PRICE == 20
        assert settings.CHILD_TICKET_PRICE == 10
        assert settings.INFANT_TICKET_PRICE == 0

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('MAX_TICKET_LIMIT', '10')
        monkeypatch.setenv('CHILD_TICKET_PRICE', '12')

        settings = Settings()

        assert settings.MAX_TICKET_LIMIT == 10
        assert settings.CHILD_TICKET_PRICE == 12

    def test_rejects_negative_price(self) -> None:
        with pytest.raises(ValidationError):
            Settings(INFANT_TICKET_PRICE=-1)

    def test_rejects_non_positive_max_ticket_limit(self) -> None:
        with pytest.raises(ValidationError):
            Settings(MAX_TICKET_LIMIT=0)


@pytest.mark.unit
class TestContainer:
    def test_wires_default_adapters(self) -> None:
        use_case = container.purchase_tickets_use_case()

        assert isinstance(use_case, PurchaseTicketsUseCase)
        assert isinstance(use_case.ticket_payment_service, TicketPaymentServiceImpl)
        assert isinstance(use_case.seat_reservation_service, SeatReservationServiceImpl)
        assert use_case.price_table == PriceTable(adult=20, child=10, infant=0)
        assert use_case.max_ticket_limit == 20

    def test_price_table_is_singleton(self) -> None:
        assert container.price_table() is container.price_table()

    def test_purchase_with_default_adapters(self) -> None:
        summary = container.purchase_tickets_use_case().purchase_tickets(
            account_id=1,
            ticket_type_requests=[
                TicketTypeRequest(ticket_type=TicketType.ADULT, no_of_tickets=2),
                TicketTypeRequest(ticket_type=TicketType.INFANT, no_of_tickets=1),
            ],
        )

        assert summary.total_amount == 40
        assert summary.total_seats == 2

    def test_override_collaborators(self) -> None:
        # Arrange
        payment: Mock = create_autospec(ITicketPaymentService, instance=True)
        reservation: Mock = create_autospec(ISeatReservationService, instance=True)

        # Act
        with (
            container.ticket_payment_service.override(payment),
            container.seat_reservation_service.override(reservation),
        ):
            container.purchase_tickets_use_case().purchase_tickets(
                account_id=9,
                ticket_type_requests=[
                    TicketTypeRequest(ticket_type=TicketType.ADULT, no_of_tickets=1),
                    TicketTypeRequest(ticket_type=TicketType.CHILD, no_of_tickets=1),
                ],
            )

        # Assert
        payment.make_payment.assert_called_once_with(account_id=9, total_amount_to_pay=30)
        reservation.reserve_seat.assert_called_once_with(account_id=9, total_seats_to_allocate=2)
