"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.domain.value_object.price_table import PriceTable
from src.service.ticketing.driven_adapter.payment_gateway.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)
from src.service.ticketing.driven_adapter.seat_booking.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Prices are read once from settings and never change afterwards
    price_table = providers.Singleton(PriceTable.from_settings, settings=config_service)

    # External collaborators
    ticket_payment_service = providers.Singleton(TicketPaymentServiceImpl)
    seat_reservation_service = providers.Singleton(SeatReservationServiceImpl)

    # Use cases
    purchase_tickets_use_case = providers.Factory(
        PurchaseTicketsUseCase,
        ticket_payment_service=ticket_payment_service,
        seat_reservation_service=seat_reservation_service,
        price_table=price_table,
        max_ticket_limit=config_service.provided.MAX_TICKET_LIMIT,
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.price_table()


def cleanup() -> None:
    container.reset_singletons()
