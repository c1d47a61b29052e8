"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.price_table import PriceTable
from src.service.ticketing.domain.value_object.ticket_type_request import TicketTypeRequest

__all__ = ['PriceTable', 'TicketTypeRequest']
