"""
Ticket Type Enum - Domain Value Object

Closed set of ticket types. The type decides both the unit price
and whether the ticket occupies a seat.
"""

from enum import StrEnum


class TicketType(StrEnum):
    """Ticket type enumeration"""

    ADULT = 'adult'
    CHILD = 'child'
    INFANT = 'infant'  # Sits on an adult's lap, no seat allocated
