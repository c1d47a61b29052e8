import attrs

from src.service.ticketing.domain.enum.ticket_type import TicketType


@attrs.define(frozen=True)
class TicketTypeRequest:
    """One purchase line: a ticket type and how many tickets of it"""

    ticket_type: TicketType = attrs.field(validator=attrs.validators.instance_of(TicketType))
    no_of_tickets: int = attrs.field(
        validator=[attrs.validators.instance_of(int), attrs.validators.ge(0)]
    )
