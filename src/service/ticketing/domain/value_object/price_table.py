from typing import Self

import attrs

from src.platform.config.core_setting import Settings
from src.service.ticketing.domain.enum.ticket_type import TicketType
from src.service.ticketing.domain.purchase_error import InvalidPurchaseError, PurchaseErrorCode


@attrs.define(frozen=True)
class PriceTable:
    """
    Unit price per ticket type.

    Built once at startup and injected into the purchase use case,
    read-only afterwards.
    """

    adult: int = attrs.field(default=20, validator=attrs.validators.ge(0))
    child: int = attrs.field(default=10, validator=attrs.validators.ge(0))
    infant: int = attrs.field(default=0, validator=attrs.validators.ge(0))

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        return cls(
            adult=settings.ADULT_TICKET_PRICE,
            child=settings.CHILD_TICKET_PRICE,
            infant=settings.INFANT_TICKET_PRICE,
        )

    def price_of(self, ticket_type: TicketType) -> int:
        match ticket_type:
            case TicketType.ADULT:
                return self.adult
            case TicketType.CHILD:
                return self.child
            case TicketType.INFANT:
                return self.infant
            case _:
                raise InvalidPurchaseError(PurchaseErrorCode.INVALID_TICKET_TYPE)
