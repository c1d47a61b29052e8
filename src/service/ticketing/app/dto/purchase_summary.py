"""Purchase summary DTO."""

import attrs


@attrs.define(frozen=True)
class PurchaseSummary:
    """What was charged and reserved for a successful purchase."""

    account_id: int
    total_amount: int
    total_seats: int
    total_tickets: int
