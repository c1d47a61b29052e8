from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_payment_service import ITicketPaymentService


class TicketPaymentServiceImpl(ITicketPaymentService):
    """
    Stand-in for the external payment gateway.

    The real gateway never rejects a charge, so this adapter only records it.
    """

    @Logger.io
    def make_payment(self, *, account_id: int, total_amount_to_pay: int) -> None:
        Logger.base.info(
            f'💳 [PAYMENT-GATEWAY] Charged account {account_id}: {total_amount_to_pay}'
        )
