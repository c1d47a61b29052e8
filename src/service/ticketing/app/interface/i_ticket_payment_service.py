"""
Ticket Payment Service Interface

Port for the external payment gateway. The gateway is assumed to always
succeed; its return value is not consulted.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    @abstractmethod
    def make_payment(self, *, account_id: int, total_amount_to_pay: int) -> None:
        """
        Charge the account for the whole purchase.

        Args:
            account_id: Account to charge (>= 1)
            total_amount_to_pay: Total price of all tickets in the purchase
        """
        pass
