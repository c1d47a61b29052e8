"""
Seat Reservation Service Interface

Port for the external seat booking system.
"""

from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    @abstractmethod
    def reserve_seat(self, *, account_id: int, total_seats_to_allocate: int) -> None:
        """
        Reserve seats for the account. Infants are not counted.

        Args:
            account_id: Account the seats belong to (>= 1)
            total_seats_to_allocate: Number of adult and child seats
        """
        pass
