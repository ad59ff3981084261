from abc import ABC, abstractmethod

from src.service.auditorium.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    """Repository interface for booking ledger writes"""

    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def cancel_atomically(self, *, booking: Booking) -> Booking:
        """
        Persist a cancelled booking only if the stored row is still active.

        Raises:
            NotFoundError: booking does not exist
            AlreadyCancelledError: a concurrent request cancelled it first
        """
        pass
