from abc import ABC, abstractmethod
from typing import List, Optional

from uuid_utils import UUID

from src.service.auditorium.domain.entity.booking_entity import Booking
from src.service.auditorium.domain.enum.seat_type import SeatType


class IBookingQueryRepo(ABC):
    """Repository interface for booking ledger reads"""

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        pass

    @abstractmethod
    async def list_by_booker_with_details(self, *, booked_by: int) -> List[dict]:
        """Booking view objects joined with the show date, newest first"""
        pass

    @abstractmethod
    async def exists_active_seat(
        self, *, show_id: int, show_time: str, seat_type: SeatType, seat_number: str
    ) -> bool:
        pass
