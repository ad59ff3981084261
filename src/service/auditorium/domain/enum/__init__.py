from src.service.auditorium.domain.enum.booking_status import BookingStatus
from src.service.auditorium.domain.enum.seat_type import SeatType

__all__ = ['BookingStatus', 'SeatType']
