from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.platform.types import UtilsUUID7
from src.service.auditorium.domain.entity.booking_entity import Booking
from src.service.auditorium.domain.enum import BookingStatus, SeatType


class BookingCreateRequest(BaseModel):
    # Presence is checked by the use case so a missing field lists every gap at once
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'show_id': 1,
                'timing': '19:30',
                'seat_type': 'ordinary',
                'seat_number': 'O-12',
                'spectator_name': 'Ada Lovelace',
                'payment_info': 'card **** 4242',
            }
        }
    )

    show_id: Optional[int] = None
    timing: Optional[str] = None
    seat_type: Optional[str] = None
    seat_number: Optional[str] = None
    spectator_name: Optional[str] = None
    payment_info: Optional[str] = None


class BookingResponse(BaseModel):
    id: UtilsUUID7
    show_id: int
    show_time: str
    seat_type: str
    seat_number: str
    spectator_name: str
    booked_by: int
    ticket_price: float
    status: str
    created_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    refund_amount: Optional[float] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        cancellation = booking.cancellation
        return cls(
            id=booking.id,
            show_id=booking.show_id,
            show_time=booking.show_time,
            seat_type=booking.seat_type.value,
            seat_number=booking.seat_number,
            spectator_name=booking.spectator.name,
            booked_by=booking.booked_by,
            ticket_price=float(booking.ticket_price),
            status=booking.status.value,
            created_at=booking.created_at,
            cancelled_at=cancellation.cancelled_at if cancellation else None,
            refund_amount=float(cancellation.refund_amount) if cancellation else None,
        )


class BookingViewResponse(BaseModel):
    """One row of a booker's booking list"""

    id: UtilsUUID7
    show_id: int
    show_date: Optional[date] = None
    show_time: str
    seat_type: SeatType
    seat_number: str
    spectator_name: str
    payment_info: str
    ticket_price: float
    status: BookingStatus
    booking_date: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    refund_amount: Optional[float] = None


class CancelBookingRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'refund_amount': 290}})

    refund_amount: Optional[Decimal] = None


class CancelBookingResponse(BaseModel):
    id: UtilsUUID7
    status: str
    refund_amount: float
    cancelled_at: datetime


class RefundQuoteResponse(BaseModel):
    booking_id: UtilsUUID7
    show_date: date
    days_until_show: int
    ticket_price: float
    refund_amount: float
    refundable: bool
