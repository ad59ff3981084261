"""
Booking Command Repository Implementation

Ledger writes. Always runs on the UoW session so the booking row and the
seat count change commit together.
"""

import uuid

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import (
    AlreadyCancelledError,
    ConflictError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.auditorium.domain.entity.booking_entity import Booking
from src.service.auditorium.domain.enum.booking_status import BookingStatus
from src.service.auditorium.driven_adapter.model.booking_model import BookingModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        self.session.add(
            BookingModel(
                id=uuid.UUID(str(booking.id)),
                show_id=booking.show_id,
                show_time=booking.show_time,
                seat_type=booking.seat_type.value,
                seat_number=booking.seat_number,
                spectator_name=booking.spectator.name,
                payment_info=booking.spectator.payment_info,
                booked_by=booking.booked_by,
                ticket_price=booking.ticket_price,
                status=booking.status.value,
                created_at=booking.created_at,
            )
        )
        try:
            await self.session.flush()
        except IntegrityError as e:
            # Another transaction committed the same seat after our availability check
            Logger.base.warning(
                f'🪑 [CREATE_BOOKING] Seat {booking.seat_number} taken concurrently '
                f'for show {booking.show_id} at {booking.show_time}'
            )
            raise ConflictError(
                f'Seat {booking.seat_number} is already booked for this show timing'
            ) from e
        return booking

    @Logger.io
    async def cancel_atomically(self, *, booking: Booking) -> Booking:
        if booking.cancellation is None:
            raise ValueError('cancel_atomically requires a booking carrying its cancellation')

        booking_id = uuid.UUID(str(booking.id))
        result = await self.session.execute(
            update(BookingModel)
            .where(BookingModel.id == booking_id)
            .where(BookingModel.status == BookingStatus.ACTIVE.value)
            .values(
                status=BookingStatus.CANCELLED.value,
                cancelled_at=booking.cancellation.cancelled_at,
                refund_amount=booking.cancellation.refund_amount,
            )
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:  # type: ignore[attr-defined]
            existing_status = await self.session.scalar(
                select(BookingModel.status).where(BookingModel.id == booking_id)
            )
            if existing_status is None:
                raise NotFoundError('Booking not found')
            raise AlreadyCancelledError('Booking is already cancelled')

        return booking
