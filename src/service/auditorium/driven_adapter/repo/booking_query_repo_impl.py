from contextlib import asynccontextmanager
from decimal import Decimal
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.auditorium.domain.entity.booking_entity import Booking, Cancellation, Spectator
from src.service.auditorium.domain.enum.booking_status import BookingStatus
from src.service.auditorium.domain.enum.seat_type import SeatType
from src.service.auditorium.driven_adapter.model.booking_model import BookingModel


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None,
        *,
        session: AsyncSession | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.session = session

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            # Session injected by UoW - use directly
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        """SQLAlchemy returns stdlib uuid.UUID, the domain uses uuid_utils.UUID"""
        cancellation = None
        if db_booking.cancelled_at is not None:
            cancellation = Cancellation(
                cancelled_at=db_booking.cancelled_at,
                refund_amount=Decimal(db_booking.refund_amount or 0),
            )
        return Booking(
            id=UUID(str(db_booking.id)),
            show_id=db_booking.show_id,
            show_time=db_booking.show_time,
            seat_type=SeatType(db_booking.seat_type),
            seat_number=db_booking.seat_number,
            spectator=Spectator(
                name=db_booking.spectator_name, payment_info=db_booking.payment_info
            ),
            booked_by=db_booking.booked_by,
            ticket_price=Decimal(db_booking.ticket_price),
            status=BookingStatus(db_booking.status),
            created_at=db_booking.created_at,
            cancellation=cancellation,
        )

    @staticmethod
    def _to_booking_dict(db_booking: BookingModel) -> dict:
        return {
            'id': UUID(str(db_booking.id)),
            'show_id': db_booking.show_id,
            'show_date': db_booking.show.show_date if db_booking.show else None,
            'show_time': db_booking.show_time,
            'seat_type': SeatType(db_booking.seat_type),
            'seat_number': db_booking.seat_number,
            'spectator_name': db_booking.spectator_name,
            'payment_info': db_booking.payment_info,
            'ticket_price': Decimal(db_booking.ticket_price),
            'status': BookingStatus(db_booking.status),
            'booking_date': db_booking.created_at,
            'cancelled_at': db_booking.cancelled_at,
            'refund_amount': (
                Decimal(db_booking.refund_amount) if db_booking.refund_amount is not None else None
            ),
        }

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel).where(BookingModel.id == uuid.UUID(str(booking_id)))
            )
            db_booking = result.scalar_one_or_none()
            if not db_booking:
                return None
            return self._to_entity(db_booking)

    @Logger.io
    async def list_by_booker_with_details(self, *, booked_by: int) -> List[dict]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.booked_by == booked_by)
                .order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
            )
            return [self._to_booking_dict(db_booking) for db_booking in result.scalars().all()]

    @Logger.io
    async def exists_active_seat(
        self, *, show_id: int, show_time: str, seat_type: SeatType, seat_number: str
    ) -> bool:
        async with self._get_session() as session:
            found = await session.scalar(
                select(BookingModel.id)
                .where(BookingModel.show_id == show_id)
                .where(BookingModel.show_time == show_time)
                .where(BookingModel.seat_type == SeatType(seat_type).value)
                .where(BookingModel.seat_number == seat_number)
                .where(BookingModel.status == BookingStatus.ACTIVE.value)
                .limit(1)
            )
            return found is not None
