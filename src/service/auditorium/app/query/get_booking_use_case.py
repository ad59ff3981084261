from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.auditorium.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.auditorium.domain.entity.booking_entity import Booking
from src.service.auditorium.domain.entity.user_entity import UserEntity
from src.service.auditorium.domain.enum.booking_status import BookingStatus
from src.service.auditorium.domain.refund_policy import RefundPolicy, days_until_show


class GetBookingUseCase:
    def __init__(
        self,
        *,
        booking_query_repo: IBookingQueryRepo,
        show_query_repo: IShowQueryRepo,
        refund_policy: RefundPolicy,
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.show_query_repo = show_query_repo
        self.refund_policy = refund_policy

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        show_query_repo: IShowQueryRepo = Depends(Provide[Container.show_query_repo]),
        refund_policy: RefundPolicy = Depends(Provide[Container.refund_policy]),
    ) -> Self:
        return cls(
            booking_query_repo=booking_query_repo,
            show_query_repo=show_query_repo,
            refund_policy=refund_policy,
        )

    @Logger.io
    async def get_booking(self, *, booking_id: UUID, requested_by: UserEntity) -> Booking:
        booking = await self.booking_query_repo.get_by_id(booking_id=booking_id)

        if not booking:
            raise NotFoundError('Booking not found')

        if not (booking.is_booked_by(requested_by.id) or requested_by.is_manager):
            raise ForbiddenError('Only the booker or a manager can view this booking')

        return booking

    @Logger.io
    async def get_refund_quote(
        self, *, booking_id: UUID, requested_by: UserEntity, now: Optional[datetime] = None
    ) -> dict:
        """What a cancellation right now would refund, without cancelling"""
        booking = await self.get_booking(booking_id=booking_id, requested_by=requested_by)

        show = await self.show_query_repo.get_by_id(show_id=booking.show_id)
        if not show:
            raise NotFoundError('Show not found')

        now = now or datetime.now(timezone.utc)
        refundable = booking.status == BookingStatus.ACTIVE
        refund_amount = (
            self.refund_policy.compute(
                show_date=show.show_date,
                today=now,
                seat_type=booking.seat_type,
                ticket_price=booking.ticket_price,
            )
            if refundable
            else Decimal('0.00')
        )

        return {
            'booking_id': booking.id,
            'show_date': show.show_date,
            'days_until_show': days_until_show(show.show_date, now),
            'ticket_price': booking.ticket_price,
            'refund_amount': refund_amount,
            'refundable': refundable,
        }
