from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
import time
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import (
    CustomBaseError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.auditorium.domain.entity.booking_entity import Booking
from src.service.auditorium.domain.entity.user_entity import UserEntity
from src.service.auditorium.domain.refund_policy import RefundPolicy


class CancelBookingUseCase:
    """
    Cancel an active booking and give its seat back.

    The refund is always computed server-side from the refund policy. A caller
    may grant a smaller amount (e.g. a negotiated refund) but never more than
    the policy allows; the granted amount is stored as given.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, refund_policy: RefundPolicy) -> None:
        self.uow = uow
        self.refund_policy = refund_policy

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        refund_policy: RefundPolicy = Depends(Provide[Container.refund_policy]),
    ) -> Self:
        return cls(uow=uow, refund_policy=refund_policy)

    @staticmethod
    def _parse_refund_amount(refund_amount) -> Optional[Decimal]:
        if refund_amount is None:
            return None
        try:
            amount = Decimal(str(refund_amount))
        except InvalidOperation:
            raise ValidationError('refund_amount must be a non-negative number')
        if not amount.is_finite() or amount < 0:
            raise ValidationError('refund_amount must be a non-negative number')
        return amount

    @Logger.io
    async def cancel_booking(
        self,
        *,
        booking_id: UUID,
        requested_by: UserEntity,
        refund_amount: Optional[Decimal] = None,
        now: Optional[datetime] = None,
    ) -> Booking:
        start = time.perf_counter()
        try:
            requested_refund = self._parse_refund_amount(refund_amount)
            cancelled, available_seats = await self._cancel(
                booking_id=booking_id,
                requested_by=requested_by,
                requested_refund=requested_refund,
                now=now or datetime.now(timezone.utc),
            )
        except CustomBaseError as e:
            metrics.record_failure(operation='cancel', error=e)
            raise

        assert cancelled.cancellation is not None
        metrics.record_booking_cancelled(
            show_id=cancelled.show_id,
            timing=cancelled.show_time,
            seat_type=cancelled.seat_type.value,
            available_seats=available_seats,
            refund_amount=cancelled.cancellation.refund_amount,
            duration=time.perf_counter() - start,
        )
        Logger.base.info(
            f'↩️ [CANCEL_BOOKING] Booking {cancelled.id} cancelled, '
            f'refund={cancelled.cancellation.refund_amount}'
        )
        return cancelled

    async def _cancel(
        self,
        *,
        booking_id: UUID,
        requested_by: UserEntity,
        requested_refund: Optional[Decimal],
        now: datetime,
    ) -> tuple[Booking, int]:
        async with self.uow:
            booking = await self.uow.booking_query_repo.get_by_id(booking_id=booking_id)
            if not booking:
                raise NotFoundError('Booking not found')

            if not (booking.is_booked_by(requested_by.id) or requested_by.is_manager):
                raise ForbiddenError('Only the booker or a manager can cancel this booking')

            booking.validate_can_be_cancelled()

            show = await self.uow.show_query_repo.get_by_id(show_id=booking.show_id)
            if not show:
                raise NotFoundError('Show not found')
            seat_category = show.locate_seat_category(
                timing=booking.show_time, seat_type=booking.seat_type
            )

            policy_refund = self.refund_policy.compute(
                show_date=show.show_date,
                today=now,
                seat_type=booking.seat_type,
                ticket_price=booking.ticket_price,
            )
            if requested_refund is None:
                refund = policy_refund
            elif requested_refund > policy_refund:
                raise ValidationError(
                    f'refund_amount {requested_refund} exceeds the refund policy amount '
                    f'{policy_refund}'
                )
            else:
                refund = requested_refund

            cancelled = await self.uow.booking_command_repo.cancel_atomically(
                booking=booking.cancel(refund_amount=refund, cancelled_at=now)
            )

            available_seats = seat_category.available_seats
            if await self.uow.show_command_repo.increment_available_seats(
                seat_category_id=seat_category.id  # type: ignore[arg-type]
            ):
                available_seats += 1
            else:
                Logger.base.warning(
                    f'⚠️ [CANCEL_BOOKING] Seat category {seat_category.id} already at '
                    f'total_seats={seat_category.total_seats}, availability left unchanged'
                )
                available_seats = seat_category.total_seats

            await self.uow.commit()

        return cancelled, available_seats
