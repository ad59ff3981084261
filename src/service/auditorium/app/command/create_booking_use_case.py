import time
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import (
    CapacityExceededError,
    ConflictError,
    CustomBaseError,
    NotFoundError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.auditorium.domain.entity.booking_entity import Booking
from src.service.auditorium.domain.enum.seat_type import SeatType


class CreateBookingUseCase:
    """
    Book one seat for a spectator.

    Flow:
    1. Validate the seven required inputs (Fail Fast)
    2. Locate show -> performance -> seat category
    3. Reject when the category is sold out
    4. Reject a second active booking for the same seat (when enforced)
    5. Write the ledger entry and decrement the seat count
    6. Commit once, so ledger and inventory never diverge
    """

    def __init__(self, *, uow: AbstractUnitOfWork, enforce_unique_seat_number: bool = True) -> None:
        self.uow = uow
        self.enforce_unique_seat_number = enforce_unique_seat_number
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(uow=uow, enforce_unique_seat_number=config.ENFORCE_UNIQUE_SEAT_NUMBER)

    @Logger.io
    async def create_booking(
        self,
        *,
        show_id: Optional[int],
        timing: Optional[str],
        seat_type: Optional[str],
        seat_number: Optional[str],
        spectator_name: Optional[str],
        payment_info: Optional[str],
        booked_by: Optional[int],
    ) -> Booking:
        start = time.perf_counter()
        try:
            Booking.validate_required_fields(
                show_id=show_id,
                timing=timing,
                seat_type=seat_type,
                seat_number=seat_number,
                spectator_name=spectator_name,
                payment_info=payment_info,
                booked_by=booked_by,
            )
            with self.tracer.start_as_current_span(
                'use_case.create_booking',
                attributes={'show_id': show_id or 0, 'timing': timing or ''},
            ):
                booking, available_seats = await self._book_seat(
                    show_id=show_id,  # type: ignore[arg-type]
                    timing=timing,  # type: ignore[arg-type]
                    seat_type=self._parse_seat_type(seat_type),  # type: ignore[arg-type]
                    seat_number=seat_number,  # type: ignore[arg-type]
                    spectator_name=spectator_name,  # type: ignore[arg-type]
                    payment_info=payment_info,  # type: ignore[arg-type]
                    booked_by=booked_by,  # type: ignore[arg-type]
                )
        except CustomBaseError as e:
            metrics.record_failure(operation='create', error=e)
            raise

        metrics.record_booking_created(
            show_id=booking.show_id,
            timing=booking.show_time,
            seat_type=booking.seat_type.value,
            available_seats=available_seats,
            duration=time.perf_counter() - start,
        )
        Logger.base.info(
            f'🎫 [CREATE_BOOKING] Booking {booking.id} created: show={booking.show_id} '
            f'timing={booking.show_time} {booking.seat_type.value} seat {booking.seat_number}'
        )
        return booking

    @staticmethod
    def _parse_seat_type(seat_type: str) -> SeatType:
        try:
            return SeatType(seat_type)
        except ValueError:
            raise ValidationError(f'Invalid seat_type: {seat_type}')

    async def _book_seat(
        self,
        *,
        show_id: int,
        timing: str,
        seat_type: SeatType,
        seat_number: str,
        spectator_name: str,
        payment_info: str,
        booked_by: int,
    ) -> tuple[Booking, int]:
        async with self.uow:
            show = await self.uow.show_query_repo.get_by_id(show_id=show_id)
            if not show:
                raise NotFoundError('Show not found')

            performance = show.find_performance(timing.strip())
            seat_category = performance.find_seat_category(seat_type)
            if not seat_category.has_available_seat():
                raise CapacityExceededError(
                    f'No {seat_type.value} seats available for this show timing'
                )

            booking = Booking.create(
                show_id=show_id,
                timing=performance.timing,
                seat_type=seat_type,
                seat_number=seat_number,
                spectator_name=spectator_name,
                payment_info=payment_info,
                booked_by=booked_by,
                ticket_price=seat_category.price,
            )

            if self.enforce_unique_seat_number:
                seat_taken = await self.uow.booking_query_repo.exists_active_seat(
                    show_id=booking.show_id,
                    show_time=booking.show_time,
                    seat_type=booking.seat_type,
                    seat_number=booking.seat_number,
                )
                if seat_taken:
                    raise ConflictError(
                        f'Seat {booking.seat_number} is already booked for this show timing'
                    )

            booking = await self.uow.booking_command_repo.create(booking=booking)

            # Lost the race for the last seat
            if not await self.uow.show_command_repo.decrement_available_seats(
                seat_category_id=seat_category.id  # type: ignore[arg-type]
            ):
                raise CapacityExceededError(
                    f'No {seat_type.value} seats available for this show timing'
                )

            await self.uow.commit()

        return booking, seat_category.available_seats - 1
