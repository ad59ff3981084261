from typing import List, Optional

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.types import UtilsUUID7
from src.service.auditorium.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.auditorium.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.auditorium.app.query.get_booking_use_case import GetBookingUseCase
from src.service.auditorium.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.auditorium.domain.entity.user_entity import UserEntity
from src.service.auditorium.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_booker,
)
from src.service.auditorium.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    BookingViewResponse,
    CancelBookingRequest,
    CancelBookingResponse,
    RefundQuoteResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('/my_booking')
@Logger.io
async def list_my_bookings(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingViewResponse]:
    """Bookings made by the current user, newest first."""
    bookings = await use_case.list_booker_bookings(current_user.id or 0)
    return [BookingViewResponse(**booking) for booking in bookings]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    current_user: UserEntity = Depends(require_booker),
    booking_use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('show_id', request.show_id or 0)
        span.set_attribute('timing', request.timing or '')
        span.set_attribute('seat_type', request.seat_type or '')
        span.set_attribute('booked_by', current_user.id or 0)

        booking = await booking_use_case.create_booking(
            show_id=request.show_id,
            timing=request.timing,
            seat_type=request.seat_type,
            seat_number=request.seat_number,
            spectator_name=request.spectator_name,
            payment_info=request.payment_info,
            booked_by=current_user.id,
        )

        span.set_attribute('booking.id', str(booking.id))
        return BookingResponse.from_entity(booking)


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: UtilsUUID7,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id, requested_by=current_user)
    return BookingResponse.from_entity(booking)


@router.get('/{booking_id}/refund_quote')
@Logger.io
async def get_refund_quote(
    booking_id: UtilsUUID7,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> RefundQuoteResponse:
    quote = await use_case.get_refund_quote(booking_id=booking_id, requested_by=current_user)
    return RefundQuoteResponse(**quote)


@router.patch('/{booking_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_booking(
    booking_id: UtilsUUID7,
    request: Optional[CancelBookingRequest] = None,
    current_user: UserEntity = Depends(require_booker),
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> CancelBookingResponse:
    with tracer.start_as_current_span('controller.cancel_booking') as span:
        span.set_attribute('booking.id', str(booking_id))

        booking = await use_case.cancel_booking(
            booking_id=booking_id,
            requested_by=current_user,
            refund_amount=request.refund_amount if request else None,
        )

        assert booking.cancellation is not None
        return CancelBookingResponse(
            id=booking.id,
            status=booking.status.value,
            refund_amount=float(booking.cancellation.refund_amount),
            cancelled_at=booking.cancellation.cancelled_at,
        )
