from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import attrs
from uuid_utils import UUID, uuid7

from src.platform.exception.exceptions import AlreadyCancelledError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.auditorium.domain.enum.booking_status import BookingStatus
from src.service.auditorium.domain.enum.seat_type import SeatType


@attrs.define
class Spectator:
    name: str
    payment_info: str = attrs.field(repr=False)  # opaque, never processed


@attrs.define
class Cancellation:
    cancelled_at: datetime
    refund_amount: Decimal


@attrs.define
class Booking:
    id: UUID = attrs.field(on_setattr=attrs.setters.frozen)
    show_id: int
    show_time: str
    seat_type: SeatType
    seat_number: str
    spectator: Spectator
    booked_by: int
    # Snapshot of the seat category price at booking time
    ticket_price: Decimal = attrs.field(on_setattr=attrs.setters.frozen)
    status: BookingStatus = BookingStatus.ACTIVE
    created_at: Optional[datetime] = None
    cancellation: Optional[Cancellation] = None

    @staticmethod
    def validate_required_fields(
        *,
        show_id: Optional[int],
        timing: Optional[str],
        seat_type: Optional[str],
        seat_number: Optional[str],
        spectator_name: Optional[str],
        payment_info: Optional[str],
        booked_by: Optional[int],
    ) -> None:
        fields = {
            'show_id': show_id,
            'timing': timing,
            'seat_type': seat_type,
            'seat_number': seat_number,
            'spectator_name': spectator_name,
            'payment_info': payment_info,
            'booked_by': booked_by,
        }
        missing = [
            name
            for name, value in fields.items()
            if value is None or (isinstance(value, str) and not value.strip())
        ]
        if missing:
            raise ValidationError(f'Missing required fields: {", ".join(missing)}')

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        show_id: int,
        timing: str,
        seat_type: SeatType,
        seat_number: str,
        spectator_name: str,
        payment_info: str,
        booked_by: int,
        ticket_price: Decimal,
    ) -> 'Booking':
        cls.validate_required_fields(
            show_id=show_id,
            timing=timing,
            seat_type=seat_type,
            seat_number=seat_number,
            spectator_name=spectator_name,
            payment_info=payment_info,
            booked_by=booked_by,
        )
        return cls(
            id=uuid7(),
            show_id=show_id,
            show_time=timing,
            seat_type=SeatType(seat_type),
            seat_number=seat_number.strip(),
            spectator=Spectator(name=spectator_name.strip(), payment_info=payment_info),
            booked_by=booked_by,
            ticket_price=Decimal(ticket_price),
            status=BookingStatus.ACTIVE,
            created_at=datetime.now(timezone.utc),
        )

    def is_booked_by(self, user_id: Optional[int]) -> bool:
        return user_id is not None and self.booked_by == user_id

    def validate_can_be_cancelled(self) -> None:
        if self.status == BookingStatus.CANCELLED:
            raise AlreadyCancelledError('Booking is already cancelled')

    @Logger.io
    def cancel(self, *, refund_amount: Decimal, cancelled_at: datetime) -> 'Booking':
        self.validate_can_be_cancelled()
        return attrs.evolve(
            self,
            status=BookingStatus.CANCELLED,
            cancellation=Cancellation(cancelled_at=cancelled_at, refund_amount=refund_amount),
        )
