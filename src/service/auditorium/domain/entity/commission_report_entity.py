from decimal import ROUND_HALF_UP, Decimal
from typing import Any, List

import attrs

from src.service.auditorium.domain.enum.booking_status import BookingStatus
from src.service.auditorium.domain.enum.seat_type import SeatType


@attrs.define
class CommissionReport:
    """Per-salesperson sales summary, read from the booking ledger only."""

    salesperson_id: int
    commission_rate: Decimal
    total_tickets: int = 0
    active_tickets: int = 0
    cancelled_tickets: int = 0
    balcony_tickets: int = 0
    ordinary_tickets: int = 0
    total_sales_amount: Decimal = Decimal('0.00')
    commission: Decimal = Decimal('0.00')
    sales: List[dict[str, Any]] = attrs.field(factory=list)

    @classmethod
    def from_bookings(
        cls, *, salesperson_id: int, bookings: List[dict[str, Any]], commission_rate: Decimal
    ) -> 'CommissionReport':
        """
        Seat type counts cover every booking; sales amount and commission only
        count active ones, a cancelled ticket earns nothing.
        """
        active = [b for b in bookings if b['status'] == BookingStatus.ACTIVE]
        total_sales = sum((Decimal(b['ticket_price']) for b in active), Decimal('0'))

        return cls(
            salesperson_id=salesperson_id,
            commission_rate=commission_rate,
            total_tickets=len(bookings),
            active_tickets=len(active),
            cancelled_tickets=sum(1 for b in bookings if b['status'] == BookingStatus.CANCELLED),
            balcony_tickets=sum(1 for b in bookings if b['seat_type'] == SeatType.BALCONY),
            ordinary_tickets=sum(1 for b in bookings if b['seat_type'] == SeatType.ORDINARY),
            total_sales_amount=total_sales.quantize(Decimal('0.01')),
            commission=(total_sales * commission_rate).quantize(
                Decimal('0.01'), rounding=ROUND_HALF_UP
            ),
            sales=bookings,
        )
