"""
Refund policy for cancelled bookings.

The refund depends on how many days are left before the show:

    days_until_show > 3        ticket_price - booking fee
    1 < days_until_show <= 3   ticket_price - seat type deduction
    0 <= days_until_show <= 1  ticket_price * same day ratio
    days_until_show < 0        0

days_until_show is the ceiling of the (possibly fractional) number of days
between now and midnight of the show date. Refunds never go below zero.
"""

from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
import math

import attrs

from src.platform.config.core_setting import settings
from src.service.auditorium.domain.enum.seat_type import SeatType


CENT = Decimal('0.01')


def days_until_show(show_date: date, today: date | datetime) -> int:
    # datetime is a date subclass, check it first
    if isinstance(today, datetime):
        show_start = datetime.combine(show_date, time.min, tzinfo=today.tzinfo)
        return math.ceil((show_start - today) / timedelta(days=1))
    return (show_date - today).days


@attrs.frozen
class RefundPolicy:
    booking_fee: Decimal = attrs.field(factory=lambda: settings.REFUND_BOOKING_FEE)
    balcony_deduction: Decimal = attrs.field(factory=lambda: settings.REFUND_BALCONY_DEDUCTION)
    ordinary_deduction: Decimal = attrs.field(factory=lambda: settings.REFUND_ORDINARY_DEDUCTION)
    same_day_ratio: Decimal = attrs.field(factory=lambda: settings.REFUND_SAME_DAY_RATIO)

    def deduction_for(self, seat_type: SeatType) -> Decimal:
        return self.balcony_deduction if seat_type == SeatType.BALCONY else self.ordinary_deduction

    def compute(
        self, *, show_date: date, today: date | datetime, seat_type: SeatType, ticket_price: Decimal
    ) -> Decimal:
        price = Decimal(ticket_price)
        days = days_until_show(show_date, today)

        if days > 3:
            refund = price - self.booking_fee
        elif days > 1:
            refund = price - self.deduction_for(seat_type)
        elif days >= 0:
            refund = price * self.same_day_ratio
        else:
            refund = Decimal('0')

        return max(refund, Decimal('0')).quantize(CENT, rounding=ROUND_HALF_UP)


def compute_refund(
    show_date: date, today: date | datetime, seat_type: SeatType, ticket_price: Decimal
) -> Decimal:
    return RefundPolicy().compute(
        show_date=show_date, today=today, seat_type=seat_type, ticket_price=ticket_price
    )
