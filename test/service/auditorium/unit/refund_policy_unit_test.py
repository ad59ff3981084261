from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from src.service.auditorium.domain.enum.seat_type import SeatType
from src.service.auditorium.domain.refund_policy import (
    RefundPolicy,
    compute_refund,
    days_until_show,
)


SHOW_DATE = date(2026, 3, 10)
PRICE = Decimal('300')


@pytest.mark.unit
class TestDaysUntilShow:
    def test_plain_dates(self) -> None:
        assert days_until_show(SHOW_DATE, date(2026, 3, 5)) == 5
        assert days_until_show(SHOW_DATE, SHOW_DATE) == 0
        assert days_until_show(SHOW_DATE, date(2026, 3, 11)) == -1

    def test_partial_day_rounds_up(self) -> None:
        # 1.5 days before show-date midnight
        now = datetime(2026, 3, 8, 12, 0, tzinfo=timezone.utc)
        assert days_until_show(SHOW_DATE, now) == 2

    def test_on_show_day_is_zero(self) -> None:
        now = datetime(2026, 3, 10, 18, 0, tzinfo=timezone.utc)
        assert days_until_show(SHOW_DATE, now) == 0

    def test_day_after_show_is_negative(self) -> None:
        now = datetime(2026, 3, 11, 10, 0, tzinfo=timezone.utc)
        assert days_until_show(SHOW_DATE, now) == -1


@pytest.mark.unit
class TestComputeRefund:
    @pytest.mark.parametrize(
        'days_before, seat_type, expected',
        [
            (10, SeatType.BALCONY, Decimal('295.00')),
            (4, SeatType.ORDINARY, Decimal('295.00')),
            (3, SeatType.BALCONY, Decimal('285.00')),
            (2, SeatType.ORDINARY, Decimal('290.00')),
            (1, SeatType.BALCONY, Decimal('150.00')),
            (0, SeatType.ORDINARY, Decimal('150.00')),
            (-1, SeatType.BALCONY, Decimal('0.00')),
        ],
    )
    def test_refund_tiers(self, days_before: int, seat_type: SeatType, expected: Decimal) -> None:
        today = SHOW_DATE - timedelta(days=days_before)

        assert compute_refund(SHOW_DATE, today, seat_type, PRICE) == expected

    def test_refund_never_goes_negative(self) -> None:
        today = SHOW_DATE - timedelta(days=2)

        assert compute_refund(SHOW_DATE, today, SeatType.BALCONY, Decimal('10')) == Decimal(
            '0.00'
        )

    def test_refund_is_rounded_to_cents(self) -> None:
        assert compute_refund(SHOW_DATE, SHOW_DATE, SeatType.ORDINARY, Decimal('99.99')) == (
            Decimal('50.00')
        )

    def test_custom_policy_values(self) -> None:
        policy = RefundPolicy(
            booking_fee=Decimal('20'),
            balcony_deduction=Decimal('15'),
            ordinary_deduction=Decimal('10'),
            same_day_ratio=Decimal('0.25'),
        )

        assert policy.compute(
            show_date=SHOW_DATE,
            today=SHOW_DATE - timedelta(days=30),
            seat_type=SeatType.ORDINARY,
            ticket_price=PRICE,
        ) == Decimal('280.00')
        assert policy.compute(
            show_date=SHOW_DATE, today=SHOW_DATE, seat_type=SeatType.ORDINARY, ticket_price=PRICE
        ) == Decimal('75.00')
