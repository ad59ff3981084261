from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.auditorium.domain.enum.seat_type import SeatType


@attrs.define
class SeatCategory:
    category: SeatType
    total_seats: int
    available_seats: int
    price: Decimal
    id: Optional[int] = None
    performance_id: Optional[int] = None

    @classmethod
    def create(cls, *, category: SeatType, total_seats: int, price: Decimal) -> 'SeatCategory':
        if total_seats < 0:
            raise ValidationError(f'total_seats must be >= 0 for {category} seats')
        if price < 0:
            raise ValidationError(f'price must be >= 0 for {category} seats')
        # A new category starts fully available
        return cls(
            category=SeatType(category),
            total_seats=total_seats,
            available_seats=total_seats,
            price=Decimal(price),
        )

    def has_available_seat(self) -> bool:
        return self.available_seats > 0

    def validate_inventory(self) -> None:
        if not 0 <= self.available_seats <= self.total_seats:
            raise ValidationError(
                f'available_seats must be between 0 and {self.total_seats} for {self.category} seats'
            )


@attrs.define
class Performance:
    timing: str
    seat_categories: List[SeatCategory] = attrs.field(factory=list)
    id: Optional[int] = None
    show_id: Optional[int] = None

    @classmethod
    def create(cls, *, timing: str, seat_categories: List[SeatCategory]) -> 'Performance':
        if not timing or not timing.strip():
            raise ValidationError('timing is required for every performance')
        categories = [c.category for c in seat_categories]
        if len(categories) != len(set(categories)):
            raise ValidationError(f'Duplicate seat category in performance {timing}')
        return cls(timing=timing.strip(), seat_categories=seat_categories)

    def find_seat_category(self, category: SeatType) -> SeatCategory:
        for seat_category in self.seat_categories:
            if seat_category.category == category:
                return seat_category
        raise NotFoundError('Seat category not found')


@attrs.define
class Show:
    show_date: date
    number_of_shows: int
    manager_id: int
    performances: List[Performance] = attrs.field(factory=list)
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        show_date: date,
        number_of_shows: int,
        manager_id: int,
        performances: List[Performance],
    ) -> 'Show':
        if number_of_shows < 1:
            raise ValidationError('number_of_shows must be at least 1')
        if len(performances) != number_of_shows:
            raise ValidationError(
                f'Number of show timings ({len(performances)}) '
                f'must match number_of_shows ({number_of_shows})'
            )
        timings = [p.timing for p in performances]
        if len(timings) != len(set(timings)):
            raise ValidationError('Show timings must be unique within a show')

        return cls(
            show_date=show_date,
            number_of_shows=number_of_shows,
            manager_id=manager_id,
            performances=performances,
            created_at=datetime.now(timezone.utc),
        )

    def find_performance(self, timing: str) -> Performance:
        for performance in self.performances:
            if performance.timing == timing:
                return performance
        raise NotFoundError('Show timing not found')

    def locate_seat_category(self, *, timing: str, seat_type: SeatType) -> SeatCategory:
        return self.find_performance(timing).find_seat_category(seat_type)
