from datetime import date
from decimal import Decimal

import pytest

from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.service.auditorium.domain.entity.show_entity import Performance, SeatCategory, Show
from src.service.auditorium.domain.enum.seat_type import SeatType


def _categories() -> list[SeatCategory]:
    return [
        SeatCategory.create(category=SeatType.BALCONY, total_seats=10, price=Decimal('300')),
        SeatCategory.create(category=SeatType.ORDINARY, total_seats=50, price=Decimal('200')),
    ]


@pytest.mark.unit
class TestShowCreate:
    def test_new_categories_start_fully_available(self) -> None:
        show = Show.create(
            show_date=date(2026, 5, 1),
            number_of_shows=2,
            manager_id=1,
            performances=[
                Performance.create(timing='14:00', seat_categories=_categories()),
                Performance.create(timing='19:30', seat_categories=_categories()),
            ],
        )

        assert show.created_at is not None
        for performance in show.performances:
            for seat_category in performance.seat_categories:
                assert seat_category.available_seats == seat_category.total_seats

    def test_number_of_shows_must_match_timings(self) -> None:
        with pytest.raises(ValidationError, match='must match number_of_shows'):
            Show.create(
                show_date=date(2026, 5, 1),
                number_of_shows=2,
                manager_id=1,
                performances=[Performance.create(timing='14:00', seat_categories=_categories())],
            )

    def test_timings_must_be_unique(self) -> None:
        with pytest.raises(ValidationError, match='unique'):
            Show.create(
                show_date=date(2026, 5, 1),
                number_of_shows=2,
                manager_id=1,
                performances=[
                    Performance.create(timing='14:00', seat_categories=_categories()),
                    Performance.create(timing='14:00', seat_categories=_categories()),
                ],
            )

    def test_at_least_one_show(self) -> None:
        with pytest.raises(ValidationError):
            Show.create(show_date=date(2026, 5, 1), number_of_shows=0, manager_id=1, performances=[])


@pytest.mark.unit
class TestSeatInventory:
    def test_negative_seats_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SeatCategory.create(category=SeatType.BALCONY, total_seats=-1, price=Decimal('1'))

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SeatCategory.create(category=SeatType.BALCONY, total_seats=1, price=Decimal('-1'))

    def test_duplicate_category_in_performance(self) -> None:
        with pytest.raises(ValidationError, match='Duplicate seat category'):
            Performance.create(
                timing='14:00',
                seat_categories=[
                    SeatCategory.create(
                        category=SeatType.BALCONY, total_seats=1, price=Decimal('1')
                    ),
                    SeatCategory.create(
                        category=SeatType.BALCONY, total_seats=2, price=Decimal('1')
                    ),
                ],
            )

    def test_available_seats_must_stay_within_total(self) -> None:
        seat_category = SeatCategory(
            category=SeatType.ORDINARY, total_seats=5, available_seats=6, price=Decimal('1')
        )

        with pytest.raises(ValidationError):
            seat_category.validate_inventory()

    def test_locate_seat_category(self) -> None:
        show = Show(
            show_date=date(2026, 5, 1),
            number_of_shows=1,
            manager_id=1,
            performances=[Performance(timing='14:00', seat_categories=_categories())],
        )

        found = show.locate_seat_category(timing='14:00', seat_type=SeatType.ORDINARY)

        assert found.category == SeatType.ORDINARY
        assert found.total_seats == 50
        with pytest.raises(NotFoundError, match='Show timing not found'):
            show.locate_seat_category(timing='20:00', seat_type=SeatType.ORDINARY)
