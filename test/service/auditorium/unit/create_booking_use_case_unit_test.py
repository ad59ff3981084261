"""
Unit tests for CreateBookingUseCase

Test Focus:
1. Ledger write + seat decrement commit together
2. Fail Fast: missing fields, unknown show / timing / category, sold out
3. Duplicate active seat guard
4. Lost race on the last seat never commits
"""

from decimal import Decimal

import pytest

from src.platform.exception.exceptions import (
    CapacityExceededError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.service.auditorium.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.auditorium.domain.enum.booking_status import BookingStatus
from src.service.auditorium.domain.enum.seat_type import SeatType
from test.service.auditorium.unit.fakes import (
    BALCONY_CATEGORY_ID,
    ORDINARY_CATEGORY_ID,
    SHOW_ID,
    TIMING,
    FakeUnitOfWork,
    build_show,
)


def _request(**overrides) -> dict:
    request = {
        'show_id': SHOW_ID,
        'timing': TIMING,
        'seat_type': 'ordinary',
        'seat_number': 'O-7',
        'spectator_name': 'Ada Lovelace',
        'payment_info': 'card **** 4242',
        'booked_by': 2,
    }
    request.update(overrides)
    return request


@pytest.mark.unit
class TestCreateBooking:
    async def test_books_seat_and_decrements_inventory(self, fake_uow: FakeUnitOfWork) -> None:
        """
        Given: Show with 50 ordinary seats available
        When: Salesperson books an ordinary seat
        Then:
          - Booking is active with the category price as ticket price
          - Inventory decremented for the ordinary category
          - Unit of work committed
        """
        # Arrange
        fake_uow.show_query_repo.get_by_id.return_value = build_show()
        use_case = CreateBookingUseCase(uow=fake_uow)

        # Act
        booking = await use_case.create_booking(**_request())

        # Assert
        assert booking.status == BookingStatus.ACTIVE
        assert booking.seat_type == SeatType.ORDINARY
        assert booking.ticket_price == Decimal('200.00')
        assert booking.booked_by == 2
        assert booking.created_at is not None
        fake_uow.booking_command_repo.create.assert_awaited_once()
        fake_uow.show_command_repo.decrement_available_seats.assert_awaited_once_with(
            seat_category_id=ORDINARY_CATEGORY_ID
        )
        assert fake_uow.committed

    async def test_seat_type_is_case_insensitive(self, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.show_query_repo.get_by_id.return_value = build_show()
        use_case = CreateBookingUseCase(uow=fake_uow)

        booking = await use_case.create_booking(**_request(seat_type='Balcony'))

        assert booking.seat_type == SeatType.BALCONY
        assert booking.ticket_price == Decimal('300.00')
        fake_uow.show_command_repo.decrement_available_seats.assert_awaited_once_with(
            seat_category_id=BALCONY_CATEGORY_ID
        )

    async def test_missing_fields_are_listed(self, fake_uow: FakeUnitOfWork) -> None:
        """
        Given: Request without spectator name and with blank payment info
        When: Create booking
        Then: ValidationError names both fields, nothing is read or written
        """
        use_case = CreateBookingUseCase(uow=fake_uow)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.create_booking(**_request(spectator_name=None, payment_info='  '))

        assert 'spectator_name' in exc_info.value.message
        assert 'payment_info' in exc_info.value.message
        fake_uow.show_query_repo.get_by_id.assert_not_awaited()
        assert not fake_uow.committed

    async def test_unknown_seat_type(self, fake_uow: FakeUnitOfWork) -> None:
        use_case = CreateBookingUseCase(uow=fake_uow)

        with pytest.raises(ValidationError, match='Invalid seat_type'):
            await use_case.create_booking(**_request(seat_type='vip'))

    async def test_show_not_found(self, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.show_query_repo.get_by_id.return_value = None
        use_case = CreateBookingUseCase(uow=fake_uow)

        with pytest.raises(NotFoundError, match='Show not found'):
            await use_case.create_booking(**_request())
        assert not fake_uow.committed

    async def test_show_timing_not_found(self, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.show_query_repo.get_by_id.return_value = build_show()
        use_case = CreateBookingUseCase(uow=fake_uow)

        with pytest.raises(NotFoundError, match='Show timing not found'):
            await use_case.create_booking(**_request(timing='08:00'))

    async def test_seat_category_not_found(self, fake_uow: FakeUnitOfWork) -> None:
        show = build_show()
        show.performances[0].seat_categories = [
            c for c in show.performances[0].seat_categories if c.category == SeatType.BALCONY
        ]
        fake_uow.show_query_repo.get_by_id.return_value = show
        use_case = CreateBookingUseCase(uow=fake_uow)

        with pytest.raises(NotFoundError, match='Seat category not found'):
            await use_case.create_booking(**_request(seat_type='ordinary'))

    async def test_sold_out(self, fake_uow: FakeUnitOfWork) -> None:
        """
        Given: No ordinary seats left
        When: Create booking
        Then: CapacityExceededError, no ledger entry, no commit
        """
        fake_uow.show_query_repo.get_by_id.return_value = build_show(ordinary_available=0)
        use_case = CreateBookingUseCase(uow=fake_uow)

        with pytest.raises(
            CapacityExceededError, match='No ordinary seats available for this show timing'
        ):
            await use_case.create_booking(**_request())

        fake_uow.booking_command_repo.create.assert_not_awaited()
        fake_uow.show_command_repo.decrement_available_seats.assert_not_awaited()
        assert not fake_uow.committed

    async def test_duplicate_active_seat(self, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.show_query_repo.get_by_id.return_value = build_show()
        fake_uow.booking_query_repo.exists_active_seat.return_value = True
        use_case = CreateBookingUseCase(uow=fake_uow)

        with pytest.raises(ConflictError, match='already booked'):
            await use_case.create_booking(**_request())

        fake_uow.booking_command_repo.create.assert_not_awaited()
        assert not fake_uow.committed

    async def test_duplicate_guard_can_be_disabled(self, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.show_query_repo.get_by_id.return_value = build_show()
        fake_uow.booking_query_repo.exists_active_seat.return_value = True
        use_case = CreateBookingUseCase(uow=fake_uow, enforce_unique_seat_number=False)

        await use_case.create_booking(**_request())

        fake_uow.booking_query_repo.exists_active_seat.assert_not_awaited()
        assert fake_uow.committed

    async def test_lost_race_for_last_seat(self, fake_uow: FakeUnitOfWork) -> None:
        """
        Given: One seat left when read, but the conditional decrement matches no row
        When: Create booking
        Then: CapacityExceededError and the ledger write is never committed
        """
        fake_uow.show_query_repo.get_by_id.return_value = build_show(ordinary_available=1)
        fake_uow.show_command_repo.decrement_available_seats.return_value = False
        use_case = CreateBookingUseCase(uow=fake_uow)

        with pytest.raises(CapacityExceededError):
            await use_case.create_booking(**_request())

        fake_uow.booking_command_repo.create.assert_awaited_once()
        assert not fake_uow.committed
