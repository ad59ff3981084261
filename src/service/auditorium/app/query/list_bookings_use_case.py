from typing import Any, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_booking_query_repo import IBookingQueryRepo


class ListBookingsUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_booker_bookings(self, booked_by: int) -> List[dict[str, Any]]:
        """Bookings made by one salesperson/manager, newest first"""
        return await self.booking_query_repo.list_by_booker_with_details(booked_by=booked_by)
