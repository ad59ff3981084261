from datetime import date
from decimal import Decimal
from typing import Any, List, Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.logging.loguru_io import Logger
from src.service.auditorium.domain.entity.show_entity import Performance, SeatCategory, Show
from src.service.auditorium.domain.enum.seat_type import SeatType


class CreateShowUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create_show(
        self,
        *,
        manager_id: int,
        show_date: date,
        number_of_shows: int,
        performances: List[dict[str, Any]],
    ) -> Show:
        """
        performances: [{'timing': '18:00', 'seat_categories': [
            {'category': 'balcony', 'total_seats': 10, 'price': Decimal('300')}, ...]}]
        """
        show = Show.create(
            show_date=show_date,
            number_of_shows=number_of_shows,
            manager_id=manager_id,
            performances=[
                Performance.create(
                    timing=performance['timing'],
                    seat_categories=[
                        SeatCategory.create(
                            category=SeatType(seat_category['category']),
                            total_seats=seat_category['total_seats'],
                            price=Decimal(str(seat_category['price'])),
                        )
                        for seat_category in performance.get('seat_categories', [])
                    ],
                )
                for performance in performances
            ],
        )

        async with self.uow:
            show = await self.uow.show_command_repo.save(show=show)
            await self.uow.commit()

        Logger.base.info(
            f'🎭 [CREATE_SHOW] Show {show.id} on {show.show_date} '
            f'with {show.number_of_shows} performance(s) created by manager {manager_id}'
        )
        return show
