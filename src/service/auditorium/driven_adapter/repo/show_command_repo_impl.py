from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_show_command_repo import IShowCommandRepo
from src.service.auditorium.domain.entity.show_entity import Show
from src.service.auditorium.driven_adapter.model.show_model import (
    PerformanceModel,
    SeatCategoryModel,
    ShowModel,
)
from src.service.auditorium.driven_adapter.repo.show_query_repo_impl import ShowQueryRepoImpl


class ShowCommandRepoImpl(IShowCommandRepo):
    """
    Show/inventory writes. Always runs on the UoW session, the caller commits.

    Seat counts only move through conditional UPDATEs so two concurrent
    bookings can never take the last seat twice.
    """

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def save(self, *, show: Show) -> Show:
        if show.id is None:
            return await self._insert(show)

        for performance in show.performances:
            for seat_category in performance.seat_categories:
                seat_category.validate_inventory()
                await self.session.execute(
                    update(SeatCategoryModel)
                    .where(SeatCategoryModel.id == seat_category.id)
                    .values(available_seats=seat_category.available_seats)
                    .execution_options(synchronize_session=False)
                )
        return show

    async def _insert(self, show: Show) -> Show:
        db_show = ShowModel(
            show_date=show.show_date,
            number_of_shows=show.number_of_shows,
            manager_id=show.manager_id,
            created_at=show.created_at,
            performances=[
                PerformanceModel(
                    timing=performance.timing,
                    seat_categories=[
                        SeatCategoryModel(
                            category=seat_category.category.value,
                            total_seats=seat_category.total_seats,
                            available_seats=seat_category.available_seats,
                            price=seat_category.price,
                        )
                        for seat_category in performance.seat_categories
                    ],
                )
                for performance in show.performances
            ],
        )
        self.session.add(db_show)
        await self.session.flush()
        return ShowQueryRepoImpl._to_entity(db_show)

    @Logger.io
    async def decrement_available_seats(self, *, seat_category_id: int) -> bool:
        result = await self.session.execute(
            update(SeatCategoryModel)
            .where(SeatCategoryModel.id == seat_category_id)
            .where(SeatCategoryModel.available_seats > 0)
            .values(available_seats=SeatCategoryModel.available_seats - 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1  # type: ignore[attr-defined]

    @Logger.io
    async def increment_available_seats(self, *, seat_category_id: int) -> bool:
        result = await self.session.execute(
            update(SeatCategoryModel)
            .where(SeatCategoryModel.id == seat_category_id)
            .where(SeatCategoryModel.available_seats < SeatCategoryModel.total_seats)
            .values(available_seats=SeatCategoryModel.available_seats + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1  # type: ignore[attr-defined]
