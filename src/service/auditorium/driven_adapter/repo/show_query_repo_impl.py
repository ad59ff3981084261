from contextlib import asynccontextmanager
from decimal import Decimal
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.auditorium.domain.entity.show_entity import Performance, SeatCategory, Show
from src.service.auditorium.domain.enum.seat_type import SeatType
from src.service.auditorium.driven_adapter.model.show_model import ShowModel


class ShowQueryRepoImpl(IShowQueryRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None,
        *,
        session: AsyncSession | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.session = session

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Session injected by the UoW is used as-is (the UoW owns its lifecycle),
        otherwise a short-lived session comes from session_factory.
        """
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _to_entity(db_show: ShowModel) -> Show:
        return Show(
            id=db_show.id,
            show_date=db_show.show_date,
            number_of_shows=db_show.number_of_shows,
            manager_id=db_show.manager_id,
            created_at=db_show.created_at,
            performances=[
                Performance(
                    id=db_performance.id,
                    show_id=db_performance.show_id,
                    timing=db_performance.timing,
                    seat_categories=[
                        SeatCategory(
                            id=db_category.id,
                            performance_id=db_category.performance_id,
                            category=SeatType(db_category.category),
                            total_seats=db_category.total_seats,
                            available_seats=db_category.available_seats,
                            price=Decimal(db_category.price),
                        )
                        for db_category in db_performance.seat_categories
                    ],
                )
                for db_performance in db_show.performances
            ],
        )

    @Logger.io
    async def get_by_id(self, *, show_id: int) -> Optional[Show]:
        async with self._get_session() as session:
            # populate_existing: inventory counts may have moved under a UoW session
            result = await session.execute(
                select(ShowModel)
                .where(ShowModel.id == show_id)
                .execution_options(populate_existing=True)
            )
            db_show = result.scalar_one_or_none()
            if not db_show:
                return None
            return self._to_entity(db_show)

    @Logger.io
    async def list_all(self) -> List[Show]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ShowModel).order_by(ShowModel.show_date, ShowModel.id)
            )
            return [self._to_entity(db_show) for db_show in result.scalars().all()]
