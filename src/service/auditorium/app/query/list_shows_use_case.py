from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.auditorium.domain.entity.show_entity import Show


class ListShowsUseCase:
    def __init__(self, show_query_repo: IShowQueryRepo) -> None:
        self.show_query_repo = show_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        show_query_repo: IShowQueryRepo = Depends(Provide[Container.show_query_repo]),
    ) -> Self:
        return cls(show_query_repo=show_query_repo)

    @Logger.io
    async def list_shows(self) -> List[Show]:
        Logger.base.info('📋 [LIST_SHOWS] Loading all shows')

        shows = await self.show_query_repo.list_all()

        Logger.base.info(f'✅ [LIST_SHOWS] Found {len(shows)} shows')
        return shows
