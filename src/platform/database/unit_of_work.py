"""
Unit of Work Pattern - one session shared by every repository in a use case

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback
- Repositories get the shared session from the UoW
- Use cases coordinate several repositories through the UoW, so the ledger
  write and the inventory write land in the same transaction
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.auditorium.app.interface.i_booking_command_repo import IBookingCommandRepo
    from src.service.auditorium.app.interface.i_booking_query_repo import IBookingQueryRepo
    from src.service.auditorium.app.interface.i_show_command_repo import IShowCommandRepo
    from src.service.auditorium.app.interface.i_show_query_repo import IShowQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            booking = await uow.booking_command_repo.create(booking=...)
            await uow.show_command_repo.decrement_available_seats(seat_category_id=...)
            await uow.commit()
    """

    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo
    show_command_repo: IShowCommandRepo
    show_query_repo: IShowQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        # No-op after a successful commit, undoes partial writes otherwise
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.auditorium.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.auditorium.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from src.service.auditorium.driven_adapter.repo.show_command_repo_impl import (
            ShowCommandRepoImpl,
        )
        from src.service.auditorium.driven_adapter.repo.show_query_repo_impl import (
            ShowQueryRepoImpl,
        )

        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.booking_query_repo = BookingQueryRepoImpl(session=self.session)
        self.show_command_repo = ShowCommandRepoImpl(session=self.session)
        self.show_query_repo = ShowQueryRepoImpl(session=self.session)

        return await super().__aenter__()

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            Logger.base.error(f'🗄️ [UoW] commit failed: {type(e).__name__}: {e}')
            await self.session.rollback()
            raise StorageError() from e

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """FastAPI dependency for Unit of Work"""
    return SqlAlchemyUnitOfWork(session)
