from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.auditorium.domain.entity.user_entity import UserEntity
from src.service.auditorium.driven_adapter.model.user_model import UserModel
from src.service.auditorium.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                name=user_entity.name,
                address=user_entity.address,
                phone_number=user_entity.phone_number,
                role=user_entity.role.value,
                manager_id=user_entity.manager_id,
                is_active=user_entity.is_active,
            )

            session.add(user_model)
            await session.commit()
            await session.refresh(user_model)

            return UserQueryRepoImpl._model_to_entity(user_model)
