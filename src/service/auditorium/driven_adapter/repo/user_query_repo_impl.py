from typing import AsyncContextManager, Callable, List, Optional

from pydantic import SecretStr
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_password_hasher import IPasswordHasher
from src.service.auditorium.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.auditorium.domain.entity.user_entity import UserEntity, UserRole
from src.service.auditorium.driven_adapter.model.user_model import UserModel
from src.service.auditorium.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        password_hasher: IPasswordHasher | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.password_hasher = password_hasher or BcryptPasswordHasher()

    @Logger.io
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.email == email))
            user_model = result.scalar_one_or_none()
            return self._model_to_entity(user_model) if user_model else None

    @Logger.io
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.id == user_id))
            user_model = result.scalar_one_or_none()
            return self._model_to_entity(user_model) if user_model else None

    @Logger.io
    async def verify_password(self, email: str, plain_password: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.email == email))
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            if not self.password_hasher.verify_password(
                plain_password=SecretStr(plain_password),
                hashed_password=user_model.hashed_password,
            ):
                return None

            return self._model_to_entity(user_model)

    @Logger.io
    async def list_salespeople(self, manager_id: int) -> List[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel)
                .where(UserModel.manager_id == manager_id)
                .where(UserModel.role == UserRole.SALESPERSON.value)
                .order_by(UserModel.id)
            )
            return [self._model_to_entity(user_model) for user_model in result.scalars().all()]

    @staticmethod
    def _model_to_entity(user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            email=user_model.email,
            name=user_model.name,
            address=user_model.address,
            phone_number=user_model.phone_number,
            hashed_password=user_model.hashed_password,
            role=UserRole(user_model.role),
            manager_id=user_model.manager_id,
            is_active=user_model.is_active,
            created_at=user_model.created_at,
        )
