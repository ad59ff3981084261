"""
User Management Use Cases (Use Case Layer)
"""

from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_password_hasher import IPasswordHasher
from src.service.auditorium.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.auditorium.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.auditorium.domain.entity.user_entity import UserEntity, UserRole


class UserUseCase:
    """User management use case class with proper dependency injection (CQRS)"""

    def __init__(
        self,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def create_user(
        self,
        *,
        email: str,
        password: str,
        name: str,
        address: str = '',
        phone_number: str = '',
        role: UserRole = UserRole.SALESPERSON,
        manager_id: Optional[int] = None,
    ) -> UserEntity:
        user_entity = UserEntity(
            email=email,
            name=name,
            address=address,
            phone_number=phone_number,
            role=UserRole(role),
            manager_id=manager_id,
            is_active=True,
        )
        user_entity.validate_manager_assignment()

        if manager_id is not None:
            manager = await self.user_query_repo.get_by_id(manager_id)
            if not manager or not manager.is_manager:
                raise ValidationError(f'manager_id {manager_id} does not reference a manager')

        if await self.user_query_repo.get_by_email(email):
            raise ConflictError(f'User with email {email} already exists')

        user_entity.set_password(password, self.password_hasher)
        try:
            return await self.user_command_repo.create(user_entity)
        except IntegrityError as e:
            # Concurrent registration with the same email
            raise ConflictError(f'User with email {email} already exists') from e
