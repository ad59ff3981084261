from fastapi import Depends
from opentelemetry import trace

from src.platform.exception.exceptions import ForbiddenError
from src.service.auditorium.domain.entity.user_entity import UserEntity, UserRole
from src.service.auditorium.driving_adapter.http_controller.user_controller import (
    get_current_user as get_user_from_controller,
)


class RoleAuthStrategy:
    @staticmethod
    def can_manage_shows(user: UserEntity) -> bool:
        return user.role == UserRole.MANAGER

    @staticmethod
    def can_book(user: UserEntity) -> bool:
        # Managers sell tickets at the counter too
        return user.role in (UserRole.MANAGER, UserRole.SALESPERSON)


async def get_current_user(
    current_user: UserEntity = Depends(get_user_from_controller),
) -> UserEntity:
    return current_user


async def require_manager(
    current_user: UserEntity = Depends(get_user_from_controller),
) -> UserEntity:
    if not RoleAuthStrategy.can_manage_shows(current_user):
        raise ForbiddenError('Only managers can perform this action')
    return current_user


async def require_booker(
    current_user: UserEntity = Depends(get_user_from_controller),
) -> UserEntity:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_booker',
        attributes={
            'user.id': current_user.id or 0,
            'user.role': current_user.role.value,
        },
    ):
        if not RoleAuthStrategy.can_book(current_user):
            raise ForbiddenError('Only managers and salespeople can book seats')
        return current_user
