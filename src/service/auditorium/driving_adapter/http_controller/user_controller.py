from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Cookie, Depends, Response, status

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.command.user_use_case import UserUseCase
from src.service.auditorium.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.auditorium.app.query.list_salespeople_use_case import ListSalespeopleUseCase
from src.service.auditorium.domain.entity.user_entity import UserEntity
from src.service.auditorium.driving_adapter.http_controller.auth.jwt_auth import (
    AUTH_COOKIE_NAME,
    JwtAuth,
)
from src.service.auditorium.driving_adapter.http_controller.schema.user_schema import (
    CreateUserRequest,
    LoginRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter()


def _to_response(user_entity: UserEntity) -> UserResponse:
    return UserResponse(
        id=user_entity.id or 0,
        email=user_entity.email,
        name=user_entity.name,
        address=user_entity.address,
        phone_number=user_entity.phone_number,
        role=user_entity.role,
        manager_id=user_entity.manager_id,
        is_active=user_entity.is_active,
    )


@inject
async def get_current_user(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    token: Optional[str] = Cookie(None, alias=AUTH_COOKIE_NAME),
) -> UserEntity:
    """Get current user from JWT token (stateless, no DB query)"""
    return jwt_auth.get_current_user_info_from_jwt(token)


@router.post('', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_user(
    request: CreateUserRequest,
    use_case: UserUseCase = Depends(UserUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.create_user(
        email=request.email,
        password=request.password.get_secret_value(),
        name=request.name,
        address=request.address,
        phone_number=request.phone_number,
        role=request.role,
        manager_id=request.manager_id,
    )
    return _to_response(user_entity)


@router.post('/login', response_model=UserResponse)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserResponse:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        email=request.email,
        password=request.password.get_secret_value(),
    )

    token = jwt_auth.create_jwt_token(user_entity)

    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        max_age=jwt_auth.max_age_seconds,
        httponly=True,
        samesite='lax',
        secure=False,  # Set to True in production
    )

    return _to_response(user_entity)


@router.get('', response_model=UserResponse)
@Logger.io
async def get_me(current_user: UserEntity = Depends(get_current_user)) -> UserResponse:
    return _to_response(current_user)


@router.get('/salespeople', response_model=List[UserResponse])
@Logger.io
async def list_salespeople(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListSalespeopleUseCase = Depends(ListSalespeopleUseCase.depends),
) -> List[UserResponse]:
    if not current_user.is_manager:
        raise ForbiddenError('Only managers can list salespeople')
    salespeople = await use_case.list_for_manager(current_user)
    return [_to_response(user) for user in salespeople]
