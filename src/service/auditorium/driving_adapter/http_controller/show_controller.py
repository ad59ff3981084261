from typing import List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.command.create_show_use_case import CreateShowUseCase
from src.service.auditorium.app.query.get_show_use_case import GetShowUseCase
from src.service.auditorium.app.query.list_shows_use_case import ListShowsUseCase
from src.service.auditorium.domain.entity.user_entity import UserEntity
from src.service.auditorium.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_manager,
)
from src.service.auditorium.driving_adapter.http_controller.schema.show_schema import (
    ShowCreateRequest,
    ShowResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_show(
    request: ShowCreateRequest,
    current_user: UserEntity = Depends(require_manager),
    use_case: CreateShowUseCase = Depends(CreateShowUseCase.depends),
) -> ShowResponse:
    with tracer.start_as_current_span('controller.create_show') as span:
        span.set_attribute('manager_id', current_user.id or 0)
        span.set_attribute('show_date', request.show_date.isoformat())

        show = await use_case.create_show(
            manager_id=current_user.id or 0,
            show_date=request.show_date,
            number_of_shows=request.number_of_shows,
            performances=[performance.model_dump() for performance in request.performances],
        )

        span.set_attribute('show.id', show.id or 0)
        return ShowResponse.from_entity(show)


@router.get('')
@Logger.io
async def list_shows(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListShowsUseCase = Depends(ListShowsUseCase.depends),
) -> List[ShowResponse]:
    shows = await use_case.list_shows()
    return [ShowResponse.from_entity(show) for show in shows]


@router.get('/{show_id}')
@Logger.io
async def get_show(
    show_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetShowUseCase = Depends(GetShowUseCase.depends),
) -> ShowResponse:
    show = await use_case.get_by_id(show_id=show_id)
    return ShowResponse.from_entity(show)
