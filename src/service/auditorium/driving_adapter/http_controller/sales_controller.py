from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.query.get_commission_report_use_case import (
    GetCommissionReportUseCase,
)
from src.service.auditorium.domain.entity.user_entity import UserEntity
from src.service.auditorium.driving_adapter.http_controller.auth.role_auth import get_current_user
from src.service.auditorium.driving_adapter.http_controller.schema.sales_schema import (
    CommissionReportResponse,
)


router = APIRouter()


@router.get('/{salesperson_id}/commission')
@Logger.io
async def get_commission_report(
    salesperson_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetCommissionReportUseCase = Depends(GetCommissionReportUseCase.depends),
) -> CommissionReportResponse:
    report = await use_case.get_report(salesperson_id=salesperson_id, requested_by=current_user)
    return CommissionReportResponse.from_report(report)
