from decimal import Decimal
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.auditorium.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.auditorium.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.auditorium.domain.entity.commission_report_entity import CommissionReport
from src.service.auditorium.domain.entity.user_entity import UserEntity


class GetCommissionReportUseCase:
    """
    Sales summary of one salesperson.

    A salesperson sees their own report, a manager sees the reports of the
    salespeople reporting to them.
    """

    def __init__(
        self,
        *,
        booking_query_repo: IBookingQueryRepo,
        user_query_repo: IUserQueryRepo,
        commission_rate: Decimal,
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.user_query_repo = user_query_repo
        self.commission_rate = commission_rate

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            booking_query_repo=booking_query_repo,
            user_query_repo=user_query_repo,
            commission_rate=config.COMMISSION_RATE,
        )

    @Logger.io
    async def get_report(
        self, *, salesperson_id: int, requested_by: UserEntity
    ) -> CommissionReport:
        if requested_by.id != salesperson_id:
            salesperson = await self.user_query_repo.get_by_id(salesperson_id)
            if not salesperson:
                raise NotFoundError('Salesperson not found')
            if not requested_by.manages(salesperson):
                raise ForbiddenError('Only the salesperson or their manager can view this report')

        bookings = await self.booking_query_repo.list_by_booker_with_details(
            booked_by=salesperson_id
        )
        return CommissionReport.from_bookings(
            salesperson_id=salesperson_id,
            bookings=bookings,
            commission_rate=self.commission_rate,
        )
