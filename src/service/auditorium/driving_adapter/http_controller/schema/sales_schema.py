from typing import List

from pydantic import BaseModel

from src.service.auditorium.domain.entity.commission_report_entity import CommissionReport
from src.service.auditorium.driving_adapter.http_controller.schema.booking_schema import (
    BookingViewResponse,
)


class CommissionReportResponse(BaseModel):
    salesperson_id: int
    commission_rate: float
    total_tickets: int
    active_tickets: int
    cancelled_tickets: int
    balcony_tickets: int
    ordinary_tickets: int
    total_sales_amount: float
    commission: float
    sales: List[BookingViewResponse]

    @classmethod
    def from_report(cls, report: CommissionReport) -> 'CommissionReportResponse':
        return cls(
            salesperson_id=report.salesperson_id,
            commission_rate=float(report.commission_rate),
            total_tickets=report.total_tickets,
            active_tickets=report.active_tickets,
            cancelled_tickets=report.cancelled_tickets,
            balcony_tickets=report.balcony_tickets,
            ordinary_tickets=report.ordinary_tickets,
            total_sales_amount=float(report.total_sales_amount),
            commission=float(report.commission),
            sales=[BookingViewResponse(**sale) for sale in report.sales],
        )
