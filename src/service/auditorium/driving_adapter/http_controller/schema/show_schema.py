from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.auditorium.domain.entity.show_entity import Show
from src.service.auditorium.domain.enum.seat_type import SeatType


class SeatCategoryRequest(BaseModel):
    category: SeatType
    total_seats: int = Field(..., ge=0)
    price: Decimal = Field(..., ge=0)


class PerformanceRequest(BaseModel):
    timing: str = Field(..., min_length=1)
    seat_categories: List[SeatCategoryRequest]


class ShowCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'show_date': '2026-12-24',
                'number_of_shows': 2,
                'performances': [
                    {
                        'timing': '14:00',
                        'seat_categories': [
                            {'category': 'balcony', 'total_seats': 10, 'price': 300},
                            {'category': 'ordinary', 'total_seats': 50, 'price': 200},
                        ],
                    },
                    {
                        'timing': '19:30',
                        'seat_categories': [
                            {'category': 'balcony', 'total_seats': 10, 'price': 350},
                            {'category': 'ordinary', 'total_seats': 50, 'price': 250},
                        ],
                    },
                ],
            }
        }
    )

    show_date: date
    number_of_shows: int = Field(..., ge=1)
    performances: List[PerformanceRequest]


class SeatCategoryResponse(BaseModel):
    id: int
    category: SeatType
    total_seats: int
    available_seats: int
    price: float


class PerformanceResponse(BaseModel):
    id: int
    timing: str
    seat_categories: List[SeatCategoryResponse]


class ShowResponse(BaseModel):
    id: int
    show_date: date
    number_of_shows: int
    manager_id: int
    created_at: Optional[datetime] = None
    performances: List[PerformanceResponse]

    @classmethod
    def from_entity(cls, show: Show) -> 'ShowResponse':
        return cls(
            id=show.id or 0,
            show_date=show.show_date,
            number_of_shows=show.number_of_shows,
            manager_id=show.manager_id,
            created_at=show.created_at,
            performances=[
                PerformanceResponse(
                    id=performance.id or 0,
                    timing=performance.timing,
                    seat_categories=[
                        SeatCategoryResponse(
                            id=seat_category.id or 0,
                            category=seat_category.category,
                            total_seats=seat_category.total_seats,
                            available_seats=seat_category.available_seats,
                            price=float(seat_category.price),
                        )
                        for seat_category in performance.seat_categories
                    ],
                )
                for performance in show.performances
            ],
        )
