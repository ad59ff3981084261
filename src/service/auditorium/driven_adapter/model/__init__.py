"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.auditorium.driven_adapter.model.booking_model import BookingModel
from src.service.auditorium.driven_adapter.model.show_model import (
    PerformanceModel,
    SeatCategoryModel,
    ShowModel,
)
from src.service.auditorium.driven_adapter.model.user_model import UserModel

__all__ = [
    'BookingModel',
    'PerformanceModel',
    'SeatCategoryModel',
    'ShowModel',
    'UserModel',
]
