"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.auditorium.app.command import (
    cancel_booking_use_case,
    create_booking_use_case,
    create_show_use_case,
    user_use_case,
)
from src.service.auditorium.app.query import (
    get_booking_use_case,
    get_commission_report_use_case,
    get_show_use_case,
    list_bookings_use_case,
    list_salespeople_use_case,
    list_shows_use_case,
)
from src.service.auditorium.driving_adapter.http_controller import user_controller


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    cancel_booking_use_case,
    create_show_use_case,
    user_use_case,
    get_booking_use_case,
    list_bookings_use_case,
    get_show_use_case,
    list_shows_use_case,
    get_commission_report_use_case,
    list_salespeople_use_case,
    user_controller,
]
