from enum import StrEnum


class BookingStatus(StrEnum):
    ACTIVE = 'active'
    CANCELLED = 'cancelled'
