from enum import StrEnum
from typing import Any, Optional


class SeatType(StrEnum):
    BALCONY = 'balcony'
    ORDINARY = 'ordinary'

    @classmethod
    def _missing_(cls, value: Any) -> Optional['SeatType']:
        # Accept 'Balcony' / 'ORDINARY' from older clients
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None
