from abc import ABC, abstractmethod

from src.service.auditorium.domain.entity.show_entity import Show


class IShowCommandRepo(ABC):
    """Repository interface for show/inventory write operations"""

    @abstractmethod
    async def save(self, *, show: Show) -> Show:
        """Insert a new show tree, or write back seat counts of an existing one"""
        pass

    @abstractmethod
    async def decrement_available_seats(self, *, seat_category_id: int) -> bool:
        """Take one seat only if one is left. False when sold out."""
        pass

    @abstractmethod
    async def increment_available_seats(self, *, seat_category_id: int) -> bool:
        """Give one seat back only below total_seats. False when already full."""
        pass
