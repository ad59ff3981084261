from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.auditorium.domain.entity.show_entity import Show


class IShowQueryRepo(ABC):
    """Repository interface for show/inventory read operations"""

    @abstractmethod
    async def get_by_id(self, *, show_id: int) -> Optional[Show]:
        """Show with its performances and seat categories, None if absent"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Show]:
        pass
