"""Manager Ticket Range Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from src.domain.ticket_range import ManagerTicketRange


class TicketRangeRepository(ABC):

    @abstractmethod
    async def create(self, ticket_range: ManagerTicketRange) -> ManagerTicketRange:
        pass

    @abstractmethod
    async def list_by_manager(self, manager_user_id: str, newest_first: bool = True) -> List[ManagerTicketRange]:
        """
        Ranges handed to a manager

        Args:
            manager_user_id: Manager identifier
            newest_first: Order by created_at DESC if True, ASC (assignment order) otherwise
        """
        pass

    @abstractmethod
    async def list_created_by(
        self, creator_ids: Sequence[str], manager_user_id: Optional[str] = None
    ) -> List[ManagerTicketRange]:
        """Ranges created by any of creator_ids, newest first"""
        pass

    @abstractmethod
    async def list_all(self) -> List[ManagerTicketRange]:
        """Every range in the system (used for overlap checks)"""
        pass
