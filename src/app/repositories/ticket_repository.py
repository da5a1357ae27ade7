"""Ticket Repository Interface"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Set
from src.domain.ticket import Ticket


class TicketRepository(ABC):

    @abstractmethod
    async def get_by_id(self, ticket_id: str, for_update: bool = False) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def get_by_number(self, ticket_number: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def get_by_sale_id(self, sale_id: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def create(self, ticket: Ticket) -> Ticket:
        pass

    @abstractmethod
    async def update(self, ticket: Ticket) -> Ticket:
        pass

    @abstractmethod
    async def get_used_numbers(self) -> Set[str]:
        """Every ticket number already printed on an issued ticket"""
        pass

    @abstractmethod
    async def find_existing_numbers(self, ticket_numbers: Iterable[str]) -> List[str]:
        """Subset of ticket_numbers already used by some ticket"""
        pass
