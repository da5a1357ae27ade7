"""SQLAlchemy implementation of TicketRepository"""

from typing import Iterable, List, Optional, Set
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.ticket_repository import TicketRepository
from src.domain.ticket import Ticket

# Keeps IN (...) lists below the bound-parameter limit of SQLite
IN_CLAUSE_CHUNK = 500


class SqlAlchemyTicketRepository(TicketRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, ticket_id: str, for_update: bool = False) -> Optional[Ticket]:
        stmt = select(Ticket).where(Ticket.id == ticket_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_number(self, ticket_number: str) -> Optional[Ticket]:
        result = await self.session.execute(select(Ticket).where(Ticket.ticket_number == ticket_number))
        return result.scalar_one_or_none()

    async def get_by_sale_id(self, sale_id: str) -> Optional[Ticket]:
        result = await self.session.execute(select(Ticket).where(Ticket.sale_id == sale_id))
        return result.scalars().first()

    async def create(self, ticket: Ticket) -> Ticket:
        self.session.add(ticket)
        await self.session.flush()
        await self.session.refresh(ticket)
        return ticket

    async def update(self, ticket: Ticket) -> Ticket:
        self.session.add(ticket)
        await self.session.flush()
        return ticket

    async def get_used_numbers(self) -> Set[str]:
        stmt = select(Ticket.ticket_number).where(Ticket.ticket_number.is_not(None))
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def find_existing_numbers(self, ticket_numbers: Iterable[str]) -> List[str]:
        numbers = list(ticket_numbers)
        found: List[str] = []
        for i in range(0, len(numbers), IN_CLAUSE_CHUNK):
            chunk = numbers[i:i + IN_CLAUSE_CHUNK]
            stmt = select(Ticket.ticket_number).where(Ticket.ticket_number.in_(chunk))
            result = await self.session.execute(stmt)
            found.extend(result.scalars().all())
        return sorted(found)
