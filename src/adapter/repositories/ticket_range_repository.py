"""SQLAlchemy implementation of TicketRangeRepository"""

from typing import List, Optional, Sequence
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.ticket_range_repository import TicketRangeRepository
from src.domain.ticket_range import ManagerTicketRange


class SqlAlchemyTicketRangeRepository(TicketRangeRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, ticket_range: ManagerTicketRange) -> ManagerTicketRange:
        self.session.add(ticket_range)
        await self.session.flush()
        await self.session.refresh(ticket_range)
        return ticket_range

    async def list_by_manager(self, manager_user_id: str, newest_first: bool = True) -> List[ManagerTicketRange]:
        order = ManagerTicketRange.created_at.desc() if newest_first else ManagerTicketRange.created_at.asc()
        stmt = (
            select(ManagerTicketRange)
            .where(ManagerTicketRange.manager_user_id == manager_user_id)
            .order_by(order)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_created_by(
        self, creator_ids: Sequence[str], manager_user_id: Optional[str] = None
    ) -> List[ManagerTicketRange]:
        stmt = select(ManagerTicketRange).where(ManagerTicketRange.created_by_user_id.in_(list(creator_ids)))
        if manager_user_id:
            stmt = stmt.where(ManagerTicketRange.manager_user_id == manager_user_id)
        stmt = stmt.order_by(ManagerTicketRange.created_at.desc())

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_all(self) -> List[ManagerTicketRange]:
        result = await self.session.execute(select(ManagerTicketRange))
        return list(result.scalars().all())
