"""SQLAlchemy implementation of SaleRepository"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.sale_repository import SaleRepository
from src.domain.sale import Sale
from src.domain.tour import Tour


class SqlAlchemySaleRepository(SaleRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, sale_id: str) -> Optional[Sale]:
        result = await self.session.execute(select(Sale).where(Sale.id == sale_id))
        return result.scalar_one_or_none()

    async def get_tour(self, tour_id: str) -> Optional[Tour]:
        result = await self.session.execute(select(Tour).where(Tour.id == tour_id))
        return result.scalar_one_or_none()

    async def update(self, sale: Sale) -> Sale:
        self.session.add(sale)
        await self.session.flush()
        return sale
