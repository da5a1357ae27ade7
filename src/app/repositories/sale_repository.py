"""Sale and Tour Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.sale import Sale
from src.domain.tour import Tour


class SaleRepository(ABC):

    @abstractmethod
    async def get_by_id(self, sale_id: str) -> Optional[Sale]:
        pass

    @abstractmethod
    async def get_tour(self, tour_id: str) -> Optional[Tour]:
        pass

    @abstractmethod
    async def update(self, sale: Sale) -> Sale:
        pass
