"""GetMyTicketRanges Use Case"""

from libs.result import Result, Return
from src.app.repositories.ticket_range_repository import TicketRangeRepository
from .dtos import TicketRangeDTO


class GetMyTicketRanges:
    """Ranges handed to the calling manager, newest first"""

    def __init__(self, range_repo: TicketRangeRepository):
        self.range_repo = range_repo

    async def execute(self, manager_user_id: str) -> Result[list[TicketRangeDTO]]:
        ranges = await self.range_repo.list_by_manager(manager_user_id, newest_first=True)
        return Return.ok([TicketRangeDTO.from_entity(r) for r in ranges])
