"""GetAvailableTicketNumbers Use Case

Lists the numbers a manager can still print on tickets.
"""

from itertools import islice
from libs.result import Result, Return
from src.app.repositories.ticket_range_repository import TicketRangeRepository
from src.app.repositories.ticket_repository import TicketRepository
from src.domain.range_allocator import AvailableTicketNumbers

DEFAULT_MAX_AVAILABLE = 2000


class GetAvailableTicketNumbers:
    """
    Use case: Available ticket numbers of a manager

    Business Rules:
    1. Ranges are walked in assignment order, ascending inside each range
    2. Numbers printed on any ticket are skipped
    3. At most max_results numbers are returned
    4. Best effort: nothing is reserved, a number may be taken before use
    """

    def __init__(
        self,
        range_repo: TicketRangeRepository,
        ticket_repo: TicketRepository,
        max_results: int = DEFAULT_MAX_AVAILABLE,
    ):
        self.range_repo = range_repo
        self.ticket_repo = ticket_repo
        self.max_results = max_results

    async def execute(self, manager_user_id: str) -> Result[list[str]]:
        ranges = await self.range_repo.list_by_manager(manager_user_id, newest_first=False)
        used = await self.ticket_repo.get_used_numbers()

        available = AvailableTicketNumbers(
            ((r.ticket_number_start, r.ticket_number_end) for r in ranges),
            used,
        )
        return Return.ok(list(islice(available, self.max_results)))
