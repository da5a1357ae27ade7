"""ListTicketRanges Use Case

Lists the ranges handed over by an owner (and the owner's assistants).
"""

from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.ticket_range_repository import TicketRangeRepository
from src.app.repositories.user_repository import UserRepository
from .dtos import TicketRangeDTO


class ListTicketRanges:
    """
    Use case: List handed over ranges, newest first

    An assistant sees the ranges of their main owner plus their own;
    an owner sees their own.
    """

    def __init__(self, user_repo: UserRepository, range_repo: TicketRangeRepository):
        self.user_repo = user_repo
        self.range_repo = range_repo

    async def execute(self, user_id: str, manager_id: Optional[str] = None) -> Result[list[TicketRangeDTO]]:
        me = await self.user_repo.get_by_id(user_id)
        if not me:
            return Return.err(Error(code="USER_NOT_FOUND", message="User not found"))

        creator_ids = [me.main_owner_id, me.id] if me.main_owner_id else [me.id]
        ranges = await self.range_repo.list_created_by(creator_ids, manager_user_id=manager_id)

        related_ids = {r.manager_user_id for r in ranges} | {r.created_by_user_id for r in ranges}
        users = {uid: await self.user_repo.get_by_id(uid) for uid in related_ids}

        return Return.ok(
            [
                TicketRangeDTO.from_entity(
                    r,
                    manager=users.get(r.manager_user_id),
                    created_by=users.get(r.created_by_user_id),
                )
                for r in ranges
            ]
        )
