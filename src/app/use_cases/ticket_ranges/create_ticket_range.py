"""CreateTicketRange Use Case

Hands a block of pre-printed ticket numbers to a manager.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.ticket_range_repository import TicketRangeRepository
from src.app.repositories.ticket_repository import TicketRepository
from src.app.repositories.user_repository import UserRepository
from src.domain.ticket_number import (
    first_overlap,
    format_ticket_number,
    numbers_in_range,
    validate_ticket_range,
)
from src.domain.ticket_range import ManagerTicketRange
from src.domain.user import UserRole
from .dtos import CreateTicketRangeCommandDTO, TicketRangeDTO

logger = logging.getLogger(__name__)


class CreateTicketRange:
    """
    Use Case: Create a manager ticket range

    Business Rules:
    1. Manager email is required
    2. The range passes validate_ticket_range (format, prefix, order, size)
    3. The manager exists, has the manager role and is active
    4. No number of the range is printed on an existing ticket
    5. No number of the range was handed to any manager before

    The checks read without locks: two concurrent creations may both pass.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        range_repo: TicketRangeRepository,
        ticket_repo: TicketRepository,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.range_repo = range_repo
        self.ticket_repo = ticket_repo

    async def execute(self, command: CreateTicketRangeCommandDTO) -> Result[TicketRangeDTO]:
        email = (command.manager_email or "").strip().lower()
        if not email:
            return Return.err(
                Error(code="MANAGER_EMAIL_REQUIRED", message="Manager email is required")
            )

        validation = validate_ticket_range(command.ticket_number_start, command.ticket_number_end)
        if validation.is_err():
            return validation
        start_id, end_id = validation.value
        start, end = format_ticket_number(start_id), format_ticket_number(end_id)

        try:
            manager = await self.user_repo.get_by_email(email, role=UserRole.MANAGER)
            if not manager or not manager.is_active:
                return Return.err(
                    Error(
                        code="MANAGER_NOT_FOUND",
                        message="No active manager with this email",
                    )
                )

            used = await self.ticket_repo.find_existing_numbers(numbers_in_range(start, end))
            if used:
                first_used = min(used)
                return Return.err(
                    Error(
                        code="TICKET_NUMBER_IN_USE",
                        message=f"Ticket number {first_used} is already in use. Choose another range.",
                    )
                )

            conflict = None
            for existing in await self.range_repo.list_all():
                overlap = first_overlap(
                    start, end, existing.ticket_number_start, existing.ticket_number_end
                )
                if overlap and (conflict is None or overlap < conflict[0]):
                    conflict = (overlap, existing)

            if conflict:
                number, existing = conflict
                holder = await self.user_repo.get_by_id(existing.manager_user_id)
                return Return.err(
                    Error(
                        code="TICKET_NUMBER_ASSIGNED",
                        message=(
                            f"Ticket number {number} was already handed over "
                            f"(manager {holder.email if holder else '-'}). "
                            "A handed over ticket cannot be handed over again. Choose another range."
                        ),
                    )
                )

            created = await self.range_repo.create(
                ManagerTicketRange(
                    manager_user_id=manager.id,
                    created_by_user_id=command.created_by_user_id,
                    ticket_number_start=start,
                    ticket_number_end=end,
                )
            )
            await self.uow.commit()

            logger.info(f"Range {start}-{end} handed to manager {manager.id} by {command.created_by_user_id}")
            return Return.ok(TicketRangeDTO.from_entity(created, manager=manager))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Creating range {start}-{end} failed: {e}")
            return Return.err(
                Error(
                    code="CREATE_TICKET_RANGE_FAILED",
                    message="Failed to create ticket range",
                    reason=str(e),
                )
            )
