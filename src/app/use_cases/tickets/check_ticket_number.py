"""CheckTicketNumber Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.ticket_repository import TicketRepository
from src.domain.ticket import TicketStatus
from src.domain.ticket_number import TICKET_NUMBER_PATTERN
from .dtos import TicketCheckDTO, TicketDTO

STATUS_MESSAGES = {
    TicketStatus.SOLD: (True, "Ticket is ready to confirm"),
    TicketStatus.USED: (False, "Ticket already used"),
    TicketStatus.CANCELLED: (False, "Ticket cancelled"),
}


class CheckTicketNumber:
    """
    Use case: Look a ticket up by its printed number at the boarding point

    An unknown number is not an error: the response says the ticket is
    not valid.
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    async def execute(self, ticket_number: str) -> Result[TicketCheckDTO]:
        if not TICKET_NUMBER_PATTERN.fullmatch(ticket_number or ""):
            return Return.err(
                Error(
                    code="INVALID_TICKET_NUMBER",
                    message="Invalid ticket number format. Expected: AA00000000 (2 letters + 8 digits)",
                )
            )

        ticket = await self.ticket_repo.get_by_number(ticket_number)
        if not ticket:
            return Return.ok(
                TicketCheckDTO(is_valid=False, can_confirm=False, message="Ticket not found")
            )

        can_confirm, message = STATUS_MESSAGES[TicketStatus(ticket.ticket_status)]
        return Return.ok(
            TicketCheckDTO(
                is_valid=True,
                can_confirm=can_confirm,
                message=message,
                ticket=TicketDTO.from_entity(ticket),
            )
        )
