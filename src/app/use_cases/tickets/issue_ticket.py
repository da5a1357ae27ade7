"""IssueTicket Use Case

A manager prints one of their ticket numbers on a cash/acquiring sale.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.sale_repository import SaleRepository
from src.app.repositories.ticket_repository import TicketRepository
from src.domain.sale import PaymentStatus
from src.domain.ticket import Ticket, TicketStatus
from src.domain.ticket_number import format_ticket_number, parse_ticket_number
from .dtos import IssueTicketCommandDTO, TicketDTO

logger = logging.getLogger(__name__)


class IssueTicket:
    """
    Use Case: Issue a numbered ticket for a sale

    Business Rules:
    1. sale_id and ticket_number are required
    2. ticket_number matches AA00000000
    3. The sale belongs to the manager (as seller or promoter)
    4. One ticket per sale
    5. Ticket numbers are globally unique
    6. The sale becomes completed
    """

    def __init__(self, uow: UnitOfWork, sale_repo: SaleRepository, ticket_repo: TicketRepository):
        self.uow = uow
        self.sale_repo = sale_repo
        self.ticket_repo = ticket_repo

    async def execute(self, command: IssueTicketCommandDTO) -> Result[TicketDTO]:
        if not command.sale_id or not command.ticket_number:
            return Return.err(
                Error(code="VALIDATION_ERROR", message="sale_id and ticket_number are required")
            )

        ticket_id = parse_ticket_number(command.ticket_number.strip())
        if ticket_id is None:
            return Return.err(
                Error(
                    code="INVALID_TICKET_NUMBER",
                    message="Invalid ticket number format. Expected: AA00000000 (2 letters + 8 digits)",
                )
            )
        ticket_number = format_ticket_number(ticket_id)

        try:
            sale = await self.sale_repo.get_by_id(command.sale_id)
            if not sale:
                return Return.err(Error(code="SALE_NOT_FOUND", message="Sale not found"))

            if command.manager_user_id not in (sale.seller_user_id, sale.promoter_user_id):
                return Return.err(
                    Error(
                        code="SALE_NOT_OWNED",
                        message="You can only create tickets for your own sales",
                    )
                )

            if await self.ticket_repo.get_by_sale_id(sale.id):
                return Return.err(
                    Error(code="TICKET_ALREADY_EXISTS", message="Ticket already exists for this sale")
                )

            if await self.ticket_repo.get_by_number(ticket_number):
                return Return.err(
                    Error(code="TICKET_NUMBER_IN_USE", message="Ticket number already exists")
                )

            ticket = await self.ticket_repo.create(
                Ticket(
                    sale_id=sale.id,
                    tour_id=sale.tour_id,
                    ticket_number=ticket_number,
                    ticket_status=TicketStatus.SOLD,
                    adult_count=sale.adult_count,
                    child_count=sale.child_count,
                )
            )

            sale.payment_status = PaymentStatus.COMPLETED
            await self.sale_repo.update(sale)
            await self.uow.commit()

            logger.info(f"Ticket {ticket_number} issued for sale {sale.id} by {command.manager_user_id}")
            return Return.ok(TicketDTO.from_entity(ticket))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Issuing ticket {ticket_number} failed: {e}")
            return Return.err(
                Error(code="ISSUE_TICKET_FAILED", message="Failed to issue ticket", reason=str(e))
            )
