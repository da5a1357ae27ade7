"""ConfirmTicket Use Case

A partner confirms a sold ticket at boarding; the sale is settled in the
balance ledger.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.ticket_settlement import TicketSettlement
from src.app.repositories.sale_repository import SaleRepository
from src.app.repositories.ticket_repository import TicketRepository
from src.app.use_cases.balance.dtos import BalanceHistoryEntryDTO
from src.domain.ticket import TicketStatus
from .dtos import TicketDTO, TicketSettlementDTO

logger = logging.getLogger(__name__)


class ConfirmTicket:
    """
    Use Case: Confirm (use) a ticket

    Business Rules:
    1. Only sold tickets can be confirmed
    2. Status change and ledger entries commit together
    """

    def __init__(
        self,
        uow: UnitOfWork,
        ticket_repo: TicketRepository,
        sale_repo: SaleRepository,
        settlement: TicketSettlement,
    ):
        self.uow = uow
        self.ticket_repo = ticket_repo
        self.sale_repo = sale_repo
        self.settlement = settlement

    async def execute(self, ticket_id: str, performed_by_user_id: str) -> Result[TicketSettlementDTO]:
        try:
            ticket = await self.ticket_repo.get_by_id(ticket_id, for_update=True)
            if not ticket:
                return Return.err(Error(code="TICKET_NOT_FOUND", message="Ticket not found"))

            if ticket.ticket_status != TicketStatus.SOLD:
                return Return.err(
                    Error(
                        code="TICKET_STATUS_CONFLICT",
                        message="Ticket already used or cancelled",
                        reason=f"status={ticket.ticket_status}",
                    )
                )

            sale = await self.sale_repo.get_by_id(ticket.sale_id)
            if not sale:
                return Return.err(Error(code="SALE_NOT_FOUND", message="Sale not found"))

            ticket.ticket_status = TicketStatus.USED
            ticket.used_at = datetime.utcnow()
            ticket.used_by_user_id = performed_by_user_id
            await self.ticket_repo.update(ticket)

            entries = await self.settlement.settle_confirmation(ticket, sale, performed_by_user_id)
            await self.uow.commit()

            logger.info(f"Ticket {ticket.id} confirmed by {performed_by_user_id}, {len(entries)} ledger entries")
            return Return.ok(
                TicketSettlementDTO(
                    ticket=TicketDTO.from_entity(ticket),
                    ledger_entries=[BalanceHistoryEntryDTO.from_entity(e) for e in entries],
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Confirming ticket {ticket_id} failed: {e}")
            return Return.err(
                Error(code="CONFIRM_TICKET_FAILED", message="Failed to confirm ticket", reason=str(e))
            )
