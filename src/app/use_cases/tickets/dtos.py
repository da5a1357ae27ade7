"""Data Transfer Objects for Ticket Use Cases"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from src.app.use_cases.balance.dtos import BalanceHistoryEntryDTO
from src.domain.ticket import Ticket


class IssueTicketCommandDTO(BaseModel):
    """
    Command DTO for printing a ticket number on a manager's sale

    Used as input to IssueTicket use case.
    """

    manager_user_id: str = Field(..., description="Manager issuing the ticket")
    sale_id: Optional[str] = Field(default=None, description="Sale the ticket is issued for")
    ticket_number: Optional[str] = Field(default=None, description="Pre-printed number, AA00000000")


class TicketDTO(BaseModel):
    """Response DTO for a ticket"""

    id: str
    sale_id: str
    tour_id: str
    ticket_number: Optional[str] = None
    ticket_status: str
    adult_count: int
    child_count: int
    used_at: Optional[datetime] = None
    used_by_user_id: Optional[str] = None
    cancelled_at: Optional[datetime] = None
    cancelled_by_user_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, ticket: Ticket) -> "TicketDTO":
        status = ticket.ticket_status
        return cls(
            id=ticket.id,
            sale_id=ticket.sale_id,
            tour_id=ticket.tour_id,
            ticket_number=ticket.ticket_number,
            ticket_status=status.value if hasattr(status, "value") else status,
            adult_count=ticket.adult_count,
            child_count=ticket.child_count,
            used_at=ticket.used_at,
            used_by_user_id=ticket.used_by_user_id,
            cancelled_at=ticket.cancelled_at,
            cancelled_by_user_id=ticket.cancelled_by_user_id,
            created_at=ticket.created_at,
        )


class TicketCheckDTO(BaseModel):
    """Response DTO for CheckTicketNumber"""

    is_valid: bool
    can_confirm: bool
    message: str
    ticket: Optional[TicketDTO] = None


class TicketSettlementDTO(BaseModel):
    """Response DTO for ConfirmTicket and CancelTicket"""

    ticket: TicketDTO
    ledger_entries: List[BalanceHistoryEntryDTO]
