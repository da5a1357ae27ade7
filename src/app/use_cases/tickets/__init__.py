"""Ticket use cases"""
from .issue_ticket import IssueTicket
from .check_ticket_number import CheckTicketNumber
from .confirm_ticket import ConfirmTicket
from .cancel_ticket import CancelTicket
from .dtos import IssueTicketCommandDTO, TicketDTO, TicketCheckDTO, TicketSettlementDTO

__all__ = [
    "IssueTicket",
    "CheckTicketNumber",
    "ConfirmTicket",
    "CancelTicket",
    "IssueTicketCommandDTO",
    "TicketDTO",
    "TicketCheckDTO",
    "TicketSettlementDTO",
]
