"""Ticket range use cases"""
from .create_ticket_range import CreateTicketRange
from .list_ticket_ranges import ListTicketRanges
from .get_my_ticket_ranges import GetMyTicketRanges
from .get_available_ticket_numbers import GetAvailableTicketNumbers
from .find_manager import FindManager
from .dtos import CreateTicketRangeCommandDTO, TicketRangeDTO, UserSummaryDTO, ManagerLookupDTO

__all__ = [
    "CreateTicketRange",
    "ListTicketRanges",
    "GetMyTicketRanges",
    "GetAvailableTicketNumbers",
    "FindManager",
    "CreateTicketRangeCommandDTO",
    "TicketRangeDTO",
    "UserSummaryDTO",
    "ManagerLookupDTO",
]
