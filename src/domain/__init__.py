from .base import BaseModel, generate_uuid
from .user import User, UserRole
from .tour import Tour, CommissionType
from .sale import Sale, PaymentMethod, PaymentStatus
from .ticket import Ticket, TicketStatus
from .ticket_range import ManagerTicketRange
from .balance_history import BalanceHistory, BalanceType, TransactionType
from .ticket_number import TicketId, parse_ticket_number, format_ticket_number, validate_ticket_range
from .range_allocator import AvailableTicketNumbers

__all__ = [
    "BaseModel",
    "generate_uuid",
    "User",
    "UserRole",
    "Tour",
    "CommissionType",
    "Sale",
    "PaymentMethod",
    "PaymentStatus",
    "Ticket",
    "TicketStatus",
    "ManagerTicketRange",
    "BalanceHistory",
    "BalanceType",
    "TransactionType",
    "TicketId",
    "parse_ticket_number",
    "format_ticket_number",
    "validate_ticket_range",
    "AvailableTicketNumbers",
]
