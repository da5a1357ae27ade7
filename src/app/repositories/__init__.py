from .user_repository import UserRepository
from .balance_history_repository import BalanceHistoryRepository
from .ticket_range_repository import TicketRangeRepository
from .ticket_repository import TicketRepository
from .sale_repository import SaleRepository

__all__ = [
    "UserRepository",
    "BalanceHistoryRepository",
    "TicketRangeRepository",
    "TicketRepository",
    "SaleRepository",
]
