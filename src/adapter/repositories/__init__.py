from .user_repository import SqlAlchemyUserRepository
from .balance_history_repository import SqlAlchemyBalanceHistoryRepository
from .ticket_range_repository import SqlAlchemyTicketRangeRepository
from .ticket_repository import SqlAlchemyTicketRepository
from .sale_repository import SqlAlchemySaleRepository

__all__ = [
    "SqlAlchemyUserRepository",
    "SqlAlchemyBalanceHistoryRepository",
    "SqlAlchemyTicketRangeRepository",
    "SqlAlchemyTicketRepository",
    "SqlAlchemySaleRepository",
]
