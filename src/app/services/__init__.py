from .unit_of_work import UnitOfWork
from .token_service import TokenService, TokenClaims, InvalidTokenError
from .balance_ledger import BalanceLedger, UserNotFoundError
from .ticket_settlement import TicketSettlement

__all__ = [
    "UnitOfWork",
    "TokenService",
    "TokenClaims",
    "InvalidTokenError",
    "BalanceLedger",
    "UserNotFoundError",
    "TicketSettlement",
]
