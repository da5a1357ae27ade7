"""Balance ledger use cases"""
from .apply_balance_delta import ApplyBalanceDelta
from .reset_balance import ResetBalance
from .list_balance_history import ListBalanceHistory
from .reconcile_balances import ReconcileBalances
from .list_account_balances import ListAccountBalances
from .dtos import (
    BalanceDeltaCommandDTO,
    ResetBalanceCommandDTO,
    BalanceHistoryEntryDTO,
    BalanceHistoryPageDTO,
    PaginationDTO,
    BalanceDiscrepancyDTO,
    ReconciliationResultDTO,
    AccountBalanceDTO,
)

__all__ = [
    "ApplyBalanceDelta",
    "ResetBalance",
    "ListBalanceHistory",
    "ReconcileBalances",
    "ListAccountBalances",
    "BalanceDeltaCommandDTO",
    "ResetBalanceCommandDTO",
    "BalanceHistoryEntryDTO",
    "BalanceHistoryPageDTO",
    "PaginationDTO",
    "BalanceDiscrepancyDTO",
    "ReconciliationResultDTO",
    "AccountBalanceDTO",
]
