"""Balance History Repository Interface

Defines the contract for ledger entry persistence.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from src.domain.balance_history import BalanceHistory, BalanceType, TransactionType


class BalanceHistoryRepository(ABC):
    """
    Repository interface for BalanceHistory persistence

    Entries are immutable and append-only: there is no update or delete.
    """

    @abstractmethod
    async def create(self, entry: BalanceHistory) -> BalanceHistory:
        """
        Append a ledger entry

        Args:
            entry: BalanceHistory entity to persist

        Returns:
            Created BalanceHistory with generated ID
        """
        pass

    @abstractmethod
    async def list_by_user(
        self,
        user_id: str,
        balance_type: Optional[BalanceType] = None,
        transaction_type: Optional[TransactionType] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[BalanceHistory], int]:
        """
        Retrieve a user's entries, newest first

        Returns:
            (entries on the requested page, total matching entries)
        """
        pass

    @abstractmethod
    async def get_signed_sums(self) -> Dict[Tuple[str, BalanceType], Decimal]:
        """
        Sum of credits minus debits per (user_id, balance_type)

        Used by reconciliation to rebuild balances from the ledger.
        """
        pass
