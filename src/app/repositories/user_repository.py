"""User Repository Interface

Defines the contract for user persistence, including the balance fields
the ledger mutates.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional
from src.domain.balance_history import BalanceType
from src.domain.user import User, UserRole


class UserRepository(ABC):
    """
    Repository interface for User persistence

    Balance reads made before a ledger write lock the row
    (SELECT FOR UPDATE) where the database supports it.
    """

    @abstractmethod
    async def get_by_id(self, user_id: str, for_update: bool = False) -> Optional[User]:
        """
        Retrieve user by ID

        Args:
            user_id: User identifier
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str, role: Optional[UserRole] = None) -> Optional[User]:
        """
        Retrieve user by email (case-insensitive), optionally restricted to a role
        """
        pass

    @abstractmethod
    async def list_by_role(self, role: UserRole) -> List[User]:
        """Users with the given role, newest accounts first"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        pass

    @abstractmethod
    async def update_balance_field(
        self, user_id: str, balance_type: BalanceType, new_value: Decimal
    ) -> None:
        """
        Write balance or debt_to_company

        Args:
            user_id: User ID
            balance_type: Which field to write
            new_value: New field value

        Note:
            Must only be called by the balance ledger, inside the transaction
            that also appends the matching BalanceHistory row
        """
        pass
