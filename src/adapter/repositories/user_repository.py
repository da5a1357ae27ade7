"""SQLAlchemy implementation of UserRepository

Provides persistence for User entities with pessimistic locking support
for ledger writes.
"""

from decimal import Decimal
from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.user_repository import UserRepository
from src.domain.balance_history import BalanceType
from src.domain.user import User, UserRole


class SqlAlchemyUserRepository(UserRepository):
    """
    SQLAlchemy implementation of UserRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE (ignored by SQLite)
    - Balance fields written through update_balance_field only
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str, for_update: bool = False) -> Optional[User]:
        """
        Retrieve user by ID with optional row-level locking

        Args:
            user_id: User identifier
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(User.id == user_id)

        if for_update:
            # A row already in the identity map is reloaded, not reused
            stmt = stmt.with_for_update().execution_options(populate_existing=True)

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str, role: Optional[UserRole] = None) -> Optional[User]:
        stmt = select(User).where(User.email == email.strip().lower())
        if role is not None:
            stmt = stmt.where(User.role == role)

        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_by_role(self, role: UserRole) -> List[User]:
        stmt = select(User).where(User.role == role).order_by(User.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, user: User) -> User:
        user.email = user.email.strip().lower()
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update_balance_field(
        self, user_id: str, balance_type: BalanceType, new_value: Decimal
    ) -> None:
        """
        Write balance or debt_to_company

        Note:
            Should be called within a transaction with the user already locked
        """
        user = await self.get_by_id(user_id)
        if user:
            if balance_type == BalanceType.DEBT_TO_COMPANY:
                user.debt_to_company = new_value
            else:
                user.balance = new_value
            self.session.add(user)
            await self.session.flush()
