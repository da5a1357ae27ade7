"""SQLAlchemy implementation of BalanceHistoryRepository

Append-only persistence for ledger entries.
"""

from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from sqlalchemy import case, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.balance_history_repository import BalanceHistoryRepository
from src.domain.balance_history import BalanceHistory, BalanceType, TransactionType


class SqlAlchemyBalanceHistoryRepository(BalanceHistoryRepository):
    """
    SQLAlchemy implementation of BalanceHistoryRepository

    Features:
    - Immutable append-only entries
    - Filtered, paginated listing newest first
    - Signed sums for reconciliation
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: BalanceHistory) -> BalanceHistory:
        """
        Append a ledger entry

        Args:
            entry: BalanceHistory entity to persist

        Returns:
            Created BalanceHistory with generated ID
        """
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def list_by_user(
        self,
        user_id: str,
        balance_type: Optional[BalanceType] = None,
        transaction_type: Optional[TransactionType] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[BalanceHistory], int]:
        conditions = [BalanceHistory.user_id == user_id]
        if balance_type is not None:
            conditions.append(BalanceHistory.balance_type == balance_type)
        if transaction_type is not None:
            conditions.append(BalanceHistory.transaction_type == transaction_type)

        count_stmt = select(func.count()).select_from(BalanceHistory).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(BalanceHistory)
            .where(*conditions)
            .order_by(BalanceHistory.created_at.desc(), BalanceHistory.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def get_signed_sums(self) -> Dict[Tuple[str, BalanceType], Decimal]:
        signed = case(
            (BalanceHistory.transaction_type == TransactionType.DEBIT, -BalanceHistory.amount),
            else_=BalanceHistory.amount,
        )
        stmt = select(
            BalanceHistory.user_id,
            BalanceHistory.balance_type,
            func.sum(signed),
        ).group_by(BalanceHistory.user_id, BalanceHistory.balance_type)

        result = await self.session.execute(stmt)
        return {
            (user_id, BalanceType(balance_type)): Decimal(str(total or 0))
            for user_id, balance_type, total in result.all()
        }
