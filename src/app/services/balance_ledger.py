"""Balance Ledger Service

Applies balance/debt deltas to users and records each one as an immutable
BalanceHistory entry with before/after snapshots.
"""

import logging
from decimal import Decimal
from typing import Optional
from src.app.repositories.balance_history_repository import BalanceHistoryRepository
from src.app.repositories.user_repository import UserRepository
from src.domain.balance_history import BalanceHistory, BalanceType, TransactionType

logger = logging.getLogger(__name__)


class UserNotFoundError(Exception):
    def __init__(self, user_id: str):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


def current_value(user, balance_type: BalanceType) -> Decimal:
    if balance_type == BalanceType.DEBT_TO_COMPANY:
        return Decimal(user.debt_to_company or 0)
    return Decimal(user.balance or 0)


def apply_transaction(before: Decimal, transaction_type: TransactionType, amount: Decimal) -> Decimal:
    if transaction_type == TransactionType.CREDIT:
        return before + amount
    return before - amount


class BalanceLedger:
    """
    Append-only ledger over the users' balance fields

    Business Rules:
    1. Every field mutation is paired with exactly one BalanceHistory entry
    2. balance_after = balance_before + amount (credit) or - amount (debit)
    3. No negative-balance guard: callers decide what is permissible
    4. The ledger flushes but never commits; the caller's unit of work
       commits or rolls back both writes together

    Flow:
    1. Get user with lock (SELECT FOR UPDATE)
    2. Compute balance_after
    3. Append ledger entry
    4. Write the user field
    """

    def __init__(self, user_repo: UserRepository, history_repo: BalanceHistoryRepository):
        self.user_repo = user_repo
        self.history_repo = history_repo

    async def apply_delta(
        self,
        user_id: str,
        balance_type: BalanceType,
        transaction_type: TransactionType,
        amount: Decimal,
        description: str,
        performed_by_user_id: Optional[str] = None,
        ticket_id: Optional[str] = None,
        sale_id: Optional[str] = None,
    ) -> BalanceHistory:
        """
        Apply one delta and record it

        Raises:
            UserNotFoundError: If user_id does not exist
            ValueError: If amount is negative
        """
        amount = Decimal(amount)
        if amount < 0:
            raise ValueError(f"Ledger amount must be non-negative, got {amount}")

        user = await self.user_repo.get_by_id(user_id, for_update=True)
        if not user:
            raise UserNotFoundError(user_id)

        balance_before = current_value(user, balance_type)
        balance_after = apply_transaction(balance_before, transaction_type, amount)

        entry = await self.history_repo.create(
            BalanceHistory(
                user_id=user_id,
                balance_type=balance_type,
                transaction_type=transaction_type,
                amount=amount,
                balance_before=balance_before,
                balance_after=balance_after,
                description=description,
                ticket_id=ticket_id,
                sale_id=sale_id,
                performed_by_user_id=performed_by_user_id,
            )
        )

        await self.user_repo.update_balance_field(user_id, balance_type, balance_after)

        logger.info(
            f"Ledger {transaction_type.value} of {amount} on {balance_type.value} "
            f"for user {user_id}: {balance_before} -> {balance_after}"
        )
        return entry

    async def reset(
        self,
        user_id: str,
        balance_type: BalanceType,
        description: str,
        performed_by_user_id: Optional[str] = None,
    ) -> BalanceHistory:
        """
        Bring a field to zero with a single entry

        A positive value is debited, a negative one credited, so the entry
        amount stays non-negative and balance_after is always zero.
        """
        user = await self.user_repo.get_by_id(user_id, for_update=True)
        if not user:
            raise UserNotFoundError(user_id)

        before = current_value(user, balance_type)
        transaction_type = TransactionType.DEBIT if before >= 0 else TransactionType.CREDIT
        return await self.apply_delta(
            user_id=user_id,
            balance_type=balance_type,
            transaction_type=transaction_type,
            amount=abs(before),
            description=description,
            performed_by_user_id=performed_by_user_id,
        )
