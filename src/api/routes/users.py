"""User Balance API Routes

Owner payouts (balance/debt resets), account balance overviews and
balance history listings.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories import SqlAlchemyBalanceHistoryRepository, SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.auth import CurrentUser, require_access
from src.api.error import ClientError
from src.api.schemas.envelope import Envelope, ok
from src.app.services.balance_ledger import BalanceLedger
from src.app.use_cases.balance import (
    AccountBalanceDTO,
    BalanceHistoryEntryDTO,
    BalanceHistoryPageDTO,
    ListAccountBalances,
    ListBalanceHistory,
    ResetBalance,
    ResetBalanceCommandDTO,
)
from src.depends import get_session
from src.domain.balance_history import BalanceType, TransactionType
from src.domain.user import UserRole

router = APIRouter(prefix="/users", tags=["Users"])


async def _reset(session: AsyncSession, user_id: str, balance_type: BalanceType, owner: CurrentUser):
    user_repo = SqlAlchemyUserRepository(session)
    ledger = BalanceLedger(user_repo, SqlAlchemyBalanceHistoryRepository(session))
    use_case = ResetBalance(SqlAlchemyUnitOfWork(session), user_repo, ledger)

    result = await use_case.execute(
        ResetBalanceCommandDTO(
            user_id=user_id,
            balance_type=balance_type,
            performed_by_user_id=owner.id,
        )
    )

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)


async def _account_balances(session: AsyncSession, role: UserRole):
    result = await ListAccountBalances(SqlAlchemyUserRepository(session)).execute(role)

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)


@router.get(
    "/managers",
    response_model=Envelope[List[AccountBalanceDTO]],
    status_code=status.HTTP_200_OK,
)
async def list_managers(
    current_user: CurrentUser = Depends(require_access("users.managers")),
    session: AsyncSession = Depends(get_session),
):
    """Managers with balance and debt_to_company, newest first."""
    return await _account_balances(session, UserRole.MANAGER)


@router.get(
    "/promoters",
    response_model=Envelope[List[AccountBalanceDTO]],
    status_code=status.HTTP_200_OK,
)
async def list_promoters(
    current_user: CurrentUser = Depends(require_access("users.promoters")),
    session: AsyncSession = Depends(get_session),
):
    """Promoters with their commission balance, newest first."""
    return await _account_balances(session, UserRole.PROMOTER)


@router.post(
    "/{user_id}/reset-balance",
    response_model=Envelope[BalanceHistoryEntryDTO],
    status_code=status.HTTP_200_OK,
)
async def reset_balance(
    user_id: str,
    current_user: CurrentUser = Depends(require_access("users.reset_balance")),
    session: AsyncSession = Depends(get_session),
):
    """
    Pay out a manager or promoter: balance becomes 0.

    **Returns:**
    - 200: The ledger entry of the payout
    - 400: Target is not a manager or promoter
    - 404: User not found
    """
    return await _reset(session, user_id, BalanceType.BALANCE, current_user)


@router.post(
    "/{user_id}/reset-debt",
    response_model=Envelope[BalanceHistoryEntryDTO],
    status_code=status.HTTP_200_OK,
)
async def reset_debt(
    user_id: str,
    current_user: CurrentUser = Depends(require_access("users.reset_debt")),
    session: AsyncSession = Depends(get_session),
):
    """
    Settle a manager's debt to the company: debt_to_company becomes 0.

    **Returns:**
    - 200: The ledger entry of the reset
    - 400: Target is not a manager
    - 404: User not found
    """
    return await _reset(session, user_id, BalanceType.DEBT_TO_COMPANY, current_user)


@router.get(
    "/me/balance-history",
    response_model=Envelope[BalanceHistoryPageDTO],
    status_code=status.HTTP_200_OK,
)
async def get_my_balance_history(
    balance_type: Optional[BalanceType] = Query(default=None),
    transaction_type: Optional[TransactionType] = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=200),
    current_user: CurrentUser = Depends(require_access("users.my_balance_history")),
    session: AsyncSession = Depends(get_session),
):
    """Ledger entries of the caller, newest first."""
    use_case = ListBalanceHistory(SqlAlchemyUserRepository(session), SqlAlchemyBalanceHistoryRepository(session))
    result = await use_case.execute(
        current_user.id,
        balance_type=balance_type,
        transaction_type=transaction_type,
        page=page,
        limit=limit,
    )

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)


@router.get(
    "/{user_id}/balance-history",
    response_model=Envelope[BalanceHistoryPageDTO],
    status_code=status.HTTP_200_OK,
)
async def get_balance_history(
    user_id: str,
    balance_type: Optional[BalanceType] = Query(default=None),
    transaction_type: Optional[TransactionType] = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=200),
    current_user: CurrentUser = Depends(require_access("users.balance_history")),
    session: AsyncSession = Depends(get_session),
):
    """
    Ledger entries of a manager or promoter, newest first.

    **Returns:**
    - 200: Entries and pagination
    - 400: User is not a manager or promoter
    - 404: User not found
    """
    use_case = ListBalanceHistory(SqlAlchemyUserRepository(session), SqlAlchemyBalanceHistoryRepository(session))
    result = await use_case.execute(
        user_id,
        balance_type=balance_type,
        transaction_type=transaction_type,
        page=page,
        limit=limit,
        require_ledger_holder=True,
    )

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)
