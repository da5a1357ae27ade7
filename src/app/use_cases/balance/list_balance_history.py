"""
List Balance History Use Case

Retrieves a user's ledger entries with filters and pagination.
"""
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.balance_history_repository import BalanceHistoryRepository
from src.app.repositories.user_repository import UserRepository
from src.domain.balance_history import BalanceType, TransactionType
from src.domain.user import UserRole
from .dtos import BalanceHistoryEntryDTO, BalanceHistoryPageDTO, PaginationDTO

LEDGER_HOLDER_ROLES = (UserRole.MANAGER, UserRole.PROMOTER)


class ListBalanceHistory:
    """
    Use case: View balance history

    Entries are ordered by created_at DESC (most recent first).
    When another user's history is requested, that user must exist and be
    a manager or promoter.
    """

    def __init__(self, user_repo: UserRepository, history_repo: BalanceHistoryRepository):
        self.user_repo = user_repo
        self.history_repo = history_repo

    async def execute(
        self,
        user_id: str,
        balance_type: Optional[BalanceType] = None,
        transaction_type: Optional[TransactionType] = None,
        page: int = 1,
        limit: int = 50,
        require_ledger_holder: bool = False,
    ) -> Result[BalanceHistoryPageDTO]:
        """
        List entries for a user

        Args:
            user_id: User whose ledger is listed
            balance_type: Optional field filter
            transaction_type: Optional direction filter
            page: 1-based page number
            limit: Page size
            require_ledger_holder: Reject users that are not managers/promoters
        """
        if require_ledger_holder:
            user = await self.user_repo.get_by_id(user_id)
            if not user:
                return Return.err(Error(code="USER_NOT_FOUND", message="User not found"))
            if user.role not in LEDGER_HOLDER_ROLES:
                return Return.err(
                    Error(
                        code="ROLE_NOT_ALLOWED",
                        message="Can only view balance history for managers and promoters",
                    )
                )

        page = max(page, 1)
        entries, total = await self.history_repo.list_by_user(
            user_id=user_id,
            balance_type=balance_type,
            transaction_type=transaction_type,
            limit=limit,
            offset=(page - 1) * limit,
        )

        return Return.ok(
            BalanceHistoryPageDTO(
                entries=[BalanceHistoryEntryDTO.from_entity(entry) for entry in entries],
                pagination=PaginationDTO.build(total=total, page=page, limit=limit),
            )
        )
