"""ResetBalance Use Case

Owner payout: brings a manager's or promoter's balance, or a manager's
debt to the company, down to zero with one ledger entry.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.balance_ledger import BalanceLedger
from src.app.repositories.user_repository import UserRepository
from src.domain.balance_history import BalanceType
from src.domain.user import UserRole
from .dtos import ResetBalanceCommandDTO, BalanceHistoryEntryDTO

logger = logging.getLogger(__name__)

RESET_RULES = {
    BalanceType.BALANCE: (
        (UserRole.MANAGER, UserRole.PROMOTER),
        "Can only reset balance for managers and promoters",
        "Paid out by owner, balance reset",
    ),
    BalanceType.DEBT_TO_COMPANY: (
        (UserRole.MANAGER,),
        "Can only reset debt for managers",
        "Paid out by owner, debt reset",
    ),
}


class ResetBalance:
    """
    Use Case: Reset a balance field to zero

    Business Rules:
    1. balance can be reset for managers and promoters
    2. debt_to_company can be reset for managers only
    3. Any other target role is a conflict, whoever the caller is
    4. Exactly one ledger entry with balance_after = 0
    """

    def __init__(self, uow: UnitOfWork, user_repo: UserRepository, ledger: BalanceLedger):
        self.uow = uow
        self.user_repo = user_repo
        self.ledger = ledger

    async def execute(self, command: ResetBalanceCommandDTO) -> Result[BalanceHistoryEntryDTO]:
        allowed_roles, role_message, description = RESET_RULES[command.balance_type]

        try:
            user = await self.user_repo.get_by_id(command.user_id)
            if not user:
                return Return.err(Error(code="USER_NOT_FOUND", message="User not found"))

            if user.role not in allowed_roles:
                logger.warning(
                    f"Rejected {command.balance_type.value} reset for user {user.id} with role {user.role}"
                )
                return Return.err(
                    Error(
                        code="ROLE_NOT_ALLOWED",
                        message=role_message,
                        reason=f"role={getattr(user.role, 'value', user.role)}",
                    )
                )

            entry = await self.ledger.reset(
                user_id=user.id,
                balance_type=command.balance_type,
                description=description,
                performed_by_user_id=command.performed_by_user_id,
            )
            await self.uow.commit()
            return Return.ok(BalanceHistoryEntryDTO.from_entity(entry))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Reset of {command.balance_type.value} for user {command.user_id} failed: {e}")
            return Return.err(
                Error(
                    code="BALANCE_RESET_FAILED",
                    message="Failed to reset balance",
                    reason=str(e),
                )
            )
