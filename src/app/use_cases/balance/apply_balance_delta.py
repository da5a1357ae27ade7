"""ApplyBalanceDelta Use Case

Applies one balance/debt delta and records it in the ledger, atomically.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.balance_ledger import BalanceLedger, UserNotFoundError
from .dtos import BalanceDeltaCommandDTO, BalanceHistoryEntryDTO

logger = logging.getLogger(__name__)


class ApplyBalanceDelta:
    """
    Use Case: Apply a delta to a user's balance or debt

    Business Rules:
    1. Atomic updates: ledger entry and user field commit together
    2. On any failure both writes are rolled back
    3. No automatic retry; the caller resubmits
    """

    def __init__(self, uow: UnitOfWork, ledger: BalanceLedger):
        self.uow = uow
        self.ledger = ledger

    async def execute(self, command: BalanceDeltaCommandDTO) -> Result[BalanceHistoryEntryDTO]:
        try:
            entry = await self.ledger.apply_delta(
                user_id=command.user_id,
                balance_type=command.balance_type,
                transaction_type=command.transaction_type,
                amount=command.amount,
                description=command.description,
                performed_by_user_id=command.performed_by_user_id,
            )
            await self.uow.commit()
            return Return.ok(BalanceHistoryEntryDTO.from_entity(entry))

        except UserNotFoundError:
            await self.uow.rollback()
            return Return.err(
                Error(code="USER_NOT_FOUND", message="User not found")
            )
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Balance update for user {command.user_id} failed: {e}")
            return Return.err(
                Error(
                    code="BALANCE_UPDATE_FAILED",
                    message="Failed to update balance",
                    reason=str(e),
                )
            )
