"""ReconcileBalances Use Case

Replays the balance ledger and compares it with the users' current fields.
"""

import logging
import time
from datetime import datetime
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.repositories.balance_history_repository import BalanceHistoryRepository
from src.app.repositories.user_repository import UserRepository
from src.app.services.balance_ledger import current_value
from .dtos import BalanceDiscrepancyDTO, ReconciliationResultDTO

logger = logging.getLogger(__name__)


class ReconcileBalances:
    """
    Use Case: Reconcile user balances against the ledger

    Business Rules:
    1. For every (user, balance type) with ledger entries, the sum of
       credits minus debits must equal the user's current field
    2. Mismatches are reported and logged
    3. Does NOT modify any data (read-only reconciliation)
    """

    def __init__(self, user_repo: UserRepository, history_repo: BalanceHistoryRepository):
        self.user_repo = user_repo
        self.history_repo = history_repo

    async def execute(self) -> Result[ReconciliationResultDTO]:
        start_time = time.time()
        reconciliation_time = datetime.utcnow()

        try:
            logger.info("Starting balance ledger reconciliation")

            sums = await self.history_repo.get_signed_sums()
            discrepancies: list[BalanceDiscrepancyDTO] = []

            for (user_id, balance_type), ledger_value in sorted(
                sums.items(), key=lambda item: (item[0][0], item[0][1].value)
            ):
                user = await self.user_repo.get_by_id(user_id)
                if not user:
                    continue

                recorded = current_value(user, balance_type)
                if recorded != Decimal(ledger_value):
                    discrepancy = BalanceDiscrepancyDTO(
                        user_id=user_id,
                        balance_type=balance_type.value,
                        recorded_value=recorded,
                        ledger_value=ledger_value,
                        discrepancy=recorded - Decimal(ledger_value),
                    )
                    discrepancies.append(discrepancy)
                    logger.warning(
                        f"Discrepancy for user {user_id} ({balance_type.value}): "
                        f"recorded={recorded}, ledger={ledger_value}, "
                        f"discrepancy={discrepancy.discrepancy}"
                    )

            execution_time_ms = int((time.time() - start_time) * 1000)

            if discrepancies:
                logger.warning(
                    f"Reconciliation complete. Found {len(discrepancies)} discrepancies "
                    f"out of {len(sums)} accounts in {execution_time_ms}ms"
                )
            else:
                logger.info(
                    f"Reconciliation complete. All {len(sums)} accounts balanced "
                    f"in {execution_time_ms}ms"
                )

            return Return.ok(
                ReconciliationResultDTO(
                    total_accounts_checked=len(sums),
                    discrepancies_found=len(discrepancies),
                    discrepancies=discrepancies,
                    reconciliation_time=reconciliation_time,
                    execution_time_ms=execution_time_ms,
                )
            )

        except Exception as e:
            logger.error(f"Balance reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile balance ledger",
                    reason=str(e),
                )
            )
