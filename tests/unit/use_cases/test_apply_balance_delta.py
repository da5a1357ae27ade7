"""Unit tests for ApplyBalanceDelta use case"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from pydantic import ValidationError

from src.app.services.balance_ledger import UserNotFoundError
from src.app.use_cases.balance.apply_balance_delta import ApplyBalanceDelta
from src.app.use_cases.balance.dtos import BalanceDeltaCommandDTO
from src.domain.balance_history import BalanceHistory, BalanceType, TransactionType


@pytest.fixture
def mock_ledger():
    return MagicMock()


@pytest.fixture
def command():
    return BalanceDeltaCommandDTO(
        user_id="manager_1",
        balance_type=BalanceType.BALANCE,
        transaction_type=TransactionType.DEBIT,
        amount=Decimal("100.00"),
        description="Manual payout",
        performed_by_user_id="owner_1",
    )


@pytest.mark.asyncio
class TestApplyBalanceDelta:

    async def test_commits_after_ledger_write(self, mock_uow, mock_ledger, command):
        mock_ledger.apply_delta = AsyncMock(
            return_value=BalanceHistory(
                id=1,
                user_id="manager_1",
                balance_type=BalanceType.BALANCE,
                transaction_type=TransactionType.DEBIT,
                amount=Decimal("100.00"),
                balance_before=Decimal("250.00"),
                balance_after=Decimal("150.00"),
                description="Manual payout",
                created_at=datetime.utcnow(),
            )
        )

        result = await ApplyBalanceDelta(mock_uow, mock_ledger).execute(command)

        assert result.is_ok()
        assert result.value.balance_before == Decimal("250.00")
        assert result.value.balance_after == Decimal("150.00")
        assert result.value.transaction_type == "debit"
        mock_uow.commit.assert_called_once()
        mock_uow.rollback.assert_not_called()

    async def test_unknown_user(self, mock_uow, mock_ledger, command):
        mock_ledger.apply_delta = AsyncMock(side_effect=UserNotFoundError("manager_1"))

        result = await ApplyBalanceDelta(mock_uow, mock_ledger).execute(command)

        assert result.error.code == "USER_NOT_FOUND"
        mock_uow.commit.assert_not_called()

    async def test_failure_rolls_back_and_reports_internal_error(self, mock_uow, mock_ledger, command):
        mock_ledger.apply_delta = AsyncMock(side_effect=RuntimeError("write failed"))

        result = await ApplyBalanceDelta(mock_uow, mock_ledger).execute(command)

        assert result.error.code == "BALANCE_UPDATE_FAILED"
        assert result.error.reason == "write failed"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()


class TestBalanceDeltaCommand:

    def test_negative_amount_is_rejected(self):
        with pytest.raises(ValidationError):
            BalanceDeltaCommandDTO(
                user_id="manager_1",
                balance_type=BalanceType.BALANCE,
                transaction_type=TransactionType.CREDIT,
                amount=Decimal("-1"),
                description="Bad",
            )

    def test_empty_description_is_rejected(self):
        with pytest.raises(ValidationError):
            BalanceDeltaCommandDTO(
                user_id="manager_1",
                balance_type=BalanceType.BALANCE,
                transaction_type=TransactionType.CREDIT,
                amount=Decimal("1"),
                description="",
            )
