"""Unit tests for ListAccountBalances use case"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.balance.list_account_balances import ListAccountBalances
from src.domain.user import User, UserRole


def make_user(user_id, role, balance="0", debt="0"):
    return User(
        id=user_id,
        email=f"{user_id}@example.com",
        full_name=user_id,
        role=role,
        balance=Decimal(balance),
        debt_to_company=Decimal(debt),
        created_at=datetime(2024, 1, 1),
    )


@pytest.fixture
def mock_user_repo():
    return MagicMock()


@pytest.mark.asyncio
class TestListAccountBalances:

    async def test_managers_report_balance_and_debt(self, mock_user_repo):
        mock_user_repo.list_by_role = AsyncMock(
            return_value=[make_user("manager_1", UserRole.MANAGER, balance="12.50", debt="300.00")]
        )

        result = await ListAccountBalances(mock_user_repo).execute(UserRole.MANAGER)

        assert result.is_ok()
        account = result.value[0]
        assert account.role == "manager"
        assert account.balance == Decimal("12.50")
        assert account.debt_to_company == Decimal("300.00")
        mock_user_repo.list_by_role.assert_awaited_once_with(UserRole.MANAGER)

    async def test_promoters_have_no_debt_field(self, mock_user_repo):
        mock_user_repo.list_by_role = AsyncMock(
            return_value=[make_user("promoter_1", UserRole.PROMOTER, balance="40.00", debt="5.00")]
        )

        result = await ListAccountBalances(mock_user_repo).execute(UserRole.PROMOTER)

        assert result.value[0].balance == Decimal("40.00")
        assert result.value[0].debt_to_company is None

    async def test_other_roles_are_rejected(self, mock_user_repo):
        mock_user_repo.list_by_role = AsyncMock()

        result = await ListAccountBalances(mock_user_repo).execute(UserRole.PARTNER)

        assert result.is_err()
        assert result.error.code == "ROLE_NOT_ALLOWED"
        mock_user_repo.list_by_role.assert_not_called()
