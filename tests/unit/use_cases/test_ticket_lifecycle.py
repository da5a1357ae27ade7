"""Unit tests for IssueTicket, CheckTicketNumber, ConfirmTicket and CancelTicket"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.tickets.cancel_ticket import CancelTicket
from src.app.use_cases.tickets.check_ticket_number import CheckTicketNumber
from src.app.use_cases.tickets.confirm_ticket import ConfirmTicket
from src.app.use_cases.tickets.dtos import IssueTicketCommandDTO
from src.app.use_cases.tickets.issue_ticket import IssueTicket
from src.domain.balance_history import BalanceHistory, BalanceType, TransactionType
from src.domain.sale import PaymentMethod, PaymentStatus, Sale
from src.domain.ticket import Ticket, TicketStatus


@pytest.fixture
def sale():
    return Sale(
        id="sale_1",
        tour_id="tour_1",
        seller_user_id="manager_1",
        payment_method=PaymentMethod.CASH,
        payment_status=PaymentStatus.PENDING,
        total_amount=Decimal("150.00"),
        adult_count=2,
        child_count=1,
    )


@pytest.fixture
def ticket():
    return Ticket(
        id="ticket_1",
        sale_id="sale_1",
        tour_id="tour_1",
        ticket_number="AA00000001",
        ticket_status=TicketStatus.SOLD,
        created_at=datetime.utcnow(),
    )


@pytest.fixture
def mock_sale_repo(sale):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=sale)
    repo.update = AsyncMock(side_effect=lambda s: s)
    return repo


@pytest.fixture
def mock_ticket_repo(ticket):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=ticket)
    repo.get_by_sale_id = AsyncMock(return_value=None)
    repo.get_by_number = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=lambda t: t)
    repo.update = AsyncMock(side_effect=lambda t: t)
    return repo


@pytest.fixture
def mock_settlement():
    settlement = MagicMock()
    entry = BalanceHistory(
        id=1,
        user_id="manager_1",
        balance_type=BalanceType.DEBT_TO_COMPANY,
        transaction_type=TransactionType.CREDIT,
        amount=Decimal("150.00"),
        balance_before=Decimal("0"),
        balance_after=Decimal("150.00"),
        description="Debt increase",
        created_at=datetime.utcnow(),
    )
    settlement.settle_confirmation = AsyncMock(return_value=[entry])
    settlement.settle_cancellation = AsyncMock(return_value=[entry])
    return settlement


@pytest.mark.asyncio
class TestIssueTicket:

    async def test_issues_ticket_and_completes_sale(self, mock_uow, mock_sale_repo, mock_ticket_repo, sale):
        use_case = IssueTicket(mock_uow, mock_sale_repo, mock_ticket_repo)

        result = await use_case.execute(
            IssueTicketCommandDTO(manager_user_id="manager_1", sale_id="sale_1", ticket_number="aa00000042")
        )

        assert result.is_ok()
        assert result.value.ticket_number == "AA00000042"
        assert result.value.ticket_status == "sold"
        assert result.value.adult_count == 2
        assert sale.payment_status == PaymentStatus.COMPLETED
        mock_uow.commit.assert_called_once()

    async def test_promoter_sale_handled_by_manager(self, mock_uow, mock_sale_repo, mock_ticket_repo, sale):
        sale.seller_user_id = "someone_else"
        sale.promoter_user_id = "manager_1"

        result = await IssueTicket(mock_uow, mock_sale_repo, mock_ticket_repo).execute(
            IssueTicketCommandDTO(manager_user_id="manager_1", sale_id="sale_1", ticket_number="AA00000042")
        )

        assert result.is_ok()

    async def test_missing_fields(self, mock_uow, mock_sale_repo, mock_ticket_repo):
        result = await IssueTicket(mock_uow, mock_sale_repo, mock_ticket_repo).execute(
            IssueTicketCommandDTO(manager_user_id="manager_1", sale_id="sale_1")
        )

        assert result.error.code == "VALIDATION_ERROR"

    async def test_malformed_number(self, mock_uow, mock_sale_repo, mock_ticket_repo):
        result = await IssueTicket(mock_uow, mock_sale_repo, mock_ticket_repo).execute(
            IssueTicketCommandDTO(manager_user_id="manager_1", sale_id="sale_1", ticket_number="A123")
        )

        assert result.error.code == "INVALID_TICKET_NUMBER"
        mock_sale_repo.get_by_id.assert_not_called()

    async def test_sale_of_another_user(self, mock_uow, mock_sale_repo, mock_ticket_repo):
        result = await IssueTicket(mock_uow, mock_sale_repo, mock_ticket_repo).execute(
            IssueTicketCommandDTO(manager_user_id="manager_2", sale_id="sale_1", ticket_number="AA00000042")
        )

        assert result.error.code == "SALE_NOT_OWNED"
        mock_ticket_repo.create.assert_not_called()

    async def test_one_ticket_per_sale(self, mock_uow, mock_sale_repo, mock_ticket_repo, ticket):
        mock_ticket_repo.get_by_sale_id = AsyncMock(return_value=ticket)

        result = await IssueTicket(mock_uow, mock_sale_repo, mock_ticket_repo).execute(
            IssueTicketCommandDTO(manager_user_id="manager_1", sale_id="sale_1", ticket_number="AA00000042")
        )

        assert result.error.code == "TICKET_ALREADY_EXISTS"

    async def test_number_already_printed(self, mock_uow, mock_sale_repo, mock_ticket_repo, ticket):
        mock_ticket_repo.get_by_number = AsyncMock(return_value=ticket)

        result = await IssueTicket(mock_uow, mock_sale_repo, mock_ticket_repo).execute(
            IssueTicketCommandDTO(manager_user_id="manager_1", sale_id="sale_1", ticket_number="AA00000001")
        )

        assert result.error.code == "TICKET_NUMBER_IN_USE"
        mock_ticket_repo.get_by_number.assert_called_once_with("AA00000001")

    async def test_unknown_sale(self, mock_uow, mock_sale_repo, mock_ticket_repo):
        mock_sale_repo.get_by_id = AsyncMock(return_value=None)

        result = await IssueTicket(mock_uow, mock_sale_repo, mock_ticket_repo).execute(
            IssueTicketCommandDTO(manager_user_id="manager_1", sale_id="nope", ticket_number="AA00000001")
        )

        assert result.error.code == "SALE_NOT_FOUND"


@pytest.mark.asyncio
class TestCheckTicketNumber:

    async def test_sold_ticket_can_be_confirmed(self, mock_ticket_repo, ticket):
        mock_ticket_repo.get_by_number = AsyncMock(return_value=ticket)

        result = await CheckTicketNumber(mock_ticket_repo).execute("AA00000001")

        assert result.value.is_valid is True
        assert result.value.can_confirm is True
        assert result.value.ticket.id == "ticket_1"

    async def test_used_ticket_cannot_be_confirmed(self, mock_ticket_repo, ticket):
        ticket.ticket_status = TicketStatus.USED
        mock_ticket_repo.get_by_number = AsyncMock(return_value=ticket)

        result = await CheckTicketNumber(mock_ticket_repo).execute("AA00000001")

        assert result.value.can_confirm is False
        assert result.value.message == "Ticket already used"

    async def test_unknown_number(self, mock_ticket_repo):
        result = await CheckTicketNumber(mock_ticket_repo).execute("AA00000999")

        assert result.value.is_valid is False
        assert result.value.message == "Ticket not found"

    async def test_malformed_number(self, mock_ticket_repo):
        result = await CheckTicketNumber(mock_ticket_repo).execute("aa00000001")

        assert result.error.code == "INVALID_TICKET_NUMBER"

    @pytest.mark.parametrize("value", ["AA00000001\n", "AA\u0660\u0660\u0660\u0660\u0660\u0660\u0660\u0661"])
    async def test_trailing_newline_and_non_ascii_digits(self, mock_ticket_repo, value):
        result = await CheckTicketNumber(mock_ticket_repo).execute(value)

        assert result.error.code == "INVALID_TICKET_NUMBER"
        mock_ticket_repo.get_by_number.assert_not_called()


@pytest.mark.asyncio
class TestConfirmTicket:

    async def test_marks_ticket_used_and_settles(
        self, mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement, ticket, sale
    ):
        use_case = ConfirmTicket(mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement)

        result = await use_case.execute("ticket_1", performed_by_user_id="partner_1")

        assert result.is_ok()
        assert result.value.ticket.ticket_status == "used"
        assert result.value.ticket.used_by_user_id == "partner_1"
        assert len(result.value.ledger_entries) == 1
        mock_settlement.settle_confirmation.assert_called_once_with(ticket, sale, "partner_1")
        mock_uow.commit.assert_called_once()

    @pytest.mark.parametrize("status", [TicketStatus.USED, TicketStatus.CANCELLED])
    async def test_only_sold_tickets(
        self, mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement, ticket, status
    ):
        ticket.ticket_status = status

        result = await ConfirmTicket(mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement).execute(
            "ticket_1", performed_by_user_id="partner_1"
        )

        assert result.error.code == "TICKET_STATUS_CONFLICT"
        mock_settlement.settle_confirmation.assert_not_called()

    async def test_unknown_ticket(self, mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement):
        mock_ticket_repo.get_by_id = AsyncMock(return_value=None)

        result = await ConfirmTicket(mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement).execute(
            "nope", performed_by_user_id="partner_1"
        )

        assert result.error.code == "TICKET_NOT_FOUND"

    async def test_settlement_failure_rolls_back(
        self, mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement
    ):
        mock_settlement.settle_confirmation = AsyncMock(side_effect=RuntimeError("lock timeout"))

        result = await ConfirmTicket(mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement).execute(
            "ticket_1", performed_by_user_id="partner_1"
        )

        assert result.error.code == "CONFIRM_TICKET_FAILED"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestCancelTicket:

    async def test_cancels_and_settles(self, mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement, ticket):
        result = await CancelTicket(mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement).execute(
            "ticket_1", performed_by_user_id="owner_1"
        )

        assert result.value.ticket.ticket_status == "cancelled"
        assert result.value.ticket.cancelled_by_user_id == "owner_1"
        mock_settlement.settle_cancellation.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_used_ticket_can_be_cancelled(
        self, mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement, ticket
    ):
        ticket.ticket_status = TicketStatus.USED

        result = await CancelTicket(mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement).execute(
            "ticket_1", performed_by_user_id="owner_1"
        )

        assert result.is_ok()

    async def test_already_cancelled(self, mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement, ticket):
        ticket.ticket_status = TicketStatus.CANCELLED

        result = await CancelTicket(mock_uow, mock_ticket_repo, mock_sale_repo, mock_settlement).execute(
            "ticket_1", performed_by_user_id="owner_1"
        )

        assert result.error.code == "TICKET_STATUS_CONFLICT"
        assert result.error.message == "Ticket already cancelled"
