"""Ticket API Routes

Issuing numbered tickets, checking and confirming them at boarding and
cancelling them. Confirmation and cancellation settle the sale in the
balance ledger.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories import (
    SqlAlchemyBalanceHistoryRepository,
    SqlAlchemySaleRepository,
    SqlAlchemyTicketRepository,
    SqlAlchemyUserRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.auth import CurrentUser, require_access
from src.api.error import ClientError
from src.api.schemas.envelope import Envelope, ok
from src.api.schemas.ticket_request import CheckTicketNumberRequestSchema, IssueTicketRequestSchema
from src.app.services.balance_ledger import BalanceLedger
from src.app.services.ticket_settlement import TicketSettlement
from src.app.use_cases.tickets import (
    CancelTicket,
    CheckTicketNumber,
    ConfirmTicket,
    IssueTicket,
    IssueTicketCommandDTO,
    TicketCheckDTO,
    TicketDTO,
    TicketSettlementDTO,
)
from src.depends import get_session

router = APIRouter(prefix="/tickets", tags=["Tickets"])


def _settlement(session: AsyncSession) -> TicketSettlement:
    user_repo = SqlAlchemyUserRepository(session)
    ledger = BalanceLedger(user_repo, SqlAlchemyBalanceHistoryRepository(session))
    return TicketSettlement(ledger, user_repo, SqlAlchemySaleRepository(session))


@router.post(
    "",
    response_model=Envelope[TicketDTO],
    status_code=status.HTTP_201_CREATED,
)
async def issue_ticket(
    request: IssueTicketRequestSchema,
    current_user: CurrentUser = Depends(require_access("tickets.issue")),
    session: AsyncSession = Depends(get_session),
):
    """
    Print a ticket number on one of the caller's sales.

    **Returns:**
    - 201: Ticket created, sale completed
    - 400: Bad number, sale already has a ticket or number in use
    - 403: Sale belongs to another user
    - 404: Sale not found
    """
    command = IssueTicketCommandDTO(
        manager_user_id=current_user.id,
        sale_id=request.sale_id,
        ticket_number=request.ticket_number,
    )
    use_case = IssueTicket(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemySaleRepository(session),
        SqlAlchemyTicketRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)


@router.post(
    "/check/number",
    response_model=Envelope[TicketCheckDTO],
    status_code=status.HTTP_200_OK,
)
async def check_ticket_number(
    request: CheckTicketNumberRequestSchema,
    current_user: CurrentUser = Depends(require_access("tickets.check_number")),
    session: AsyncSession = Depends(get_session),
):
    """Look up a ticket by number; ``can_confirm`` is true for sold tickets."""
    result = await CheckTicketNumber(SqlAlchemyTicketRepository(session)).execute(request.ticket_number)

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)


@router.post(
    "/{ticket_id}/confirm",
    response_model=Envelope[TicketSettlementDTO],
    status_code=status.HTTP_200_OK,
)
async def confirm_ticket(
    ticket_id: str,
    current_user: CurrentUser = Depends(require_access("tickets.confirm")),
    session: AsyncSession = Depends(get_session),
):
    """
    Mark a sold ticket as used and settle the sale.

    **Returns:**
    - 200: Ticket and the ledger entries written
    - 400: Ticket already used or cancelled
    - 404: Ticket or sale not found
    """
    use_case = ConfirmTicket(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyTicketRepository(session),
        SqlAlchemySaleRepository(session),
        _settlement(session),
    )
    result = await use_case.execute(ticket_id, performed_by_user_id=current_user.id)

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)


@router.post(
    "/{ticket_id}/cancel",
    response_model=Envelope[TicketSettlementDTO],
    status_code=status.HTTP_200_OK,
)
async def cancel_ticket(
    ticket_id: str,
    current_user: CurrentUser = Depends(require_access("tickets.cancel")),
    session: AsyncSession = Depends(get_session),
):
    """Cancel a ticket; cash and acquiring sales of managers add to their debt."""
    use_case = CancelTicket(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyTicketRepository(session),
        SqlAlchemySaleRepository(session),
        _settlement(session),
    )
    result = await use_case.execute(ticket_id, performed_by_user_id=current_user.id)

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)
