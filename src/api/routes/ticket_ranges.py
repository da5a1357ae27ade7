"""Ticket Range API Routes

Owners hand blocks of ticket numbers to managers; managers read their
ranges and the numbers still available to them.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories import (
    SqlAlchemyTicketRangeRepository,
    SqlAlchemyTicketRepository,
    SqlAlchemyUserRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.auth import CurrentUser, require_access
from src.api.error import ClientError
from src.api.schemas.envelope import Envelope, ok
from src.api.schemas.ticket_request import CreateTicketRangeRequestSchema
from src.app.use_cases.ticket_ranges import (
    CreateTicketRange,
    CreateTicketRangeCommandDTO,
    FindManager,
    GetAvailableTicketNumbers,
    GetMyTicketRanges,
    ListTicketRanges,
    ManagerLookupDTO,
    TicketRangeDTO,
)
from src.depends import get_session

router = APIRouter(prefix="/manager-ticket-ranges", tags=["Ticket Ranges"])


@router.get(
    "",
    response_model=Envelope[List[TicketRangeDTO]],
    status_code=status.HTTP_200_OK,
)
async def list_ticket_ranges(
    manager_id: Optional[str] = Query(default=None, description="Only ranges of this manager"),
    current_user: CurrentUser = Depends(require_access("ticket_ranges.list")),
    session: AsyncSession = Depends(get_session),
):
    """
    List ranges handed out by the caller (or by the caller's main owner).

    **Returns:**
    - 200: Ranges, newest first, with manager and creator summaries
    """
    use_case = ListTicketRanges(SqlAlchemyUserRepository(session), SqlAlchemyTicketRangeRepository(session))
    result = await use_case.execute(current_user.id, manager_id=manager_id)

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)


@router.post(
    "",
    response_model=Envelope[TicketRangeDTO],
    status_code=status.HTTP_201_CREATED,
)
async def create_ticket_range(
    request: CreateTicketRangeRequestSchema,
    current_user: CurrentUser = Depends(require_access("ticket_ranges.create")),
    session: AsyncSession = Depends(get_session),
):
    """
    Assign a range of ticket numbers to an active manager.

    **Example request:**
    ```json
    {
      "manager_email": "manager@example.com",
      "ticket_number_start": "AA00000001",
      "ticket_number_end": "AA00000500"
    }
    ```

    **Returns:**
    - 201: Range created
    - 400: Malformed range, number already used or already assigned
    - 404: No active manager with this email
    """
    uow = SqlAlchemyUnitOfWork(session)
    command = CreateTicketRangeCommandDTO(
        created_by_user_id=current_user.id,
        manager_email=request.manager_email,
        ticket_number_start=request.ticket_number_start,
        ticket_number_end=request.ticket_number_end,
    )

    use_case = CreateTicketRange(
        uow,
        SqlAlchemyUserRepository(session),
        SqlAlchemyTicketRangeRepository(session),
        SqlAlchemyTicketRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)


@router.get(
    "/check-manager",
    response_model=Envelope[ManagerLookupDTO],
    status_code=status.HTTP_200_OK,
)
async def check_manager(
    email: Optional[str] = Query(default=None),
    current_user: CurrentUser = Depends(require_access("ticket_ranges.check_manager")),
    session: AsyncSession = Depends(get_session),
):
    """Look up an active manager by email before assigning a range."""
    result = await FindManager(SqlAlchemyUserRepository(session)).execute(email)

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)


@router.get(
    "/my",
    response_model=Envelope[List[TicketRangeDTO]],
    status_code=status.HTTP_200_OK,
)
async def get_my_ticket_ranges(
    current_user: CurrentUser = Depends(require_access("ticket_ranges.my")),
    session: AsyncSession = Depends(get_session),
):
    """Ranges assigned to the calling manager, newest first."""
    result = await GetMyTicketRanges(SqlAlchemyTicketRangeRepository(session)).execute(current_user.id)

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)


@router.get(
    "/my-available",
    response_model=Envelope[List[str]],
    status_code=status.HTTP_200_OK,
)
async def get_my_available_ticket_numbers(
    current_user: CurrentUser = Depends(require_access("ticket_ranges.my_available")),
    session: AsyncSession = Depends(get_session),
):
    """
    Numbers of the caller's ranges not yet printed on any ticket.

    Ranges are walked in assignment order and the list is capped
    (MAX_AVAILABLE_TICKETS). Nothing is reserved.
    """
    use_case = GetAvailableTicketNumbers(
        SqlAlchemyTicketRangeRepository(session),
        SqlAlchemyTicketRepository(session),
        max_results=ApplicationConfig.MAX_AVAILABLE_TICKETS,
    )
    result = await use_case.execute(current_user.id)

    if result.is_err():
        raise ClientError(result.error)

    return ok(result.value)
