"""Data Transfer Objects for Ticket Range Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.ticket_range import ManagerTicketRange
from src.domain.user import User


class CreateTicketRangeCommandDTO(BaseModel):
    """
    Command DTO for handing a block of ticket numbers to a manager

    Fields are kept as raw strings; CreateTicketRange validates them so the
    client gets the specific rule that failed.
    """

    created_by_user_id: str = Field(..., description="Owner or assistant creating the range")
    manager_email: Optional[str] = Field(default=None, description="Email of the receiving manager")
    ticket_number_start: Optional[str] = Field(default=None, description="First number, e.g. AA00000001")
    ticket_number_end: Optional[str] = Field(default=None, description="Last number, e.g. AA00000500")


class UserSummaryDTO(BaseModel):
    id: str
    email: str
    full_name: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserSummaryDTO":
        return cls(id=user.id, email=user.email, full_name=user.full_name)


class TicketRangeDTO(BaseModel):
    """Response DTO for one range"""

    id: str
    ticket_number_start: str
    ticket_number_end: str
    created_at: datetime
    manager_user_id: Optional[str] = None
    created_by_user_id: Optional[str] = None
    manager: Optional[UserSummaryDTO] = None
    created_by: Optional[UserSummaryDTO] = None

    @classmethod
    def from_entity(
        cls,
        ticket_range: ManagerTicketRange,
        manager: Optional[User] = None,
        created_by: Optional[User] = None,
    ) -> "TicketRangeDTO":
        return cls(
            id=ticket_range.id,
            ticket_number_start=ticket_range.ticket_number_start,
            ticket_number_end=ticket_range.ticket_number_end,
            created_at=ticket_range.created_at,
            manager_user_id=ticket_range.manager_user_id,
            created_by_user_id=ticket_range.created_by_user_id,
            manager=UserSummaryDTO.from_entity(manager) if manager else None,
            created_by=UserSummaryDTO.from_entity(created_by) if created_by else None,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "5b0c4a8e-1f2d-4c3b-9a8e-7d6c5b4a3f2e",
                "ticket_number_start": "AA00000001",
                "ticket_number_end": "AA00000500",
                "created_at": "2024-01-01T00:00:00Z",
                "manager_user_id": "7d0f6a52-7a55-4a8e-9a43-3c1f2f1a9b10",
                "created_by_user_id": "0b1e2c3d-4f5a-4b6c-8d7e-9f0a1b2c3d4e"
            }
        }


class ManagerLookupDTO(BaseModel):
    """Response DTO for FindManager"""

    found: bool
    manager: Optional[dict] = None
