"""Request schemas for ticket range and ticket endpoints

Field formats are checked by the use cases so that each rule reports its
own message.
"""

from typing import Optional
from pydantic import BaseModel, Field


class CreateTicketRangeRequestSchema(BaseModel):
    """
    Request schema for assigning a ticket range to a manager

    Used for POST /manager-ticket-ranges endpoint.
    """

    manager_email: Optional[str] = Field(
        default=None,
        description="Email of the active manager receiving the range"
    )

    ticket_number_start: Optional[str] = Field(
        default=None,
        description="First number of the range (AA00000000)"
    )

    ticket_number_end: Optional[str] = Field(
        default=None,
        description="Last number of the range (AA00000000)"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "manager_email": "manager@example.com",
                "ticket_number_start": "AA00000001",
                "ticket_number_end": "AA00000500",
            }
        }
    }


class IssueTicketRequestSchema(BaseModel):
    """Request schema for POST /tickets"""

    sale_id: Optional[str] = Field(default=None, description="Sale receiving the ticket")
    ticket_number: Optional[str] = Field(default=None, description="Number printed on the ticket")


class CheckTicketNumberRequestSchema(BaseModel):
    """Request schema for POST /tickets/check/number"""

    ticket_number: str = Field(..., description="Number to look up (AA00000000)")
