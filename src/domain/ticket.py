"""Ticket Domain Entity

Issued ticket, optionally carrying a pre-printed ticket number.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid


class TicketStatus(str, Enum):
    """Ticket lifecycle: sold -> used, or sold/used -> cancelled"""
    SOLD = "sold"
    USED = "used"
    CANCELLED = "cancelled"


class Ticket(BaseModel, table=True):
    """
    Ticket - Issued ticket for a sale

    Domain Rules:
    - ticket_number is globally unique when present (format AA00000000)
    - One ticket per sale
    - Only sold tickets can be confirmed
    - Cancelled tickets cannot be cancelled again
    """

    __tablename__ = "tickets"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Ticket identifier (uuid)"
    )

    sale_id: str = Field(
        foreign_key="sales.id",
        unique=True,
        description="Sale this ticket was issued for"
    )

    tour_id: str = Field(
        foreign_key="tours.id",
        index=True,
        description="Tour the ticket admits to"
    )

    ticket_number: Optional[str] = Field(
        default=None,
        sa_column=Column(String(10), unique=True, nullable=True),
        description="Pre-printed ticket number (AA00000000)"
    )

    ticket_status: TicketStatus = Field(
        default=TicketStatus.SOLD,
        description="Lifecycle status"
    )

    adult_count: int = Field(default=1)
    child_count: int = Field(default=0)

    used_at: Optional[datetime] = Field(default=None)
    used_by_user_id: Optional[str] = Field(default=None, foreign_key="users.id")
    cancelled_at: Optional[datetime] = Field(default=None)
    cancelled_by_user_id: Optional[str] = Field(default=None, foreign_key="users.id")

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Issue timestamp"
    )
