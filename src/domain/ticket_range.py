"""Manager Ticket Range Domain Entity

A contiguous block of pre-printed ticket numbers handed to a manager.
"""

from datetime import datetime
from sqlmodel import Field, Column, Index
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid


class ManagerTicketRange(BaseModel, table=True):
    """
    Manager Ticket Range - Block of ticket numbers assigned to a manager

    Domain Rules:
    - start and end share the same 2-letter prefix
    - start <= end and the range holds at most 10000 numbers
    - No number belongs to two ranges
    - Immutable once created
    """

    __tablename__ = "manager_ticket_ranges"
    __table_args__ = (
        Index("ix_manager_ticket_ranges_manager", "manager_user_id", "created_at"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Range identifier (uuid)"
    )

    manager_user_id: str = Field(
        foreign_key="users.id",
        description="Manager the range was handed to"
    )

    created_by_user_id: str = Field(
        foreign_key="users.id",
        index=True,
        description="Owner or assistant who handed the range over"
    )

    ticket_number_start: str = Field(
        sa_column=Column(String(10), nullable=False),
        description="First ticket number (inclusive)"
    )

    ticket_number_end: str = Field(
        sa_column=Column(String(10), nullable=False),
        description="Last ticket number (inclusive)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Assignment timestamp"
    )
