"""Balance History Domain Entity

Immutable append-only audit trail of every balance and debt mutation.
Each entry records the value before and after the change.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String, Text
from src.domain.base import BaseModel, BigIntegerPK


class BalanceType(str, Enum):
    """User field a ledger entry applies to"""
    BALANCE = "balance"                  # Commission owed to the user
    DEBT_TO_COMPANY = "debt_to_company"  # Cash owed by the user


class TransactionType(str, Enum):
    """Direction of a ledger entry"""
    CREDIT = "credit"  # Field increases by amount
    DEBIT = "debit"    # Field decreases by amount


class BalanceHistory(BaseModel, table=True):
    """
    Balance History - Immutable ledger entry

    Domain Rules:
    - Entries are immutable (append-only), never updated or deleted
    - balance_after == balance_before + amount for CREDIT
    - balance_after == balance_before - amount for DEBIT
    - Replaying all entries of a user and balance type reconstructs the
      current value of that field
    - ticket_id / sale_id link entries produced by ticket settlement
    """

    __tablename__ = "balance_history"
    __table_args__ = (
        Index("ix_balance_history_user_created", "user_id", "created_at"),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntegerPK, primary_key=True, autoincrement=True),
        description="Unique entry identifier (auto-increment)"
    )

    user_id: str = Field(
        sa_column=Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        description="User whose field changed"
    )

    balance_type: BalanceType = Field(
        description="Field that changed (balance, debt_to_company)"
    )

    transaction_type: TransactionType = Field(
        description="Direction of the change (credit, debit)"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Absolute amount of the change"
    )

    balance_before: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Field value before the change"
    )

    balance_after: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Field value after the change"
    )

    description: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Human readable reason"
    )

    ticket_id: Optional[str] = Field(
        default=None,
        foreign_key="tickets.id",
        description="Ticket that produced the entry, if any"
    )

    sale_id: Optional[str] = Field(
        default=None,
        foreign_key="sales.id",
        description="Sale that produced the entry, if any"
    )

    performed_by_user_id: Optional[str] = Field(
        default=None,
        foreign_key="users.id",
        description="User who triggered the change"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Entry timestamp (immutable)"
    )
