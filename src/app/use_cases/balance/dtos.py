"""Data Transfer Objects for Balance Use Cases

Pydantic models for command inputs and response outputs.
"""

import math
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.balance_history import BalanceHistory, BalanceType, TransactionType
from src.domain.user import User, UserRole


class BalanceDeltaCommandDTO(BaseModel):
    """
    Command DTO for applying one balance/debt delta

    Used as input to ApplyBalanceDelta use case.
    """

    user_id: str = Field(
        ...,
        description="User whose field changes"
    )

    balance_type: BalanceType = Field(
        ...,
        description="Field to change (balance, debt_to_company)"
    )

    transaction_type: TransactionType = Field(
        ...,
        description="credit adds the amount, debit subtracts it"
    )

    amount: Decimal = Field(
        ...,
        ge=0,
        description="Amount of the change (must be >= 0)"
    )

    description: str = Field(
        ...,
        min_length=1,
        description="Human readable reason stored in the ledger"
    )

    performed_by_user_id: Optional[str] = Field(
        default=None,
        description="User who triggered the change"
    )


class ResetBalanceCommandDTO(BaseModel):
    """
    Command DTO for an owner payout that zeroes a field

    Used as input to ResetBalance use case.
    """

    user_id: str = Field(..., description="User whose field is reset")
    balance_type: BalanceType = Field(..., description="Field to reset")
    performed_by_user_id: str = Field(..., description="Owner performing the reset")


class BalanceHistoryEntryDTO(BaseModel):
    """Response DTO for one ledger entry"""

    id: int
    user_id: str
    balance_type: str
    transaction_type: str
    amount: Decimal
    balance_before: Decimal
    balance_after: Decimal
    description: str
    ticket_id: Optional[str] = None
    sale_id: Optional[str] = None
    performed_by_user_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, entry: BalanceHistory) -> "BalanceHistoryEntryDTO":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            balance_type=_enum_value(entry.balance_type),
            transaction_type=_enum_value(entry.transaction_type),
            amount=entry.amount,
            balance_before=entry.balance_before,
            balance_after=entry.balance_after,
            description=entry.description,
            ticket_id=entry.ticket_id,
            sale_id=entry.sale_id,
            performed_by_user_id=entry.performed_by_user_id,
            created_at=entry.created_at,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 42,
                "user_id": "7d0f6a52-7a55-4a8e-9a43-3c1f2f1a9b10",
                "balance_type": "balance",
                "transaction_type": "debit",
                "amount": "100.00",
                "balance_before": "250.00",
                "balance_after": "150.00",
                "description": "Paid out by owner, balance reset",
                "performed_by_user_id": "0b1e2c3d-4f5a-4b6c-8d7e-9f0a1b2c3d4e",
                "created_at": "2024-01-01T00:00:00Z"
            }
        }


class AccountBalanceDTO(BaseModel):
    """A manager or promoter with their current balance fields"""

    id: str
    email: str
    full_name: Optional[str] = None
    role: str
    is_active: bool
    balance: Decimal
    debt_to_company: Optional[Decimal] = Field(
        default=None,
        description="Only reported for managers"
    )
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "AccountBalanceDTO":
        role = _enum_value(user.role)
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            role=role,
            is_active=user.is_active,
            balance=user.balance,
            debt_to_company=user.debt_to_company if role == UserRole.MANAGER.value else None,
            created_at=user.created_at,
        )


class PaginationDTO(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> "PaginationDTO":
        return cls(total=total, page=page, limit=limit, total_pages=math.ceil(total / limit) if limit else 0)


class BalanceHistoryPageDTO(BaseModel):
    """Response DTO for ListBalanceHistory"""

    entries: List[BalanceHistoryEntryDTO]
    pagination: PaginationDTO


class BalanceDiscrepancyDTO(BaseModel):
    """A user whose field does not match the replayed ledger"""

    user_id: str
    balance_type: str
    recorded_value: Decimal = Field(..., description="Current value on the user")
    ledger_value: Decimal = Field(..., description="Sum of ledger deltas")
    discrepancy: Decimal = Field(..., description="recorded_value - ledger_value")


class ReconciliationResultDTO(BaseModel):
    """Response DTO for ReconcileBalances"""

    total_accounts_checked: int
    discrepancies_found: int
    discrepancies: List[BalanceDiscrepancyDTO]
    reconciliation_time: datetime
    execution_time_ms: int


def _enum_value(value) -> str:
    return value.value if hasattr(value, "value") else value
