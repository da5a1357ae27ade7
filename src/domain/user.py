"""User Domain Entity

Back-office account. Managers and promoters carry a running balance
(commission earned) and managers additionally carry a debt to the company
(cash collected on its behalf). Both fields change only through the
balance ledger.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import Numeric, String
from src.domain.base import BaseModel, generate_uuid


class UserRole(str, Enum):
    """Back-office roles"""
    OWNER = "owner"
    OWNER_ASSISTANT = "owner_assistant"
    PARTNER = "partner"
    PARTNER_CONTROLLER = "partner_controller"
    MANAGER = "manager"
    PROMOTER = "promoter"


class User(BaseModel, table=True):
    """
    User - Back-office account with balance fields

    Domain Rules:
    - email is unique and stored lower-cased
    - balance / debt_to_company mutate only together with a BalanceHistory row
    - Inactive users are rejected by the access gate
    - Owner assistants reference their owner through main_owner_id
    """

    __tablename__ = "users"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="User identifier (uuid)"
    )

    email: str = Field(
        sa_column=Column(String(255), unique=True, index=True, nullable=False),
        description="Login email (unique, lower-case)"
    )

    full_name: Optional[str] = Field(
        default=None,
        description="Display name"
    )

    role: UserRole = Field(
        index=True,
        description="Back-office role"
    )

    is_active: bool = Field(
        default=True,
        description="Inactive users cannot authenticate"
    )

    balance: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="Commission balance owed to the user"
    )

    debt_to_company: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="Cash the user collected on behalf of the company"
    )

    main_owner_id: Optional[str] = Field(
        default=None,
        description="Owner this assistant works for"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Account creation timestamp"
    )
