"""Sale Domain Entity"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import Numeric
from src.domain.base import BaseModel, generate_uuid


class PaymentMethod(str, Enum):
    ONLINE = "online"
    CASH = "cash"
    ACQUIRING = "acquiring"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Sale(BaseModel, table=True):
    """
    Sale - One purchase of a tour

    Domain Rules:
    - seller_user_id is whoever registered the sale
    - promoter_user_id is set when a manager sold on behalf of a promoter
      (or the promoter sold directly)
    - Cash and acquiring sales by managers increase the manager's debt
    """

    __tablename__ = "sales"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tour_id: str = Field(foreign_key="tours.id", index=True)
    seller_user_id: str = Field(foreign_key="users.id", index=True)
    promoter_user_id: Optional[str] = Field(default=None, foreign_key="users.id")
    payment_method: PaymentMethod
    payment_status: PaymentStatus = Field(default=PaymentStatus.PENDING)
    total_amount: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Amount paid by the customer"
    )
    adult_count: int = Field(default=1)
    child_count: int = Field(default=0)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def is_cash_payment(self) -> bool:
        return self.payment_method in (PaymentMethod.CASH, PaymentMethod.ACQUIRING)
