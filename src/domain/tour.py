"""Tour Domain Entity

Only the commission terms matter to settlement.
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import Numeric
from src.domain.base import BaseModel, generate_uuid

CENT = Decimal("0.01")


class CommissionType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class Tour(BaseModel, table=True):
    __tablename__ = "tours"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    company: str
    commission_type: CommissionType = Field(default=CommissionType.PERCENTAGE)
    commission_percentage: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(5, 2), nullable=True),
        description="Commission as a percentage of the sale total"
    )
    commission_fixed_amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(12, 2), nullable=True),
        description="Flat commission per sale"
    )

    def commission_for(self, total_amount: Decimal) -> Decimal:
        """Commission earned on a sale of total_amount, rounded half up to cents"""
        if self.commission_type == CommissionType.PERCENTAGE and self.commission_percentage:
            commission = Decimal(total_amount) * Decimal(self.commission_percentage) / Decimal(100)
        elif self.commission_type == CommissionType.FIXED and self.commission_fixed_amount:
            commission = Decimal(self.commission_fixed_amount)
        else:
            commission = Decimal("0")
        return commission.quantize(CENT, rounding=ROUND_HALF_UP)
