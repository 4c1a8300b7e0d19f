"""
Pydantic schemas for financial transactions.

Income and expense transactions have distinct category vocabularies;
the category must belong to the vocabulary of the transaction type.
"""

from typing import Literal, Optional

from pydantic import Field, model_validator

from farm_manager_api.app.services.entities import TRANSACTION_CATEGORIES

from .common import CamelModel, RecordRead


class TransactionCreate(CamelModel):
    """Schema for creating or fully updating a transaction."""

    type: Literal["income", "expense"] = "expense"
    category: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    description: Optional[str] = None
    date: str = Field(..., min_length=1)
    farm_id: Optional[int] = None

    @model_validator(mode="after")
    def check_category(self) -> "TransactionCreate":
        allowed = TRANSACTION_CATEGORIES[self.type]
        if self.category not in allowed:
            raise ValueError(f"Category {self.category!r} is not valid for {self.type} transactions")
        return self


class TransactionRead(RecordRead):
    """Schema for reading a transaction."""

    type: Optional[str] = None
    category: Optional[str] = None
    amount: Optional[float] = None
    description: Optional[str] = None
    date: Optional[str] = None
    farm_id: Optional[int] = None
