"""
Pydantic schemas for Expense and ExpenseSplit entities.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from wayfarer.models.expense import ExpenseCategory


class SplitShare(BaseModel):
    """One participant's share in an expense creation request."""
    user_id: int
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)


class ExpenseCreate(BaseModel):
    """Schema for expense creation."""
    trip_id: int
    payer_id: int
    title: str = Field(min_length=1)
    description: Optional[str] = None
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    currency: str = Field(min_length=3, max_length=3)
    category: ExpenseCategory
    expense_date: datetime
    split_with: List[SplitShare] = []

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()


class ExpenseResponse(BaseModel):
    """Schema for expense response."""
    id: int
    trip_id: int
    payer_id: int
    title: str
    description: Optional[str] = None
    amount: float
    currency: str
    category: ExpenseCategory
    expense_date: datetime
    created_at: datetime

    class Config:
        from_attributes = True


class ExpenseSplitResponse(BaseModel):
    """Schema for expense split response."""
    id: int
    expense_id: int
    user_id: int
    amount: float
    is_settled: bool

    class Config:
        from_attributes = True


class ExpenseWithSplitsResponse(ExpenseResponse):
    """Expense together with every split recorded against it."""
    splits: List[ExpenseSplitResponse] = []


class ExpenseSummaryResponse(BaseModel):
    """What a user owes and is owed within one trip, unsettled splits only."""
    owes: float
    owed: float
    currency: str
