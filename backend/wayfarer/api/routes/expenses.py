"""
Expense ledger routes.
"""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from wayfarer.db.session import get_db
from wayfarer.schemas.common import SuccessResponse
from wayfarer.schemas.expense import (
    ExpenseCreate, ExpenseResponse, ExpenseWithSplitsResponse, ExpenseSummaryResponse
)
from wayfarer.services import expense_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_data: ExpenseCreate,
    db: Session = Depends(get_db)
):
    """Record an expense and split it across participants."""
    return expense_service.create_expense(db, expense_data)


@router.get("/trip/{trip_id}", response_model=List[ExpenseWithSplitsResponse])
async def get_trip_expenses(
    trip_id: int,
    db: Session = Depends(get_db)
):
    """Get all expenses of a trip, each with its splits."""
    return expense_service.get_trip_expenses(db, trip_id)


@router.get("/trip/{trip_id}/summary/{user_id}", response_model=ExpenseSummaryResponse)
async def get_user_expense_summary(
    trip_id: int,
    user_id: int,
    db: Session = Depends(get_db)
):
    """
    Get what a user owes to and is owed by other trip members.
    Only unsettled splits are counted.
    """
    return expense_service.get_user_expense_summary(db, trip_id, user_id)


@router.post("/{expense_id}/settle/{user_id}", response_model=SuccessResponse)
async def settle_expense(
    expense_id: int,
    user_id: int,
    db: Session = Depends(get_db)
):
    """Mark a user's split of an expense as settled."""
    success = expense_service.settle_expense(db, expense_id, user_id)
    if not success:
        logger.warning(f"Settle requested for missing split: expense {expense_id}, user {user_id}")
    return SuccessResponse(success=success)
