"""
Expense ledger: recording group expenses, settling splits and computing
per-user balances within a trip.
"""
import logging
from collections import Counter
from decimal import Decimal
from typing import Dict, List

from sqlalchemy import and_, case, func
from sqlalchemy.orm import Session, selectinload

from wayfarer.core.config import settings
from wayfarer.core.utils import money_to_float
from wayfarer.models.expense import Expense, ExpenseSplit
from wayfarer.schemas.expense import ExpenseCreate

logger = logging.getLogger(__name__)


def create_expense(db: Session, expense_data: ExpenseCreate) -> Expense:
    """
    Persist an expense and one unsettled split per entry in ``split_with``.

    The expense and its splits are committed together; if any insert fails
    the whole unit is rolled back and the storage error is re-raised as is.
    Split amounts are accepted as given, they are not required to add up to
    the expense amount.
    """
    split_total = sum((share.amount for share in expense_data.split_with), Decimal(0))
    if expense_data.split_with and split_total != expense_data.amount:
        logger.warning(
            "Split total %s differs from expense amount %s (trip %s, payer %s)",
            split_total, expense_data.amount, expense_data.trip_id, expense_data.payer_id
        )

    new_expense = Expense(
        trip_id=expense_data.trip_id,
        payer_id=expense_data.payer_id,
        title=expense_data.title,
        description=expense_data.description,
        amount=expense_data.amount,
        currency=expense_data.currency,
        category=expense_data.category,
        expense_date=expense_data.expense_date
    )
    try:
        db.add(new_expense)
        db.flush()

        for share in expense_data.split_with:
            db.add(ExpenseSplit(
                expense_id=new_expense.id,
                user_id=share.user_id,
                amount=share.amount,
                is_settled=False
            ))

        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(new_expense)
    logger.info(
        "Created expense %s on trip %s with %d split(s)",
        new_expense.id, new_expense.trip_id, len(expense_data.split_with)
    )
    return new_expense


def get_trip_expenses(db: Session, trip_id: int) -> List[Expense]:
    """Get every expense of a trip with its splits loaded, oldest first."""
    return db.query(Expense).options(
        selectinload(Expense.splits)
    ).filter(
        Expense.trip_id == trip_id
    ).order_by(Expense.id).all()


def settle_expense(db: Session, expense_id: int, user_id: int) -> bool:
    """
    Mark the user's split on an expense as settled.

    Returns False when the user has no split on that expense; settling an
    already settled split is a successful no-op.
    """
    try:
        updated = db.query(ExpenseSplit).filter(
            ExpenseSplit.expense_id == expense_id,
            ExpenseSplit.user_id == user_id
        ).update({ExpenseSplit.is_settled: True}, synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        raise

    if updated:
        logger.info("Settled split of user %s on expense %s", user_id, expense_id)
    else:
        logger.info("No split of user %s on expense %s to settle", user_id, expense_id)
    return updated > 0


def get_trip_currency(db: Session, trip_id: int) -> str:
    """
    Most frequently used currency among a trip's expenses.

    Ties go to the currency that appeared first. Falls back to the
    configured default when the trip has no expenses.
    """
    currencies = [
        row.currency for row in db.query(Expense.currency).filter(
            Expense.trip_id == trip_id
        ).order_by(Expense.id).all()
    ]
    if not currencies:
        return settings.DEFAULT_CURRENCY
    return Counter(currencies).most_common(1)[0][0]


def get_user_expense_summary(db: Session, trip_id: int, user_id: int) -> Dict[str, object]:
    """
    Compute what a user owes and is owed within a trip.

    Only unsettled splits count. ``owes`` sums the user's own splits on
    expenses someone else paid; ``owed`` sums other users' splits on expenses
    the user paid. A user's split on their own expense counts toward neither.
    """
    owes_expr = case(
        (and_(Expense.payer_id != user_id, ExpenseSplit.user_id == user_id), ExpenseSplit.amount),
        else_=0
    )
    owed_expr = case(
        (and_(Expense.payer_id == user_id, ExpenseSplit.user_id != user_id), ExpenseSplit.amount),
        else_=0
    )

    owes, owed = db.query(
        func.coalesce(func.sum(owes_expr), 0),
        func.coalesce(func.sum(owed_expr), 0)
    ).select_from(ExpenseSplit).join(
        Expense, ExpenseSplit.expense_id == Expense.id
    ).filter(
        Expense.trip_id == trip_id,
        ExpenseSplit.is_settled.is_(False)
    ).one()

    return {
        "owes": money_to_float(owes),
        "owed": money_to_float(owed),
        "currency": get_trip_currency(db, trip_id),
    }
