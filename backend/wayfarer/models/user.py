"""
User model for account records referenced by trips and expenses.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from wayfarer.db.base import BaseModel


class User(BaseModel):
    """User model with unique email and username."""
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    avatar_url = Column(String(500), nullable=True)

    # Relationships
    trips_owned = relationship("Trip", back_populates="owner")
    memberships = relationship("TripMember", back_populates="user", cascade="all, delete-orphan")
    expenses_paid = relationship("Expense", foreign_keys="Expense.payer_id", back_populates="payer")
    expense_splits = relationship("ExpenseSplit", back_populates="user")
