"""Models package - Import all models for SQLAlchemy registration."""
from wayfarer.models.user import User
from wayfarer.models.trip import Trip, TripMember, MemberRole
from wayfarer.models.itinerary import DailyItinerary, Activity, TransportationMethod
from wayfarer.models.expense import Expense, ExpenseSplit, ExpenseCategory

__all__ = [
    "User",
    "Trip",
    "TripMember",
    "MemberRole",
    "DailyItinerary",
    "Activity",
    "TransportationMethod",
    "Expense",
    "ExpenseSplit",
    "ExpenseCategory",
]
