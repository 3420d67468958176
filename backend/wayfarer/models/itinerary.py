"""
Daily itinerary and activity models.
"""
from sqlalchemy import Column, String, Text, Date, Float, Numeric, Enum as SQLEnum, ForeignKey, Integer, Index
from sqlalchemy.orm import relationship
from wayfarer.db.base import BaseModel
import enum


class TransportationMethod(str, enum.Enum):
    """How the traveller gets to an activity."""
    WALKING = "walking"
    DRIVING = "driving"
    PUBLIC_TRANSPORT = "public_transport"
    TAXI = "taxi"
    OTHER = "other"


class DailyItinerary(BaseModel):
    """One day of a trip's plan."""
    __tablename__ = "daily_itineraries"

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    notes = Column(Text, nullable=True)

    # Relationships
    trip = relationship("Trip", back_populates="itineraries")
    activities = relationship(
        "Activity",
        back_populates="itinerary",
        cascade="all, delete-orphan",
        order_by="Activity.order_index"
    )


class Activity(BaseModel):
    """A planned stop within a daily itinerary."""
    __tablename__ = "activities"

    daily_itinerary_id = Column(Integer, ForeignKey("daily_itineraries.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    location_name = Column(String(200), nullable=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    start_time = Column(String(5), nullable=True)  # HH:MM
    end_time = Column(String(5), nullable=True)
    estimated_duration = Column(Integer, nullable=True)  # Minutes
    transportation_method = Column(
        SQLEnum(TransportationMethod, name="transportation_method", values_callable=lambda e: [m.value for m in e]),
        nullable=True
    )
    cost_estimate = Column(Numeric(10, 2), nullable=True)
    order_index = Column(Integer, nullable=False)  # 0-based, dense within the itinerary

    # Relationships
    itinerary = relationship("DailyItinerary", back_populates="activities")

    __table_args__ = (
        Index('idx_activities_itinerary_order', 'daily_itinerary_id', 'order_index'),
    )
