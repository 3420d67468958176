"""
Pydantic schemas for Activity entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from wayfarer.models.itinerary import TransportationMethod

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ActivityCreate(BaseModel):
    """Schema for activity creation. order_index is normally the current list length."""
    daily_itinerary_id: int
    title: str = Field(min_length=1)
    description: Optional[str] = None
    location_name: str = Field(min_length=1)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    start_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    estimated_duration: Optional[int] = Field(default=None, ge=0)
    transportation_method: Optional[TransportationMethod] = None
    cost_estimate: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    order_index: int = Field(ge=0)


class ActivityResponse(BaseModel):
    """Schema for activity response."""
    id: int
    daily_itinerary_id: int
    title: str
    description: Optional[str] = None
    location_name: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    estimated_duration: Optional[int] = None
    transportation_method: Optional[TransportationMethod] = None
    cost_estimate: Optional[float] = None
    order_index: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ActivityOrderUpdate(BaseModel):
    """Target position for an activity within its itinerary."""
    new_order_index: int = Field(ge=0)
