"""
Activity routes for daily itineraries.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from wayfarer.db.session import get_db
from wayfarer.schemas.activity import ActivityCreate, ActivityResponse, ActivityOrderUpdate
from wayfarer.schemas.common import SuccessResponse
from wayfarer.services import activity_service

router = APIRouter(prefix="/activities", tags=["activities"])


@router.post("", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity(
    activity_data: ActivityCreate,
    db: Session = Depends(get_db)
):
    """Add an activity to an itinerary."""
    return activity_service.create_activity(db, activity_data)


@router.get("/itinerary/{itinerary_id}", response_model=List[ActivityResponse])
async def get_itinerary_activities(
    itinerary_id: int,
    db: Session = Depends(get_db)
):
    """Get activities of an itinerary ordered by order_index."""
    return activity_service.get_itinerary_activities(db, itinerary_id)


@router.put("/{activity_id}/order", response_model=SuccessResponse)
async def update_activity_order(
    activity_id: int,
    order_data: ActivityOrderUpdate,
    db: Session = Depends(get_db)
):
    """
    Move an activity to a new position within its itinerary.
    Other activities shift so positions stay 0..N-1.
    """
    success = activity_service.update_activity_order(db, activity_id, order_data.new_order_index)
    return SuccessResponse(success=success)
