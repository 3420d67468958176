"""
Activity sequencing within daily itineraries.

``order_index`` is zero-based and kept dense (0..N-1) per itinerary.
"""
import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from wayfarer.core.errors import InvalidOrderError, NotFoundError
from wayfarer.models.itinerary import Activity
from wayfarer.schemas.activity import ActivityCreate

logger = logging.getLogger(__name__)


def create_activity(db: Session, activity_data: ActivityCreate) -> Activity:
    """Create an activity at the position supplied by the caller."""
    new_activity = Activity(**activity_data.model_dump())
    try:
        db.add(new_activity)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(new_activity)
    logger.info(
        "Created activity %s in itinerary %s at index %s",
        new_activity.id, new_activity.daily_itinerary_id, new_activity.order_index
    )
    return new_activity


def get_itinerary_activities(db: Session, itinerary_id: int) -> List[Activity]:
    """Get activities of an itinerary in display order."""
    return db.query(Activity).filter(
        Activity.daily_itinerary_id == itinerary_id
    ).order_by(Activity.order_index, Activity.id).all()


def update_activity_order(db: Session, activity_id: int, new_order_index: int) -> bool:
    """
    Move an activity to ``new_order_index`` and shift its siblings so the
    itinerary's indices stay contiguous.

    Moving down decrements siblings in (current, new]; moving up increments
    siblings in [new, current). An index past the end is clamped to the last
    position; a negative index is rejected. The shift and the final update
    run in one transaction with the itinerary's rows locked.
    """
    if new_order_index < 0:
        raise InvalidOrderError(f"order_index must be >= 0, got {new_order_index}")

    try:
        activity = db.query(Activity).filter(
            Activity.id == activity_id
        ).with_for_update().first()
        if not activity:
            raise NotFoundError("Activity", activity_id)

        itinerary_id = activity.daily_itinerary_id
        current_index = activity.order_index

        siblings = db.query(Activity).filter(
            Activity.daily_itinerary_id == itinerary_id
        ).with_for_update().all()
        last_index = len(siblings) - 1
        if new_order_index > last_index:
            logger.info(
                "Clamping order_index %s to %s for activity %s",
                new_order_index, last_index, activity_id
            )
            new_order_index = last_index

        if new_order_index == current_index:
            db.rollback()
            return True

        now = datetime.utcnow()
        if current_index < new_order_index:
            db.query(Activity).filter(
                Activity.daily_itinerary_id == itinerary_id,
                Activity.id != activity_id,
                Activity.order_index > current_index,
                Activity.order_index <= new_order_index
            ).update({
                Activity.order_index: Activity.order_index - 1,
                Activity.updated_at: now
            }, synchronize_session=False)
        else:
            db.query(Activity).filter(
                Activity.daily_itinerary_id == itinerary_id,
                Activity.id != activity_id,
                Activity.order_index >= new_order_index,
                Activity.order_index < current_index
            ).update({
                Activity.order_index: Activity.order_index + 1,
                Activity.updated_at: now
            }, synchronize_session=False)

        db.query(Activity).filter(
            Activity.id == activity_id
        ).update({
            Activity.order_index: new_order_index,
            Activity.updated_at: now
        }, synchronize_session=False)

        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Moved activity %s in itinerary %s from %s to %s",
        activity_id, itinerary_id, current_index, new_order_index
    )
    return True
