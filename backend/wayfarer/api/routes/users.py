"""
User management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from wayfarer.db.session import get_db
from wayfarer.schemas.user import UserCreate, UserResponse
from wayfarer.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user."""
    return user_service.create_user(db, user_data)
