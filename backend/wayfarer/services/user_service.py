"""
User registry service.
"""
import logging
from sqlalchemy.orm import Session
from wayfarer.core.security import get_password_hash
from wayfarer.models.user import User
from wayfarer.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def create_user(db: Session, user_data: UserCreate) -> User:
    """
    Create a user with a hashed password.
    Duplicate email or username raises the database's IntegrityError.
    """
    new_user = User(
        email=user_data.email,
        username=user_data.username,
        password_hash=get_password_hash(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name
    )
    try:
        db.add(new_user)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(new_user)
    logger.info("Created user %s (%s)", new_user.id, new_user.username)
    return new_user
