"""Data-access operations over the users table."""

import logging

from sqlalchemy.orm import Session

from app.models import User
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def create_user(session: Session, data: UserCreate) -> User:
    """
    Insert one user and return the persisted row (id populated).

    No existence pre-check: a duplicate email is rejected by the unique index and
    the resulting IntegrityError propagates from commit.
    """
    user = User(email=data.email, name=data.name, role=data.role)
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Created user: id=%s role=%s", user.id, user.role)
    return user
