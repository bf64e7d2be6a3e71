"""ORM model for application users."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base

ROLE_ADMIN = "admin"
ROLE_USER = "user"


class User(Base):
    """
    Application user account.

    email is unique at the schema level (unique index); role: 'admin' or 'user'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=True)
    role = Column(String(32), nullable=False, default=ROLE_USER, server_default=ROLE_USER)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
