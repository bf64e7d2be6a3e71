"""SQLAlchemy declarative Base shared by the ORM models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; Base.metadata is the alembic autogenerate target."""
