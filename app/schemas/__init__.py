"""Pydantic request/response schemas."""

from app.schemas.user import UserCreate, UserRead

__all__ = [
    "UserCreate",
    "UserRead",
]
