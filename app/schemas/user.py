"""Pydantic schemas for creating and reading users."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Payload for inserting one user row."""

    email: str = Field(..., description="Email address (unique per store)")
    name: str | None = Field(default=None, description="Display name")
    role: str = Field(default="user", description="Application role, e.g. admin or user")


class UserRead(BaseModel):
    """User record as persisted."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str | None = None
    role: str
