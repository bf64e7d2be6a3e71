"""Core app configuration and database."""

from app.core.config import get_settings, settings
from app.core.database import SessionLocal, engine

__all__ = ["get_settings", "settings", "SessionLocal", "engine"]
