"""
Seed the database with the initial admin user. Run from project root:

  python -m app.scripts.seed

Run once after migrations (alembic upgrade head). A second run fails on the
unique email index; nothing is caught, so the process exits non-zero.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import sys

from app.core.database import SessionLocal
from app.models.user import ROLE_ADMIN
from app.schemas.user import UserCreate, UserRead
from app.services.users import create_user

# Local time, ISO-8601 without a zone suffix.
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
logger = logging.getLogger(__name__)

ADMIN_USER = UserCreate(
    email="admin@example.com",
    name="Admin User",
    role=ROLE_ADMIN,
)


def main() -> int:
    """Insert the admin user and print a confirmation line."""
    logger.info("Seeding admin user: email=%s", ADMIN_USER.email)
    db = SessionLocal()
    try:
        admin = UserRead.model_validate(create_user(db, ADMIN_USER))
        print(f"Created admin user: {admin.email}")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
