#!/usr/bin/env python3
"""
Create (or report) an administrator account.

Usage:
    python scripts/create_admin.py admin@boutique.com admin123 "Ana Admin"

Reads DATABASE_URL from the environment or .env, like the API.
"""
import logging
import sys

from boutique.config.database import Base, SessionLocal, engine
from boutique.core.exceptions import IntegrityViolationError
from boutique.core.logging import setup_logging
from boutique.modules.users.service import UserService
from boutique.shared.database import models  # noqa: F401

logger = logging.getLogger("create_admin")


def main(argv) -> int:
    setup_logging()

    if len(argv) < 3:
        logger.error("Usage: create_admin.py EMAIL PASSWORD [NAME]")
        return 2

    email, password = argv[1], argv[2]
    name = argv[3] if len(argv) > 3 else "Administrator"

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        user = UserService(db).ensure_admin(email, password, name)
    except IntegrityViolationError as e:
        logger.error(f"Could not create admin: {e.message}")
        return 1
    finally:
        db.close()

    if user is None:
        logger.info(f"User {email} already exists, nothing to do")
    else:
        logger.info(f"Admin {email} created with id {user.id}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
