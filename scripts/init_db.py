"""
Database initialization script.

Creates the tables, seeds the food catalog and optionally creates a
professional (superuser) account.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --professional coach@example.com --password s3cretpass
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlmodel import Session

from app.core.logging_config import configure_logging
from app.db.init_db import init_db
from app.db.session import engine
from app.schemas.user import UserCreate
from app.services.user_service import UserService

logger = logging.getLogger("app.scripts.init_db")


def main() -> int:
    parser = argparse.ArgumentParser(description="Initialize the Routinize database.")
    parser.add_argument("--professional", help="Email of a professional account to create")
    parser.add_argument("--password", help="Password for the professional account")
    args = parser.parse_args()

    configure_logging()
    try:
        init_db()
        if args.professional:
            if not args.password:
                parser.error("--password is required with --professional")
            with Session(engine) as session:
                UserService(session).register(
                    UserCreate(email=args.professional, password=args.password), is_superuser=True,
                )
    except Exception:
        logger.exception("Database initialization failed")
        return 1
    logger.info("Database initialized")
    return 0


if __name__ == "__main__":
    sys.exit(main())
