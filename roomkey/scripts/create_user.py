"""
Create an account from the command line. Run from project root:
  python -m roomkey.scripts.create_user EMAIL PASSWORD [--name NAME]
Example:
  python -m roomkey.scripts.create_user frontdesk@example.com a-secure-password --name "Front Desk"
"""
import argparse
import logging
import sys

from roomkey.core.database import SessionLocal
from roomkey.core.errors import AppError
from roomkey.services.accounts import register_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a RoomKey account.")
    parser.add_argument("email", help="Email address (stored lowercase)")
    parser.add_argument("password", help="Password")
    parser.add_argument("--name", default=None, help="Display name (defaults to the email's local part)")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        register_user(db, args.email, args.password, args.name)
    except AppError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created account for %s", args.email.strip().lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
