"""Utility script to create the first administrator account."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users import create_user
from app.domain.entities import ProfileType
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an administrator account for the PME 360 API.",
    )
    parser.add_argument("--name", default="Administrator", help="Display name (default: Administrator)")
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Login email address (default: admin@example.com)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Account password. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create the administrator using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password for the new administrator: ")
    if len(password) < 8:
        raise SystemExit("The password must be at least 8 characters long.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            profile_type=ProfileType.ADMIN,
            verified=True,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while saving the user: {exc}") from exc
    else:
        print(
            "Administrator created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Email: {user.email}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
