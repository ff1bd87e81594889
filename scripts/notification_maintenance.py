"""Periodic notification jobs, meant to be run from cron.

``purge`` deletes read notifications past the retention period and
``remind`` notifies registrants of events starting soon.
"""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.events import send_event_reminders
from app.application.use_cases.notifications import purge_read_notifications
from app.config import get_settings
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.notifications import NotificationPublisher

logger = logging.getLogger("notification_maintenance")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Notification maintenance jobs.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    purge = subparsers.add_parser("purge", help="Delete old read notifications")
    purge.add_argument(
        "--days",
        type=int,
        default=None,
        help="Maximum age in days (default: NOTIFICATION_RETENTION_DAYS)",
    )

    remind = subparsers.add_parser("remind", help="Send reminders for upcoming events")
    remind.add_argument(
        "--hours",
        type=int,
        default=None,
        help="Look-ahead window in hours (default: EVENT_REMINDER_WINDOW_HOURS)",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Execute the selected job and return the number of affected notifications."""

    initialize_database()
    session = SessionLocal()
    try:
        if args.command == "purge":
            return purge_read_notifications(session, max_age_days=args.days)
        # No websocket gateway lives in this process: reminders are stored only.
        return send_event_reminders(session, NotificationPublisher(), window_hours=args.hours)
    except SQLAlchemyError:
        session.rollback()
        raise
    finally:
        session.close()


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=get_settings().log_level.upper())
    args = parse_args(argv)
    try:
        count = run(args)
    except (ValueError, SQLAlchemyError) as exc:
        raise SystemExit(f"{args.command} failed: {exc}") from exc
    print(f"{args.command}: {count} notification(s)")


if __name__ == "__main__":
    main()
