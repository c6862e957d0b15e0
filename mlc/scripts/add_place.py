"""Provision a place, or reset the password of an existing one.

Usage examples:
    python -m mlc.scripts.add_place shop1
    python -m mlc.scripts.add_place admin --reset

The password is prompted for unless given with --password.
"""

from __future__ import annotations

import argparse
import getpass
import logging

from mlc.config import get_config
from mlc.db import DatabaseConnection
from mlc.errors.base import ApplicationError
from mlc.repository.place import PlaceRepository
from mlc.services.place import PlaceService

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Add a place (cashier terminal)")
    parser.add_argument("name", type=str, help="Place name, used to log in")
    parser.add_argument(
        "--password",
        type=str,
        required=False,
        help="Place password (prompted for when omitted)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Change the password of an existing place instead",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    password = args.password
    if password is None:
        password = getpass.getpass("Enter new place password: ")
    if not password:
        logger.error("Empty password, nothing done")
        return 1

    # Create config explicitly for CLI usage (bypass FastAPI Depends)
    config = get_config()
    db = DatabaseConnection(config=config)
    db.create_tables()
    session = db.get_session()
    try:
        place_service = PlaceService(place_repository=PlaceRepository(db=session))
        if args.reset:
            place_service.set_password(args.name, password)
            print(f"Password of place '{args.name}' changed")
        else:
            place_service.create(args.name, password)
            print(f"Successfully added a place with name '{args.name}'!")
    except ApplicationError as exc:
        logger.error(exc.error)
        return 1
    finally:
        session.close()
        db.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
