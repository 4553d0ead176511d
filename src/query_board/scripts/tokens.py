# src/query_board/scripts/tokens.py
"""Operator commands for bootstrapping users and bearer tokens.

Usage:
    python -m query_board.scripts.tokens init-db
    python -m query_board.scripts.tokens create-user --name Alice --avatar https://...
    python -m query_board.scripts.tokens issue-token <user_id>
"""

from __future__ import annotations

import argparse
import sys

from sqlalchemy.orm import Session

from query_board.core.security import create_access_token
from query_board.db.session import SessionLocal, create_tables
from query_board.models import User


def create_user(
    db: Session,
    name: str,
    email: str | None = None,
    avatar: str | None = None,
) -> User:
    """Insert a user and return it.

    Args:
        db: Database session
        name: Display name copied onto the user's queries and comments
        email: Optional unique email address
        avatar: Optional avatar URL
    """
    user = User(name=name, email=email, avatar=avatar)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def issue_token(db: Session, user_id: str) -> str:
    """Return a bearer token for an existing user.

    Raises:
        LookupError: If no user has ``user_id``
    """
    if db.get(User, user_id) is None:
        raise LookupError(f"No user with id {user_id}")
    return create_access_token(user_id)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage Query Board users and tokens")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="Create all database tables")

    create = commands.add_parser("create-user", help="Create a user and print its id")
    create.add_argument("--name", required=True)
    create.add_argument("--email", default=None)
    create.add_argument("--avatar", default=None)

    token = commands.add_parser("issue-token", help="Print a bearer token for a user")
    token.add_argument("user_id")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "init-db":
        create_tables()
        print("Database initialized.")
        return 0

    db = SessionLocal()
    try:
        if args.command == "create-user":
            user = create_user(db, args.name, email=args.email, avatar=args.avatar)
            print(user.id)
        else:
            print(issue_token(db, args.user_id))
    except LookupError as exc:
        print(f"[tokens] ERROR: {exc}", file=sys.stderr)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
