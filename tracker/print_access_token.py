"""Print a bearer token for an existing user to stdout.

Usage:
    python -m tracker.print_access_token student@example.edu
"""
import argparse
import sys

from sqlalchemy import func

from tracker.auth.jwt_handler import create_access_token
from tracker.database import SessionLocal
from tracker.models.user import User


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email")
    parser.add_argument("--expires-minutes", type=int, default=None)
    args = parser.parse_args(argv)

    email = args.email.strip().lower()
    db = SessionLocal()
    try:
        user = db.query(User).filter(func.lower(User.email) == email).first()
    finally:
        db.close()
    if user is None:
        print(f"No user with email {email}.", file=sys.stderr)
        sys.exit(1)

    print(create_access_token(user.email, expires_minutes=args.expires_minutes))


if __name__ == "__main__":
    main()
