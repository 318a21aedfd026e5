"""Mint a bearer token for calling the admin staff API."""

import argparse
import os
import sys
from datetime import timedelta

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from staff_admin.config import get_settings
from staff_admin.application.services.auth_service import create_access_token


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a Staff Admin API token")
    parser.add_argument("subject", help="Identity stored in the token's 'sub' claim")
    parser.add_argument(
        "--role",
        default="admin",
        help="Role claim carried by the token (default: admin)",
    )
    parser.add_argument(
        "--minutes",
        type=int,
        default=None,
        help="Lifetime in minutes (defaults to JWT_EXPIRATION_MINUTES)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(list(argv) if argv is not None else None)
    settings = get_settings()

    if settings.uses_default_secret:
        print("warning: TOKEN_SECRET is not set, signing with the default secret", file=sys.stderr)

    expires = timedelta(minutes=args.minutes) if args.minutes else None
    token = create_access_token({"sub": args.subject, "role": args.role}, expires, settings)
    print(token)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
