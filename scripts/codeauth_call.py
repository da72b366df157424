"""codeauth_call.py

Developer helper that runs a single CodeAuth SDK operation against a real
project and prints the result envelope as JSON.

Key features
------------
* Configuration comes from ``CODEAUTH_*`` environment variables
  (``CODEAUTH_ENDPOINT``, ``CODEAUTH_PROJECT_ID`` …)
* Optional ``.env``-style file via ``--env-file``; variables already present
  in the environment win
* Exit status is 0 only when the envelope reports ``no_error``
* Session tokens are echoed only inside the JSON result, never in logs

Example
-------
    python scripts/codeauth_call.py signin-email user@example.com
    python scripts/codeauth_call.py session-info <session_token>
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict

from codeauth import CodeAuthClient, NO_ERROR, config_from_env

DEFAULT_ENV_FILE = Path("scripts/.env.codeauth")


# --------------------------------------------------------------------------- #
# Environment helpers
# --------------------------------------------------------------------------- #
def _load_env_file(env_path: Path | None) -> None:
    """Load KEY=VALUE pairs from a .env style file into *os.environ*."""
    if env_path is None or not env_path.exists():
        return

    for raw in env_path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, val = line.split("=", 1)
        key = key.strip()
        val = val.strip()
        if key and key not in os.environ:
            os.environ[key] = val


# --------------------------------------------------------------------------- #
# CLI
# --------------------------------------------------------------------------- #
def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Call a CodeAuth API operation.")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=DEFAULT_ENV_FILE,
        help=f"Optional KEY=VALUE file to load (default: {DEFAULT_ENV_FILE})",
    )
    parser.add_argument("--prefix", default="CODEAUTH_", help="Environment variable prefix")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("signin-email", help="Send a one-time code by email")
    p.add_argument("email")

    p = sub.add_parser("signin-email-verify", help="Verify an emailed one-time code")
    p.add_argument("email")
    p.add_argument("code")

    p = sub.add_parser("signin-social", help="Create a social sign-in URL")
    p.add_argument("social_type", choices=["google", "microsoft", "apple"])

    p = sub.add_parser("signin-social-verify", help="Verify a social authorization code")
    p.add_argument("social_type", choices=["google", "microsoft", "apple"])
    p.add_argument("authorization_code")

    p = sub.add_parser("session-info", help="Show information for a session token")
    p.add_argument("session_token")

    p = sub.add_parser("session-refresh", help="Refresh a session token")
    p.add_argument("session_token")

    p = sub.add_parser("session-invalidate", help="Invalidate session token(s)")
    p.add_argument("session_token")
    p.add_argument(
        "invalidate_type",
        nargs="?",
        default="only_this",
        choices=["only_this", "all", "all_but_this"],
    )
    return parser


def _dispatch(client: CodeAuthClient, args: argparse.Namespace) -> Dict[str, Any]:
    commands: Dict[str, Callable[[], Dict[str, Any]]] = {
        "signin-email": lambda: client.sign_in_email(args.email),
        "signin-email-verify": lambda: client.sign_in_email_verify(args.email, args.code),
        "signin-social": lambda: client.sign_in_social(args.social_type),
        "signin-social-verify": lambda: client.sign_in_social_verify(
            args.social_type, args.authorization_code
        ),
        "session-info": lambda: client.session_info(args.session_token),
        "session-refresh": lambda: client.session_refresh(args.session_token),
        "session-invalidate": lambda: client.session_invalidate(
            args.session_token, args.invalidate_type
        ),
    }
    return commands[args.command]()


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s %(message)s",
    )
    _load_env_file(args.env_file)

    try:
        config = config_from_env(args.prefix)
    except ValueError as exc:
        sys.exit(f"Invalid configuration: {exc}")
    if config is None:
        sys.exit(f"{args.prefix}ENDPOINT and {args.prefix}PROJECT_ID must be set.")

    with CodeAuthClient(config) as client:
        result = _dispatch(client, args)

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0 if result.get("error") == NO_ERROR else 1


if __name__ == "__main__":
    sys.exit(main())
