from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from datetime import datetime, timezone
from typing import Any, Sequence

from .adapters.claims.standard import standard_claims_decoder
from .application.use_cases.check_expiry import is_expired
from .application.use_cases.decode_token import decode, extract_token_body
from .domain.exceptions import TokenError
from .logging_setup import setup_logging


def _parse_now(raw: str) -> datetime:
    try:
        moment = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 datetime: {raw!r}") from exc
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pkg-token",
        description="Inspect compact JWTs without verifying their signature",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    inspect = sub.add_parser("inspect", help="Decode a token body and check its expiry")
    inspect.add_argument("token", help="Compact token (use '-' to read it from stdin)")
    inspect.add_argument(
        "--now",
        type=_parse_now,
        help="Evaluate expiry at this ISO-8601 time (default: current UTC time)",
    )
    inspect.add_argument(
        "--standard",
        action="store_true",
        help="Also decode the registered claims (sub, iss, aud, exp, nbf, iat, jti).",
    )
    inspect.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")

    return parser.parse_args(args=argv)


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, tuple):
        return list(value)
    return value


def inspect_token(token: str, now: datetime, *, standard: bool = False) -> dict[str, Any]:
    """Summary dict for one token; raises TokenError on a malformed token."""
    body = extract_token_body(token)
    try:
        parsed: Any = json.loads(body)
    except ValueError:
        parsed = body

    summary: dict[str, Any] = {
        "body": parsed,
        "expired": is_expired(now, token),
    }
    if standard:
        claims = decode(standard_claims_decoder, token)
        summary["claims"] = {
            f.name: _jsonable(getattr(claims, f.name)) for f in dataclasses.fields(claims)
        }
    return summary


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(verbose=args.verbose)

    token = sys.stdin.read().strip() if args.token == "-" else args.token.strip()
    now = args.now or datetime.now(timezone.utc)

    try:
        summary = inspect_token(token, now, standard=args.standard)
    except TokenError as exc:
        json.dump({"ok": False, "error": exc.kind.value, "detail": exc.detail}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 1

    json.dump({"ok": True, **summary}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
