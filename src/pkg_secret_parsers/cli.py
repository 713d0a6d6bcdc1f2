# src/pkg_secret_parsers/cli.py

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Sequence

from starlette.requests import Request

from .config.env import settings_from_env
from .domain.value_objects import InputLengthRestrictions
from .integrations.common.parser_factory import create_parse_secret_use_case
from .observability.logging import configure_logging

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pkg-secret-parsers",
        description="Check whether a POST body carries client credentials",
    )

    parser.add_argument(
        "--body",
        "-b",
        help="Raw request body (read from stdin when omitted).",
    )
    parser.add_argument(
        "--content-type",
        "-t",
        default=FORM_CONTENT_TYPE,
        help=f"Content-Type header of the request (default: {FORM_CONTENT_TYPE}).",
    )
    parser.add_argument(
        "--max-client-id-length",
        type=_positive_int,
        help="Override INPUT_LENGTH_CLIENT_ID.",
    )
    parser.add_argument(
        "--max-client-secret-length",
        type=_positive_int,
        help="Override INPUT_LENGTH_CLIENT_SECRET.",
    )
    parser.add_argument(
        "--log-level",
        help="Override LOG_LEVEL (e.g. DEBUG to see parser traces on stderr).",
    )

    return parser.parse_args(args=argv)


def build_request(body: bytes, content_type: str | None) -> Request:
    """Wrap a raw body in a one-shot ASGI request."""
    headers = [(b"content-length", str(len(body)).encode("latin-1"))]
    if content_type:
        headers.append((b"content-type", content_type.encode("latin-1")))

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/",
        "query_string": b"",
        "headers": headers,
    }
    sent = False

    async def receive() -> dict[str, Any]:
        nonlocal sent
        if sent:
            return {"type": "http.disconnect"}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)


async def _run(args: argparse.Namespace, body: bytes) -> dict[str, Any]:
    settings = settings_from_env()
    if args.log_level:
        settings.log_level = args.log_level.upper()

    settings.input_length_restrictions = InputLengthRestrictions(
        client_id=(
            args.max_client_id_length
            if args.max_client_id_length is not None
            else settings.max_client_id_length
        ),
        client_secret=(
            args.max_client_secret_length
            if args.max_client_secret_length is not None
            else settings.max_client_secret_length
        ),
    )

    configure_logging(settings.log_level, settings.service_name)

    use_case = create_parse_secret_use_case(settings=settings)
    secret = await use_case.execute(build_request(body, args.content_type))

    if secret is None:
        return {"found": False}
    # the credential itself is never printed
    return {"found": True, "client_id": secret.id, "type": secret.type.value}


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    raw = args.body if args.body is not None else sys.stdin.read()

    try:
        summary = asyncio.run(_run(args, raw.encode("utf-8")))
    except Exception as exc:  # noqa: BLE001
        json.dump({"ok": False, "error": str(exc)}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        raise

    json.dump({"ok": True, **summary}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    if not summary["found"]:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
