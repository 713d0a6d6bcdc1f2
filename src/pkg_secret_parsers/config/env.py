from __future__ import annotations

import os
from typing import Optional

from ..domain.value_objects import InputLengthRestrictions
from .settings import SecretParserSettings


def _positive_int(key: str) -> Optional[int]:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise RuntimeError(f"{key} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise RuntimeError(f"{key} must be positive, got {value}")
    return value


def restrictions_from_env() -> InputLengthRestrictions:
    """Unset or blank limits mean unlimited."""
    return InputLengthRestrictions(
        client_id=_positive_int("INPUT_LENGTH_CLIENT_ID"),
        client_secret=_positive_int("INPUT_LENGTH_CLIENT_SECRET"),
    )


def settings_from_env() -> SecretParserSettings:
    return SecretParserSettings(
        input_length_restrictions=restrictions_from_env(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        service_name=(os.getenv("SERVICE_NAME") or "pkg_secret_parsers").strip(),
    )
