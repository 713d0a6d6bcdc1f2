# src/pkg_secret_parsers/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


# --- Configuration value objects -----------------------------------------


def _check_limit(name: str, value: Optional[int]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer or None, got {value!r}")


@dataclass(frozen=True, slots=True)
class InputLengthRestrictions:
    """
    Maximum accepted lengths (in characters) for client credentials.

    `None` means unlimited.
    """
    client_id: Optional[int] = None
    client_secret: Optional[int] = None

    def __post_init__(self) -> None:
        _check_limit("client_id", self.client_id)
        _check_limit("client_secret", self.client_secret)

    def client_id_too_long(self, value: str) -> bool:
        return self.client_id is not None and len(value) > self.client_id

    def client_secret_too_long(self, value: str) -> bool:
        return self.client_secret is not None and len(value) > self.client_secret


# --- Body field helpers ---------------------------------------------------


def lookup_field(fields: Mapping[str, Any], name: str) -> Optional[str]:
    """
    Look up a body field by exact (case-sensitive) name.

    Returns None when the key is missing or its value is not a string
    (null, nested objects, uploaded files), so "missing" never collapses
    into "empty string".
    """
    value = fields.get(name)
    if isinstance(value, str):
        return value
    return None


def is_present(value: Optional[str]) -> bool:
    """True if the value is not None and not blank."""
    return value is not None and bool(value.strip())
