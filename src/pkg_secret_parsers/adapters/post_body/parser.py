import json
import logging
from collections import Counter
from typing import Any, Mapping, Optional

from ...domain.constants import CLIENT_ID_FIELD, CLIENT_SECRET_FIELD, ParsedSecretType
from ...domain.entities import ParsedSecret
from ...domain.exceptions import MalformedBodyError
from ...domain.ports import BodyRequest, SecretParser
from ...domain.value_objects import InputLengthRestrictions, is_present, lookup_field

_log = logging.getLogger(__name__)


def is_json_request(request: BodyRequest) -> bool:
    """
    True if the declared content type is JSON
    (`application/json` or any `application/*+json` variant).
    """
    raw = request.headers.get("content-type") or ""
    media_type = raw.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


def _json_scalar_to_str(value: Any) -> Any:
    """
    Numbers and booleans are read as their string form (`12345` -> "12345",
    `true` -> "True"); null, objects and arrays are left alone and count as
    absent later on.
    """
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (int, float)):
        return str(value)
    return value


def _single_valued(form: Mapping[str, Any]) -> Mapping[str, Any]:
    """One value per form key; a repeated key maps to None (ambiguous)."""
    if not hasattr(form, "multi_items"):
        return form

    items = form.multi_items()
    counts = Counter(key for key, _ in items)
    return {key: (value if counts[key] == 1 else None) for key, value in items}


class PostBodySecretParser(SecretParser):
    """
    Adapter implementing SecretParser port for credentials sent in the
    request body, either as JSON or as form data:

        {"client_id": "...", "client_secret": "..."}
        client_id=...&client_secret=...

    The body is read exactly once. Anything unreadable, incomplete or
    over-length yields None.
    """

    def __init__(
        self,
        restrictions: InputLengthRestrictions,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._restrictions = restrictions
        self._logger = logger or _log

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    async def parse(self, request: BodyRequest) -> Optional[ParsedSecret]:
        self._logger.debug("Start parsing for secret in post body")

        try:
            if is_json_request(request):
                fields = await self._read_json_fields(request)
            else:
                fields = await self._read_form_fields(request)
        except MalformedBodyError as exc:
            self._logger.debug("No secret found in post body: %s", exc)
            return None

        client_id = lookup_field(fields, CLIENT_ID_FIELD)
        client_secret = lookup_field(fields, CLIENT_SECRET_FIELD)

        if not (is_present(client_id) and is_present(client_secret)):
            self._logger.debug("No secret found in post body")
            return None

        return self._map_to_parsed_secret(client_id, client_secret)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    async def _read_json_fields(self, request: BodyRequest) -> Mapping[str, Any]:
        try:
            raw = await request.body()
        except Exception as exc:
            raise MalformedBodyError(f"body read failed: {exc}") from exc

        try:
            payload = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError and UnicodeDecodeError are both ValueError
            raise MalformedBodyError(f"invalid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise MalformedBodyError(
                f"expected a JSON object, got {type(payload).__name__}"
            )
        return {key: _json_scalar_to_str(value) for key, value in payload.items()}

    async def _read_form_fields(self, request: BodyRequest) -> Mapping[str, Any]:
        try:
            form = await request.form()
        except Exception as exc:
            # bad multipart framing, client disconnect, missing parser, ...
            raise MalformedBodyError(f"form read failed: {exc}") from exc
        return _single_valued(form)

    def _map_to_parsed_secret(self, client_id: str, client_secret: str) -> Optional[ParsedSecret]:
        if (
            self._restrictions.client_id_too_long(client_id)
            or self._restrictions.client_secret_too_long(client_secret)
        ):
            self._logger.debug("Client id or secret exceeds maximum length")
            return None

        return ParsedSecret(
            id=client_id,
            credential=client_secret,
            type=ParsedSecretType.SHARED_SECRET,
        )
