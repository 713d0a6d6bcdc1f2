from typing import Any, Callable, Mapping, Optional

import pytest
from starlette.requests import Request

from pkg_secret_parsers.cli import build_request

JSON = "application/json"
FORM = "application/x-www-form-urlencoded"


class CountingRequest:
    """Port-shaped request that records how often the body was read."""

    def __init__(
        self,
        *,
        content_type: Optional[str] = None,
        body: bytes = b"",
        form: Optional[Mapping[str, Any]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.headers = {"content-type": content_type} if content_type else {}
        self._body = body
        self._form = form or {}
        self._error = error
        self.reads = 0

    async def body(self) -> bytes:
        self.reads += 1
        if self._error is not None:
            raise self._error
        return self._body

    async def form(self) -> Mapping[str, Any]:
        self.reads += 1
        if self._error is not None:
            raise self._error
        return self._form


@pytest.fixture
def make_request() -> Callable[..., Request]:
    def _make(body, content_type: Optional[str] = FORM) -> Request:
        if isinstance(body, str):
            body = body.encode("utf-8")
        return build_request(body, content_type)

    return _make
