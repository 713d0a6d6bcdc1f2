from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from .entities import ParsedSecret


class BodyRequest(Protocol):
    """
    Minimal view of an incoming HTTP request.

    `starlette.requests.Request` satisfies this structurally.
    """

    @property
    def headers(self) -> Mapping[str, str]:
        ...

    async def body(self) -> bytes:
        ...

    async def form(self) -> Mapping[str, Any]:
        ...


class SecretParser(Protocol):
    """
    Port for pulling client credentials out of one part of a request.

    Implementations live in the adapters layer (e.g. the POST body parser).
    """

    async def parse(self, request: BodyRequest) -> Optional[ParsedSecret]:
        """
        Look for a secret on the request.

        Returns:
          - ParsedSecret when this parser found one
          - None otherwise, so the caller can try the next parser

        Should NOT raise for malformed or hostile request input.
        """
        ...
