from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, Request, status

from ...application.use_cases.parse_secret import ParseSecretUseCase
from ...domain.entities import ParsedSecret


@dataclass(slots=True)
class FastAPIClientSecrets:
    """
    FastAPI integration for pkg_secret_parsers.

    Exposes the parser chain as route dependencies:

        client_secrets = create_fastapi_client_secrets()

        @router.post("/connect/token")
        async def token(secret: ParsedSecret = Depends(client_secrets.require_client_secret)):
            ...
    """

    parse_use_case: ParseSecretUseCase

    async def get_client_secret(self, request: Request) -> Optional[ParsedSecret]:
        """Dependency: the client secret on the request, if any."""
        return await self.parse_use_case.execute(request)

    async def require_client_secret(self, request: Request) -> ParsedSecret:
        """Dependency: require a client secret (401 invalid_client otherwise)."""
        secret = await self.parse_use_case.execute(request)
        if secret is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={
                    "error": "invalid_client",
                    "error_description": "client credentials not found",
                },
            )
        return secret
