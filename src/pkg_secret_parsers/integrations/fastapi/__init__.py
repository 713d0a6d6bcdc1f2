from __future__ import annotations

import logging
from typing import Optional

from .deps import FastAPIClientSecrets
from ..common.parser_factory import create_parse_secret_use_case
from ...config.settings import SecretParserSettings


def create_fastapi_client_secrets(
    *,
    settings: Optional[SecretParserSettings] = None,
    logger: Optional[logging.Logger] = None,
) -> FastAPIClientSecrets:
    """
    High-level helper for FastAPI apps:

    - Creates the parser chain from settings (or the environment)
    - Wraps it in FastAPIClientSecrets, exposing dependencies like:

        client_secrets.get_client_secret
        client_secrets.require_client_secret
    """
    use_case = create_parse_secret_use_case(settings=settings, logger=logger)
    return FastAPIClientSecrets(parse_use_case=use_case)


__all__ = ["FastAPIClientSecrets", "create_fastapi_client_secrets"]
