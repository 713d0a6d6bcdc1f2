from __future__ import annotations

import logging
from typing import Optional

from ...adapters.post_body.parser import PostBodySecretParser
from ...application.use_cases.parse_secret import ParseSecretUseCase
from ...config.env import settings_from_env
from ...config.settings import SecretParserSettings
from ...domain.ports import SecretParser


def create_parse_secret_use_case(
        *,
        settings: Optional[SecretParserSettings] = None,
        logger: Optional[logging.Logger] = None,
) -> ParseSecretUseCase:
    """
    High-level factory: settings -> ParseSecretUseCase.

    - falls back to `settings_from_env()` when no settings are given
    - builds a PostBodySecretParser with the configured length limits
    - wraps it in the parser chain
    """
    settings = settings or settings_from_env()

    parsers: list[SecretParser] = [
        PostBodySecretParser(
            restrictions=settings.input_length_restrictions,
            logger=logger,
        ),
    ]

    if logger is None:
        return ParseSecretUseCase(parsers=parsers)
    return ParseSecretUseCase(parsers=parsers, logger=logger)
