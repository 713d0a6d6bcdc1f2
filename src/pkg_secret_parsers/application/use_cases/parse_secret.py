from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...domain.entities import ParsedSecret
from ...domain.ports import BodyRequest, SecretParser

_log = logging.getLogger(__name__)


@dataclass(slots=True)
class ParseSecretUseCase:
    """
    Application use case:
    - Ask each SecretParser in turn for a secret
    - Return the first one found

    A parser answering None means "not here, try the next one". If no
    parser finds anything the result is None and the host decides how to
    reject the caller.
    """

    parsers: Sequence[SecretParser]
    logger: logging.Logger = field(default=_log)

    async def execute(self, request: BodyRequest) -> Optional[ParsedSecret]:
        for parser in self.parsers:
            secret = await parser.parse(request)
            if secret is not None:
                self.logger.debug("Parser found secret: %s", type(parser).__name__)
                self.logger.debug("Secret id found: %s", secret.id)
                return secret

        self.logger.debug("Parser found no secret")
        return None
