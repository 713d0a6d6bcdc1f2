from __future__ import annotations

from dataclasses import dataclass, field

from ..domain.value_objects import InputLengthRestrictions


@dataclass(slots=True)
class SecretParserSettings:
    """
    Settings for the secret parsers.

    Host code decides how to construct this (env, config file, etc.).
    """
    input_length_restrictions: InputLengthRestrictions = field(
        default_factory=InputLengthRestrictions
    )

    # Logging
    log_level: str = "INFO"
    service_name: str = "pkg_secret_parsers"

    @property
    def max_client_id_length(self) -> int | None:
        return self.input_length_restrictions.client_id

    @property
    def max_client_secret_length(self) -> int | None:
        return self.input_length_restrictions.client_secret
