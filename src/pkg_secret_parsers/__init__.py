"""
pkg_secret_parsers

Clean-architecture client secret parsing for identity / token servers.
Pulls client_id + client_secret out of a request (POST body, JSON or
form) and hands a ParsedSecret to whatever validates it.
"""

__version__ = "0.1.0"

from .domain.entities import ParsedSecret
from .domain.constants import ParsedSecretType, CLIENT_ID_FIELD, CLIENT_SECRET_FIELD
from .domain.exceptions import SecretParsingError, MalformedBodyError
from .domain.value_objects import InputLengthRestrictions, lookup_field, is_present
from .domain.ports import SecretParser, BodyRequest

from .application.use_cases.parse_secret import ParseSecretUseCase

from .adapters.post_body.parser import PostBodySecretParser

from .config.settings import SecretParserSettings
from .config.env import settings_from_env

__all__ = [
    "__version__",
    # domain core
    "ParsedSecret",
    "ParsedSecretType",
    "CLIENT_ID_FIELD",
    "CLIENT_SECRET_FIELD",
    "InputLengthRestrictions",
    "lookup_field",
    "is_present",
    "SecretParser",
    "BodyRequest",
    # exceptions
    "SecretParsingError",
    "MalformedBodyError",
    # use cases
    "ParseSecretUseCase",
    # adapters
    "PostBodySecretParser",
    # config
    "SecretParserSettings",
    "settings_from_env",
]
