from dataclasses import dataclass

from .constants import ParsedSecretType


@dataclass(frozen=True, slots=True)
class ParsedSecret:
    """
    Client authentication material pulled out of a request.

    Handed to a secret validator as-is; this package does NOT check the
    credential against any client store.
    """
    id: str
    credential: str
    type: ParsedSecretType = ParsedSecretType.SHARED_SECRET

    def __repr__(self) -> str:
        # never echo the credential into logs / tracebacks
        return f"ParsedSecret(id={self.id!r}, credential='***', type={self.type})"
