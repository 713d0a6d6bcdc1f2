class SecretParsingError(Exception):
    """Raised internally when a request cannot be inspected for a secret."""
    pass


class MalformedBodyError(SecretParsingError):
    """Raised when the request body cannot be read or decoded."""
    pass
