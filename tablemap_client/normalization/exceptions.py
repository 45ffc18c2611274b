class NormalizationError(Exception):
    """Raised when a server payload cannot be normalized."""


class ResponseDecodeError(NormalizationError):
    """Raised when the inner response string is not valid JSON."""
