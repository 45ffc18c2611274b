class UploadError(Exception):
    """Base exception for the upload workflow."""


class NoFileSelectedError(UploadError):
    """Raised when submit is attempted before any file was chosen."""


class UploadTransportError(UploadError):
    """Raised when the request fails on the wire or with a non-success status."""


class InvalidTransitionError(UploadError):
    """Raised when the workflow is moved along an edge it does not have."""
