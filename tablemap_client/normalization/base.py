from abc import ABC, abstractmethod

from tablemap_client.normalization.models import NormalizedResult


class BaseResponseNormalizer(ABC):
    """Contract for turning a parsed server payload into a displayable result."""

    @abstractmethod
    def normalize(self, payload: object) -> NormalizedResult:
        """Interpret the top-level JSON value returned by the analysis service.

        Args:
            payload: Parsed response body, normally a dict.

        Returns:
            NormalizedResult with either the pretty-printed layout or a
            diagnostic message. Never raises for malformed payloads.
        """
