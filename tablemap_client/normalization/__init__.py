from tablemap_client.normalization.base import BaseResponseNormalizer
from tablemap_client.normalization.models import NormalizedResult
from tablemap_client.normalization.normalizer import ResponseNormalizer, normalize_response

__all__ = [
    "BaseResponseNormalizer",
    "NormalizedResult",
    "ResponseNormalizer",
    "normalize_response",
]
