"""Unwraps the double-encoded layout returned by the analysis service."""

import json

from tablemap_client.logging.logger import Log
from tablemap_client.normalization.base import BaseResponseNormalizer
from tablemap_client.normalization.exceptions import ResponseDecodeError
from tablemap_client.normalization.models import (
    INVALID_JSON_MESSAGE,
    NO_RESPONSE_MESSAGE,
    NormalizedResult,
)

RESPONSE_FIELD = "response"


class ResponseNormalizer(BaseResponseNormalizer):
    """Decodes the JSON string nested under ``response`` and pretty-prints it."""

    def __init__(self, *, field: str = RESPONSE_FIELD, indent: int = 2) -> None:
        self._field = field
        self._indent = indent

    def normalize(self, payload: object) -> NormalizedResult:
        if not isinstance(payload, dict):
            return NormalizedResult.diagnostic(NO_RESPONSE_MESSAGE)
        inner = payload.get(self._field)
        if inner is None:
            return NormalizedResult.diagnostic(NO_RESPONSE_MESSAGE)

        try:
            data = self._decode_inner(inner)
        except ResponseDecodeError as exc:
            Log.error(f"Failed to parse response JSON: {exc}")
            return NormalizedResult.diagnostic(INVALID_JSON_MESSAGE)

        return NormalizedResult(text=self._render(data), data=data)

    def _render(self, data: object) -> str:
        return json.dumps(data, indent=self._indent, ensure_ascii=False)

    @classmethod
    def _decode_inner(cls, inner: object) -> object:
        # Already structured: the service (or a proxy) undid the string wrapping.
        if isinstance(inner, (dict, list)):
            return inner
        if not isinstance(inner, str):
            raise ResponseDecodeError(
                f"expected a JSON string, got {type(inner).__name__}"
            )
        try:
            return json.loads(cls._strip_code_fences(inner))
        except json.JSONDecodeError as exc:
            raise ResponseDecodeError(str(exc)) from exc

    @staticmethod
    def _strip_code_fences(raw: str) -> str:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)
        return cleaned


def normalize_response(payload: object) -> NormalizedResult:
    """Normalize with the default field and indentation."""
    return ResponseNormalizer().normalize(payload)
