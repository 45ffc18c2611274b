from dataclasses import dataclass

NO_RESPONSE_MESSAGE = "No response from server."
INVALID_JSON_MESSAGE = "Invalid JSON format received."


@dataclass(frozen=True)
class NormalizedResult:
    """Display-ready outcome of normalizing a server payload."""

    text: str
    data: object = None
    is_diagnostic: bool = False

    @classmethod
    def diagnostic(cls, message: str) -> "NormalizedResult":
        return cls(text=message, data=None, is_diagnostic=True)
