"""Classified errors raised by the completion client."""

from enum import Enum


class CompletionErrorKind(str, Enum):
    """Failure categories surfaced to callers."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    HTTP_ERROR = "http_error"
    NO_RESPONSE = "no_response"
    NETWORK_FAILURE = "network_failure"
    EMPTY_GENERATION = "empty_generation"


_STATUS_KINDS: dict[int, CompletionErrorKind] = {
    400: CompletionErrorKind.BAD_REQUEST,
    401: CompletionErrorKind.UNAUTHORIZED,
    403: CompletionErrorKind.FORBIDDEN,
    404: CompletionErrorKind.NOT_FOUND,
    429: CompletionErrorKind.RATE_LIMITED,
}

_STATUS_MESSAGES: dict[CompletionErrorKind, str] = {
    CompletionErrorKind.BAD_REQUEST: "Invalid request to the completion service. Please check your API key and try again.",
    CompletionErrorKind.UNAUTHORIZED: "Invalid API key. Please check your Gemini API key.",
    CompletionErrorKind.FORBIDDEN: "Access denied. Please check your API key permissions.",
    CompletionErrorKind.NOT_FOUND: "Model not found. Please try again later.",
    CompletionErrorKind.RATE_LIMITED: "Rate limit exceeded. Please wait a moment before asking another question.",
    CompletionErrorKind.SERVER_ERROR: "Completion service error. Please try again in a few minutes.",
}


class CompletionServiceError(Exception):
    """Raised when the completion service cannot produce an answer.

    Attributes:
        kind: Failure category.
        message: Human-readable explanation suitable for display.
        status_code: HTTP status returned by the service, when there was one.
    """

    def __init__(
        self,
        kind: CompletionErrorKind,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code

    @classmethod
    def from_status(cls, status_code: int, reason: str = "") -> "CompletionServiceError":
        """Classify a non-success HTTP status.

        Args:
            status_code: HTTP status code of the response.
            reason: Reason phrase, used for unclassified statuses.

        Returns:
            CompletionServiceError of the matching kind.
        """
        kind = _STATUS_KINDS.get(status_code)
        if kind is None:
            kind = (
                CompletionErrorKind.SERVER_ERROR
                if status_code >= 500
                else CompletionErrorKind.HTTP_ERROR
            )
        message = _STATUS_MESSAGES.get(kind) or f"Completion service error {status_code}: {reason}".rstrip(": ")
        return cls(kind, message, status_code=status_code)

    def __repr__(self) -> str:
        return f"CompletionServiceError(kind={self.kind.value!r}, status_code={self.status_code!r})"
