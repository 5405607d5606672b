"""Custom exception hierarchy for the solar intel engine."""

from typing import Any


class SolarIntelError(Exception):
    """Base exception for all solar intel errors.

    Attributes:
        message: Human-readable error message.
        context: Optional dictionary with additional error context.
    """

    kind = "error"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Format error message with context."""
        if not self.context:
            return self.message

        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} | Context: {context_str}"

    def to_dict(self) -> dict[str, Any]:
        """Structured failure for the request-handling layer."""
        failure: dict[str, Any] = {"error": self.kind, "message": self.message}
        if "status_code" in self.context:
            failure["statusCode"] = self.context["status_code"]
        return failure


class InputValidationError(SolarIntelError):
    """Raised when caller input is rejected before any provider call.

    Example context:
        - operation: Operation being invoked (e.g., "pv_estimate")
        - error: Underlying validation error message
    """

    kind = "invalid_input"


class ProviderError(SolarIntelError):
    """Raised when provider data could not be fetched or parsed.

    Example context:
        - location: (latitude, longitude) tuple
        - api: Provider being called (e.g., "PVWatts")
        - status_code: HTTP status code if applicable
        - response: API response snippet
    """

    kind = "provider_error"


class ProviderTimeoutError(ProviderError):
    """Raised when a provider request exceeds its deadline."""

    kind = "timeout"


class UpstreamError(ProviderError):
    """Raised when a provider returns a non-success HTTP status."""

    kind = "upstream_error"

    @property
    def status_code(self) -> int | None:
        return self.context.get("status_code")


class TransportError(ProviderError):
    """Raised on network-level failures (DNS, refused connection, ...)."""

    kind = "transport_error"


class MalformedResponseError(ProviderError):
    """Raised when a provider payload is missing expected fields or shape."""

    kind = "malformed_response"
