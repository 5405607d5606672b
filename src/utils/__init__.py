from .exceptions import (
    InputValidationError,
    MalformedResponseError,
    ProviderError,
    ProviderTimeoutError,
    SolarIntelError,
    TransportError,
    UpstreamError,
)
from .logger import configure_logging, get_logger, setup_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "setup_logger",
    "SolarIntelError",
    "InputValidationError",
    "ProviderError",
    "ProviderTimeoutError",
    "UpstreamError",
    "TransportError",
    "MalformedResponseError",
]
