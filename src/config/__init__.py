from .schema import (
    CapacityRequest,
    CompareRequest,
    ForecastRequest,
    Location,
    NamedLocation,
    SystemConfig,
)
from .settings import ProviderSettings

__all__ = [
    "CapacityRequest",
    "CompareRequest",
    "ForecastRequest",
    "Location",
    "NamedLocation",
    "ProviderSettings",
    "SystemConfig",
]
