"""Provider clients and response schemas."""

from src.providers.http import fetch_json, fetch_json_async
from src.providers.nrel_client import NRELClient
from src.providers.open_meteo_client import OpenMeteoClient

__all__ = [
    "NRELClient",
    "OpenMeteoClient",
    "fetch_json",
    "fetch_json_async",
]
