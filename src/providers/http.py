"""Bounded JSON fetch over HTTP GET."""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import requests

from src.config.settings import DEFAULT_TIMEOUT_S
from src.utils.exceptions import (
    MalformedResponseError,
    ProviderTimeoutError,
    TransportError,
    UpstreamError,
)
from src.utils.logger import get_logger

logger = get_logger(__name__)

# Largest fan-out is a five-site comparison: two calls per site.
MAX_CONCURRENT_FETCHES = 16

_FETCH_POOL = ThreadPoolExecutor(
    max_workers=MAX_CONCURRENT_FETCHES, thread_name_prefix="provider-fetch"
)


def fetch_json(
    url: str,
    params: dict[str, Any] | None = None,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    api: str = "provider",
) -> Any:
    """Issue one GET request and decode its JSON body.

    Args:
        url: Endpoint URL.
        params: Query parameters.
        timeout_s: Request timeout in seconds.
        api: Provider name for logging and error context.

    Returns:
        Decoded JSON value.

    Raises:
        ProviderTimeoutError: The request exceeded ``timeout_s``.
        UpstreamError: The provider answered with a non-success status.
        TransportError: Any other network-level failure.
        MalformedResponseError: The body is not valid JSON.
    """
    response = None
    try:
        response = requests.get(url, params=params, timeout=timeout_s)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"{api} request timed out after {timeout_s}s")
        raise ProviderTimeoutError(
            f"{api} API request timed out",
            context={"api": api, "timeout_s": timeout_s},
        ) from e
    except requests.exceptions.HTTPError as e:
        failed = e.response if e.response is not None else response
        logger.error(f"{api} HTTP error {failed.status_code}")
        raise UpstreamError(
            f"{api} API returned HTTP {failed.status_code}",
            context={
                "api": api,
                "status_code": failed.status_code,
                "response": failed.text[:500],
            },
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"{api} request failed: {e}")
        raise TransportError(
            f"{api} API request failed",
            context={"api": api, "error": str(e)},
        ) from e

    try:
        return response.json()
    except ValueError as e:
        logger.error(f"{api} returned a non-JSON body")
        raise MalformedResponseError(
            f"{api} API returned invalid JSON",
            context={"api": api, "response": response.text[:500]},
        ) from e


async def fetch_json_async(
    url: str,
    params: dict[str, Any] | None = None,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    api: str = "provider",
) -> Any:
    """Awaitable :func:`fetch_json` with a hard deadline.

    The blocking request runs on the fetch pool; the deadline is enforced
    on the event loop and starts once a worker picks the request up, so
    time spent queued is not charged to it. A timed-out worker is
    abandoned, its socket timeout ends it shortly after.
    """
    loop = asyncio.get_running_loop()
    started = asyncio.Event()

    def _run() -> Any:
        loop.call_soon_threadsafe(started.set)
        return fetch_json(url, params, timeout_s, api)

    future = loop.run_in_executor(_FETCH_POOL, _run)
    await started.wait()

    try:
        return await asyncio.wait_for(future, timeout=timeout_s)
    except asyncio.TimeoutError as e:
        logger.error(f"{api} request exceeded its {timeout_s}s deadline")
        raise ProviderTimeoutError(
            f"{api} API request timed out",
            context={"api": api, "timeout_s": timeout_s},
        ) from e
