"""httpx wrapper and endpoint dispatcher.

- `build_async_client` standardizes timeout and headers for every call.
- `dispatch` composes the endpoint URL, issues the GET and classifies failures
  into the library's error taxonomy.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

import httpx

from holidayapi.core.config import AppSettings
from holidayapi.core.domain.endpoint import Endpoint
from holidayapi.core.errors import InvalidOrExpiredKey, TransportError, mask_key

if TYPE_CHECKING:
    from holidayapi.client import HolidayAPI

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the library defaults.

    `transport` replaces the network layer (e.g. `httpx.MockTransport` in
    tests); when `None` httpx uses its default connection pool.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def endpoint_url(base_url: str, endpoint: Endpoint) -> str:
    return f"{base_url}{endpoint.path}"


def _redacted(url: httpx.URL | str, key: str) -> str:
    return str(url).replace(key, mask_key(key))


async def dispatch(
    api: HolidayAPI,
    endpoint: Endpoint,
    parameters: Mapping[str, str],
) -> str:
    """GET `{base_url}{endpoint}?key=...&params` and return the body text.

    Raises:
        InvalidOrExpiredKey: the API answered 401.
        TransportError: any other non-2xx status or a network-level failure.
    """

    url = endpoint_url(api.base_url, endpoint)
    # `key` goes first; builders never set it themselves.
    query: dict[str, str] = {"key": api.key}
    query.update(parameters)

    async with build_async_client(api.settings, transport=api.transport) as client:
        try:
            response = await client.get(url, params=query)
        except httpx.RequestError as exc:
            logger.debug("GET %s failed: %s", endpoint.path, exc.__class__.__name__)
            raise TransportError(
                f"Request to {endpoint.path} failed: {exc.__class__.__name__}",
                url=url,
            ) from exc

    logger.debug("GET %s -> %s", _redacted(response.url, api.key), response.status_code)

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        if status_code == httpx.codes.UNAUTHORIZED:
            raise InvalidOrExpiredKey(api.key) from exc
        raise TransportError(
            f"{endpoint.path} returned HTTP {status_code}",
            status_code=status_code,
            url=url,
        ) from exc

    return response.text
