"""Error taxonomy.

Construction-time failures (`InvalidKeyFormat`, `InvalidVersion`) are raised
before any network activity. Dispatch-time failures wrap the transport
exception as `__cause__`.
"""

from __future__ import annotations

from typing import Any


def mask_key(key: str) -> str:
    """Hide all but the last four characters of an API key."""

    if len(key) <= 4:
        return "*" * len(key)
    return "*" * (len(key) - 4) + key[-4:]


class HolidayAPIError(Exception):
    """Base exception for every error raised by the library."""

    def __init__(
        self,
        detail: str = "Holiday API error",
        code: str = "holidayapi_error",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.detail = detail
        self.code = code
        self.context = context or {}
        super().__init__(self.detail)


class InvalidKeyFormat(HolidayAPIError, ValueError):
    """The key is not shaped like a UUID."""

    def __init__(self, key: str | None) -> None:
        shown = mask_key(key) if key else repr(key)
        super().__init__(
            detail=f"Invalid key: {shown}",
            code="invalid_key_format",
            context={"key": shown},
        )


class InvalidVersion(HolidayAPIError, ValueError):
    """The requested API version is not supported."""

    def __init__(self, version: object, supported: tuple[int, ...]) -> None:
        super().__init__(
            detail=f"Invalid version: {version!r}, please choose: {list(supported)}",
            code="invalid_version",
            context={"version": version, "supported": list(supported)},
        )


class InvalidOrExpiredKey(HolidayAPIError):
    """The API answered 401 for a well-formed key."""

    def __init__(self, key: str) -> None:
        shown = mask_key(key)
        super().__init__(
            detail=f"Invalid or expired key: {shown}",
            code="invalid_or_expired_key",
            context={"key": shown, "status_code": 401},
        )


class TransportError(HolidayAPIError):
    """Non-success HTTP status (other than 401) or network-level failure."""

    def __init__(
        self,
        detail: str = "HTTP request failed",
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if status_code is not None:
            context["status_code"] = status_code
        if url is not None:
            context["url"] = url
        super().__init__(detail=detail, code="transport_error", context=context)
        self.status_code = status_code


class DecodeError(HolidayAPIError):
    """The body is not valid JSON or does not match the response envelope."""

    def __init__(self, detail: str, *, model: str | None = None) -> None:
        super().__init__(
            detail=detail,
            code="decode_error",
            context={"model": model} if model else None,
        )
