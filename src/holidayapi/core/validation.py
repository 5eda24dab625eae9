"""Credential and version checks.

Format checks only: a key that passes here can still be rejected by the API
(see `InvalidOrExpiredKey`).
"""

from __future__ import annotations

import re

from holidayapi.core.errors import InvalidKeyFormat, InvalidVersion

SUPPORTED_VERSIONS: tuple[int, ...] = (1,)
DEFAULT_VERSION = 1

_KEY_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_valid_key(key: object) -> bool:
    return isinstance(key, str) and _KEY_PATTERN.fullmatch(key) is not None


def validate_key(key: str) -> None:
    """Raise `InvalidKeyFormat` unless `key` is a UUID-shaped string."""

    if not is_valid_key(key):
        raise InvalidKeyFormat(key if isinstance(key, str) else None)


def validate_version(version: int) -> None:
    """Raise `InvalidVersion` unless `version` is one of `SUPPORTED_VERSIONS`."""

    # bool is an int subclass; True would otherwise pass as version 1.
    if isinstance(version, bool) or version not in SUPPORTED_VERSIONS:
        raise InvalidVersion(version, SUPPORTED_VERSIONS)
