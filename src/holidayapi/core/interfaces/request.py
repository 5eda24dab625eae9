"""Contract shared by every request builder.

Protocol:
- Structural contract; the five endpoint builders satisfy it without a
  common registry.
- `get_raw`/`get_full`/`get` are async because they do HTTP I/O.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from holidayapi.core.domain.models import ResponseEnvelope

ResponseT = TypeVar("ResponseT", bound=ResponseEnvelope, covariant=True)
PayloadT = TypeVar("PayloadT", covariant=True)


@runtime_checkable
class BuildableRequest(Protocol[ResponseT, PayloadT]):
    """A query that accumulates parameters and can be dispatched."""

    @property
    def parameters(self) -> dict[str, str]:
        """Snapshot of the query parameters (without the key)."""

        ...

    async def get_raw(self) -> str:
        """Dispatch the request and return the body text."""

        ...

    async def get_full(self) -> ResponseT:
        """Dispatch and decode the whole response envelope."""

        ...

    async def get(self) -> PayloadT:
        """Dispatch, decode and return only the payload field."""

        ...
