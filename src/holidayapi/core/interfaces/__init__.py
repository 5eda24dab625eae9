"""Core contracts (Protocols)."""

from holidayapi.core.interfaces.request import BuildableRequest

__all__ = ["BuildableRequest"]
