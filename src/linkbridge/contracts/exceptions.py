"""Exception hierarchy for linkbridge."""

from __future__ import annotations


class LinkBridgeError(Exception):
    """Base exception for all linkbridge errors."""


class ConfigError(LinkBridgeError):
    """Configuration loading or validation failure."""


class MalformedPayloadError(LinkBridgeError):
    """Stored link value does not decode into a link payload."""

    def __init__(self, message: str, *, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class IdentityMapError(LinkBridgeError):
    """Identity map file is unreadable, invalid, or conflicts with a registration."""
