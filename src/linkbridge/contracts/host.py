"""Host-side value accessors consumed by value connectors."""

from __future__ import annotations

from typing import Any, Protocol


class Property(Protocol):
    @property
    def alias(self) -> str: ...  # pragma: no cover

    @property
    def value(self) -> Any: ...  # pragma: no cover


class ContentItem(Protocol):
    def get_value(self, alias: str) -> Any: ...  # pragma: no cover

    def set_value(self, alias: str, value: Any) -> None: ...  # pragma: no cover
