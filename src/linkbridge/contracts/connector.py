"""Value connector contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from linkbridge.contracts.dependency import DependencySink
from linkbridge.contracts.host import ContentItem, Property


class ValueConnector(ABC):
    """Translates one property editor's stored values between environments."""

    @property
    @abstractmethod
    def property_editor_aliases(self) -> Sequence[str]: ...  # pragma: no cover

    @abstractmethod
    def get_value(self, prop: Property | None, dependencies: DependencySink) -> str: ...  # pragma: no cover

    @abstractmethod
    def set_value(self, content: ContentItem, alias: str, value: str | None) -> None: ...  # pragma: no cover
