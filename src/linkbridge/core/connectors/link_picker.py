"""Value connector for the Gibe.LinkPicker property editor."""

from __future__ import annotations

from collections.abc import Sequence

from linkbridge.contracts.config import ConnectorConfig
from linkbridge.contracts.connector import ValueConnector
from linkbridge.contracts.dependency import DependencySink
from linkbridge.contracts.host import ContentItem, Property
from linkbridge.core.identity.resolver import IdentityResolver
from linkbridge.core.transforms.exporter import export_value
from linkbridge.core.transforms.importer import import_value


class LinkPickerValueConnector(ValueConnector):
    """Moves link picker values between environments.

    The stored value is a JSON object whose ``id`` points at a content document.
    """

    def __init__(self, resolver: IdentityResolver, *, config: ConnectorConfig | None = None) -> None:
        if resolver is None:
            raise ValueError("resolver is required")
        self._resolver = resolver
        self._config = config or ConnectorConfig()

    @property
    def property_editor_aliases(self) -> Sequence[str]:
        return tuple(self._config.property_editor_aliases)

    @property
    def config(self) -> ConnectorConfig:
        return self._config

    def get_value(self, prop: Property | None, dependencies: DependencySink) -> str:
        value = getattr(prop, "value", None)
        if not isinstance(value, str):
            value = None
        return export_value(value, dependencies, self._resolver, category=self._config.entity_category)

    def set_value(self, content: ContentItem, alias: str, value: str | None) -> None:
        content.set_value(alias, import_value(value, self._resolver, category=self._config.entity_category))
