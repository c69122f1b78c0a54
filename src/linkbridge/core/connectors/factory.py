"""Connector factory."""

from __future__ import annotations

from linkbridge.contracts.config import ConnectorConfig
from linkbridge.contracts.lookup import EntityLookup
from linkbridge.core.connectors.link_picker import LinkPickerValueConnector
from linkbridge.core.identity.resolver import IdentityResolver
from linkbridge.core.lookups.in_memory import InMemoryEntityLookup, load_identity_map


def create_connector(config: ConnectorConfig, *, lookup: EntityLookup | None = None) -> LinkPickerValueConnector:
    """Wire a connector to ``lookup``, or to the config's identity map file when none is given."""
    if lookup is None:
        if config.identity_map_path is not None:
            lookup = load_identity_map(config.identity_map_path)
        else:
            lookup = InMemoryEntityLookup()
    return LinkPickerValueConnector(IdentityResolver(lookup), config=config)
