"""Public contracts for linkbridge."""

from linkbridge.contracts.config import DEFAULT_EDITOR_ALIASES, ConnectorConfig
from linkbridge.contracts.connector import ValueConnector
from linkbridge.contracts.dependency import Dependency, DependencyMode, DependencySink
from linkbridge.contracts.exceptions import ConfigError, IdentityMapError, LinkBridgeError, MalformedPayloadError
from linkbridge.contracts.host import ContentItem, Property
from linkbridge.contracts.identity import EntityCategory, LocalIdentifier, StableIdentifier
from linkbridge.contracts.lookup import EntityLookup
from linkbridge.contracts.refs import (
    ENTITY_REF_TYPES,
    EntityRef,
    LocalRef,
    OpaqueRef,
    StableRef,
    UnsetRef,
    as_entity_ref,
    local_ref,
    parse_entity_ref,
    parse_local_id,
    parse_stable_key,
    stable_ref,
)

__all__ = [
    "DEFAULT_EDITOR_ALIASES",
    "ENTITY_REF_TYPES",
    "ConfigError",
    "ConnectorConfig",
    "ContentItem",
    "Dependency",
    "DependencyMode",
    "DependencySink",
    "EntityCategory",
    "EntityLookup",
    "EntityRef",
    "IdentityMapError",
    "LinkBridgeError",
    "LocalIdentifier",
    "LocalRef",
    "MalformedPayloadError",
    "OpaqueRef",
    "Property",
    "StableIdentifier",
    "StableRef",
    "UnsetRef",
    "ValueConnector",
    "as_entity_ref",
    "local_ref",
    "parse_entity_ref",
    "parse_local_id",
    "parse_stable_key",
    "stable_ref",
]
