"""Public API surface for linkbridge."""

__version__ = "0.1.0"

from linkbridge.contracts.config import ConnectorConfig
from linkbridge.contracts.connector import ValueConnector
from linkbridge.contracts.dependency import Dependency, DependencyMode
from linkbridge.contracts.exceptions import ConfigError, IdentityMapError, LinkBridgeError, MalformedPayloadError
from linkbridge.contracts.identity import EntityCategory, StableIdentifier
from linkbridge.contracts.lookup import EntityLookup
from linkbridge.contracts.refs import EntityRef, LocalRef, OpaqueRef, StableRef, UnsetRef, parse_entity_ref
from linkbridge.core.config import load_config
from linkbridge.core.connectors import LinkPickerValueConnector, create_connector
from linkbridge.core.identity import IdentityResolver
from linkbridge.core.lookups import InMemoryEntityLookup, load_identity_map
from linkbridge.core.payload import LinkPayload, decode_payload, encode_payload
from linkbridge.core.transforms import export_value, import_value

__all__ = [
    "ConfigError",
    "ConnectorConfig",
    "Dependency",
    "DependencyMode",
    "EntityCategory",
    "EntityLookup",
    "EntityRef",
    "IdentityMapError",
    "IdentityResolver",
    "InMemoryEntityLookup",
    "LinkBridgeError",
    "LinkPayload",
    "LinkPickerValueConnector",
    "LocalRef",
    "MalformedPayloadError",
    "OpaqueRef",
    "StableIdentifier",
    "StableRef",
    "UnsetRef",
    "ValueConnector",
    "__version__",
    "create_connector",
    "decode_payload",
    "encode_payload",
    "export_value",
    "import_value",
    "load_config",
    "load_identity_map",
    "parse_entity_ref",
]
