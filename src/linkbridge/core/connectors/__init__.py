"""Core connector-domain exports."""

from linkbridge.core.connectors.factory import create_connector
from linkbridge.core.connectors.link_picker import LinkPickerValueConnector

__all__ = ["LinkPickerValueConnector", "create_connector"]
