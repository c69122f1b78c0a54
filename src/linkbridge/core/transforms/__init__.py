"""Core transform-domain exports."""

from linkbridge.core.transforms.exporter import export_value
from linkbridge.core.transforms.importer import import_value

__all__ = ["export_value", "import_value"]
