"""Core config-domain exports."""

from linkbridge.core.config.loader import load_config

__all__ = ["load_config"]
