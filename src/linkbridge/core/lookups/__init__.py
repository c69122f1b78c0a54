"""Core lookup-domain exports."""

from linkbridge.core.lookups.in_memory import IdentityMapFile, InMemoryEntityLookup, load_identity_map

__all__ = ["IdentityMapFile", "InMemoryEntityLookup", "load_identity_map"]
