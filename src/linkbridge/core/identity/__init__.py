"""Core identity-domain exports."""

from linkbridge.core.identity.resolver import IdentityResolver

__all__ = ["IdentityResolver"]
