"""Core payload-domain exports."""

from linkbridge.core.payload.codec import LinkPayload, decode_payload, encode_payload

__all__ = ["LinkPayload", "decode_payload", "encode_payload"]
