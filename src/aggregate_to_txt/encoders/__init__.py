"""Payload encoders for archive block bodies."""

from .base_encoder import PayloadEncoder
from .base64_encoder import Base64PayloadEncoder
from .hex_dump_encoder import HexDumpPayloadEncoder
from .text_encoder import TextPayloadEncoder

__all__ = [
    "PayloadEncoder",
    "Base64PayloadEncoder",
    "HexDumpPayloadEncoder",
    "TextPayloadEncoder",
]
