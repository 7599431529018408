"""XML serialization for webhook payloads."""

from hookxml.serialization.xml_encoder import encode
from hookxml.serialization.xml_decoder import decode, try_decode

__all__ = [
    "encode",
    "decode",
    "try_decode",
]
