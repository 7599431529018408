"""hookxml - hardened XML <-> dict transformer for webhook payloads.

hookxml decodes XML received from payment gateways, messaging platforms and
object-storage notifications into nested dictionaries, and encodes
dictionaries back into XML replies.
"""

import logging

from hookxml._version import __version__
from hookxml.config import EncodeOptions
from hookxml.diagnostics import clear_last_error, get_last_error
from hookxml.exceptions import DecodeError, HookXmlError
from hookxml.labeled import LabeledSequence, label_sequence
from hookxml.serialization import decode, encode, try_decode
from hookxml.types import DecodeResult, Structure

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "decode",
    "try_decode",
    "encode",
    "label_sequence",
    "LabeledSequence",
    "EncodeOptions",
    "DecodeResult",
    "Structure",
    "DecodeError",
    "HookXmlError",
    "get_last_error",
    "clear_last_error",
]
