"""Exception classes for hookxml."""


class HookXmlError(Exception):
    """Base exception for all hookxml errors."""


class DecodeError(HookXmlError):
    """Raised when an XML payload cannot be decoded.

    Decoding itself never raises this; it is carried on a DecodeResult
    and only raised by DecodeResult.unwrap().

    Attributes:
        message: Diagnostic text, prefixed with the standard failure phrase
        raw_input: The XML text that failed to parse (optional)
    """

    def __init__(self, message: str, raw_input: str | None = None):
        super().__init__(message)
        self.message = message
        self.raw_input = raw_input
