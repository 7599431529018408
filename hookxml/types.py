"""Core data types for hookxml."""

from dataclasses import dataclass, field
from typing import Union

from hookxml.exceptions import DecodeError


Structure = Union[str, dict[str, "Structure"], list["Structure"]]
"""A decoded value: text, an ordered mapping of tag name to value, or a list
of values for sibling elements that repeat the same tag."""


@dataclass
class DecodeResult:
    """Outcome of decoding one XML payload.

    Attributes:
        data: Mapping of the root element's children (empty on failure)
        error: DecodeError describing the parse failure, or None
    """
    data: dict[str, Structure] = field(default_factory=dict)
    error: DecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> dict[str, Structure]:
        """Return the decoded mapping, raising the DecodeError if parsing failed."""
        if self.error is not None:
            raise self.error
        return self.data
