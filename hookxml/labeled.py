"""Labeled sequences: control how a list is written out as repeated elements."""

from dataclasses import dataclass, replace
from typing import Any, Iterable, Iterator

from hookxml.config import is_element_name


@dataclass(frozen=True)
class LabeledSequence:
    """A sequence annotated with the element name used for each entry.

    Attributes:
        items: The entries, in order
        label: Element name repeated for every entry
        wrapped: Whether the entries are enclosed in one container element
            named by the mapping key the sequence appears under. When false,
            the entries become siblings of that key's would-be element and
            the key itself is not written.
    """
    items: tuple[Any, ...] = ()
    label: str = "item"
    wrapped: bool = False

    def __post_init__(self):
        if not is_element_name(self.label):
            raise ValueError(f"{self.label!r} is not a valid XML element name")
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def with_label(self, label: str) -> "LabeledSequence":
        """Return a copy that labels its entries with label."""
        return replace(self, label=label)

    def as_wrapped(self, wrapped: bool = True) -> "LabeledSequence":
        """Return a copy with the wrapped flag set to wrapped."""
        return replace(self, wrapped=wrapped)


def label_sequence(seq: Iterable[Any], label: str = "item", wrapped: bool = False) -> LabeledSequence:
    """Attach an element label (and optional wrapping) to a sequence for encoding.

    Args:
        seq: Entries to encode; any iterable, consumed once
        label: Element name for each entry
        wrapped: Enclose the entries in one element named by the mapping key

    Returns:
        LabeledSequence to use as a value in the mapping passed to encode()

    Example:
        >>> from hookxml import encode, label_sequence
        >>> encode({"Articles": label_sequence([{"Title": "a"}, {"Title": "b"}], wrapped=True)})
        '<xml><Articles><item><Title>a</Title></item><item><Title>b</Title></item></Articles></xml>'
        >>> encode({"Articles": label_sequence([{"Title": "a"}, {"Title": "b"}], "Article")})
        '<xml><Article><Title>a</Title></Article><Article><Title>b</Title></Article></xml>'
    """
    return LabeledSequence(tuple(seq), label, wrapped)
