"""Encoder options."""

import re

from pydantic import BaseModel, ConfigDict, field_validator


_ELEMENT_NAME = re.compile(r"^[^\W\d][\w.\-]*$")


def is_element_name(name) -> bool:
    """Check whether name can be used verbatim as an XML element name."""
    return isinstance(name, str) and _ELEMENT_NAME.match(name) is not None


class EncodeOptions(BaseModel):
    """Formatting options for encode().

    Attributes:
        headless: Omit the XML declaration
        indent: Pretty-print with line breaks and two-space indentation
        root_tag: Name of the document element
        item_label: Element name for entries of unlabeled sequences
    """

    model_config = ConfigDict(frozen=True)

    headless: bool = True
    indent: bool = False
    root_tag: str = "xml"
    item_label: str = "item"

    @field_validator("root_tag", "item_label")
    @classmethod
    def _check_element_name(cls, value: str) -> str:
        if not is_element_name(value):
            raise ValueError(f"{value!r} is not a valid XML element name")
        return value
