"""Convert nested dictionaries to XML strings."""

import logging
import re
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from lxml import etree

from hookxml.config import EncodeOptions, is_element_name
from hookxml.labeled import LabeledSequence


logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_SPECIAL_CHARS = re.compile(r"[<>&'\"]")


def encode(
    data: Mapping,
    headless: bool = True,
    indent: bool = False,
    root_tag: str = "xml",
    item_label: str = "item",
    *,
    options: EncodeOptions | None = None,
) -> str:
    """Convert a mapping to an XML string.

    Args:
        data: Mapping of element name to value. Values may be scalars,
            objects with their own __str__, nested mappings, lists/tuples
            or LabeledSequence instances.
        headless: Omit the XML declaration
        indent: Pretty-print with line breaks and indentation
        root_tag: Tag name for the document element
        item_label: Element name for entries of plain lists
        options: Prebuilt EncodeOptions; overrides the four arguments above

    Returns:
        XML text. Strings containing markup characters are written as
        CDATA sections; non-ASCII text is kept as is.

    Raises:
        TypeError: If data is not a mapping or holds a value with no text form
        ValueError: If a string holds a character XML 1.0 does not allow,
            such as a control character other than tab, newline or carriage return
        ValidationError: If root_tag or item_label is not an element name

    Example:
        >>> encode({"appid": "wx123", "detail": [{"goods_detail": "phone"}]})
        '<xml><appid>wx123</appid><detail><item><goods_detail>phone</goods_detail></item></detail></xml>'
    """
    if options is None:
        options = EncodeOptions(
            headless=headless,
            indent=indent,
            root_tag=root_tag,
            item_label=item_label,
        )

    if not isinstance(data, Mapping):
        raise TypeError(f"Expected a mapping, got {type(data)}")

    root = etree.Element(options.root_tag)
    _mapping_to_elements(root, data, options.item_label)

    xml = etree.tostring(root, encoding="unicode", pretty_print=options.indent)
    if not options.headless:
        xml = XML_DECLARATION + ("\n" if options.indent else "") + xml

    logger.debug("Encoded <%s> document, %d characters", options.root_tag, len(xml))
    return xml


def _mapping_to_elements(parent: etree._Element, data: Mapping, item_label: str) -> None:
    """Append one element per mapping entry under parent."""
    for key, value in data.items():
        tag = key if is_element_name(key) else item_label
        _value_to_element(parent, tag, value, item_label)


def _value_to_element(parent: etree._Element, tag: str, value: Any, item_label: str) -> None:
    """Append value under parent as element(s) named tag."""
    if isinstance(value, LabeledSequence):
        if value.wrapped:
            container = etree.SubElement(parent, tag)
            for entry in value:
                _value_to_element(container, value.label, entry, item_label)
        else:
            # Entries stand in for the key's own element
            for entry in value:
                _value_to_element(parent, value.label, entry, item_label)
        return

    element = etree.SubElement(parent, tag)

    if isinstance(value, Mapping):
        _mapping_to_elements(element, value, item_label)

    elif isinstance(value, (list, tuple)):
        for entry in value:
            _value_to_element(element, item_label, entry, item_label)

    else:
        try:
            _set_text(element, _stringify(value))
        except ValueError as exc:
            raise ValueError(f"Cannot encode text of <{tag}>: {exc}") from exc


def _stringify(value: Any) -> str | None:
    """Render a scalar or stringable value as element text."""
    if value is None:
        return None

    elif isinstance(value, bool):
        return "true" if value else "false"

    elif isinstance(value, Enum):
        return str(value.value)

    elif isinstance(value, str):
        return value

    elif isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")

    elif isinstance(value, (datetime, date)):
        return value.isoformat()

    elif isinstance(value, (int, float, Decimal)):
        return str(value)

    elif _is_stringable(value):
        return str(value)

    raise TypeError(f"Cannot encode value of type {type(value).__name__}")


def _is_stringable(value: Any) -> bool:
    """Check whether value's type renders itself with its own __str__."""
    return type(value).__str__ is not object.__str__


def _set_text(element: etree._Element, text: str | None) -> None:
    if text is None:
        return
    # A CDATA section cannot contain its own terminator
    if _SPECIAL_CHARS.search(text) and "]]>" not in text:
        element.text = etree.CDATA(text)
    else:
        element.text = text
