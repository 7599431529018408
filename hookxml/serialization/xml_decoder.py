"""Convert untrusted XML payloads to nested dictionaries."""

import logging
import xml.etree.ElementTree as ET

import defusedxml.ElementTree as SafeET

from hookxml.diagnostics import record_last_error
from hookxml.exceptions import DecodeError
from hookxml.types import DecodeResult, Structure


logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Parsing the input failed with the last error: "


def try_decode(xml_text: str | bytes) -> DecodeResult:
    """Parse an XML payload into a mapping of the root element's children.

    The parser refuses entity declarations and external references before
    anything is expanded, so XXE and entity-expansion payloads are reported
    the same way as malformed markup. Nothing is raised.

    Args:
        xml_text: XML document as text or raw bytes

    Returns:
        DecodeResult whose data maps child tag names of the root element to
        text, nested mappings, or lists (for repeated sibling tags). On
        failure data is empty and error holds the DecodeError.

    Example:
        >>> result = try_decode('<xml><appid>wx123</appid></xml>')
        >>> result.data
        {'appid': 'wx123'}
        >>> try_decode('<xml><appid>').ok
        False
    """
    try:
        root = _parse(xml_text)
    except (ET.ParseError, ValueError) as exc:
        # defusedxml's forbidden-construct errors are ValueError subclasses
        error = DecodeError(f"{FAILURE_PREFIX}{exc}", raw_input=xml_text)
        logger.warning("Rejected XML payload: %s", exc)
        return DecodeResult(error=error)

    if len(root) == 0:
        return DecodeResult()
    return DecodeResult(data=_element_to_dict(root))


def decode(xml_text: str | bytes) -> dict[str, Structure]:
    """Fail-soft decode: return the mapping, or {} and record the last error.

    Callers tell "valid XML with no fields" from "invalid XML" by checking
    hookxml.get_last_error(), which this function sets on failure.
    """
    result = try_decode(xml_text)
    if result.error is not None:
        record_last_error(result.error.message)
    return result.data


def _parse(xml_text: str | bytes) -> ET.Element:
    return SafeET.fromstring(
        xml_text,
        forbid_dtd=False,
        forbid_entities=True,
        forbid_external=True,
    )


def _local_name(tag: str) -> str:
    # ElementTree spells namespaced tags "{uri}local"
    return tag.rpartition("}")[2]


def _group_children(element: ET.Element) -> dict[str, list[ET.Element]]:
    """Group child elements by local tag name, keeping first-seen order and document order."""
    groups: dict[str, list[ET.Element]] = {}
    for child in element:
        groups.setdefault(_local_name(child.tag), []).append(child)
    return groups


def _element_to_dict(root: ET.Element) -> dict[str, Structure]:
    """Fold an element's children into a mapping.

    A tag used by exactly one child maps to that child's value; a tag shared
    by several siblings maps to a list of their values. Leaves fold to their
    trimmed text (CDATA is already unwrapped by the parser, and text in mixed
    content is dropped).

    The walk is post-order over an explicit stack, so payload nesting depth
    is bounded by memory rather than by the interpreter's recursion limit.
    """
    folded: dict[int, Structure] = {}
    stack = [(root, False)]
    while stack:
        element, children_folded = stack.pop()
        if len(element) == 0:
            folded[id(element)] = (element.text or "").strip()
        elif children_folded:
            result = {}
            for tag, children in _group_children(element).items():
                values = [folded.pop(id(child)) for child in children]
                result[tag] = values[0] if len(values) == 1 else values
            folded[id(element)] = result
        else:
            stack.append((element, True))
            stack.extend((child, False) for child in element)
    return folded[id(root)]
