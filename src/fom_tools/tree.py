"""Read-only queries over parsed lxml element trees.

Names are compared on the local part of the tag, so documents that declare
the IEEE 1516 default namespace and documents that declare none are read
the same way.
"""

from __future__ import annotations

from typing import Iterator

from lxml import etree


def local_name(element: etree._Element) -> str:
    """Get the tag of an element without its namespace."""
    return etree.QName(element).localname


def child_elements(element: etree._Element) -> Iterator[etree._Element]:
    """Iterate over the child elements, skipping comments and processing instructions."""
    return (child for child in element if isinstance(child.tag, str))


def find_child(element: etree._Element, name: str) -> etree._Element | None:
    """Get the first child element with the given local name."""
    for child in child_elements(element):
        if local_name(child) == name:
            return child
    return None


def find_children(element: etree._Element, name: str) -> list[etree._Element]:
    """Get all child elements with the given local name, in document order."""
    return [child for child in child_elements(element) if local_name(child) == name]


def get_attribute(element: etree._Element, name: str) -> str | None:
    """Get an attribute value by local name, or None if not present."""
    value = element.get(name)
    if value is not None:
        return value
    for key, candidate in element.attrib.items():
        if key.startswith("{") and etree.QName(key).localname == name:
            return candidate
    return None


def element_text(element: etree._Element) -> str:
    """Get the direct text content of an element, trimmed.

    Text inside child elements is not included. Returns an empty string
    when the element has no text.
    """
    parts = [element.text or ""]
    for child in element:
        parts.append(child.tail or "")
    return "".join(parts).strip()


def source_line(element: etree._Element) -> int | None:
    """Get the line an element started on, if lxml recorded it."""
    return element.sourceline
