"""Field extractors shared by every OMT record converter.

Each extractor reads one named field of an element. ``path`` is the dotted
schema path of the element itself; the field's own path is ``path.name``
and is what a failure reports.

Text converters have the signature ``convert(text, path, line) -> T``.
Element converters have the signature ``convert(element, path) -> T``;
record classes pass their ``from_element`` classmethod.

Repeated extractors return ``None`` when nothing matched, never an empty
tuple.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from lxml import etree

from fom_tools.errors import MissingRequiredFieldError
from fom_tools.tree import element_text, find_child, find_children, get_attribute, source_line

T = TypeVar("T")

TextConverter = Callable[[str, str, int | None], T]
ElementConverter = Callable[[etree._Element, str], T]


def join_path(path: str, name: str) -> str:
    """Append a field name to a dotted schema path."""
    return f"{path}.{name}" if path else name


def as_text(text: str, path: str, line: int | None) -> str:
    return text


def optional_text(
    element: etree._Element,
    path: str,
    name: str,
    convert: TextConverter[T] = as_text,
) -> T | None:
    """Convert the text of the named child, or None if it is absent."""
    child = find_child(element, name)
    if child is None:
        return None
    return convert(element_text(child), join_path(path, name), source_line(child))


def required_text(
    element: etree._Element,
    path: str,
    name: str,
    convert: TextConverter[T] = as_text,
) -> T:
    """Convert the text of the named child.

    Raises:
        MissingRequiredFieldError: If the child is absent.
    """
    child = find_child(element, name)
    field_path = join_path(path, name)
    if child is None:
        raise MissingRequiredFieldError(field_path, line=source_line(element))
    return convert(element_text(child), field_path, source_line(child))


def repeated_text(
    element: etree._Element,
    path: str,
    name: str,
    convert: TextConverter[T] = as_text,
) -> tuple[T, ...] | None:
    """Convert the text of every named child, in document order."""
    field_path = join_path(path, name)
    values = tuple(
        convert(element_text(child), field_path, source_line(child))
        for child in find_children(element, name)
    )
    return values or None


def optional_attribute(
    element: etree._Element,
    path: str,
    name: str,
    convert: TextConverter[T] = as_text,
) -> T | None:
    """Convert the named attribute, or None if it is absent."""
    value = get_attribute(element, name)
    if value is None:
        return None
    return convert(value.strip(), join_path(path, name), source_line(element))


def required_attribute(
    element: etree._Element,
    path: str,
    name: str,
    convert: TextConverter[T] = as_text,
) -> T:
    """Convert the named attribute.

    Raises:
        MissingRequiredFieldError: If the attribute is absent.
    """
    value = get_attribute(element, name)
    field_path = join_path(path, name)
    if value is None:
        raise MissingRequiredFieldError(field_path, line=source_line(element))
    return convert(value.strip(), field_path, source_line(element))


def optional_record(
    element: etree._Element,
    path: str,
    name: str,
    convert: ElementConverter[T],
) -> T | None:
    """Convert the named child with a record converter, or None if absent."""
    child = find_child(element, name)
    if child is None:
        return None
    return convert(child, join_path(path, name))


def required_record(
    element: etree._Element,
    path: str,
    name: str,
    convert: ElementConverter[T],
) -> T:
    """Convert the named child with a record converter.

    Raises:
        MissingRequiredFieldError: If the child is absent.
    """
    child = find_child(element, name)
    field_path = join_path(path, name)
    if child is None:
        raise MissingRequiredFieldError(field_path, line=source_line(element))
    return convert(child, field_path)


def repeated_records(
    element: etree._Element,
    path: str,
    name: str,
    convert: ElementConverter[T],
) -> tuple[T, ...] | None:
    """Convert every named child with a record converter, in document order."""
    field_path = join_path(path, name)
    records = tuple(convert(child, field_path) for child in find_children(element, name))
    return records or None
