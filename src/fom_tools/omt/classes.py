"""Object class and interaction class trees.

Both trees are recursive: every class owns its subclasses. Conversion uses
an explicit stack, so depth is not limited by the Python call stack.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, TypeVar

from lxml import etree

from fom_tools.extract import (
    join_path,
    optional_record,
    optional_text,
    repeated_records,
    repeated_text,
    required_record,
    required_text,
)
from fom_tools.tree import find_children
from fom_tools.vocabulary import (
    ORDER,
    OWNERSHIP,
    SHARING,
    UPDATE_TYPE,
    Order,
    Ownership,
    Sharing,
    UpdateType,
)

N = TypeVar("N")


def dimension_references(element: etree._Element, path: str) -> tuple[str, ...]:
    """Read a ``dimensions`` wrapper into its dimension names.

    A wrapper with no ``dimension`` children gives an empty tuple, which is
    distinct from the wrapper being absent.
    """
    return repeated_text(element, path, "dimension") or ()


@dataclass
class _Frame:
    path: str
    fields: dict[str, Any]
    pending: list[etree._Element]
    children: list = field(default_factory=list)


def build_class_tree(
    element: etree._Element,
    path: str,
    tag: str,
    own_fields: Callable[[etree._Element, str], dict[str, Any]],
    make: Callable[[dict[str, Any], tuple | None], N],
) -> N:
    """Convert a class element and all its nested subclasses.

    Each class reads its own fields before any of its subclasses, so
    failures are raised in the same order as a depth-first read of the
    document.

    Args:
        element: The root class element.
        path: Dotted schema path of ``element``.
        tag: Local name of the nested subclass elements.
        own_fields: Reads every field of a class except its subclasses.
        make: Builds a node from its fields and converted subclasses.
    """

    def open_frame(node: etree._Element, node_path: str) -> _Frame:
        pending = find_children(node, tag)
        pending.reverse()
        return _Frame(node_path, own_fields(node, node_path), pending)

    stack = [open_frame(element, path)]
    while True:
        frame = stack[-1]
        if frame.pending:
            stack.append(open_frame(frame.pending.pop(), join_path(frame.path, tag)))
            continue
        stack.pop()
        node = make(frame.fields, tuple(frame.children) or None)
        if not stack:
            return node
        stack[-1].children.append(node)


@dataclass(frozen=True)
class Attribute:
    """An object class attribute."""

    name: str
    data_type: str
    update_type: UpdateType
    ownership: Ownership
    sharing: Sharing
    transportation: str
    order: Order
    update_condition: str | None = None
    dimensions: tuple[str, ...] | None = None
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Attribute:
        return cls(
            name=required_text(element, path, "name"),
            data_type=required_text(element, path, "dataType"),
            update_type=required_text(element, path, "updateType", UPDATE_TYPE),
            update_condition=optional_text(element, path, "updateCondition"),
            ownership=required_text(element, path, "ownership", OWNERSHIP),
            sharing=required_text(element, path, "sharing", SHARING),
            dimensions=optional_record(element, path, "dimensions", dimension_references),
            transportation=required_text(element, path, "transportation"),
            order=required_text(element, path, "order", ORDER),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class ObjectClass:
    """A node of the object class tree."""

    name: str
    sharing: Sharing
    semantics: str | None = None
    attributes: tuple[Attribute, ...] | None = None
    object_classes: tuple[ObjectClass, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> ObjectClass:
        return build_class_tree(
            element,
            path,
            "objectClass",
            cls._own_fields,
            lambda fields, children: cls(**fields, object_classes=children),
        )

    @staticmethod
    def _own_fields(element: etree._Element, path: str) -> dict[str, Any]:
        return {
            "name": required_text(element, path, "name"),
            "sharing": required_text(element, path, "sharing", SHARING),
            "semantics": optional_text(element, path, "semantics"),
            "attributes": repeated_records(element, path, "attribute", Attribute.from_element),
        }

    @property
    def children(self) -> tuple[ObjectClass, ...]:
        return self.object_classes or ()

    def walk(self) -> Iterator[ObjectClass]:
        """Iterate over this class and all its subclasses in pre-order."""
        # Explicit stack; class trees are not depth limited.
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, name: str) -> ObjectClass | None:
        """Get the first class in pre-order with the given name."""
        return next((node for node in self.walk() if node.name == name), None)


@dataclass(frozen=True)
class Objects:
    root: ObjectClass

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Objects:
        return cls(root=required_record(element, path, "objectClass", ObjectClass.from_element))


@dataclass(frozen=True)
class Parameter:
    name: str
    data_type: str
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Parameter:
        return cls(
            name=required_text(element, path, "name"),
            data_type=required_text(element, path, "dataType"),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class InteractionClass:
    """A node of the interaction class tree."""

    name: str
    sharing: Sharing
    transportation: str
    order: Order
    dimensions: tuple[str, ...] | None = None
    semantics: str | None = None
    parameters: tuple[Parameter, ...] | None = None
    interaction_classes: tuple[InteractionClass, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> InteractionClass:
        return build_class_tree(
            element,
            path,
            "interactionClass",
            cls._own_fields,
            lambda fields, children: cls(**fields, interaction_classes=children),
        )

    @staticmethod
    def _own_fields(element: etree._Element, path: str) -> dict[str, Any]:
        return {
            "name": required_text(element, path, "name"),
            "sharing": required_text(element, path, "sharing", SHARING),
            "dimensions": optional_record(element, path, "dimensions", dimension_references),
            "transportation": required_text(element, path, "transportation"),
            "order": required_text(element, path, "order", ORDER),
            "semantics": optional_text(element, path, "semantics"),
            "parameters": repeated_records(element, path, "parameter", Parameter.from_element),
        }

    @property
    def children(self) -> tuple[InteractionClass, ...]:
        return self.interaction_classes or ()

    def walk(self) -> Iterator[InteractionClass]:
        """Iterate over this class and all its subclasses in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, name: str) -> InteractionClass | None:
        """Get the first class in pre-order with the given name."""
        return next((node for node in self.walk() if node.name == name), None)


@dataclass(frozen=True)
class Interactions:
    root: InteractionClass

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Interactions:
        return cls(
            root=required_record(
                element, path, "interactionClass", InteractionClass.from_element
            )
        )
