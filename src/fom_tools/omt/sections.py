"""Flat and singly nested OMT sections."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from lxml import etree

from fom_tools.errors import MissingRequiredFieldError
from fom_tools.extract import (
    join_path,
    optional_record,
    optional_text,
    repeated_records,
    required_attribute,
    required_text,
)
from fom_tools.scalars import BOOLEAN, NON_NEGATIVE_DECIMAL, NON_NEGATIVE_INTEGER, as_scalar
from fom_tools.tree import child_elements, find_child, local_name, source_line
from fom_tools.vocabulary import (
    RELIABLE,
    RESIGN_ACTION,
    SYNCHRONIZATION_CAPABILITY,
    Reliable,
    ResignAction,
    SynchronizationCapability,
    switch_flag,
)


@dataclass(frozen=True)
class ServiceUsage:
    """Whether one RTI service is used, and whether it is a callback."""

    service: str
    section: str
    is_callback: bool
    is_used: bool

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> ServiceUsage:
        boolean = as_scalar(BOOLEAN)
        return cls(
            service=local_name(element),
            section=required_attribute(element, path, "section"),
            is_callback=required_attribute(element, path, "isCallback", boolean),
            is_used=required_attribute(element, path, "isUsed", boolean),
        )


@dataclass(frozen=True)
class ServiceUtilization:
    """Service usage records, in document order."""

    REQUIRED_SERVICES = ("connect", "disconnect")

    services: tuple[ServiceUsage, ...]

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> ServiceUtilization:
        for service in cls.REQUIRED_SERVICES:
            if find_child(element, service) is None:
                raise MissingRequiredFieldError(
                    join_path(path, service), line=source_line(element)
                )
        return cls(
            services=tuple(
                ServiceUsage.from_element(child, join_path(path, local_name(child)))
                for child in child_elements(element)
            )
        )

    def get(self, service: str) -> ServiceUsage | None:
        return next((usage for usage in self.services if usage.service == service), None)

    @property
    def connect(self) -> ServiceUsage:
        return self.get("connect")  # type: ignore[return-value]

    @property
    def disconnect(self) -> ServiceUsage:
        return self.get("disconnect")  # type: ignore[return-value]


@dataclass(frozen=True)
class Dimension:
    """A routing space dimension definition."""

    name: str
    data_type: str | None = None
    upper_bound: int | None = None
    normalization: str | None = None
    value: str | None = None
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Dimension:
        return cls(
            name=required_text(element, path, "name"),
            data_type=optional_text(element, path, "dataType"),
            upper_bound=optional_text(element, path, "upperBound", as_scalar(NON_NEGATIVE_INTEGER)),
            normalization=optional_text(element, path, "normalization"),
            value=optional_text(element, path, "value"),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class Dimensions:
    dimensions: tuple[Dimension, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Dimensions:
        return cls(dimensions=repeated_records(element, path, "dimension", Dimension.from_element))


@dataclass(frozen=True)
class TypedValue:
    """A data type reference with optional semantics, used by time and tags."""

    data_type: str
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> TypedValue:
        return cls(
            data_type=required_text(element, path, "dataType"),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class Time:
    time_stamp: TypedValue | None = None
    lookahead: TypedValue | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Time:
        return cls(
            time_stamp=optional_record(element, path, "timeStamp", TypedValue.from_element),
            lookahead=optional_record(element, path, "lookahead", TypedValue.from_element),
        )


@dataclass(frozen=True)
class Tags:
    """User-supplied tag types of the RTI services that carry one."""

    update_reflect_tag: TypedValue | None = None
    send_receive_tag: TypedValue | None = None
    delete_remove_tag: TypedValue | None = None
    divestiture_request_tag: TypedValue | None = None
    divestiture_completion_tag: TypedValue | None = None
    acquisition_request_tag: TypedValue | None = None
    request_update_tag: TypedValue | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Tags:
        tag = TypedValue.from_element
        return cls(
            update_reflect_tag=optional_record(element, path, "update_reflect_tag", tag),
            send_receive_tag=optional_record(element, path, "send_receive_tag", tag),
            delete_remove_tag=optional_record(element, path, "delete_remove_tag", tag),
            divestiture_request_tag=optional_record(element, path, "divestiture_request_tag", tag),
            divestiture_completion_tag=optional_record(
                element, path, "divestiture_completion_tag", tag
            ),
            acquisition_request_tag=optional_record(element, path, "acquisition_request_tag", tag),
            request_update_tag=optional_record(element, path, "request_update_tag", tag),
        )


@dataclass(frozen=True)
class SynchronizationPoint:
    label: str
    capability: SynchronizationCapability
    data_type: str | None = None
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> SynchronizationPoint:
        return cls(
            label=required_text(element, path, "label"),
            data_type=optional_text(element, path, "dataType"),
            capability=required_text(element, path, "capability", SYNCHRONIZATION_CAPABILITY),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class Synchronizations:
    synchronization_points: tuple[SynchronizationPoint, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Synchronizations:
        return cls(
            synchronization_points=repeated_records(
                element, path, "synchronizationPoint", SynchronizationPoint.from_element
            )
        )


@dataclass(frozen=True)
class Transportation:
    name: str
    reliable: Reliable
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Transportation:
        return cls(
            name=required_text(element, path, "name"),
            reliable=required_text(element, path, "reliable", RELIABLE),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class Transportations:
    transportations: tuple[Transportation, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Transportations:
        return cls(
            transportations=repeated_records(
                element, path, "transportation", Transportation.from_element
            )
        )


@dataclass(frozen=True)
class Switches:
    """Federation-wide RTI switch settings. Every switch is mandatory."""

    auto_provide: bool
    convey_region_designator_sets: bool
    convey_producing_federate: bool
    attribute_scope_advisory: bool
    attribute_relevance_advisory: bool
    object_class_relevance_advisory: bool
    interaction_relevance_advisory: bool
    service_reporting: bool
    exception_reporting: bool
    delay_subscription_evaluation: bool
    automatic_resign_action: ResignAction

    FLAG_NAMES = (
        "auto_provide",
        "convey_region_designator_sets",
        "convey_producing_federate",
        "attribute_scope_advisory",
        "attribute_relevance_advisory",
        "object_class_relevance_advisory",
        "interaction_relevance_advisory",
        "service_reporting",
        "exception_reporting",
        "delay_subscription_evaluation",
    )

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Switches:
        flags = {name: required_attribute(element, path, name, switch_flag) for name in cls.FLAG_NAMES}
        return cls(
            **flags,
            automatic_resign_action=required_attribute(
                element, path, "automatic_resign_action", RESIGN_ACTION
            ),
        )


@dataclass(frozen=True)
class UpdateRate:
    name: str
    rate: Decimal  # Updates per second
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> UpdateRate:
        return cls(
            name=required_text(element, path, "name"),
            rate=required_text(element, path, "rate", as_scalar(NON_NEGATIVE_DECIMAL)),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class UpdateRates:
    update_rates: tuple[UpdateRate, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> UpdateRates:
        return cls(update_rates=repeated_records(element, path, "updateRate", UpdateRate.from_element))


@dataclass(frozen=True)
class Note:
    label: str
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Note:
        return cls(
            label=required_text(element, path, "label"),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class Notes:
    notes: tuple[Note, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Notes:
        return cls(notes=repeated_records(element, path, "note", Note.from_element))
