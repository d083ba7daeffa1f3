"""The object model document root."""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from fom_tools.errors import UnrecognizedValueError
from fom_tools.extract import optional_record, required_record
from fom_tools.omt.classes import Interactions, Objects
from fom_tools.omt.datatypes import DataTypes
from fom_tools.omt.identification import ModelIdentification
from fom_tools.omt.sections import (
    Dimensions,
    Notes,
    ServiceUtilization,
    Switches,
    Synchronizations,
    Tags,
    Time,
    Transportations,
    UpdateRates,
)
from fom_tools.tree import local_name, source_line

ROOT_TAG = "objectModel"


@dataclass(frozen=True)
class ObjectModel:
    """A fully converted FOM or SOM document."""

    model_identification: ModelIdentification
    objects: Objects
    interactions: Interactions
    dimensions: Dimensions
    transportations: Transportations
    switches: Switches
    data_types: DataTypes
    service_utilization: ServiceUtilization | None = None
    time: Time | None = None
    tags: Tags | None = None
    synchronizations: Synchronizations | None = None
    update_rates: UpdateRates | None = None
    notes: Notes | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str = "") -> ObjectModel:
        """Convert an ``objectModel`` root element.

        Sections are read in schema order and the first error aborts the
        conversion.

        Raises:
            UnrecognizedValueError: If the element is not an ``objectModel``.
            FomParseError: On the first missing, unrecognized or malformed
                field.
        """
        if local_name(element) != ROOT_TAG:
            raise UnrecognizedValueError(
                path or ROOT_TAG, local_name(element), [ROOT_TAG], line=source_line(element)
            )
        return cls(
            model_identification=required_record(
                element, path, "modelIdentification", ModelIdentification.from_element
            ),
            service_utilization=optional_record(
                element, path, "serviceUtilization", ServiceUtilization.from_element
            ),
            objects=required_record(element, path, "objects", Objects.from_element),
            interactions=required_record(element, path, "interactions", Interactions.from_element),
            dimensions=required_record(element, path, "dimensions", Dimensions.from_element),
            time=optional_record(element, path, "time", Time.from_element),
            tags=optional_record(element, path, "tags", Tags.from_element),
            synchronizations=optional_record(
                element, path, "synchronizations", Synchronizations.from_element
            ),
            transportations=required_record(
                element, path, "transportations", Transportations.from_element
            ),
            switches=required_record(element, path, "switches", Switches.from_element),
            update_rates=optional_record(element, path, "updateRates", UpdateRates.from_element),
            data_types=required_record(element, path, "dataTypes", DataTypes.from_element),
            notes=optional_record(element, path, "notes", Notes.from_element),
        )

    @property
    def name(self) -> str:
        return self.model_identification.name
