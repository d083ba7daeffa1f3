"""Data type catalogs.

References between data types (and from attributes and parameters) are
kept as the names written in the document; they are not resolved.
"""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from fom_tools.extract import (
    optional_text,
    repeated_records,
    repeated_text,
    required_record,
    required_text,
)
from fom_tools.scalars import UNSIGNED_BYTE, as_scalar
from fom_tools.vocabulary import (
    ARRAY_ENCODING,
    ENDIAN,
    FIXED_RECORD_ENCODING,
    VARIANT_RECORD_ENCODING,
    ArrayEncoding,
    Endian,
    FixedRecordEncoding,
    Other,
    VariantRecordEncoding,
)


@dataclass(frozen=True)
class BasicData:
    """A basic data representation such as HLAinteger32BE."""

    name: str
    size: int  # In bits
    interpretation: str
    endian: Endian
    encoding: str

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> BasicData:
        return cls(
            name=required_text(element, path, "name"),
            size=required_text(element, path, "size", as_scalar(UNSIGNED_BYTE)),
            interpretation=required_text(element, path, "interpretation"),
            endian=required_text(element, path, "endian", ENDIAN),
            encoding=required_text(element, path, "encoding"),
        )


@dataclass(frozen=True)
class SimpleData:
    name: str
    representation: str
    units: str | None = None
    resolution: str | None = None
    accuracy: str | None = None
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> SimpleData:
        return cls(
            name=required_text(element, path, "name"),
            representation=required_text(element, path, "representation"),
            units=optional_text(element, path, "units"),
            resolution=optional_text(element, path, "resolution"),
            accuracy=optional_text(element, path, "accuracy"),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class Enumerator:
    name: str
    values: tuple[str, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Enumerator:
        return cls(
            name=required_text(element, path, "name"),
            values=repeated_text(element, path, "value"),
        )


@dataclass(frozen=True)
class EnumeratedData:
    name: str
    representation: str
    semantics: str | None = None
    enumerators: tuple[Enumerator, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> EnumeratedData:
        return cls(
            name=required_text(element, path, "name"),
            representation=required_text(element, path, "representation"),
            semantics=optional_text(element, path, "semantics"),
            enumerators=repeated_records(element, path, "enumerator", Enumerator.from_element),
        )


@dataclass(frozen=True)
class ArrayData:
    """An array data type.

    ``cardinality`` is kept as written ("Dynamic", "8", "[1..10]", ...).
    """

    name: str
    data_type: str
    cardinality: str
    encoding: ArrayEncoding | Other
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> ArrayData:
        return cls(
            name=required_text(element, path, "name"),
            data_type=required_text(element, path, "dataType"),
            cardinality=required_text(element, path, "cardinality"),
            encoding=required_text(element, path, "encoding", ARRAY_ENCODING),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class Field:
    name: str
    data_type: str
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Field:
        return cls(
            name=required_text(element, path, "name"),
            data_type=required_text(element, path, "dataType"),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class FixedRecordData:
    name: str
    encoding: FixedRecordEncoding | Other
    semantics: str | None = None
    fields: tuple[Field, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> FixedRecordData:
        return cls(
            name=required_text(element, path, "name"),
            encoding=required_text(element, path, "encoding", FIXED_RECORD_ENCODING),
            semantics=optional_text(element, path, "semantics"),
            fields=repeated_records(element, path, "field", Field.from_element),
        )


@dataclass(frozen=True)
class Alternative:
    """One arm of a variant record, selected by an enumerator value."""

    enumerator: str
    name: str | None = None
    data_type: str | None = None
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Alternative:
        return cls(
            enumerator=required_text(element, path, "enumerator"),
            name=optional_text(element, path, "name"),
            data_type=optional_text(element, path, "dataType"),
            semantics=optional_text(element, path, "semantics"),
        )


@dataclass(frozen=True)
class VariantRecordData:
    name: str
    discriminant: str
    data_type: str  # Type of the discriminant
    encoding: VariantRecordEncoding | Other
    alternatives: tuple[Alternative, ...] | None = None
    semantics: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> VariantRecordData:
        return cls(
            name=required_text(element, path, "name"),
            discriminant=required_text(element, path, "discriminant"),
            data_type=required_text(element, path, "dataType"),
            alternatives=repeated_records(element, path, "alternative", Alternative.from_element),
            encoding=required_text(element, path, "encoding", VARIANT_RECORD_ENCODING),
            semantics=optional_text(element, path, "semantics"),
        )


def _catalog(entry_name: str, entry_type):
    def convert(element: etree._Element, path: str) -> tuple | None:
        return repeated_records(element, path, entry_name, entry_type.from_element)

    return convert


@dataclass(frozen=True)
class DataTypes:
    """The six data type catalogs.

    Each catalog element is required; a catalog without entries is None.
    """

    basic_data_representations: tuple[BasicData, ...] | None = None
    simple_data_types: tuple[SimpleData, ...] | None = None
    enumerated_data_types: tuple[EnumeratedData, ...] | None = None
    array_data_types: tuple[ArrayData, ...] | None = None
    fixed_record_data_types: tuple[FixedRecordData, ...] | None = None
    variant_record_data_types: tuple[VariantRecordData, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> DataTypes:
        return cls(
            basic_data_representations=required_record(
                element, path, "basicDataRepresentations", _catalog("basicData", BasicData)
            ),
            simple_data_types=required_record(
                element, path, "simpleDataTypes", _catalog("simpleData", SimpleData)
            ),
            enumerated_data_types=required_record(
                element, path, "enumeratedDataTypes", _catalog("enumeratedData", EnumeratedData)
            ),
            array_data_types=required_record(
                element, path, "arrayDataTypes", _catalog("arrayData", ArrayData)
            ),
            fixed_record_data_types=required_record(
                element, path, "fixedRecordDataTypes", _catalog("fixedRecordData", FixedRecordData)
            ),
            variant_record_data_types=required_record(
                element,
                path,
                "variantRecordDataTypes",
                _catalog("variantRecordData", VariantRecordData),
            ),
        )

    def names(self) -> list[str]:
        """Get the names of every defined data type, catalog by catalog."""
        catalogs = (
            self.basic_data_representations,
            self.simple_data_types,
            self.enumerated_data_types,
            self.array_data_types,
            self.fixed_record_data_types,
            self.variant_record_data_types,
        )
        return [entry.name for catalog in catalogs for entry in catalog or ()]
