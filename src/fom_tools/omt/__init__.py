"""Typed records of the Object Model Template and their converters."""

from fom_tools.omt.classes import (
    Attribute,
    InteractionClass,
    Interactions,
    ObjectClass,
    Objects,
    Parameter,
)
from fom_tools.omt.datatypes import (
    Alternative,
    ArrayData,
    BasicData,
    DataTypes,
    EnumeratedData,
    Enumerator,
    Field,
    FixedRecordData,
    SimpleData,
    VariantRecordData,
)
from fom_tools.omt.identification import (
    Glyph,
    Keyword,
    ModelIdentification,
    PointOfContact,
    Reference,
)
from fom_tools.omt.model import ObjectModel
from fom_tools.omt.sections import (
    Dimension,
    Dimensions,
    Note,
    Notes,
    ServiceUsage,
    ServiceUtilization,
    Switches,
    SynchronizationPoint,
    Synchronizations,
    Tags,
    Time,
    Transportation,
    Transportations,
    TypedValue,
    UpdateRate,
    UpdateRates,
)

__all__ = [
    # Root
    "ObjectModel",
    # Identification
    "ModelIdentification",
    "Keyword",
    "PointOfContact",
    "Reference",
    "Glyph",
    # Class trees
    "Objects",
    "ObjectClass",
    "Attribute",
    "Interactions",
    "InteractionClass",
    "Parameter",
    # Data types
    "DataTypes",
    "BasicData",
    "SimpleData",
    "EnumeratedData",
    "Enumerator",
    "ArrayData",
    "FixedRecordData",
    "Field",
    "VariantRecordData",
    "Alternative",
    # Other sections
    "ServiceUtilization",
    "ServiceUsage",
    "Dimensions",
    "Dimension",
    "Time",
    "Tags",
    "TypedValue",
    "Synchronizations",
    "SynchronizationPoint",
    "Transportations",
    "Transportation",
    "Switches",
    "UpdateRates",
    "UpdateRate",
    "Notes",
    "Note",
]
