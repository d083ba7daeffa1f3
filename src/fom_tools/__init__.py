"""fom-tools - typed readers for HLA Object Model Template documents.

Read a FOM or SOM into an immutable, fully typed object model.

Example:
    from fom_tools import parse_file

    result = parse_file("RPR-Base_v2.0.xml")
    if result.is_valid:
        model = result.model
        print(model.name)
        for object_class in model.objects.root.walk():
            print(object_class.name)
    else:
        print(result.error)

    # Raise instead of returning a result
    from fom_tools import FomParseError, load

    try:
        model = load(xml_bytes)
    except FomParseError as exc:
        print(exc.path, exc.message)
"""

from fom_tools.errors import (
    FomParseError,
    MalformedScalarError,
    MissingRequiredFieldError,
    ParseError,
    ParseErrorType,
    ParseResult,
    UnrecognizedValueError,
    XmlSyntaxError,
)
from fom_tools.omt import (
    Attribute,
    DataTypes,
    InteractionClass,
    ModelIdentification,
    ObjectClass,
    ObjectModel,
    Parameter,
    Switches,
)
from fom_tools.parser import FomParser, is_valid_fom, load, parse, parse_file
from fom_tools.vocabulary import Other, fallback_text

__version__ = "0.1.0"

__all__ = [
    # Main API
    "FomParser",
    "parse",
    "parse_file",
    "load",
    "is_valid_fom",
    # Results and errors
    "ParseResult",
    "ParseError",
    "ParseErrorType",
    "FomParseError",
    "XmlSyntaxError",
    "MissingRequiredFieldError",
    "UnrecognizedValueError",
    "MalformedScalarError",
    # Model (see fom_tools.omt for every record type)
    "ObjectModel",
    "ModelIdentification",
    "ObjectClass",
    "Attribute",
    "InteractionClass",
    "Parameter",
    "Switches",
    "DataTypes",
    # Vocabulary fallbacks
    "Other",
    "fallback_text",
]
