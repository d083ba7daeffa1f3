"""Controlled vocabularies of the Object Model Template.

Every vocabulary is an ``Enum`` whose values are the exact schema tokens,
paired with a ``Vocabulary`` converter. Matching is exact and
case-sensitive. A closed vocabulary rejects unknown tokens; an open one
keeps them verbatim in an ``Other`` value.

Open: model type, security classification, application domain, POC type,
glyph type and the array/fixed-record/variant-record encodings.
Closed: sharing, update type, ownership, order, synchronization
capability, reliable, endian and the automatic resign action.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from fom_tools.errors import UnrecognizedValueError
from fom_tools.scalars import BOOLEAN, parse_scalar

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class Other:
    """A token outside an open vocabulary, preserved as written."""

    vocabulary: str
    text: str

    def __str__(self) -> str:
        return self.text


class ModelType(Enum):
    FOM = "FOM"
    SOM = "SOM"


class SecurityClassification(Enum):
    UNCLASSIFIED = "Unclassified"
    CONFIDENTIAL = "Confidential"
    SECRET = "Secret"
    TOP_SECRET = "Top Secret"


class ApplicationDomain(Enum):
    ANALYSIS = "Analysis"
    TRAINING = "Training"
    TEST_AND_EVALUATION = "Test and Evaluation"
    ENGINEERING = "Engineering"
    ACQUISITION = "Acquisition"


class PocType(Enum):
    """Role of a point of contact."""

    PRIMARY_AUTHOR = "Primary author"
    CONTRIBUTOR = "Contributor"
    PROPONENT = "Proponent"
    SPONSOR = "Sponsor"
    RELEASE_AUTHORITY = "Release authority"
    TECHNICAL_POC = "Technical POC"


class GlyphType(Enum):
    BITMAP = "BITMAP"
    JPG = "JPG"
    GIF = "GIF"
    PNG = "PNG"
    TIFF = "TIFF"


class Sharing(Enum):
    PUBLISH = "Publish"
    SUBSCRIBE = "Subscribe"
    PUBLISH_SUBSCRIBE = "PublishSubscribe"
    NEITHER = "Neither"


class UpdateType(Enum):
    STATIC = "Static"
    PERIODIC = "Periodic"
    CONDITIONAL = "Conditional"
    NA = "NA"


class Ownership(Enum):
    """Ownership transfer allowed for an attribute."""

    DIVEST = "Divest"
    ACQUIRE = "Acquire"
    DIVEST_ACQUIRE = "DivestAcquire"
    NO_TRANSFER = "NoTransfer"


class Order(Enum):
    RECEIVE = "Receive"
    TIME_STAMP = "TimeStamp"


class SynchronizationCapability(Enum):
    REGISTER = "Register"
    ACHIEVE = "Achieve"
    REGISTER_ACHIEVE = "RegisterAchieve"
    NO_SYNCH = "NoSynch"
    NA = "NA"


class Reliable(Enum):
    YES = "Yes"
    NO = "No"


class Endian(Enum):
    BIG = "Big"
    LITTLE = "Little"


class ArrayEncoding(Enum):
    HLA_FIXED_ARRAY = "HLAfixedArray"
    HLA_VARIABLE_ARRAY = "HLAvariableArray"


class FixedRecordEncoding(Enum):
    HLA_FIXED_RECORD = "HLAfixedRecord"


class VariantRecordEncoding(Enum):
    HLA_VARIANT_RECORD = "HLAvariantRecord"


class ResignAction(Enum):
    """Action the RTI takes when a federate resigns automatically."""

    UNCONDITIONALLY_DIVEST_ATTRIBUTES = "UnconditionallyDivestAttributes"
    DELETE_OBJECTS = "DeleteObjects"
    CANCEL_PENDING_OWNERSHIP_ACQUISITIONS = "CancelPendingOwnershipAcquisitions"
    DELETE_OBJECTS_THEN_DIVEST = "DeleteObjectsThenDivest"
    CANCEL_THEN_DELETE_THEN_DIVEST = "CancelThenDeleteThenDivest"
    NO_ACTION = "NoAction"


class Vocabulary(Generic[E]):
    """Converts field text to a member of one vocabulary enum.

    Instances are text converters and plug directly into the field
    extractors.
    """

    def __init__(self, name: str, enum_type: type[E], is_open: bool = False):
        self.name = name
        self.enum_type = enum_type
        self.is_open = is_open
        self._members = {member.value: member for member in enum_type}

    @property
    def tokens(self) -> list[str]:
        return list(self._members)

    def convert(self, text: str, path: str = "", line: int | None = None) -> E | Other:
        """Convert a token.

        Raises:
            UnrecognizedValueError: If the vocabulary is closed and the
                token is unknown.
        """
        member = self._members.get(text)
        if member is not None:
            return member
        if self.is_open:
            return Other(self.name, text)
        raise UnrecognizedValueError(path or self.name, text, self.tokens, line=line)

    __call__ = convert

    def __repr__(self) -> str:
        policy = "open" if self.is_open else "closed"
        return f"Vocabulary({self.name!r}, {self.enum_type.__name__}, {policy})"


MODEL_TYPE = Vocabulary("modelType", ModelType, is_open=True)
SECURITY_CLASSIFICATION = Vocabulary("securityClassification", SecurityClassification, is_open=True)
APPLICATION_DOMAIN = Vocabulary("applicationDomain", ApplicationDomain, is_open=True)
POC_TYPE = Vocabulary("pocType", PocType, is_open=True)
GLYPH_TYPE = Vocabulary("glyphType", GlyphType, is_open=True)
ARRAY_ENCODING = Vocabulary("arrayEncoding", ArrayEncoding, is_open=True)
FIXED_RECORD_ENCODING = Vocabulary("fixedRecordEncoding", FixedRecordEncoding, is_open=True)
VARIANT_RECORD_ENCODING = Vocabulary("variantRecordEncoding", VariantRecordEncoding, is_open=True)

SHARING = Vocabulary("sharing", Sharing)
UPDATE_TYPE = Vocabulary("updateType", UpdateType)
OWNERSHIP = Vocabulary("ownership", Ownership)
ORDER = Vocabulary("order", Order)
SYNCHRONIZATION_CAPABILITY = Vocabulary("capability", SynchronizationCapability)
RELIABLE = Vocabulary("reliable", Reliable)
ENDIAN = Vocabulary("endian", Endian)
RESIGN_ACTION = Vocabulary("resignAction", ResignAction)

ALL_VOCABULARIES: tuple[Vocabulary, ...] = (
    MODEL_TYPE,
    SECURITY_CLASSIFICATION,
    APPLICATION_DOMAIN,
    POC_TYPE,
    GLYPH_TYPE,
    ARRAY_ENCODING,
    FIXED_RECORD_ENCODING,
    VARIANT_RECORD_ENCODING,
    SHARING,
    UPDATE_TYPE,
    OWNERSHIP,
    ORDER,
    SYNCHRONIZATION_CAPABILITY,
    RELIABLE,
    ENDIAN,
    RESIGN_ACTION,
)


def fallback_text(value: Enum | Other) -> str | None:
    """Get the preserved token of an open vocabulary fallback.

    Returns None for a recognized member.
    """
    if isinstance(value, Other):
        return value.text
    return None


def token(value: Enum | Other) -> str:
    """Get the token a vocabulary value was read from."""
    if isinstance(value, Other):
        return value.text
    return value.value


def switch_flag(text: str, path: str = "", line: int | None = None) -> bool:
    """Convert a boolean switch attribute.

    Raises:
        MalformedScalarError: If the text is not an xs:boolean literal.
    """
    return parse_scalar(BOOLEAN, text, path, line)
