"""Model identification section."""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from fom_tools.extract import (
    optional_attribute,
    optional_record,
    optional_text,
    repeated_records,
    repeated_text,
    required_attribute,
    required_text,
)
from fom_tools.scalars import UNSIGNED_SHORT, as_scalar
from fom_tools.tree import element_text
from fom_tools.vocabulary import (
    APPLICATION_DOMAIN,
    GLYPH_TYPE,
    MODEL_TYPE,
    POC_TYPE,
    SECURITY_CLASSIFICATION,
    ApplicationDomain,
    GlyphType,
    ModelType,
    Other,
    PocType,
    SecurityClassification,
)


@dataclass(frozen=True)
class Keyword:
    keyword_value: str
    taxonomy: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Keyword:
        return cls(
            keyword_value=required_text(element, path, "keywordValue"),
            taxonomy=optional_text(element, path, "taxonomy"),
        )


@dataclass(frozen=True)
class PointOfContact:
    """A person or organization responsible for the model."""

    poc_type: PocType | Other
    name: str | None = None
    org: str | None = None
    telephones: tuple[str, ...] | None = None
    emails: tuple[str, ...] | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> PointOfContact:
        return cls(
            poc_type=required_text(element, path, "pocType", POC_TYPE),
            name=optional_text(element, path, "pocName"),
            org=optional_text(element, path, "pocOrg"),
            telephones=repeated_text(element, path, "pocTelephone"),
            emails=repeated_text(element, path, "pocEmail"),
        )


@dataclass(frozen=True)
class Reference:
    """An identified external document related to the model."""

    reference_type: str
    identification: str

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Reference:
        return cls(
            reference_type=required_text(element, path, "type"),
            identification=required_text(element, path, "identification"),
        )


@dataclass(frozen=True)
class Glyph:
    """Small image representing the model.

    ``data`` holds the element text (normally base64 image data), or None
    when the element is empty.
    """

    glyph_type: GlyphType | Other
    height: int
    width: int
    alt: str
    href: str | None = None
    data: str | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> Glyph:
        unsigned_short = as_scalar(UNSIGNED_SHORT)
        return cls(
            glyph_type=required_attribute(element, path, "type", GLYPH_TYPE),
            height=required_attribute(element, path, "height", unsigned_short),
            width=required_attribute(element, path, "width", unsigned_short),
            alt=required_attribute(element, path, "alt"),
            href=optional_attribute(element, path, "href"),
            data=element_text(element) or None,
        )


@dataclass(frozen=True)
class ModelIdentification:
    """Identifying metadata of a FOM or SOM."""

    name: str
    model_type: ModelType | Other
    version: str
    modification_date: str
    security_classification: SecurityClassification | Other
    description: str
    release_restrictions: tuple[str, ...] | None = None
    purpose: str | None = None
    application_domain: ApplicationDomain | Other | None = None
    use_limitation: str | None = None
    use_history: tuple[str, ...] | None = None
    keywords: tuple[Keyword, ...] | None = None
    pocs: tuple[PointOfContact, ...] | None = None
    references: tuple[Reference, ...] | None = None
    other: str | None = None
    glyph: Glyph | None = None

    @classmethod
    def from_element(cls, element: etree._Element, path: str) -> ModelIdentification:
        return cls(
            name=required_text(element, path, "name"),
            model_type=required_text(element, path, "type", MODEL_TYPE),
            version=required_text(element, path, "version"),
            modification_date=required_text(element, path, "modificationDate"),
            security_classification=required_text(
                element, path, "securityClassification", SECURITY_CLASSIFICATION
            ),
            release_restrictions=repeated_text(element, path, "releaseRestriction"),
            purpose=optional_text(element, path, "purpose"),
            application_domain=optional_text(element, path, "applicationDomain", APPLICATION_DOMAIN),
            description=required_text(element, path, "description"),
            use_limitation=optional_text(element, path, "useLimitation"),
            use_history=repeated_text(element, path, "useHistory"),
            keywords=repeated_records(element, path, "keyword", Keyword.from_element),
            pocs=repeated_records(element, path, "poc", PointOfContact.from_element),
            references=repeated_records(element, path, "reference", Reference.from_element),
            other=optional_text(element, path, "other"),
            glyph=optional_record(element, path, "glyph", Glyph.from_element),
        )
