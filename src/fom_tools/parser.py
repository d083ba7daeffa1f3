"""Object model parsing entry points.

lxml builds the element tree; ``ObjectModel.from_element`` converts it.
A parse either returns a complete model or the first error found, never a
partially converted model.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Union

from lxml import etree

from fom_tools.errors import FomParseError, ParseResult, XmlSyntaxError
from fom_tools.omt.model import ObjectModel

logger = logging.getLogger(__name__)

Source = Union[bytes, str, BinaryIO]


class FomParser:
    """Parses OMT documents into ``ObjectModel`` instances.

    A parser owns one lxml parser and must not be shared between threads;
    create one per thread instead.
    """

    def __init__(self, huge_tree: bool = False):
        """Initialize the parser.

        Args:
            huge_tree: Lift lxml's limits on tree depth and text size, for
                very large federation object models.
        """
        self._huge_tree = huge_tree
        self._xml_parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_comments=True,
            remove_pis=True,
            huge_tree=huge_tree,
        )

    @property
    def huge_tree(self) -> bool:
        return self._huge_tree

    def parse(self, source: Source, file_path: str = "") -> ParseResult:
        """Parse a document.

        Args:
            source: Document bytes, document text, or a binary stream.
            file_path: Name to record in the result.

        Returns:
            ParseResult holding either the model or the first error.
        """
        try:
            model = self.load(source)
        except FomParseError as exc:
            logger.debug("Parse of %s failed: %s", file_path or "<stream>", exc)
            return ParseResult(error=exc.to_error(), file_path=file_path)
        return ParseResult(model=model, file_path=file_path)

    def parse_file(self, path: str | Path) -> ParseResult:
        """Parse a document from a file.

        Raises:
            OSError: If the file cannot be read.
        """
        path = Path(path)
        with path.open("rb") as stream:
            return self.parse(stream, file_path=str(path))

    def load(self, source: Source) -> ObjectModel:
        """Parse a document, raising on failure.

        Raises:
            XmlSyntaxError: If the document is not well-formed XML.
            FomParseError: On the first conversion error.
        """
        root = self._read_tree(source)
        model = ObjectModel.from_element(root)
        logger.debug("Parsed object model '%s'", model.name)
        return model

    def is_valid(self, source: Source) -> bool:
        return self.parse(source).is_valid

    def _read_tree(self, source: Source) -> etree._Element:
        if isinstance(source, str):
            source = source.encode("utf-8")
        try:
            if isinstance(source, bytes):
                return etree.fromstring(source, self._xml_parser)
            return etree.parse(source, self._xml_parser).getroot()
        except etree.XMLSyntaxError as exc:
            line = exc.lineno if exc.lineno else None
            raise XmlSyntaxError(exc.msg or str(exc), line=line) from exc


def parse(source: Source) -> ParseResult:
    """Convenience function to parse a document.

    Args:
        source: Document bytes, document text, or a binary stream.

    Returns:
        ParseResult holding either the model or the first error.
    """
    return FomParser().parse(source)


def parse_file(path: str | Path) -> ParseResult:
    """Convenience function to parse a document file."""
    return FomParser().parse_file(path)


def load(source: Source) -> ObjectModel:
    """Convenience function to parse a document, raising on failure."""
    return FomParser().load(source)


def is_valid_fom(path: str | Path) -> bool:
    """Convenience function to check that a file parses into an object model.

    Args:
        path: Path to the FOM or SOM file.

    Returns:
        True if the file parses, False otherwise.
    """
    return FomParser().parse_file(path).is_valid
