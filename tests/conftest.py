"""pytest configuration and fixtures for fom_tools tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from lxml import etree

from fom_tools import FomParser, ObjectModel
from tests.fixture_loader import FIXTURES_DIR, load_fixture_bytes, load_fixture_tree


@pytest.fixture
def fom_parser() -> FomParser:
    """Provide a FomParser instance."""
    return FomParser()


@pytest.fixture
def minimal_path() -> Path:
    """Path of a document holding only the mandatory sections."""
    return FIXTURES_DIR / "minimal.xml"


@pytest.fixture
def sample_path() -> Path:
    """Path of a namespaced document exercising every section."""
    return FIXTURES_DIR / "sample.xml"


@pytest.fixture
def minimal_xml() -> bytes:
    return load_fixture_bytes("minimal.xml")


@pytest.fixture
def minimal_tree() -> etree._Element:
    """Provide the minimal document as a tree tests may modify."""
    return load_fixture_tree("minimal.xml")


@pytest.fixture
def sample_model(fom_parser: FomParser, sample_path: Path) -> ObjectModel:
    """Provide the sample document, fully converted."""
    return fom_parser.load(sample_path.read_bytes())


def to_bytes(root: etree._Element) -> bytes:
    """Serialize a (modified) fixture tree for re-parsing."""
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8")


@pytest.fixture
def serialize():
    """Provide a helper that serializes an element tree to bytes."""
    return to_bytes
