"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import click
import pytest
from click.testing import CliRunner
from lxml import etree

from fom_tools.cli import main, summarize
from tests.fixture_loader import load_fixture_bytes, load_fixture_tree


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def read_json(output: str):
    return json.loads(click.unstyle(output))


def write_broken(path: Path) -> None:
    tree = load_fixture_tree("minimal.xml")
    del tree.find("switches").attrib["auto_provide"]
    path.write_bytes(etree.tostring(tree, xml_declaration=True, encoding="UTF-8"))


class TestSummarize:
    def test_sample_counts(self, sample_model) -> None:
        assert summarize(sample_model) == {
            "name": "Sample Base FOM",
            "type": "FOM",
            "version": "2.0",
            "object_classes": 4,
            "attributes": 4,
            "interaction_classes": 3,
            "parameters": 2,
            "data_types": 8,
            "transportations": 2,
        }


class TestTextOutput:
    """Tests for the default text output."""

    def test_valid_file(self, runner: CliRunner, tmp_path: Path) -> None:
        valid = tmp_path / "ok.xml"
        valid.write_bytes(load_fixture_bytes("minimal.xml"))

        result = runner.invoke(main, [str(valid)])

        assert result.exit_code == 0
        assert "Minimal" in result.output

    def test_invalid_file(self, runner: CliRunner, tmp_path: Path) -> None:
        broken = tmp_path / "bad.xml"
        write_broken(broken)

        result = runner.invoke(main, [str(broken)])

        assert result.exit_code == 1
        assert "auto_provide" in result.output

    def test_quiet_hides_valid_files(self, runner: CliRunner, tmp_path: Path) -> None:
        valid = tmp_path / "ok.xml"
        valid.write_bytes(load_fixture_bytes("minimal.xml"))

        result = runner.invoke(main, ["--quiet", str(valid)])

        assert result.exit_code == 0
        assert "Minimal" not in result.output


class TestJsonOutput:
    """Tests for JSON output."""

    def test_valid_file(self, runner: CliRunner, sample_path: Path) -> None:
        result = runner.invoke(main, ["--output", "json", str(sample_path)])

        assert result.exit_code == 0
        (entry,) = read_json(result.output)
        assert entry["valid"] is True
        assert entry["file"] == str(sample_path)
        assert entry["summary"]["object_classes"] == 4

    def test_invalid_file(self, runner: CliRunner, tmp_path: Path) -> None:
        broken = tmp_path / "broken.xml"
        write_broken(broken)

        result = runner.invoke(main, ["-o", "json", str(broken)])

        assert result.exit_code == 1
        (entry,) = read_json(result.output)
        assert entry["valid"] is False
        assert entry["error"]["type"] == "missing_required_field"
        assert entry["error"]["path"] == "switches.auto_provide"
        assert isinstance(entry["error"]["line"], int)


    def test_huge_tree_deep_classes(self, runner: CliRunner, tmp_path: Path) -> None:
        tree = load_fixture_tree("minimal.xml")
        parent = tree.find("objects/objectClass")
        for level in range(400):
            parent = etree.SubElement(parent, "objectClass")
            etree.SubElement(parent, "name").text = f"Level{level}"
            etree.SubElement(parent, "sharing").text = "Neither"
        deep = tmp_path / "deep.xml"
        deep.write_bytes(etree.tostring(tree, xml_declaration=True, encoding="UTF-8"))

        result = runner.invoke(main, ["--huge-tree", "-o", "json", str(deep)])

        assert result.exit_code == 0
        (entry,) = read_json(result.output)
        assert entry["summary"]["object_classes"] == 401


class TestDirectories:
    """Tests for directory arguments."""

    def test_directory_requires_recursive(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(main, [str(tmp_path)])
        assert result.exit_code == 1

    def test_recursive(self, runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "nested").mkdir()
        (tmp_path / "a.xml").write_bytes(load_fixture_bytes("minimal.xml"))
        write_broken(tmp_path / "nested" / "b.xml")
        (tmp_path / "notes.txt").write_text("not a model")

        result = runner.invoke(main, ["-r", "-o", "json", str(tmp_path)])

        assert result.exit_code == 1
        entries = read_json(result.output)
        assert [Path(e["file"]).name for e in entries] == ["a.xml", "b.xml"]
        assert [e["valid"] for e in entries] == [True, False]

    def test_empty_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(main, ["-r", str(tmp_path)])
        assert result.exit_code == 0
