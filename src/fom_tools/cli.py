"""Command-line interface for fom-tools."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from fom_tools.errors import ParseResult
from fom_tools.omt.model import ObjectModel
from fom_tools.parser import FomParser
from fom_tools.vocabulary import token

console = Console()
error_console = Console(stderr=True)

OMT_EXTENSIONS = {".xml"}


def _collect_files(paths: tuple[Path, ...], recursive: bool) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            if not recursive:
                raise ValueError(f"{path} is a directory. Use --recursive to parse all files.")
            files.extend(
                sorted({p for ext in OMT_EXTENSIONS for p in path.rglob(f"*{ext}")})
            )
        else:
            files.append(path)
    return files


def summarize(model: ObjectModel) -> dict[str, Any]:
    """Count the main contents of a model."""
    object_classes = list(model.objects.root.walk())
    interaction_classes = list(model.interactions.root.walk())
    identification = model.model_identification
    return {
        "name": identification.name,
        "type": token(identification.model_type),
        "version": identification.version,
        "object_classes": len(object_classes),
        "attributes": sum(len(c.attributes or ()) for c in object_classes),
        "interaction_classes": len(interaction_classes),
        "parameters": sum(len(c.parameters or ()) for c in interaction_classes),
        "data_types": len(model.data_types.names()),
        "transportations": len(model.transportations.transportations or ()),
    }


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format.",
)
@click.option(
    "--recursive",
    "-r",
    is_flag=True,
    help="Parse all .xml files in directories.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only output failures, no summaries.",
)
@click.option(
    "--huge-tree",
    is_flag=True,
    help="Lift the XML parser's size limits for very large models.",
)
def main(
    paths: tuple[Path, ...],
    output: str,
    recursive: bool,
    quiet: bool,
    huge_tree: bool,
) -> None:
    """Parse HLA FOM/SOM files into typed object models.

    PATHS can be files or directories (with --recursive).
    """
    try:
        files = _collect_files(paths, recursive)
    except ValueError as exc:
        error_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    if not files:
        error_console.print("[yellow]Warning:[/yellow] No matching files found")
        sys.exit(0)

    parser = FomParser(huge_tree=huge_tree)
    results = [parser.parse_file(file_path) for file_path in files]

    if output == "json":
        _output_json(results)
    else:
        _output_text(results, quiet)

    sys.exit(0 if all(result.is_valid for result in results) else 1)


def _output_text(results: list[ParseResult], quiet: bool) -> None:
    """Output results as formatted text."""
    for result in results:
        if result.is_valid:
            if quiet:
                continue
            summary = summarize(result.model)
            console.print(f"[green]✓[/green] {result.file_path} - {summary['name']}")

            table = Table(show_header=True, header_style="bold")
            table.add_column("Item", style="dim", width=20)
            table.add_column("Value")
            for key, value in summary.items():
                table.add_row(key.replace("_", " "), str(value))
            console.print(table)
            console.print()
        else:
            error = result.error
            console.print(f"[red]✗[/red] {result.file_path} - Invalid")

            table = Table(show_header=True, header_style="bold")
            table.add_column("Type", style="dim", width=22)
            table.add_column("Location", width=40)
            table.add_column("Description")

            location = error.path or "<document>"
            if error.line is not None:
                location = f"{location}:{error.line}"
            table.add_row(error.error_type.value, location, error.description)

            console.print(table)
            console.print()

    total = len(results)
    valid = sum(1 for r in results if r.is_valid)
    invalid = total - valid

    if total > 1:
        console.print(f"\n[bold]Summary:[/bold] {valid}/{total} files parsed", end="")
        if invalid > 0:
            console.print(f", [red]{invalid} invalid[/red]")
        else:
            console.print()


def _output_json(results: list[ParseResult]) -> None:
    """Output results as JSON."""
    output = []
    for result in results:
        entry: dict[str, Any] = {"file": result.file_path, "valid": result.is_valid}
        if result.is_valid:
            entry["summary"] = summarize(result.model)
        else:
            error = result.error
            entry["error"] = {
                "type": error.error_type.value,
                "description": error.description,
                "path": error.path,
                "value": error.value,
                "line": error.line,
            }
        output.append(entry)

    console.print_json(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
