"""
Project-level CLI commands: compile, validate, inspect, build, stacks.
"""

import json
import tomllib
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from apml.core import ir
from apml.core.build import compile_file, write_artifacts
from apml.core.errors import ApmlError, ParseError
from apml.core.lint import lint_document
from apml.core.manifest import ProjectManifest, discover_source_files, load_manifest
from apml.core.parser import parse_file
from apml.stacks import get_backend, list_backends

console = Console()

INSPECT_FORMATS = ("tree", "json")

# Unreadable sources or manifests
READ_ERRORS = (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError)

# Declarations the tree view lists in their own sections
LISTED_KINDS = {
    ir.DeclarationKind.APP,
    ir.DeclarationKind.DATA,
    ir.DeclarationKind.INTERFACE,
    ir.DeclarationKind.COMPUTED,
}


def _print_human_diagnostics(errors: list[str], warnings: list[str]) -> None:
    """Print diagnostics in human-readable format."""
    if errors:
        typer.echo("Validation failed:\n", err=True)
        for err in errors:
            typer.echo(f"ERROR: {err}", err=True)

    if warnings:
        typer.echo("Validation warnings:\n", err=False)
        for warn in warnings:
            typer.echo(f"WARNING: {warn}", err=False)

    if not errors and not warnings:
        typer.echo("OK: document is valid.")


def _manifest_sources(manifest: str) -> tuple[Path, ProjectManifest, list[Path]]:
    manifest_path = Path(manifest).resolve()
    if not manifest_path.exists():
        typer.echo(f"Manifest not found: {manifest_path}", err=True)
        raise typer.Exit(code=1)

    try:
        mf = load_manifest(manifest_path)
        files = discover_source_files(manifest_path.parent, mf)
    except READ_ERRORS as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    if not files:
        typer.echo(f"No .apml files found for project '{mf.name}'", err=True)
        raise typer.Exit(code=1)
    return manifest_path, mf, files


def compile_command(
    input: Path = typer.Argument(..., exists=True, dir_okay=False, help="APML source file"),
    output_dir: Path = typer.Argument(..., help="Directory to write generated files into"),
    stack: str = typer.Option("vue", "--stack", "-s", help="Backend to generate with"),
) -> None:
    """
    Compile one APML file into generated application code.
    """
    try:
        written = compile_file(input, output_dir, stack)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except (ApmlError, *READ_ERRORS) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    root = output_dir.resolve()
    for path in written:
        typer.echo(f"  ✓ {path.relative_to(root).as_posix()}")
    typer.echo(f"Wrote {len(written)} files to {output_dir}")


def validate_command(
    input: Path | None = typer.Argument(
        None, exists=True, dir_okay=False, help="APML source file"
    ),
    manifest: str = typer.Option("apml.toml", "--manifest", "-m", help="Path to apml.toml"),
) -> None:
    """
    Parse APML sources and report diagnostics.

    Validates INPUT when given, otherwise every source listed in the manifest.
    """
    if input is not None:
        files = [input]
    else:
        _, _, files = _manifest_sources(manifest)

    errors: list[str] = []
    warnings: list[str] = []
    try:
        for path in files:
            file_errors, file_warnings = lint_document(parse_file(path))
            prefix = f"{path.name}: " if len(files) > 1 else ""
            errors.extend(prefix + e for e in file_errors)
            warnings.extend(prefix + w for w in file_warnings)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except READ_ERRORS as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _print_human_diagnostics(errors, warnings)
    if errors:
        raise typer.Exit(code=1)


def _describe_element(element: ir.UIElement, depth: int) -> None:
    pad = "     " + "  " * depth
    if isinstance(element, ir.ShowElement):
        label = f"show {element.element_name}"
        if element.name != element.element_name:
            label += f" {element.name}"
        typer.echo(f"{pad}- {label}")
    elif isinstance(element, ir.ConditionalElement):
        typer.echo(f"{pad}- {element.type} {element.condition}")
    else:
        typer.echo(f"{pad}- for_each {element.item_name} in {element.collection}")

    if isinstance(element, ir.ConditionalElement):
        for child in element.then:
            _describe_element(child, depth + 1)
        if element.else_ is not None:
            typer.echo(f"{pad}- else")
            for child in element.else_:
                _describe_element(child, depth + 1)
        return

    for child in ir.child_elements(element):
        _describe_element(child, depth + 1)


def _print_tree(doc: ir.Document, title: str) -> None:
    typer.echo(f"\n📦 {doc.app.name if doc.app else title}")
    if doc.app and doc.app.title:
        typer.echo(f"   {doc.app.title}")

    if doc.data:
        typer.echo("\n📊 Data models:")
        for model in doc.data:
            typer.echo(f"   • {model.name} ({len(model.fields)} fields)")
            for field in model.fields:
                flags = " ".join(
                    str(m) if isinstance(m, ir.FieldModifier) else f"default: {m.value}"
                    for m in field.modifiers
                )
                typer.echo(f"     - {field.name}: {field.type} {flags}".rstrip())

    if doc.interfaces:
        typer.echo("\n🖥  Interfaces:")
        for interface in doc.interfaces:
            typer.echo(f"   • {interface.name} ({len(interface.walk())} elements)")
            for element in interface.elements:
                _describe_element(element, 0)

    if doc.computed:
        typer.echo("\n🧮 Computed:")
        for value in doc.computed:
            fmt = f" [{value.format}]" if value.format else ""
            typer.echo(f"   • {value.name}{fmt}")

    others = [(kind, name) for kind, name in doc.declaration_order if kind not in LISTED_KINDS]
    if others:
        typer.echo("\n📋 Other declarations:")
        for kind, name in others:
            typer.echo(f"   • {kind} {name}")


def inspect_command(
    input: Path = typer.Argument(..., exists=True, dir_okay=False, help="APML source file"),
    format: str = typer.Option("tree", "--format", "-f", help="Output format: 'tree' or 'json'"),
) -> None:
    """
    Inspect the parsed structure of an APML file.
    """
    if format not in INSPECT_FORMATS:
        typer.echo(f"Unknown format '{format}'. Use one of: {', '.join(INSPECT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    try:
        doc = parse_file(input)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except READ_ERRORS as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if format == "json":
        typer.echo(json.dumps(doc.model_dump(mode="json", by_alias=True), indent=2))
    else:
        _print_tree(doc, input.stem)


def build_command(
    manifest: str = typer.Option("apml.toml", "--manifest", "-m", help="Path to apml.toml"),
    stack: str | None = typer.Option(None, "--stack", "-s", help="Override [build] stack"),
    output: str | None = typer.Option(None, "--output", "-o", help="Override [build] output"),
) -> None:
    """
    Build every source listed in the project manifest.

    With several sources, each one is written to its own subdirectory of the
    output directory, named after the source file.
    """
    manifest_path, mf, files = _manifest_sources(manifest)
    stack_name = stack or mf.build.stack
    output_dir = manifest_path.parent / (output or mf.build.output)

    try:
        backend = get_backend(stack_name)
        total = 0
        for path in files:
            target = output_dir if len(files) == 1 else output_dir / path.stem
            written = write_artifacts(backend.generate(parse_file(path)), target)
            total += len(written)
            typer.echo(f"  ✓ {path.name} -> {len(written)} files")
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except (ApmlError, *READ_ERRORS) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Built {mf.name} {mf.version} with stack '{stack_name}': {total} files in {output_dir}"
    )


def stacks_command() -> None:
    """
    List available code generation stacks.
    """
    table = Table(title="Stacks")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Formats")

    for name in list_backends():
        caps = get_backend(name).get_capabilities()
        table.add_row(name, caps.description, ", ".join(caps.output_formats))

    console.print(table)
