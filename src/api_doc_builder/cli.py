"""CLI entry point for api-doc-builder."""

import importlib
import sys
from pathlib import Path
from typing import Any

import click

from api_doc_builder.config import get_settings
from api_doc_builder.errors import DocumentConflictError
from api_doc_builder.generator.document import AssemblyResult, DocumentAssembler
from api_doc_builder.generator.output import to_json_bytes, to_yaml
from api_doc_builder.log import setup_logging
from api_doc_builder.model.base import ServiceMetadata, TagGroup


def _load_target(target: str) -> tuple[ServiceMetadata, list[TagGroup]]:
    """Resolve 'package.module[:attribute]' to (metadata, tags)."""
    module_name, _, attr = target.partition(":")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise click.ClickException(f"Cannot import {module_name!r}: {e}") from e
    if attr:
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise click.ClickException(f"{module_name!r} has no attribute {attr!r}") from e

    metadata = getattr(obj, "metadata", None)
    tags = getattr(obj, "tags", None)
    if tags is not None:
        tags = list(tags)
    if not isinstance(metadata, ServiceMetadata):
        raise click.ClickException(f"{target!r} must expose 'metadata' as a ServiceMetadata")
    if tags is None or not all(isinstance(t, TagGroup) for t in tags):
        raise click.ClickException(f"{target!r} must expose 'tags' as a list of TagGroup")
    return metadata, tags


def _assemble(target: str, seed: int | None, strict: bool) -> AssemblyResult:
    metadata, tags = _load_target(target)
    assembler = DocumentAssembler(seed=seed, strict=strict)
    try:
        return assembler.assemble(metadata, tags)
    except DocumentConflictError as e:
        raise click.ClickException(str(e)) from e


@click.group()
def main():
    """API Doc Builder: generate an OpenAPI document from a declared service model."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)


@main.command()
@click.argument("target")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file path. Defaults to stdout.")
@click.option("--format", "fmt", default=None, type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--seed", default=None, type=int, help="Seed for generated example values.")
@click.option("--strict/--no-strict", default=None, help="Fail when declarations overwrite each other.")
def build(target: str, output: Path | None, fmt: str | None, seed: int | None, strict: bool | None):
    """Build the API document for TARGET (module or module:attribute)."""
    settings = get_settings()
    fmt = fmt or settings.output_format
    seed = settings.example_seed if seed is None else seed
    strict = settings.strict if strict is None else strict

    result = _assemble(target, seed, strict)
    if fmt == "yaml":
        text = to_yaml(result.document)
    else:
        text = to_json_bytes(result.document, settings.indent).decode("utf-8") + "\n"

    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"API document saved to {output}", err=True)


@main.command()
@click.argument("target")
def check(target: str):
    """Report overwritten declarations and undefined references; exit 2 if any."""
    result = _assemble(target, seed=0, strict=False)

    for collision in result.collisions:
        click.echo(f"collision: {collision}")
    for name in result.dangling_refs:
        click.echo(f"undefined reference: #/definitions/{name}")

    if not result.clean:
        click.echo(
            f"Found {len(result.collisions)} collision(s) and {len(result.dangling_refs)} undefined reference(s).",
            err=True,
        )
        sys.exit(2)
    click.echo("OK")
