"""checkmore CLI entry point."""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import click
import yaml

from checkmore.registry import PredicateRegistry
from checkmore.structure import every, map_
from checkmore.types import CheckError, PredicateCategory, Variant

logger = logging.getLogger(__name__)

_VARIANT_PREFIXES = {"maybe": Variant.MAYBE, "not": Variant.NOT}


def _parse_value(raw: str) -> Any:
    """Parse a command line value as YAML, falling back to the raw string."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def _load_document(path: Path) -> Any:
    with path.open() as fh:
        return yaml.safe_load(fh)


def _lookup(reference: str) -> Any:
    """Resolve ``name``, ``maybe.name`` or ``not.name`` to a registered predicate."""
    kind = Variant.BASE
    prefix, _, rest = reference.partition(".")
    if rest and prefix in _VARIANT_PREFIXES:
        kind = _VARIANT_PREFIXES[prefix]
        reference = rest
    return PredicateRegistry.variant(reference, kind)


def _resolve_names(schema_doc: Mapping[str, Any], path: str = "") -> dict[str, Any]:
    """Turn a mapping of property -> predicate name into a predicate tree."""
    tree: dict[str, Any] = {}
    for prop, entry in schema_doc.items():
        location = f"{path}.{prop}" if path else str(prop)
        if isinstance(entry, Mapping):
            tree[prop] = _resolve_names(entry, location)
        elif isinstance(entry, str):
            try:
                tree[prop] = _lookup(entry)
            except ValueError as e:
                raise click.ClickException(f"{location}: {e}") from None
        else:
            raise click.ClickException(
                f"{location}: expected a predicate name, got {entry!r}"
            )
    return tree


def _flatten(results: Mapping[str, Any], path: str = "") -> Iterator[tuple[str, Any]]:
    for prop, value in results.items():
        location = f"{path}.{prop}" if path else str(prop)
        if isinstance(value, Mapping):
            yield from _flatten(value, location)
        else:
            yield location, value


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool):
    """checkmore: named runtime predicates."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command("list")
@click.option(
    "--category",
    type=click.Choice([c.value for c in PredicateCategory]),
    default=None,
    help="Only list predicates in this category.",
)
def list_cmd(category: str | None):
    """List registered predicates."""
    if category is None:
        names = PredicateRegistry.list_registered()
    else:
        entries = PredicateRegistry.list_by_category(PredicateCategory(category))
        names = sorted(e.name for e in entries)

    for name in names:
        entry = PredicateRegistry.get(name)
        click.echo(f"  {name:<28} {entry.description}")
    click.echo(f"\n{len(names)} predicate(s)")


@cli.command()
@click.argument("name")
@click.argument("args", nargs=-1, required=True)
@click.option(
    "--variant",
    type=click.Choice(["base", "maybe", "not"]),
    default="base",
    help="Which view of the predicate to run.",
)
def run(name: str, args: tuple[str, ...], variant: str):
    """Run predicate NAME against ARGS (parsed as YAML)."""
    try:
        predicate = PredicateRegistry.variant(name, Variant(variant))
    except ValueError as e:
        raise click.ClickException(str(e)) from None

    values = [_parse_value(raw) for raw in args]
    logger.debug("Running %s.%s with %r", variant, name, values)
    try:
        result = predicate(*values)
    except (CheckError, TypeError) as e:
        raise click.ClickException(f"{name} raised: {e}") from None

    if result:
        click.echo(click.style("true", fg="green"))
    else:
        click.echo(click.style("false", fg="red"))
        raise SystemExit(1)


@cli.command()
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(data_file: Path, schema_file: Path):
    """Validate DATA_FILE against SCHEMA_FILE.

    SCHEMA_FILE maps property names to predicate names, for example
    ``port: port`` or ``owner: {email: maybe.email}``.
    """
    schema_doc = _load_document(schema_file)
    if not isinstance(schema_doc, Mapping):
        raise click.ClickException(f"{schema_file}: schema must be a mapping")
    data = _load_document(data_file)
    if not isinstance(data, Mapping):
        raise click.ClickException(f"{data_file}: document must be a mapping")

    tree = _resolve_names(schema_doc)
    logger.debug("Validating %s against %s", data_file, schema_file)
    results = map_(data, tree)

    for location, value in _flatten(results):
        if value is False:
            click.echo(click.style(f"  ✗ {location}", fg="red"))
        else:
            click.echo(click.style(f"  ✓ {location}", fg="green"))

    if not every(results):
        click.echo(click.style(f"\n{data_file} is invalid.", fg="red", bold=True))
        raise SystemExit(1)

    click.echo(click.style(f"\n{data_file} is valid.", fg="green", bold=True))
