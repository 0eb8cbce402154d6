"""Command line access to the flattening table.

    blockflattening state 32
    blockflattening variant "{Name:'minecraft:grass',Properties:{snowy:'false'}}"
    blockflattening block minecraft:grass
    blockflattening audit --table my_table.json
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from blockflattening.flattening import default_registry
from blockflattening.flattening.registry import RegistryConfig, build_registry
from blockflattening.state_codec import StateParseError, format_state, parse_state

logger = logging.getLogger(__name__)

app = typer.Typer(help="Look up pre-flattening block ids and states.", no_args_is_help=True)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def state(state_id: Annotated[int, typer.Argument(help="Legacy state id, (block_id << 4) | metadata")]) -> None:
    """Print the canonical state for a legacy state id."""
    typer.echo(format_state(default_registry().lookup_state(state_id)))


@app.command()
def variant(descriptor: Annotated[str, typer.Argument(help="Legacy descriptor, e.g. {Name:'minecraft:grass'}")]) -> None:
    """Print the canonical state a legacy descriptor resolves to."""
    try:
        legacy = parse_state(descriptor)
    except StateParseError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(2) from e
    typer.echo(format_state(default_registry().lookup_state(legacy)))


@app.command()
def block(name: Annotated[str, typer.Argument(help="Legacy block name, e.g. minecraft:grass")]) -> None:
    """Print the canonical block name for a legacy block name."""
    typer.echo(default_registry().lookup_block(name))


@app.command()
def audit(
    table: Annotated[Optional[Path], typer.Option(help="Flattening table JSON (default: packaged table)")] = None,
) -> None:
    """Build the registry and print coverage counts."""
    try:
        registry = build_registry(RegistryConfig(table=table))
    except (OSError, ValueError) as e:
        # ValidationError and StateParseError are both ValueErrors
        logger.error(f"Failed to build flattening registry: {e}")
        typer.echo(f"Failed to build flattening registry: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(f"declared states:      {len(registry.declared_ids)}")
    typer.echo(f"fallback states:      {len(registry.fallback_ids)}")
    typer.echo(f"declared blocks:      {len(registry.declared_block_ids)}")
    typer.echo(f"legacy variants:      {len(registry.variant_to_id)}")
    typer.echo(f"legacy block names:   {len(registry.block_name_to_id)}")
