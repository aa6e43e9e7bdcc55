"""Resolve specifiers and validate bundle inputs."""

import sys

import click

from ..bundler import entry_identities
from ..console import console
from ..errors import ResolutionError
from ..identity import FileIdentity
from ..paths import create_registry
from ..paths import create_resolver
from ..utils.error_format import escape_markup
from .common import exit_with_error
from .common import is_verbose
from .common import load_config
from .common import registry_options


@click.command(name="resolve")
@click.argument("specifier")
@click.option(
    "--from",
    "base",
    type=click.Path(dir_okay=False),
    default=None,
    help="Importing file (default: first configured entry)",
)
@registry_options
@click.pass_context
def resolve_cmd(ctx: click.Context, specifier: str, base: str | None, packages, workspaces, on_duplicate):
    """Resolve SPECIFIER as if it were imported from a file."""
    try:
        config = load_config(packages=list(packages), workspaces=list(workspaces), on_duplicate=on_duplicate)

        if base is None:
            if not config.entries:
                console.print("[red]Error:[/red] No importing file: pass --from or configure entries")
                sys.exit(1)
            base = str(config.entries[0])

        base_identity: FileIdentity = next(iter(entry_identities([base]).values()))
        resolver = create_resolver(config)
        identity, layer = resolver.resolve_with_layer(base_identity, specifier)
    except (ResolutionError, OSError) as e:
        exit_with_error(e, is_verbose(ctx))

    console.print(f"{escape_markup(identity)} [dim]({layer})[/dim]", soft_wrap=True)


@click.command(name="check")
@click.option("--entry", "-e", "entries", multiple=True, type=click.Path(dir_okay=False), help="Entry file")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Bundle output path")
@click.option("--source-map", type=click.Path(dir_okay=False), default=None, help="Source map output path")
@registry_options
@click.pass_context
def check_cmd(ctx: click.Context, entries, output, source_map, packages, workspaces, on_duplicate):
    """Check that packages and entry files are ready for a bundle run."""
    try:
        config = load_config(
            entries=list(entries),
            output=output,
            source_map=source_map,
            packages=list(packages),
            workspaces=list(workspaces),
            on_duplicate=on_duplicate,
        )
        if not config.entries:
            console.print("[red]Error:[/red] At least one entry file is required")
            sys.exit(1)

        registry = create_registry(config)
        resolved_entries = entry_identities(config.entries)
    except (ResolutionError, OSError) as e:
        exit_with_error(e, is_verbose(ctx))

    console.print(f"[green]✓[/green] {len(registry)} package exports registered")
    for name, identity in resolved_entries.items():
        console.print(f"[green]✓[/green] entry {escape_markup(name)}: {escape_markup(identity)}", soft_wrap=True)
    console.print(f"[dim]Output: {escape_markup(config.output)}[/dim]", soft_wrap=True)
    if config.source_map is not None:
        console.print(f"[dim]Source map: {escape_markup(config.source_map)}[/dim]", soft_wrap=True)
