"""List the packages a bundle run would register."""

import click
from rich.table import Table

from ..console import console
from ..errors import ResolutionError
from ..paths import create_registry
from ..utils.error_format import escape_markup
from .common import exit_with_error
from .common import is_verbose
from .common import load_config
from .common import registry_options


@click.command(name="packages")
@registry_options
@click.pass_context
def packages_cmd(ctx: click.Context, packages, workspaces, on_duplicate):
    """Scan package manifests and list every exported name."""
    try:
        config = load_config(packages=list(packages), workspaces=list(workspaces), on_duplicate=on_duplicate)
        registry = create_registry(config)
    except (ResolutionError, OSError) as e:
        exit_with_error(e, is_verbose(ctx))

    if not len(registry):
        console.print("[dim]No packages registered.[/dim]")
        console.print("[dim]Add package directories with --package or in .please-bundle/settings.yaml[/dim]")
        return

    table = Table(title="Registered Packages", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Entry Point", style="green", overflow="fold")
    table.add_column("Manifest", style="dim", overflow="fold")

    for entry in registry.entries():
        table.add_row(
            escape_markup(entry.name),
            escape_markup(entry.identity),
            escape_markup(entry.manifest_path),
        )

    console.print(table)
    console.print(f"\n[dim]{len(registry)} exported names[/dim]")
