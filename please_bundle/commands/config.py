"""Show the effective settings."""

import click
import yaml

from ..console import console
from ..errors import SettingsError
from ..paths import get_cli_settings_paths
from ..utils.error_format import escape_markup
from .common import exit_with_error
from .common import is_verbose
from .common import load_config


@click.command(name="config")
@click.pass_context
def config_cmd(ctx: click.Context):
    """Show the merged settings and the files they come from."""
    try:
        config = load_config()
    except SettingsError as e:
        exit_with_error(e, is_verbose(ctx))

    console.print("[bold]Settings files:[/bold]")
    for scope, path in get_cli_settings_paths().in_order():
        status = "[green]found[/green]" if path.exists() else "[dim]not found[/dim]"
        console.print(f"  {scope}: {escape_markup(path)} ({status})", soft_wrap=True)

    console.print()
    console.print("[bold]Effective configuration:[/bold]")
    dumped = yaml.safe_dump(config.model_dump(mode="json"), default_flow_style=False, sort_keys=False)
    console.print(escape_markup(dumped), soft_wrap=True)
