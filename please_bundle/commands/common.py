"""Options and error handling shared by the CLI commands."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any
from typing import NoReturn

import click

from ..console import console
from ..paths import create_app_settings
from ..settings import BundleConfig
from ..ui.error_display import display_resolution_error
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message


def registry_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options that decide which manifests are scanned."""
    func = click.option(
        "--on-duplicate",
        type=click.Choice(["replace", "error"]),
        default=None,
        help="What to do when two packages export the same name (default from settings: replace)",
    )(func)
    func = click.option(
        "--workspace",
        "-w",
        "workspaces",
        multiple=True,
        type=click.Path(file_okay=False),
        help="Directory scanned recursively for package.json files",
    )(func)
    func = click.option(
        "--package",
        "-p",
        "packages",
        multiple=True,
        type=click.Path(file_okay=False),
        help="Package directory containing a package.json",
    )(func)
    return func


def load_config(**overrides: Any) -> BundleConfig:
    """Effective config: settings files, overridden by CLI values."""
    return create_app_settings().get_config(overrides)


def is_verbose(ctx: click.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("verbose"))


def exit_with_error(error: BaseException, verbose: bool = False) -> NoReturn:
    """Render an error and exit with status 1."""
    if not isinstance(error, Exception) or not display_resolution_error(console, error, verbose=verbose):
        console.print(f"[red]Error:[/red] {escape_markup(format_error_message(error))}")
    sys.exit(1)
