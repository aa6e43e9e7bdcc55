"""please-bundle CLI - inspect how a bundle run resolves its imports."""

import logging
import os

import click

from .commands.config import config_cmd
from .commands.packages import packages_cmd
from .commands.resolve import check_cmd
from .commands.resolve import resolve_cmd
from .logging_setup import init_json_logging

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(package_name="please-bundle")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output (debug logging, tracebacks on errors)")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSONL logs to this file (default: $PLEASE_BUNDLE_LOG_PATH if set)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_file: str | None):
    """please-bundle - resolve JavaScript modules and package entry points."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if log_file or os.environ.get("PLEASE_BUNDLE_LOG_PATH"):
        init_json_logging(log_file, "DEBUG" if verbose else None)
        logger.debug(f"Logging initialized for command: {ctx.invoked_subcommand}")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()


cli.add_command(packages_cmd)
cli.add_command(resolve_cmd)
cli.add_command(check_cmd)
cli.add_command(config_cmd)


def main():
    cli()


if __name__ == "__main__":
    main()
