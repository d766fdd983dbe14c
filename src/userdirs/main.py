"""userdirs CLI entry point."""

import click

from . import __version__
from .commands import domains, locate, status
from .commands.common import DEFAULT_APP_NAME, CliContext
from .lib.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="userdirs")
@click.option(
    "--app",
    "-a",
    "app_name",
    envvar="USERDIRS_APP",
    default=DEFAULT_APP_NAME,
    show_default=True,
    help="Application name appended to config/data/cache/runtime directories",
)
@click.option(
    "--platform",
    envvar="USERDIRS_PLATFORM",
    default=None,
    help=(
        "Platform tag to resolve for (default: this machine's). Paths are checked "
        "with this machine's rules: drive-letter values like %APPDATA% count as "
        "unset on a non-Windows host, so home defaults are shown instead"
    ),
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--log-json", is_flag=True, help="Emit logs as JSON lines")
@click.pass_context
def cli(
    ctx: click.Context,
    app_name: str,
    platform: str | None,
    verbose: bool,
    log_json: bool,
) -> None:
    """userdirs - Per-user config, data, cache and document locations."""
    configure_logging(verbose=verbose, log_json=log_json)
    ctx.obj = CliContext(app_name=app_name, platform=platform)


# Register subcommands
cli.add_command(domains)
cli.add_command(locate)
cli.add_command(status)


if __name__ == "__main__":
    cli()
