"""Status command - show which resolver is active."""

import sys

import click

from userdirs.commands.common import (
    CliContext,
    echo_key_value,
    echo_section,
    json_option,
    make_locator,
    to_json,
)


@click.command()
@json_option
@click.pass_obj
def status(obj: CliContext, as_json: bool) -> None:
    """Show the application name, platform family and domain count.

    \b
    Examples:
      userdirs status
      userdirs --platform win32 status --json
    """
    locator = make_locator(obj)
    resolver = locator.resolver
    mapping = locator.domains()
    platform = obj.platform or sys.platform

    if as_json:
        click.echo(
            to_json(
                {
                    "app_name": resolver.app_name,
                    "platform": platform,
                    "family": resolver.family,
                    "domains": sorted(mapping),
                }
            )
        )
        return

    click.echo("userdirs Status")
    click.echo("=" * 40)
    echo_key_value("Application", resolver.app_name)
    echo_key_value("Platform", platform)
    echo_key_value("Family", resolver.family)

    echo_section(f"Domains ({len(mapping)})")
    for domain in sorted(mapping):
        click.echo(f"  {domain}")

    click.echo()
