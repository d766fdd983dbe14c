"""Locate command - print the path of a file inside a domain."""

import click

from userdirs.commands.common import (
    CliContext,
    handle_result,
    json_option,
    make_locator,
    to_json,
)
from userdirs.lib.result import map_ok


@click.command()
@click.argument("domain")
@click.argument("name")
@json_option
@click.pass_obj
def locate(obj: CliContext, domain: str, name: str, as_json: bool) -> None:
    """Print where NAME lives in DOMAIN, creating its parent directories.

    NAME is relative to the domain directory and may contain subdirectories.

    \b
    Examples:
      userdirs locate config init.toml
      userdirs --app emacs locate data sessions/last.el
      userdirs locate cache thumbnails/a.png --json
    """
    locator = make_locator(obj)
    path = handle_result(map_ok(locator.locate_file(domain, name), str))

    if as_json:
        click.echo(to_json({"domain": domain, "name": name, "path": path}))
        return

    click.echo(path)
