"""Domains command - list every domain and its directory."""

import click

from userdirs.commands.common import CliContext, json_option, make_locator, to_json


@click.command()
@json_option
@click.pass_obj
def domains(obj: CliContext, as_json: bool) -> None:
    """List the domains defined on this platform and their directories.

    Directories are resolved, not created.

    \b
    Examples:
      userdirs domains
      userdirs --app emacs domains --json
    """
    locator = make_locator(obj)
    mapping = locator.domains()

    if as_json:
        click.echo(to_json(dict(mapping)))
        return

    width = max((len(domain) for domain in mapping), default=0)
    for domain, directory in sorted(mapping.items()):
        click.echo(f"{domain:<{width}}  {directory}")
