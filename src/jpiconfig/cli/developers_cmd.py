"""``jpiconfig developers <config>`` -- List declared developers."""

from __future__ import annotations

import json
import sys

import click

from jpiconfig.cli.loading import load_or_exit


@click.command("developers")
@click.argument("config", type=click.Path(exists=True))
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def developers_command(config: str, output_format: str) -> None:
    """List the developers declared in CONFIG."""
    extension = load_or_exit(config)
    developers = extension.developers.all()

    if output_format == "json":
        click.echo(json.dumps([d.to_dict() for d in developers.values()], indent=2))
    else:
        from jpiconfig.cli.output import print_developers
        print_developers(developers)
    sys.exit(0)
