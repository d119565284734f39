"""``jpiconfig info <config>`` -- Show resolved plugin configuration fields."""

from __future__ import annotations

import json
import sys

import click

from jpiconfig.cli.loading import load_or_exit


@click.command("info")
@click.argument("config", type=click.Path(exists=True))
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def info_command(config: str, output_format: str) -> None:
    """Show names, URLs, SCM connections and directories from CONFIG.

    Unset fields show their defaults.
    """
    extension = load_or_exit(config)
    values = extension.to_dict()

    if output_format == "json":
        click.echo(json.dumps(values, indent=2))
    else:
        from jpiconfig.cli.output import print_info
        print_info(values)
    sys.exit(0)
