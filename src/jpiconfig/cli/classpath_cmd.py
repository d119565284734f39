"""``jpiconfig classpath <config>`` -- Compose the plugin runtime classpath.

Takes ``runtimeClasspath`` from the project's configurations and removes
every entry of ``providedRuntime`` and ``groovy``.

Exit Codes:
    0 -- Classpath printed.
    1 -- Config unreadable or a configuration is missing.
"""

from __future__ import annotations

import json
import sys

import click

from jpiconfig.cli.loading import load_or_exit
from jpiconfig.exceptions import ConfigError
from jpiconfig.extension import RUNTIME_CLASSPATH_CONFIGURATION


@click.command("classpath")
@click.argument("config", type=click.Path(exists=True))
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def classpath_command(config: str, output_format: str) -> None:
    """Print the runtime classpath derived from CONFIG."""
    extension = load_or_exit(config)
    try:
        classpath = extension.runtime_classpath()
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps([str(entry) for entry in classpath], indent=2))
    else:
        from jpiconfig.cli.output import print_classpath
        base = extension.project.configuration(RUNTIME_CLASSPATH_CONFIGURATION)
        print_classpath(classpath, len(base))
    sys.exit(0)
