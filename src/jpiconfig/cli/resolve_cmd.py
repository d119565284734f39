"""``jpiconfig resolve <config>`` -- Show repositories and dependency sets.

Loads the build description, which sets the core version and so runs the
version gate and dependency-set selection, then prints what was declared.

Exit Codes:
    0 -- Declarations printed.
    1 -- Config unreadable or core version rejected.
"""

from __future__ import annotations

import json
import sys

import click

from jpiconfig.cli.loading import load_or_exit


@click.command("resolve")
@click.argument("config", type=click.Path(exists=True))
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def resolve_command(config: str, output_format: str) -> None:
    """Resolve the dependency sets declared by CONFIG.

    CONFIG is a jpi.yaml file or a directory containing one.
    """
    extension = load_or_exit(config)

    if output_format == "json":
        data = extension.graph.to_dict()
        data["core_version"] = extension.core_version
        data["companion_version"] = extension.companion_version
        click.echo(json.dumps(data, indent=2))
    else:
        from jpiconfig.cli.output import print_resolution
        print_resolution(
            extension.core_version,
            extension.graph.repositories,
            extension.dependency_sets,
        )
    sys.exit(0)
