"""``jpiconfig check-version <version>`` -- Validate a Jenkins core version.

Runs the version gate alone: no config file, no declarations. Prints the
ui-samples companion version for an accepted core version.

Exit Codes:
    0 -- Version accepted.
    1 -- Version malformed or older than 1.420.
"""

from __future__ import annotations

import json
import sys

import click

from jpiconfig.core.version import VersionGate
from jpiconfig.exceptions import JpiConfigError


@click.command("check-version")
@click.argument("version")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def check_version_command(version: str, output_format: str) -> None:
    """Check that VERSION is a supported Jenkins core version.

    Exit code 0 if accepted, 1 if malformed or unsupported.
    """
    try:
        result = VersionGate().validate(version)
    except JpiConfigError as exc:
        if output_format == "json":
            click.echo(json.dumps({
                "version": version,
                "supported": False,
                "error": str(exc),
            }))
        else:
            click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps({
            "version": result.version,
            "supported": True,
            "companion_version": result.companion_version,
        }))
    else:
        from jpiconfig.cli.output import print_gate_result
        print_gate_result(result.version, result.companion_version)
    sys.exit(0)
