"""jpiconfig CLI -- Configuration and dependency selection for Jenkins plugins.

Entry point for the ``jpiconfig`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    check-version -- Validate a core version and show its companion version.
    resolve       -- Show repositories and dependency sets for a build.
    developers    -- List declared developers.
    classpath     -- Compose the runtime classpath.
    info          -- Show resolved plugin configuration fields.

Usage::

    jpiconfig check-version 1.532.2
    jpiconfig resolve ./my-plugin
    jpiconfig developers ./my-plugin/jpi.yaml --format json
    jpiconfig classpath ./my-plugin
    jpiconfig -v info ./my-plugin
"""

from __future__ import annotations

import logging

import click

from jpiconfig import __version__
from jpiconfig.cli.classpath_cmd import classpath_command
from jpiconfig.cli.developers_cmd import developers_command
from jpiconfig.cli.info_cmd import info_command
from jpiconfig.cli.resolve_cmd import resolve_command
from jpiconfig.cli.version_cmd import check_version_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """jpiconfig: Configuration and dependency selection for Jenkins plugins.

    Validate core versions, list the dependency sets a plugin build
    declares, compose its runtime classpath, and inspect its developers.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
    )


# Register all subcommands
cli.add_command(check_version_command)
cli.add_command(resolve_command)
cli.add_command(developers_command)
cli.add_command(classpath_command)
cli.add_command(info_command)
