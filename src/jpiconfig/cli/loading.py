"""Shared config loading for CLI commands.

Every command that reads a build description goes through
``load_or_exit`` so configuration and version errors produce the same
one-line message and exit code.
"""

from __future__ import annotations

import sys

import click

from jpiconfig.config import load_config
from jpiconfig.exceptions import JpiConfigError
from jpiconfig.extension import PluginExtension


def load_or_exit(path: str) -> PluginExtension:
    """Load *path*, or print the error and exit with status 1."""
    try:
        return load_config(path)
    except JpiConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
