"""Rich output formatting helpers for the jpiconfig CLI.

Tables and panels for version checks, repositories, dependency sets,
developers, classpaths and resolved configuration fields.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jpiconfig.core.classpath import ClasspathSet
from jpiconfig.core.dependency import DependencySet, Repository
from jpiconfig.core.developers import Developer

_BUCKET_STYLES: dict[str, str] = {
    "core": "bold cyan",
    "war": "magenta",
    "test": "yellow",
}

console = Console()


def bucket_style(bucket: str) -> str:
    """Return the Rich style string for a configuration bucket."""
    return _BUCKET_STYLES.get(bucket, "white")


def print_gate_result(version: str, companion_version: str) -> None:
    """Print an accepted core version and its companion version."""
    header = Text.assemble(
        ("Core: ", "bold"), (version, ""),
        ("  ui-samples: ", "bold"), (companion_version, "green"),
    )
    console.print(Panel(header, title="Version Check"))


def print_resolution(
    core_version: str | None,
    repositories: Iterable[Repository],
    dependency_sets: Iterable[DependencySet],
) -> None:
    """Print declared repositories and dependency sets.

    Args:
        core_version: The accepted core version, or None if unset.
        repositories: Repositories in declaration order.
        dependency_sets: Dependency sets in registration order.
    """
    if core_version is None:
        console.print("[dim]No core version configured; nothing declared.[/dim]")
        return

    console.print(
        Panel(f"[bold green]Jenkins core {core_version}[/bold green]",
              title="Dependency Resolution")
    )

    repo_table = Table(title="Repositories", show_header=True, header_style="bold")
    repo_table.add_column("Name", style="bold")
    repo_table.add_column("URL")
    for repo in repositories:
        repo_table.add_row(repo.name, repo.url)
    console.print(repo_table)

    dep_table = Table(title="Dependency Sets", show_header=True, header_style="bold")
    dep_table.add_column("Bucket", justify="center")
    dep_table.add_column("Artifact")
    dep_table.add_column("Transitive", justify="center")
    for dependency_set in dependency_sets:
        bucket = dependency_set.bucket.value
        for coordinate in dependency_set.coordinates:
            dep_table.add_row(
                Text(bucket, style=bucket_style(bucket)),
                coordinate.notation,
                "yes" if coordinate.transitive else Text("no", style="dim"),
            )
    console.print(dep_table)


def print_developers(developers: Mapping[str, Developer]) -> None:
    """Print the developer registry as a table."""
    if not developers:
        console.print("[dim]No developers declared.[/dim]")
        return

    table = Table(title="Developers", show_header=True, header_style="bold")
    table.add_column("Id", style="bold")
    table.add_column("Name")
    table.add_column("Email", style="dim")
    table.add_column("Roles")
    for dev_id, dev in developers.items():
        table.add_row(dev_id, dev.name or "-", dev.email or "-", ", ".join(dev.roles) or "-")
    console.print(table)


def print_classpath(classpath: ClasspathSet, base_size: int) -> None:
    """Print a composed classpath and how many base entries it dropped."""
    table = Table(title="Runtime Classpath", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Entry")
    for index, entry in enumerate(classpath, start=1):
        table.add_row(str(index), str(entry))
    console.print(table)
    console.print(
        f"[bold]{len(classpath)}[/bold] entries kept | "
        f"{base_size - len(classpath)} excluded"
    )


def print_info(values: Mapping[str, Any]) -> None:
    """Print resolved extension fields as a two-column table."""
    table = Table(title="Plugin Configuration", show_header=True, header_style="bold")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for name, value in values.items():
        shown = Text("-", style="dim") if value in (None, "") else str(value)
        table.add_row(name, shown)
    console.print(table)

