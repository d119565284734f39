"""Id-keyed developer registry.

Entries are keyed by developer id. Setting an id that is already present
replaces the stored record outright; fields are never merged. There is no
removal operation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from types import MappingProxyType
from typing import Mapping

from jpiconfig.core.developers.models import Developer, DeveloperBuilder
from jpiconfig.exceptions import InvalidDeveloperError

logger = logging.getLogger(__name__)


class DeveloperRegistry:
    """Ordered mapping of developer id to ``Developer``.

    Usage::

        registry = DeveloperRegistry()

        def alice(dev):
            dev.id = "alice"
            dev.name = "Alice"

        registry.developer(alice)
        registry.get("alice").name   # "Alice"

    Args:
        logger: Passed to every ``DeveloperBuilder`` the registry creates.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._developers: dict[str, Developer] = {}

    def set(self, dev_id: str, developer: Developer) -> None:
        """Insert or replace the entry for *dev_id*.

        Raises:
            InvalidDeveloperError: If *dev_id* is empty.
        """
        if not dev_id:
            raise InvalidDeveloperError("Developer id must not be empty")
        if dev_id in self._developers:
            logger.warning("Developer %r declared more than once; keeping the last", dev_id)
        self._developers[dev_id] = developer

    def get(self, dev_id: str) -> Developer | None:
        """Return the developer stored under *dev_id*, or None."""
        return self._developers.get(dev_id)

    def for_each(self, fn: Callable[[Developer], object]) -> None:
        """Call *fn* once for every stored developer."""
        for developer in list(self._developers.values()):
            fn(developer)

    def all(self) -> Mapping[str, Developer]:
        """Read-only view of every entry, keyed by id."""
        return MappingProxyType(self._developers)

    def developer(self, configure: Callable[[DeveloperBuilder], object]) -> Developer:
        """Build one developer through *configure* and store it.

        A fresh ``DeveloperBuilder`` is passed to *configure*; once it
        returns, the builder is finalised and stored under its id.

        Returns:
            The stored ``Developer``.

        Raises:
            InvalidDeveloperError: If *configure* left the id unassigned.
        """
        builder = DeveloperBuilder(self._logger)
        configure(builder)
        developer = builder.build()
        self.set(developer.id, developer)
        return developer

    def __len__(self) -> int:
        return len(self._developers)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._developers))

    def __contains__(self, dev_id: object) -> bool:
        return dev_id in self._developers

    def __repr__(self) -> str:
        return f"DeveloperRegistry({list(self._developers)!r})"
