"""Runtime classpath composition by ordered set subtraction.

A plugin's runtime classpath is its main source set's resolved runtime
classpath minus everything the host already provides (``providedRuntime``)
and minus the secondary-language runtime (``groovy``). Order of the
remaining entries follows the base resolution.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Sequence


class ClasspathSet:
    """An ordered, duplicate-free collection of artifact references.

    Entries may be any hashable value (paths, file names, coordinates).
    Duplicates in the input keep their first position.

    Instances are treated as immutable: every operation returns a new set.
    Two sets are equal when they hold the same entries in the same order.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[Hashable] = ()) -> None:
        self._entries: tuple[Hashable, ...] = tuple(dict.fromkeys(entries))

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClasspathSet):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __sub__(self, other: Iterable[Hashable]) -> ClasspathSet:
        removed = set(other)
        return ClasspathSet(e for e in self._entries if e not in removed)

    def __repr__(self) -> str:
        return f"ClasspathSet({list(self._entries)!r})"

    def minus(self, other: Iterable[Hashable]) -> ClasspathSet:
        """Alias for ``self - other``."""
        return self - other

    def to_list(self) -> list[Hashable]:
        return list(self._entries)


class ClasspathComposer:
    """Derive a classpath by subtracting exclusion sets from a base set."""

    def compose(
        self,
        base: Iterable[Hashable],
        exclusions: Sequence[Iterable[Hashable]] = (),
    ) -> ClasspathSet:
        """Return *base* minus every entry found in any exclusion set.

        The result does not depend on the order of *exclusions*, and
        neither *base* nor the exclusions are modified.

        Args:
            base: The resolved base classpath.
            exclusions: Sets whose entries must not appear in the result.

        Returns:
            A new ``ClasspathSet`` in the base set's order.
        """
        result = base if isinstance(base, ClasspathSet) else ClasspathSet(base)
        for excluded in exclusions:
            result = result - excluded
        if result is base:
            return ClasspathSet(result)
        return result

    def runtime_classpath(
        self,
        base: Iterable[Hashable],
        provided: Iterable[Hashable],
        secondary_runtime: Iterable[Hashable],
    ) -> ClasspathSet:
        """Compose the plugin runtime classpath from its two fixed exclusions."""
        return self.compose(base, [provided, secondary_runtime])


def compose(
    base: Iterable[Hashable],
    exclusions: Sequence[Iterable[Hashable]] = (),
) -> ClasspathSet:
    """Module-level shortcut for ``ClasspathComposer().compose``."""
    return ClasspathComposer().compose(base, exclusions)
