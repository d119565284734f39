"""Platform version value type.

A ``PlatformVersion`` is a dotted sequence of numeric components with an
optional ``-QUALIFIER`` suffix, the shape used by Jenkins core releases
(``1.420``, ``1.532.2``, ``1.533-SNAPSHOT``).

Ordering rules:

- Components compare numerically, left to right.
- Missing trailing components count as zero, so ``1.420 == 1.420.0``.
- A qualified version sorts *before* the same unqualified version
  (``1.533-SNAPSHOT < 1.533``); two qualifiers compare as strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering

from jpiconfig.exceptions import MalformedVersionError

_VERSION_RE = re.compile(
    r"^(?P<numbers>\d+(?:\.\d+)*)"
    r"(?:-(?P<qualifier>[0-9A-Za-z][0-9A-Za-z\-.]*))?$"
)


def _normalize(components: tuple[int, ...]) -> tuple[int, ...]:
    """Strip trailing zero components so equal versions share one key."""
    end = len(components)
    while end > 1 and components[end - 1] == 0:
        end -= 1
    return components[:end]


@total_ordering
@dataclass(frozen=True, eq=False)
class PlatformVersion:
    """An immutable, totally ordered platform version.

    Attributes:
        raw: The version string as written by the user.
        components: Numeric components, in order.
        qualifier: Text after the first ``-``, or None.
    """

    raw: str
    components: tuple[int, ...]
    qualifier: str | None = None
    _key: tuple = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Unqualified releases rank above any qualifier of the same numbers.
        rank = (1, "") if self.qualifier is None else (0, self.qualifier)
        object.__setattr__(self, "_key", (_normalize(self.components), rank))

    @classmethod
    def parse(cls, version: str) -> PlatformVersion:
        """Parse a version string.

        Args:
            version: Version text such as ``"1.532.1"`` or ``"1.533-SNAPSHOT"``.

        Returns:
            The parsed ``PlatformVersion``.

        Raises:
            MalformedVersionError: If *version* is not a string or does not
                match the dotted-numeric format.
        """
        if not isinstance(version, str):
            raise MalformedVersionError(f"Invalid platform version: {version!r}")
        text = version.strip()
        m = _VERSION_RE.match(text)
        if not m:
            raise MalformedVersionError(f"Invalid platform version: {version!r}")
        components = tuple(int(part) for part in m.group("numbers").split("."))
        return cls(raw=text, components=components, qualifier=m.group("qualifier"))

    @classmethod
    def coerce(cls, version: str | PlatformVersion) -> PlatformVersion:
        """Return *version* unchanged if already parsed, else parse it."""
        if isinstance(version, PlatformVersion):
            return version
        return cls.parse(version)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlatformVersion):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: PlatformVersion) -> bool:
        if not isinstance(other, PlatformVersion):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"PlatformVersion({self.raw!r})"
