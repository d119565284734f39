"""Developer records and the builder used by configuration callbacks.

Configuration code never constructs a ``Developer`` directly. It receives
a mutable ``DeveloperBuilder``, assigns fields, and the registry finalises
the builder into an immutable record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from jpiconfig.exceptions import InvalidDeveloperError

# Fields a builder accepts through ``update``; anything else becomes a property.
DEVELOPER_FIELDS = (
    "id",
    "name",
    "email",
    "url",
    "organization",
    "organization_url",
    "roles",
    "timezone",
)


@dataclass(frozen=True)
class Developer:
    """A plugin contributor, as listed in the POM ``<developers>`` section.

    Attributes:
        id: Unique, non-empty key (usually the SCM login).
        name: Display name.
        email: Contact address.
        url: Personal home page.
        organization: Employer or project organisation.
        organization_url: Organisation home page.
        roles: Free-form role names (``"maintainer"``, ``"developer"``).
        timezone: Time zone id or UTC offset.
        properties: Any other declared key/value pairs.
    """

    id: str
    name: str | None = None
    email: str | None = None
    url: str | None = None
    organization: str | None = None
    organization_url: str | None = None
    roles: tuple[str, ...] = ()
    timezone: str | None = None
    properties: Mapping[str, str] = field(default_factory=dict, hash=False)

    def to_dict(self) -> dict[str, Any]:
        entry: dict[str, Any] = {"id": self.id}
        for name in DEVELOPER_FIELDS[1:]:
            value = getattr(self, name)
            if value:
                entry[name] = list(value) if name == "roles" else value
        if self.properties:
            entry["properties"] = dict(self.properties)
        return entry


class DeveloperBuilder:
    """Mutable scaffold handed to a ``developer(...)`` callback.

    Set attributes directly (``builder.id = "alice"``) or use ``update`` with
    a mapping. ``build`` freezes the result.

    Args:
        logger: Sink for diagnostics. Never inspected by the registry.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.id: str | None = None
        self.name: str | None = None
        self.email: str | None = None
        self.url: str | None = None
        self.organization: str | None = None
        self.organization_url: str | None = None
        self.roles: list[str] = []
        self.timezone: str | None = None
        self.properties: dict[str, str] = {}

    def role(self, *roles: str) -> DeveloperBuilder:
        """Append one or more roles."""
        self.roles.extend(roles)
        return self

    def add_property(self, key: str, value: str) -> DeveloperBuilder:
        """Record an extra key/value pair."""
        self.properties[key] = value
        return self

    def update(self, values: Mapping[str, Any]) -> DeveloperBuilder:
        """Assign several fields at once.

        Keys outside the known developer fields are kept as properties.
        """
        for key, value in values.items():
            if key in DEVELOPER_FIELDS:
                if key == "id" and value is not None:
                    value = str(value)
                elif key == "roles":
                    value = [value] if isinstance(value, str) else list(value or [])
                setattr(self, key, value)
            else:
                self.logger.debug("Storing unknown developer field %r as a property", key)
                self.properties[str(key)] = str(value)
        return self

    def build(self) -> Developer:
        """Finalise into an immutable ``Developer``.

        Raises:
            InvalidDeveloperError: If ``id`` was never assigned or is blank.
        """
        dev_id = self.id.strip() if isinstance(self.id, str) else ""
        if not dev_id:
            raise InvalidDeveloperError(
                "Developer id must be assigned a non-empty value"
            )
        return Developer(
            id=dev_id,
            name=self.name,
            email=self.email,
            url=self.url,
            organization=self.organization,
            organization_url=self.organization_url,
            roles=tuple(self.roles),
            timezone=self.timezone,
            properties=MappingProxyType(dict(self.properties)),
        )
