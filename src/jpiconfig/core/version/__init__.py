"""Platform version parsing and the compatibility gate."""

from jpiconfig.core.version.models import PlatformVersion
from jpiconfig.core.version.gate import (
    COMPANION_SWITCH_VERSION,
    MAX_UNSUPPORTED_VERSION,
    SWITCHED_COMPANION_VERSION,
    GateResult,
    VersionGate,
    companion_version_for,
    default_repositories,
    is_supported,
)

__all__ = [
    "PlatformVersion",
    "GateResult",
    "VersionGate",
    "is_supported",
    "companion_version_for",
    "default_repositories",
    "MAX_UNSUPPORTED_VERSION",
    "COMPANION_SWITCH_VERSION",
    "SWITCHED_COMPANION_VERSION",
]
