"""jpiconfig exception hierarchy.

All public exceptions inherit from JpiConfigError, giving callers a single
base class to catch when they want to handle any jpiconfig-specific failure
without swallowing unrelated errors.
"""


class JpiConfigError(Exception):
    """Base exception for all jpiconfig errors."""


class MalformedVersionError(JpiConfigError, ValueError):
    """Raised when a platform version string cannot be parsed.

    Covers empty strings, non-numeric components, and stray characters
    that do not form a dotted version with an optional qualifier.
    """


class UnsupportedPlatformVersionError(JpiConfigError):
    """Raised when the declared platform version is too old.

    Fatal for the configuration pass: the version is a one-time user
    decision, so callers must not retry with the same input.
    """


class InvalidDeveloperError(JpiConfigError, ValueError):
    """Raised when a developer record has no usable id."""


class ConfigError(JpiConfigError):
    """Raised for configuration file or project configuration problems.

    Covers missing or unreadable files, invalid YAML, documents of the
    wrong shape, and lookups of configurations the project does not define.
    """
