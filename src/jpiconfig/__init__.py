"""jpiconfig: configuration and dependency selection for Jenkins plugin builds."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
