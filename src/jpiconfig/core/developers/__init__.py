"""Developer records and the id-keyed registry that holds them."""

from jpiconfig.core.developers.models import DEVELOPER_FIELDS, Developer, DeveloperBuilder
from jpiconfig.core.developers.registry import DeveloperRegistry

__all__ = [
    "DEVELOPER_FIELDS",
    "Developer",
    "DeveloperBuilder",
    "DeveloperRegistry",
]
