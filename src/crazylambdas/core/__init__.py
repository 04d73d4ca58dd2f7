"""Core definitions shared by the functional and execution modules."""

from crazylambdas.core.config import Settings, settings
from crazylambdas.core.errors import ActionError, ParseError

__all__ = [
    "Settings",
    "settings",
    "ActionError",
    "ParseError",
]
