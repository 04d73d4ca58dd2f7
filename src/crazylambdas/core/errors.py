"""Exception types raised by crazylambdas.

Two kinds of failure exist:

- ``ParseError``: a string handed to the string-to-int converter is not an
  integer literal. Raised synchronously to the caller.
- ``ActionError``: a caller-supplied action failed inside a spawned thread.
  Never raised to the caller that spawned the thread; it is recorded on the
  thread handle and logged.
"""

from typing import Optional

__all__ = ["ParseError", "ActionError"]


class ParseError(ValueError):
    """Raised when a string cannot be parsed as an integer.

    Attributes:
        value: The offending input.
    """

    def __init__(self, value: object, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Cannot parse {value!r} as an integer.")


class ActionError(RuntimeError):
    """Wraps an exception raised by an action running in a spawned thread.

    The original exception is available as ``__cause__``.

    Attributes:
        thread_name: Name of the thread the action ran in.
    """

    def __init__(self, thread_name: str, cause: BaseException):
        self.thread_name = thread_name
        super().__init__(
            f"Action in thread '{thread_name}' failed: "
            f"{type(cause).__name__}: {cause}"
        )
        self.__cause__ = cause
