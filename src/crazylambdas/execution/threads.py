"""Deferred and detached thread execution.

Work is captured first and run later. :func:`running_thread_supplier` takes an
action and returns an activator; nothing runs until the activator is called,
and each call starts a fresh native thread and hands it back for joining.
:func:`new_thread_runnable_consumer` is the fire-and-forget variant.

Threads are never pooled or reused. An exception raised by an action stays
inside its thread: it is wrapped in :class:`~crazylambdas.core.errors.ActionError`,
stored on the thread and logged, and the caller that spawned the thread never
sees it.

Example:
    Collect a result from a deferred thread::

        import queue

        results = queue.Queue()
        activate = running_thread_supplier(lambda: results.put(25))
        # nothing has run yet
        thread = activate()
        thread.join()
        assert results.get_nowait() == 25
"""

import itertools
import threading
import time
from typing import Callable, List, Optional

from crazylambdas.core.config import settings
from crazylambdas.core.errors import ActionError
from crazylambdas.core.types import Action, Supplier
from crazylambdas.logger.logger import logger

__all__ = [
    "ActionThread",
    "ThreadSpawningConsumer",
    "running_thread_supplier",
    "new_thread_runnable_consumer",
    "runnable_to_thread_supplier_function",
]

_thread_counter = itertools.count(1)


def _require_callable(action: Action) -> Action:
    if action is None or not callable(action):
        raise TypeError(f"action must be a zero-argument callable, got {action!r}.")
    return action


class ActionThread(threading.Thread):
    """A native thread running a single action.

    Attributes:
        error: The ``ActionError`` raised while running the action, or
            ``None``. Read it after :meth:`join` has returned.
    """

    def __init__(self, action: Action):
        action = _require_callable(action)
        super().__init__(
            name=f"{settings.thread_name_prefix}-{next(_thread_counter)}",
            daemon=settings.daemon_threads,
        )
        self._action = action
        self.error: Optional[ActionError] = None

    def run(self) -> None:
        logger.debug(f"Thread '{self.name}' started.")
        try:
            self._action()
        except Exception as exc:
            self.error = ActionError(self.name, exc)
            logger.error(str(self.error), exc_info=True)
        finally:
            del self._action

    @property
    def failed(self) -> bool:
        return self.error is not None


def running_thread_supplier(action: Action) -> Supplier[ActionThread]:
    """Capture an action and return an activator that runs it on a new thread.

    Args:
        action: Zero-argument callable. Its return value is ignored.

    Returns:
        A zero-argument activator. Each call creates and starts a new
        :class:`ActionThread` for ``action`` and returns it.

    Raises:
        TypeError: If ``action`` is ``None`` or not callable.
    """
    action = _require_callable(action)

    def activate() -> ActionThread:
        thread = ActionThread(action)
        thread.start()
        return thread

    return activate


class ThreadSpawningConsumer:
    """Callable that runs each action it receives on its own detached thread.

    Calling the consumer returns ``None`` and does not wait. The consumer
    remembers the threads it started so they can be awaited with :meth:`join`.
    Finished threads are forgotten on the next call, so a consumer that is
    never joined only holds the threads still running.
    """

    def __init__(self):
        self._threads: List[ActionThread] = []
        self._lock = threading.Lock()

    def __call__(self, action: Action) -> None:
        thread = ActionThread(action)
        with self._lock:
            # Started under the lock so pruning never sees an unstarted thread
            self._threads = [t for t in self._threads if t.is_alive()]
            self._threads.append(thread)
            thread.start()

    @property
    def pending(self) -> int:
        """Number of spawned threads still running."""
        with self._lock:
            return sum(1 for thread in self._threads if thread.is_alive())

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for every thread spawned so far.

        Args:
            timeout: Maximum seconds to wait in total. ``None`` waits forever.

        Returns:
            True if all threads finished, False if the timeout expired first.
        """
        with self._lock:
            threads = list(self._threads)

        deadline = None if timeout is None else time.monotonic() + timeout
        for thread in threads:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            thread.join(remaining)

        with self._lock:
            self._threads = [t for t in self._threads if t.is_alive()]
            return not self._threads


def new_thread_runnable_consumer() -> ThreadSpawningConsumer:
    return ThreadSpawningConsumer()


def runnable_to_thread_supplier_function() -> Callable[[Action], Supplier[ActionThread]]:
    """Return :func:`running_thread_supplier` as a plain action-to-activator function."""
    return running_thread_supplier
