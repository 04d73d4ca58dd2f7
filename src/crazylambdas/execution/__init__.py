"""Thread-spawning helpers for deferred and detached execution."""

from crazylambdas.execution.threads import (
    ActionThread,
    ThreadSpawningConsumer,
    new_thread_runnable_consumer,
    runnable_to_thread_supplier_function,
    running_thread_supplier,
)

__all__ = [
    "ActionThread",
    "ThreadSpawningConsumer",
    "running_thread_supplier",
    "new_thread_runnable_consumer",
    "runnable_to_thread_supplier_function",
]
