"""Zero-argument constructors.

Every function here returns a supplier: a callable taking no arguments. The
suppliers hold no state beyond what they close over, except the random
supplier, which advances its generator on each call.
"""

from typing import Optional
import numpy as np

from crazylambdas.core.config import settings
from crazylambdas.core.types import (
    INT32_MAX,
    INT32_MIN,
    IntUnaryOperator,
    Supplier,
)

__all__ = [
    "hello_supplier",
    "random_int_supplier",
    "n_multiply_function_supplier",
    "tricky_well_done_supplier",
    "default_generator",
]


def default_generator() -> np.random.Generator:
    """Create a random generator seeded from ``settings.random_seed``.

    A seed of ``None`` draws fresh entropy from the OS.
    """
    return np.random.default_rng(settings.random_seed)


def hello_supplier() -> Supplier[str]:
    """Return a supplier of the string ``"Hello"``."""
    return lambda: "Hello"


def random_int_supplier(rng: Optional[np.random.Generator] = None) -> Supplier[int]:
    """Return a supplier of uniformly distributed 32-bit signed integers.

    Args:
        rng: Generator to draw from. Defaults to :func:`default_generator`.
            The generator is shared by every call of the returned supplier.

    Returns:
        A supplier whose values lie in ``[-2**31, 2**31 - 1]``.
    """
    rng = rng if rng is not None else default_generator()

    def supplier() -> int:
        return int(rng.integers(INT32_MIN, INT32_MAX, endpoint=True))

    return supplier


def n_multiply_function_supplier(n: int) -> Supplier[IntUnaryOperator]:
    """Return a supplier of a function that multiplies its argument by ``n``.

    Example:
        >>> multiply_by_five = n_multiply_function_supplier(5)()
        >>> multiply_by_five(11)
        55
    """
    return lambda: lambda x: n * x


def tricky_well_done_supplier() -> Supplier[Supplier[Supplier[str]]]:
    return lambda: lambda: lambda: "WELL DONE!"
