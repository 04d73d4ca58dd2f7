"""Integer operators and higher-order combinators.

Note:
    Python integers are unbounded, so the square and sum operators never
    overflow, and the bounded random function accepts a bound of any size.
    Inputs are not narrowed to a fixed width.
"""

from typing import Callable, Optional
import numpy as np
from pydantic import validate_call

from crazylambdas.core.types import (
    IntBinaryOperator,
    IntPredicate,
    IntUnaryOperator,
    INT64_MAX,
    PositiveInt,
)
from crazylambdas.functional.suppliers import default_generator

__all__ = [
    "bounded_random_int_function",
    "int_square_operation",
    "long_sum_operation",
    "function_to_conditional_function",
]


def bounded_random_int_function(
    rng: Optional[np.random.Generator] = None,
) -> IntUnaryOperator:
    """Return a function mapping a bound to a random integer below it.

    Args:
        rng: Generator to draw from. Defaults to
            :func:`~crazylambdas.functional.suppliers.default_generator`.

    Returns:
        A function ``bound -> r`` with ``0 <= r < bound``. It raises
        ``ValueError`` (a pydantic ``ValidationError``) for a bound that is
        not a positive integer.
    """
    rng = rng if rng is not None else default_generator()

    @validate_call
    def bounded(bound: PositiveInt) -> int:
        if bound <= INT64_MAX:
            return int(rng.integers(0, bound))
        return _random_below(rng, bound)

    return bounded


def _random_below(rng: np.random.Generator, bound: int) -> int:
    """Uniform draw from ``[0, bound)`` for bounds past the int64 range.

    Draws ``bound.bit_length()`` random bits and rejects values at or above
    ``bound``. Each draw is accepted with probability above one half.
    """
    n_bits = bound.bit_length()
    n_bytes = (n_bits + 7) // 8
    while True:
        value = int.from_bytes(rng.bytes(n_bytes), "little") >> (8 * n_bytes - n_bits)
        if value < bound:
            return value


def int_square_operation() -> IntUnaryOperator:
    return lambda x: x * x


def long_sum_operation() -> IntBinaryOperator:
    return lambda a, b: a + b


def function_to_conditional_function() -> Callable[
    [IntUnaryOperator, IntPredicate], IntUnaryOperator
]:
    """Return a combinator that applies an operator only where a guard holds.

    The combinator takes ``(operator, guard)`` and returns a function that
    yields ``operator(x)`` when ``guard(x)`` is true and ``x`` unchanged
    otherwise.

    Example:
        >>> conditional = function_to_conditional_function()
        >>> absolute = conditional(lambda a: -a, lambda a: a < 0)
        >>> absolute(-5), absolute(0), absolute(5)
        (5, 0, 5)
    """

    def conditional(operator: IntUnaryOperator, guard: IntPredicate) -> IntUnaryOperator:
        return lambda x: operator(x) if guard(x) else x

    return conditional
