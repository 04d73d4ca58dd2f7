"""Reusable type definitions for crazylambdas.

Callable aliases name the shapes the constructors return, so signatures read
the same way across modules. Constrained integer aliases are validated by
pydantic wherever a function is wrapped with ``validate_call``.

Type Aliases:
    Action: A zero-argument callable run for its side effects.
    Supplier: A zero-argument callable producing a value.
    Predicate: A one-argument callable returning a bool.
    IntUnaryOperator: ``int -> int``.
    IntBinaryOperator: ``(int, int) -> int``.
    IntPredicate: ``int -> bool``.
    PositiveInt: An int strictly greater than zero.
    NonNegativeInt: An int greater than or equal to zero.
"""

from typing import Annotated, Any, Callable, TypeVar
import annotated_types as at

__all__ = [
    "Action",
    "Supplier",
    "Predicate",
    "IntUnaryOperator",
    "IntBinaryOperator",
    "IntPredicate",
    "PositiveInt",
    "NonNegativeInt",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MAX",
]

T = TypeVar("T")

Action = Callable[[], Any]
Supplier = Callable[[], T]
Predicate = Callable[[T], bool]

IntUnaryOperator = Callable[[int], int]
IntBinaryOperator = Callable[[int, int], int]
IntPredicate = Callable[[int], bool]

PositiveInt = Annotated[int, at.Gt(0)]
NonNegativeInt = Annotated[int, at.Ge(0)]

# Range of a signed 32-bit integer, used by the unbounded random supplier
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Largest bound numpy's Generator.integers accepts with its default dtype
INT64_MAX = 2**63 - 1
