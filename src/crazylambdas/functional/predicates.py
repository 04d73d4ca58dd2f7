"""Predicates over strings."""

from pydantic import validate_call

from crazylambdas.core.types import NonNegativeInt, Predicate

__all__ = [
    "is_empty_predicate",
    "length_in_range_predicate",
]


def is_empty_predicate() -> Predicate[str]:
    """Return a predicate that is true only for the empty string."""
    return lambda s: len(s) == 0


@validate_call
def length_in_range_predicate(
    min_length: NonNegativeInt, max_length: NonNegativeInt
) -> Predicate[str]:
    """Return a predicate testing that a string's length lies in a range.

    Both bounds are inclusive.

    Args:
        min_length: Shortest accepted length.
        max_length: Longest accepted length.

    Returns:
        Predicate returning ``min_length <= len(s) <= max_length``.

    Raises:
        ValueError: If a bound is negative or ``min_length > max_length``.
    """
    if min_length > max_length:
        raise ValueError(
            f"min_length ({min_length}) must not exceed max_length ({max_length})."
        )
    return lambda s: min_length <= len(s) <= max_length
