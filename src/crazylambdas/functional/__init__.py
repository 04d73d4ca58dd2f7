"""Functional primitives for crazylambdas.

Each function in this package is a constructor: it returns a small callable
(supplier, predicate, operator or converter) instead of computing a value
directly. The returned callables are stateless apart from the random
generators they close over, so they compose freely.
"""

from crazylambdas.functional.converters import (
    string_to_int_converter,
    to_dollar_string_function,
)
from crazylambdas.functional.operators import (
    bounded_random_int_function,
    function_to_conditional_function,
    int_square_operation,
    long_sum_operation,
)
from crazylambdas.functional.predicates import (
    is_empty_predicate,
    length_in_range_predicate,
)
from crazylambdas.functional.suppliers import (
    hello_supplier,
    n_multiply_function_supplier,
    random_int_supplier,
    tricky_well_done_supplier,
)

__all__ = [
    "hello_supplier",
    "random_int_supplier",
    "n_multiply_function_supplier",
    "tricky_well_done_supplier",
    "is_empty_predicate",
    "length_in_range_predicate",
    "bounded_random_int_function",
    "int_square_operation",
    "long_sum_operation",
    "function_to_conditional_function",
    "to_dollar_string_function",
    "string_to_int_converter",
]
