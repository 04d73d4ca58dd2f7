"""Functional-style constructors for suppliers, predicates, operators and threads."""

from crazylambdas.core.errors import ActionError, ParseError
from crazylambdas.execution import (
    ActionThread,
    ThreadSpawningConsumer,
    new_thread_runnable_consumer,
    runnable_to_thread_supplier_function,
    running_thread_supplier,
)
from crazylambdas.functional import (
    bounded_random_int_function,
    function_to_conditional_function,
    hello_supplier,
    int_square_operation,
    is_empty_predicate,
    length_in_range_predicate,
    long_sum_operation,
    n_multiply_function_supplier,
    random_int_supplier,
    string_to_int_converter,
    to_dollar_string_function,
    tricky_well_done_supplier,
)

__version__ = "0.1.0"

__all__ = [
    "ActionError",
    "ParseError",
    "ActionThread",
    "ThreadSpawningConsumer",
    "running_thread_supplier",
    "new_thread_runnable_consumer",
    "runnable_to_thread_supplier_function",
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
