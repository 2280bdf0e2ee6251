"""Testing utilities for container-returning code.

Provides:
- option_equals/result_equals: compare a container with a plain expected value
- is_ok/is_err/is_some/is_nothing: variant predicates safe on any value
- assert_ok/assert_err/assert_some/assert_nothing: raising assertions with descriptions
"""

from .assertions import (
    assert_err,
    assert_nothing,
    assert_ok,
    assert_some,
    is_err,
    is_nothing,
    is_ok,
    is_some,
    option_equals,
    result_equals,
)

__all__ = [
    "option_equals", "result_equals",
    "is_ok", "is_err", "is_some", "is_nothing",
    "assert_ok", "assert_err", "assert_some", "assert_nothing",
]
