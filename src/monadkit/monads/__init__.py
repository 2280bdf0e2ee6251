"""Algebraic containers with Haskell-grade rigor.

- Option/Some/Nothing: presence or absence of a value
- Result/Ok/Err: success or failure with a typed error channel
- Writer: value paired with a log merged by a caller-supplied combiner
- Lazy: deferred, memoized single computation

Example:
    >>> from monadkit.monads import Result, Ok, Err
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Err("Division by zero")
    ...     return Ok(a / b)
    >>>
    >>> divide(100, 2).and_then(lambda x: divide(x, 5))
    Ok(10.0)
"""

from .lazy import Lazy
from .option import Nothing, Option, Some, option
from .result import (
    Err,
    Ok,
    Result,
    attempt,
    attempting,
    collect_results,
    sequence,
    traverse,
)
from .writer import Writer, concat, writer

__all__ = [
    # Option
    "Option", "Some", "Nothing", "option",
    # Result
    "Result", "Ok", "Err", "attempt", "attempting",
    # Collection operations
    "sequence", "traverse", "collect_results",
    # Writer
    "Writer", "writer", "concat",
    # Lazy
    "Lazy",
]
