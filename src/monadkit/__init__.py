"""monadkit - Option, Result, Writer and Lazy containers for Python.

Represent "value or absence", "success or failure" and "value with an
accumulated log" without None checks or exception-driven control flow.

Quick Start:
    >>> from monadkit import Some, Nothing, Ok, Err, writer, Lazy
    >>>
    >>> Some(2).and_then(lambda x: Nothing() if x * x > 64 else Some(x * x)).map(str)
    Some('4')
    >>>
    >>> def divide(a: float, b: float):
    ...     return Err("Division by zero") if b == 0 else Ok(a / b)
    >>> divide(100, 2).and_then(lambda x: divide(x, 5))
    Ok(10.0)
    >>>
    >>> writer(100.0, ["start"]).and_then(lambda p: writer(p + 20, ["tax"])).run()
    (120.0, ['start', 'tax'])

Exception boundary:
    >>> from monadkit import attempt
    >>> attempt(int, "not a number").map_err(type).unwrap_err()
    <class 'ValueError'>

Point-free chains:
    >>> from monadkit import pipe
    >>> from monadkit.pipeline import curried as c
    >>> pipe(Ok(2), c.map(lambda x: x * 10), c.unwrap_or(0))
    20
"""

from .errors import (
    ErrorCode,
    ExpectFailure,
    MonadError,
    UnwrapOnErr,
    UnwrapOnNone,
    UnwrapOnOk,
    UsageError,
)
from .foundation.config import MonadkitSettings, get_settings
from .monads import (
    Err,
    Lazy,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    Writer,
    attempt,
    attempting,
    collect_results,
    option,
    sequence,
    traverse,
    writer,
)
from .pipeline import flow, pipe
from .runtime.observability import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Option
    "Option", "Some", "Nothing", "option",
    # Result
    "Result", "Ok", "Err", "attempt", "attempting",
    "sequence", "traverse", "collect_results",
    # Writer & Lazy
    "Writer", "writer", "Lazy",
    # Composition
    "pipe", "flow",
    # Errors
    "ErrorCode", "MonadError", "UnwrapOnNone", "UnwrapOnErr", "UnwrapOnOk", "ExpectFailure", "UsageError",
    # Configuration & logging
    "MonadkitSettings", "get_settings", "configure_logging", "get_logger",
]
