"""Curried container operations, arguments first and container last.

Names shadow builtins (``map``, ``filter``) on purpose; import the module
rather than the names:

    >>> from monadkit.pipeline import curried as c
    >>> from monadkit import Ok
    >>> c.map(lambda x: x * 2)(Ok(21))
    Ok(42)
"""

from __future__ import annotations

from ..monads import Err, Ok, Option, Some
from .pipe import method

# Shared by Option, Result and Writer
map = method("map")  # noqa: A001
and_then = method("and_then")
inspect = method("inspect")

# Option and Result
and_ = method("and_")
or_ = method("or_")
or_else = method("or_else")
map_or = method("map_or")
map_or_else = method("map_or_else")
unwrap_or = method("unwrap_or")
unwrap_or_else = method("unwrap_or_else")
expect = method("expect")

# Option
filter = method("filter")  # noqa: A001
xor = method("xor")
is_some_and = method("is_some_and")
ok_or = method("ok_or")
ok_or_else = method("ok_or_else")

# Result
map_err = method("map_err")
inspect_err = method("inspect_err")
match = method("match")
expect_err = method("expect_err")

# Writer
tell = method("tell")
map_log = method("map_log")
reset = method("reset")
listen = method("listen")

# Value lifts
to_some = Some
to_ok = Ok
to_err = Err
option = Option.from_value

__all__ = [
    "map", "and_then", "inspect",
    "and_", "or_", "or_else", "map_or", "map_or_else", "unwrap_or", "unwrap_or_else", "expect",
    "filter", "xor", "is_some_and", "ok_or", "ok_or_else",
    "map_err", "inspect_err", "match", "expect_err",
    "tell", "map_log", "reset", "listen",
    "to_some", "to_ok", "to_err", "option",
]
