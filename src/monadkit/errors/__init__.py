"""Error taxonomy for monadkit.

- ErrorCode: Stable codes attached to every library exception
- UnwrapOnNone/UnwrapOnErr/UnwrapOnOk: Extraction on the wrong variant
- ExpectFailure: Failed expect()/expect_err() with a caller message
- UsageError: Programmer misuse (wrong payload shape, wrong accessor)
"""

from .errors import (
    ErrorCode,
    ExpectFailure,
    MonadError,
    UnwrapOnErr,
    UnwrapOnNone,
    UnwrapOnOk,
    UsageError,
    expect_failure,
    render_error,
)

__all__ = [
    "ErrorCode", "MonadError",
    # Extraction failures
    "UnwrapOnNone", "UnwrapOnErr", "UnwrapOnOk", "ExpectFailure",
    # Misuse
    "UsageError",
    # Helpers
    "render_error", "expect_failure",
]
