"""Exception taxonomy for container extraction failures and API misuse.

Only unwrap-family operations raise on their own account. Combinators are
total, so everything here signals either an explicit extraction on the
wrong variant or a programmer error.
"""

from __future__ import annotations

from enum import StrEnum

from ..foundation.config import get_settings


class ErrorCode(StrEnum):
    """Stable codes attached to every library exception."""
    UNWRAP_NONE = "UNWRAP_NONE"
    UNWRAP_ERR = "UNWRAP_ERR"
    UNWRAP_OK = "UNWRAP_OK"
    EXPECT_FAILED = "EXPECT_FAILED"
    USAGE = "USAGE"


class MonadError(Exception):
    """Base class for every exception raised by monadkit."""

    code: ErrorCode = ErrorCode.USAGE


class UnwrapOnNone(MonadError, ValueError):
    """Raised by ``Option.unwrap()`` on a Nothing receiver."""

    code = ErrorCode.UNWRAP_NONE

    def __init__(self) -> None:
        super().__init__("Called `Option.unwrap()` on a `Nothing` value")


class UnwrapOnErr(MonadError, ValueError):
    """Raised by ``Result.unwrap()`` on an Err receiver.

    The held error is kept on ``error``. Callers raising this should chain it
    as the cause when it is itself an exception (see ``Result.unwrap``).
    """

    code = ErrorCode.UNWRAP_ERR

    def __init__(self, error: object) -> None:
        self.error = error
        rendered = render_error(error)
        found = f"Err({rendered})" if rendered is not None else get_settings().render.fallback
        super().__init__(f"Unwrapped with the expectation of an Ok, but found {found}")


class UnwrapOnOk(MonadError, ValueError):
    """Raised by ``Result.unwrap_err()`` on an Ok receiver."""

    code = ErrorCode.UNWRAP_OK

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__("Unwrapped with the expectation of an Err, but found Ok")


class ExpectFailure(MonadError, RuntimeError):
    """Raised by ``expect``/``expect_err`` carrying the caller's message."""

    code = ErrorCode.EXPECT_FAILED


class UsageError(MonadError, TypeError):
    """Programmer misuse: wrong variant for an unchecked accessor, bad payload shape."""

    code = ErrorCode.USAGE


def render_error(error: object) -> str | None:
    """Render an Err payload for diagnostics.

    Strings render as themselves, exceptions as ``str(exc)``, and objects with a
    string ``message`` attribute as that message. Anything else yields None so
    the caller can fall back to a generic marker.
    """
    if isinstance(error, str):
        text = error
    elif isinstance(error, BaseException):
        text = str(error)
    elif isinstance(message := getattr(error, "message", None), str):
        text = message
    else:
        return None
    limit = get_settings().render.max_length
    return text if len(text) <= limit else f"{text[:limit]}..."


def expect_failure(message: str | BaseException, cause: object = None) -> BaseException:
    """Build the exception for a failed expectation.

    Exception instances supplied by the caller are returned verbatim. Otherwise an
    ExpectFailure is built, chained to ``cause`` when that is an exception.
    """
    if isinstance(message, BaseException):
        return message
    exc = ExpectFailure(message)
    if isinstance(cause, BaseException):
        exc.__cause__ = cause
    return exc
