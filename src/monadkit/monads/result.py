"""Result/Either monad for type-safe error handling.

Implements a discriminated union for success/failure with full monadic operations:
- Functor: map, map_err
- Applicative: apply
- Monad: and_then / flat_map (bind)
- Bifunctor: bimap
- Railway-oriented composition

The error channel is any value, not necessarily an exception. ``attempt`` is
the one sanctioned boundary turning a raised exception into an Err.

Both variants share one slotted class tagged by ``_is_ok``; ``sequence`` and
``traverse`` stop at the first Err.
"""

from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, Callable, Generic, ParamSpec, TypeVar

from ..errors import UnwrapOnErr, UnwrapOnOk, UsageError, expect_failure
from ..foundation.config import get_settings
from ..runtime.observability import get_logger
from .option import Nothing, Option, Some

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
P = ParamSpec("P")

logger = get_logger("result")

# Sentinel for faster Ok/Err construction
_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Sum type enforcing exhaustive error handling. Implements Functor, Applicative,
    Monad, and Bifunctor interfaces for railway-oriented programming.

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").map(lambda x: x * 2).unwrap_err()
        'fail'
        >>> Ok(5).and_then(lambda x: Ok(x * 2) if x > 0 else Err("neg")).unwrap()
        10
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Factories ───────────────────────────────────────────────────

    @staticmethod
    def ok_value(value: U) -> Result[U, F]:
        """Construct Ok variant."""
        return Result(value, _OK)

    @staticmethod
    def err_value(error: F) -> Result[U, F]:
        """Construct Err variant."""
        return Result(error, _ERR)

    @staticmethod
    def collect(items: Iterable[Result[U, F]]) -> Result[list[U], F]:
        """Ok(list of values) if every item is Ok, else the first Err (no partial list)."""
        values: list[U] = []
        for r in items:
            if not isinstance(r, Result):
                raise UsageError(f"Result.collect() expects Result items, got {type(r).__name__}")
            if not r._is_ok:
                return r  # type: ignore[return-value]
            values.append(r._value)  # type: ignore[arg-type]
        return Result(values, _OK)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """True if Ok and the value satisfies pred."""
        return self._is_ok and bool(pred(self._value))  # type: ignore[arg-type]

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """True if Err and the error satisfies pred."""
        return not self._is_ok and bool(pred(self._value))  # type: ignore[arg-type]

    # ─── Value Extraction ────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value. Raises UnwrapOnErr on Err, chained to the held error if it is an exception."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        logger.debug("unwrap() on Err: %r", self._value)
        if isinstance(self._value, BaseException):
            raise UnwrapOnErr(self._value) from self._value
        raise UnwrapOnErr(self._value)

    def unwrap_err(self) -> E:
        """Extract Err value. Raises UnwrapOnOk on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        logger.debug("unwrap_err() on Ok: %r", self._value)
        raise UnwrapOnOk(self._value)

    def unwrap_or(self, default: U) -> T | U:
        """Extract Ok value or return default."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], U]) -> T | U:
        """Extract Ok value or compute from error via f."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    def unwrap_either(self) -> T | E:
        """Whichever channel is populated."""
        return self._value  # type: ignore[return-value]

    def expect(self, message: str | BaseException) -> T:
        """Extract Ok value, or raise with message. Exception objects are raised as-is."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        logger.debug("expect() on Err: %r", self._value)
        raise expect_failure(message, self._value)

    def expect_err(self, message: str | BaseException) -> E:
        """Extract Err value, or raise with message. Exception objects are raised as-is."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        logger.debug("expect_err() on Ok: %r", self._value)
        raise expect_failure(message)

    def into_ok(self) -> T:
        """Unchecked Ok accessor. Calling it on Err is a UsageError."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UsageError(f"into_ok() called on {self!r}")

    def into_err(self) -> E:
        """Unchecked Err accessor. Calling it on Ok is a UsageError."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UsageError(f"into_err() called on {self!r}")

    # ─── Functor Operations ──────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return Result(f(self._value), _ERR) if not self._is_ok else self  # type: ignore[arg-type,return-value]

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """f(value) if Ok, else the eager default."""
        return f(self._value) if self._is_ok else default  # type: ignore[arg-type]

    def map_or_else(self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """f(value) if Ok, else default(error)."""
        return f(self._value) if self._is_ok else default(self._value)  # type: ignore[arg-type]

    # ─── Bifunctor Operations ────────────────────────────────────────

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Apply ok_fn if Ok, err_fn if Err. Signature: Result[T,E] → (T→U, E→F) → Result[U,F]"""
        return Result(ok_fn(self._value), _OK) if self._is_ok else Result(err_fn(self._value), _ERR)  # type: ignore[arg-type]

    # ─── Monad Operations ────────────────────────────────────────────

    def and_then(self, f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Monadic bind (>>=). Chain operations that can fail.

        Example:
            >>> Ok("42").and_then(lambda s: Ok(int(s))).and_then(lambda n: Ok(n*2) if n>0 else Err("neg"))
            Ok(84)
        """
        return f(self._value) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def flat_map(self, f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Alias for and_then."""
        return f(self._value) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def or_else(self, f: Callable[[E], Result[U, F]]) -> Result[T | U, F]:
        """On Err, apply f to recover. On Ok, pass through."""
        return f(self._value) if not self._is_ok else self  # type: ignore[arg-type,return-value]

    # ─── Applicative Operations ──────────────────────────────────────

    def apply(self, f_result: Result[Callable[[T], U], E]) -> Result[U, E]:
        """Apply wrapped function to wrapped value (Applicative)."""
        if f_result._is_ok and self._is_ok:
            return Result(f_result._value(self._value), _OK)  # type: ignore[operator]
        return Result(f_result._value if not f_result._is_ok else self._value, _ERR)  # type: ignore[arg-type]

    # ─── Logical Combinators ─────────────────────────────────────────

    def and_(self, other: Result[U, F]) -> Result[U, E | F]:
        """Return other if Ok, else self's Err. Short-circuit AND."""
        return other if self._is_ok else self  # type: ignore[return-value]

    def or_(self, other: Result[U, F]) -> Result[T | U, F]:
        """Return self if Ok, else other. Short-circuit OR."""
        return self if self._is_ok else other  # type: ignore[return-value]

    # ─── Inspection & Utilities ──────────────────────────────────────

    def ok(self) -> Option[T]:
        """Some(T) if Ok, Nothing if Err."""
        return Some(self._value) if self._is_ok else Nothing()  # type: ignore[arg-type]

    def err(self) -> Option[E]:
        """Some(E) if Err, Nothing if Ok."""
        return Some(self._value) if not self._is_ok else Nothing()  # type: ignore[arg-type]

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call f with Ok value for side effects, return self."""
        if self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call f with Err value for side effects, return self."""
        if not self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, err: Callable[[E], U], ok: Callable[[T], U]) -> U:
        """Exhaustive pattern match, error handler first. Same as map_or_else(err, ok)."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Conversion ──────────────────────────────────────────────────

    def to_tuple(self) -> tuple[T | None, E | None]:
        """Convert to (ok_value, err_value) tuple."""
        return (self._value, None) if self._is_ok else (None, self._value)  # type: ignore[return-value]

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Flatten nested Result. Result[Result[T,E],E] → Result[T,E]"""
        return self._value if self._is_ok else self  # type: ignore[return-value]

    def transpose(self: Result[Option[U], E]) -> Option[Result[U, E]]:
        """Result of Option → Option of Result.

        Ok(Nothing) → Nothing; Ok(Some(v)) → Some(Ok(v)); Err(e) → Some(Err(e)).
        Raises UsageError when the Ok payload is not an Option.
        """
        if not self._is_ok:
            return Some(self)  # type: ignore[arg-type]
        inner = self._value
        if not isinstance(inner, Option):
            raise UsageError(f"Cannot transpose an Ok whose value is not an Option: {inner!r}")
        return inner.map(lambda v: Result(v, _OK))

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Exception Boundary
# ═══════════════════════════════════════════════════════════════════════════════


def attempt(
    f: Callable[..., T],
    *args: object,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: object,
) -> Result[T, BaseException]:
    """Call f once. Ok(return value), or Err(exception) if f raises a ``catch`` type.

    Only this single invocation is guarded; exceptions outside ``catch`` propagate.

    Example:
        >>> attempt(int, "42")
        Ok(42)
        >>> attempt(int, "x").is_err()
        True
    """
    capture = get_settings().logging.capture_attempts
    try:
        value = f(*args, **kwargs)
    except catch as e:
        if capture:
            logger.debug("attempt() captured %s from %s", type(e).__name__, getattr(f, "__qualname__", f))
        return Result(e, _ERR)
    return Result(value, _OK)


def attempting(
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, BaseException]]]:
    """Decorator: every call of the wrapped function goes through attempt().

    Example:
        >>> @attempting(ValueError)
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("7")
        Ok(7)
    """
    def decorator(func: Callable[P, T]) -> Callable[P, Result[T, BaseException]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, BaseException]:
            return attempt(func, *args, catch=catch, **kwargs)
        return wrapper
    return decorator


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """List[Result[T,E]] → Result[List[T], E]. Fail-fast on first Err."""
    return Result.collect(results)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items, sequence results. Fail-fast on first Err; f is not called after it."""
    values: list[U] = []
    for item in items:
        r = f(item)
        if not r._is_ok:
            return r  # type: ignore[return-value]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating ALL errors (not fail-fast)."""
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        (values if r._is_ok else errors).append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK) if not errors else Result(errors, _ERR)
