"""Option monad for values that may be absent.

Implements a discriminated union of presence (Some) and absence (Nothing):
- Functor: map
- Monad: and_then / flat_map (bind)
- Logical combinators: and_, or_, xor, filter
- Conversion to Result: ok_or, ok_or_else, transpose

``None`` is a Python constant, so the absent variant is called Nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from ..errors import UnwrapOnNone, UsageError, expect_failure
from ..runtime.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

logger = get_logger("option")

# Sentinels for faster Some/Nothing construction
_SOME = True
_NOTHING = False


class Option(Generic[T]):
    """Discriminated union representing presence (Some) or absence (Nothing).

    Every operation returns a new Option; instances are never mutated.
    Only ``unwrap`` and ``expect`` can raise.

    Examples:
        >>> Some(2).and_then(lambda x: Nothing() if x * x > 64 else Some(x * x)).map(str)
        Some('4')
        >>> Nothing().map(lambda x: x + 1)
        Nothing
        >>> Option.from_value(None).is_none()
        True
    """

    __slots__ = ("_value", "_is_some")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, is_some: bool) -> None:
        self._value = value
        self._is_some = is_some

    # ─── Factories ───────────────────────────────────────────────────

    @staticmethod
    def some(value: U) -> Option[U]:
        """Construct Some variant."""
        return Option(value, _SOME)

    @staticmethod
    def nothing() -> Option[U]:
        """The Nothing variant (shared instance)."""
        return _NOTHING_INSTANCE

    @staticmethod
    def from_value(value: Option[U] | U | None) -> Option[U]:
        """Passthrough for Options, Nothing for None, Some for anything else."""
        if isinstance(value, Option):
            return value
        return _NOTHING_INSTANCE if value is None else Option(value, _SOME)

    @staticmethod
    def collect(items: Iterable[Option[U]]) -> Option[list[U]]:
        """Some(list of values) if every item is Some, else the first Nothing.

        Stops at the first Nothing; no partial list is ever returned.
        """
        values: list[U] = []
        for item in items:
            if not isinstance(item, Option):
                raise UsageError(f"Option.collect() expects Option items, got {type(item).__name__}")
            if not item._is_some:
                return item  # type: ignore[return-value]
            values.append(item._value)  # type: ignore[arg-type]
        return Option(values, _SOME)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_some(self) -> bool:
        """Check if Option is Some variant."""
        return self._is_some

    def is_none(self) -> bool:
        """Check if Option is Nothing variant."""
        return not self._is_some

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        """True if Some and the value satisfies pred."""
        return self._is_some and bool(pred(self._value))  # type: ignore[arg-type]

    # ─── Value Extraction ────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Some value. Raises UnwrapOnNone on Nothing."""
        if self._is_some:
            return self._value  # type: ignore[return-value]
        logger.debug("unwrap() on Nothing")
        raise UnwrapOnNone()

    def expect(self, message: str | BaseException) -> T:
        """Extract Some value, or raise with message (exception objects are raised as-is)."""
        if self._is_some:
            return self._value  # type: ignore[return-value]
        logger.debug("expect() on Nothing: %s", message)
        raise expect_failure(message)

    def unwrap_or(self, default: U) -> T | U:
        """Extract Some value or return default."""
        return self._value if self._is_some else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[], U]) -> T | U:
        """Extract Some value or compute a default via f."""
        return self._value if self._is_some else f()  # type: ignore[return-value]

    # ─── Functor / Monad Operations ──────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Apply f to Some value. Signature: Option[T] → (T→U) → Option[U]"""
        return Option(f(self._value), _SOME) if self._is_some else _NOTHING_INSTANCE  # type: ignore[arg-type]

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """f(value) if Some, else the eager default."""
        return f(self._value) if self._is_some else default  # type: ignore[arg-type]

    def map_or_else(self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """f(value) if Some, else default() computed lazily."""
        return f(self._value) if self._is_some else default()  # type: ignore[arg-type]

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Monadic bind (>>=). Nothing short-circuits, Some(v) returns f(v)."""
        return f(self._value) if self._is_some else _NOTHING_INSTANCE  # type: ignore[arg-type]

    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Alias for and_then."""
        return f(self._value) if self._is_some else _NOTHING_INSTANCE  # type: ignore[arg-type]

    def filter(self, pred: Callable[[T], bool]) -> Option[T]:
        """Keep Some(v) only if pred(v) holds."""
        return self if self._is_some and pred(self._value) else _NOTHING_INSTANCE  # type: ignore[arg-type]

    def flatten(self: Option[Option[U]]) -> Option[U]:
        """Option[Option[U]] → Option[U]"""
        return self._value if self._is_some else _NOTHING_INSTANCE  # type: ignore[return-value]

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        """Some((a, b)) if both are Some, else Nothing."""
        if self._is_some and other._is_some:
            return Option((self._value, other._value), _SOME)  # type: ignore[arg-type]
        return _NOTHING_INSTANCE

    # ─── Logical Combinators ─────────────────────────────────────────

    def and_(self, other: Option[U]) -> Option[U]:
        """Return other if Some, else Nothing. Short-circuit AND."""
        return other if self._is_some else _NOTHING_INSTANCE

    def or_(self, other: Option[U]) -> Option[T | U]:
        """Return self if Some, else other. Short-circuit OR."""
        return self if self._is_some else other  # type: ignore[return-value]

    def or_else(self, f: Callable[[], Option[U]]) -> Option[T | U]:
        """Return self if Some, else f()."""
        return self if self._is_some else f()  # type: ignore[return-value]

    def xor(self, other: Option[U]) -> Option[T | U]:
        """Some iff exactly one side is Some."""
        if self._is_some != other._is_some:
            return self if self._is_some else other  # type: ignore[return-value]
        return _NOTHING_INSTANCE

    # ─── Inspection ──────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], object]) -> Option[T]:
        """Call f with Some value for side effects, return self."""
        if self._is_some:
            f(self._value)  # type: ignore[arg-type]
        return self

    def match(self, nothing: Callable[[], U], some: Callable[[T], U]) -> U:
        """Exhaustive case analysis, absence handler first (mirrors Result.match)."""
        return some(self._value) if self._is_some else nothing()  # type: ignore[arg-type]

    # ─── Conversion ──────────────────────────────────────────────────

    def ok_or(self, err: E) -> Result[T, E]:
        """Some(v) → Ok(v), Nothing → Err(err)."""
        from .result import Err, Ok
        return Ok(self._value) if self._is_some else Err(err)  # type: ignore[arg-type]

    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        """Some(v) → Ok(v), Nothing → Err(f())."""
        from .result import Err, Ok
        return Ok(self._value) if self._is_some else Err(f())  # type: ignore[arg-type]

    def transpose(self: Option[Result[U, E]]) -> Result[Option[U], E]:
        """Option of Result → Result of Option.

        Nothing → Ok(Nothing); Some(Ok(v)) → Ok(Some(v)); Some(Err(e)) → Err(e).
        Raises UsageError when the Some payload is not a Result.
        """
        from .result import Ok, Result
        if not self._is_some:
            return Ok(_NOTHING_INSTANCE)
        inner = self._value
        if not isinstance(inner, Result):
            raise UsageError(f"Cannot transpose a Some whose value is not a Result: {inner!r}")
        return inner.map(lambda v: Option(v, _SOME))

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._is_some  # noqa: E731
    __hash__ = lambda self: hash((self._is_some, self._value))  # noqa: E731
    __repr__ = lambda self: f"Some({self._value!r})" if self._is_some else "Nothing"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_some == other._is_some and self._value == other._value if isinstance(other, Option) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Some, nothing otherwise."""
        if self._is_some:
            yield self._value  # type: ignore[misc]


_NOTHING_INSTANCE: Option = Option(None, _NOTHING)


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct Some variant (present value)."""
    return Option(value, _SOME)


def Nothing() -> Option[T]:  # noqa: N802
    """The Nothing variant (absent value)."""
    return _NOTHING_INSTANCE


def option(value: Option[T] | T | None) -> Option[T]:
    """Lift a nullable value into an Option. Alias of Option.from_value."""
    return Option.from_value(value)
