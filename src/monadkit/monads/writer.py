"""Writer monad: a value paired with an accumulated log.

Logs are merged with a combiner supplied at construction. Every derived
Writer carries the same combiner object; ``Writer.of`` is the only way to
start a chain with a different one.

Example:
    >>> add_tax = lambda p: writer(p * 1.2, ["tax"])
    >>> writer(100.0, ["start"]).and_then(add_tax).log()
    ['start', 'tax']
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from ..errors import UsageError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

T = TypeVar("T")
U = TypeVar("U")
W = TypeVar("W")

Combiner = Callable[[W, W], W]


def concat(left: Sequence[object], right: Sequence[object]) -> list[object]:
    """Default list-log combiner: order-preserving concatenation."""
    return [*left, *right]


class Writer(Generic[W, T]):
    """Product of a value, a log, and the log's combiner.

    Immutable: every operation returns a new Writer sharing the combiner.
    """

    __slots__ = ("_value", "_log", "_combine")

    def __init__(self, value: T, log: W, combine: Combiner[W]) -> None:
        self._value = value
        self._log = log
        self._combine = combine

    @classmethod
    def of(cls, value: U, log: W, combine: Combiner[W]) -> Writer[W, U]:
        """Start a chain with an explicit combiner."""
        if not callable(combine):
            raise UsageError(f"Writer combiner must be callable, got {type(combine).__name__}")
        return cls(value, log, combine)

    # ─── Accessors ───────────────────────────────────────────────────

    def value(self) -> T:
        return self._value

    def log(self) -> W:
        return self._log

    def run(self) -> tuple[T, W]:
        """(value, log) pair."""
        return self._value, self._log

    @property
    def combiner(self) -> Combiner[W]:
        return self._combine

    # ─── Value Operations ────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Writer[W, U]:
        """Transform the value; the log is untouched."""
        return Writer(f(self._value), self._log, self._combine)

    def and_then(self, f: Callable[[T], Writer[W, U]]) -> Writer[W, U]:
        """Run f on the value and append its log after ours (left-then-right).

        The second Writer's combiner is ignored; the chain keeps its own.
        """
        nxt = f(self._value)
        if not isinstance(nxt, Writer):
            raise UsageError(f"and_then() continuation must return a Writer, got {type(nxt).__name__}")
        return Writer(nxt._value, self._combine(self._log, nxt._log), self._combine)

    flat_map = and_then

    def listen(self, f: Callable[[T, W], U]) -> Writer[W, U]:
        """Compute a new value from (value, log); the log is untouched."""
        return Writer(f(self._value, self._log), self._log, self._combine)

    def inspect(self, f: Callable[[T], object]) -> Writer[W, T]:
        """Call f with the value for side effects, return self."""
        f(self._value)
        return self

    # ─── Log Operations ──────────────────────────────────────────────

    def tell(self, entry: W) -> Writer[W, T]:
        """Append entry to the log via the combiner."""
        return Writer(self._value, self._combine(self._log, entry), self._combine)

    def map_log(self, f: Callable[[W], W]) -> Writer[W, T]:
        """Transform the log only."""
        return Writer(self._value, f(self._log), self._combine)

    def reset(self, log: W) -> Writer[W, T]:
        """Replace the log wholesale."""
        return Writer(self._value, log, self._combine)

    # ─── Dunder Methods ──────────────────────────────────────────────

    __hash__ = None  # type: ignore[assignment]
    __repr__ = lambda self: f"Writer(value={self._value!r}, log={self._log!r})"  # noqa: E731

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Writer):
            return NotImplemented
        return self._combine is other._combine and self._value == other._value and self._log == other._log

    def __iter__(self) -> Iterator[object]:
        """Unpack as (value, log)."""
        yield self._value
        yield self._log


def writer(value: T, log: Iterable[object] = ()) -> Writer[list[object], T]:
    """Writer with a list log combined by order-preserving concatenation.

    A bare string log is rejected; wrap a single entry in a list.
    """
    if isinstance(log, (str, bytes)):
        raise UsageError(f"writer() log must be an iterable of entries, not {type(log).__name__}")
    return Writer(value, list(log), concat)
