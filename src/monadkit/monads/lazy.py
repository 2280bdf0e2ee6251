"""Lazy: a deferred, memoized single computation.

The computation runs at most once, on the first ``evaluate()``; later calls
return the cached value. Evaluation is guarded by a lock so concurrent
first callers still trigger a single run and all observe its value.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

from ..errors import UsageError
from ..runtime.observability import get_logger

T = TypeVar("T")
U = TypeVar("U")

logger = get_logger("lazy")


class Lazy(Generic[T]):
    """Write-once cell around a zero-argument computation.

    Example:
        >>> calls = []
        >>> cell = Lazy.of(lambda: calls.append(1) or 42)
        >>> cell.evaluate(), cell.evaluate(), len(calls)
        (42, 42, 1)
    """

    __slots__ = ("_computation", "_value", "_evaluated", "_evaluating", "_lock")

    def __init__(self, computation: Callable[[], T]) -> None:
        self._computation = computation
        self._value: T | None = None
        self._evaluated = False
        self._evaluating = False
        self._lock = threading.RLock()

    @classmethod
    def of(cls, computation: Callable[[], U]) -> Lazy[U]:
        """Wrap computation without invoking it."""
        if not callable(computation):
            raise UsageError(f"Lazy.of() expects a callable, got {type(computation).__name__}")
        return cls(computation)

    def evaluate(self) -> T:
        """Run the computation on first call and cache its result.

        If the computation raises, nothing is cached and the exception
        propagates; a later call runs it again. A computation that calls
        back into its own cell raises UsageError.
        """
        if not self._evaluated:
            with self._lock:
                if self._evaluating:
                    raise UsageError("Lazy computation re-entered its own evaluate()")
                if not self._evaluated:
                    logger.debug("evaluating %s", getattr(self._computation, "__qualname__", self._computation))
                    self._evaluating = True
                    try:
                        self._value = self._computation()
                    finally:
                        self._evaluating = False
                    self._evaluated = True
        return self._value  # type: ignore[return-value]

    def is_evaluated(self) -> bool:
        return self._evaluated

    def map(self, f: Callable[[T], U]) -> Lazy[U]:
        """New cell computing f(self.evaluate()) on demand."""
        return Lazy(lambda: f(self.evaluate()))

    def __repr__(self) -> str:
        return f"Lazy({self._value!r})" if self._evaluated else "Lazy(<unevaluated>)"
