"""Left-to-right composition for container chains.

``pipe(value, f1, f2, ...)`` threads a value through functions; ``flow``
builds the same chain as a reusable callable. Curried helpers bind the
operation's arguments first and take the container last, so they slot
straight into a pipe:

    >>> from monadkit import Some
    >>> from monadkit.pipeline import curried as c
    >>> pipe(Some(2), c.map(lambda x: x + 1), c.filter(lambda x: x > 2), c.unwrap_or(0))
    3

Every helper forwards to the container method of the same name, so the
curried form has no semantics of its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Fn = Callable[[Any], Any]


def _apply(value: object, fn: Fn) -> object:
    return fn(value)


def pipe(value: T, *fns: Fn) -> Any:
    """Thread value through fns left to right: pipe(x, f, g) == g(f(x))."""
    return reduce(_apply, fns, value)


# ═════════════════════════════════════════════════════════════════════════════
# Flow: reusable composition
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Flow:
    """A composed chain of single-argument functions.

    Flows are callables themselves, so they nest. ``>>`` appends a step:

        >>> double_then_str = Flow((lambda x: x * 2,)) >> str
        >>> double_then_str(21)
        '42'
    """

    steps: tuple[Fn, ...] = field(default=())

    def __call__(self, value: object) -> Any:
        return reduce(_apply, self.steps, value)

    def __rshift__(self, other: Fn) -> Flow:
        """Chain another step: self >> other."""
        return Flow((*self.steps, *(other.steps if isinstance(other, Flow) else (other,))))


def flow(*fns: Fn) -> Flow:
    """Compose fns left to right into one callable."""
    return Flow(tuple(fns))


# ═════════════════════════════════════════════════════════════════════════════
# Curried operation helpers
# ═════════════════════════════════════════════════════════════════════════════


def method(name: str) -> Callable[..., Fn]:
    """Curried form of a container method: method("map")(f)(container) == container.map(f)."""
    def bind(*args: Any, **kwargs: Any) -> Fn:
        def call(container: Any) -> Any:
            return getattr(container, name)(*args, **kwargs)
        call.__name__ = call.__qualname__ = f"{name}({', '.join(map(repr, args))})"
        return call
    bind.__name__ = bind.__qualname__ = name
    bind.__doc__ = f"Curried ``container.{name}(...)``; the container is supplied last."
    return bind
