"""Tests for the Writer monad."""

from __future__ import annotations

import pytest

from monadkit import UsageError, Writer, writer
from monadkit.monads import concat


def add_tax(price: float) -> Writer[list[object], float]:
    return writer(price * 1.2, ["Added 20% tax"])


def apply_discount(price: float) -> Writer[list[object], float]:
    return writer(price * 0.9, ["Applied 10% discount"])


# ═════════════════════════════════════════════════════════════════════════════
# Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    w = writer(1, ["a"])
    assert w.map(lambda x: x) == w


def test_functor_composition() -> None:
    w = writer(3, ["a"])
    f = lambda x: x + 1  # noqa: E731
    g = lambda x: x * 2  # noqa: E731
    assert w.map(f).map(g) == w.map(lambda x: g(f(x)))


def test_log_order_is_call_order() -> None:
    """Logs combine left then right, never reversed."""
    assert writer("v", ["a"]).and_then(lambda _: writer("w", ["b"])).log() == ["a", "b"]


# ═════════════════════════════════════════════════════════════════════════════
# Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_pricing_scenario() -> None:
    result = writer(100.0, ["start"]).and_then(add_tax).and_then(apply_discount)

    assert result.log() == ["start", "Added 20% tax", "Applied 10% discount"]
    assert result.value() == pytest.approx(100 * 1.2 * 0.9)


def test_default_log_is_empty_list() -> None:
    w = writer(1)
    assert w.log() == []
    assert w.run() == (1, [])


def test_accessors_and_unpacking() -> None:
    w = writer(5, ["x"])
    assert w.value() == 5
    assert w.run() == (5, ["x"])
    value, log = w
    assert (value, log) == (5, ["x"])


def test_map_leaves_log() -> None:
    assert writer(2, ["a"]).map(lambda x: x * 10).run() == (20, ["a"])


def test_tell() -> None:
    w = writer(1, ["a"]).tell(["b"]).tell(["c"])
    assert w.run() == (1, ["a", "b", "c"])


def test_map_log_and_reset() -> None:
    w = writer(1, ["a", "b"])
    assert w.map_log(lambda log: [entry.upper() for entry in log]).log() == ["A", "B"]
    assert w.reset(["fresh"]).run() == (1, ["fresh"])


def test_listen_sees_log() -> None:
    w = writer(10, ["a", "b"]).listen(lambda value, log: value + len(log))
    assert w.run() == (12, ["a", "b"])


def test_inspect() -> None:
    seen: list[int] = []
    w = writer(3, ["a"])
    assert w.inspect(seen.append) is w
    assert seen == [3]


def test_operations_never_mutate_receiver() -> None:
    log = ["a"]
    w = writer(1, log)
    w.tell(["b"]).map(str).reset([])
    assert w.run() == (1, ["a"])
    assert log == ["a"]


# ═════════════════════════════════════════════════════════════════════════════
# Combiner
# ═════════════════════════════════════════════════════════════════════════════


def test_custom_combiner_with_string_log() -> None:
    join = lambda a, b: f"{a}; {b}" if a else b  # noqa: E731
    w = Writer.of(1, "", join).tell("one").and_then(lambda x: Writer.of(x + 1, "two", join))
    assert w.run() == (2, "one; two")


def test_combiner_identity_preserved_through_chain() -> None:
    calls: list[tuple[int, int]] = []

    def add(a: int, b: int) -> int:
        calls.append((a, b))
        return a + b

    other = lambda a, b: a * b  # noqa: E731
    w = (
        Writer.of("x", 1, add)
        .map(str.upper)
        .tell(2)
        .map_log(lambda n: n * 10)
        .reset(3)
        .listen(lambda v, n: v * n)
        .and_then(lambda v: Writer.of(v, 4, other))
    )
    assert w.combiner is add
    assert w.run() == ("XXX", 7)
    assert calls == [(1, 2), (3, 4)]


def test_writer_helper_shares_concat() -> None:
    assert writer(1).combiner is concat
    assert writer(1).tell(["a"]).combiner is concat


def test_of_rejects_non_callable_combiner() -> None:
    with pytest.raises(UsageError):
        Writer.of(1, [], "not callable")  # type: ignore[arg-type]


def test_and_then_rejects_non_writer() -> None:
    with pytest.raises(UsageError):
        writer(1).and_then(lambda x: x + 1)  # type: ignore[arg-type,return-value]


def test_equality_and_repr() -> None:
    assert writer(1, ["a"]) == writer(1, ["a"])
    assert writer(1, ["a"]) != writer(1, ["b"])
    assert writer(1, ["a"]) != Writer.of(1, ["a"], lambda a, b: a + b)
    assert repr(writer(1, ["a"])) == "Writer(value=1, log=['a'])"


def test_writer_rejects_string_log() -> None:
    with pytest.raises(UsageError):
        writer(1, "start")
    assert writer(1, ("start",)).log() == ["start"]
