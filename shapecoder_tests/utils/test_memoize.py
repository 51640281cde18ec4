import pytest

from shapecoder.exception import LazyCycleError
from shapecoder.utils.memoize import Memoized, memoize


@pytest.mark.parametrize('thread_safe', [True, False])
def test_computes_once(thread_safe: bool) -> None:
    calls = []
    get = memoize(lambda: calls.append(1) or object(), thread_safe=thread_safe)
    assert isinstance(get, Memoized)
    assert not get.is_cached()
    first = get()
    assert get() is first
    assert get.is_cached()
    assert len(calls) == 1


def test_caches_falsy_values() -> None:
    calls = []
    get = memoize(lambda: calls.append(1) or None)
    assert get() is None
    assert get() is None
    assert len(calls) == 1


def test_exceptions_are_not_cached() -> None:
    attempts = []

    def f() -> int:
        attempts.append(1)
        if len(attempts) < 3:
            raise ValueError('try again')
        return 42

    get = memoize(f)
    for _ in range(2):
        with pytest.raises(ValueError):
            get()
    assert get() == 42
    assert get() == 42
    assert len(attempts) == 3


@pytest.mark.parametrize('thread_safe', [True, False])
def test_reentrant_call_raises(thread_safe: bool) -> None:
    get: Memoized[int] = memoize(lambda: get() + 1, thread_safe=thread_safe)
    with pytest.raises(LazyCycleError):
        get()
    assert not get.is_cached()


def test_thread_safe_memoized_share_one_lock() -> None:
    first: Memoized[int] = memoize(lambda: 1)
    second: Memoized[int] = memoize(lambda: 2)
    assert first._lock is second._lock
    assert memoize(lambda: 3, thread_safe=False)._lock is not first._lock


def test_mutually_dependent_calls_raise() -> None:
    first: Memoized[int] = memoize(lambda: second() + 1)
    second: Memoized[int] = memoize(lambda: first() + 1)
    with pytest.raises(LazyCycleError):
        first()
    assert not first.is_cached()
    assert not second.is_cached()
