#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from contextlib import AbstractContextManager, nullcontext
from threading import RLock, get_ident
from typing import Callable, Generic, Optional, TypeVar

from shapecoder.exception import LazyCycleError

T = TypeVar('T')

# shared by every thread safe Memoized, so builds that need each other always run on a single thread
_BUILD_LOCK = RLock()


class Memoized(Generic[T]):
    """ Zero-argument callable that computes its value once and returns the cached value afterwards.

    The cache is only filled when the computation returns, if it raises nothing is cached and the next call will try
    again. Calling it again from inside the computation (on the same thread) raises `LazyCycleError`.

    When `thread_safe=True` the computation runs under a lock shared by every thread safe `Memoized`, so concurrent
    first calls wait for a single computation instead of racing, and computations that need each other always end up on
    the same thread, where a cycle raises `LazyCycleError` instead of deadlocking.
    """

    __slots__ = ('_f', '_lock', '_value', '_cached', '_building_thread')

    _value: T

    def __init__(self, f: Callable[[], T], *, thread_safe: bool = True) -> None:
        self._f = f
        self._lock: AbstractContextManager = _BUILD_LOCK if thread_safe else nullcontext()
        self._cached = False
        self._building_thread: Optional[int] = None

    def is_cached(self) -> bool:
        return self._cached

    def __call__(self) -> T:
        # XXX: `_value` is always assigned before `_cached`, so this fast path never sees a partial state
        if self._cached:
            return self._value
        with self._lock:
            if self._cached:
                return self._value
            if self._building_thread == get_ident():
                raise LazyCycleError(f'{self._f!r} needs its own result to be computed')
            self._building_thread = get_ident()
            try:
                value = self._f()
            finally:
                self._building_thread = None
            self._value = value
            self._cached = True
            return value


def memoize(f: Callable[[], T], *, thread_safe: bool = True) -> Memoized[T]:
    """ Wrap `f` so it is called at most once (successfully), see `Memoized`.

    >>> calls = []
    >>> get = memoize(lambda: calls.append(1) or len(calls))
    >>> get(), get(), calls
    (1, 1, [1])
    """
    return Memoized(f, thread_safe=thread_safe)
