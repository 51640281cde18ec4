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

r"""
Lazy encoders make recursive schemas possible: the builder is only called when the encoder is first used, by then the
names it refers to (including the lazy encoder itself) are already bound.

>>> from shapecoder.encoders.encoder import identity
>>> from shapecoder.encoders.nullable import nullable
>>> from shapecoder.encoders.shape import shape
>>> linked_list = lazy(lambda: nullable(shape({'head': identity(), 'tail': linked_list})))
>>> linked_list.encode({'head': 1, 'tail': {'head': 2, 'tail': None}})
{'head': 1, 'tail': {'head': 2, 'tail': None}}
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from structlog import get_logger
from typing_extensions import override

from shapecoder.encoders.encoder import Encoder
from shapecoder.utils.memoize import Memoized, memoize

logger = get_logger()

O = TypeVar('O')  # noqa: E741
A = TypeVar('A')


class LazyEncoder(Encoder[O, A]):
    """ Delegates to the encoder returned by `builder`, which is called once, on first use.

    If the builder raises nothing is cached and the next use calls it again. A builder that needs its own lazy encoder
    to be built (instead of just referencing it) results in a `LazyCycleError`.
    """

    __slots__ = ('_builder', '_get', '_log')

    _builder: Callable[[], Encoder[O, A]]
    _get: Memoized[Encoder[O, A]]

    def __init__(self, builder: Callable[[], Encoder[O, A]], *, thread_safe: Optional[bool] = None) -> None:
        # XXX: encoders are callable too, but a builder must return an encoder, not be one
        if isinstance(builder, Encoder) or not callable(builder):
            raise TypeError(f'builder must be a function returning an Encoder, got {type(builder).__name__}')
        if thread_safe is None:
            from shapecoder.conf.get_settings import get_global_settings
            thread_safe = get_global_settings().LAZY_THREAD_SAFE
        self._builder = builder
        self._get = memoize(self._build, thread_safe=thread_safe)
        self._log = logger.new()

    def _build(self) -> Encoder[O, A]:
        encoder = self._builder()
        if not isinstance(encoder, Encoder):
            raise TypeError(f'lazy builder must return an Encoder, got {type(encoder).__name__}')
        self._log.debug('lazy encoder built', builder=self._builder, encoder=type(encoder).__name__)
        return encoder

    def is_built(self) -> bool:
        return self._get.is_cached()

    def force(self) -> Encoder[O, A]:
        """ Build the encoder now if it wasn't built yet, and return it.
        """
        return self._get()

    @override
    def encode(self, value: A, /) -> O:
        return self._get().encode(value)

    def __repr__(self) -> str:
        # XXX: never show the built encoder, recursive schemas would recurse forever
        state = 'built' if self.is_built() else 'unbuilt'
        return f'<lazy {state} {self._builder!r}>'


def lazy(builder: Callable[[], Encoder[O, A]], /) -> Encoder[O, A]:
    return LazyEncoder(builder)
