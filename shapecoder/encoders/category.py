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
Encoders form a contravariant functor (`contramap`) and a category (`identity` and `compose`).

Both operations are methods of `Encoder`. This module holds the encoders they build, the curried forms that are handy
to build pipelines, and the protocols that describe each capability. As values, the capabilities take their arguments
in the order the encoders run: `category_encoder.compose(ab, ea)` is `ea.compose(ab)`.

>>> from shapecoder.encoders.encoder import from_function
>>> length = from_function(len)
>>> contramap(str.strip)(length).encode('  abc  ')
3
>>> compose(from_function(str))(length).encode([1, 2])
'2'

The following laws hold for every encoder `e` and every value:

    e.contramap(lambda a: a) ≡ e
    identity().compose(e) ≡ e ≡ e.compose(identity())
    e1.compose(e2).compose(e3) ≡ e1.compose(e2.compose(e3))
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Protocol, TypeVar, runtime_checkable

from typing_extensions import override

from shapecoder.encoders.encoder import Encoder, check_encoder, identity

O = TypeVar('O')  # noqa: E741
A = TypeVar('A')
B = TypeVar('B')
E = TypeVar('E')

O_co = TypeVar('O_co', covariant=True)
A_contra = TypeVar('A_contra', contravariant=True)


@runtime_checkable
class SupportsContramap(Protocol[O_co, A_contra]):
    def contramap(self, f: Callable[[B], A_contra], /) -> SupportsContramap[O_co, B]:
        ...


@runtime_checkable
class SupportsCompose(Protocol[O_co, A_contra]):
    def compose(self, ab: Encoder[A_contra, B], /) -> SupportsCompose[O_co, B]:
        ...


class ContramapEncoder(Encoder[O, B]):
    """ Encodes `f(value)` with the wrapped encoder.
    """

    __slots__ = ('_encoder', '_f')

    _encoder: Encoder[O, A]
    _f: Callable[[B], A]

    def __init__(self, encoder: Encoder[O, A], f: Callable[[B], A]) -> None:
        check_encoder(encoder, name='encoder')
        if not callable(f):
            raise TypeError(f'expected a callable, got {type(f).__name__}')
        self._encoder = encoder
        self._f = f

    @override
    def encode(self, value: B, /) -> O:
        return self._encoder.encode(self._f(value))

    def __repr__(self) -> str:
        return f'{self._encoder!r}.contramap({self._f!r})'


class ComposeEncoder(Encoder[E, B]):
    """ Encodes with `inner` and then encodes the result with `outer`.
    """

    __slots__ = ('_outer', '_inner')

    _outer: Encoder[E, A]
    _inner: Encoder[A, B]

    def __init__(self, outer: Encoder[E, A], inner: Encoder[A, B]) -> None:
        check_encoder(outer, name='outer')
        check_encoder(inner, name='inner')
        self._outer = outer
        self._inner = inner

    @override
    def encode(self, value: B, /) -> E:
        return self._outer.encode(self._inner.encode(value))

    def __repr__(self) -> str:
        return f'{self._outer!r}.compose({self._inner!r})'


def contramap(f: Callable[[B], A], /) -> Callable[[Encoder[E, A]], Encoder[E, B]]:
    """ Curried `Encoder.contramap`: `contramap(f)(fa) == fa.contramap(f)`."""
    def _contramap(fa: Encoder[E, A], /) -> Encoder[E, B]:
        return fa.contramap(f)
    return _contramap


def compose(ea: Encoder[E, A], /) -> Callable[[Encoder[A, B]], Encoder[E, B]]:
    """ Curried `Encoder.compose`: `compose(ea)(ab) == ea.compose(ab)`."""
    check_encoder(ea, name='ea')

    def _compose(ab: Encoder[A, B], /) -> Encoder[E, B]:
        return ea.compose(ab)
    return _compose


class Contravariant(NamedTuple):
    # (fa, f) -> fa.contramap(f)
    contramap: Callable


class Category(NamedTuple):
    # (ab, ea) -> ea.compose(ab), the encoder that runs first comes first
    compose: Callable
    id: Callable


def _compose_in_order(ab: Encoder[A, B], ea: Encoder[E, A]) -> Encoder[E, B]:
    return ComposeEncoder(ea, ab)


# the capabilities as values, for code that takes them as arguments instead of calling the methods
contravariant_encoder = Contravariant(contramap=ContramapEncoder)
category_encoder = Category(compose=_compose_in_order, id=identity)
