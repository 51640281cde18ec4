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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar, final

from typing_extensions import override

O = TypeVar('O')  # noqa: E741
A = TypeVar('A')
B = TypeVar('B')


class Encoder(ABC, Generic[O, A]):
    """ An encoder turns a value of type `A` into its representation of type `O`.

    Encoding is expected to be pure and total: the same value always results in the same representation, nothing else
    is observably affected and no error is raised for a value of the expected type. Encoders don't validate their
    input, giving them a value of the wrong shape is a programming error.

    Encoders are immutable once created and can be freely shared (between schemas and between threads). Besides
    `encode`, an encoder can be called directly, so `encoder.encode` and `encoder` can both be used as plain functions.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @abstractmethod
    def encode(self, value: A, /) -> O:
        raise NotImplementedError

    @final
    def __call__(self, value: A, /) -> O:
        return self.encode(value)

    @final
    def contramap(self, f: Callable[[B], A], /) -> Encoder[O, B]:
        """ Adapt this encoder to a different input type by transforming every value with `f` before encoding it.
        """
        from shapecoder.encoders.category import ContramapEncoder
        return ContramapEncoder(self, f)

    @final
    def compose(self, ab: Encoder[A, B], /) -> Encoder[O, B]:
        """ Chain `ab` before this encoder: the result encodes a value with `ab` and then encodes that with `self`.
        """
        from shapecoder.encoders.category import ComposeEncoder
        return ComposeEncoder(self, ab)


class IdentityEncoder(Encoder[A, A]):
    """ Encodes every value as itself, it's the neutral element of `compose`.
    """

    __slots__ = ()

    @override
    def encode(self, value: A, /) -> A:
        return value

    def __repr__(self) -> str:
        return 'identity()'


class FunctionEncoder(Encoder[O, A]):
    """ Encoder backed by a plain function, this is how leaf encoders are usually made.

    The function must be pure and total over the values it will be given.
    """

    __slots__ = ('_f',)

    _f: Callable[[A], O]

    def __init__(self, f: Callable[[A], O]) -> None:
        if not callable(f):
            raise TypeError(f'expected a callable, got {type(f).__name__}')
        self._f = f

    @override
    def encode(self, value: A, /) -> O:
        return self._f(value)

    def __repr__(self) -> str:
        return f'from_function({self._f!r})'


def identity() -> Encoder[A, A]:
    return IdentityEncoder()


def from_function(f: Callable[[A], O], /) -> Encoder[O, A]:
    """ Make an encoder out of a function.

    >>> from_function(str).encode(42)
    '42'
    """
    return FunctionEncoder(f)


def check_encoder(value: Any, /, *, name: str) -> None:
    """ Raise a TypeError if the given combinator argument is not an encoder.
    """
    if not isinstance(value, Encoder):
        raise TypeError(f'{name} must be an Encoder, got {type(value).__name__}')
