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

from typing import TypeVar

from typing_extensions import override

from shapecoder.encoders.encoder import Encoder, check_encoder

O = TypeVar('O')  # noqa: E741
A = TypeVar('A')


class NullableEncoder(Encoder[O | None, A | None]):
    """ Encodes `None` as `None` and delegates any other value to the wrapped encoder.
    """

    __slots__ = ('_or',)

    _or: Encoder[O, A]

    def __init__(self, or_: Encoder[O, A]) -> None:
        check_encoder(or_, name='or_')
        self._or = or_

    @override
    def encode(self, value: A | None, /) -> O | None:
        if value is None:
            return None
        return self._or.encode(value)

    def __repr__(self) -> str:
        return f'nullable({self._or!r})'


def nullable(or_: Encoder[O, A], /) -> Encoder[O | None, A | None]:
    return NullableEncoder(or_)
