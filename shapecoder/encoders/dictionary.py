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

from collections.abc import Mapping
from typing import TypeVar

from typing_extensions import override

from shapecoder.encoders.encoder import Encoder, check_encoder

K = TypeVar('K')
O = TypeVar('O')  # noqa: E741
A = TypeVar('A')


class DictionaryEncoder(Encoder[dict[K, O], Mapping[K, A]]):
    """ Encodes every value of a mapping with the same encoder, keys are kept as they are and in the same order.

    >>> from shapecoder.encoders.encoder import from_function
    >>> DictionaryEncoder(from_function(float)).encode({'x': 1, 'y': 2})
    {'x': 1.0, 'y': 2.0}
    """

    __slots__ = ('_codomain',)

    _codomain: Encoder[O, A]

    def __init__(self, codomain: Encoder[O, A]) -> None:
        check_encoder(codomain, name='codomain')
        self._codomain = codomain

    @override
    def encode(self, value: Mapping[K, A], /) -> dict[K, O]:
        return {key: self._codomain.encode(item) for key, item in value.items()}

    def __repr__(self) -> str:
        return f'dictionary({self._codomain!r})'


def dictionary(codomain: Encoder[O, A], /) -> Encoder[dict[K, O], Mapping[K, A]]:
    return DictionaryEncoder(codomain)
