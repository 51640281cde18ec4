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

from collections.abc import Iterable
from typing import TypeVar

from typing_extensions import override

from shapecoder.encoders.encoder import Encoder, check_encoder

O = TypeVar('O')  # noqa: E741
A = TypeVar('A')


class ArrayEncoder(Encoder[list[O], Iterable[A]]):
    """ Encodes every item with the same encoder, the result is a list with the same length and order.

    Any iterable can be encoded (lists, tuples, sets, generators...), a set will be encoded in its iteration order.
    """

    __slots__ = ('_items',)

    _items: Encoder[O, A]

    def __init__(self, items: Encoder[O, A]) -> None:
        check_encoder(items, name='items')
        self._items = items

    @override
    def encode(self, value: Iterable[A], /) -> list[O]:
        return [self._items.encode(item) for item in value]

    def __repr__(self) -> str:
        return f'array({self._items!r})'


def array(items: Encoder[O, A], /) -> Encoder[list[O], Iterable[A]]:
    return ArrayEncoder(items)
