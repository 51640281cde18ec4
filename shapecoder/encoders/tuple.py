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

from collections.abc import Iterable, Sequence
from typing import Any

from typing_extensions import override

from shapecoder.encoders.encoder import Encoder, check_encoder


# XXX: we can't usefully describe the tuple type
class TupleEncoder(Encoder[list[Any], Sequence[Any]]):
    """ Encodes a fixed size sequence, each position with its own encoder.

    The result is a list, which is how JSON represents tuples. Only the first `arity` positions of the value are read.

    >>> from shapecoder.encoders.encoder import from_function, identity
    >>> TupleEncoder([identity(), from_function(str)]).encode((1, 2))
    [1, '2']
    """

    __slots__ = ('_components',)

    _components: tuple[Encoder[Any, Any], ...]

    def __init__(self, components: Iterable[Encoder[Any, Any]]) -> None:
        self._components = tuple(components)
        for i, component in enumerate(self._components):
            check_encoder(component, name=f'component {i}')

    @property
    def arity(self) -> int:
        return len(self._components)

    @override
    def encode(self, value: Sequence[Any], /) -> list[Any]:
        return [component.encode(value[i]) for i, component in enumerate(self._components)]

    def __repr__(self) -> str:
        return f'tuple_({", ".join(map(repr, self._components))})'


def tuple_(*components: Encoder[Any, Any]) -> Encoder[list[Any], Sequence[Any]]:
    return TupleEncoder(components)
