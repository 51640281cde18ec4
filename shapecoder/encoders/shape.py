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
Object shaped encoders, each declared key is encoded with its own encoder and the result is a new `dict`.

A `shape` always outputs every declared key and never looks at keys that weren't declared:

>>> from shapecoder.encoders.encoder import from_function, identity
>>> person = shape({'name': identity(), 'age': from_function(str)})
>>> person.encode({'name': 'alice', 'age': 30, 'password': 'secret'})
{'name': 'alice', 'age': '30'}

A `partial_shape` only outputs the declared keys that are present in the value. A key that is present but holds
`UNDEFINED` is kept as is, without calling its encoder:

>>> patch = partial_shape({'name': identity(), 'age': from_function(str)})
>>> patch.encode({'age': 31})
{'age': '31'}
>>> patch.encode({'name': UNDEFINED})
{'name': UNDEFINED}
>>> patch.encode({})
{}

Values can be mappings or any object with the declared keys as attributes (dataclasses, named tuples, ...).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from typing_extensions import override

from shapecoder.encoders.encoder import Encoder, check_encoder
from shapecoder.encoders.utils import get_field, has_field
from shapecoder.types import UNDEFINED

Properties = Mapping[str, Encoder[Any, Any]]


def _copy_properties(properties: Properties) -> dict[str, Encoder[Any, Any]]:
    if not isinstance(properties, Mapping):
        raise TypeError(f'properties must be a mapping, got {type(properties).__name__}')
    for key, encoder in properties.items():
        if not isinstance(key, str):
            raise TypeError(f'property names must be str, got {key!r}')
        check_encoder(encoder, name=f'property {key!r}')
    return dict(properties)


class ShapeEncoder(Encoder[dict[str, Any], Any]):
    """ Encodes an object with a fixed set of keys, all of them are required.
    """

    __slots__ = ('_properties',)

    _properties: dict[str, Encoder[Any, Any]]

    def __init__(self, properties: Properties) -> None:
        self._properties = _copy_properties(properties)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(self._properties)

    @override
    def encode(self, value: Any, /) -> dict[str, Any]:
        return {key: encoder.encode(get_field(value, key)) for key, encoder in self._properties.items()}

    def __repr__(self) -> str:
        return f'shape({self._properties!r})'


class PartialShapeEncoder(Encoder[dict[str, Any], Any]):
    """ Encodes an object with a fixed set of keys, all of them are optional.
    """

    __slots__ = ('_properties',)

    _properties: dict[str, Encoder[Any, Any]]

    def __init__(self, properties: Properties) -> None:
        self._properties = _copy_properties(properties)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(self._properties)

    @override
    def encode(self, value: Any, /) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, encoder in self._properties.items():
            # missing keys are left out of the result
            if not has_field(value, key):
                continue
            field = get_field(value, key)
            # undefined keys are kept, not stripped
            result[key] = UNDEFINED if field is UNDEFINED else encoder.encode(field)
        return result

    def __repr__(self) -> str:
        return f'partial_shape({self._properties!r})'


def shape(properties: Properties, /) -> Encoder[dict[str, Any], Any]:
    return ShapeEncoder(properties)


def partial_shape(properties: Properties, /) -> Encoder[dict[str, Any], Any]:
    return PartialShapeEncoder(properties)
