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

"""
This package holds the encoders and the combinators that build them.

An encoder is an immutable object with an `encode(value)` method that turns a value into its representation, usually a
JSON-like value. Combinators build encoders out of other encoders, following the shape of the data: `shape` for
objects, `array` for lists, `sum_` for tagged unions, `lazy` for recursive structures, and so on.

The general organization is that each submodule deals with a single combinator and looks like this:

    class XEncoder(Encoder[Output, Input]):
        def __init__(self, ...child encoders and config params...) -> None:
            ...

        def encode(self, value: Input, /) -> Output:
            ...

    def x(...) -> Encoder[Output, Input]:
        return XEncoder(...)

Child encoders are checked when a combinator is built, encoding itself never validates the value.
"""

from shapecoder.encoders.array import ArrayEncoder, array
from shapecoder.encoders.category import (
    ComposeEncoder,
    ContramapEncoder,
    SupportsCompose,
    SupportsContramap,
    category_encoder,
    compose,
    contramap,
    contravariant_encoder,
)
from shapecoder.encoders.dictionary import DictionaryEncoder, dictionary
from shapecoder.encoders.encoder import Encoder, FunctionEncoder, IdentityEncoder, from_function, identity
from shapecoder.encoders.intersection import IntersectionEncoder, intersection
from shapecoder.encoders.lazy import LazyEncoder, lazy
from shapecoder.encoders.nullable import NullableEncoder, nullable
from shapecoder.encoders.shape import PartialShapeEncoder, ShapeEncoder, partial_shape, shape
from shapecoder.encoders.sum import SumEncoder, sum_
from shapecoder.encoders.tuple import TupleEncoder, tuple_
from shapecoder.types import UNDEFINED

__all__ = [
    'UNDEFINED',
    'ArrayEncoder',
    'ComposeEncoder',
    'ContramapEncoder',
    'DictionaryEncoder',
    'Encoder',
    'FunctionEncoder',
    'IdentityEncoder',
    'IntersectionEncoder',
    'LazyEncoder',
    'NullableEncoder',
    'PartialShapeEncoder',
    'ShapeEncoder',
    'SumEncoder',
    'SupportsCompose',
    'SupportsContramap',
    'TupleEncoder',
    'array',
    'category_encoder',
    'compose',
    'contramap',
    'contravariant_encoder',
    'dictionary',
    'from_function',
    'identity',
    'intersection',
    'lazy',
    'nullable',
    'partial_shape',
    'shape',
    'sum_',
    'tuple_',
]
