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
An intersection encodes the same value with two encoders and merges both results into one.

Unless a merge function is given, the one chosen by the `INTERSECTION_MERGE` setting is used, which by default merges
nested mappings recursively and lets the right side win on any other collision:

>>> from shapecoder.encoders.encoder import from_function, identity
>>> from shapecoder.encoders.shape import shape
>>> from shapecoder.utils.dict import merge_deep, merge_shallow
>>> named = shape({'name': identity(), 'meta': shape({'source': identity()})})
>>> dated = shape({'year': from_function(str), 'meta': shape({'checked': identity()})})
>>> value = {'name': 'x', 'year': 1999, 'meta': {'source': 'web', 'checked': True}}
>>> intersection(named, dated, merge=merge_deep).encode(value)
{'name': 'x', 'meta': {'source': 'web', 'checked': True}, 'year': '1999'}
>>> intersection(named, dated, merge=merge_shallow).encode(value)
{'name': 'x', 'meta': {'checked': True}, 'year': '1999'}
"""

from __future__ import annotations

from typing import Any, Optional

from typing_extensions import override

from shapecoder.encoders.encoder import Encoder, check_encoder
from shapecoder.utils.dict import MergeFunction


class IntersectionEncoder(Encoder[Any, Any]):
    """ Feeds the same value to `left` and `right` and merges their results with `merge(left_result, right_result)`.

    The merge function must not modify its arguments, the results of both sides may share objects with the value.
    """

    __slots__ = ('_left', '_right', '_merge')

    _left: Encoder[Any, Any]
    _right: Encoder[Any, Any]
    _merge: MergeFunction

    def __init__(self, left: Encoder[Any, Any], right: Encoder[Any, Any], *,
                 merge: Optional[MergeFunction] = None) -> None:
        check_encoder(left, name='left')
        check_encoder(right, name='right')
        if merge is None:
            from shapecoder.conf.get_settings import get_global_settings
            merge = get_global_settings().INTERSECTION_MERGE.merge_function()
        elif not callable(merge):
            raise TypeError(f'merge must be callable, got {type(merge).__name__}')
        self._left = left
        self._right = right
        self._merge = merge

    @override
    def encode(self, value: Any, /) -> Any:
        return self._merge(self._left.encode(value), self._right.encode(value))

    def __repr__(self) -> str:
        return f'intersection({self._left!r}, {self._right!r})'


def intersection(left: Encoder[Any, Any], right: Encoder[Any, Any], /, *,
                 merge: Optional[MergeFunction] = None) -> Encoder[Any, Any]:
    return IntersectionEncoder(left, right, merge=merge)
