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
Structural merge of encoded fragments.

`deep_merge` alters its first argument and is meant for plain configuration dicts. `merge_deep` and `merge_shallow` are
pure and are the merge functions used by intersection encoders: they never modify their arguments, so fragments that
share objects with the encoded value (as the output of an identity encoder does) are safe to merge.

>>> merge_deep({'a': 1, 'b': {'c': 2}}, {'b': {'d': 3}, 'e': 4})
{'a': 1, 'b': {'c': 2, 'd': 3}, 'e': 4}
>>> merge_shallow({'a': 1, 'b': {'c': 2}}, {'b': {'d': 3}, 'e': 4})
{'a': 1, 'b': {'d': 3}, 'e': 4}
>>> merge_deep({'a': 1}, [1, 2])
[1, 2]
"""

from collections.abc import Mapping
from typing import Any, Callable, TypeAlias

MergeFunction: TypeAlias = Callable[[Any, Any], Any]


def deep_merge(first: dict, second: dict) -> None:
    """
    Recursively merges two dicts, altering the first one in place.

    >>> dict1 = dict(a=1, b=dict(c=2, d=3), e=dict(f=4))
    >>> dict2 = dict(b=dict(d=5, e=6), e=7)
    >>> deep_merge(dict1, dict2)
    >>> dict1 == dict(a=1, b=dict(c=2, d=5, e=6), e=7)
    True
    """
    for key in second:
        if key in first and isinstance(first[key], dict) and isinstance(second[key], dict):
            deep_merge(first[key], second[key])
        else:
            first[key] = second[key]


def merge_deep(first: Any, second: Any) -> Any:
    """ Return a new dict with the keys of both mappings, merging colliding mappings recursively.

    On any other collision the value from `second` wins. If either argument is not a mapping, `second` is returned.
    """
    if not isinstance(first, Mapping) or not isinstance(second, Mapping):
        return second
    result = dict(first)
    for key, value in second.items():
        if key in result:
            result[key] = merge_deep(result[key], value)
        else:
            result[key] = value
    return result


def merge_shallow(first: Any, second: Any) -> Any:
    """ Return a new dict with the keys of both mappings, values from `second` win on collisions.

    If either argument is not a mapping, `second` is returned.
    """
    if not isinstance(first, Mapping) or not isinstance(second, Mapping):
        return second
    return {**first, **second}
