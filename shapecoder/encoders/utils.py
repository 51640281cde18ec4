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

from collections.abc import Mapping
from typing import Any


def has_field(value: Any, key: str, /) -> bool:
    """ Whether `key` is present in `value`, by key for mappings and by attribute for anything else.

    Presence is what matters, not the value: a key holding `None` or `UNDEFINED` is present.
    """
    if isinstance(value, Mapping):
        return key in value
    return hasattr(value, key)


def get_field(value: Any, key: str, /) -> Any:
    """ Read `key` from `value`, by key for mappings and by attribute for anything else (dataclasses, named tuples...).
    """
    if isinstance(value, Mapping):
        return value[key]
    return getattr(value, key)
