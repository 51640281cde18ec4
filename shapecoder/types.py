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

from typing import Any, Final, TypeAlias

# These are all the values that can be observed when parsing a JSON with the builtin json module, it is the usual target
# representation of an encoder, but encoders are not restricted to it
Json: TypeAlias = dict | list | str | int | float | bool | None


class _Undefined:
    """ Marker for a key that is present but holds no value.

    Python only has one null (`None`), which encoders treat as a regular value. `UNDEFINED` is what a partial shape
    keeps untouched when a key is present but "undefined", as opposed to a key that is missing altogether.
    """

    __slots__ = ()

    _instance: Any = None

    def __new__(cls) -> '_Undefined':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return 'UNDEFINED'


UNDEFINED: Final = _Undefined()
