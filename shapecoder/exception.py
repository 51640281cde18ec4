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

from collections.abc import Hashable, Iterable
from typing import Any


class ShapecoderError(Exception):
    """Base class for exceptions in shapecoder."""
    pass


class UnknownTagError(ShapecoderError, KeyError):
    """Raised when a sum encoder receives a value whose discriminant is not one of its members.

    This is a contract violation by the caller: the member table must cover every variant that can be encoded.
    """

    def __init__(self, tag: str, value: Any, known: Iterable[Hashable]) -> None:
        self.tag = tag
        self.value = value
        self.known = tuple(known)
        super().__init__(tag, value, self.known)

    def __str__(self) -> str:
        return f'unknown value {self.value!r} for tag {self.tag!r}, expected one of {list(self.known)!r}'


class LazyCycleError(ShapecoderError, RecursionError):
    """Raised when building a lazy encoder requires the same lazy encoder to be already built."""
    pass


class SettingsError(ShapecoderError):
    """Raised when the settings cannot be loaded or are loaded twice from different sources."""
    pass
