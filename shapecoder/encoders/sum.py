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

from collections.abc import Hashable, Mapping
from typing import Any, Callable

from structlog import get_logger
from typing_extensions import override

from shapecoder.encoders.encoder import Encoder, check_encoder
from shapecoder.encoders.utils import get_field, has_field
from shapecoder.exception import UnknownTagError
from shapecoder.types import UNDEFINED

logger = get_logger()

Members = Mapping[Hashable, Encoder[Any, Any]]


class SumEncoder(Encoder[Any, Any]):
    """ Encodes a tagged union: the value of the `tag` field selects which member encodes the whole value.

    The members must cover every tag value that can be encoded, a value with an unknown tag (or without the tag field)
    results in an `UnknownTagError`. Tags are matched by equality, except that `bool` tags only match `bool` values: a
    member keyed by `1` does not encode a value tagged `True`.

    >>> from shapecoder.encoders.encoder import from_function, identity
    >>> from shapecoder.encoders.shape import shape
    >>> shapes = SumEncoder('kind', {
    ...     'circle': shape({'kind': identity(), 'radius': from_function(float)}),
    ...     'square': shape({'kind': identity(), 'side': from_function(float)}),
    ... })
    >>> shapes.encode({'kind': 'square', 'side': 2})
    {'kind': 'square', 'side': 2.0}
    """

    __slots__ = ('_tag', '_members', '_log')

    _tag: str
    # tag value -> (tag value as given, member), the original key tells `1` and `True` apart
    _members: dict[Hashable, tuple[Hashable, Encoder[Any, Any]]]

    def __init__(self, tag: str, members: Members) -> None:
        if not isinstance(tag, str):
            raise TypeError(f'tag must be a str, got {type(tag).__name__}')
        if not isinstance(members, Mapping):
            raise TypeError(f'members must be a mapping, got {type(members).__name__}')
        if not members:
            from shapecoder.conf.get_settings import get_global_settings
            if not get_global_settings().SUM_ALLOW_EMPTY:
                raise ValueError(f'sum over {tag!r} must have at least one member')
        for tag_value, member in members.items():
            check_encoder(member, name=f'member {tag_value!r}')
        self._tag = tag
        self._members = {tag_value: (tag_value, member) for tag_value, member in members.items()}
        self._log = logger.new(tag=tag)

    @property
    def tag(self) -> str:
        return self._tag

    @override
    def encode(self, value: Any, /) -> Any:
        tag_value = get_field(value, self._tag) if has_field(value, self._tag) else UNDEFINED
        member = self._find_member(tag_value)
        if member is None:
            self._log.debug('unknown tag value', tag_value=tag_value)
            raise UnknownTagError(self._tag, tag_value, self._members)
        return member.encode(value)

    def _find_member(self, tag_value: Any) -> Encoder[Any, Any] | None:
        if tag_value is UNDEFINED:
            return None
        try:
            found = self._members.get(tag_value)
        except TypeError:
            # unhashable values can't be a member's tag
            return None
        if found is None:
            return None
        key, member = found
        if isinstance(key, bool) != isinstance(tag_value, bool):
            return None
        return member

    def __repr__(self) -> str:
        members = {key: member for key, member in self._members.values()}
        return f'sum_({self._tag!r})({members!r})'


def sum_(tag: str, /) -> Callable[[Members], Encoder[Any, Any]]:
    """ Curried `SumEncoder`: `sum_(tag)(members)`.
    """
    def _sum(members: Members, /) -> Encoder[Any, Any]:
        return SumEncoder(tag, members)
    return _sum
