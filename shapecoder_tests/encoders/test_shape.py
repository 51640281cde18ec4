from dataclasses import dataclass
from typing import Any, NamedTuple

import pytest

from shapecoder.encoders import UNDEFINED, from_function, identity, partial_shape, shape


@dataclass(frozen=True)
class Point:
    x: int
    y: int


class Pair(NamedTuple):
    first: str
    second: str


def test_shape_emits_exactly_the_declared_keys() -> None:
    encoder = shape({'a': identity(), 'b': identity()})
    assert encoder.encode({'a': 1, 'b': 2, 'c': 99}) == {'a': 1, 'b': 2}


def test_shape_never_reads_undeclared_keys() -> None:
    class Strict(dict):
        def __getitem__(self, key: Any) -> Any:
            if key not in ('a',):
                raise AssertionError(f'read {key!r}')
            return super().__getitem__(key)

    assert shape({'a': identity()}).encode(Strict(a=1, secret=2)) == {'a': 1}


def test_shape_follows_the_declaration_order() -> None:
    encoder = shape({'z': identity(), 'a': identity(), 'm': identity()})
    assert list(encoder.encode({'a': 1, 'm': 2, 'z': 3})) == ['z', 'a', 'm']


def test_shape_encodes_each_property() -> None:
    encoder = shape({'name': from_function(str.upper), 'age': from_function(str)})
    assert encoder.encode({'name': 'bob', 'age': 42}) == {'name': 'BOB', 'age': '42'}


def test_shape_returns_a_new_dict() -> None:
    value = {'a': 1}
    result = shape({'a': identity()}).encode(value)
    assert result == value
    assert result is not value


def test_shape_keeps_none_values() -> None:
    assert shape({'a': identity()}).encode({'a': None}) == {'a': None}


def test_shape_reads_attributes_of_non_mappings() -> None:
    assert shape({'x': identity(), 'y': from_function(str)}).encode(Point(1, 2)) == {'x': 1, 'y': '2'}
    assert shape({'second': identity()}).encode(Pair('a', 'b')) == {'second': 'b'}


def test_shape_is_not_affected_by_later_changes_to_the_properties() -> None:
    properties = {'a': identity()}
    encoder = shape(properties)
    properties['b'] = identity()
    assert encoder.encode({'a': 1, 'b': 2}) == {'a': 1}


def test_empty_shape() -> None:
    assert shape({}).encode({'a': 1}) == {}


def test_partial_shape_omits_missing_keys() -> None:
    assert partial_shape({'a': identity()}).encode({}) == {}


def test_partial_shape_keeps_undefined_keys() -> None:
    calls: list[Any] = []
    encoder = partial_shape({'a': from_function(lambda v: calls.append(v) or v)})
    result = encoder.encode({'a': UNDEFINED})
    assert result == {'a': UNDEFINED}
    assert result['a'] is UNDEFINED
    assert calls == []


def test_partial_shape_encodes_present_keys() -> None:
    encoder = partial_shape({'a': from_function(str), 'b': from_function(str), 'c': from_function(str)})
    assert encoder.encode({'c': 3, 'a': 1, 'extra': 0}) == {'a': '1', 'c': '3'}


@pytest.mark.parametrize('falsy', [None, 0, '', False, []])
def test_partial_shape_checks_presence_not_truthiness(falsy: Any) -> None:
    encoder = partial_shape({'a': from_function(lambda v: ('seen', v))})
    assert encoder.encode({'a': falsy}) == {'a': ('seen', falsy)}


def test_partial_shape_reads_attributes_of_non_mappings() -> None:
    assert partial_shape({'x': identity(), 'z': identity()}).encode(Point(1, 2)) == {'x': 1}


@pytest.mark.parametrize('properties', [
    {'a': str},
    {1: identity()},
    [('a', identity())],
])
def test_invalid_properties_are_rejected(properties: Any) -> None:
    with pytest.raises(TypeError):
        shape(properties)
    with pytest.raises(TypeError):
        partial_shape(properties)


def test_keys() -> None:
    assert shape({'a': identity(), 'b': identity()}).keys == ('a', 'b')  # type: ignore[attr-defined]
    assert partial_shape({'b': identity()}).keys == ('b',)  # type: ignore[attr-defined]
