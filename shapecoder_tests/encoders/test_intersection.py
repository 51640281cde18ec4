from pathlib import Path
from typing import Any

import pytest

from shapecoder.conf.get_settings import SETTINGS_ENV_VAR
from shapecoder.encoders import from_function, identity, intersection, partial_shape, shape
from shapecoder.utils.dict import merge_shallow


def test_output_has_the_keys_of_both_sides() -> None:
    left = shape({'a': identity()})
    right = shape({'b': from_function(str)})
    value = {'a': 1, 'b': 2, 'c': 3}
    result = intersection(left, right).encode(value)
    assert result == {'a': 1, 'b': '2'}
    assert set(result) == set(left.encode(value)) | set(right.encode(value))


def test_both_sides_receive_the_same_value() -> None:
    seen: list[Any] = []

    def record(tag: str) -> Any:
        return from_function(lambda v: seen.append((tag, v)) or {tag: True})

    value = {'x': 1}
    assert intersection(record('l'), record('r')).encode(value) == {'l': True, 'r': True}
    assert seen == [('l', value), ('r', value)]


def test_default_merge_is_deep() -> None:
    left = shape({'meta': shape({'a': identity()})})
    right = shape({'meta': shape({'b': identity()})})
    value = {'meta': {'a': 1, 'b': 2}}
    assert intersection(left, right).encode(value) == {'meta': {'a': 1, 'b': 2}}


def test_right_side_wins_on_scalar_collisions() -> None:
    left = shape({'a': from_function(lambda v: 'left')})
    right = shape({'a': from_function(lambda v: 'right')})
    assert intersection(left, right).encode({'a': 0}) == {'a': 'right'}


def test_explicit_merge_function() -> None:
    left = shape({'meta': shape({'a': identity()})})
    right = shape({'meta': shape({'b': identity()})})
    value = {'meta': {'a': 1, 'b': 2}}
    assert intersection(left, right, merge=merge_shallow).encode(value) == {'meta': {'b': 2}}
    assert intersection(left, right, merge=lambda x, y: [x, y]).encode(value) == [
        {'meta': {'a': 1}},
        {'meta': {'b': 2}},
    ]


def test_merge_strategy_from_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = tmp_path / 'settings.yml'
    config.write_text('INTERSECTION_MERGE: shallow\n')
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(config))

    left = shape({'meta': shape({'a': identity()})})
    right = shape({'meta': shape({'b': identity()})})
    assert intersection(left, right).encode({'meta': {'a': 1, 'b': 2}}) == {'meta': {'b': 2}}


def test_the_encoded_value_is_not_modified() -> None:
    value = {'a': 1, 'nested': {'x': 1, 'y': 2}}
    # identity on the left shares its output with the value itself, merging must not touch it
    encoder = intersection(identity(), partial_shape({'nested': shape({'y': from_function(str)})}))
    assert encoder.encode(value) == {'a': 1, 'nested': {'x': 1, 'y': '2'}}
    assert value == {'a': 1, 'nested': {'x': 1, 'y': 2}}


def test_intersections_nest() -> None:
    encoder = intersection(
        intersection(shape({'a': identity()}), shape({'b': identity()})),
        shape({'c': identity()}),
    )
    assert encoder.encode({'a': 1, 'b': 2, 'c': 3, 'd': 4}) == {'a': 1, 'b': 2, 'c': 3}


def test_invalid_arguments() -> None:
    with pytest.raises(TypeError):
        intersection(identity(), {})  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        intersection(identity(), identity(), merge='deep')  # type: ignore[arg-type]
