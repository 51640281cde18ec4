from typing import Any

import pytest

from shapecoder.encoders import from_function, nullable


def test_none_is_encoded_as_none_without_calling_the_encoder() -> None:
    calls: list[Any] = []
    encoder = nullable(from_function(lambda v: calls.append(v) or v))
    assert encoder.encode(None) is None
    assert calls == []


@pytest.mark.parametrize('value', [0, '', False, [], {}, 'x', 3.5])
def test_other_values_are_delegated(value: Any) -> None:
    inner = from_function(lambda v: ('encoded', v))
    assert nullable(inner).encode(value) == inner.encode(value) == ('encoded', value)


def test_nested_nullable() -> None:
    encoder = nullable(nullable(from_function(str)))
    assert encoder.encode(None) is None
    assert encoder.encode(1) == '1'


def test_requires_an_encoder() -> None:
    with pytest.raises(TypeError):
        nullable(str)  # type: ignore[arg-type]
