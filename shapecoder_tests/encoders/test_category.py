from typing import Any

import pytest

from shapecoder.encoders import (
    ComposeEncoder,
    ContramapEncoder,
    Encoder,
    SupportsCompose,
    SupportsContramap,
    array,
    category_encoder,
    compose,
    contramap,
    contravariant_encoder,
    from_function,
    identity,
    nullable,
    shape,
)

ENCODERS: list[Encoder[Any, Any]] = [
    identity(),
    from_function(repr),
    from_function(lambda v: [v, v]),
    nullable(from_function(str)),
]

VALUES: list[Any] = [None, 0, -3, 'abc', [1, 'x'], {'k': None}]


@pytest.mark.parametrize('encoder', ENCODERS)
@pytest.mark.parametrize('value', VALUES)
def test_compose_with_identity_is_a_no_op(encoder: Encoder[Any, Any], value: Any) -> None:
    assert compose(identity())(encoder).encode(value) == encoder.encode(value)
    assert compose(encoder)(identity()).encode(value) == encoder.encode(value)


@pytest.mark.parametrize('value', VALUES)
def test_compose_is_associative(value: Any) -> None:
    e1 = from_function(lambda v: ('e1', v))
    e2 = from_function(lambda v: ('e2', v))
    e3 = from_function(lambda v: ('e3', v))
    left = compose(compose(e1)(e2))(e3)
    right = compose(e1)(compose(e2)(e3))
    assert left.encode(value) == right.encode(value) == ('e1', ('e2', ('e3', value)))


@pytest.mark.parametrize('encoder', ENCODERS)
@pytest.mark.parametrize('value', VALUES)
def test_contramap_identity_is_a_no_op(encoder: Encoder[Any, Any], value: Any) -> None:
    assert contramap(lambda a: a)(encoder).encode(value) == encoder.encode(value)


def test_contramap_composition() -> None:
    encoder = from_function(str)

    def f(n: int) -> int:
        return n + 1

    def g(n: int) -> int:
        return n * 10

    # contramap(g) after contramap(f) is the same as contramap(f after g)
    assert encoder.contramap(f).contramap(g).encode(2) == encoder.contramap(lambda n: f(g(n))).encode(2) == '21'


def test_contramap_preprocesses_the_input() -> None:
    point = shape({'x': identity(), 'y': identity()})
    from_pair = contramap(lambda pair: {'x': pair[0], 'y': pair[1]})(point)
    assert isinstance(from_pair, ContramapEncoder)
    assert from_pair.encode((1, 2)) == {'x': 1, 'y': 2}


def test_compose_chains_encoders() -> None:
    as_str = from_function(str)
    lengths = array(from_function(len))
    encoder = compose(as_str)(lengths)
    assert isinstance(encoder, ComposeEncoder)
    assert encoder.encode(['a', 'bb']) == '[1, 2]'


def test_method_and_curried_forms_agree() -> None:
    outer = from_function(str)
    inner = from_function(len)
    assert outer.compose(inner).encode('abc') == compose(outer)(inner).encode('abc') == '3'
    assert outer.contramap(len).encode('abc') == contramap(len)(outer).encode('abc') == '3'


def test_capabilities_as_values() -> None:
    encoder = from_function(str)
    assert contravariant_encoder.contramap(encoder, len).encode('abcd') == '4'
    assert category_encoder.compose(from_function(len), encoder).encode('ab') == '2'
    assert category_encoder.id().encode('same') == 'same'


def test_encoders_support_the_capability_protocols() -> None:
    encoder = from_function(str)
    assert isinstance(encoder, SupportsContramap)
    assert isinstance(encoder, SupportsCompose)


def test_combinators_reject_non_encoders() -> None:
    with pytest.raises(TypeError):
        compose(str)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        identity().compose(str)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        identity().contramap(42)  # type: ignore[arg-type]
