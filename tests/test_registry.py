"""
Registry construction: one value per exact type, immutable once built.
"""
from __future__ import annotations

import pytest

from inject_kernel import Registry, must, new
from inject_kernel.di import DuplicateTypeError, Injection, InvocationError


class A(int):
    pass


class B(int):
    pass


def _identity(typ):
    def fn(x):
        return x

    fn.__annotations__ = {"x": typ}
    return fn


def test_new():
    di = new(A(0), B(1))
    assert isinstance(di, Registry)
    assert len(di._values) == 2


def test_new_catches_duplicate_types():
    with pytest.raises(DuplicateTypeError) as exc:
        new(A(0), A(1))
    err = exc.value
    assert err.first == 0 and err.second == 1
    assert str(err).startswith("cannot inject two values of the same type. first: 0 (")


@pytest.mark.parametrize(
    "values",
    [
        ("foo", "bar"),
        (A(0), "foo", B(1), A(2)),
        (1.5, [1], {"a": 1}, [2]),
        (None, None),
    ],
)
def test_duplicate_regardless_of_other_values(values):
    with pytest.raises(DuplicateTypeError):
        new(*values)


def test_first_conflict_wins():
    with pytest.raises(DuplicateTypeError) as exc:
        new(A(0), B(1), A(2), B(3))
    assert type(exc.value.second) is A
    assert (exc.value.first, exc.value.second) == (0, 2)


def test_named_types_are_distinct_from_underlying():
    values = (1, True, A(2), B(3), 4.0, "s", b"b")
    di = new(*values)
    for v in values:
        res, err = di.inject(_identity(type(v)))
        assert err is None
        assert res == v and type(res) is type(v)


def test_registration_order_is_irrelevant():
    first = new(A(0), B(1))
    second = new(B(1), A(0))

    def ab(a: A, b: B) -> str:
        return f"{a} {b}"

    assert first.inject(ab) == second.inject(ab) == Injection("0 1", None)


def test_registry_is_immutable():
    di = new(A(0))
    with pytest.raises(AttributeError):
        di.extra = 1
    with pytest.raises(AttributeError):
        del di._values
    with pytest.raises(TypeError):
        di._values[B] = B(1)


def test_shared_reference_not_copy():
    items: list = []
    di = new(items)

    def get(xs: list) -> list:
        return xs

    items.append(1)
    assert di.call(get) is items
    assert di.call(get) == [1]


def test_empty_registry_calls_zero_arg_functions():
    di = new()

    def hello() -> str:
        return "hello"

    assert di.call(hello) == "hello"


def test_repr_names_types():
    assert repr(new(A(0), "foo")) == "Registry(A, str)"


def test_must():
    assert must(Injection("ok", None)) == "ok"
    boom = InvocationError(ValueError("boom"))
    with pytest.raises(InvocationError):
        must(Injection("ignored", boom))
