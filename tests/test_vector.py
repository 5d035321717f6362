import pytest

from alpha.vector import EPSILON, Vector, float_close


def test_equals():
    v1 = Vector(1, 1, 1)
    v2 = Vector(1, 1, 1)
    equal = v1 == v2
    assert equal is True
    assert (v2.x, v2.y, v2.z) == (1, 1, 1)


def test_not_equal():
    assert not (Vector(1, 1, 1) == Vector(1, 1, 2))


def test_is_close():
    tenth = EPSILON / 10
    v2 = Vector(1 + tenth, 1 + tenth, 1 + tenth)
    assert Vector(1, 1, 1).is_close(v2)


def test_is_not_close():
    assert not Vector(1, 1, 1).is_close(Vector(1, 1, 1 + EPSILON * 10))


def test_float_close():
    assert float_close(1.0, 1.0 + EPSILON / 2)
    assert not float_close(1.0, 1.0 + EPSILON * 2)


def test_add():
    assert Vector(1, 1, 1) + Vector(2, 2, 2) == Vector(3, 3, 3)


def test_add_leaves_operands_unchanged():
    v1 = Vector(1, 1, 1)
    _ = v1 + Vector(2, 2, 2)
    assert v1 == Vector(1, 1, 1)


def test_subtract():
    assert Vector(3, 3, 3) - Vector(2, 2, 2) == Vector(1, 1, 1)


def test_length_squared():
    assert Vector(2, 3, 6).length_squared() == 49


def test_length():
    assert Vector(2, 3, 6).length() == 7


def test_dot_product():
    assert Vector(1, 1, 1).dot(Vector(1, 1, 1)) == 3


@pytest.mark.parametrize(
    "start, method, expected",
    [
        (Vector(0, 1, 0), "rotate_x", Vector(0, 0, 1)),
        (Vector(0, 0, 1), "rotate_y", Vector(1, 0, 0)),
        (Vector(1, 0, 0), "rotate_z", Vector(0, 1, 0)),
    ],
)
def test_rotations(start, method, expected):
    rotated = getattr(start, method)(90)
    assert rotated.is_close(expected)


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y", "rotate_z"])
def test_rotation_preserves_length(method):
    v = Vector(2, 3, 6)
    assert float_close(getattr(v, method)(37).length(), v.length())


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y", "rotate_z"])
def test_rotation_round_trip(method):
    v = Vector(1.5, -2, 0.25)
    assert getattr(getattr(v, method)(30), method)(-30).is_close(v)


def test_is_parallel():
    assert Vector(1, 1, 1).is_parallel(Vector(2, 2, 2))


def test_opposite_is_not_parallel():
    assert not Vector(1, 1, 1).is_parallel(Vector(-1, -1, -1))


def test_normalise():
    v1 = Vector(1, 1, 1)
    normalised = v1.normalised()
    assert v1.is_parallel(normalised) and float_close(normalised.length(), 1)
    assert normalised.is_parallel(Vector(2, 2, 2))


def test_normalise_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector(0, 0, 0).normalised()


def test_multiply():
    assert Vector(1, 1, 1) * 2 == Vector(2, 2, 2)


def test_multiply_reflected():
    assert 2 * Vector(1, 1, 1) == Vector(2, 2, 2)


def test_multiply_by_vector_is_type_error():
    with pytest.raises(TypeError):
        Vector(1, 1, 1) * Vector(1, 1, 1)


def test_cross_product():
    assert Vector(1, 0, 0).cross(Vector(0, 1, 0)) == Vector(0, 0, 1)


def test_cross_product_is_perpendicular():
    a = Vector(1, 2, 3)
    b = Vector(-4, 0.5, 2)
    c = a.cross(b)
    assert float_close(c.dot(a), 0)
    assert float_close(c.dot(b), 0)


def test_vector_is_immutable():
    v = Vector(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5
    assert v.x == 1
    assert v == Vector(1, 2, 3)