import math

import pytest

from asteroids.vector import Vector


def near(value, tolerance=1e-5):
    return pytest.approx(value, abs=tolerance)


def test_list_initialization_2d():
    vector = Vector(1.0, 0.0)
    assert vector[0] == near(1.0)
    assert vector[1] == near(0.0)


def test_list_initialization_3d():
    vector = Vector(1.0, 0.0, 5.0)
    assert list(vector) == [near(1.0), near(0.0), near(5.0)]


@pytest.mark.parametrize(
    "values",
    [(1.0, 0.0, 5.0, -5.0), (1.0, 2.0, 3.0, 4.0)],
)
def test_list_initialization_4d(values):
    vector = Vector(*values)
    assert len(vector) == 4
    for i, expected in enumerate(values):
        assert vector[i] == near(expected)


def test_filled_with_too_few_values_repeats_last():
    vector = Vector.filled(4, [1.0, 2.0, 3.0])
    assert list(vector) == [near(1.0), near(2.0), near(3.0), near(3.0)]


def test_filled_with_no_values_is_null_vector():
    vector = Vector.filled(4)
    assert list(vector) == [0.0, 0.0, 0.0, 0.0]


def test_filled_with_too_many_values_raises():
    with pytest.raises(ValueError):
        Vector.filled(2, [1.0, 2.0, 3.0])


def test_empty_vector_raises():
    with pytest.raises(ValueError):
        Vector()


def test_unit_vector_with_angle_zero():
    vector = Vector.from_angle(0.0)
    assert vector[0] == near(1.0)
    assert vector[1] == near(0.0)


def test_unit_vector_with_angle_90():
    vector = Vector.from_angle(math.pi / 2.0)
    assert vector[0] == near(0.0)
    assert vector[1] == near(1.0)


def test_unit_vector_in_three_dimensions():
    vector = Vector.from_angle(0.0, 3)
    assert list(vector) == [near(1.0), near(0.0), near(0.0)]


def test_copy():
    vector = Vector(1.0, 0.0)
    copy = vector.copy()
    assert copy[0] == near(1.0)
    assert copy[1] == near(0.0)
    copy[0] = 7.0
    assert vector[0] == near(1.0)


@pytest.mark.parametrize(
    "values, expected",
    [
        ((2.0, 2.0), 8.0),
        ((4.0, 0.0, 3.0), 25.0),
        ((0.0, 0.0, 0.0), 0.0),
        ((-1.0, -1.0), 2.0),
        ((3.0, -4.0), 25.0),
        ((-100.0, -1000.0, 10.0), 1010100.0),
        ((1e6, 1e6), 2e12),
        ((1e-6, 1e-6), 2e-12),
        ((1, 2, 3, 4), 30.0),
    ],
)
def test_square_of_length(values, expected):
    assert Vector(*values).square_of_length() == near(expected)


@pytest.mark.parametrize(
    "values, expected",
    [
        ((-3.0, 4.0), 5.0),
        ((0.0, 0.0), 0.0),
        ((-1.0, -1.0), math.sqrt(2.0)),
        ((3.0, -4.0), 5.0),
        ((1e6, 1e6), math.sqrt(2e12)),
        ((1e-6, 1e-6), math.sqrt(2e-12)),
        ((-3.0, 4.0, 1, 1), 5.196152422),
        ((0.0, -4.0, 3.0), 5.0),
    ],
)
def test_length(values, expected):
    assert Vector(*values).length() == near(expected)


@pytest.mark.parametrize(
    "values",
    [(-3.0, 4.0), (-3.0, 4.0, 7.8), (-3.5, 7.5, 0.001, 4.0)],
)
def test_normalize(values):
    vector = Vector(*values)
    vector.normalize()
    assert vector.length() == near(1.0)


def test_get_reflective_1():
    reflective = Vector(1.0, -1.0).get_reflective(Vector(0.0, 1.0))
    assert reflective[0] == near(1.0)
    assert reflective[1] == near(1.0)


def test_get_reflective_2():
    normal = Vector(1.0, 1.0)
    normal.normalize()
    reflective = Vector(0.0, -1.0).get_reflective(normal)
    assert reflective[0] == near(1.0)
    assert reflective[1] == near(0.0)


def test_get_reflective_3d():
    reflective = Vector(0.0, 1.0, -1.0).get_reflective(Vector(0.0, 0.0, 1.0))
    assert list(reflective) == [near(0.0), near(1.0), near(1.0)]


@pytest.mark.parametrize(
    "vector, expected",
    [
        (Vector(0.0, 1.0), math.pi / 2.0),
        (Vector(-1.0, 0.0), math.pi),
        (Vector(0.0, -1.0), -math.pi / 2.0),
        (Vector.from_angle(0.0), 0.0),
    ],
)
def test_angle(vector, expected):
    assert vector.angle(0, 1) == near(expected)


def test_sums_two_vectors():
    vector = Vector(1.0, 0.0)
    addend = Vector(-2.0, 1.0)
    total = vector + addend
    assert list(vector) == [near(1.0), near(0.0)]
    assert list(total) == [near(-1.0), near(1.0)]
    assert list(addend) == [near(-2.0), near(1.0)]


def test_sums_two_vectors_3d():
    total = Vector(0.0, 1.0, 0.0) + Vector(0.0, -2.0, 1.0)
    assert list(total) == [near(0.0), near(-1.0), near(1.0)]


def test_add_to_vector():
    vector = Vector(0.1, 0.5)
    vector += Vector(0.0, 0.5)
    assert vector[0] == near(0.1)
    assert vector[1] == near(1.0)


def test_subtract_from_vector():
    vector = Vector(3.0, 0.0, 2.0)
    vector -= Vector(1.0, 0.0, 4.0)
    assert vector == Vector(2.0, 0.0, -2.0)


def test_negation():
    assert -Vector(1.0, -2.0) == Vector(-1.0, 2.0)


def test_scalar_product():
    vector2 = 2.0 * Vector(1.0, 0.0)
    assert vector2[0] == near(2.0)
    assert vector2[1] == near(0.0)


def test_scalar_product_3d():
    vector1 = Vector(0.0, 1.0, 0.0)
    vector2 = 2.0 * vector1
    assert list(vector1) == [near(0.0), near(1.0), near(0.0)]
    assert list(vector2) == [near(0.0), near(2.0), near(0.0)]


def test_scalar_product_from_the_right():
    assert Vector(0.0, 1.0, 0.0) * 2.0 == 2.0 * Vector(0.0, 1.0, 0.0)


def test_scalar_assignment_product():
    vector = Vector(1.0, 0.0)
    vector *= 2.0
    assert vector[0] == near(2.0)
    assert vector[1] == near(0.0)


def test_scalar_assignment_division():
    vector = Vector(1.0, 0.0)
    vector /= 0.5
    assert vector[0] == near(2.0)
    assert vector[1] == near(0.0)


@pytest.mark.parametrize(
    "vector1, vector2, expected",
    [
        (Vector(1.0, 0.0), Vector(0.0, 1.0), 0.0),
        (Vector(1.0, 2.0, -1.0), Vector(-1.0, 1.0, 3.0), -2.0),
        (Vector(0.0, 1.0, 0.0), Vector(0.0, 0.0, 1.0), 0.0),
        (Vector(-1.0, 2.0, 3.0), Vector(2.0, 2.0, -1.0), -1.0),
        (Vector(0.0, -2.0, 0.0), Vector(0.0, -10.0, 0.0), 20.0),
    ],
)
def test_inner_product(vector1, vector2, expected):
    assert vector1 * vector2 == near(expected)


def test_inner_product_leaves_operands_unchanged():
    vector1 = Vector(1.0, 2.0, -1.0)
    vector2 = Vector(-1.0, 1.0, 3.0)
    assert vector1 * vector2 == near(-2.0)
    assert list(vector1) == [near(1.0), near(2.0), near(-1.0)]
    assert list(vector2) == [near(-1.0), near(1.0), near(3.0)]


@pytest.mark.parametrize(
    "vector1, vector2, expected",
    [
        (Vector(1.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
        (Vector(-2.0, 1.0, -2.0), Vector(-3.0, 3.0, 0.0), (6.0, -6.0, -3.0)),
        (Vector(-1.0, 0.0, -4.0), Vector(2.0, 0.0, -2.0), (0.0, 10.0, 0.0)),
        (Vector(2.0, 0.0, -2.0), Vector(-1.0, 0.0, -4.0), (0.0, -10.0, 0.0)),
        (Vector(1.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0), (0.0, 1.0, 0.0)),
        (Vector(0.0, 1.0, 0.0), Vector(0.0, 0.0, 1.0), (1.0, 0.0, 0.0)),
    ],
)
def test_cross_product(vector1, vector2, expected):
    before1, before2 = list(vector1), list(vector2)
    cross = vector1.cross_product(vector2)
    assert list(cross) == [near(value) for value in expected]
    assert list(vector1) == before1
    assert list(vector2) == before2


def test_cross_product_of_differences():
    a = Vector(-1.0, 0.0, -2.0)
    b = Vector(2.0, 0.0, 0.0)
    c = Vector(0.0, 0.0, 2.0)
    ab = b - a
    ac = c - a
    cross = ab.cross_product(ac)
    assert list(ab) == [near(3.0), near(0.0), near(2.0)]
    assert list(ac) == [near(1.0), near(0.0), near(4.0)]
    assert list(cross) == [near(0.0), near(10.0), near(0.0)]


def test_cross_product_needs_three_dimensions():
    with pytest.raises(ValueError):
        Vector(1.0, 0.0).cross_product(Vector(0.0, 1.0))


def test_at_returns_component():
    assert Vector(1.0, 2.0, 3.0).at(2) == near(3.0)


@pytest.mark.parametrize("index", [3, -1])
def test_at_out_of_range_raises(index):
    with pytest.raises(IndexError):
        Vector(1.0, 2.0, 3.0).at(index)


def test_mismatched_sizes_raise():
    with pytest.raises(ValueError):
        Vector(1.0, 2.0) + Vector(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        Vector(1.0, 2.0) * Vector(1.0, 2.0, 3.0)


def test_set_item():
    vector = Vector(1.0, 2.0)
    vector[1] = 5.0
    assert vector == Vector(1.0, 5.0)