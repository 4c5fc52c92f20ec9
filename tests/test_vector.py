import pytest

from minitrace.vector import Vec


def approx_vec(vec):
    return pytest.approx((vec.x, vec.y, vec.z), abs=1e-9)


def as_tuple(vec):
    return (vec.x, vec.y, vec.z)


def test_add_and_sub_round_trip():
    a = Vec(1.5, -2.0, 3.25)
    b = Vec(0.5, 4.0, -1.0)
    assert ((a + b) - b).same_as(a)


def test_add_componentwise():
    assert as_tuple(Vec(1, 2, 3) + Vec(10, 20, 30)) == (11, 22, 33)


def test_mul_and_neg():
    v = Vec(1.0, -2.0, 3.0)
    assert as_tuple(v * 2) == (2.0, -4.0, 6.0)
    assert as_tuple(-v) == (-1.0, 2.0, -3.0)
    assert (v + -v).length() == 0


def test_dot_and_length_squared_agree():
    v = Vec(3.0, 4.0, 12.0)
    assert v.dot(v) == v.length_squared()


def test_length_of_unit_axes():
    assert Vec(0, 0, 1).length() == 1
    assert Vec(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_cross_is_orthogonal():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-9)


def test_cross_of_axes():
    assert as_tuple(Vec(1, 0, 0).cross(Vec(0, 1, 0))) == (0, 0, 1)


def test_cross_anticommutes():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(0.0, -1.0, 5.0)
    assert as_tuple(a.cross(b)) == approx_vec(-b.cross(a))


def test_normalised_has_unit_length_and_same_direction():
    v = Vec(2.0, -3.0, 6.0)
    n = v.normalised()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(v) == pytest.approx(v.length())


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y", "rotate_z"])
def test_rotation_preserves_length(method):
    v = Vec(1.0, 2.0, -3.0)
    rotated = getattr(v, method)(37.0)
    assert rotated.length() == pytest.approx(v.length())


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y", "rotate_z"])
def test_rotation_round_trip(method):
    v = Vec(1.0, 2.0, -3.0)
    back = getattr(getattr(v, method)(55.0), method)(-55.0)
    assert as_tuple(back) == approx_vec(v)


def test_rotate_x_quarter_turn():
    assert as_tuple(Vec(0.0, 1.0, 0.0).rotate_x(90)) == approx_vec(Vec(0.0, 0.0, 1.0))


def test_rotate_y_quarter_turn():
    assert as_tuple(Vec(0.0, 0.0, 1.0).rotate_y(90)) == approx_vec(Vec(1.0, 0.0, 0.0))


def test_rotate_z_quarter_turn():
    assert as_tuple(Vec(1.0, 0.0, 0.0).rotate_z(90)) == approx_vec(Vec(0.0, 1.0, 0.0))


def test_mult_matrix_identity_keeps_point():
    identity = [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]
    v = Vec(1.5, -2.5, 4.0)
    result = v.mult_matrix(identity)
    assert result.same_as(v)
    assert result.valid


def test_mult_matrix_applies_translation_row():
    translate = [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [5, 6, 7, 1]]
    v = Vec(1.0, 2.0, 3.0)
    assert as_tuple(v.mult_matrix(translate)) == as_tuple(v + Vec(5, 6, 7))


def test_same_as_checks_validity_flag():
    assert Vec(1, 2, 3).same_as(Vec(1, 2, 3))
    assert not Vec(1, 2, 3).same_as(Vec(1, 2, 3, valid=False))
    assert not Vec(1, 2, 3).same_as(Vec(1, 2, 4))