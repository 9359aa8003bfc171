import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kiwigeom.matrix import Matrix4
from kiwigeom.vec import Vec3

coord = st.floats(min_value=-1000, max_value=1000, allow_nan=False)
angle = st.floats(min_value=-720, max_value=720, allow_nan=False)

IDENTITY_ENTRIES = [1.0 if i == j else 0.0 for i in range(4) for j in range(4)]


def test_identity_diagonal():
    m = Matrix4.identity()
    assert m[0] == (1.0, 0.0, 0.0, 0.0)
    assert m[3, 3] == 1.0
    assert m[1, 2] == 0.0


def test_default_is_zero_matrix():
    m = Matrix4()
    assert all(m[i, j] == 0.0 for i in range(4) for j in range(4))


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Matrix4([[1, 2, 3]])


@given(coord, coord, coord)
def test_identity_apply_keeps_vector(x, y, z):
    v = Vec3(x, y, z)
    result = Matrix4.identity().apply(v)
    assert result is v
    assert tuple(v) == (x, y, z)


@given(coord, coord, coord, coord, coord, coord)
def test_translation_adds_offset(x, y, z, dx, dy, dz):
    v = Matrix4.translation(dx, dy, dz).apply(Vec3(x, y, z))
    assert tuple(v) == pytest.approx((x + dx, y + dy, z + dz), abs=1e-6)


@given(coord, coord, coord)
def test_translation_places_offset_in_last_column(dx, dy, dz):
    m = Matrix4.translation(dx, dy, dz)
    assert (m[0, 3], m[1, 3], m[2, 3]) == (dx, dy, dz)


@given(coord, coord, coord, coord, coord, coord)
def test_scaling_multiplies_axes(x, y, z, fx, fy, fz):
    v = Matrix4.scaling(fx, fy, fz).apply(Vec3(x, y, z))
    assert tuple(v) == pytest.approx((x * fx, y * fy, z * fz), abs=1e-6)


@given(angle, coord, coord, coord)
def test_rotation_x_matches_vec_pitch(a, x, y, z):
    by_matrix = Matrix4.rotation_x(a).apply(Vec3(x, y, z))
    by_vec = Vec3(x, y, z).rotate(0, a, 0)
    assert tuple(by_matrix) == pytest.approx(tuple(by_vec), abs=1e-6)


@given(angle, coord, coord, coord)
def test_rotation_y_matches_negative_vec_yaw(a, x, y, z):
    by_matrix = Matrix4.rotation_y(a).apply(Vec3(x, y, z))
    by_vec = Vec3(x, y, z).rotate(-a, 0, 0)
    assert tuple(by_matrix) == pytest.approx(tuple(by_vec), abs=1e-6)


@given(angle, coord, coord, coord)
def test_rotation_z_matches_negative_vec_roll(a, x, y, z):
    by_matrix = Matrix4.rotation_z(a).apply(Vec3(x, y, z))
    by_vec = Vec3(x, y, z).rotate(0, 0, -a)
    assert tuple(by_matrix) == pytest.approx(tuple(by_vec), abs=1e-6)


@pytest.mark.parametrize("factory", [Matrix4.rotation_x, Matrix4.rotation_y, Matrix4.rotation_z])
@given(a=angle)
def test_rotation_then_inverse_is_identity(factory, a):
    product = factory(a) @ factory(-a)
    entries = [product[i, j] for i in range(4) for j in range(4)]
    assert entries == pytest.approx(IDENTITY_ENTRIES, abs=1e-9)


@pytest.mark.parametrize("factory", [Matrix4.rotation_x, Matrix4.rotation_y, Matrix4.rotation_z])
@given(a=angle, x=coord, y=coord, z=coord)
def test_rotation_preserves_length(factory, a, x, y, z):
    v = Vec3(x, y, z)
    before = v.magnitude()
    factory(a).apply(v)
    assert math.isclose(v.magnitude(), before, rel_tol=1e-9, abs_tol=1e-6)


@given(coord, coord, coord)
def test_identity_is_neutral_for_matmul(x, y, z):
    m = Matrix4.translation(x, y, z) @ Matrix4.scaling(z, x, y)
    assert Matrix4.identity() @ m == m
    assert m @ Matrix4.identity() == m


@given(coord, coord, coord, coord, coord, coord)
def test_translations_compose(x1, y1, z1, x2, y2, z2):
    combined = Matrix4.translation(x1, y1, z1) @ Matrix4.translation(x2, y2, z2)
    expected = Matrix4.translation(x1 + x2, y1 + y2, z1 + z2)
    got_entries = [combined[i, j] for i in range(4) for j in range(4)]
    want_entries = [expected[i, j] for i in range(4) for j in range(4)]
    assert got_entries == pytest.approx(want_entries, abs=1e-6)


@given(coord, coord, coord, coord, coord, coord)
def test_composed_matrix_applies_right_operand_first(dx, dy, dz, x, y, z):
    t = Matrix4.translation(dx, dy, dz)
    s = Matrix4.scaling(2, 3, 4)
    combined = (t @ s).apply(Vec3(x, y, z))
    stepwise = t.apply(s.apply(Vec3(x, y, z)))
    assert tuple(combined) == pytest.approx(tuple(stepwise), abs=1e-6)


def test_imatmul_updates_in_place():
    m = Matrix4.translation(1, 2, 3)
    other = Matrix4.scaling(2, 2, 2)
    expected = m @ other
    original = m
    m @= other
    assert m is original
    assert m == expected


def test_matmul_with_non_matrix_is_type_error():
    with pytest.raises(TypeError):
        Matrix4.identity() @ 3


def test_copy_is_independent():
    m = Matrix4.translation(1, 2, 3)
    c = m.copy()
    assert c == m
    c @= Matrix4.scaling(5, 5, 5)
    assert c != m
    assert m == Matrix4.translation(1, 2, 3)


def test_str_layout():
    text = str(Matrix4.identity())
    lines = text.split("\n")
    assert len(lines) == 4
    assert lines[0].startswith("Matrix4: [ ")
    assert all(line.startswith("         [ ") for line in lines[1:])
    assert all(line.endswith(" ]") for line in lines)