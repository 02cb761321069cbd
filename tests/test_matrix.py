import pytest

from nekosurface.matrix import Mat2, Mat3, Mat4, MatMN, MatN
from nekosurface.vector import Vec2, Vec3, Vec4, VecN


def assert_rows_close(a, b):
    assert len(a.rows) == len(b.rows)
    for ra, rb in zip(a.rows, b.rows):
        assert list(ra) == pytest.approx(list(rb), abs=1e-9)


A3 = Mat3(Vec3(2, -1, 0), Vec3(1, 3, 2), Vec3(0, 1, 4))
B3 = Mat3(Vec3(1, 2, 3), Vec3(0, 1, 4), Vec3(5, 6, 0))
A4 = Mat4(
    Vec4(4, 1, 0, 2),
    Vec4(1, 3, 1, 0),
    Vec4(0, 1, 5, 1),
    Vec4(2, 0, 1, 6),
)


def test_mat2_row_swap_negates_determinant():
    m = Mat2(Vec2(1, 2), Vec2(3, 4))
    swapped = Mat2(Vec2(3, 4), Vec2(1, 2))
    assert swapped.determinant() == -m.determinant()
    assert m.determinant() != 0


def test_mat3_identity_leaves_vector():
    v = Vec3(1.5, -2, 7)
    assert Mat3.identity() * v == v


def test_mat3_zero_maps_to_zero():
    assert Mat3.zero() * Vec3(1, 2, 3) == Vec3()


def test_mat3_identity_trace():
    assert Mat3.identity().trace() == 3.0


def test_mat3_inverse_round_trip():
    assert_rows_close(A3 * A3.inverse(), Mat3.identity())
    assert_rows_close(A3.inverse() * A3, Mat3.identity())


def test_mat3_singular_inverse_raises():
    singular = Mat3(Vec3(1, 2, 3), Vec3(2, 4, 6), Vec3(0, 1, 1))
    with pytest.raises(ValueError):
        singular.inverse()


def test_mat3_transpose():
    t = A3.transpose()
    assert t[0][1] == A3[1][0]
    assert t[2][0] == A3[0][2]
    assert t.transpose() == A3


def test_mat3_determinant_is_multiplicative():
    assert (A3 * B3).determinant() == pytest.approx(A3.determinant() * B3.determinant())
    assert A3.transpose().determinant() == pytest.approx(A3.determinant())


def test_mat3_minor_and_cofactor():
    minor = A3.minor(0, 0)
    assert minor == Mat2(Vec2(A3[1][1], A3[1][2]), Vec2(A3[2][1], A3[2][2]))
    assert A3.cofactor(0, 1) == -A3.minor(0, 1).determinant()
    assert A3.cofactor(1, 1) == A3.minor(1, 1).determinant()


def test_mat3_minor_index_out_of_range():
    with pytest.raises(IndexError):
        A3.minor(3, 0)


def test_mat3_add_and_scalar():
    assert_rows_close(A3 + A3, A3 * 2.0)
    assert_rows_close(2.0 * A3, A3 * 2.0)


def test_mat3_wrong_row_count():
    with pytest.raises(ValueError):
        Mat3(Vec3(1, 0, 0), Vec3(0, 1, 0))


def test_mat4_identity_trace():
    assert Mat4.identity().trace() == 4.0


def test_mat4_inverse_round_trip():
    assert_rows_close(A4 * A4.inverse(), Mat4.identity())


def test_mat4_determinant_consistent_with_inverse():
    assert A4.determinant() * A4.inverse().determinant() == pytest.approx(1.0)
    assert A4.transpose().determinant() == pytest.approx(A4.determinant())


def test_mat4_singular_inverse_raises():
    with pytest.raises(ValueError):
        Mat4.zero().inverse()


def test_mat4_orient_places_axes():
    pos, fwd, up = Vec3(3, -2, 5), Vec3(1, 0, 0), Vec3(0, 0, 1)
    m = Mat4.orient(pos, fwd, up)
    assert m * Vec4(0, 0, 0, 1) == Vec4(pos.x, pos.y, pos.z, 1)
    assert m * Vec4(1, 0, 0, 0) == Vec4(fwd.x, fwd.y, fwd.z, 0)
    assert m * Vec4(0, 0, 1, 0) == Vec4(up.x, up.y, up.z, 0)
    left = up.cross(fwd)
    assert m * Vec4(0, 1, 0, 0) == Vec4(left.x, left.y, left.z, 0)


def test_look_at_moves_eye_to_origin():
    pos = Vec3(4, -3, 2)
    target = Vec3(0, 1, 0)
    view = Mat4.look_at(pos, target, Vec3(0, 0, 1))
    eye = view * Vec4(pos.x, pos.y, pos.z, 1)
    assert list(eye) == pytest.approx([0, 0, 0, 1], abs=1e-9)
    seen = view * Vec4(target.x, target.y, target.z, 1)
    assert seen.x == pytest.approx(0, abs=1e-9)
    assert seen.y == pytest.approx(0, abs=1e-9)
    assert seen.z == pytest.approx(-(pos - target).magnitude())


def _depth(proj, z):
    clip = proj * Vec4(0, 0, z, 1)
    return clip.z / clip.w


def test_perspective_vulkan_depth_range():
    near, far = 0.1, 1000.0
    proj = Mat4.perspective_vulkan(45.0, 0.5625, near, far)
    assert _depth(proj, -near) == pytest.approx(0.0, abs=1e-9)
    assert _depth(proj, -far) == pytest.approx(1.0)


def test_perspective_opengl_depth_range():
    near, far = 0.5, 50.0
    proj = Mat4.perspective_opengl(60.0, 1.0, near, far)
    assert _depth(proj, -near) == pytest.approx(-1.0)
    assert _depth(proj, -far) == pytest.approx(1.0)


def test_perspective_vulkan_flips_y():
    gl = Mat4.perspective_opengl(45.0, 1.0, 0.1, 100.0)
    vk = Mat4.perspective_vulkan(45.0, 1.0, 0.1, 100.0)
    assert vk[1][1] == -gl[1][1]
    assert vk[0][0] == gl[0][0]


def test_ortho_vulkan_corners():
    proj = Mat4.ortho_vulkan(-60, 60, -60, 60, 25, 175)
    low = proj * Vec4(-60, -60, -25, 1)
    high = proj * Vec4(60, 60, -175, 1)
    assert list(low) == pytest.approx([-1, 1, 0, 1], abs=1e-9)
    assert list(high) == pytest.approx([1, -1, 1, 1], abs=1e-9)


def test_ortho_opengl_corners():
    proj = Mat4.ortho_opengl(-2, 4, -1, 3, 1, 9)
    low = proj * Vec4(-2, -1, -1, 1)
    assert list(low) == pytest.approx([-1, -1, -1, 1], abs=1e-9)


def test_scaling_and_scale():
    s = Vec3(2, 3, 4)
    assert Mat4.scaling(s) * Vec4(1, 1, 1, 1) == Vec4(2, 3, 4, 1)
    m = Mat4.identity()
    returned = m.scale(s)
    assert returned is m
    assert m == Mat4.scaling(s)


def test_to_list_is_row_major():
    values = [float(v) for v in range(16)]
    m = Mat4(values[0:4], values[4:8], values[8:12], values[12:16])
    assert m.to_list() == values


def test_matmn_transpose_shape_and_values():
    m = MatMN(2, 3)
    m.rows = [VecN([1, 2, 3]), VecN([4, 5, 6])]
    t = m.transpose()
    assert (t.m, t.n) == (3, 2)
    assert list(t[2]) == [3.0, 6.0]
    assert t.transpose() == m


def test_matmn_product_with_transpose_is_symmetric():
    m = MatMN(2, 3)
    m.rows = [VecN([1, 2, 3]), VecN([4, 5, 6])]
    gram = m * m.transpose()
    assert (gram.m, gram.n) == (2, 2)
    assert gram[0][1] == gram[1][0]
    assert gram[0][0] == m[0].dot(m[0])


def test_matmn_vector_product_and_mismatch():
    m = MatMN(2, 3)
    m.rows = [VecN([1, 0, 0]), VecN([0, 0, 1])]
    assert m * VecN([7, 8, 9]) == VecN([7, 9])
    with pytest.raises(ValueError):
        m * VecN([1, 2])
    with pytest.raises(ValueError):
        m * MatMN(2, 2)


def test_matmn_zero_and_scalar():
    m = MatMN(2, 2)
    m.rows = [VecN([1, 2]), VecN([3, 4])]
    assert (m * 2.0)[1] == VecN([6, 8])
    m.zero()
    assert m == MatMN(2, 2)


def test_matn_from_matmn():
    square = MatMN(2, 2)
    square.rows = [VecN([1, 2]), VecN([3, 4])]
    n = MatN.from_matmn(square)
    assert list(n[1]) == [3.0, 4.0]
    with pytest.raises(ValueError):
        MatN.from_matmn(MatMN(2, 3))


def test_matn_identity_times_vector():
    m = MatN(3)
    m.identity()
    v = VecN([1, -2, 5])
    assert m * v == v


def test_matn_transpose_in_place():
    m = MatN(2)
    m.rows = [VecN([1, 2]), VecN([3, 4])]
    m.transpose()
    assert m.rows == [VecN([1, 3]), VecN([2, 4])]


def test_matn_product_pairs_entries_with_transpose():
    a = MatN(2)
    a.rows = [VecN([1, 2]), VecN([3, 4])]
    ident = MatN(2)
    ident.identity()
    result = a * ident
    assert result.rows == [VecN([a[0][0], 0]), VecN([0, a[1][1]])]


def test_matn_zero():
    m = MatN(2)
    m.identity()
    m.zero()
    assert m == MatN(2)