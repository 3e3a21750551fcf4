import math

import numpy as np
import pytest

from kinectgeometry import Axis3D, NormalizationMode, Point3D, Vector3D


@pytest.fixture
def xy_axis():
    return Axis3D.from_points(Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0))


def test_cog_is_centroid(xy_axis):
    assert xy_axis.cog.x == pytest.approx(1 / 3)
    assert xy_axis.cog.y == pytest.approx(1 / 3)
    assert xy_axis.cog.z == 0.0


def test_basis_vectors(xy_axis):
    assert xy_axis.x_vector == Vector3D(1.0, 0.0, 0.0)
    assert xy_axis.z_vector == Vector3D(0.0, 0.0, 1.0)
    assert xy_axis.y_vector == Vector3D(0.0, -1.0, 0.0)
    assert xy_axis.y_vector == Vector3D.normalize_vector(
        Vector3D.cross_product(xy_axis.x_vector, xy_axis.z_vector))


def test_winding_order_flips_normal():
    axis = Axis3D.from_points(Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, -1, 0))
    assert axis.z_vector == Vector3D(0.0, 0.0, -1.0)


def test_basis_is_orthonormal_for_tilted_plane():
    axis = Axis3D.from_points(Point3D(0.2, 1.1, 2.0), Point3D(0.6, 1.3, 2.4), Point3D(0.4, 0.5, 2.1))
    m = axis.to_matrix()
    np.testing.assert_allclose(m @ m.T, np.eye(3), atol=1e-12)
    # Y = X × Z, so X × Y = -Z
    np.testing.assert_allclose(np.cross(m[0], m[1]), -m[2], atol=1e-12)


def test_transform_cog_is_origin(xy_axis):
    local = xy_axis.transform_pt_to_axis(xy_axis.cog)
    assert local == Point3D(0.0, 0.0, 0.0)


def test_transform_point(xy_axis):
    local = xy_axis.transform_pt_to_axis(Point3D(1.0, 1.0, 2.0))
    assert local.x == pytest.approx(2 / 3)
    assert local.y == pytest.approx(-2 / 3)
    assert local.z == pytest.approx(2.0)


def test_transform_preserves_distances():
    axis = Axis3D.from_points(Point3D(0.2, 1.1, 2.0), Point3D(0.6, 1.3, 2.4), Point3D(0.4, 0.5, 2.1))
    a = Point3D(1.0, 2.0, 3.0)
    b = Point3D(-1.0, 0.5, 2.5)
    local_a, local_b = axis.transform_points_to_axis([a, b])
    assert local_a.distance_to(local_b) == pytest.approx(a.distance_to(b))


def test_transform_divides_by_basis_length():
    axis = Axis3D(cog=Point3D(), x_vector=Vector3D(2, 0, 0),
                  y_vector=Vector3D(0, 3, 0), z_vector=Vector3D(0, 0, 4))
    assert axis.transform_pt_to_axis(Point3D(1.0, 2.0, 3.0)) == Point3D(1.0, 2.0, 3.0)


def test_default_axis_transforms_to_nan():
    axis = Axis3D()
    assert axis.cog == Point3D()
    assert axis.z_vector == Vector3D()
    local = axis.transform_pt_to_axis(Point3D(1.0, 2.0, 3.0))
    assert math.isnan(local.x) and math.isnan(local.y) and math.isnan(local.z)


def test_collinear_points_give_non_finite_axis():
    axis = Axis3D.from_points(Point3D(0, 0, 0), Point3D(1, 1, 1), Point3D(2, 2, 2))
    assert not axis.z_vector.is_finite()
    assert not axis.is_finite()


def test_legacy_mode_basis_is_not_unit_length():
    axis = Axis3D.from_points(Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0),
                              mode=NormalizationMode.LEGACY)
    assert Vector3D.magnitude(axis.x_vector) == pytest.approx(1 / math.sqrt(2))
    # X × Z only has a Y component, which the legacy length ignores
    assert not axis.y_vector.is_finite()
