from __future__ import annotations

import logging
import math
from typing import Iterable, Union, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from kinectgeometry.config import DEFAULT_TOLERANCE
from kinectgeometry.errors import DegenerateInputError
from kinectgeometry.model.axis import Axis3D
from kinectgeometry.model.geometry_primitives import Point3D, Vector3D

logger = logging.getLogger(__name__)

GeometricValue = Union[float, Point3D, Vector3D, Axis3D]


def require_finite(value: GeometricValue, operation: str) -> GeometricValue:
    """
    Returns `value` unchanged if all of its numbers are finite.

    The geometry operations never raise on degenerate input; callers that
    prefer an exception over nan poisoning wrap results with this.

    Args:
        value: A float, Point3D, Vector3D or Axis3D.
        operation: Name of the operation that produced `value`, used in the error.

    Returns:
        The same value.

    Raises:
        DegenerateInputError: If any coordinate is nan or infinite.
    """
    if isinstance(value, (Point3D, Vector3D, Axis3D)):
        finite = value.is_finite()
    else:
        finite = math.isfinite(value)

    if not finite:
        logger.debug(f"Non-finite result from {operation}: {value}")
        raise DegenerateInputError(operation, f"non-finite result {value}")
    return value


def is_degenerate_vector(vector: Vector3D, tol: float = DEFAULT_TOLERANCE) -> bool:
    """True if the vector is too short to define a direction."""
    return Vector3D.magnitude(vector) <= tol


def are_parallel(vector1: Vector3D, vector2: Vector3D, tol: float = DEFAULT_TOLERANCE) -> bool:
    """
    True if the two directions are parallel (or either is degenerate).

    Uses |v1 × v2| <= tol * |v1| * |v2|, i.e. sin(angle) <= tol.
    """
    scale = Vector3D.magnitude(vector1) * Vector3D.magnitude(vector2)
    if scale <= tol:
        return True
    return Vector3D.magnitude(Vector3D.cross_product(vector1, vector2)) <= tol * scale


def are_collinear(point1: Point3D, point2: Point3D, point3: Point3D, tol: float = DEFAULT_TOLERANCE) -> bool:
    """True if the three points cannot define a plane (and hence an Axis3D)."""
    return are_parallel(Vector3D.from_points(point1, point2),
                        Vector3D.from_points(point1, point3),
                        tol)


def points_to_array(points: Iterable[Union[Point3D, Vector3D]]) -> npt.NDArray[np.float64]:
    """
    Stacks points (or vectors) into an (N, 3) array.

    Returns:
        Array of shape (n, 3); shape (0, 3) for an empty input.
    """
    rows = [p.to_array() for p in points]
    if not rows:
        return np.empty((0, 3), dtype=np.float64)
    return np.vstack(rows)


def points_from_array(values: npt.NDArray[np.float64]) -> list[Point3D]:
    """Inverse of `points_to_array`: one Point3D per row of an (N, 3) array."""
    arr = np.asarray(values, dtype=np.float64).reshape(-1, 3)
    return [Point3D.from_array(row) for row in arr]
