"""
Geometric Primitives: points and vectors in 3D space.

Degenerate inputs (zero-length vectors, parallel lines) are not detected here.
They produce inf/nan coordinates which propagate through later calculations.
"""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Optional, Sequence, Union, TYPE_CHECKING

import numpy as np

from kinectgeometry.config import NormalizationMode, resolve_normalization_mode

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divides with IEEE-754 semantics: x/0 gives +-inf and 0/0 gives nan.

    Plain Python float division raises ZeroDivisionError instead.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _coords_from_array(values: Union[Sequence[float], npt.NDArray[np.float64]]) -> tuple[float, float, float]:
    arr = np.asarray(values, dtype=np.float64).reshape(3)
    return float(arr[0]), float(arr[1]), float(arr[2])


@dataclass(frozen=True)
class Point3D:
    """A position in 3D space."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def translate_pt(in_point: Point3D, in_vector: Vector3D) -> Point3D:
        """Returns a new point offset from `in_point` by `in_vector`."""
        return Point3D(in_point.x + in_vector.x,
                       in_point.y + in_vector.y,
                       in_point.z + in_vector.z)

    def __add__(self, other: Vector3D) -> Point3D:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector3D):
            return Point3D.translate_pt(self, other)
        return NotImplemented

    def __sub__(self, other: Union[Vector3D, Point3D]) -> Union[Vector3D, Point3D]:
        # Point - Point = Vector (from other to self)
        if isinstance(other, Point3D):
            return Vector3D.from_points(other, self)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector3D):
            return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def distance_to(self, other: Point3D) -> float:
        return Vector3D.magnitude(Vector3D.from_points(self, other))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Union[Sequence[float], npt.NDArray[np.float64]]) -> Point3D:
        """Builds a point from any 3-element sequence or array (e.g. a joint position)."""
        return cls(*_coords_from_array(values))


@dataclass(frozen=True)
class Vector3D:
    """
    A vector in 3D space representing direction and magnitude.

    All algebra is exposed as static methods taking and returning new values;
    the arithmetic operators are shorthands for the same operations.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_points(cls, start_point: Point3D, end_point: Point3D) -> Vector3D:
        """Vector pointing from `start_point` to `end_point`."""
        return cls(end_point.x - start_point.x,
                   end_point.y - start_point.y,
                   end_point.z - start_point.z)

    @staticmethod
    def dot_product(vector1: Vector3D, vector2: Vector3D) -> float:
        return (vector1.x * vector2.x) + (vector1.y * vector2.y) + (vector1.z * vector2.z)

    @staticmethod
    def cross_product(vector1: Vector3D, vector2: Vector3D) -> Vector3D:
        """Right-handed cross product. Parallel inputs give the zero vector."""
        return Vector3D((vector1.y * vector2.z) - (vector1.z * vector2.y),
                        (vector1.z * vector2.x) - (vector1.x * vector2.z),
                        (vector1.x * vector2.y) - (vector1.y * vector2.x))

    @staticmethod
    def magnitude(in_vector: Vector3D) -> float:
        """sqrt(x² + y² + z²), scaled internally so very large or tiny components do not overflow."""
        return math.hypot(in_vector.x, in_vector.y, in_vector.z)

    @staticmethod
    def scalar_multiply(scalar: float, in_vector: Vector3D) -> Vector3D:
        return Vector3D(in_vector.x * scalar,
                        in_vector.y * scalar,
                        in_vector.z * scalar)

    @staticmethod
    def normalize_vector(
        in_vector: Vector3D,
        mode: Optional[Union[NormalizationMode, str]] = None
    ) -> Vector3D:
        """
        Scales a vector to unit length.

        Args:
            in_vector: The vector to normalize.
            mode: Length formula to divide by. EUCLIDEAN uses sqrt(x² + y² + z²).
                LEGACY uses sqrt(x² + x² + z²), which reproduces values computed
                by earlier releases; those vectors are only unit length when
                |x| == |y|. None selects the configured mode
                (see kinectgeometry.config).

        Returns:
            The scaled vector. A zero-length input gives nan components.
        """
        mode = resolve_normalization_mode(mode)
        if mode is NormalizationMode.LEGACY:
            length = math.hypot(in_vector.x, in_vector.x, in_vector.z)
        else:
            length = Vector3D.magnitude(in_vector)

        if length == 0.0:
            logger.debug(f"Normalizing zero-length vector {in_vector} ({mode.value}), result is non-finite")

        return Vector3D(ieee_divide(in_vector.x, length),
                        ieee_divide(in_vector.y, length),
                        ieee_divide(in_vector.z, length))

    @staticmethod
    def intersection_line_mid_pt(
        vector1: Vector3D,
        point1: Point3D,
        vector2: Vector3D,
        point2: Point3D
    ) -> Point3D:
        """
        Midpoint of the shortest segment between two (generally skew) lines.

        Each line is given by a direction vector and a point on it. For each
        line, the plane spanned by the other line and the common perpendicular
        is intersected with it to find the near point; the two near points are
        averaged. For intersecting lines this is the intersection point.

        Args:
            vector1: Direction of the first line.
            point1: A point on the first line.
            vector2: Direction of the second line.
            point2: A point on the second line.

        Returns:
            The midpoint. Parallel lines give nan coordinates.
        """
        perp_vector = Vector3D.cross_product(vector1, vector2)

        # Near point on line 1: plane through line 2 with normal n2
        plane_n2 = Vector3D.cross_product(vector2, perp_vector)
        t1 = ieee_divide(Vector3D.dot_product(Vector3D.from_points(point1, point2), plane_n2),
                         Vector3D.dot_product(vector1, plane_n2))
        end_point1 = Point3D.translate_pt(point1, Vector3D.scalar_multiply(t1, vector1))

        # Near point on line 2: plane through line 1 with normal n1
        plane_n1 = Vector3D.cross_product(vector1, perp_vector)
        t2 = ieee_divide(Vector3D.dot_product(Vector3D.from_points(point2, point1), plane_n1),
                         Vector3D.dot_product(vector2, plane_n1))
        end_point2 = Point3D.translate_pt(point2, Vector3D.scalar_multiply(t2, vector2))

        return Point3D((end_point1.x + end_point2.x) / 2,
                       (end_point1.y + end_point2.y) / 2,
                       (end_point1.z + end_point2.z) / 2)

    @staticmethod
    def pt_on_line_closest_to_point(
        in_vector: Vector3D,
        search_point: Point3D,
        pt_on_line: Point3D,
        mode: Optional[Union[NormalizationMode, str]] = None
    ) -> Point3D:
        """
        Orthogonal projection of `search_point` onto the line through
        `pt_on_line` with direction `in_vector`.

        Typical use: check whether a joint lies close to a limb axis by
        comparing `search_point.distance_to(result)` with a threshold.
        """
        norm_vector = Vector3D.normalize_vector(in_vector, mode)
        trans_vector = Vector3D.scalar_multiply(
            Vector3D.dot_product(Vector3D.from_points(pt_on_line, search_point), norm_vector),
            norm_vector
        )
        return Point3D.translate_pt(pt_on_line, trans_vector)

    def __add__(self, other: Vector3D) -> Vector3D:
        if isinstance(other, Vector3D):
            return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: Vector3D) -> Vector3D:
        if isinstance(other, Vector3D):
            return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar: float) -> Vector3D:
        if isinstance(scalar, numbers.Real):
            return Vector3D.scalar_multiply(scalar, self)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Union[Sequence[float], npt.NDArray[np.float64]]) -> Vector3D:
        return cls(*_coords_from_array(values))
