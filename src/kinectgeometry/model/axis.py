"""
Local axis systems.

An Axis3D is an origin plus three basis vectors built from three reference
points, e.g. left shoulder, right shoulder and spine base of a tracked body.
Points from the sensor's global space can then be expressed in that
body-relative frame.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union, TYPE_CHECKING

import numpy as np

from kinectgeometry.config import NormalizationMode
from kinectgeometry.model.geometry_primitives import Point3D, Vector3D, ieee_divide

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Axis3D:
    """
    A coordinate frame in 3D space.

    The default instance sits at the global origin with zero basis vectors;
    transforming through it yields nan coordinates. Use `from_points` to build
    a usable frame.
    """
    cog: Point3D = field(default_factory=Point3D)
    x_vector: Vector3D = field(default_factory=Vector3D)
    y_vector: Vector3D = field(default_factory=Vector3D)
    z_vector: Vector3D = field(default_factory=Vector3D)

    @classmethod
    def from_points(
        cls,
        point1: Point3D,
        point2: Point3D,
        point3: Point3D,
        mode: Optional[Union[NormalizationMode, str]] = None
    ) -> Axis3D:
        """
        Builds a frame from three non-collinear points.

        Args:
            point1: First reference point; the X axis starts here.
            point2: Second reference point; the X axis points towards it.
            point3: Third reference point, fixing the plane.
            mode: Normalization mode for the basis vectors (None = configured).

        Returns:
            A frame with its origin at the centroid of the three points,
            Z along the plane normal, X from point1 to point2 and Y = X × Z.

        Notes:
            - The normal follows the winding order of the inputs: swapping
              point2 and point3 flips Z. Callers must keep a consistent order.
            - Since Y = X × Z, the frame is left-handed (X × Y = -Z).
            - Collinear points give a zero normal and nan basis vectors.
        """
        cog = Point3D((point1.x + point2.x + point3.x) / 3,
                      (point1.y + point2.y + point3.y) / 3,
                      (point1.z + point2.z + point3.z) / 3)

        # Z from the plane normal (towards the sensor for a body facing it)
        x_dir = ((point2.y - point1.y) * (point3.z - point1.z)) - ((point3.y - point1.y) * (point2.z - point1.z))
        y_dir = ((point2.z - point1.z) * (point3.x - point1.x)) - ((point3.z - point1.z) * (point2.x - point1.x))
        z_dir = ((point2.x - point1.x) * (point3.y - point1.y)) - ((point3.x - point1.x) * (point2.y - point1.y))
        z_vector = Vector3D.normalize_vector(Vector3D(x_dir, y_dir, z_dir), mode)

        # X from point1 to point2 (left shoulder -> right shoulder)
        x_vector = Vector3D.normalize_vector(Vector3D.from_points(point1, point2), mode)

        y_vector = Vector3D.normalize_vector(Vector3D.cross_product(x_vector, z_vector), mode)

        logger.debug(f"Axis built at {cog}: X={x_vector}, Y={y_vector}, Z={z_vector}")
        return cls(cog=cog, x_vector=x_vector, y_vector=y_vector, z_vector=z_vector)

    def transform_pt_to_axis(self, in_point: Point3D) -> Point3D:
        """
        Expresses a global point in this frame's coordinates.

        Each coordinate is the projection of (in_point - cog) onto a basis
        vector, divided by that vector's Euclidean length, so non-unit basis
        vectors still give true distances.
        """
        translated = Vector3D.from_points(self.cog, in_point)
        return Point3D(self._project(translated, self.x_vector),
                       self._project(translated, self.y_vector),
                       self._project(translated, self.z_vector))

    def transform_points_to_axis(self, points: Iterable[Point3D]) -> list[Point3D]:
        return [self.transform_pt_to_axis(p) for p in points]

    def to_matrix(self) -> npt.NDArray[np.float64]:
        """3x3 matrix whose rows are the X, Y and Z basis vectors."""
        return np.vstack([self.x_vector.to_array(),
                          self.y_vector.to_array(),
                          self.z_vector.to_array()])

    def is_finite(self) -> bool:
        return all(part.is_finite() for part in (self.cog, self.x_vector, self.y_vector, self.z_vector))

    @staticmethod
    def _project(translated: Vector3D, basis: Vector3D) -> float:
        return ieee_divide(Vector3D.dot_product(basis, translated), Vector3D.magnitude(basis))
