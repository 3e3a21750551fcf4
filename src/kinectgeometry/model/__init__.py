"""
The MODEL layer contains the value types and the vector algebra.
It has NO knowledge of sensors or skeleton tracking; callers supply the
points and consume the frames.
"""
from kinectgeometry.model.geometry_primitives import Point3D, Vector3D
from kinectgeometry.model.axis import Axis3D

__all__ = ["Point3D", "Vector3D", "Axis3D"]
