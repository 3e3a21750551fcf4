"""
kinectgeometry: points, vectors and local axis frames in 3D space.

Supporting math layer for motion-capture applications: map sensor-space
joint positions into a body-relative coordinate frame.
"""
from importlib.metadata import version, PackageNotFoundError

from kinectgeometry.config import NormalizationMode
from kinectgeometry.errors import ConfigurationError, DegenerateInputError, GeometryError
from kinectgeometry.logging_config import setup_logging
from kinectgeometry.model import Axis3D, Point3D, Vector3D

try:
    __version__ = version("kinectgeometry")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "Axis3D",
    "ConfigurationError",
    "DegenerateInputError",
    "GeometryError",
    "NormalizationMode",
    "Point3D",
    "Vector3D",
    "setup_logging",
]
