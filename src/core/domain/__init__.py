"""
Domain models and value objects.

Contains fundamental 2-D geometry values: Angle, Point2D, Vector2D, Line,
LineSegment, Rect, Square, CoordinateSystem.
"""

from src.core.domain.angle import (
    FULL_ROTATION_DEGREES,
    FULL_ROTATION_RADIANS,
    Angle,
    AngleUnit,
    RotationDirection,
)
from src.core.domain.coordinate_system import (
    CARTESIAN,
    DEFAULT_COORDINATE_SYSTEM,
    SCREEN,
    CoordinateSystem,
)
from src.core.domain.line import DegenerateSegmentError, Line, LineSegment
from src.core.domain.point import Point2D, Vector2D
from src.core.domain.rect import Rect, Square

__all__ = [
    # Angle module
    "FULL_ROTATION_DEGREES",
    "FULL_ROTATION_RADIANS",
    "Angle",
    "AngleUnit",
    "RotationDirection",
    # Coordinate system config
    "CARTESIAN",
    "DEFAULT_COORDINATE_SYSTEM",
    "SCREEN",
    "CoordinateSystem",
    # Point / vector
    "Point2D",
    "Vector2D",
    # Line / segment
    "DegenerateSegmentError",
    "Line",
    "LineSegment",
    # Rect / square
    "Rect",
    "Square",
]
