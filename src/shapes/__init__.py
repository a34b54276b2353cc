"""Shapes — геометрические фигуры и алгоритмы над ними.

- Circle: окружность (центр + радиус), производные величины, равенство по размеру
- points_along_perimeter: равномерная выборка точек по окружности
- intersect_line / intersect_segment: пересечение окружности с прямой и отрезком
"""

from .circle import Circle
from .intersection import intersect_line, intersect_segment, representative_segment
from .path import EllipsePath
from .perimeter import perimeter_offsets, points_along_perimeter

__all__ = [
    "Circle",
    "EllipsePath",
    "intersect_line",
    "intersect_segment",
    "representative_segment",
    "perimeter_offsets",
    "points_along_perimeter",
]
