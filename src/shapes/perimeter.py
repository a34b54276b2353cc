"""
Perimeter — Равномерная выборка точек по окружности

Окружность делится на segments частей (segments может быть дробным).
Шаг угла: full_rotation / segments. Смещения 0, step, 2·step, ... берутся,
пока смещение меньше полного оборота: получается ceil(segments) точек,
последний шаг при дробном segments неполный.

Направление: вызывающий задаёт визуальное направление (rotating),
CoordinateSystem определяет, нужно ли для этого увеличивать или уменьшать угол.
"""

import logging
import math
from typing import TYPE_CHECKING

from src.core.domain.angle import FULL_ROTATION_RADIANS, Angle, RotationDirection
from src.core.domain.coordinate_system import DEFAULT_COORDINATE_SYSTEM, CoordinateSystem
from src.core.domain.point import Point2D, Vector2D
from src.core.math.numerical_safeguards import validate_finite

if TYPE_CHECKING:
    from src.shapes.circle import Circle

logger = logging.getLogger(__name__)


def perimeter_offsets(segments: float) -> list[Angle]:
    """
    Угловые смещения от начального угла: full_rotation · i / segments для i < ceil(segments).

    Количество — ceil(segments). Первое смещение всегда 0, даже если шаг
    full_rotation / segments не представим конечным float.

    Raises:
        ValueError: если segments NaN/Inf
    """
    validate_finite(segments, "segments")
    if segments <= 0:
        return []

    return [Angle(FULL_ROTATION_RADIANS * i / segments) for i in range(math.ceil(segments))]


def points_along_perimeter(
    circle: "Circle",
    segments: float,
    starting_angle: Angle = Angle(0.0),
    rotating: RotationDirection = RotationDirection.CLOCKWISE,
    coordinate_system: CoordinateSystem | None = None,
) -> list[Point2D]:
    """
    Точки на окружности, равномерно распределённые по углу.

    Args:
        circle: окружность
        segments: число частей (дробное допустимо); <= 0 → пустой список
        starting_angle: угол первой точки
        rotating: визуальное направление обхода
        coordinate_system: ориентация координат (None → DEFAULT_COORDINATE_SYSTEM)

    Returns:
        Список точек в порядке обхода; первая точка — на starting_angle

    Raises:
        ValueError: если segments NaN/Inf
    """
    offsets = perimeter_offsets(segments)
    if not offsets:
        return []

    system = coordinate_system or DEFAULT_COORDINATE_SYSTEM
    backwards = system.steps_backwards(rotating)

    logger.debug(
        "sampling %d points (segments=%s, rotating=%s, backwards=%s)",
        len(offsets),
        segments,
        rotating.value,
        backwards,
    )

    points = []
    for offset in offsets:
        angle = starting_angle - offset if backwards else starting_angle + offset
        points.append(circle.center + Vector2D.from_angle(angle, circle.radius))
    return points
