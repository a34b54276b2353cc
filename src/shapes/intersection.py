"""
Intersection — Пересечение окружности с прямой и отрезком

Алгоритм для отрезка (closest-point / quadratic-root):
    u  = (b - a) / |b - a|                 единичное направление
    t0 = dot(center - a, u)                параметр основания перпендикуляра
    P  = a + t0 * u                        ближайшая к центру точка прямой
    d  = |P - center|

    |d - r| < eps  → касание: [P], если 0 <= t0 <= length, иначе []
    d < r          → секущая: h = sqrt(r² - d²), t1 = t0 - h, t2 = t0 + h
                     ti принимается, если ti >= 0 и (ti < length или |ti - length| < eps)
    иначе          → []

Прямая сводится к отрезку: берутся точки прямой при x = cx ± r и y = cy ± r.
Обе пары лежат на окружности или вне её и охватывают хорду, поэтому любая
из них годится как представительный отрезок. Выбирается более короткая пара
(при равенстве — пара по X); ось, параллельная прямой, не даёт пары и не
выбирается никогда.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат — 0, 1 или 2 точки; порядок [t1, t2] сохраняется
2. EPS_INTERSECTION фиксирован и абсолютен (1e-4)
3. Вырожденный отрезок → DegenerateSegmentError, NaN не возвращается
"""

import logging
from typing import TYPE_CHECKING

from src.core.domain.line import DegenerateSegmentError, Line, LineSegment
from src.core.domain.point import Point2D
from src.core.math.numerical_safeguards import (
    EPS_INTERSECTION,
    safe_sqrt,
    within_tolerance,
)

if TYPE_CHECKING:
    from src.shapes.circle import Circle

logger = logging.getLogger(__name__)


# =============================================================================
# SEGMENT
# =============================================================================


def intersect_segment(circle: "Circle", segment: LineSegment) -> list[Point2D]:
    """
    Точки пересечения окружности с отрезком.

    Args:
        circle: окружность
        segment: невырожденный отрезок

    Returns:
        Список из 0, 1 или 2 точек. При двух точках первая ближе к segment.a.

    Raises:
        DegenerateSegmentError: если длина отрезка нулевая или неконечная
    """
    direction = segment.direction()
    length = segment.length
    radius = circle.radius

    t0 = (circle.center - segment.a).dot(direction)
    closest = segment.a + direction * t0
    distance = closest.distance(circle.center)

    # Касание
    if within_tolerance(distance, radius, EPS_INTERSECTION):
        if 0 <= t0 <= length:
            logger.debug("tangent at %s (t0=%.6f, length=%.6f)", closest, t0, length)
            return [closest]
        logger.debug("tangent point outside segment (t0=%.6f, length=%.6f)", t0, length)
        return []

    # Промах
    if distance > radius:
        logger.debug("no intersection (distance=%.6f, radius=%.6f)", distance, radius)
        return []

    # Секущая
    half_chord = safe_sqrt(radius * radius - distance * distance)
    points = []
    for t in (t0 - half_chord, t0 + half_chord):
        if _accepts_parameter(t, length):
            points.append(segment.a + direction * t)

    logger.debug(
        "secant: %d of 2 roots on segment (t0=%.6f, half_chord=%.6f, length=%.6f)",
        len(points),
        t0,
        half_chord,
        length,
    )
    return points


def _accepts_parameter(t: float, length: float) -> bool:
    """Параметр лежит на отрезке: t >= 0 и t < length (дальний конец — в пределах eps)"""
    return t >= 0 and (t < length or within_tolerance(t, length, EPS_INTERSECTION))


# =============================================================================
# LINE
# =============================================================================


def _axis_pair(first: Point2D | None, second: Point2D | None) -> tuple[Point2D, Point2D] | None:
    """Пара точек прямой на одной оси; None, если прямая параллельна этой оси"""
    if first is None or second is None:
        return None
    return first, second


def _span(pair: tuple[Point2D, Point2D]) -> float:
    return pair[0].distance(pair[1])


def representative_segment(circle: "Circle", line: Line) -> LineSegment:
    """
    Конечный отрезок прямой, охватывающий всю хорду окружности.

    Строится по точкам прямой при x = cx ± r или y = cy ± r.

    Raises:
        DegenerateSegmentError: если прямая не даёт пары ни по одной оси
    """
    center = circle.center
    radius = circle.radius

    x_pair = _axis_pair(line.point_at_x(center.x - radius), line.point_at_x(center.x + radius))
    y_pair = _axis_pair(line.point_at_y(center.y - radius), line.point_at_y(center.y + radius))

    if x_pair is None and y_pair is None:
        raise DegenerateSegmentError(f"line through {line.a} and {line.b} has no direction")
    if x_pair is None:
        chosen = y_pair
        axis = "y"
    elif y_pair is None:
        chosen = x_pair
        axis = "x"
    elif _span(x_pair) <= _span(y_pair):
        chosen = x_pair
        axis = "x"
    else:
        chosen = y_pair
        axis = "y"

    logger.debug("representative segment along %s axis: %s -> %s", axis, chosen[0], chosen[1])
    return LineSegment(a=chosen[0], b=chosen[1])


def intersect_line(circle: "Circle", line: Line) -> list[Point2D]:
    """
    Точки пересечения окружности с бесконечной прямой.

    Returns:
        Список из 0, 1 или 2 точек
    """
    segment = representative_segment(circle, line)

    # Окружность нулевого радиуса: отрезок вырождается в точку на прямой
    if segment.is_degenerate:
        if within_tolerance(segment.a.distance(circle.center), 0.0, EPS_INTERSECTION):
            return [segment.a]
        return []

    return intersect_segment(circle, segment)
