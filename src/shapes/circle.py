"""
Circle — Модель окружности (центр + радиус)

Immutable Pydantic модель. Все производные величины вычисляются, не кэшируются.

Равенство:
- same_size: сравнение только радиусов (окружности одного размера равны
  независимо от положения). Это не ==.
- same_circle: сравнение центра и радиуса. Совпадает с == (структурное
  равенство pydantic).

Порядок (<, <=, >, >=) — только по радиусу ("size ordering"), это не полный
геометрический порядок: a <= b и b <= a не означает a == b.

Отрицательный радиус запрещён на уровне модели.
"""

import math

from pydantic import BaseModel, Field, field_validator

from src.core.domain.angle import Angle, RotationDirection
from src.core.domain.coordinate_system import CoordinateSystem
from src.core.domain.line import Line, LineSegment
from src.core.domain.point import Point2D
from src.core.domain.rect import Rect, Square
from src.core.math.numerical_safeguards import validate_non_negative
from src.shapes.intersection import intersect_line, intersect_segment
from src.shapes.path import EllipsePath
from src.shapes.perimeter import points_along_perimeter


class Circle(BaseModel):
    """
    Окружность с центром center и радиусом radius >= 0.

    Immutable модель (frozen=True). Изменение создаёт новый экземпляр
    (model_copy(update=...)).
    """

    center: Point2D = Field(..., description="Центр окружности")
    radius: float = Field(..., ge=0, description="Радиус (расстояние от центра до границы)")

    model_config = {"frozen": True}

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        """Радиус конечный и неотрицательный"""
        validate_non_negative(v, "radius")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_diameter(cls, center: Point2D, diameter: float) -> "Circle":
        """Окружность с радиусом diameter / 2"""
        return cls(center=center, radius=diameter / 2.0)

    @classmethod
    def in_square(cls, square: Square) -> "Circle":
        """Окружность, вписанная в квадрат"""
        return cls.from_diameter(square.center, square.edges)

    @classmethod
    def in_rect(cls, rect: Rect) -> "Circle":
        """Окружность, вписанная в центр прямоугольника (aspect-fit)"""
        return cls.in_square(Square.in_rect(rect))

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    @property
    def diameter(self) -> float:
        return self.radius * 2.0

    @property
    def circumference(self) -> float:
        """Длина окружности"""
        return self.diameter * math.pi

    @property
    def area(self) -> float:
        return self.radius * self.radius * math.pi

    @property
    def perimeter(self) -> float:
        return self.circumference

    @property
    def square(self) -> Square:
        """Описанный квадрат"""
        return Square(origin=Point2D(self.min_x, self.min_y), edges=self.diameter)

    @property
    def bounding_rect(self) -> Rect:
        """Наименьший прямоугольник, в который помещается окружность"""
        return Rect.from_center(self.center, self.diameter)

    @property
    def path(self) -> EllipsePath:
        return EllipsePath(bounding_rect=self.bounding_rect)

    # Extremities
    @property
    def min_x(self) -> float:
        return self.center.x - self.radius

    @property
    def max_x(self) -> float:
        return self.center.x + self.radius

    @property
    def min_y(self) -> float:
        return self.center.y - self.radius

    @property
    def max_y(self) -> float:
        return self.center.y + self.radius

    # Midpoints
    @property
    def mid_x(self) -> float:
        return self.center.x

    @property
    def mid_y(self) -> float:
        return self.center.y

    @property
    def width(self) -> float:
        return self.diameter

    @property
    def height(self) -> float:
        return self.diameter

    def contains(self, point: Point2D) -> bool:
        """Точка внутри или на границе окружности"""
        return self.center.distance(point) <= self.radius

    # -------------------------------------------------------------------------
    # Perimeter / intersection
    # -------------------------------------------------------------------------

    def points_along_perimeter(
        self,
        segments: float,
        starting_angle: Angle = Angle(0.0),
        rotating: RotationDirection = RotationDirection.CLOCKWISE,
        coordinate_system: CoordinateSystem | None = None,
    ) -> list[Point2D]:
        """См. src.shapes.perimeter.points_along_perimeter"""
        return points_along_perimeter(
            self,
            segments,
            starting_angle=starting_angle,
            rotating=rotating,
            coordinate_system=coordinate_system,
        )

    def intersection_with_line(self, line: Line) -> list[Point2D]:
        return intersect_line(self, line)

    def intersection_with_segment(self, segment: LineSegment) -> list[Point2D]:
        return intersect_segment(self, segment)

    def intersection(self, other: Line | LineSegment) -> list[Point2D]:
        """
        Пересечение с прямой или отрезком.

        Raises:
            TypeError: для неподдерживаемого типа
            DegenerateSegmentError: для отрезка нулевой длины
        """
        if isinstance(other, LineSegment):
            return intersect_segment(self, other)
        if isinstance(other, Line):
            return intersect_line(self, other)
        raise TypeError(f"cannot intersect Circle with {type(other).__name__}")

    # -------------------------------------------------------------------------
    # Равенство и порядок
    # -------------------------------------------------------------------------

    def same_size(self, other: "Circle") -> bool:
        """True если радиусы равны, независимо от центров"""
        return self.radius == other.radius

    def same_circle(self, other: "Circle") -> bool:
        """True если совпадают и радиус, и центр"""
        return self.radius == other.radius and self.center == other.center

    def __lt__(self, other: "Circle") -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self.radius < other.radius

    def __le__(self, other: "Circle") -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self.radius <= other.radius

    def __gt__(self, other: "Circle") -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self.radius > other.radius

    def __ge__(self, other: "Circle") -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self.radius >= other.radius

    def __str__(self) -> str:
        return f"Circle {{center: {self.center}, radius: {self.radius:g}}}"
