"""
Point2D / Vector2D — Точка и вектор на плоскости

Immutable Pydantic модели. Точка — позиция, вектор — смещение.
Арифметика разделяет эти понятия:
    Point2D + Vector2D → Point2D
    Point2D - Point2D  → Vector2D
    Vector2D ± Vector2D → Vector2D
"""

import math
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.domain.angle import Angle
from src.core.math.numerical_safeguards import EPS_LENGTH, validate_finite


# =============================================================================
# VECTOR
# =============================================================================


class Vector2D(BaseModel):
    """
    Вектор смещения (dx, dy).

    Immutable модель (frozen=True).
    """

    dx: float = Field(..., description="Смещение по оси X")
    dy: float = Field(..., description="Смещение по оси Y")

    model_config = {"frozen": True}

    def __init__(self, dx: float, dy: float, **data: Any) -> None:
        super().__init__(dx=dx, dy=dy, **data)

    @classmethod
    def from_angle(cls, angle: Angle, magnitude: float) -> "Vector2D":
        """
        Вектор заданной длины в направлении angle.

        Угол отсчитывается от положительной оси X в сторону положительной оси Y.
        Визуальное направление (по/против часовой) зависит от ориентации оси Y.
        """
        return cls(
            math.cos(angle.radians) * magnitude,
            math.sin(angle.radians) * magnitude,
        )

    # Aliases: вектор часто читается как (x, y)
    @property
    def x(self) -> float:
        return self.dx

    @property
    def y(self) -> float:
        return self.dy

    @property
    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    @property
    def angle(self) -> Angle:
        return Angle(math.atan2(self.dy, self.dx))

    def normalized(self) -> "Vector2D":
        """
        Единичный вектор того же направления.

        Raises:
            ValueError: если длина вектора меньше EPS_LENGTH (направление не определено)
        """
        length = self.magnitude
        if length < EPS_LENGTH:
            raise ValueError(f"cannot normalize vector of length {length}")
        return Vector2D(self.dx / length, self.dy / length)

    def dot(self, other: "Vector2D") -> float:
        """Скалярное произведение"""
        return self.dx * other.dx + self.dy * other.dy

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.dx - other.dx, self.dy - other.dy)

    def __mul__(self, factor: float) -> "Vector2D":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector2D(self.dx * factor, self.dy * factor)

    def __rmul__(self, factor: float) -> "Vector2D":
        return self.__mul__(factor)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.dx, -self.dy)

    def __str__(self) -> str:
        return f"<{self.dx:g}, {self.dy:g}>"


# =============================================================================
# POINT
# =============================================================================


class Point2D(BaseModel):
    """
    Точка на плоскости.

    Immutable модель (frozen=True). Координаты должны быть конечными.
    """

    x: float = Field(..., description="Координата X")
    y: float = Field(..., description="Координата Y")

    model_config = {"frozen": True}

    def __init__(self, x: float, y: float, **data: Any) -> None:
        super().__init__(x=x, y=y, **data)

    @field_validator("x", "y")
    @classmethod
    def validate_coordinate(cls, v: float, info) -> float:
        """Координаты NaN/Inf запрещены"""
        validate_finite(v, info.field_name)
        return v

    @classmethod
    def origin(cls) -> "Point2D":
        return cls(0.0, 0.0)

    def distance(self, other: "Point2D") -> float:
        """Евклидово расстояние до другой точки"""
        return math.hypot(other.x - self.x, other.y - self.y)

    def __add__(self, vector: Vector2D) -> "Point2D":
        if not isinstance(vector, Vector2D):
            return NotImplemented
        return Point2D(self.x + vector.dx, self.y + vector.dy)

    def __sub__(self, other: "Point2D | Vector2D") -> "Point2D | Vector2D":
        """Point - Point → Vector2D, Point - Vector2D → Point2D"""
        if isinstance(other, Point2D):
            return Vector2D(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2D):
            return Point2D(self.x - other.dx, self.y - other.dy)
        return NotImplemented

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"
