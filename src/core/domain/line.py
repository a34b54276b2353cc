"""
Line / LineSegment — Бесконечная прямая и конечный отрезок

Line задаётся двумя различными точками и умеет находить свою точку
при заданном X или Y (None, если прямая параллельна соответствующей оси).

LineSegment — отрезок [a, b]. Отрезок нулевой длины допустим как значение,
но не имеет направления: операции, которым нужно направление, выбрасывают
DegenerateSegmentError.
"""

from pydantic import BaseModel, Field, model_validator

from src.core.domain.point import Point2D, Vector2D
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_REL,
    EPS_LENGTH,
    is_valid_float,
    is_zero,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DegenerateSegmentError(ValueError):
    """
    Отрезок нулевой (или неконечной) длины там, где требуется направление.

    Нарушение предусловия вызывающей стороной: деление на длину дало бы NaN.
    """

    pass


# =============================================================================
# LINE
# =============================================================================


class Line(BaseModel):
    """
    Бесконечная прямая через точки a и b.

    Immutable модель (frozen=True). Точки должны различаться.
    """

    a: Point2D = Field(..., description="Первая точка прямой")
    b: Point2D = Field(..., description="Вторая точка прямой")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_distinct_points(self) -> "Line":
        """Прямая через одну точку не определена"""
        if self.a.distance(self.b) < EPS_LENGTH:
            raise ValueError("line points a and b must be distinct")
        return self

    @classmethod
    def from_slope(cls, slope: float, intercept: float) -> "Line":
        """Прямая y = slope * x + intercept"""
        return cls(a=Point2D(0.0, intercept), b=Point2D(1.0, slope + intercept))

    @classmethod
    def vertical(cls, x: float) -> "Line":
        """Вертикальная прямая x = const"""
        return cls(a=Point2D(x, 0.0), b=Point2D(x, 1.0))

    @classmethod
    def horizontal(cls, y: float) -> "Line":
        """Горизонтальная прямая y = const"""
        return cls(a=Point2D(0.0, y), b=Point2D(1.0, y))

    @property
    def dx(self) -> float:
        return self.b.x - self.a.x

    @property
    def dy(self) -> float:
        return self.b.y - self.a.y

    @property
    def length(self) -> float:
        """Расстояние между точками a и b"""
        return self.a.distance(self.b)

    # Толерантность относительна длины: прямая не параллельна обеим осям сразу
    @property
    def is_vertical(self) -> bool:
        return is_zero(self.dx, EPS_FLOAT_COMPARE_REL * self.length)

    @property
    def is_horizontal(self) -> bool:
        return is_zero(self.dy, EPS_FLOAT_COMPARE_REL * self.length)

    @property
    def slope(self) -> float | None:
        """Наклон dy/dx; None для вертикальной прямой"""
        if self.is_vertical:
            return None
        return self.dy / self.dx

    def point_at_x(self, x: float) -> Point2D | None:
        """
        Точка прямой с заданной координатой X.

        Returns:
            Point2D или None, если прямая вертикальна (параллельна оси Y)
        """
        if self.is_vertical:
            return None
        t = (x - self.a.x) / self.dx
        return Point2D(x, self.a.y + t * self.dy)

    def point_at_y(self, y: float) -> Point2D | None:
        """
        Точка прямой с заданной координатой Y.

        Returns:
            Point2D или None, если прямая горизонтальна (параллельна оси X)
        """
        if self.is_horizontal:
            return None
        t = (y - self.a.y) / self.dy
        return Point2D(self.a.x + t * self.dx, y)


# =============================================================================
# LINE SEGMENT
# =============================================================================


class LineSegment(BaseModel):
    """
    Конечный отрезок от a до b.

    Immutable модель (frozen=True).
    """

    a: Point2D = Field(..., description="Начало отрезка")
    b: Point2D = Field(..., description="Конец отрезка")

    model_config = {"frozen": True}

    @property
    def vector(self) -> Vector2D:
        return self.b - self.a

    @property
    def length(self) -> float:
        return self.a.distance(self.b)

    @property
    def midpoint(self) -> Point2D:
        return Point2D((self.a.x + self.b.x) / 2.0, (self.a.y + self.b.y) / 2.0)

    @property
    def is_degenerate(self) -> bool:
        """True если длина нулевая или неконечная"""
        length = self.length
        return not is_valid_float(length) or length < EPS_LENGTH

    @property
    def line(self) -> Line:
        """
        Опорная прямая отрезка.

        Raises:
            DegenerateSegmentError: если отрезок вырожден
        """
        if self.is_degenerate:
            raise DegenerateSegmentError(f"segment {self} has no supporting line")
        return Line(a=self.a, b=self.b)

    def direction(self) -> Vector2D:
        """
        Единичный вектор направления (b - a) / length.

        Raises:
            DegenerateSegmentError: если отрезок вырожден
        """
        if self.is_degenerate:
            raise DegenerateSegmentError(
                f"segment {self} has length {self.length}, direction undefined"
            )
        length = self.length
        vector = self.vector
        return Vector2D(vector.dx / length, vector.dy / length)

    def point_at(self, t: float) -> Point2D:
        """Точка a + t * u, где u — единичное направление, t — расстояние от a"""
        return self.a + self.direction() * t

    def __str__(self) -> str:
        return f"[{self.a} -> {self.b}]"
