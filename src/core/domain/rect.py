"""
Rect / Square — Осевые прямоугольник и квадрат

Immutable Pydantic модели. Origin — угол с минимальными координатами,
размеры неотрицательны.
"""

from pydantic import BaseModel, Field

from src.core.domain.point import Point2D


# =============================================================================
# RECT
# =============================================================================


class Rect(BaseModel):
    """Осевой прямоугольник origin + (width, height)"""

    origin: Point2D = Field(..., description="Угол с минимальными X и Y")
    width: float = Field(..., ge=0, description="Ширина")
    height: float = Field(..., ge=0, description="Высота")

    model_config = {"frozen": True}

    @classmethod
    def from_center(cls, center: Point2D, edges: float) -> "Rect":
        """Квадратный Rect со стороной edges, центрированный в center"""
        half = edges / 2.0
        return cls(origin=Point2D(center.x - half, center.y - half), width=edges, height=edges)

    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def max_x(self) -> float:
        return self.origin.x + self.width

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def max_y(self) -> float:
        return self.origin.y + self.height

    @property
    def mid_x(self) -> float:
        return self.origin.x + self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.origin.y + self.height / 2.0

    @property
    def center(self) -> Point2D:
        return Point2D(self.mid_x, self.mid_y)

    def contains(self, point: Point2D) -> bool:
        """Принадлежность точки (границы включительно)"""
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y


# =============================================================================
# SQUARE
# =============================================================================


class Square(BaseModel):
    """Осевой квадрат origin + edges"""

    origin: Point2D = Field(..., description="Угол с минимальными X и Y")
    edges: float = Field(..., ge=0, description="Длина стороны")

    model_config = {"frozen": True}

    @classmethod
    def from_center(cls, center: Point2D, edges: float) -> "Square":
        half = edges / 2.0
        return cls(origin=Point2D(center.x - half, center.y - half), edges=edges)

    @classmethod
    def in_rect(cls, rect: Rect) -> "Square":
        """
        Наибольший квадрат, вписанный в центр прямоугольника (aspect-fit).

        Сторона равна меньшей из сторон rect, центры совпадают.
        """
        return cls.from_center(rect.center, min(rect.width, rect.height))

    @property
    def center(self) -> Point2D:
        half = self.edges / 2.0
        return Point2D(self.origin.x + half, self.origin.y + half)

    @property
    def rect(self) -> Rect:
        return Rect(origin=self.origin, width=self.edges, height=self.edges)
