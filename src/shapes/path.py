"""
EllipsePath — Описание эллипса, вписанного в прямоугольник

Тонкая обёртка для слоя отрисовки: эллипс задаётся bounding rect.
Для окружности rect квадратный, radius_x == radius_y.
"""

from pydantic import BaseModel, Field

from src.core.domain.point import Point2D
from src.core.domain.rect import Rect


class EllipsePath(BaseModel):
    """Эллипс, вписанный в bounding_rect"""

    bounding_rect: Rect = Field(..., description="Прямоугольник, в который вписан эллипс")

    model_config = {"frozen": True}

    @property
    def center(self) -> Point2D:
        return self.bounding_rect.center

    @property
    def radius_x(self) -> float:
        return self.bounding_rect.width / 2.0

    @property
    def radius_y(self) -> float:
        return self.bounding_rect.height / 2.0

    def svg_data(self) -> str:
        """
        Данные SVG-пути: две дуги через крайние точки по X.

        Examples:
            >>> EllipsePath(bounding_rect=Rect.from_center(Point2D(0, 0), 2)).svg_data()
            'M -1 0 A 1 1 0 1 0 1 0 A 1 1 0 1 0 -1 0 Z'
        """
        rx, ry = self.radius_x, self.radius_y
        left = f"{self.bounding_rect.min_x:g} {self.center.y:g}"
        right = f"{self.bounding_rect.max_x:g} {self.center.y:g}"
        return f"M {left} A {rx:g} {ry:g} 0 1 0 {right} A {rx:g} {ry:g} 0 1 0 {left} Z"
