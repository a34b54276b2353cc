"""
Angle — Модель угла и направления вращения

Immutable Pydantic модель угла. Внутреннее представление — радианы.
Поддерживает арифметику (+, -, *, /) и константу полного оборота.

Направление вращения (RotationDirection) описывает семантическое намерение
вызывающего ("по часовой на экране"), а не знак приращения угла: знак
определяется CoordinateSystem (см. coordinate_system.py).
"""

import math
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import validate_finite


# =============================================================================
# CONSTANTS
# =============================================================================

# Полный оборот в радианах
FULL_ROTATION_RADIANS: Final[float] = 2.0 * math.pi

# Полный оборот в градусах
FULL_ROTATION_DEGREES: Final[float] = 360.0


# =============================================================================
# ENUMS
# =============================================================================


class AngleUnit(str, Enum):
    """Единица измерения угла"""

    RADIANS = "radians"
    DEGREES = "degrees"


class RotationDirection(str, Enum):
    """Направление вращения (визуальное)"""

    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"

    def reversed(self) -> "RotationDirection":
        """Противоположное направление"""
        if self is RotationDirection.CLOCKWISE:
            return RotationDirection.COUNTERCLOCKWISE
        return RotationDirection.CLOCKWISE


# =============================================================================
# ANGLE MODEL
# =============================================================================


class Angle(BaseModel):
    """
    Угол в радианах.

    Immutable модель (frozen=True). Все операции возвращают новый экземпляр.
    Угол не нормализуется: Angle(3π) и Angle(π) — разные значения.

    Examples:
        >>> Angle(math.pi) + Angle(math.pi) == Angle.full_rotation()
        True
        >>> Angle.from_degrees(90.0).radians == math.pi / 2
        True
    """

    radians: float = Field(0.0, description="Значение угла в радианах")

    model_config = {"frozen": True}

    def __init__(self, radians: float = 0.0, **data: Any) -> None:
        super().__init__(radians=radians, **data)

    @field_validator("radians")
    @classmethod
    def validate_radians(cls, v: float) -> float:
        """Угол должен быть конечным"""
        validate_finite(v, "radians")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        """Угол из градусов"""
        return cls(math.radians(degrees))

    @classmethod
    def full_rotation(cls, unit: AngleUnit = AngleUnit.RADIANS) -> "Angle":
        """
        Полный оборот (2π рад / 360°).

        Args:
            unit: единица, в которой задан оборот; значение угла одно и то же,
                unit влияет только на то, как оборот был выражен

        Returns:
            Angle, равный одному полному обороту
        """
        if unit is AngleUnit.DEGREES:
            return cls.from_degrees(FULL_ROTATION_DEGREES)
        return cls(FULL_ROTATION_RADIANS)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    def value(self, unit: AngleUnit = AngleUnit.RADIANS) -> float:
        """Числовое значение угла в заданной единице"""
        if unit is AngleUnit.DEGREES:
            return self.degrees
        return self.radians

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "Angle | float") -> "Angle":
        if isinstance(other, Angle):
            return Angle(self.radians + other.radians)
        if isinstance(other, (int, float)):
            return Angle(self.radians + other)
        return NotImplemented

    def __radd__(self, other: float) -> "Angle":
        return self.__add__(other)

    def __sub__(self, other: "Angle | float") -> "Angle":
        if isinstance(other, Angle):
            return Angle(self.radians - other.radians)
        if isinstance(other, (int, float)):
            return Angle(self.radians - other)
        return NotImplemented

    def __neg__(self) -> "Angle":
        return Angle(-self.radians)

    def __mul__(self, factor: float) -> "Angle":
        if isinstance(factor, (int, float)):
            return Angle(self.radians * factor)
        return NotImplemented

    def __rmul__(self, factor: float) -> "Angle":
        return self.__mul__(factor)

    def __truediv__(self, other: "Angle | float") -> "Angle | float":
        """Angle / scalar → Angle, Angle / Angle → float (отношение)"""
        if isinstance(other, Angle):
            return self.radians / other.radians
        if isinstance(other, (int, float)):
            return Angle(self.radians / other)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Сравнение (по величине в радианах)
    # -------------------------------------------------------------------------

    def __lt__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.radians < other.radians

    def __le__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.radians <= other.radians

    def __gt__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.radians > other.radians

    def __ge__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.radians >= other.radians

    def __str__(self) -> str:
        return f"{self.radians:.6f} rad"
