"""
CoordinateSystem — Конфигурация ориентации системы координат

Определяет, в какую сторону визуально идёт рост угла. На экране (ось Y вниз)
увеличение угла от оси X идёт по часовой стрелке; в декартовой системе
(ось Y вверх) — против часовой.

Конфигурация передаётся в операции явно. Глобального изменяемого состояния нет:
DEFAULT_COORDINATE_SYSTEM — frozen значение.
"""

from dataclasses import dataclass
from typing import Final

from src.core.domain.angle import RotationDirection


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CoordinateSystem:
    """Конфигурация ориентации системы координат.

    Параметры:
        circle_runs_clockwise: рост угла визуально идёт по часовой стрелке
    """

    circle_runs_clockwise: bool = True

    def stepping_direction(self) -> RotationDirection:
        """Визуальное направление, в котором идёт рост угла"""
        if self.circle_runs_clockwise:
            return RotationDirection.CLOCKWISE
        return RotationDirection.COUNTERCLOCKWISE

    def steps_backwards(self, rotating: RotationDirection) -> bool:
        """
        Нужно ли уменьшать угол, чтобы визуально вращаться в сторону rotating.

        True, если рост угла в этой системе идёт в противоположную сторону.
        """
        return self.circle_runs_clockwise != (rotating is RotationDirection.CLOCKWISE)


# =============================================================================
# PRESETS
# =============================================================================

# Экранные координаты: Y вниз, рост угла — по часовой
SCREEN: Final[CoordinateSystem] = CoordinateSystem(circle_runs_clockwise=True)

# Декартовы координаты: Y вверх, рост угла — против часовой
CARTESIAN: Final[CoordinateSystem] = CoordinateSystem(circle_runs_clockwise=False)

# Конвенция по умолчанию — экранные координаты
DEFAULT_COORDINATE_SYSTEM: Final[CoordinateSystem] = SCREEN
