"""
Тесты для базовых доменных моделей: Angle, Point2D, Vector2D, Line, LineSegment, Rect, Square

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Арифметику углов, точек и векторов
3. point_at_x / point_at_y и параллельность осям
4. Immutability (frozen=True)
5. Граничные случаи и невалидные данные
"""

import math

import pytest
from pydantic import ValidationError

from src.core.domain import (
    CARTESIAN,
    SCREEN,
    Angle,
    AngleUnit,
    DegenerateSegmentError,
    Line,
    LineSegment,
    Point2D,
    Rect,
    RotationDirection,
    Square,
    Vector2D,
)


# =============================================================================
# ANGLE TESTS
# =============================================================================


class TestAngle:
    """Тесты для модели Angle"""

    def test_positional_construction(self) -> None:
        """Angle создаётся из скаляра (радианы)"""
        assert Angle(1.5).radians == 1.5
        assert Angle().radians == 0.0

    def test_full_rotation(self) -> None:
        """Полный оборот = 2π рад = 360°"""
        assert Angle.full_rotation().radians == pytest.approx(2 * math.pi)
        assert Angle.full_rotation(AngleUnit.DEGREES).degrees == pytest.approx(360.0)
        assert Angle.full_rotation().value(AngleUnit.DEGREES) == pytest.approx(360.0)

    def test_degrees_conversion(self) -> None:
        """Конверсия градусы ↔ радианы"""
        assert Angle.from_degrees(90.0).radians == pytest.approx(math.pi / 2)
        assert Angle(math.pi).degrees == pytest.approx(180.0)

    def test_arithmetic(self) -> None:
        """+, -, *, / и унарный минус"""
        a = Angle(1.0)
        b = Angle(0.25)
        assert (a + b).radians == 1.25
        assert (a - b).radians == 0.75
        assert (a + 0.5).radians == 1.5
        assert (a - 0.5).radians == 0.5
        assert (-a).radians == -1.0
        assert (a * 3).radians == 3.0
        assert (2 * a).radians == 2.0
        assert (a / 4).radians == 0.25
        assert a / b == 4.0

    def test_ordering(self) -> None:
        """Сравнение по величине"""
        assert Angle(0.1) < Angle(0.2)
        assert Angle(0.2) >= Angle(0.2)
        assert Angle(0.3) > Angle(0.2)

    def test_nan_rejected(self) -> None:
        """NaN угол запрещён"""
        with pytest.raises(ValidationError):
            Angle(float("nan"))

    def test_angle_immutable(self) -> None:
        """Angle должен быть immutable (frozen=True)"""
        angle = Angle(1.0)
        with pytest.raises(ValidationError):
            angle.radians = 2.0  # type: ignore


class TestRotationDirection:
    """Тесты для RotationDirection"""

    def test_reversed(self) -> None:
        """Противоположное направление"""
        assert RotationDirection.CLOCKWISE.reversed() == RotationDirection.COUNTERCLOCKWISE
        assert RotationDirection.COUNTERCLOCKWISE.reversed() == RotationDirection.CLOCKWISE


# =============================================================================
# POINT / VECTOR TESTS
# =============================================================================


class TestPointVector:
    """Тесты для Point2D и Vector2D"""

    def test_distance(self) -> None:
        """Евклидово расстояние"""
        assert Point2D(0.0, 0.0).distance(Point2D(3.0, 4.0)) == 5.0

    def test_point_plus_vector(self) -> None:
        """Point + Vector → Point"""
        assert Point2D(1.0, 2.0) + Vector2D(0.5, -1.0) == Point2D(1.5, 1.0)

    def test_point_minus_point(self) -> None:
        """Point - Point → Vector"""
        assert Point2D(3.0, 5.0) - Point2D(1.0, 1.0) == Vector2D(2.0, 4.0)

    def test_point_minus_vector(self) -> None:
        """Point - Vector → Point"""
        assert Point2D(3.0, 5.0) - Vector2D(1.0, 1.0) == Point2D(2.0, 4.0)

    def test_vector_from_angle(self) -> None:
        """Вектор из угла и длины"""
        vector = Vector2D.from_angle(Angle(math.pi / 2), 2.0)
        assert vector.x == pytest.approx(0.0, abs=1e-12)
        assert vector.y == pytest.approx(2.0)
        assert vector.magnitude == pytest.approx(2.0)

    def test_vector_ops(self) -> None:
        """dot, *, +, -, normalized"""
        v = Vector2D(3.0, 4.0)
        assert v.dot(Vector2D(1.0, 0.0)) == 3.0
        assert v * 2 == Vector2D(6.0, 8.0)
        assert v + Vector2D(1.0, 1.0) == Vector2D(4.0, 5.0)
        assert v - Vector2D(1.0, 1.0) == Vector2D(2.0, 3.0)
        assert -v == Vector2D(-3.0, -4.0)
        unit = v.normalized()
        assert unit.dx == pytest.approx(0.6)
        assert unit.dy == pytest.approx(0.8)

    def test_vector_angle(self) -> None:
        """Угол вектора через atan2"""
        assert Vector2D(0.0, 1.0).angle.radians == pytest.approx(math.pi / 2)

    def test_normalize_zero_vector_raises(self) -> None:
        """Нулевой вектор нельзя нормализовать"""
        with pytest.raises(ValueError, match="cannot normalize"):
            Vector2D(0.0, 0.0).normalized()

    def test_point_inf_rejected(self) -> None:
        """Бесконечные координаты запрещены"""
        with pytest.raises(ValidationError):
            Point2D(float("inf"), 0.0)

    def test_keyword_construction(self) -> None:
        """Keyword-аргументы эквивалентны позиционным"""
        assert Point2D(x=1.0, y=2.0) == Point2D(1.0, 2.0)
        assert str(Point2D(1.5, -2.0)) == "(1.5, -2)"


# =============================================================================
# LINE / SEGMENT TESTS
# =============================================================================


class TestLine:
    """Тесты для Line"""

    def test_point_at_x(self) -> None:
        """Точка при заданном X"""
        line = Line.from_slope(2.0, 1.0)
        assert line.point_at_x(3.0) == Point2D(3.0, 7.0)
        assert line.slope == 2.0

    def test_point_at_y(self) -> None:
        """Точка при заданном Y"""
        line = Line.from_slope(2.0, 1.0)
        point = line.point_at_y(5.0)
        assert point is not None
        assert point.x == pytest.approx(2.0)

    def test_vertical_has_no_point_at_x(self) -> None:
        """Вертикальная прямая: point_at_x → None"""
        line = Line.vertical(4.0)
        assert line.is_vertical
        assert line.point_at_x(1.0) is None
        assert line.point_at_y(7.0) == Point2D(4.0, 7.0)
        assert line.slope is None

    def test_horizontal_has_no_point_at_y(self) -> None:
        """Горизонтальная прямая: point_at_y → None"""
        line = Line.horizontal(-2.0)
        assert line.is_horizontal
        assert line.point_at_y(1.0) is None
        assert line.point_at_x(9.0) == Point2D(9.0, -2.0)

    def test_short_diagonal_not_parallel(self) -> None:
        """Короткая диагональ не параллельна ни одной оси"""
        line = Line(a=Point2D(0.0, 0.0), b=Point2D(1e-12, 1e-12))
        assert not line.is_vertical
        assert not line.is_horizontal
        point = line.point_at_x(1.0)
        assert point is not None
        assert point.y == pytest.approx(1.0)

    def test_parallel_relative_to_length(self) -> None:
        """Смещение по X, ничтожное относительно длины → вертикальная"""
        line = Line(a=Point2D(0.0, 0.0), b=Point2D(1e-12, 1.0))
        assert line.is_vertical
        assert not line.is_horizontal
        assert line.length == pytest.approx(1.0)

    def test_coincident_points_rejected(self) -> None:
        """Прямая через одну точку не определена"""
        with pytest.raises(ValidationError, match="must be distinct"):
            Line(a=Point2D(1.0, 1.0), b=Point2D(1.0, 1.0))


class TestLineSegment:
    """Тесты для LineSegment"""

    def test_length_and_midpoint(self) -> None:
        """Длина и середина"""
        segment = LineSegment(a=Point2D(0.0, 0.0), b=Point2D(6.0, 8.0))
        assert segment.length == 10.0
        assert segment.midpoint == Point2D(3.0, 4.0)
        assert segment.vector == Vector2D(6.0, 8.0)

    def test_direction_and_point_at(self) -> None:
        """Единичное направление и точка на расстоянии t от a"""
        segment = LineSegment(a=Point2D(0.0, 0.0), b=Point2D(6.0, 8.0))
        direction = segment.direction()
        assert direction.magnitude == pytest.approx(1.0)
        point = segment.point_at(5.0)
        assert point.x == pytest.approx(3.0)
        assert point.y == pytest.approx(4.0)

    def test_supporting_line(self) -> None:
        """Опорная прямая проходит через концы"""
        segment = LineSegment(a=Point2D(0.0, 1.0), b=Point2D(2.0, 5.0))
        assert segment.line.point_at_x(2.0) == Point2D(2.0, 5.0)

    def test_degenerate(self) -> None:
        """Отрезок нулевой длины допустим, но без направления"""
        segment = LineSegment(a=Point2D(1.0, 1.0), b=Point2D(1.0, 1.0))
        assert segment.is_degenerate
        assert segment.length == 0.0
        with pytest.raises(DegenerateSegmentError):
            segment.direction()
        with pytest.raises(DegenerateSegmentError):
            _ = segment.line


# =============================================================================
# RECT / SQUARE TESTS
# =============================================================================


class TestRectSquare:
    """Тесты для Rect и Square"""

    def test_rect_from_center(self) -> None:
        """Rect по центру и стороне"""
        rect = Rect.from_center(Point2D(1.0, 2.0), 4.0)
        assert rect.origin == Point2D(-1.0, 0.0)
        assert rect.center == Point2D(1.0, 2.0)
        assert (rect.min_x, rect.max_x, rect.min_y, rect.max_y) == (-1.0, 3.0, 0.0, 4.0)

    def test_rect_contains(self) -> None:
        """Принадлежность точки прямоугольнику"""
        rect = Rect(origin=Point2D(0.0, 0.0), width=2.0, height=1.0)
        assert rect.contains(Point2D(2.0, 1.0))
        assert not rect.contains(Point2D(2.1, 0.5))

    def test_negative_size_rejected(self) -> None:
        """Отрицательные размеры запрещены"""
        with pytest.raises(ValidationError):
            Rect(origin=Point2D(0.0, 0.0), width=-1.0, height=1.0)
        with pytest.raises(ValidationError):
            Square(origin=Point2D(0.0, 0.0), edges=-1.0)

    def test_square_in_rect(self) -> None:
        """Aspect-fit квадрат в центре прямоугольника"""
        rect = Rect(origin=Point2D(0.0, 0.0), width=10.0, height=4.0)
        square = Square.in_rect(rect)
        assert square.edges == 4.0
        assert square.origin == Point2D(3.0, 0.0)
        assert square.center == rect.center

    def test_square_from_center(self) -> None:
        """Square по центру и стороне"""
        square = Square.from_center(Point2D(0.0, 0.0), 2.0)
        assert square.origin == Point2D(-1.0, -1.0)
        assert square.rect == Rect(origin=Point2D(-1.0, -1.0), width=2.0, height=2.0)


# =============================================================================
# COORDINATE SYSTEM TESTS
# =============================================================================


class TestCoordinateSystem:
    """Тесты для CoordinateSystem"""

    def test_presets(self) -> None:
        """SCREEN: рост угла по часовой; CARTESIAN: против"""
        assert SCREEN.stepping_direction() == RotationDirection.CLOCKWISE
        assert CARTESIAN.stepping_direction() == RotationDirection.COUNTERCLOCKWISE
        assert SCREEN.circle_runs_clockwise
        assert not CARTESIAN.circle_runs_clockwise

    def test_steps_backwards(self) -> None:
        """Шаг назад, когда запрошенное направление не совпадает с ростом угла"""
        assert not SCREEN.steps_backwards(RotationDirection.CLOCKWISE)
        assert SCREEN.steps_backwards(RotationDirection.COUNTERCLOCKWISE)
        assert CARTESIAN.steps_backwards(RotationDirection.CLOCKWISE)
        assert not CARTESIAN.steps_backwards(RotationDirection.COUNTERCLOCKWISE)

    def test_frozen(self) -> None:
        """Конфигурация неизменяема"""
        with pytest.raises(AttributeError):
            SCREEN.circle_runs_clockwise = False  # type: ignore
