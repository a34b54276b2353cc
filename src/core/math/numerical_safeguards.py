"""
Numerical Safeguards — Safe Math Primitives для 2-D геометрии

Модуль обеспечивает численную устойчивость геометрических операций:
- Epsilon-параметры для сравнений координат и длин
- NaN/Inf проверки для предотвращения распространения невалидных значений
- Epsilon-сравнения float (is_close, is_zero, within_tolerance)
- Безопасный sqrt для дискриминантов, близких к нулю
- Валидация параметров (non-negative, finite)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют из валидаторов (ValueError)
2. Float сравнения на границах всегда идут через epsilon
3. EPS_INTERSECTION фиксирован (абсолютный), не масштабируется радиусом
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютный epsilon для касания и граничных точек отрезка
# Используется в intersection: |d - r| < eps, |t - length| < eps
EPS_INTERSECTION: Final[float] = 1e-4

# Минимальная длина отрезка/вектора, ниже которой направление не определено
EPS_LENGTH: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def within_tolerance(a: float, b: float, tol: float = EPS_INTERSECTION) -> bool:
    """
    Строгая проверка близости: abs(a - b) < tol.

    В отличие от is_close граница исключена: ровно tol — уже не "близко".
    Используется для касания (|d - r| < eps) и дальнего конца отрезка.

    Examples:
        >>> within_tolerance(1.0, 1.00005)
        True
        >>> within_tolerance(1.0, 1.0002)
        False
    """
    return abs(a - b) < tol


# =============================================================================
# БЕЗОПАСНЫЕ ОПЕРАЦИИ
# =============================================================================


def safe_sqrt(value: float) -> float:
    """
    sqrt с защитой от малых отрицательных значений.

    Дискриминант r² - d² при d ≈ r может стать -1e-17 из-за округления.
    Такие значения приводятся к 0.0.

    Raises:
        ValueError: если value NaN/Inf или отрицательно сверх EPS_FLOAT_COMPARE_ABS
    """
    if not is_valid_float(value):
        raise ValueError(f"sqrt argument must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        if value < -EPS_FLOAT_COMPARE_ABS:
            raise ValueError(f"sqrt argument must be non-negative, got {value}")
        return 0.0

    return math.sqrt(value)


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
