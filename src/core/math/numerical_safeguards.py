"""
Numerical Safeguards — безопасные математические примитивы

Модуль обеспечивает численную устойчивость расчётов формулы капельной модели:
- Вещественное возведение в дробную степень с явной проверкой области определения
- Проверка finite-значений (NaN/Inf не пропагируют)
- Валидация параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целочисленные аргументы всегда приводятся к float до возведения в степень
2. Дробная степень неположительного основания никогда не вычисляется (DomainError)
3. Все операции детерминированы и воспроизводимы
"""

import math

from src.core.exceptions import DomainError

# =============================================================================
# ВЕЩЕСТВЕННЫЕ СТЕПЕНИ
# =============================================================================


def real_power(base: float, exponent: float) -> float:
    """
    Вещественное возведение в степень: base ** exponent.

    Основание приводится к float до вычисления, чтобы исключить
    целочисленную арифметику. Для нецелой степени основание обязано
    быть положительным.

    Args:
        base: Основание (int или float)
        exponent: Показатель степени (например, 2/3, -1/3, -3/4)

    Returns:
        Конечное значение float

    Raises:
        DomainError: Если base <= 0 при нецелом или отрицательном exponent,
            или результат не finite

    Examples:
        >>> real_power(8, 1.0 / 3.0)
        2.0
        >>> real_power(0, -1.0 / 3.0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DomainError: ...
    """
    base_f = float(base)
    exponent_f = float(exponent)

    if not is_valid_float(base_f) or not is_valid_float(exponent_f):
        raise DomainError(f"Power arguments must be finite: base={base}, exponent={exponent}")

    if base_f <= 0.0 and (exponent_f < 0.0 or not exponent_f.is_integer()):
        raise DomainError(
            f"Real power undefined for base={base_f} and exponent={exponent_f}"
        )

    try:
        result = math.pow(base_f, exponent_f)
    except OverflowError as e:
        raise DomainError(f"Power result is not finite: {base_f} ** {exponent_f}") from e

    if not is_valid_float(result):
        raise DomainError(f"Power result is not finite: {base_f} ** {exponent_f}")

    return result


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
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное и finite.

    Raises:
        DomainError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise DomainError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise DomainError(f"{name} must be positive, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
