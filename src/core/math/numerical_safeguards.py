"""
Numerical Safeguards — базовые примитивы для node-функций

Модуль содержит общие для всей библиотеки проверки и helpers:
- InvalidArgument — единый тип ошибки на границе вызова node-функции
- Валидация входов (finite float, неотрицательный integer count)
- Epsilon-сравнения float
- clamp и floored modulo (единая конвенция для wrap/mirror и mod)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный вход → InvalidArgument сразу, без внутреннего восстановления
2. Modulo всегда floored: для положительного делителя результат в [0, divisor)
3. Все функции чистые и детерминированные
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Невалидный аргумент node-функции.

    Поднимается немедленно на границе вызова: деление/modulo на ноль,
    log(0), неизвестный comparator или overflow policy, невалидная строка
    чисел, отрицательный count. Внутри библиотеки не перехватывается.
    """
    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение — конечный float.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        InvalidArgument: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidArgument(f"{name} must be a finite number, got {value}")
    return value


def is_number(value: object) -> bool:
    """
    Проверка, что value — числовой порт (int или float, но не bool).

    Examples:
        >>> is_number(1.5)
        True
        >>> is_number(True)
        False
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_whole_number(value: float, name: str) -> int:
    """
    Валидация целочисленного параметра любого знака (seed и т.п.).

    Принимает int и float с целым значением; NaN/Inf и дробные значения
    отклоняются.

    Raises:
        InvalidArgument: Если value дробный, не конечный или не число

    Examples:
        >>> validate_whole_number(-7.0, "seed")
        -7
    """
    if not is_number(value):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")

    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidArgument(f"{name} must be an integer, got {value}")
        value = int(value)

    return value


def validate_non_negative_int(value: int, name: str) -> int:
    """
    Валидация count-параметра (amount и т.п.).

    Принимает int и float с целым значением (node engine передаёт числа
    как double).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        InvalidArgument: Если value отрицательный, дробный или не число

    Examples:
        >>> validate_non_negative_int(3, "amount")
        3
        >>> validate_non_negative_int(3.0, "amount")
        3
    """
    value = validate_whole_number(value, name)

    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")

    return value


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


# =============================================================================
# CLAMP И MODULO
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def floor_divmod(value: float, divisor: float) -> tuple[float, float]:
    """
    Floored division с остатком: value = quotient * divisor + rest.

    Конвенция floored modulo (как Python `%`): остаток имеет знак делителя.
    Для положительного делителя совпадает с Euclidean modulo, т.е.
    rest ∈ [0, divisor).

    Args:
        value: Делимое
        divisor: Делитель (не ноль)

    Returns:
        (quotient, rest), quotient — целое значение типа float

    Raises:
        InvalidArgument: Если divisor == 0

    Examples:
        >>> floor_divmod(7.0, 5.0)
        (1.0, 2.0)
        >>> floor_divmod(-2.0, 5.0)
        (-1.0, 3.0)
    """
    if divisor == 0:
        raise InvalidArgument("Divider cannot be zero.")

    quotient, rest = divmod(value, divisor)

    # Для крошечных отрицательных value float-сложение даёт rest == divisor
    if rest == divisor:
        quotient += 1.0
        rest = 0.0

    return quotient, rest


def floor_mod(value: float, divisor: float) -> float:
    """
    Floored modulo.

    Examples:
        >>> floor_mod(12.0, 10.0)
        2.0
        >>> floor_mod(-3.0, 10.0)
        7.0
    """
    return floor_divmod(value, divisor)[1]
