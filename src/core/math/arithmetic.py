"""
Arithmetic — однострочные node-функции над числами

Обёртки над арифметикой, сравнением и тригонометрией. Единственная
нетривиальная часть — отказ на невалидных входах (InvalidArgument
вместо NaN/ZeroDivisionError/math domain error).

mod использует floored modulo, как и wrap/mirror в range_mapping.
"""

import math
from typing import Callable, Final

from src.core.math.numerical_safeguards import (
    InvalidArgument,
    floor_mod,
    is_valid_float,
)


# =============================================================================
# БАЗОВАЯ АРИФМЕТИКА
# =============================================================================


def number(n: float) -> float:
    return n


def negate(n: float) -> float:
    return -n


def absolute(n: float) -> float:
    return abs(n)


def add(n1: float, n2: float) -> float:
    return n1 + n2


def subtract(n1: float, n2: float) -> float:
    return n1 - n2


def multiply(n1: float, n2: float) -> float:
    return n1 * n2


def divide(n1: float, n2: float) -> float:
    """
    Raises:
        InvalidArgument: Если n2 == 0
    """
    if n2 == 0:
        raise InvalidArgument("Divider cannot be zero.")
    return n1 / n2


def mod(n1: float, n2: float) -> float:
    """
    Floored modulo: результат имеет знак делителя.

    Examples:
        >>> mod(7, 3)
        1
        >>> mod(-7, 3)
        2
    """
    if n2 == 0:
        raise InvalidArgument("Divider cannot be zero.")
    return floor_mod(n1, n2)


def sqrt(n: float) -> float:
    if n < 0:
        raise InvalidArgument(f"Cannot take the square root of a negative value: {n}")
    return math.sqrt(n)


def log(n: float) -> float:
    """
    Натуральный логарифм.

    Raises:
        InvalidArgument: Если n == 0 или n < 0
    """
    if n == 0:
        raise InvalidArgument("Value cannot be zero.")
    if n < 0:
        raise InvalidArgument(f"Value cannot be negative: {n}")
    return math.log(n)


def even(n: float) -> bool:
    """Return True если n чётное."""
    return n % 2 == 0


def odd(n: float) -> bool:
    """Return True если n не чётное (включая дробные)."""
    return n % 2 != 0


def to_integer(n: float) -> int:
    """
    Отбрасывание дробной части (округление к нулю).

    Raises:
        InvalidArgument: Если n NaN/Inf
    """
    if not is_valid_float(n):
        raise InvalidArgument(f"Cannot convert {n} to an integer")
    return int(n)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(n: float) -> float:
    return math.sin(n)


def cos(n: float) -> float:
    return math.cos(n)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


COMPARATORS: Final[dict[str, Callable[[float, float], bool]]] = {
    "<": lambda a, b: a < b,
    ">": lambda a, b: a > b,
    "<=": lambda a, b: a <= b,
    ">=": lambda a, b: a >= b,
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
}


def compare(comparator: str, n1: float, n2: float) -> bool:
    """
    Сравнение двух чисел оператором, заданным строкой.

    Args:
        comparator: Один из "<", ">", "<=", ">=", "==", "!="
        n1: Левый операнд
        n2: Правый операнд

    Raises:
        InvalidArgument: Неизвестный comparator

    Examples:
        >>> compare("<", 1, 2)
        True
        >>> compare("!=", 1, 1)
        False
    """
    operation = COMPARATORS.get(comparator)
    if operation is None:
        raise InvalidArgument(f"unknown comparison operation {comparator}")
    return operation(n1, n2)
