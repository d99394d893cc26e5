"""
Aggregates — свёртки над коллекциями чисел

None и пустая коллекция дают 0.0 (node engine передаёт None, когда
порт не подключён).
"""

from typing import Iterable, Optional


def sum_numbers(numbers: Optional[Iterable[float]]) -> float:
    """
    Examples:
        >>> sum_numbers([1.0, 2.0, 3.0])
        6.0
        >>> sum_numbers(None)
        0.0
    """
    if numbers is None:
        return 0.0
    total = 0.0
    for n in numbers:
        total += n
    return total


def average(numbers: Optional[Iterable[float]]) -> float:
    """
    Среднее арифметическое.

    Пустая коллекция → 0.0 (а не NaN).

    Examples:
        >>> average([1.0, 2.0, 3.0])
        2.0
        >>> average([])
        0.0
    """
    if numbers is None:
        return 0.0
    total = 0.0
    count = 0
    for n in numbers:
        total += n
        count += 1
    if count == 0:
        return 0.0
    return total / count


def minimum(numbers: Optional[Iterable[float]]) -> float:
    if numbers is None:
        return 0.0
    return min(numbers, default=0.0)


def maximum(numbers: Optional[Iterable[float]]) -> float:
    if numbers is None:
        return 0.0
    return max(numbers, default=0.0)
