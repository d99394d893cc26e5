"""
Sequences — генераторы числовых последовательностей

Модуль содержит node-функции, возвращающие упорядоченные списки float:
- RangeSequence / number_range: шаг по интервалу, end НЕ включается
- sample: ровно N равномерных точек, оба конца включаются
- make_numbers: разбор строки чисел
- random_numbers: детерминированные (по seed) равномерные выборки

Семантика range и sample намеренно различается:
- range отвечает на вопрос "пройти интервал с фиксированным шагом"
- sample отвечает на вопрос "дай N точек, включая оба конца"
"""

import random
from typing import Iterator, Optional

from src.core.math.numerical_safeguards import (
    InvalidArgument,
    validate_non_negative_int,
    validate_whole_number,
)


# =============================================================================
# RANGE
# =============================================================================


class RangeSequence:
    """
    Ленивая, конечная, перезапускаемая арифметическая последовательность.

    Значения начинаются со start и идут с шагом step, пока не достигнут
    или не перейдут end (сравнение строгое, end никогда не выдаётся).

    Вырожденные формы дают пустую последовательность без итерации:
    - step == 0
    - start == end
    - start < end и step < 0
    - start > end и step > 0

    Каждый вызов iter() создаёт новый курсор, поэтому объект можно
    обходить повторно. Длина не ограничена: очень малый step даёт очень
    длинную последовательность, потребитель может прекратить обход в
    любой момент.

    Examples:
        >>> list(RangeSequence(0.0, 10.0, 2.0))
        [0.0, 2.0, 4.0, 6.0, 8.0]
        >>> list(RangeSequence(10.0, 0.0, 2.0))
        []
    """

    __slots__ = ("start", "end", "step")

    def __init__(self, start: float, end: float, step: float):
        self.start = float(start)
        self.end = float(end)
        self.step = float(step)

    @property
    def is_degenerate(self) -> bool:
        """True если последовательность заведомо пуста."""
        start, end, step = self.start, self.end, self.step
        return (
            step == 0
            or start == end
            or (start < end and step < 0)
            or (start > end and step > 0)
        )

    def __iter__(self) -> Iterator[float]:
        if self.is_degenerate:
            return iter(())
        return self._iterate()

    def _iterate(self) -> Iterator[float]:
        cursor = self.start
        end = self.end
        step = self.step

        if step > 0:
            while cursor < end:
                yield cursor
                cursor += step
        else:
            while cursor > end:
                yield cursor
                cursor += step

    def __repr__(self) -> str:
        return f"RangeSequence(start={self.start!r}, end={self.end!r}, step={self.step!r})"


def number_range(start: float, end: float, step: float) -> list[float]:
    """
    Материализованная форма RangeSequence (node "range").

    Args:
        start: Первое значение
        end: Граница (не включается)
        step: Шаг (знак задаёт направление)

    Returns:
        Список значений; пустой для вырожденных входов

    Examples:
        >>> number_range(0, 10, 2)
        [0.0, 2.0, 4.0, 6.0, 8.0]
        >>> number_range(5, 0, -2)
        [5.0, 3.0, 1.0]
    """
    return list(RangeSequence(start, end, step))


# =============================================================================
# SAMPLE
# =============================================================================


def sample(amount: int, start: float, end: float) -> list[float]:
    """
    Ровно amount равномерно распределённых значений на [start, end].

    Шаг равен (end - start) / (amount - 1): при делении на amount
    последнее значение не дотянуло бы до end.

    Args:
        amount: Количество значений (неотрицательное целое)
        start: Начало интервала (включается)
        end: Конец интервала (включается при amount >= 2)

    Returns:
        - amount == 0 → []
        - amount == 1 → [середина интервала]
        - amount >= 2 → [start, ..., end]

    Raises:
        InvalidArgument: Если amount отрицательный или дробный, seed
            дробный или не конечный

    Examples:
        >>> sample(3, 0, 100)
        [0.0, 50.0, 100.0]
        >>> sample(1, 0, 10)
        [5.0]
    """
    amount = validate_non_negative_int(amount, "amount")
    start = float(start)
    end = float(end)

    if amount == 0:
        return []
    if amount == 1:
        return [start + (end - start) / 2]

    step = (end - start) / (amount - 1)
    return [start + step * i for i in range(amount)]


# =============================================================================
# PARSING И RANDOM
# =============================================================================


def make_numbers(text: Optional[str], separator: Optional[str] = None) -> list[float]:
    """
    Разбор строки в список чисел (node "makeNumbers").

    Args:
        text: Исходная строка, например "1;2;3"
        separator: Разделитель; None или "" → каждый символ отдельно

    Returns:
        Список float; пустой для None/""

    Raises:
        InvalidArgument: Если часть строки не является числом

    Examples:
        >>> make_numbers("1;2;3", ";")
        [1.0, 2.0, 3.0]
        >>> make_numbers("123", "")
        [1.0, 2.0, 3.0]
    """
    if not text:
        return []

    if not separator:
        parts = list(text)
    else:
        parts = text.split(separator)

    numbers = []
    for part in parts:
        # float() допускает "1_000", десятичная запись чисел — нет
        if "_" in part:
            raise InvalidArgument(f"Cannot parse {part!r} as a number")
        try:
            numbers.append(float(part))
        except ValueError as e:
            raise InvalidArgument(f"Cannot parse {part!r} as a number") from e
    return numbers


def random_numbers(amount: int, start: float, end: float, seed: int) -> list[float]:
    """
    amount случайных значений в [start, end), детерминированных по seed.

    Генератор создаётся заново на каждый вызов: одинаковый seed даёт
    одинаковый список, состояние между вызовами не разделяется.

    Raises:
        InvalidArgument: Если amount отрицательный или дробный, seed
            дробный или не конечный
    """
    amount = validate_non_negative_int(amount, "amount")
    rng = random.Random(validate_whole_number(seed, "seed"))
    start = float(start)
    span = float(end) - start
    return [start + rng.random() * span for _ in range(amount)]
