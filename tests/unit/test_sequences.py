"""
Тесты для Sequences — range, sample, makeNumbers, randomNumbers

Проверяемые инварианты:
1. range: вырожденные формы → пустая последовательность
2. range: end никогда не выдаётся (строгое сравнение)
3. range: ленивость и перезапускаемость RangeSequence
4. sample: ровно amount значений, оба конца включены при amount >= 2
5. sample: amount 0/1 — определённые вырожденные результаты
6. Детерминизм randomNumbers по seed
"""

import math
from itertools import islice

import pytest

from src.core.math.numerical_safeguards import InvalidArgument
from src.core.math.sequences import (
    RangeSequence,
    make_numbers,
    number_range,
    random_numbers,
    sample,
)


# =============================================================================
# ТЕСТЫ: Range
# =============================================================================


class TestNumberRange:
    """Тесты number_range: шаг по интервалу без включения end."""

    def test_basic_ascending(self):
        """range(0, 10, 2) → [0, 2, 4, 6, 8]."""
        assert number_range(0, 10, 2) == [0.0, 2.0, 4.0, 6.0, 8.0]

    def test_basic_descending(self):
        """Отрицательный шаг при start > end."""
        assert number_range(5, 0, -2) == [5.0, 3.0, 1.0]
        assert number_range(10, 0, -5) == [10.0, 5.0]

    def test_step_not_dividing_span(self):
        """Последнее значение — последнее строго меньше end."""
        assert number_range(0, 5, 2) == [0.0, 2.0, 4.0]

    def test_values_are_floats(self):
        result = number_range(0, 3, 1)
        assert all(isinstance(v, float) for v in result)

    def test_zero_step_empty(self):
        """step == 0 → пусто."""
        assert number_range(0, 10, 0) == []
        assert number_range(10, 0, 0) == []

    def test_equal_bounds_empty(self):
        """start == end → пусто при любом шаге."""
        assert number_range(3, 3, 1) == []
        assert number_range(3, 3, -1) == []

    def test_wrong_direction_empty(self):
        """Направление шага не совпадает с направлением интервала → пусто."""
        assert number_range(0, 10, -1) == []
        assert number_range(10, 0, 1) == []

    def test_ascending_exclusive(self):
        """Все значения строго меньше end (включая float drift)."""
        for start, end, step in [(0, 1, 0.1), (-3, 3, 0.7), (0, 10, 2), (0.5, 2.5, 0.25)]:
            values = number_range(start, end, step)
            assert values
            assert all(v < end for v in values)
            assert values[0] == start

    def test_descending_exclusive(self):
        """Все значения строго больше end."""
        for start, end, step in [(1, 0, -0.1), (3, -3, -0.7), (10, 0, -2)]:
            values = number_range(start, end, step)
            assert values
            assert all(v > end for v in values)
            assert values[0] == start

    def test_end_never_emitted(self):
        assert 10.0 not in number_range(0, 10, 1)
        assert 0.0 not in number_range(10, 0, -1)

    def test_step_larger_than_span(self):
        """Шаг больше интервала → только start."""
        assert number_range(0, 1, 5) == [0.0]


class TestRangeSequence:
    """Тесты RangeSequence: ленивость и повторный обход."""

    def test_restartable(self):
        """Каждый iter() начинает заново."""
        seq = RangeSequence(0, 3, 1)
        assert list(seq) == [0.0, 1.0, 2.0]
        assert list(seq) == [0.0, 1.0, 2.0]

    def test_independent_iterators(self):
        """Два итератора не разделяют курсор."""
        seq = RangeSequence(0, 5, 1)
        it1 = iter(seq)
        it2 = iter(seq)
        assert next(it1) == 0.0
        assert next(it1) == 1.0
        assert next(it2) == 0.0

    def test_lazy_long_sequence(self):
        """Очень малый шаг: потребитель может остановиться в любой момент."""
        seq = RangeSequence(0.0, 1e12, 1e-9)
        assert list(islice(seq, 3)) == [0.0, 1e-9, 2e-9]

    def test_unbounded_end(self):
        """Бесконечный end — ленивая бесконечная последовательность."""
        seq = RangeSequence(0.0, math.inf, 1.0)
        assert list(islice(seq, 5)) == [0.0, 1.0, 2.0, 3.0, 4.0]

    def test_exhausted_iterator_raises_stop(self):
        it = iter(RangeSequence(0, 1, 1))
        assert next(it) == 0.0
        with pytest.raises(StopIteration):
            next(it)

    def test_is_degenerate(self):
        assert RangeSequence(0, 10, 0).is_degenerate
        assert RangeSequence(1, 1, 1).is_degenerate
        assert RangeSequence(0, 10, -1).is_degenerate
        assert RangeSequence(10, 0, 1).is_degenerate
        assert not RangeSequence(0, 10, 1).is_degenerate
        assert not RangeSequence(10, 0, -1).is_degenerate

    def test_degenerate_yields_nothing(self):
        assert list(RangeSequence(0, 10, 0)) == []

    def test_repr(self):
        assert repr(RangeSequence(0, 10, 2)) == "RangeSequence(start=0.0, end=10.0, step=2.0)"


# =============================================================================
# ТЕСТЫ: Sample
# =============================================================================


class TestSample:
    """Тесты sample: N равномерных точек с обоими концами."""

    def test_basic(self):
        """sample(3, 0, 100) → [0, 50, 100]."""
        assert sample(3, 0, 100) == [0.0, 50.0, 100.0]

    def test_zero_amount(self):
        assert sample(0, 0, 10) == []
        assert sample(0, -5, 5) == []

    def test_single_amount_is_midpoint(self):
        assert sample(1, 0, 10) == [5.0]
        assert sample(1, -4, 2) == [-1.0]

    def test_length_equals_amount(self):
        for amount in (2, 3, 7, 10, 101):
            assert len(sample(amount, -1.5, 3.25)) == amount

    def test_endpoints_included(self):
        """Первое значение == start, последнее ≈ end."""
        for amount in (2, 3, 7, 10, 101):
            for start, end in [(0.0, 1.0), (-1.5, 3.25), (10.0, -10.0), (0.1, 0.3)]:
                values = sample(amount, start, end)
                assert values[0] == start
                assert values[-1] == pytest.approx(end, abs=1e-12)

    def test_even_spacing(self):
        values = sample(5, 0, 1)
        diffs = [b - a for a, b in zip(values, values[1:])]
        assert diffs == pytest.approx([0.25] * 4)

    def test_descending_interval(self):
        assert sample(3, 10, 0) == [10.0, 5.0, 0.0]

    def test_zero_width_interval(self):
        assert sample(3, 2, 2) == [2.0, 2.0, 2.0]

    def test_integral_float_amount_accepted(self):
        """Node engine передаёт amount как double."""
        assert sample(3.0, 0, 100) == [0.0, 50.0, 100.0]

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidArgument, match="non-negative"):
            sample(-1, 0, 10)

    def test_fractional_amount_rejected(self):
        with pytest.raises(InvalidArgument, match="integer"):
            sample(2.5, 0, 10)


# =============================================================================
# ТЕСТЫ: makeNumbers
# =============================================================================


class TestMakeNumbers:
    """Тесты make_numbers: разбор строки чисел."""

    def test_with_separator(self):
        assert make_numbers("1;2;3", ";") == [1.0, 2.0, 3.0]

    def test_whitespace_tolerated(self):
        assert make_numbers(" 1, 2.5 ,-3", ",") == [1.0, 2.5, -3.0]

    def test_empty_and_none_text(self):
        assert make_numbers("", ";") == []
        assert make_numbers(None, ";") == []

    def test_no_separator_splits_characters(self):
        assert make_numbers("123", "") == [1.0, 2.0, 3.0]
        assert make_numbers("405", None) == [4.0, 0.0, 5.0]

    def test_malformed_part_rejected(self):
        with pytest.raises(InvalidArgument, match="'x'"):
            make_numbers("1;x;3", ";")

    def test_empty_part_rejected(self):
        with pytest.raises(InvalidArgument):
            make_numbers("1;;3", ";")

    def test_digit_group_underscores_rejected(self):
        """float() принимает "1_0", строка чисел — нет."""
        with pytest.raises(InvalidArgument, match="'1_0'"):
            make_numbers("1_0;2", ";")
        with pytest.raises(InvalidArgument):
            make_numbers("1_000", ",")

    def test_chains_parse_error(self):
        with pytest.raises(InvalidArgument) as exc_info:
            make_numbers("abc", ",")
        assert isinstance(exc_info.value.__cause__, ValueError)


# =============================================================================
# ТЕСТЫ: randomNumbers
# =============================================================================


class TestRandomNumbers:
    """Тесты random_numbers: детерминизм по seed."""

    def test_same_seed_same_values(self):
        assert random_numbers(10, 0, 1, 42) == random_numbers(10, 0, 1, 42)

    def test_different_seed_different_values(self):
        assert random_numbers(10, 0, 1, 1) != random_numbers(10, 0, 1, 2)

    def test_length(self):
        assert len(random_numbers(25, -5, 5, 0)) == 25
        assert random_numbers(0, -5, 5, 0) == []

    def test_values_in_interval(self):
        values = random_numbers(200, -5, 5, 7)
        assert all(-5 <= v < 5 for v in values)

    def test_reversed_interval(self):
        values = random_numbers(200, 5, -5, 7)
        assert all(-5 < v <= 5 for v in values)

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidArgument):
            random_numbers(-3, 0, 1, 0)

    def test_integral_float_seed_accepted(self):
        """Node engine передаёт seed как double."""
        assert random_numbers(5, 0, 1, 42.0) == random_numbers(5, 0, 1, 42)

    def test_non_finite_seed_rejected(self):
        for seed in (math.nan, math.inf, -math.inf):
            with pytest.raises(InvalidArgument, match="seed"):
                random_numbers(3, 0, 1, seed)

    def test_fractional_seed_rejected(self):
        """1.7 не усекается молча до 1."""
        with pytest.raises(InvalidArgument, match="seed must be an integer"):
            random_numbers(3, 0, 1, 1.7)

    def test_non_numeric_seed_rejected(self):
        with pytest.raises(InvalidArgument):
            random_numbers(3, 0, 1, "42")
