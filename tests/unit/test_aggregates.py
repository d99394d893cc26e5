"""
Тесты для Aggregates — sum/average/min/max

None и пустая коллекция → 0.0.
"""

from src.core.math.aggregates import average, maximum, minimum, sum_numbers


class TestSumNumbers:
    def test_sum(self):
        assert sum_numbers([1.0, 2.0, 3.0]) == 6.0

    def test_none_and_empty(self):
        assert sum_numbers(None) == 0.0
        assert sum_numbers([]) == 0.0

    def test_generator(self):
        assert sum_numbers(x * 0.5 for x in range(5)) == 5.0


class TestAverage:
    def test_average(self):
        assert average([1.0, 2.0, 3.0]) == 2.0
        assert average([-4.0, 4.0]) == 0.0

    def test_none_and_empty(self):
        """Пустая коллекция → 0.0, а не NaN."""
        assert average(None) == 0.0
        assert average([]) == 0.0

    def test_generator(self):
        assert average(float(x) for x in range(1, 4)) == 2.0


class TestMinMax:
    def test_minimum(self):
        assert minimum([3.0, -1.0, 2.0]) == -1.0

    def test_maximum(self):
        assert maximum([3.0, -1.0, 2.0]) == 3.0

    def test_none_and_empty(self):
        assert minimum(None) == 0.0
        assert maximum(None) == 0.0
        assert minimum([]) == 0.0
        assert maximum([]) == 0.0

    def test_single_value(self):
        assert minimum([7.5]) == 7.5
        assert maximum([7.5]) == 7.5

    def test_generator(self):
        assert maximum(float(x) for x in (4, 9, 1)) == 9.0
