"""Конфигурация библиотеки node-функций."""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from src.core.math.range_mapping import OverflowPolicy


@dataclass(frozen=True)
class LibraryConfig:
    """Конфигурация FunctionLibrary.

    - namespace: имя библиотеки, под которым её видит node engine
    - materialize_limit: максимум элементов при материализации range через
      библиотеку (None — без ограничения, как в RangeSequence)
    - default_overflow_policy: policy для convertRange, если node не
      передал шестой аргумент
    """

    namespace: str = "math"
    materialize_limit: Optional[int] = None
    default_overflow_policy: str = OverflowPolicy.CLAMP.value

    def __post_init__(self):
        if not self.namespace:
            raise ValueError("namespace cannot be empty")

        if self.materialize_limit is not None:
            if isinstance(self.materialize_limit, bool) or not isinstance(self.materialize_limit, int):
                raise ValueError(
                    f"materialize_limit must be an integer or None, got {self.materialize_limit!r}"
                )
            if self.materialize_limit < 0:
                raise ValueError(
                    f"materialize_limit must be non-negative, got {self.materialize_limit}"
                )

        allowed = {p.value for p in OverflowPolicy}
        if self.default_overflow_policy not in allowed:
            raise ValueError(
                f"default_overflow_policy must be one of {sorted(allowed)}, "
                f"got {self.default_overflow_policy!r}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LibraryConfig":
        """Построение конфигурации из mapping (например, из JSON настроек).

        Raises:
            ValueError: неизвестные ключи или невалидные значения
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown LibraryConfig keys: {sorted(unknown)}")
        return cls(**dict(data))
