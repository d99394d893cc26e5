"""
Range Mapping — перенос значения из одного интервала в другой

Алгоритм convert_range:
1. Overflow normalization по выбранной policy (wrap/mirror/clamp/ignore)
2. Нормализация в [0, 1]: (value - src_min) / (src_max - src_min)
3. Масштабирование в target: target_min + unit * (target_max - target_min)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. wrap и mirror используют одну конвенцию modulo (floored, см.
   numerical_safeguards.floor_divmod), смещённую к src_min
2. Значение внутри [src_min, src_max) не меняется ни одной policy
3. Нулевая ширина source (src_min == src_max) → ровно target_min,
   без исключения
4. Неизвестная policy → InvalidArgument

ФОРМУЛЫ (span = src_max - src_min, q, rest = floor_divmod(value - src_min, span)):
    wrap:   value = src_min + rest                      (пила)
    mirror: value = src_max - rest  если q нечётное     (треугольник)
            value = src_min + rest  иначе
    clamp:  value = clamp(value, min(src), max(src))
    ignore: value без изменений
"""

from enum import Enum
from typing import Final

from src.core.math.numerical_safeguards import (
    InvalidArgument,
    clamp,
    floor_divmod,
    validate_finite,
)


# =============================================================================
# OVERFLOW POLICY
# =============================================================================


class OverflowPolicy(str, Enum):
    """Стратегия обработки значения вне source-интервала."""

    WRAP = "wrap"
    MIRROR = "mirror"
    CLAMP = "clamp"
    IGNORE = "ignore"


OVERFLOW_WRAP: Final[str] = OverflowPolicy.WRAP.value
OVERFLOW_MIRROR: Final[str] = OverflowPolicy.MIRROR.value
OVERFLOW_CLAMP: Final[str] = OverflowPolicy.CLAMP.value
OVERFLOW_IGNORE: Final[str] = OverflowPolicy.IGNORE.value


def resolve_overflow_policy(policy: "OverflowPolicy | str") -> OverflowPolicy:
    """
    Приведение строки к OverflowPolicy.

    Raises:
        InvalidArgument: Если policy не одна из wrap/mirror/clamp/ignore
    """
    if isinstance(policy, OverflowPolicy):
        return policy
    try:
        return OverflowPolicy(policy)
    except ValueError as e:
        allowed = ", ".join(p.value for p in OverflowPolicy)
        raise InvalidArgument(
            f"Unknown overflow policy {policy!r}, expected one of: {allowed}"
        ) from e


# =============================================================================
# OVERFLOW NORMALIZATION
# =============================================================================


def apply_overflow_policy(
    value: float,
    src_min: float,
    src_max: float,
    policy: "OverflowPolicy | str",
) -> float:
    """
    Приведение value в source-интервал согласно policy.

    Формулы применяются безусловно (без отдельной проверки границ):
    для значений внутри [src_min, src_max) они не меняют value.

    Args:
        value: Исходное значение
        src_min: Начало source-интервала
        src_max: Конец source-интервала (может быть < src_min)
        policy: wrap / mirror / clamp / ignore

    Returns:
        Нормализованное значение

    Raises:
        InvalidArgument: Неизвестная policy, нулевая ширина интервала для
            wrap/mirror, или NaN/Inf value для wrap/mirror

    Examples:
        >>> apply_overflow_policy(12.0, 0.0, 10.0, "wrap")
        2.0
        >>> apply_overflow_policy(12.0, 0.0, 10.0, "mirror")
        8.0
        >>> apply_overflow_policy(12.0, 0.0, 10.0, "clamp")
        10.0
    """
    policy = resolve_overflow_policy(policy)

    if policy is OverflowPolicy.IGNORE:
        return value

    if policy is OverflowPolicy.CLAMP:
        return clamp(value, min(src_min, src_max), max(src_min, src_max))

    validate_finite(value, "value")
    span = src_max - src_min
    quotient, rest = floor_divmod(value - src_min, span)

    if policy is OverflowPolicy.WRAP:
        return src_min + rest

    # MIRROR: нечётный период идёт в обратную сторону
    if int(quotient) % 2 == 1:
        return src_max - rest
    return src_min + rest


# =============================================================================
# CONVERT RANGE
# =============================================================================


def convert_range(
    value: float,
    src_min: float,
    src_max: float,
    target_min: float,
    target_max: float,
    overflow_policy: "OverflowPolicy | str",
) -> float:
    """
    Перенос value из [src_min, src_max] в [target_min, target_max].

    Args:
        value: Исходное значение
        src_min: Начало source-интервала
        src_max: Конец source-интервала
        target_min: Начало target-интервала
        target_max: Конец target-интервала
        overflow_policy: wrap / mirror / clamp / ignore

    Returns:
        Значение в target-интервале (для ignore — на его продолжении)

    Raises:
        InvalidArgument: Неизвестная overflow_policy

    Examples:
        >>> convert_range(5.0, 0.0, 10.0, 0.0, 100.0, "clamp")
        50.0
        >>> convert_range(15.0, 0.0, 10.0, 0.0, 100.0, "clamp")
        100.0
        >>> convert_range(15.0, 0.0, 10.0, 0.0, 100.0, "wrap")
        50.0
        >>> convert_range(3.0, 5.0, 5.0, -1.0, 1.0, "wrap")
        -1.0
    """
    policy = resolve_overflow_policy(overflow_policy)

    # Нулевая ширина source: unit-нормализация не определена → target_min
    if src_max == src_min:
        return float(target_min)

    value = apply_overflow_policy(value, src_min, src_max, policy)

    # Перевод в 0.0-1.0
    unit = (value - src_min) / (src_max - src_min)

    # Перевод в target
    return target_min + unit * (target_max - target_min)
