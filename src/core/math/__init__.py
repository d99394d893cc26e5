"""
Core math modules для nodemath

Чистые численные node-функции: последовательности, перенос интервалов,
арифметика, свёртки и геометрия.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Exceptions
    InvalidArgument,
    # Validation
    is_number,
    is_valid_float,
    validate_finite,
    validate_non_negative_int,
    validate_whole_number,
    # Utilities
    clamp,
    floor_divmod,
    floor_mod,
    is_close,
)

# Sequences
from src.core.math.sequences import (
    RangeSequence,
    make_numbers,
    number_range,
    random_numbers,
    sample,
)

# Range Mapping
from src.core.math.range_mapping import (
    OVERFLOW_CLAMP,
    OVERFLOW_IGNORE,
    OVERFLOW_MIRROR,
    OVERFLOW_WRAP,
    OverflowPolicy,
    apply_overflow_policy,
    convert_range,
    resolve_overflow_policy,
)

# Arithmetic
from src.core.math.arithmetic import (
    COMPARATORS,
    absolute,
    add,
    compare,
    cos,
    divide,
    even,
    log,
    mod,
    multiply,
    negate,
    number,
    odd,
    sin,
    sqrt,
    subtract,
    to_integer,
)

# Aggregates
from src.core.math.aggregates import (
    average,
    maximum,
    minimum,
    sum_numbers,
)

# Geometry
from src.core.math.geometry import (
    angle,
    coordinates,
    degrees,
    distance,
    radians,
    reflect,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Exceptions
    "InvalidArgument",
    # Numerical Safeguards — Validation
    "is_number",
    "is_valid_float",
    "validate_finite",
    "validate_non_negative_int",
    "validate_whole_number",
    # Numerical Safeguards — Utilities
    "clamp",
    "floor_divmod",
    "floor_mod",
    "is_close",
    # Sequences
    "RangeSequence",
    "make_numbers",
    "number_range",
    "random_numbers",
    "sample",
    # Range Mapping — Constants
    "OVERFLOW_CLAMP",
    "OVERFLOW_IGNORE",
    "OVERFLOW_MIRROR",
    "OVERFLOW_WRAP",
    # Range Mapping — Types
    "OverflowPolicy",
    # Range Mapping — Functions
    "apply_overflow_policy",
    "convert_range",
    "resolve_overflow_policy",
    # Arithmetic
    "COMPARATORS",
    "absolute",
    "add",
    "compare",
    "cos",
    "divide",
    "even",
    "log",
    "mod",
    "multiply",
    "negate",
    "number",
    "odd",
    "sin",
    "sqrt",
    "subtract",
    "to_integer",
    # Aggregates
    "average",
    "maximum",
    "minimum",
    "sum_numbers",
    # Geometry
    "angle",
    "coordinates",
    "degrees",
    "distance",
    "radians",
    "reflect",
]
