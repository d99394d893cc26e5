"""Library — node-функции, сгруппированные в именованные библиотеки.

Node engine обращается к функциям по имени ("math/convertRange") через
FunctionLibrary.call или node_call payload.
"""

from .config import LibraryConfig
from .function_library import (
    FunctionLibrary,
    FunctionSpec,
    NodeCallResult,
    PORT_NUMBER,
    PORT_NUMBERS,
    PORT_POINT,
    PORT_TEXT,
    SequenceLimitExceeded,
    UnknownFunctionError,
    build_math_library,
)

__all__ = [
    "LibraryConfig",
    "FunctionLibrary",
    "FunctionSpec",
    "NodeCallResult",
    "PORT_NUMBER",
    "PORT_NUMBERS",
    "PORT_POINT",
    "PORT_TEXT",
    "SequenceLimitExceeded",
    "UnknownFunctionError",
    "build_math_library",
]
