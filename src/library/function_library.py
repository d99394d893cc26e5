"""Function Library — именованный набор node-функций для node engine.

Node engine видит библиотеку как namespace ("math") с плоским набором
функций, каждая с фиксированным списком позиционных портов. Библиотека:
- хранит реестр FunctionSpec (имя node → callable + имена портов)
- валидирует node_call payload (JSON Schema) и приводит аргументы
  ({"x", "y"} → Point, пропущенные хвостовые порты → default)
- материализует range с учётом LibraryConfig.materialize_limit

Вычисление графа, планирование и кэширование — задача node engine.
"""

import logging
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Callable, Dict, Final, Iterable, Iterator, Mapping, Optional

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import NodeCallValidator
from src.core.domain.point import Point
from src.core.math import aggregates, arithmetic, geometry
from src.core.math.numerical_safeguards import InvalidArgument, is_number
from src.core.math.range_mapping import convert_range
from src.core.math.sequences import (
    RangeSequence,
    make_numbers,
    random_numbers,
    sample,
)
from src.library.config import LibraryConfig

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownFunctionError(KeyError):
    """Функция с таким именем не зарегистрирована в библиотеке."""
    pass


class SequenceLimitExceeded(InvalidArgument):
    """Материализация range превысила LibraryConfig.materialize_limit."""
    pass


# =============================================================================
# PORT KINDS
# =============================================================================

PORT_NUMBER: Final[str] = "number"
PORT_NUMBERS: Final[str] = "numbers"
PORT_POINT: Final[str] = "point"
PORT_TEXT: Final[str] = "text"


def _is_numbers(value: Any) -> bool:
    # None — неподключённый порт; списки проверяются поэлементно,
    # ленивые последовательности (RangeSequence) не материализуются
    if value is None:
        return True
    if isinstance(value, (list, tuple)):
        return all(is_number(v) for v in value)
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


_PORT_CHECKS: Final[Dict[str, Callable[[Any], bool]]] = {
    PORT_NUMBER: is_number,
    PORT_NUMBERS: _is_numbers,
    PORT_POINT: lambda value: isinstance(value, Point),
    PORT_TEXT: lambda value: value is None or isinstance(value, str),
}


# =============================================================================
# TYPES
# =============================================================================


@dataclass(frozen=True)
class FunctionSpec:
    """Описание node-функции.

    params — имена портов в позиционном порядке; defaults — значения для
    хвостовых портов, которые node может не передавать; kinds — тип порта
    (PORT_*), по умолчанию PORT_NUMBER.
    """

    name: str
    function: Callable[..., Any]
    params: tuple[str, ...]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    returns_sequence: bool = False
    kinds: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        unknown = set(self.kinds) - set(self.params)
        if unknown:
            raise ValueError(f"{self.name}: kinds for unknown ports {sorted(unknown)}")
        bad = {k for k in self.kinds.values() if k not in _PORT_CHECKS}
        if bad:
            raise ValueError(f"{self.name}: unknown port kinds {sorted(bad)}")

    def kind_of(self, param: str) -> str:
        return self.kinds.get(param, PORT_NUMBER)

    @property
    def required_params(self) -> tuple[str, ...]:
        return tuple(p for p in self.params if p not in self.defaults)

    def bind(self, args: tuple) -> tuple:
        """Дополнение args default-значениями, проверка количества и типов портов.

        Raises:
            InvalidArgument: неверное число аргументов или тип порта
        """
        if len(args) > len(self.params) or len(args) < len(self.required_params):
            raise InvalidArgument(
                f"{self.name} expects {len(self.params)} arguments "
                f"({', '.join(self.params)}), got {len(args)}"
            )
        missing = self.params[len(args):]
        bound = tuple(args) + tuple(self.defaults[p] for p in missing)

        for param, value in zip(self.params, bound):
            kind = self.kind_of(param)
            if not _PORT_CHECKS[kind](value):
                raise InvalidArgument(
                    f"{self.name}: port {param!r} expects {kind}, "
                    f"got {type(value).__name__} {value!r}"
                )
        return bound


@dataclass(frozen=True)
class NodeCallResult:
    """Результат node_call."""

    function: str
    value: Any
    is_sequence: bool


# =============================================================================
# FUNCTION LIBRARY
# =============================================================================


class FunctionLibrary:
    """Реестр node-функций одного namespace."""

    def __init__(self, config: Optional[LibraryConfig] = None):
        self.config = config or LibraryConfig()
        self.namespace = self.config.namespace
        self._functions: Dict[str, FunctionSpec] = {}
        self._validator = NodeCallValidator()

    # -------------------------------------------------------------------------
    # Реестр
    # -------------------------------------------------------------------------

    def register(self, spec: FunctionSpec) -> None:
        """Регистрация функции.

        Raises:
            ValueError: функция с таким именем уже есть
        """
        if spec.name in self._functions:
            raise ValueError(f"Function {spec.name!r} already registered in {self.namespace!r}")
        self._functions[spec.name] = spec
        logger.debug("Registered %s/%s%s", self.namespace, spec.name, spec.params)

    def names(self) -> list[str]:
        """Имена функций в порядке регистрации."""
        return list(self._functions)

    def get(self, name: str) -> FunctionSpec:
        try:
            return self._functions[name]
        except KeyError:
            raise UnknownFunctionError(
                f"Function {name!r} not found in library {self.namespace!r}"
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __len__(self) -> int:
        return len(self._functions)

    def __iter__(self) -> Iterator[FunctionSpec]:
        return iter(self._functions.values())

    # -------------------------------------------------------------------------
    # Вызов
    # -------------------------------------------------------------------------

    def call(self, name: str, *args: Any) -> Any:
        """Вызов функции по имени с позиционными аргументами.

        Raises:
            UnknownFunctionError: неизвестное имя
            InvalidArgument: неверное число аргументов или невалидные значения
        """
        spec = self.get(name)
        bound = spec.bind(args)
        logger.debug("Calling %s/%s with %d arguments", self.namespace, name, len(bound))
        return spec.function(*bound)

    def call_node(self, payload: Mapping[str, Any]) -> NodeCallResult:
        """Вызов функции по node_call payload.

        Payload: {"library": "math", "function": "convertRange", "args": [...]}

        Raises:
            jsonschema.ValidationError: payload не соответствует node_call.json
            InvalidArgument: чужой namespace или невалидные аргументы
            UnknownFunctionError: неизвестное имя функции
        """
        try:
            self._validator.validate(payload)
        except SchemaValidationError:
            logger.warning(
                "Rejected node_call payload: %s",
                "; ".join(self._validator.error_messages(payload)),
            )
            raise

        library = payload.get("library", self.namespace)
        if library != self.namespace:
            raise InvalidArgument(
                f"Payload addressed to library {library!r}, this is {self.namespace!r}"
            )

        name = payload["function"]
        spec = self.get(name)
        args = tuple(self._coerce_argument(a) for a in payload["args"])
        value = self.call(name, *args)
        return NodeCallResult(function=name, value=value, is_sequence=spec.returns_sequence)

    @staticmethod
    def _coerce_argument(arg: Any) -> Any:
        if isinstance(arg, Mapping):
            try:
                return Point(**arg)
            except PydanticValidationError as e:
                raise InvalidArgument(f"Invalid point argument {dict(arg)!r}: {e}") from e
        if isinstance(arg, list):
            return [float(v) for v in arg]
        return arg

    # -------------------------------------------------------------------------
    # range с ограничением материализации
    # -------------------------------------------------------------------------

    def materialize_range(self, start: float, end: float, step: float) -> list[float]:
        """range с учётом materialize_limit.

        Raises:
            SequenceLimitExceeded: последовательность длиннее лимита
        """
        sequence = RangeSequence(start, end, step)
        limit = self.config.materialize_limit
        if limit is None:
            return list(sequence)

        values = list(islice(sequence, limit + 1))
        if len(values) > limit:
            logger.warning(
                "range(%r, %r, %r) exceeds materialize_limit=%d", start, end, step, limit
            )
            raise SequenceLimitExceeded(
                f"range({start}, {end}, {step}) produces more than {limit} values"
            )
        return values


# =============================================================================
# MATH LIBRARY
# =============================================================================


def build_math_library(config: Optional[LibraryConfig] = None) -> FunctionLibrary:
    """Библиотека "math" со всеми числовыми node-функциями."""
    library = FunctionLibrary(config)
    cfg = library.config
    numbers_port = {"numbers": PORT_NUMBERS}
    points_port = {"point1": PORT_POINT, "point2": PORT_POINT}

    specs = [
        FunctionSpec("number", arithmetic.number, ("n",)),
        FunctionSpec("negate", arithmetic.negate, ("n",)),
        FunctionSpec("abs", arithmetic.absolute, ("n",)),
        FunctionSpec("add", arithmetic.add, ("n1", "n2")),
        FunctionSpec("subtract", arithmetic.subtract, ("n1", "n2")),
        FunctionSpec("multiply", arithmetic.multiply, ("n1", "n2")),
        FunctionSpec("divide", arithmetic.divide, ("n1", "n2")),
        FunctionSpec("mod", arithmetic.mod, ("n1", "n2")),
        FunctionSpec("sqrt", arithmetic.sqrt, ("n",)),
        FunctionSpec("log", arithmetic.log, ("n",)),
        FunctionSpec("sum", aggregates.sum_numbers, ("numbers",), kinds=numbers_port),
        FunctionSpec("average", aggregates.average, ("numbers",), kinds=numbers_port),
        FunctionSpec(
            "compare", arithmetic.compare, ("comparator", "n1", "n2"),
            kinds={"comparator": PORT_TEXT},
        ),
        FunctionSpec("min", aggregates.minimum, ("numbers",), kinds=numbers_port),
        FunctionSpec("max", aggregates.maximum, ("numbers",), kinds=numbers_port),
        FunctionSpec("even", arithmetic.even, ("n",)),
        FunctionSpec("odd", arithmetic.odd, ("n",)),
        FunctionSpec(
            "makeNumbers", make_numbers, ("s", "separator"),
            defaults={"separator": None}, returns_sequence=True,
            kinds={"s": PORT_TEXT, "separator": PORT_TEXT},
        ),
        FunctionSpec(
            "randomNumbers", random_numbers, ("amount", "start", "end", "seed"),
            returns_sequence=True,
        ),
        FunctionSpec("toInteger", arithmetic.to_integer, ("n",)),
        FunctionSpec("sample", sample, ("amount", "start", "end"), returns_sequence=True),
        FunctionSpec(
            "range", library.materialize_range, ("start", "end", "step"),
            returns_sequence=True,
        ),
        FunctionSpec("radians", geometry.radians, ("degrees",)),
        FunctionSpec("degrees", geometry.degrees, ("radians",)),
        FunctionSpec("angle", geometry.angle, ("point1", "point2"), kinds=points_port),
        FunctionSpec("distance", geometry.distance, ("point1", "point2"), kinds=points_port),
        FunctionSpec(
            "coordinates", geometry.coordinates, ("point", "angle", "distance"),
            kinds={"point": PORT_POINT},
        ),
        FunctionSpec(
            "reflect", geometry.reflect, ("point1", "point2", "distance", "angle"),
            kinds=points_port,
        ),
        FunctionSpec("sin", arithmetic.sin, ("n",)),
        FunctionSpec("cos", arithmetic.cos, ("n",)),
        FunctionSpec(
            "convertRange", convert_range,
            ("value", "srcMin", "srcMax", "targetMin", "targetMax", "overflowPolicy"),
            defaults={"overflowPolicy": cfg.default_overflow_policy},
            kinds={"overflowPolicy": PORT_TEXT},
        ),
    ]

    for spec in specs:
        library.register(spec)

    return library
