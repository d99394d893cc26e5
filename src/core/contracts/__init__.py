"""
Contract Validation Module

Модуль для валидации JSON payload'ов вызовов node-функций.
"""

from .validators import (
    ContractValidator,
    NodeCallValidator,
    SchemaLoader,
    validate_node_call,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NodeCallValidator",
    # Functions
    "validate_node_call",
]
