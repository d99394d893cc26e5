"""
Point — двумерная координата для геометрических node-функций

Immutable Pydantic модель. Node engine передаёт точки как {"x": .., "y": ..}.
"""

import math

from pydantic import BaseModel, Field, field_validator


class Point(BaseModel):
    """
    Точка на плоскости.

    Immutable модель (frozen=True): геометрические функции всегда
    возвращают новый экземпляр.
    """

    x: float = Field(0.0, description="Координата X")
    y: float = Field(0.0, description="Координата Y")

    model_config = {"frozen": True}

    @field_validator("x", "y")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """NaN/Inf координаты запрещены."""
        if not math.isfinite(v):
            raise ValueError(f"coordinate must be finite, got {v}")
        return v
