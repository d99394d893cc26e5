"""
Geometry — углы, расстояния и точки

Все углы на стороне node-функций — в градусах (angle, coordinates,
reflect). radians/degrees — явные конвертеры.
"""

import math

from src.core.domain.point import Point


def radians(degrees: float) -> float:
    return math.radians(degrees)


def degrees(radians: float) -> float:
    return math.degrees(radians)


def angle(p1: Point, p2: Point) -> float:
    """
    Направление от p1 к p2.

    Returns:
        Угол в градусах, (-180, 180]

    Examples:
        >>> angle(Point(x=0, y=0), Point(x=0, y=10))
        90.0
    """
    return math.degrees(math.atan2(p2.y - p1.y, p2.x - p1.x))


def distance(p1: Point, p2: Point) -> float:
    """Евклидово расстояние между двумя точками."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def coordinates(p: Point, angle: float, distance: float) -> Point:
    """
    Точка на расстоянии distance от p в направлении angle (градусы).

    Examples:
        >>> coordinates(Point(x=0, y=0), 0.0, 10.0)
        Point(x=10.0, y=0.0)
    """
    theta = math.radians(angle)
    x = p.x + math.cos(theta) * distance
    y = p.y + math.sin(theta) * distance
    return Point(x=x, y=y)


def reflect(p1: Point, p2: Point, distance_factor: float, angle_offset: float) -> Point:
    """
    Отражение p2 через p1.

    Расстояние |p1 p2| умножается на distance_factor, к направлению
    p1 → p2 добавляется angle_offset (градусы). distance_factor=1,
    angle_offset=180 даёт зеркальную точку.

    Args:
        p1: Центр отражения
        p2: Отражаемая точка
        distance_factor: Множитель расстояния
        angle_offset: Добавка к углу, градусы

    Returns:
        Новая точка
    """
    d = distance_factor * distance(p1, p2)
    a = angle_offset + angle(p1, p2)
    return coordinates(p1, a, d)
