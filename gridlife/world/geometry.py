"""
Geometry helpers - pure functions over grid coordinates.

Coordinate System:
- X increases to the RIGHT
- Y increases DOWNWARD (screen convention)
- Origin (0, 0) is at TOP-LEFT
"""

from __future__ import annotations

from typing import NamedTuple

from ..core.types import Direction


class Position(NamedTuple):
    """Integer grid coordinate. Hashable, so it can key dicts and sets."""
    x: int
    y: int

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> Position:
        return cls(int(data["x"]), int(data["y"]))


def target_position(pos: Position, direction: Direction) -> Position:
    """Position one step away from `pos` in `direction`."""
    dx, dy = direction.delta
    return Position(pos[0] + dx, pos[1] + dy)


def in_bounds(pos: Position, width: int, height: int) -> bool:
    """Check if a position lies inside a width x height grid."""
    x, y = pos
    return 0 <= x < width and 0 <= y < height


def manhattan_distance(a: Position, b: Position) -> int:
    """Calculate Manhattan (taxicab) distance between two positions."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def relative_direction(origin: Position, target: Position) -> str:
    """
    Coarse 8-point compass direction from `origin` to `target`.

    Returns "here" for the same cell, otherwise a name such as "North",
    "SouthWest" or "East". North is up (decreasing Y).
    """
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]

    if dx == 0 and dy == 0:
        return "here"

    direction = ""
    if dy < 0:
        direction += "North"
    elif dy > 0:
        direction += "South"

    if dx < 0:
        direction += "West"
    elif dx > 0:
        direction += "East"

    return direction
