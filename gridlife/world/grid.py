"""
Grid - Spatial storage for the simulation.

The Grid handles:
- Cell storage (cells[y][x])
- Coordinate validation
- Range queries (Manhattan distance)
- Copying and serialization

Coordinate System:
- X increases to the RIGHT
- Y increases DOWNWARD
- Origin (0, 0) is at TOP-LEFT
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from ..core.types import BlockType
from .geometry import Position, in_bounds, manhattan_distance


@dataclass
class Cell:
    """
    One grid square.

    Attributes:
        terrain: Base layer (always grass for now)
        block: Block sitting on top of the terrain, if any
        berries_remaining: Berries left on a bush; None when untracked
    """
    terrain: BlockType = BlockType.GRASS
    block: Optional[BlockType] = None
    berries_remaining: Optional[int] = None

    def copy(self) -> Cell:
        return Cell(self.terrain, self.block, self.berries_remaining)

    def clear(self) -> None:
        """Remove whatever block sits on this cell."""
        self.block = None
        self.berries_remaining = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "terrain": self.terrain.value,
            "block": self.block.value if self.block else None,
        }
        if self.berries_remaining is not None:
            data["berries_remaining"] = self.berries_remaining
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Cell:
        block = data.get("block")
        return cls(
            terrain=BlockType(data.get("terrain", BlockType.GRASS.value)),
            block=BlockType(block) if block else None,
            berries_remaining=data.get("berries_remaining"),
        )


class Grid:
    """
    A fixed-size, single-layer 2D map of cells.

    Attributes:
        width: Grid width (X dimension)
        height: Grid height (Y dimension)
        cells: Rows of cells, indexed cells[y][x]
    """

    def __init__(self, width: int, height: int, cells: Optional[List[List[Cell]]] = None):
        """
        Initialize a grid.

        Args:
            width: Grid width (must be positive)
            height: Grid height (must be positive)
            cells: Existing rows to adopt; a fresh all-grass grid when omitted

        Raises:
            ValueError: If dimensions are invalid or cells are not rectangular
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive: {width}x{height}")

        if cells is None:
            cells = [[Cell() for _ in range(width)] for _ in range(height)]
        elif len(cells) != height or any(len(row) != width for row in cells):
            raise ValueError(f"Cell rows do not match grid dimensions {width}x{height}")

        self.width = width
        self.height = height
        self.cells = cells

    def in_bounds(self, pos: Position) -> bool:
        """Check if a position is within grid boundaries."""
        return in_bounds(pos, self.width, self.height)

    def cell_at(self, pos: Position) -> Optional[Cell]:
        """
        Get the cell at a position.

        Returns:
            The cell, or None if the position is off the grid
        """
        if not self.in_bounds(pos):
            return None
        return self.cells[pos[1]][pos[0]]

    def all_positions(self) -> Iterator[Position]:
        """Iterate every coordinate in row-major order (y, then x)."""
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    def positions_in_range(self, center: Position, max_range: int) -> List[Position]:
        """
        Get all positions within a Manhattan range of a center point.

        Args:
            center: Center position
            max_range: Maximum Manhattan distance (inclusive)

        Returns:
            Positions in row-major order (including center)
        """
        cx, cy = center
        positions = []

        for y in range(max(0, cy - max_range), min(self.height, cy + max_range + 1)):
            for x in range(max(0, cx - max_range), min(self.width, cx + max_range + 1)):
                pos = Position(x, y)
                if manhattan_distance(center, pos) <= max_range:
                    positions.append(pos)

        return positions

    def count_blocks(self, block: BlockType) -> int:
        return sum(1 for row in self.cells for cell in row if cell.block == block)

    def copy(self) -> Grid:
        """Deep copy of the grid (cells are copied, not shared)."""
        return Grid(self.width, self.height, [[cell.copy() for cell in row] for row in self.cells])

    # ========================================================================
    # SERIALIZATION
    # ========================================================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "cells": [[cell.to_dict() for cell in row] for row in self.cells],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Grid:
        return cls(
            width=data["width"],
            height=data["height"],
            cells=[[Cell.from_dict(cell) for cell in row] for row in data["cells"]],
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height, self.cells) == (other.width, other.height, other.cells)

    def __str__(self) -> str:
        """String representation."""
        return f"Grid({self.width}x{self.height})"

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"Grid(width={self.width}, height={self.height})"
