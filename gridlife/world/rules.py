"""
Block rules - what is walkable, gatherable, buildable and edible.

This is the entire ruleset for blocks. The validator and the resolvers
only ever ask these functions, so both always agree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, FrozenSet, Optional

from ..core.types import BlockType

if TYPE_CHECKING:
    from .grid import Cell

BLOCKING: FrozenSet[BlockType] = frozenset({BlockType.STONE, BlockType.WOOD})
GATHERABLE: FrozenSet[BlockType] = frozenset(
    {BlockType.STONE, BlockType.WOOD, BlockType.BERRY_BUSH}
)
PLACEABLE: FrozenSet[BlockType] = frozenset({BlockType.STONE, BlockType.WOOD, BlockType.BERRY})
FOOD: FrozenSet[BlockType] = frozenset({BlockType.BERRY})


def is_walkable(cell: Cell) -> bool:
    """A cell is walkable unless its block is stone or wood."""
    return cell.block not in BLOCKING


def is_gatherable(block: Optional[BlockType]) -> bool:
    return block in GATHERABLE


def gather_yield(block: BlockType) -> BlockType:
    """Item received when gathering `block`. Bushes give berries, the rest give themselves."""
    if block == BlockType.BERRY_BUSH:
        return BlockType.BERRY
    return block


def block_persists_after_gather(block: BlockType) -> bool:
    """Berry bushes stay in place when gathered; stone and wood are removed."""
    return block == BlockType.BERRY_BUSH


def is_food(kind: Optional[BlockType]) -> bool:
    return kind in FOOD


def is_placeable(kind: Optional[BlockType]) -> bool:
    return kind in PLACEABLE


def can_build_on(cell: Cell) -> bool:
    """Building is allowed on empty grass or on a loose berry."""
    return cell.block is None or cell.block == BlockType.BERRY
