"""Tests for geometry, block rules, grid and inventory stacking."""

import pytest

from gridlife import BlockType, Cell, Direction, Grid, InventorySlot, Position
from gridlife.core.types import MAX_STACK_SIZE
from gridlife.world.geometry import (
    in_bounds,
    manhattan_distance,
    relative_direction,
    target_position,
)
from gridlife.world.inventory import (
    add_items,
    count_of,
    first_food,
    has_room_for,
    remove_one,
    total_items,
    transfer_all,
)
from gridlife.world.rules import (
    can_build_on,
    gather_yield,
    is_food,
    is_gatherable,
    is_placeable,
    is_walkable,
)


# ============================================================================
# GEOMETRY
# ============================================================================

def test_directions_use_screen_coordinates():
    origin = Position(5, 5)
    assert target_position(origin, Direction.UP) == (5, 4)
    assert target_position(origin, Direction.DOWN) == (5, 6)
    assert target_position(origin, Direction.LEFT) == (4, 5)
    assert target_position(origin, Direction.RIGHT) == (6, 5)


def test_bounds_and_distance():
    assert in_bounds(Position(0, 0), 10, 10)
    assert in_bounds(Position(9, 9), 10, 10)
    assert not in_bounds(Position(10, 0), 10, 10)
    assert not in_bounds(Position(0, -1), 10, 10)
    assert manhattan_distance(Position(1, 1), Position(4, 5)) == 7


def test_relative_direction_compass_names():
    origin = Position(5, 5)
    assert relative_direction(origin, Position(5, 5)) == "here"
    assert relative_direction(origin, Position(5, 2)) == "North"
    assert relative_direction(origin, Position(7, 8)) == "SouthEast"
    assert relative_direction(origin, Position(1, 4)) == "NorthWest"


# ============================================================================
# BLOCK RULES
# ============================================================================

def test_walkability():
    assert is_walkable(Cell())
    assert is_walkable(Cell(block=BlockType.BERRY_BUSH))
    assert is_walkable(Cell(block=BlockType.BERRY))
    assert not is_walkable(Cell(block=BlockType.STONE))
    assert not is_walkable(Cell(block=BlockType.WOOD))


def test_gather_build_and_food_rules():
    assert is_gatherable(BlockType.STONE)
    assert is_gatherable(BlockType.BERRY_BUSH)
    assert not is_gatherable(BlockType.BERRY)
    assert not is_gatherable(None)

    assert gather_yield(BlockType.BERRY_BUSH) == BlockType.BERRY
    assert gather_yield(BlockType.WOOD) == BlockType.WOOD

    assert is_placeable(BlockType.BERRY)
    assert not is_placeable(BlockType.BERRY_BUSH)
    assert is_food(BlockType.BERRY)
    assert not is_food(BlockType.STONE)

    assert can_build_on(Cell())
    assert can_build_on(Cell(block=BlockType.BERRY))
    assert not can_build_on(Cell(block=BlockType.BERRY_BUSH))


# ============================================================================
# GRID
# ============================================================================

def test_grid_rejects_bad_dimensions():
    with pytest.raises(ValueError):
        Grid(0, 5)


def test_grid_cell_lookup_and_range():
    grid = Grid(5, 4)
    assert grid.cell_at(Position(4, 3)) is not None
    assert grid.cell_at(Position(5, 0)) is None

    in_range = grid.positions_in_range(Position(0, 0), 1)
    assert set(in_range) == {Position(0, 0), Position(1, 0), Position(0, 1)}


def test_grid_copy_is_independent():
    grid = Grid(3, 3)
    clone = grid.copy()
    clone.cells[1][1].block = BlockType.STONE
    assert grid.cells[1][1].block is None
    assert clone != grid


# ============================================================================
# INVENTORY
# ============================================================================

def test_slot_count_must_be_within_stack_limits():
    with pytest.raises(ValueError):
        InventorySlot(BlockType.STONE, 0)
    with pytest.raises(ValueError):
        InventorySlot(BlockType.STONE, MAX_STACK_SIZE + 1)


def test_add_items_fills_existing_stack_before_opening_slots():
    slots = [InventorySlot(BlockType.STONE, 8)]
    added = add_items(slots, BlockType.STONE, 5, capacity=5)
    assert added == 5
    assert [(s.kind, s.count) for s in slots] == [
        (BlockType.STONE, 10),
        (BlockType.STONE, 3),
    ]


def test_add_items_stops_at_capacity():
    slots = [InventorySlot(BlockType.WOOD, 10)]
    added = add_items(slots, BlockType.STONE, 25, capacity=2)
    assert added == 10
    assert len(slots) == 2
    assert count_of(slots, BlockType.STONE) == 10


def test_has_room_for_open_stack_when_slots_are_full():
    slots = [InventorySlot(BlockType.STONE, 3), InventorySlot(BlockType.WOOD, 10)]
    assert has_room_for(slots, BlockType.STONE, capacity=2)
    assert not has_room_for(slots, BlockType.WOOD, capacity=2)
    assert not has_room_for(slots, BlockType.BERRY, capacity=2)


def test_remove_one_drops_empty_slot():
    slots = [InventorySlot(BlockType.BERRY, 1), InventorySlot(BlockType.STONE, 2)]
    assert remove_one(slots, BlockType.BERRY)
    assert first_food(slots) is None
    assert not remove_one(slots, BlockType.BERRY)
    assert total_items(slots) == 2


def test_transfer_all_moves_food_first_and_reports_losses():
    source = [
        InventorySlot(BlockType.STONE, 4),
        InventorySlot(BlockType.BERRY, 2),
    ]
    target = [InventorySlot(BlockType.WOOD, 10)]

    lost = transfer_all(source, target, capacity=2)

    assert source == []
    assert count_of(target, BlockType.BERRY) == 2
    assert count_of(target, BlockType.STONE) == 0
    assert lost == 4
