"""
Inventory stacking.

An inventory is an ordered list of InventorySlot. Each slot holds 1..10
units of a single kind; the number of slots is capped by the config's
inventory capacity. A kind may occupy more than one slot once a stack is full.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..core.types import BlockType, MAX_STACK_SIZE
from .rules import is_food


@dataclass
class InventorySlot:
    """A stack of one item kind."""
    kind: BlockType
    count: int = 1

    def __post_init__(self):
        if not 1 <= self.count <= MAX_STACK_SIZE:
            raise ValueError(f"Slot count must be in 1..{MAX_STACK_SIZE}, got {self.count}")

    @property
    def space(self) -> int:
        return MAX_STACK_SIZE - self.count

    def copy(self) -> InventorySlot:
        return InventorySlot(self.kind, self.count)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "count": self.count}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> InventorySlot:
        return cls(kind=BlockType(data["kind"]), count=int(data["count"]))


def count_of(slots: List[InventorySlot], kind: BlockType) -> int:
    """Total units of `kind` across all slots."""
    return sum(slot.count for slot in slots if slot.kind == kind)


def total_items(slots: List[InventorySlot]) -> int:
    return sum(slot.count for slot in slots)


def has_room_for(slots: List[InventorySlot], kind: BlockType, capacity: int) -> bool:
    """True if one more unit of `kind` fits, in an open stack or a free slot."""
    if len(slots) < capacity:
        return True
    return any(slot.kind == kind and slot.count < MAX_STACK_SIZE for slot in slots)


def add_items(slots: List[InventorySlot], kind: BlockType, amount: int, capacity: int) -> int:
    """
    Insert up to `amount` units of `kind`, mutating `slots`.

    Existing same-kind stacks with room are filled first, then new slots are
    opened while the slot count is below `capacity`.

    Returns:
        Number of units actually added (the rest did not fit)
    """
    remaining = amount

    for slot in slots:
        if remaining <= 0:
            break
        if slot.kind == kind and slot.count < MAX_STACK_SIZE:
            added = min(slot.space, remaining)
            slot.count += added
            remaining -= added

    while remaining > 0 and len(slots) < capacity:
        added = min(MAX_STACK_SIZE, remaining)
        slots.append(InventorySlot(kind, added))
        remaining -= added

    return amount - remaining


def remove_one(slots: List[InventorySlot], kind: BlockType) -> bool:
    """
    Take one unit of `kind` from the first stack holding it.

    The slot is dropped when its count reaches zero.

    Returns:
        False if no unit of `kind` was held
    """
    for index, slot in enumerate(slots):
        if slot.kind == kind:
            slot.count -= 1
            if slot.count == 0:
                del slots[index]
            return True
    return False


def first_food(slots: List[InventorySlot]) -> Optional[BlockType]:
    """Kind of the first food stack, or None when no food is held."""
    for slot in slots:
        if is_food(slot.kind):
            return slot.kind
    return None


def transfer_all(source: List[InventorySlot], target: List[InventorySlot], capacity: int) -> int:
    """
    Move every unit from `source` into `target` (loot), food first.

    Units that do not fit in `target` are lost. `source` is emptied.

    Returns:
        Number of units lost
    """
    # sorted() is stable, so non-food keeps its original order
    ordered = sorted(source, key=lambda slot: 0 if is_food(slot.kind) else 1)
    lost = 0
    for slot in ordered:
        added = add_items(target, slot.kind, slot.count, capacity)
        lost += slot.count - added
    source.clear()
    return lost
