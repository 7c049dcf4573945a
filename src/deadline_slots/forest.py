"""Layer 1: SlotForest, a disjoint-set forest over unit time slots.

Each set of slots carries one extra value at its root: the single slot of
the set that is still free. Union by rank and path compression keep every
operation near-constant amortised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Slot:
    """One unit time interval [index, index+1) and its forest links.

    available_slot is authoritative only while this slot is a root.
    """

    parent: int
    rank: int = 0
    available_slot: int = 0


@dataclass
class SlotForest:
    """Mutable disjoint-set state for one scheduling pass.

    slots[i].parent == i  → slot i is the root of its set
    slots[root].available_slot → the free slot of that set
    """

    slots: list[Slot] = field(default_factory=list)

    @classmethod
    def from_size(cls, size: int) -> SlotForest:
        """Build `size` singleton sets, each slot free and its own root.

        Raises ValueError if size < 1.
        """
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        return cls(slots=[Slot(parent=i, available_slot=i) for i in range(size)])

    def __len__(self) -> int:
        return len(self.slots)

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self.slots):
            raise IndexError(
                f"slot index {i} out of range for {len(self.slots)} slots"
            )

    def find(self, i: int) -> int:
        """Root of the set containing slot i, with path compression.

        Every slot on the path is re-pointed at the root and its
        available_slot refreshed from the root's. Two passes, no recursion.

        Raises IndexError if i is not in [0, len(self)).
        """
        self._check_index(i)
        slots = self.slots

        root = i
        while slots[root].parent != root:
            root = slots[root].parent

        available = slots[root].available_slot
        node = i
        while node != root:
            slot = slots[node]
            node = slot.parent
            slot.parent = root
            slot.available_slot = available

        return root

    def _merge(self, i: int, j: int) -> None:
        """Link two roots by rank. j's available slot always survives.

        Callers must pass roots. Slot i belongs to the set that was just
        consumed; j to the set that precedes it in time.
        """
        slots = self.slots
        if slots[i].rank > slots[j].rank:
            slots[j].parent = i
            slots[i].available_slot = slots[j].available_slot
        else:
            slots[i].parent = j
            if slots[i].rank == slots[j].rank:
                slots[j].rank = slots[i].rank + 1

    def unite(self, i: int, j: int) -> None:
        """Merge the set holding slot i into the set holding slot j."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return
        self._merge(root_i, root_j)
        logger.debug(
            "merged set of slot %d into set of slot %d (available slot %d)",
            i, j, self.slots[root_j].available_slot,
        )

    def available_slot(self, i: int) -> int:
        """The free slot of the set containing slot i."""
        return self.slots[self.find(i)].available_slot

    def representatives(self) -> tuple[int, ...]:
        """available_slot(i) for every slot, in slot order."""
        return tuple(self.available_slot(i) for i in range(len(self.slots)))

    def free_slots(self) -> list[int]:
        """Sorted free slots, one per set."""
        return sorted(
            {self.slots[self.find(i)].available_slot for i in range(len(self.slots))}
        )

    def set_count(self) -> int:
        """Number of disjoint sets currently in the forest."""
        return sum(1 for i, slot in enumerate(self.slots) if slot.parent == i)

    def copy(self) -> SlotForest:
        """Deep copy, for comparing states."""
        return SlotForest(
            slots=[Slot(s.parent, s.rank, s.available_slot) for s in self.slots]
        )
