"""
Read-only peer snapshot for collision checks.

Taken once at tick start so every creature collides against the same
positions, regardless of update order. The backing arrays are frozen
(writeable=False); the view holds no references to the creatures.
"""

import numpy as np
from typing import Dict, List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .creature import Creature


class PeerView:
    """
    Snapshot of creature ids, centres, and widths.

    Attributes:
        ids: Creature ids in world order
        positions: (N, 2) float64 centres
        widths: (N,) float64 body widths
    """

    def __init__(self, ids: List[str], positions: np.ndarray, widths: np.ndarray):
        self.ids = tuple(ids)
        self.positions = np.array(positions, dtype=np.float64).reshape(-1, 2)
        self.widths = np.array(widths, dtype=np.float64).reshape(-1)
        self.positions.flags.writeable = False
        self.widths.flags.writeable = False
        self._row_of_id: Dict[str, int] = {}
        for i, cid in enumerate(self.ids):
            self._row_of_id.setdefault(cid, i)

    @classmethod
    def from_creatures(cls, creatures: Sequence['Creature']) -> 'PeerView':
        """Copy positions and widths out of live creatures"""
        ids = [c.creature_id for c in creatures]
        if creatures:
            positions = np.array([c.position.as_array() for c in creatures], dtype=np.float64)
        else:
            positions = np.empty((0, 2), dtype=np.float64)
        widths = np.array([c.width for c in creatures], dtype=np.float64)
        return cls(ids, positions, widths)

    def row_of(self, creature_id: str):
        """First row index for a creature id, or None if absent"""
        return self._row_of_id.get(creature_id)

    def __len__(self) -> int:
        return len(self.ids)
