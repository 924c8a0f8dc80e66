from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import numpy as np

from .cell import EMPTY, Cell, ObjectKind
from .layout import MazeLayout

Room = Tuple[Cell, ...]


@dataclass(frozen=True, eq=False)
class BoardState:
    """Immutable snapshot of the corridor and every room.

    Rooms are ordered from the mouth (depth 0) to the back. Equality and
    hashing go through a flattened character key, so states can key the
    search's cost map.
    """

    corridor: Tuple[Cell, ...]
    rooms: Tuple[Room, ...]
    key: str = field(init=False, repr=False)

    def __post_init__(self):
        key = "".join(cell.to_char() for cell in self.corridor)
        for room in self.rooms:
            key += "|" + "".join(cell.to_char() for cell in room)
        object.__setattr__(self, "key", key)

    def __eq__(self, other):
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    @classmethod
    def goal(cls, layout: MazeLayout, depth: int) -> "BoardState":
        corridor = (EMPTY,) * layout.corridor_length
        rooms = tuple(
            (Cell.occupied(ObjectKind.from_room_index(room_idx)),) * depth
            for room_idx in range(layout.room_count)
        )
        return cls(corridor, rooms)

    @property
    def depth(self) -> int:
        return len(self.rooms[0]) if self.rooms else 0

    def object_counts(self) -> Dict[ObjectKind, int]:
        counts = Counter(cell.kind for cell in self.corridor if cell.is_object)
        for room in self.rooms:
            counts.update(cell.kind for cell in room if cell.is_object)
        return dict(counts)

    def top_of_room(self, room_idx: int) -> Optional[int]:
        """Depth of the object nearest the mouth, or None for an empty room."""
        for depth, cell in enumerate(self.rooms[room_idx]):
            if not cell.is_empty:
                return depth
        return None

    def deepest_empty(self, room_idx: int) -> Optional[int]:
        room = self.rooms[room_idx]
        for depth in range(len(room) - 1, -1, -1):
            if room[depth].is_empty:
                return depth
        return None

    def is_settled(self, room_idx: int, depth: int) -> bool:
        """True if the object at (room, depth) is home with only its own kind below."""
        room = self.rooms[room_idx]
        kind = room[depth].kind
        if kind is None or kind.target_room_index != room_idx:
            return False
        return all(cell.kind == kind for cell in room[depth + 1 :])

    def enter_room(self, corridor_idx: int, room_idx: int, depth: int) -> "BoardState":
        cell = self.corridor[corridor_idx]
        corridor = _replace(self.corridor, corridor_idx, EMPTY)
        room = _replace(self.rooms[room_idx], depth, cell)
        return BoardState(corridor, _replace(self.rooms, room_idx, room))

    def leave_room(self, room_idx: int, depth: int, corridor_idx: int) -> "BoardState":
        cell = self.rooms[room_idx][depth]
        room = _replace(self.rooms[room_idx], depth, EMPTY)
        corridor = _replace(self.corridor, corridor_idx, cell)
        return BoardState(corridor, _replace(self.rooms, room_idx, room))

    def to_grid(self, layout: MazeLayout) -> np.ndarray:
        width = layout.corridor_length + 2
        grid = np.full((self.depth + 3, width), " ", dtype="<U1")
        grid[0, :] = "#"
        grid[1, 0] = grid[1, -1] = "#"
        grid[1, 1:-1] = [cell.to_char() for cell in self.corridor]

        columns = [entrance + 1 for entrance in layout.entrances]
        left, right = min(columns) - 1, max(columns) + 1
        grid[2, :] = "#"
        grid[3:-1, left : right + 1] = "#"
        grid[-1, left : right + 1] = "#"
        for room_idx, column in enumerate(columns):
            grid[2 : 2 + self.depth, column] = [
                cell.to_char() for cell in self.rooms[room_idx]
            ]
        return grid

    def render(self, layout: Optional[MazeLayout] = None) -> str:
        grid = self.to_grid(layout or MazeLayout())
        return "\n".join("".join(row).rstrip() for row in grid)

    def __str__(self) -> str:
        return self.key


def _replace(values: tuple, index: int, value) -> tuple:
    return values[:index] + (value,) + values[index + 1 :]
