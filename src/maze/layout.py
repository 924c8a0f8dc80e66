from dataclasses import dataclass, field
from typing import Tuple

MAX_ROOMS = 4


@dataclass(frozen=True)
class MazeLayout:
    """Corridor geometry: which corridor cells sit in front of a room mouth.

    Entrances are corridor indices, one per room, ordered by room index.
    Objects may never stop on an entrance cell.
    """

    corridor_length: int = 11
    entrances: Tuple[int, ...] = (2, 4, 6, 8)
    stop_cells: Tuple[int, ...] = field(init=False)

    def __post_init__(self):
        if not 1 <= len(self.entrances) <= MAX_ROOMS:
            raise ValueError(
                f"Layout needs between 1 and {MAX_ROOMS} rooms, got {len(self.entrances)}"
            )
        for entrance in self.entrances:
            if not 0 <= entrance < self.corridor_length:
                raise ValueError(
                    f"Entrance {entrance} is outside a corridor of length {self.corridor_length}"
                )
        stops = tuple(
            i for i in range(self.corridor_length) if i not in self.entrances
        )
        object.__setattr__(self, "stop_cells", stops)

    @property
    def room_count(self) -> int:
        return len(self.entrances)

    def entrance(self, room_idx: int) -> int:
        return self.entrances[room_idx]
