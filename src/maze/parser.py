"""
Parser for maze diagrams.

A diagram is a corridor row framed by walls followed by one row per room
depth and a closing wall row:

    #############
    #...........#
    ###B#C#B#D###
      #A#D#C#A#
      #########

Room columns are taken from the first room row; everything else in the room
rows must be wall or padding.
"""

from typing import List, Sequence, Tuple

import numpy as np

from .cell import Cell, MazeFormatError
from .layout import MAX_ROOMS, MazeLayout
from .state import BoardState

ALLOWED_CHARS = set("ABCD.# ")
ROOM_CHARS = set("ABCD.")


def parse_maze(lines: Sequence[str]) -> Tuple[MazeLayout, BoardState]:
    """Parse diagram lines into a layout and the initial board state.

    Args:
        lines: Diagram rows, top wall first. Trailing blank lines are ignored.

    Returns:
        (layout, state) tuple

    Raises:
        MazeFormatError: On unknown characters or a malformed diagram
    """
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[-1].strip():
        rows.pop()
    if len(rows) < 4:
        raise MazeFormatError(
            f"Maze needs at least 4 lines (walls, corridor, one room row), got {len(rows)}"
        )

    for row_idx, row in enumerate(rows):
        for char in row:
            if char not in ALLOWED_CHARS:
                raise MazeFormatError(
                    f"Unexpected character: {char!r} on line {row_idx + 1}. "
                    "Should be 'A', 'B', 'C', 'D', '.' or '#'."
                )

    width = max(len(row) for row in rows)
    grid = np.array([list(row.ljust(width)) for row in rows], dtype="<U1")

    corridor_row = rows[1].strip()
    if len(corridor_row) < 3 or corridor_row[0] != "#" or corridor_row[-1] != "#":
        raise MazeFormatError(f"Corridor line must be framed by walls: {rows[1]!r}")
    corridor_offset = rows[1].index("#") + 1
    corridor_chars = corridor_row[1:-1]
    if "#" in corridor_chars:
        raise MazeFormatError("Corridor cannot contain walls")

    columns = _room_columns(grid[2])
    depth = len(rows) - 3
    entrances = tuple(int(column) - corridor_offset for column in columns)
    try:
        layout = MazeLayout(corridor_length=len(corridor_chars), entrances=entrances)
    except ValueError as e:
        raise MazeFormatError(str(e)) from e

    room_block = grid[2 : 2 + depth]
    for row_idx in range(depth):
        row_chars = set(room_block[row_idx, columns])
        if not row_chars <= ROOM_CHARS:
            raise MazeFormatError(
                f"Room cells on line {row_idx + 3} must be 'A'-'D' or '.'"
            )
        others = np.delete(room_block[row_idx], columns)
        if set(others) & ROOM_CHARS:
            raise MazeFormatError(
                f"Line {row_idx + 3} has room cells outside the room columns"
            )

    if set(rows[-1]) & ROOM_CHARS:
        raise MazeFormatError(f"Last line must be the closing wall: {rows[-1]!r}")

    corridor = tuple(Cell.from_char(char) for char in corridor_chars)
    rooms = tuple(
        tuple(Cell.from_char(char) for char in room_block[:, column])
        for column in columns
    )
    state = BoardState(corridor, rooms)

    for kind in state.object_counts():
        if kind.target_room_index >= layout.room_count:
            raise MazeFormatError(
                f"Object {kind.name} has no target room in a {layout.room_count}-room maze"
            )

    return layout, state


def _room_columns(row: np.ndarray) -> List[int]:
    columns = [int(i) for i in np.flatnonzero(np.isin(row, list(ROOM_CHARS)))]
    if not columns:
        raise MazeFormatError("First room line has no room cells")
    if len(columns) > MAX_ROOMS:
        raise MazeFormatError(f"At most {MAX_ROOMS} rooms are supported, got {len(columns)}")
    return columns
