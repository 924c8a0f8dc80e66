"""
Admissible remaining-energy estimate for the maze search.

Blocking is ignored, so the estimate never exceeds the real remaining cost.
"""

from ..maze.board import MazeBoard
from ..maze.state import BoardState


def estimate_remaining_energy(board: MazeBoard, state: BoardState) -> int:
    return _corridor_estimate(board, state) + _room_estimate(board, state)


def _corridor_estimate(board: MazeBoard, state: BoardState) -> int:
    total = 0
    for corridor_idx, cell in enumerate(state.corridor):
        if not cell.is_object:
            continue
        entrance = board.entrance(cell.obj.target_room_index)
        steps = abs(corridor_idx - entrance) + 1
        total += steps * cell.obj.energy_per_step
    return total


def _room_estimate(board: MazeBoard, state: BoardState) -> int:
    total = 0
    for room_idx, room in enumerate(state.rooms):
        for depth, cell in enumerate(room):
            if not cell.is_object or state.is_settled(room_idx, depth):
                continue
            start = board.entrance(room_idx)
            target = board.entrance(cell.obj.target_room_index)
            # Climb out, walk to the target mouth, step in.
            steps = depth + 1 + abs(start - target) + 1
            total += steps * cell.obj.energy_per_step
    return total
