from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Tuple

from .cell import Cell
from .layout import MazeLayout
from .parser import parse_maze
from .state import BoardState


class MazeBoard(ABC):
    """What a solver needs from a maze: its state, geometry and successors."""

    def __init__(self, state: BoardState, layout: MazeLayout):
        self.state = state
        self.layout = layout

    @abstractmethod
    def available_moves(self) -> Dict[BoardState, int]:
        """Map every state reachable in one move to the energy it costs."""
        pass

    @abstractmethod
    def with_state(self, state: BoardState) -> "MazeBoard":
        """Board with the same geometry positioned at another state."""
        pass

    def entrance(self, room_idx: int) -> int:
        return self.layout.entrance(room_idx)

    def goal_state(self) -> BoardState:
        return BoardState.goal(self.layout, self.state.depth)


class Maze(MazeBoard):
    """Corridor-and-rooms maze with the standard move rules."""

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Maze":
        layout, state = parse_maze(lines)
        return cls(state, layout)

    def with_state(self, state: BoardState) -> "Maze":
        return Maze(state, self.layout)

    def available_moves(self) -> Dict[BoardState, int]:
        moves: Dict[BoardState, int] = {}
        for next_state, cost in self._moves_into_rooms():
            _keep_cheapest(moves, next_state, cost)
        for next_state, cost in self._moves_out_of_rooms():
            _keep_cheapest(moves, next_state, cost)
        return moves

    def _moves_into_rooms(self) -> List[Tuple[BoardState, int]]:
        state = self.state
        moves = []
        for corridor_idx, cell in enumerate(state.corridor):
            if not cell.is_object:
                continue

            room_idx = cell.obj.target_room_index
            if not self._room_is_ready(room_idx, cell):
                continue

            entrance = self.entrance(room_idx)
            if not is_path_clear(state.corridor, corridor_idx, entrance):
                continue

            target_depth = state.deepest_empty(room_idx)
            if target_depth is None:
                continue

            steps = abs(corridor_idx - entrance) + target_depth + 1
            moves.append(
                (
                    state.enter_room(corridor_idx, room_idx, target_depth),
                    steps * cell.obj.energy_per_step,
                )
            )
        return moves

    def _moves_out_of_rooms(self) -> List[Tuple[BoardState, int]]:
        state = self.state
        moves = []
        for room_idx in range(len(state.rooms)):
            depth = state.top_of_room(room_idx)
            if depth is None:
                continue
            if state.is_settled(room_idx, depth):
                continue

            cell = state.rooms[room_idx][depth]
            entrance = self.entrance(room_idx)
            for stop in self.layout.stop_cells:
                if not is_path_clear(state.corridor, entrance, stop):
                    continue
                steps = depth + 1 + abs(stop - entrance)
                moves.append(
                    (
                        state.leave_room(room_idx, depth, stop),
                        steps * cell.obj.energy_per_step,
                    )
                )
        return moves

    def _room_is_ready(self, room_idx: int, cell: Cell) -> bool:
        """A room accepts objects only while it holds nothing but their kind."""
        return all(
            occupant.is_empty or occupant.kind == cell.kind
            for occupant in self.state.rooms[room_idx]
        )


def is_path_clear(corridor: Sequence[Cell], origin: int, target: int) -> bool:
    """Check every corridor cell between origin and target, origin excluded."""
    start, end = min(origin, target), max(origin, target)
    for i in range(start, end + 1):
        if i != origin and not corridor[i].is_empty:
            return False
    return True


def _keep_cheapest(moves: Dict[BoardState, int], state: BoardState, cost: int) -> None:
    if state not in moves or cost < moves[state]:
        moves[state] = cost
