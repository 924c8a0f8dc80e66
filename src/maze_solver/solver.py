"""
A* solver for the minimum energy needed to sort every object into its room.
"""

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..maze.board import Maze, MazeBoard
from ..maze.state import BoardState
from ..util.logger import logger
from .config import SearchConfig
from .heuristic import estimate_remaining_energy

NO_SOLUTION = -1


@dataclass
class SearchResult:
    """Result of a maze search."""

    energy: int
    nodes_explored: int
    time_taken_ms: float
    success: bool
    path: List[BoardState] = field(default_factory=list)


class AStarSolver:
    """Best-first search over board states keyed by energy + estimate."""

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize the solver.

        Args:
            config: Search options; defaults to an unbounded A* search
        """
        self.config = config or SearchConfig()
        self.logger = logger.bind(component="maze_solver")

    def solve(self, board: MazeBoard) -> SearchResult:
        """Find the cheapest sequence of moves from the board's state to the goal.

        The visited-cost map is local to this call, so one solver instance
        can be reused across unrelated boards.

        Args:
            board: Maze positioned at the start state

        Returns:
            SearchResult with the minimum energy, or NO_SOLUTION if the goal is
            unreachable or the configured budget ran out
        """
        start_time = time.time()
        start = board.state
        goal = board.goal_state()

        best_costs: Dict[BoardState, int] = {start: 0}
        came_from: Dict[BoardState, BoardState] = {}
        tie_breaker = itertools.count()
        queue = [(self._estimate(board, start), next(tie_breaker), 0, start)]
        nodes_explored = 0

        self.logger.info(
            f"Searching {len(board.state.rooms)} rooms of depth {start.depth} "
            f"(initial estimate {queue[0][0]})"
        )

        while queue:
            if self._budget_exhausted(nodes_explored, start_time):
                self.logger.warning(
                    f"Search budget exhausted after {nodes_explored} expansions"
                )
                break

            _, _, cost, state = heapq.heappop(queue)
            if cost > best_costs.get(state, cost):
                continue

            nodes_explored += 1
            if nodes_explored % self.config.log_every == 0:
                self.logger.debug(
                    f"{nodes_explored} expanded, {len(queue)} queued, energy so far {cost}"
                )

            if state == goal:
                elapsed_ms = (time.time() - start_time) * 1000
                self.logger.info(
                    f"Solved with energy {cost} after {nodes_explored} expansions "
                    f"in {elapsed_ms:.1f}ms"
                )
                return SearchResult(
                    energy=cost,
                    nodes_explored=nodes_explored,
                    time_taken_ms=elapsed_ms,
                    success=True,
                    path=_reconstruct_path(came_from, state),
                )

            for next_state, move_cost in board.with_state(state).available_moves().items():
                new_cost = cost + move_cost
                if next_state in best_costs and new_cost >= best_costs[next_state]:
                    continue
                best_costs[next_state] = new_cost
                came_from[next_state] = state
                priority = new_cost + self._estimate(board, next_state)
                heapq.heappush(queue, (priority, next(tie_breaker), new_cost, next_state))

        elapsed_ms = (time.time() - start_time) * 1000
        self.logger.info(
            f"No solution after {nodes_explored} expansions in {elapsed_ms:.1f}ms"
        )
        return SearchResult(
            energy=NO_SOLUTION,
            nodes_explored=nodes_explored,
            time_taken_ms=elapsed_ms,
            success=False,
        )

    def _estimate(self, board: MazeBoard, state: BoardState) -> int:
        if not self.config.use_heuristic:
            return 0
        return estimate_remaining_energy(board, state)

    def _budget_exhausted(self, nodes_explored: int, start_time: float) -> bool:
        if (
            self.config.max_expansions is not None
            and nodes_explored >= self.config.max_expansions
        ):
            return True
        if self.config.timeout_ms is not None:
            elapsed_ms = (time.time() - start_time) * 1000
            return elapsed_ms > self.config.timeout_ms
        return False


def solve_energy(lines: Sequence[str], config: Optional[SearchConfig] = None) -> int:
    """Parse a maze diagram and return its minimum energy, or -1."""
    return AStarSolver(config).solve(Maze.from_lines(lines)).energy


def _reconstruct_path(
    came_from: Dict[BoardState, BoardState], state: BoardState
) -> List[BoardState]:
    path = [state]
    while state in came_from:
        state = came_from[state]
        path.append(state)
    path.reverse()
    return path
