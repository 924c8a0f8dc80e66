"""
Tests for the pursuit solvers.
"""

import itertools
import random

import pytest

from src.pursuit.config import PursuitConfig
from src.pursuit.graph import Graph
from src.pursuit.solver import (BacktrackingPursuitSolver, GreedyPursuitSolver,
                                create_solver)
from src.pursuit.virus import replay_cuts

# X is two steps away through c; Y and Z share the node b.
# Cutting X first lets the virus reach b, next to two gateways.
FORK = [("a", "b"), ("b", "Y"), ("b", "Z"), ("a", "c"), ("c", "X")]

# The virus at a is next to C and one step from b, which touches B and D.
LOST = [("a", "C"), ("a", "b"), ("b", "B"), ("b", "D")]


class TestBacktrackingPursuitSolver:
    def test_single_gateway_edge(self):
        result = BacktrackingPursuitSolver().solve(Graph([("a", "B")]))

        assert result.success is True
        assert result.cuts == ["B-a"]

    def test_already_safe(self):
        graph = Graph([("a", "b"), ("c", "D")])
        result = BacktrackingPursuitSolver().solve(graph)

        assert result.success is True
        assert result.cuts == []

    def test_start_not_in_graph(self):
        result = BacktrackingPursuitSolver().solve(Graph([("b", "C")]))

        assert result.success is True
        assert result.cuts == []

    def test_cuts_follow_the_virus(self):
        graph = Graph([("a", "b"), ("a", "c"), ("b", "D"), ("c", "D")])
        result = BacktrackingPursuitSolver().solve(graph)

        assert result.cuts == ["D-b", "D-c"]

    def test_backtracks_out_of_lost_branch(self):
        solver = BacktrackingPursuitSolver()
        result = solver.solve(Graph(FORK))

        assert result.success is True
        assert result.cuts == ["Y-b", "X-c", "Z-b"]
        assert ("b", (("Y", "b"), ("Z", "b"))) in solver._lost

    def test_unwinnable(self):
        result = BacktrackingPursuitSolver().solve(Graph(LOST))

        assert result.success is False
        assert result.cuts == []

    def test_virus_starting_on_gateway(self):
        result = BacktrackingPursuitSolver().solve(Graph([("a", "B")]), start="B")

        assert result.success is False

    def test_graph_not_modified(self):
        graph = Graph(FORK)
        before = graph.edges()

        BacktrackingPursuitSolver().solve(graph)

        assert graph.edges() == before

    def test_custom_start_node(self):
        graph = Graph([("a", "b"), ("b", "C"), ("x", "D")])
        config = PursuitConfig(start_node="x")
        result = BacktrackingPursuitSolver(config).solve(graph)

        assert result.cuts == ["D-x"]


class TestGreedyPursuitSolver:
    def test_single_gateway_edge(self):
        result = GreedyPursuitSolver().solve(Graph([("a", "B")]))
        assert result.cuts == ["B-a"]

    def test_cuts_follow_the_virus(self):
        graph = Graph([("a", "b"), ("a", "c"), ("b", "D"), ("c", "D")])
        result = GreedyPursuitSolver().solve(graph)

        assert result.success is True
        assert result.cuts == ["D-b", "D-c"]

    def test_greedy_loses_where_backtracking_wins(self):
        result = GreedyPursuitSolver().solve(Graph(FORK))

        assert result.success is False
        assert result.cuts == []


class TestCreateSolver:
    def test_strategies(self):
        assert isinstance(create_solver(), BacktrackingPursuitSolver)
        greedy = create_solver(PursuitConfig(strategy="greedy"))
        assert isinstance(greedy, GreedyPursuitSolver)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            create_solver(PursuitConfig(strategy="random"))


class TestCutSequenceSafety:
    """Replaying any returned cut sequence keeps the virus off every gateway."""

    def random_graph(self, rng, node_count, edge_count):
        labels = ["a", "b", "c", "d", "e", "f", "g", "A", "B", "C"][:node_count]
        pairs = list(itertools.combinations(labels, 2))
        rng.shuffle(pairs)
        return Graph(pairs[:edge_count])

    @pytest.mark.parametrize("seed", range(20))
    def test_replay_is_safe(self, seed):
        rng = random.Random(seed)
        graph = self.random_graph(rng, rng.randint(4, 10), rng.randint(3, 12))

        for solver in (BacktrackingPursuitSolver(), GreedyPursuitSolver()):
            result = solver.solve(graph)
            if not result.success:
                continue
            replay = replay_cuts(graph, "a", result.cuts)
            assert replay.safe, (solver.name, result.cuts, replay.trail)

    @pytest.mark.parametrize("seed", range(20))
    def test_backtracking_wins_whenever_greedy_does(self, seed):
        rng = random.Random(seed)
        graph = self.random_graph(rng, rng.randint(4, 10), rng.randint(3, 12))

        if GreedyPursuitSolver().solve(graph).success:
            assert BacktrackingPursuitSolver().solve(graph).success
