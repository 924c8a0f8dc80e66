from src.pursuit.graph import Graph
from src.pursuit.virus import (find_virus_target, move_virus, next_virus_step,
                               replay_cuts)


class TestVirusMovement:
    def test_nearest_gateway(self):
        graph = Graph([("a", "b"), ("b", "A"), ("a", "B")])
        assert find_virus_target(graph, "a") == "B"

    def test_tie_broken_by_label(self):
        graph = Graph([("a", "b"), ("b", "D"), ("a", "c"), ("c", "C")])
        assert find_virus_target(graph, "a") == "C"

    def test_no_reachable_gateway(self):
        graph = Graph([("a", "b"), ("c", "D")])
        assert find_virus_target(graph, "a") is None
        assert move_virus(graph, "a") is None

    def test_step_prefers_first_sorted_neighbor(self):
        graph = Graph([("a", "c"), ("a", "b"), ("b", "D"), ("c", "D")])
        assert next_virus_step(graph, "a", "D") == "b"

    def test_step_only_moves_closer(self):
        graph = Graph([("a", "b"), ("a", "c"), ("c", "D")])
        assert next_virus_step(graph, "a", "D") == "c"

    def test_step_towards_unreachable_target(self):
        graph = Graph([("a", "b"), ("c", "D")])
        assert next_virus_step(graph, "a", "D") is None


class TestReplayCuts:
    def test_safe_sequence(self):
        graph = Graph([("a", "b"), ("a", "c"), ("b", "D"), ("c", "D")])
        replay = replay_cuts(graph, "a", ["D-b", "D-c"])

        assert replay.safe
        assert replay.trail == ["a", "c"]

    def test_virus_reaches_gateway(self):
        graph = Graph([("a", "b"), ("a", "c"), ("b", "D"), ("c", "D"), ("c", "E")])
        replay = replay_cuts(graph, "a", ["D-c", "E-c"])

        assert not replay.safe
        assert replay.trail == ["a", "b", "D"]

    def test_gateway_still_reachable_after_last_cut(self):
        graph = Graph([("a", "b"), ("a", "c"), ("b", "D"), ("c", "D")])
        replay = replay_cuts(graph, "a", ["D-c"])

        assert not replay.safe
        assert replay.trail == ["a", "b"]

    def test_incomplete_sequence_is_unsafe(self):
        graph = Graph([("a", "b"), ("b", "c"), ("c", "D"), ("a", "E"), ("a", "x")])
        replay = replay_cuts(graph, "a", ["E-a"])

        assert not replay.safe

    def test_cut_of_missing_edge(self):
        graph = Graph([("a", "B")])
        replay = replay_cuts(graph, "a", ["B-c"])

        assert not replay.safe
        assert replay.invalid_cut == "B-c"

    def test_original_graph_untouched(self):
        graph = Graph([("a", "B")])
        replay_cuts(graph, "a", ["B-a"])
        assert graph.has_edge("a", "B")
