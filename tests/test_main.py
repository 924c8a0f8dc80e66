import io

import pytest

import main
from src.maze.cell import MazeFormatError
from src.pursuit.graph import GraphValidationError

SWAPPED = "#######\n#.....#\n##B#A##\n #####\n"


class TestReadLines:
    def test_stops_at_first_empty_line(self):
        stream = io.StringIO("a-b\nb-C\n\nc-D\n")
        assert main.read_lines(stream) == ["a-b", "b-C"]

    def test_reads_to_end_of_input(self):
        assert main.read_lines(io.StringIO("a-b\nb-C")) == ["a-b", "b-C"]


class TestMazeCommand:
    def test_prints_energy(self, capsys):
        assert main.main(["maze"], stdin=io.StringIO(SWAPPED + "\n")) == 0
        assert capsys.readouterr().out == "46\n"

    def test_dijkstra_flag(self, capsys):
        main.main(["maze", "--dijkstra"], stdin=io.StringIO(SWAPPED))
        assert capsys.readouterr().out == "46\n"

    def test_show_path(self, capsys):
        main.main(["maze", "--show-path"], stdin=io.StringIO(SWAPPED))
        out = capsys.readouterr().out.splitlines()

        assert out[:4] == SWAPPED.splitlines()
        assert out[-1] == "46"

    def test_unsolvable_prints_sentinel(self, capsys):
        lines = "#######\n#.....#\n##A#A##\n #A#B#\n #####\n"
        main.main(["maze"], stdin=io.StringIO(lines))
        assert capsys.readouterr().out == "-1\n"

    def test_bad_character_is_fatal(self):
        with pytest.raises(MazeFormatError):
            main.main(["maze"], stdin=io.StringIO("#######\n#..?..#\n##A#B##\n #####\n"))


class TestPursuitCommand:
    def test_prints_cuts(self, capsys):
        main.main(["pursuit"], stdin=io.StringIO("a-B\n\n"))
        assert capsys.readouterr().out == "B-a\n"

    def test_already_safe_prints_nothing(self, capsys):
        main.main(["pursuit"], stdin=io.StringIO("a-b\nc-D\n"))
        assert capsys.readouterr().out == ""

    def test_greedy_with_verify(self, capsys):
        edges = "a-b\na-c\nb-D\nc-D\n"
        main.main(["pursuit", "--strategy", "greedy", "--verify"], stdin=io.StringIO(edges))
        assert capsys.readouterr().out == "D-b\nD-c\n"

    def test_self_loop_is_fatal(self):
        with pytest.raises(GraphValidationError):
            main.main(["pursuit"], stdin=io.StringIO("a-a\n"))
