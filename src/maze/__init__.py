"""
Corridor-and-rooms maze model.

Objects of kinds A-D sit in a corridor and in rooms; each kind belongs in
one room and pays a fixed energy per step.
"""

from .board import Maze, MazeBoard, is_path_clear
from .cell import Cell, CellType, InvalidCellError, MazeFormatError, MazeObject, ObjectKind
from .layout import MazeLayout
from .parser import parse_maze
from .state import BoardState

__all__ = [
    "BoardState",
    "Cell",
    "CellType",
    "InvalidCellError",
    "Maze",
    "MazeBoard",
    "MazeFormatError",
    "MazeLayout",
    "MazeObject",
    "ObjectKind",
    "is_path_clear",
    "parse_maze",
]
