from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InvalidCellError(ValueError):
    """Raised when a cell type and its payload disagree."""


class MazeFormatError(ValueError):
    """Raised when a maze diagram cannot be parsed."""


class ObjectKind(Enum):
    A = 0
    B = 1
    C = 2
    D = 3

    @property
    def energy_per_step(self) -> int:
        return 10**self.value

    @property
    def target_room_index(self) -> int:
        return self.value

    @classmethod
    def from_room_index(cls, room_idx: int) -> "ObjectKind":
        return cls(room_idx)


class CellType(Enum):
    EMPTY = "."
    WALL = "#"
    OBJECT = "object"


@dataclass(frozen=True)
class MazeObject:
    kind: ObjectKind

    @property
    def energy_per_step(self) -> int:
        return self.kind.energy_per_step

    @property
    def target_room_index(self) -> int:
        return self.kind.target_room_index


@dataclass(frozen=True)
class Cell:
    """A corridor or room cell: empty, wall, or holding exactly one object."""

    type: CellType
    obj: Optional[MazeObject] = None

    def __post_init__(self):
        if self.type != CellType.OBJECT and self.obj is not None:
            raise InvalidCellError(
                f"{self.type.name} cell cannot carry an object ({self.obj.kind.name})"
            )
        if self.type == CellType.OBJECT and self.obj is None:
            raise InvalidCellError("OBJECT cell must carry an object")

    @classmethod
    def empty(cls) -> "Cell":
        return EMPTY

    @classmethod
    def wall(cls) -> "Cell":
        return WALL

    @classmethod
    def occupied(cls, kind: ObjectKind) -> "Cell":
        return _OCCUPIED[kind]

    @classmethod
    def from_char(cls, char: str) -> "Cell":
        if char == ".":
            return EMPTY
        if char == "#":
            return WALL
        if char in ObjectKind.__members__:
            return _OCCUPIED[ObjectKind[char]]
        raise MazeFormatError(
            f"Unexpected character: {char!r}. Should be 'A', 'B', 'C', 'D', '.' or '#'."
        )

    @property
    def is_empty(self) -> bool:
        return self.type == CellType.EMPTY

    @property
    def is_object(self) -> bool:
        return self.type == CellType.OBJECT

    @property
    def kind(self) -> Optional[ObjectKind]:
        return self.obj.kind if self.obj is not None else None

    def to_char(self) -> str:
        if self.obj is not None:
            return self.obj.kind.name
        return self.type.value

    def __str__(self) -> str:
        return self.to_char()


# Cells are values; share one instance per distinct value.
EMPTY = Cell(CellType.EMPTY)
WALL = Cell(CellType.WALL)
_OCCUPIED = {kind: Cell(CellType.OBJECT, MazeObject(kind)) for kind in ObjectKind}
