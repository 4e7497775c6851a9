from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

# (x, y) = (column, row), both 1-based from the top-left of the drawn notes
Position = Tuple[int, int]


class Tile(str, Enum):
    OPEN = "."
    WALL = "#"


class Direction(str, Enum):
    RIGHT = ">"
    DOWN = "v"
    LEFT = "<"
    UP = "^"

    @property
    def delta(self) -> Tuple[int, int]:
        mapping = {
            Direction.RIGHT: (1, 0),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.UP: (0, -1),
        }
        return mapping[self]

    @property
    def code(self) -> int:
        """Facing value used by the password: 0 right, 1 down, 2 left, 3 up."""
        return list(Direction).index(self)

    @classmethod
    def from_delta(cls, delta: Tuple[int, int]) -> "Direction":
        for direction in cls:
            if direction.delta == delta:
                return direction
        raise ValueError(f"Not a canonical facing: {delta}")

    @classmethod
    def from_code(cls, code: int) -> "Direction":
        if not 0 <= code < 4:
            raise ValueError(f"Unknown facing code: {code}")
        return list(cls)[code]

    def turn_left(self) -> "Direction":
        dx, dy = self.delta
        return Direction.from_delta((dy, -dx))

    def turn_right(self) -> "Direction":
        dx, dy = self.delta
        return Direction.from_delta((-dy, dx))

    def opposite(self) -> "Direction":
        dx, dy = self.delta
        return Direction.from_delta((-dx, -dy))

    def step(self, position: Position) -> Position:
        dx, dy = self.delta
        return position[0] + dx, position[1] + dy


@dataclass(frozen=True)
class Move:
    steps: int

    def __post_init__(self) -> None:
        if self.steps <= 0:
            raise ValueError(f"Move must be positive, got {self.steps}")

    def __str__(self) -> str:
        return str(self.steps)


@dataclass(frozen=True)
class Turn:
    clockwise: bool

    def apply(self, facing: Direction) -> Direction:
        return facing.turn_right() if self.clockwise else facing.turn_left()

    def __str__(self) -> str:
        return "R" if self.clockwise else "L"


Instruction = Union[Move, Turn]


@dataclass
class Board:
    tiles: Dict[Position, Tile]

    def __post_init__(self) -> None:
        if not self.tiles:
            raise ValueError("Board has no tiles")

    def __contains__(self, position: Position) -> bool:
        return position in self.tiles

    def get(self, position: Position) -> Optional[Tile]:
        return self.tiles.get(position)

    def is_wall(self, position: Position) -> bool:
        return self.tiles[position] == Tile.WALL

    @property
    def bounds(self) -> Position:
        """Largest column and largest row holding a tile."""
        return max(x for x, _ in self.tiles), max(y for _, y in self.tiles)

    def start(self) -> Tuple[Position, Direction]:
        """
        Leftmost open tile of the top row, facing right.
        """
        top_row = [x for (x, y), tile in self.tiles.items() if y == 1 and tile == Tile.OPEN]
        if not top_row:
            raise ValueError("Row 1 has no open tile to start from")
        return (min(top_row), 1), Direction.RIGHT

    def to_string(self, marks: Optional[Dict[Position, str]] = None) -> str:
        marks = marks or {}
        max_x, max_y = self.bounds
        lines = []
        for y in range(1, max_y + 1):
            row = ""
            for x in range(1, max_x + 1):
                tile = self.tiles.get((x, y))
                if (x, y) in marks:
                    row += marks[(x, y)]
                elif tile is None:
                    row += " "
                else:
                    row += tile.value
            lines.append(row.rstrip())
        return "\n".join(lines) + "\n"
