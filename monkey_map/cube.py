# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Tuple

import yaml

from monkey_map.models import Direction, Position

Exit = Tuple[int, Direction]
Landing = Tuple[Position, Direction]


class CubeNet(ABC):
    """A flat drawing of the six cube faces and how their loose edges are glued."""

    @abstractmethod
    def face_of(self, position: Position) -> int:
        pass

    @abstractmethod
    def exit(self, face: int, facing: Direction, position: Position) -> Landing:
        """Where a walker on `face` at `position` lands when stepping off in `facing`."""
        pass


def _puzzle_face(position: Position) -> int:
    x, y = position
    if y <= 50:
        return 1 if x <= 100 else 2
    if y <= 100:
        return 3
    if y <= 150:
        return 4 if x <= 50 else 5
    return 6


# (face, facing) -> landing, for the 50x50 net of the puzzle input:
#     .12
#     .3.
#     45.
#     6..
PUZZLE_TABLE: Dict[Exit, Callable[[int, int], Landing]] = {
    (1, Direction.LEFT): lambda x, y: ((1, 151 - y), Direction.RIGHT),
    (1, Direction.UP): lambda x, y: ((1, 100 + x), Direction.RIGHT),
    (2, Direction.UP): lambda x, y: ((x - 100, 200), Direction.UP),
    (2, Direction.DOWN): lambda x, y: ((100, x - 50), Direction.LEFT),
    (2, Direction.RIGHT): lambda x, y: ((100, 151 - y), Direction.LEFT),
    (3, Direction.LEFT): lambda x, y: ((y - 50, 101), Direction.DOWN),
    (3, Direction.RIGHT): lambda x, y: ((y + 50, 50), Direction.UP),
    # Does not match the fold of face 4 onto face 1, see table_discrepancies
    (4, Direction.LEFT): lambda x, y: ((51, y - 100), Direction.RIGHT),
    (4, Direction.UP): lambda x, y: ((51, x + 50), Direction.RIGHT),
    (5, Direction.RIGHT): lambda x, y: ((150, 151 - y), Direction.LEFT),
    (5, Direction.DOWN): lambda x, y: ((50, x + 100), Direction.LEFT),
    (6, Direction.LEFT): lambda x, y: ((y - 100, 1), Direction.DOWN),
    (6, Direction.RIGHT): lambda x, y: ((y - 100, 150), Direction.UP),
    (6, Direction.DOWN): lambda x, y: ((x + 100, 1), Direction.DOWN),
}


class TableNet(CubeNet):
    def __init__(self, classify: Callable[[Position], int], table: Dict[Exit, Callable[[int, int], Landing]]):
        self.classify = classify
        self.table = table

    def face_of(self, position: Position) -> int:
        return self.classify(position)

    def exit(self, face: int, facing: Direction, position: Position) -> Landing:
        if (face, facing) not in self.table:
            raise ValueError(f"Face {face} has no exit {facing.name.lower()} at {position}")
        return self.table[(face, facing)](*position)


PUZZLE_NET = TableNet(_puzzle_face, PUZZLE_TABLE)


@dataclass
class FoldedNet(CubeNet):
    """
    Net described by where each face sits in the drawing and which edges meet
    once folded. Faces are placed in face-size units, 0-based: [column, row].
    Gluings map (face, edge walked off) to (face, edge walked onto).

    Edge cells are numbered clockwise around their face. Two glued edges run
    in opposite directions, so cell i of one edge meets cell size-1-i of the
    other.
    """

    face_size: int
    faces: Dict[int, Tuple[int, int]]
    gluings: Dict[Exit, Exit]

    def origin(self, face: int) -> Position:
        col, row = self.faces[face]
        return col * self.face_size + 1, row * self.face_size + 1

    def face_of(self, position: Position) -> int:
        x, y = position
        for face in self.faces:
            ox, oy = self.origin(face)
            if ox <= x < ox + self.face_size and oy <= y < oy + self.face_size:
                return face
        raise ValueError(f"{position} is not on any face")

    def edge_offset(self, face: int, edge: Direction, position: Position) -> int:
        ox, oy = self.origin(face)
        last = self.face_size - 1
        x, y = position
        offsets = {
            Direction.UP: x - ox,
            Direction.RIGHT: y - oy,
            Direction.DOWN: ox + last - x,
            Direction.LEFT: oy + last - y,
        }
        return offsets[edge]

    def edge_cell(self, face: int, edge: Direction, offset: int) -> Position:
        ox, oy = self.origin(face)
        last = self.face_size - 1
        cells = {
            Direction.UP: (ox + offset, oy),
            Direction.RIGHT: (ox + last, oy + offset),
            Direction.DOWN: (ox + last - offset, oy + last),
            Direction.LEFT: (ox, oy + last - offset),
        }
        return cells[edge]

    def edge_cells(self, face: int, edge: Direction) -> Iterator[Position]:
        for offset in range(self.face_size):
            yield self.edge_cell(face, edge, offset)

    def exit(self, face: int, facing: Direction, position: Position) -> Landing:
        if (face, facing) not in self.gluings:
            raise ValueError(f"Face {face} has no exit {facing.name.lower()} at {position}")
        target_face, target_edge = self.gluings[(face, facing)]
        offset = self.face_size - 1 - self.edge_offset(face, facing, position)
        return self.edge_cell(target_face, target_edge, offset), target_edge.opposite()


def _parse_exit(data: List[Any]) -> Exit:
    face, edge = data
    return int(face), Direction[str(edge).upper()]


def parse_net(net_dict: Dict[str, Any]) -> FoldedNet:
    face_size = int(net_dict["face_size"])
    faces = {int(face): (int(col), int(row)) for face, (col, row) in net_dict["faces"].items()}
    if len(faces) != 6:
        raise ValueError(f"A cube net needs 6 faces, got {len(faces)}")

    gluings: Dict[Exit, Exit] = {}
    for edge in net_dict["edges"]:
        source, target = _parse_exit(edge["from"]), _parse_exit(edge["to"])
        for key, value in ((source, target), (target, source)):
            if key in gluings and gluings[key] != value:
                raise ValueError(f"Edge {key[1].name.lower()} of face {key[0]} is glued twice")
            gluings[key] = value

    # 12 cube edges, 5 of them already joined in the drawing
    if len(gluings) != 14:
        raise ValueError(f"A cube net needs 14 exits, got {len(gluings)}")
    return FoldedNet(face_size=face_size, faces=faces, gluings=gluings)


def load_net(name: str, nets_file: str | Path | None = None) -> FoldedNet:
    """
    Load a named net from the YAML nets file.

    Args:
        name: Key of the net in the file, e.g. "example" or "puzzle".
        nets_file: Path to the YAML nets file. If None, uses config/cube_nets.yaml

    Returns:
        The FoldedNet described by the entry
    """
    if nets_file is None:
        # Default to config/cube_nets.yaml relative to the project root
        project_root = Path(__file__).parent.parent
        nets_file = project_root / "config" / "cube_nets.yaml"
    else:
        nets_file = Path(nets_file)

    with open(nets_file) as f:
        nets_data = yaml.safe_load(f)

    if name not in nets_data:
        raise KeyError(f"No cube net named '{name}' in {nets_file}")
    return parse_net(nets_data[name])


def table_discrepancies(table: CubeNet, folded: FoldedNet) -> List[Exit]:
    """Exits where `table` lands somewhere other than the folded geometry does."""
    differing = []
    for face, edge in sorted(folded.gluings, key=lambda e: (e[0], e[1].code)):
        for cell in folded.edge_cells(face, edge):
            if table.exit(face, edge, cell) != folded.exit(face, edge, cell):
                differing.append((face, edge))
                break
    return differing
