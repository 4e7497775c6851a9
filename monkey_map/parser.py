# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import re
from typing import Iterable, List, Tuple

from monkey_map.models import Board, Instruction, Move, Position, Tile, Turn

# Regex patterns for path tokens
TOKEN_PATTERNS = [
    (r"[0-9]+", "NUMBER"),
    (r"L", "LEFT"),
    (r"R", "RIGHT"),
]


class Token:
    def __init__(self, type: str, value: str, column: int):
        self.type = type
        self.value = value
        self.column = column

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r})"


def tokenize(text: str) -> list[Token]:
    tokens = []
    pos = 0
    while pos < len(text):
        match = None
        for pattern, type_ in TOKEN_PATTERNS:
            match = re.compile(pattern).match(text, pos)
            if match:
                tokens.append(Token(type_, match.group(0), pos + 1))
                pos = match.end()
                break
        if not match:
            raise ValueError(f"Illegal character in path at column {pos + 1}: {text[pos]!r}")
    return tokens


def parse_path(text: str) -> List[Instruction]:
    """
    Parse a path such as ``10R5L5`` into moves and turns, in order of appearance.
    """
    text = text.strip()
    if not text:
        raise ValueError("Path is empty")

    instructions: List[Instruction] = []
    for token in tokenize(text):
        if token.type == "NUMBER":
            steps = int(token.value)
            if steps == 0:
                raise ValueError(f"Move at column {token.column} must be positive")
            instructions.append(Move(steps))
        else:
            instructions.append(Turn(clockwise=token.type == "RIGHT"))
    return instructions


def parse_board(rows: Iterable[str]) -> Board:
    tiles = {}
    for y, row in enumerate(rows, start=1):
        for x, char in enumerate(row, start=1):
            # Anything that is not a tile is padding outside the board
            if char in (Tile.OPEN.value, Tile.WALL.value):
                position: Position = (x, y)
                tiles[position] = Tile(char)
    return Board(tiles)


def parse_notes(text: str) -> Tuple[Board, List[Instruction]]:
    """
    Split the notes into the board drawing and the path on the last line.
    Blank lines are ignored.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("Notes need at least one board row and a path")
    *rows, path = lines
    return parse_board(rows), parse_path(path)
