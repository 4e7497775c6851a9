# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from pathlib import Path

from monkey_map.io import render_trail
from monkey_map.parser import parse_notes
from monkey_map.solve import create_wrap
from monkey_map.walker import walk

NOTES_FILE = Path(__file__).parent / "example_notes.txt"


def main() -> None:
    board, path = parse_notes(NOTES_FILE.read_text(encoding="utf-8"))

    for part, policy in ((1, create_wrap(1)), (2, create_wrap(2, "example"))):
        result = walk(board, path, policy, trace=True)
        print(f"Part {part} trail:")
        print(render_trail(board, result))
        print(f"Password: {result.password}\n")


if __name__ == "__main__":
    main()
